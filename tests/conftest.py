"""
Shared fixtures for bug collection tests.
"""

import io

import pytest

from bug_platform import register_builtins
from bug_platform.collection import SortedBugCollection
from bug_platform.models import (
    HIGH_PRIORITY,
    NORMAL_PRIORITY,
    BugInstance,
    ClassAnnotation,
    FieldAnnotation,
    IntAnnotation,
    MethodAnnotation,
    SourceLineAnnotation,
)
from bug_platform.project import Project

XML_PROLOG = "<?xml version='1.0' encoding='UTF-8'?>\n"


@pytest.fixture(autouse=True)
def _builtin_translators():
    """Every test sees the built-in translators registered."""
    register_builtins()


@pytest.fixture
def sample_bug():
    """A bug instance carrying one annotation of each built-in kind."""
    return BugInstance(
        type="NP_NULL_ON_SOME_PATH",
        priority=HIGH_PRIORITY,
        annotations=[
            ClassAnnotation("com.example.Widget"),
            MethodAnnotation(
                "com.example.Widget",
                "render",
                "(Ljava/lang/String;)V",
                source_lines=SourceLineAnnotation(
                    "com.example.Widget", start=40, end=55,
                    start_bytecode=0, end_bytecode=120, source_file="Widget.java",
                ),
            ),
            FieldAnnotation("com.example.Widget", "label", "Ljava/lang/String;", is_static=False),
            SourceLineAnnotation(
                "com.example.Widget", start=42, end=42,
                start_bytecode=17, end_bytecode=17, source_file="Widget.java",
            ),
            IntAnnotation(3),
        ],
    )


@pytest.fixture
def make_bug():
    """Create a small bug instance for a class.

    Usage:
        bug = make_bug("com.example.A", bug_type="DLS_DEAD_LOCAL_STORE")
    """
    def _make_bug(class_name: str, bug_type: str = "DLS_DEAD_LOCAL_STORE",
                  priority: int = NORMAL_PRIORITY, source_file: str | None = None):
        return BugInstance(
            type=bug_type,
            priority=priority,
            annotations=[
                ClassAnnotation(class_name),
                SourceLineAnnotation(class_name, start=10, end=12, source_file=source_file),
            ],
        )
    return _make_bug


@pytest.fixture
def collection():
    return SortedBugCollection()


@pytest.fixture
def project():
    return Project()


@pytest.fixture
def xml_document():
    """Wrap body markup in a saved-collection document and return its bytes.

    The root tag sits on its own line right after the prolog, the way the
    writer lays it out.
    """
    def _make_document(body: str, prolog: bool = True) -> bytes:
        text = (XML_PROLOG if prolog else "") + "<BugCollection>\n" + body + "\n</BugCollection>\n"
        return text.encode("utf-8")
    return _make_document


@pytest.fixture
def xml_stream(xml_document):
    """Same as ``xml_document`` but returns a seekable binary stream."""
    def _make_stream(body: str, prolog: bool = True) -> io.BytesIO:
        return io.BytesIO(xml_document(body, prolog=prolog))
    return _make_stream
