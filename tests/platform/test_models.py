"""
Tests for bug_platform.models.
"""

import xml.etree.ElementTree as ET

import pytest

from bug_platform.errors import DocumentError, UnknownElementError
from bug_platform.models import (
    NORMAL_PRIORITY,
    UNKNOWN_LINE,
    BugInstance,
    ClassAnnotation,
    FieldAnnotation,
    IntAnnotation,
    MethodAnnotation,
    SourceLineAnnotation,
)
from bug_platform.translators import XMLTranslatorRegistry


def _encode(obj) -> ET.Element:
    parent = ET.Element("Parent")
    return obj.to_element(parent)


class TestSourceLineAnnotation:
    """Tests for SourceLineAnnotation."""

    def test_unknown_source_file_by_default(self):
        lines = SourceLineAnnotation("com.example.A")

        assert lines.is_source_file_known() is False
        assert lines.start == UNKNOWN_LINE
        assert lines.end == UNKNOWN_LINE

    def test_sourcefile_attribute_omitted_when_unknown(self):
        element = _encode(SourceLineAnnotation("com.example.A", start=3, end=4))

        assert element.tag == "SourceLine"
        assert element.get("classname") == "com.example.A"
        assert element.get("start") == "3"
        assert element.get("end") == "4"
        assert "sourcefile" not in element.attrib

    def test_from_element_reads_all_attributes(self):
        element = ET.fromstring(
            '<SourceLine classname="A" start="1" end="2" startBytecode="5" '
            'endBytecode="9" sourcefile="A.java"/>'
        )

        lines = SourceLineAnnotation.from_element(element)

        assert lines == SourceLineAnnotation(
            "A", start=1, end=2, start_bytecode=5, end_bytecode=9, source_file="A.java",
        )

    def test_missing_line_attributes_default_to_unknown(self):
        lines = SourceLineAnnotation.from_element(ET.fromstring('<SourceLine classname="A"/>'))

        assert lines.start == UNKNOWN_LINE
        assert lines.end_bytecode == UNKNOWN_LINE
        assert lines.source_file is None

    def test_non_integer_line_is_a_document_error(self):
        with pytest.raises(DocumentError, match="start"):
            SourceLineAnnotation.from_element(ET.fromstring('<SourceLine classname="A" start="ten"/>'))

    def test_missing_classname_is_a_document_error(self):
        with pytest.raises(DocumentError, match="classname"):
            SourceLineAnnotation.from_element(ET.fromstring('<SourceLine start="1"/>'))


class TestMethodAnnotation:
    """Tests for MethodAnnotation."""

    def test_nested_source_lines_round_trip(self):
        method = MethodAnnotation(
            "A", "run", "()V", source_lines=SourceLineAnnotation("A", start=7, end=9),
        )

        element = _encode(method)

        assert [child.tag for child in element] == ["SourceLine"]
        assert MethodAnnotation.from_element(element) == method

    def test_without_source_lines(self):
        element = _encode(MethodAnnotation("A", "run", "()V"))

        assert len(element) == 0
        assert MethodAnnotation.from_element(element).source_lines is None

    def test_unknown_child_is_rejected(self):
        element = ET.fromstring('<Method classname="A" name="run" signature="()V"><Int value="1"/></Method>')

        with pytest.raises(UnknownElementError) as exc_info:
            MethodAnnotation.from_element(element)

        assert exc_info.value.element_name == "Int"


class TestFieldAndIntAnnotations:
    """Tests for FieldAnnotation and IntAnnotation."""

    def test_static_flag(self):
        element = _encode(FieldAnnotation("A", "COUNT", "I", is_static=True))

        assert element.get("isStatic") == "true"
        assert FieldAnnotation.from_element(element).is_static is True

    def test_static_flag_defaults_to_false(self):
        field = FieldAnnotation.from_element(ET.fromstring('<Field classname="A" name="x" signature="I"/>'))

        assert field.is_static is False

    def test_int_value_required(self):
        with pytest.raises(DocumentError):
            IntAnnotation.from_element(ET.fromstring("<Int/>"))

    def test_class_annotation(self):
        element = _encode(ClassAnnotation("com.example.A"))

        assert element.attrib == {"classname": "com.example.A"}
        assert ClassAnnotation.from_element(element) == ClassAnnotation("com.example.A")


class TestBugInstance:
    """Tests for BugInstance."""

    def test_to_element_writes_type_priority_and_annotations(self, sample_bug):
        element = _encode(sample_bug)

        assert element.tag == "BugInstance"
        assert element.get("type") == "NP_NULL_ON_SOME_PATH"
        assert element.get("priority") == "1"
        assert [child.tag for child in element] == ["Class", "Method", "Field", "SourceLine", "Int"]

    def test_from_element_round_trip(self, sample_bug):
        assert BugInstance.from_element(_encode(sample_bug)) == sample_bug

    def test_priority_defaults_to_normal(self):
        bug = BugInstance.from_element(ET.fromstring('<BugInstance type="X"/>'))

        assert bug.priority == NORMAL_PRIORITY
        assert bug.annotations == []

    def test_type_is_required(self):
        with pytest.raises(DocumentError, match="type"):
            BugInstance.from_element(ET.fromstring('<BugInstance priority="1"/>'))

    def test_unknown_annotation_element(self):
        element = ET.fromstring('<BugInstance type="X"><Local name="i"/></BugInstance>')

        with pytest.raises(UnknownElementError, match="Unknown element type: Local"):
            BugInstance.from_element(element)

    def test_nested_bug_instance_is_not_an_annotation(self):
        element = ET.fromstring('<BugInstance type="X"><BugInstance type="Y"/></BugInstance>')

        with pytest.raises(DocumentError, match="not an annotation"):
            BugInstance.from_element(element)

    def test_annotations_decoded_through_given_registry(self):
        registry = XMLTranslatorRegistry()
        registry.register("Class", ClassAnnotation)
        element = ET.fromstring('<BugInstance type="X"><Class classname="A"/><Int value="2"/></BugInstance>')

        with pytest.raises(UnknownElementError):
            BugInstance.from_element(element, registry)

    def test_primary_class_and_method(self, sample_bug):
        assert sample_bug.primary_class == ClassAnnotation("com.example.Widget")
        assert sample_bug.primary_method.method_name == "render"

    def test_primary_class_absent(self):
        bug = BugInstance(type="X", annotations=[IntAnnotation(1)])

        assert bug.primary_class is None
        assert bug.primary_method is None

    def test_add_annotation_preserves_order(self):
        bug = BugInstance(type="X")
        bug.add_annotation(IntAnnotation(1)).add_annotation(ClassAnnotation("A"))

        assert list(bug.annotation_iterator()) == [IntAnnotation(1), ClassAnnotation("A")]
