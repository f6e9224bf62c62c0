"""
Bug instances and the annotations attached to them.

Each type knows its own XML element name and encodes itself with
``to_element``; decoding goes through ``from_element`` so the classes can be
registered as translators (see ``bug_platform.translators``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Iterator, Optional
from xml.etree.ElementTree import Element, SubElement

from . import translators
from .errors import DocumentError, UnknownElementError

UNKNOWN_LINE = -1

# Priorities used by the analysis engine (lower is more severe).
HIGH_PRIORITY = 1
NORMAL_PRIORITY = 2
LOW_PRIORITY = 3


def _required_attr(element: Element, name: str) -> str:
    value = element.get(name)
    if value is None:
        raise DocumentError(f"<{element.tag}> is missing required attribute '{name}'")
    return value


def _int_attr(element: Element, name: str, default: Optional[int] = None) -> int:
    raw = element.get(name)
    if raw is None:
        if default is None:
            raise DocumentError(f"<{element.tag}> is missing required attribute '{name}'")
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise DocumentError(f"<{element.tag}> attribute '{name}' is not an integer: {raw!r}") from exc


def _bool_attr(element: Element, name: str) -> bool:
    return (element.get(name) or "").lower() == "true"


class BugAnnotation:
    """Base class for the pieces of context attached to a bug instance."""

    ELEMENT_NAME: ClassVar[str] = ""

    def to_element(self, parent: Element) -> Element:
        raise NotImplementedError


@dataclass
class ClassAnnotation(BugAnnotation):
    ELEMENT_NAME: ClassVar[str] = "Class"

    class_name: str

    def to_element(self, parent: Element) -> Element:
        return SubElement(parent, self.ELEMENT_NAME, classname=self.class_name)

    @classmethod
    def from_element(cls, element: Element, registry=None) -> "ClassAnnotation":
        return cls(class_name=_required_attr(element, "classname"))


@dataclass
class SourceLineAnnotation(BugAnnotation):
    """A range of source lines in a class.

    ``source_file`` is None when the source file was not known at analysis
    time; line and bytecode offsets use ``UNKNOWN_LINE`` the same way.
    """

    ELEMENT_NAME: ClassVar[str] = "SourceLine"

    class_name: str
    start: int = UNKNOWN_LINE
    end: int = UNKNOWN_LINE
    start_bytecode: int = UNKNOWN_LINE
    end_bytecode: int = UNKNOWN_LINE
    source_file: Optional[str] = None

    def is_source_file_known(self) -> bool:
        return self.source_file is not None

    def to_element(self, parent: Element) -> Element:
        element = SubElement(parent, self.ELEMENT_NAME, classname=self.class_name)
        element.set("start", str(self.start))
        element.set("end", str(self.end))
        element.set("startBytecode", str(self.start_bytecode))
        element.set("endBytecode", str(self.end_bytecode))
        if self.source_file is not None:
            element.set("sourcefile", self.source_file)
        return element

    @classmethod
    def from_element(cls, element: Element, registry=None) -> "SourceLineAnnotation":
        return cls(
            class_name=_required_attr(element, "classname"),
            start=_int_attr(element, "start", UNKNOWN_LINE),
            end=_int_attr(element, "end", UNKNOWN_LINE),
            start_bytecode=_int_attr(element, "startBytecode", UNKNOWN_LINE),
            end_bytecode=_int_attr(element, "endBytecode", UNKNOWN_LINE),
            source_file=element.get("sourcefile"),
        )


@dataclass
class MethodAnnotation(BugAnnotation):
    """A method, optionally with the source lines where it is defined."""

    ELEMENT_NAME: ClassVar[str] = "Method"

    class_name: str
    method_name: str
    signature: str
    source_lines: Optional[SourceLineAnnotation] = None

    def to_element(self, parent: Element) -> Element:
        element = SubElement(
            parent,
            self.ELEMENT_NAME,
            classname=self.class_name,
            name=self.method_name,
            signature=self.signature,
        )
        if self.source_lines is not None:
            self.source_lines.to_element(element)
        return element

    @classmethod
    def from_element(cls, element: Element, registry=None) -> "MethodAnnotation":
        source_lines = None
        for child in element:
            if child.tag != SourceLineAnnotation.ELEMENT_NAME:
                raise UnknownElementError(child.tag)
            source_lines = SourceLineAnnotation.from_element(child)
        return cls(
            class_name=_required_attr(element, "classname"),
            method_name=_required_attr(element, "name"),
            signature=_required_attr(element, "signature"),
            source_lines=source_lines,
        )


@dataclass
class FieldAnnotation(BugAnnotation):
    ELEMENT_NAME: ClassVar[str] = "Field"

    class_name: str
    field_name: str
    signature: str
    is_static: bool = False

    def to_element(self, parent: Element) -> Element:
        return SubElement(
            parent,
            self.ELEMENT_NAME,
            classname=self.class_name,
            name=self.field_name,
            signature=self.signature,
            isStatic="true" if self.is_static else "false",
        )

    @classmethod
    def from_element(cls, element: Element, registry=None) -> "FieldAnnotation":
        return cls(
            class_name=_required_attr(element, "classname"),
            field_name=_required_attr(element, "name"),
            signature=_required_attr(element, "signature"),
            is_static=_bool_attr(element, "isStatic"),
        )


@dataclass
class IntAnnotation(BugAnnotation):
    ELEMENT_NAME: ClassVar[str] = "Int"

    value: int

    def to_element(self, parent: Element) -> Element:
        return SubElement(parent, self.ELEMENT_NAME, value=str(self.value))

    @classmethod
    def from_element(cls, element: Element, registry=None) -> "IntAnnotation":
        return cls(value=_int_attr(element, "value"))


@dataclass
class BugInstance:
    """A single reported bug and its annotations."""

    ELEMENT_NAME: ClassVar[str] = "BugInstance"

    type: str
    priority: int = NORMAL_PRIORITY
    annotations: list[BugAnnotation] = field(default_factory=list)

    def add_annotation(self, annotation: BugAnnotation) -> "BugInstance":
        self.annotations.append(annotation)
        return self

    def annotation_iterator(self) -> Iterator[BugAnnotation]:
        return iter(self.annotations)

    @property
    def primary_class(self) -> Optional[ClassAnnotation]:
        """First class annotation, or None."""
        for annotation in self.annotations:
            if isinstance(annotation, ClassAnnotation):
                return annotation
        return None

    @property
    def primary_method(self) -> Optional[MethodAnnotation]:
        """First method annotation, or None."""
        for annotation in self.annotations:
            if isinstance(annotation, MethodAnnotation):
                return annotation
        return None

    def to_element(self, parent: Element) -> Element:
        element = SubElement(parent, self.ELEMENT_NAME, type=self.type, priority=str(self.priority))
        for annotation in self.annotations:
            annotation.to_element(element)
        return element

    @classmethod
    def from_element(cls, element: Element, registry=None) -> "BugInstance":
        if registry is None:
            registry = translators.instance()

        bug = cls(
            type=_required_attr(element, "type"),
            priority=_int_attr(element, "priority", NORMAL_PRIORITY),
        )
        for child in element:
            translator = registry.get_translator(child.tag)
            if translator is None:
                raise UnknownElementError(child.tag)
            annotation = translator.from_element(child, registry)
            if not isinstance(annotation, BugAnnotation):
                raise DocumentError(f"<{child.tag}> is not an annotation element")
            bug.add_annotation(annotation)
        return bug


BUILTIN_TRANSLATORS = (
    BugInstance,
    ClassAnnotation,
    FieldAnnotation,
    MethodAnnotation,
    SourceLineAnnotation,
    IntAnnotation,
)
