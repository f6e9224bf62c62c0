"""Writing bug collections as XML documents."""

from __future__ import annotations

import logging
import os
import re
import xml.etree.ElementTree as ET
from typing import TYPE_CHECKING, BinaryIO, Union

from ..config import XML_ENCODING, xml_indent
from ..errors import DocumentError
from ..project import Project
from .elements import (
    ANALYSIS_ERROR_ELEMENT_NAME,
    APP_CLASS_ELEMENT_NAME,
    ERRORS_ELEMENT_NAME,
    INTERFACE_ATTRIBUTE,
    MISSING_CLASS_ELEMENT_NAME,
    PROJECT_ELEMENT_NAME,
    ROOT_ELEMENT_NAME,
)

if TYPE_CHECKING:
    from ..collection import BugCollection

logger = logging.getLogger(__name__)

Sink = Union[str, "os.PathLike[str]", BinaryIO]

# Characters outside the XML 1.0 Char production.
_ILLEGAL_XML_CHAR = re.compile(r"[^\x09\x0a\x0d\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def _check_value(element: ET.Element, value: str, where: str) -> None:
    match = _ILLEGAL_XML_CHAR.search(value)
    if match is not None:
        raise DocumentError(
            f"<{element.tag}> {where} contains {match.group()!r}, which XML documents cannot hold"
        )


def check_document(root: ET.Element) -> None:
    """Reject text or attribute values that a reader could not parse back.

    Raises:
        DocumentError: a value contains a character outside XML 1.0.
    """
    for element in root.iter():
        for name, value in element.attrib.items():
            _check_value(element, value, f"attribute {name!r}")
        if element.text:
            _check_value(element, element.text, "text")


def build_document(collection: "BugCollection", project: Project) -> ET.ElementTree:
    """Build the document tree: project, application classes, bug instances, errors.

    Raises:
        DocumentError: a value cannot be represented in XML.
    """
    root = ET.Element(ROOT_ELEMENT_NAME)

    project.write_element(ET.SubElement(root, PROJECT_ELEMENT_NAME))

    for class_name in collection.application_classes():
        child = ET.SubElement(root, APP_CLASS_ELEMENT_NAME)
        if collection.is_interface(class_name):
            child.set(INTERFACE_ATTRIBUTE, "true")
        child.text = class_name

    for bug in collection:
        bug.to_element(root)

    errors_element = ET.SubElement(root, ERRORS_ELEMENT_NAME)
    for message in collection.errors():
        ET.SubElement(errors_element, ANALYSIS_ERROR_ELEMENT_NAME).text = message
    for class_name in collection.missing_classes():
        ET.SubElement(errors_element, MISSING_CLASS_ELEMENT_NAME).text = class_name

    check_document(root)
    return ET.ElementTree(root)


def write_bug_collection(collection: "BugCollection", sink: Sink, project: Project) -> None:
    """Serialize ``collection`` and ``project`` to a path or binary stream.

    The document is built and checked before the sink is opened or written,
    so it is untouched when a value cannot be represented. Carriage returns
    are written as ``&#13;`` so parsers do not fold them into line feeds.
    """
    tree = build_document(collection, project)
    ET.indent(tree, space=xml_indent())
    root = tree.getroot()
    data = ET.tostring(root, encoding=XML_ENCODING, xml_declaration=True)
    # Indentation only adds line feeds, so every CR byte left is from a value.
    data = data.replace(b"\r", b"&#13;") + b"\n"

    if isinstance(sink, (str, os.PathLike)):
        with open(sink, "wb") as stream:
            stream.write(data)
    else:
        sink.write(data)

    logger.info("Wrote bug collection with %d top-level element(s).", len(root))
