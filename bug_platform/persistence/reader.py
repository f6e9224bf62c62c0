"""Reading saved bug collection documents."""

from __future__ import annotations

import logging
import os
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, BinaryIO, Optional, Union

from .. import translators
from ..errors import DocumentError, UnknownElementError
from ..models import BugInstance
from ..project import Project
from ..translators import XMLTranslatorRegistry
from .elements import (
    ANALYSIS_ERROR_ELEMENT_NAME,
    APP_CLASS_ELEMENT_NAME,
    ERRORS_ELEMENT_NAME,
    INTERFACE_ATTRIBUTE,
    MISSING_CLASS_ELEMENT_NAME,
    PROJECT_ELEMENT_NAME,
    SRCMAP_CLASSNAME_ATTRIBUTE,
    SRCMAP_ELEMENT_NAME,
    SRCMAP_SRCFILE_ATTRIBUTE,
)
from .precheck import check_input_stream
from .source_map import reconcile_source_files

if TYPE_CHECKING:
    from ..collection import BugCollection

logger = logging.getLogger(__name__)

Source = Union[str, "os.PathLike[str]", BinaryIO]


@dataclass
class _DecodedDocument:
    """Everything decoded from one document, held until the whole document is valid."""

    source_map: dict[str, str] = field(default_factory=dict)
    project_elements: list[ET.Element] = field(default_factory=list)
    bugs: list[BugInstance] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    missing_classes: list[str] = field(default_factory=list)
    app_classes: list[tuple[str, bool]] = field(default_factory=list)


def _read_errors(element: ET.Element, decoded: _DecodedDocument) -> None:
    for child in element:
        if child.tag == ANALYSIS_ERROR_ELEMENT_NAME:
            decoded.errors.append(child.text or "")
        elif child.tag == MISSING_CLASS_ELEMENT_NAME:
            decoded.missing_classes.append(child.text or "")
        else:
            raise UnknownElementError(child.tag)


def _read_source_map_entry(element: ET.Element, decoded: _DecodedDocument) -> None:
    class_name = element.get(SRCMAP_CLASSNAME_ATTRIBUTE)
    source_file = element.get(SRCMAP_SRCFILE_ATTRIBUTE)
    if class_name is None or source_file is None:
        logger.warning("Ignoring <%s> without classname/srcfile attributes.", SRCMAP_ELEMENT_NAME)
        return
    # Last entry for a class wins.
    decoded.source_map[class_name] = source_file


def _decode_bug_instance(element: ET.Element, registry: XMLTranslatorRegistry) -> BugInstance:
    translator = registry.get_translator(element.tag)
    if translator is None:
        raise UnknownElementError(element.tag)
    bug = translator.from_element(element, registry)
    if not isinstance(bug, BugInstance):
        raise DocumentError(f"<{element.tag}> cannot appear at the top level of a bug collection")
    return bug


def decode_document(root: ET.Element, registry: XMLTranslatorRegistry) -> _DecodedDocument:
    """Dispatch every child of ``root`` by element name."""
    decoded = _DecodedDocument()
    for element in root:
        name = element.tag
        if name == SRCMAP_ELEMENT_NAME:
            _read_source_map_entry(element, decoded)
        elif name == PROJECT_ELEMENT_NAME:
            Project.validate_element(element)
            decoded.project_elements.append(element)
        elif name == ERRORS_ELEMENT_NAME:
            _read_errors(element, decoded)
        elif name == APP_CLASS_ELEMENT_NAME:
            is_interface = (element.get(INTERFACE_ATTRIBUTE) or "").lower() == "true"
            decoded.app_classes.append((element.text or "", is_interface))
        else:
            decoded.bugs.append(_decode_bug_instance(element, registry))
    return decoded


def _parse(stream: BinaryIO) -> ET.Element:
    try:
        return ET.parse(stream).getroot()
    except ET.ParseError as exc:
        raise DocumentError(f"Malformed bug collection document: {exc}") from exc


def read_bug_collection(collection: "BugCollection", source: Source, project: Project,
                        registry: Optional[XMLTranslatorRegistry] = None) -> None:
    """Read a saved document from ``source`` into ``collection`` and ``project``.

    ``source`` is a filesystem path or a binary stream. Nothing is added to
    the collection or project unless the whole document decodes; on success
    the project is marked unmodified.

    Raises:
        InvalidStreamError: the precheck rejected the stream.
        DocumentError: the document is malformed or has an unknown element.
        OSError: the source could not be opened or read.
    """
    if isinstance(source, (str, os.PathLike)):
        with open(source, "rb") as stream:
            read_bug_collection(collection, stream, project, registry=registry)
        return

    if registry is None:
        registry = translators.instance()

    check_input_stream(source)
    root = _parse(source)
    decoded = decode_document(root, registry)

    # Staged bugs are reconciled first so findings that only differ by a
    # missing source file collapse into one on add.
    updated = reconcile_source_files(decoded.bugs, decoded.source_map)

    for element in decoded.project_elements:
        project.read_element(element)
    for bug in decoded.bugs:
        collection.add(bug)
    for message in decoded.errors:
        collection.add_error(message)
    for class_name in decoded.missing_classes:
        collection.add_missing_class(class_name)
    for class_name, is_interface in decoded.app_classes:
        collection.add_application_class(class_name, is_interface)

    # Findings that were already in the collection.
    updated += reconcile_source_files(collection, decoded.source_map)
    if updated:
        logger.info("Filled in %d source file(s) from legacy SrcMap entries.", updated)

    project.set_modified(False)
    logger.info(
        "Read %d bug instance(s), %d error(s), %d missing class(es), %d application class(es).",
        len(decoded.bugs), len(decoded.errors), len(decoded.missing_classes), len(decoded.app_classes),
    )
