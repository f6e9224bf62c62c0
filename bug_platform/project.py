"""Analysis project metadata stored in the ``Project`` element."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional
from xml.etree.ElementTree import Element, SubElement

from .errors import UnknownElementError

JAR_ELEMENT_NAME = "Jar"
AUX_CLASSPATH_ELEMENT_NAME = "AuxClasspathEntry"
SRC_DIR_ELEMENT_NAME = "SrcDir"

_ENTRY_ELEMENT_NAMES = (JAR_ELEMENT_NAME, AUX_CLASSPATH_ELEMENT_NAME, SRC_DIR_ELEMENT_NAME)


@dataclass
class Project:
    """Files that were analyzed and where their sources live.

    ``modified`` tracks unsaved changes: every mutator sets it, and a
    successful ``BugCollection.read_xml`` clears it.
    """

    filename: Optional[str] = None
    jars: list[str] = field(default_factory=list)
    aux_classpath: list[str] = field(default_factory=list)
    src_dirs: list[str] = field(default_factory=list)
    modified: bool = False

    def add_file(self, path: str) -> bool:
        return self._add_unique(self.jars, path)

    def add_aux_classpath_entry(self, path: str) -> bool:
        return self._add_unique(self.aux_classpath, path)

    def add_source_dir(self, path: str) -> bool:
        return self._add_unique(self.src_dirs, path)

    def set_modified(self, modified: bool) -> None:
        self.modified = modified

    def _add_unique(self, entries: list[str], path: str) -> bool:
        if path in entries:
            return False
        entries.append(path)
        self.modified = True
        return True

    # ------------------------------------------------------------------
    # XML
    # ------------------------------------------------------------------

    @staticmethod
    def validate_element(element: Element) -> None:
        """Raise ``UnknownElementError`` for the first child a project cannot hold."""
        for child in element:
            if child.tag not in _ENTRY_ELEMENT_NAMES:
                raise UnknownElementError(child.tag)

    def read_element(self, element: Element) -> None:
        """Load project contents from a ``Project`` element.

        The element is fully validated before anything is changed.
        """
        self.validate_element(element)
        targets = {
            JAR_ELEMENT_NAME: self.jars,
            AUX_CLASSPATH_ELEMENT_NAME: self.aux_classpath,
            SRC_DIR_ELEMENT_NAME: self.src_dirs,
        }

        filename = element.get("filename")
        if filename is not None:
            self.filename = filename
        for child in element:
            entries = targets[child.tag]
            path = child.text or ""
            if path not in entries:
                entries.append(path)

    def write_element(self, element: Element) -> None:
        """Populate a ``Project`` element with this project's contents."""
        if self.filename is not None:
            element.set("filename", self.filename)
        for tag, entries in (
            (JAR_ELEMENT_NAME, self.jars),
            (AUX_CLASSPATH_ELEMENT_NAME, self.aux_classpath),
            (SRC_DIR_ELEMENT_NAME, self.src_dirs),
        ):
            for path in entries:
                SubElement(element, tag).text = path
