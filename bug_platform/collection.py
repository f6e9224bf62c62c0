"""
Bug collections: the abstract surface used by XML persistence, plus an
in-memory implementation.

Concrete collections only decide how bug instances, errors and application
classes are stored; reading and writing saved documents is shared by every
subclass through ``read_xml`` / ``write_xml``.
"""

from __future__ import annotations

import bisect
from abc import ABC, abstractmethod
from typing import Iterator, Optional

from .models import BugInstance
from .persistence.reader import read_bug_collection
from .persistence.writer import write_bug_collection
from .project import Project
from .translators import XMLTranslatorRegistry


class BugCollection(ABC):
    """Collection of bug instances and the error messages of an analysis run."""

    # ------------------------------------------------------------------
    # Bug instances
    # ------------------------------------------------------------------

    @abstractmethod
    def add(self, bug: BugInstance) -> bool:
        """Add a bug instance. Returns False if it was already present."""

    @abstractmethod
    def __iter__(self) -> Iterator[BugInstance]:
        """Iterate bug instances in collection order."""

    # ------------------------------------------------------------------
    # Errors and missing classes
    # ------------------------------------------------------------------

    @abstractmethod
    def add_error(self, message: str) -> None:
        ...

    @abstractmethod
    def add_missing_class(self, class_name: str) -> None:
        ...

    @abstractmethod
    def errors(self) -> Iterator[str]:
        ...

    @abstractmethod
    def missing_classes(self) -> Iterator[str]:
        ...

    # ------------------------------------------------------------------
    # Application classes
    # ------------------------------------------------------------------

    @abstractmethod
    def add_application_class(self, class_name: str, is_interface: bool) -> None:
        ...

    @abstractmethod
    def application_classes(self) -> Iterator[str]:
        ...

    @abstractmethod
    def is_interface(self, class_name: str) -> bool:
        ...

    # ------------------------------------------------------------------
    # XML persistence
    # ------------------------------------------------------------------

    def read_xml(self, source, project: Project,
                 registry: Optional[XMLTranslatorRegistry] = None) -> None:
        """Load a saved document from a path or binary stream into this collection."""
        read_bug_collection(self, source, project, registry=registry)

    def write_xml(self, sink, project: Project) -> None:
        """Save this collection and ``project`` to a path or binary stream."""
        write_bug_collection(self, sink, project)


def _sort_key(bug: BugInstance) -> tuple[str, str, int]:
    primary = bug.primary_class
    return (primary.class_name if primary else "", bug.type, bug.priority)


class SortedBugCollection(BugCollection):
    """In-memory collection keeping bug instances sorted by class, type and priority.

    Equal bug instances are stored once. Missing classes are kept sorted and
    de-duplicated; errors and application classes keep insertion order.
    """

    def __init__(self):
        self._bugs: list[BugInstance] = []
        self._errors: list[str] = []
        self._missing_classes: set[str] = set()
        self._app_classes: dict[str, bool] = {}

    def add(self, bug: BugInstance) -> bool:
        if bug in self._bugs:
            return False
        bisect.insort_right(self._bugs, bug, key=_sort_key)
        return True

    def __iter__(self) -> Iterator[BugInstance]:
        return iter(list(self._bugs))

    def __len__(self) -> int:
        return len(self._bugs)

    def add_error(self, message: str) -> None:
        self._errors.append(message)

    def add_missing_class(self, class_name: str) -> None:
        self._missing_classes.add(class_name)

    def errors(self) -> Iterator[str]:
        return iter(list(self._errors))

    def missing_classes(self) -> Iterator[str]:
        return iter(sorted(self._missing_classes))

    def add_application_class(self, class_name: str, is_interface: bool) -> None:
        self._app_classes[class_name] = is_interface

    def application_classes(self) -> Iterator[str]:
        return iter(list(self._app_classes))

    def is_interface(self, class_name: str) -> bool:
        return self._app_classes.get(class_name, False)
