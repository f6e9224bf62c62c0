"""Saved bug collections: models, translator registry and XML persistence."""

__version__ = "1.0.0"

from .collection import BugCollection, SortedBugCollection
from .errors import BugCollectionError, DocumentError, InvalidStreamError, UnknownElementError
from .models import (
    BugAnnotation,
    BugInstance,
    ClassAnnotation,
    FieldAnnotation,
    IntAnnotation,
    MethodAnnotation,
    SourceLineAnnotation,
)
from .project import Project
from .translators import XMLTranslatorRegistry, register_builtins

register_builtins()

__all__ = [
    "__version__",
    "BugAnnotation",
    "BugCollection",
    "BugCollectionError",
    "BugInstance",
    "ClassAnnotation",
    "DocumentError",
    "FieldAnnotation",
    "IntAnnotation",
    "InvalidStreamError",
    "MethodAnnotation",
    "Project",
    "SortedBugCollection",
    "SourceLineAnnotation",
    "UnknownElementError",
    "XMLTranslatorRegistry",
    "register_builtins",
]
