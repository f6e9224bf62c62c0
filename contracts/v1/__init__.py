"""v1 contract schemas for exported bug collections."""

__version__ = "1.0.0"

from .schemas import (
    AnnotationContract,
    AppClassContract,
    BugCollectionContract,
    BugInstanceContract,
    ClassAnnotationContract,
    FieldAnnotationContract,
    IntAnnotationContract,
    MethodAnnotationContract,
    ProjectContract,
    SourceLineContract,
)

__all__ = [
    "__version__",
    "AnnotationContract",
    "AppClassContract",
    "BugCollectionContract",
    "BugInstanceContract",
    "ClassAnnotationContract",
    "FieldAnnotationContract",
    "IntAnnotationContract",
    "MethodAnnotationContract",
    "ProjectContract",
    "SourceLineContract",
]
