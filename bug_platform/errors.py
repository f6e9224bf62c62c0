"""Exceptions raised while reading or writing saved bug collections."""

from __future__ import annotations


class BugCollectionError(Exception):
    """Base exception for bug collection persistence failures."""


class InvalidStreamError(BugCollectionError, OSError):
    """Raised when a stream does not look like a saved bug collection.

    ``reason_code`` is ``"truncated"`` when the stream ends inside the
    precheck window and ``"missing_signature"`` when the window holds no
    ``<BugCollection>`` line.
    """

    def __init__(self, reason_code: str, message: str):
        super().__init__(message)
        self.reason_code = reason_code


class DocumentError(BugCollectionError):
    """Raised for malformed documents and nodes that cannot be decoded."""


class UnknownElementError(DocumentError):
    """Raised when a node name matches no known element type."""

    def __init__(self, element_name: str):
        super().__init__(f"Unknown element type: {element_name}")
        self.element_name = element_name
