"""Element-name → decoder registry for bug instances and annotations.

Every finding and annotation variant that can appear in a saved document
registers a translator here under its element name. The reader looks the
translator up for any top-level node it does not handle itself, and
``BugInstance`` uses the same registry for its annotation children.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol
from xml.etree.ElementTree import Element

logger = logging.getLogger(__name__)


class XMLTranslator(Protocol):
    """Decoder for a single element type."""

    def from_element(self, element: Element, registry: "XMLTranslatorRegistry") -> Any:
        ...


class XMLTranslatorRegistry:
    """Mapping of element names to translators."""

    def __init__(self):
        self._translators: dict[str, XMLTranslator] = {}

    def register(self, element_name: str, translator: XMLTranslator, *, replace: bool = False) -> None:
        """Register ``translator`` for ``element_name``.

        Registering the same translator twice is a no-op. Registering a
        different translator for a taken name requires ``replace=True``.
        """
        existing = self._translators.get(element_name)
        if existing is translator:
            return
        if existing is not None and not replace:
            raise ValueError(f"A translator is already registered for element '{element_name}'")
        self._translators[element_name] = translator
        logger.debug("Registered XML translator for <%s>", element_name)

    def get_translator(self, element_name: str) -> Optional[XMLTranslator]:
        """Return the translator for ``element_name``, or None."""
        return self._translators.get(element_name)

    def element_names(self) -> list[str]:
        return sorted(self._translators)

    def __contains__(self, element_name: object) -> bool:
        return element_name in self._translators

    def __len__(self) -> int:
        return len(self._translators)


_registry = XMLTranslatorRegistry()


def instance() -> XMLTranslatorRegistry:
    """Return the process-wide registry."""
    return _registry


def register_builtins(registry: Optional[XMLTranslatorRegistry] = None) -> XMLTranslatorRegistry:
    """Register the built-in bug instance and annotation translators.

    Safe to call any number of times.
    """
    from .models import BUILTIN_TRANSLATORS

    target = registry if registry is not None else _registry
    for translator in BUILTIN_TRANSLATORS:
        target.register(translator.ELEMENT_NAME, translator)
    return target
