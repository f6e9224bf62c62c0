"""
Configuration constants for bug collection persistence.
"""

import logging
import os

# Leading bytes inspected before a full parse. Fixed by the file format.
PRECHECK_WINDOW_BYTES = 60

XML_ENCODING = "UTF-8"

_XML_INDENT_ENV = "BUG_PLATFORM_XML_INDENT"
_LOG_LEVEL_ENV = "BUG_PLATFORM_LOG_LEVEL"

_DEFAULT_XML_INDENT = 2
_DEFAULT_LOG_LEVEL = "WARNING"


def _to_int_env(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def xml_indent() -> str:
    """Indentation used for each nesting level of written documents."""
    return " " * _to_int_env(_XML_INDENT_ENV, _DEFAULT_XML_INDENT)


def log_level() -> int:
    """Resolve the CLI log level from the environment (name or number)."""
    raw = os.environ.get(_LOG_LEVEL_ENV, "").strip().upper()
    if not raw:
        return getattr(logging, _DEFAULT_LOG_LEVEL)
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else getattr(logging, _DEFAULT_LOG_LEVEL)
