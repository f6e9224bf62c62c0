"""Cheap validation of a stream before committing to a full XML parse."""

from __future__ import annotations

import logging
import re
from typing import BinaryIO

from ..config import PRECHECK_WINDOW_BYTES
from ..errors import InvalidStreamError
from .elements import ROOT_SIGNATURE_LINE

logger = logging.getLogger(__name__)

_NOT_SAVED_BUG_DATA = "XML does not contain saved bug data"
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def _is_seekable(stream) -> bool:
    seekable = getattr(stream, "seekable", None)
    if seekable is None:
        return False
    try:
        return bool(seekable())
    except ValueError:
        # Closed stream; the parse reports it.
        return False


def _read_window(stream: BinaryIO, size: int) -> bytes:
    chunks: list[bytes] = []
    remaining = size
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def check_input_stream(stream: BinaryIO, window: int = PRECHECK_WINDOW_BYTES) -> None:
    """Confirm that ``stream`` starts like a saved bug collection.

    Only the first ``window`` bytes are inspected and the stream is rewound
    to where it was. Streams that cannot seek are not checked at all; wrap
    them in ``io.BytesIO`` first if validation is needed.

    Raises:
        InvalidStreamError: the stream ends inside the window
            (``reason_code="truncated"``) or the window has no
            ``<BugCollection>`` line (``reason_code="missing_signature"``).
    """
    if not _is_seekable(stream):
        logger.debug("Stream is not seekable; skipping saved bug data precheck.")
        return

    start = stream.tell()
    data = _read_window(stream, window)
    stream.seek(start)

    if len(data) < window:
        raise InvalidStreamError(
            "truncated",
            f"{_NOT_SAVED_BUG_DATA}: stream ended after {len(data)} of {window} bytes",
        )

    text = data.decode("utf-8", errors="replace")
    # Line breaks are CR, LF or CRLF only; form feeds and other separators
    # stay part of the line.
    for line in _LINE_BREAK.split(text):
        if line == ROOT_SIGNATURE_LINE:
            return

    raise InvalidStreamError(
        "missing_signature",
        f"{_NOT_SAVED_BUG_DATA}: no {ROOT_SIGNATURE_LINE} line in the first {window} bytes",
    )
