"""Protocol detection for raw mouse-report buffers."""

from __future__ import annotations

import logging
from typing import Union

from .errors import EmptyBufferError, MalformedX10EventError, NotAMouseEventError
from .events import MouseEvent
from .sgr import SGR_MARKER, parse_sgr_mouse_events
from .x10 import X10_MARKER, parse_x10_mouse_events

MouseBuffer = Union[bytes, bytearray, memoryview, str]

# Single-byte text <-> bytes mapping that preserves every byte value.
_BYTE_TEXT_ENCODING = "latin-1"

log = logging.getLogger(__name__)


def _as_bytes(buf: MouseBuffer) -> bytes:
    if isinstance(buf, str):
        try:
            return buf.encode(_BYTE_TEXT_ENCODING)
        except UnicodeEncodeError as exc:
            raise MalformedX10EventError(f"X10 buffer is not single-byte text: {buf!r}") from exc
    return bytes(buf)


def parse_mouse_events(buf: MouseBuffer) -> list[MouseEvent]:
    """Decode one or more concatenated mouse reports from ``buf``.

    SGR is checked first: an SGR buffer can contain the shorter X10 marker
    by accident, never the other way round. Raises ``EmptyBufferError`` for
    empty input and ``NotAMouseEventError`` when neither marker is present.
    """
    if len(buf) == 0:
        raise EmptyBufferError()

    text = buf if isinstance(buf, str) else bytes(buf).decode(_BYTE_TEXT_ENCODING)
    if SGR_MARKER in text:
        log.debug("decoding %d-character buffer as SGR", len(text))
        return parse_sgr_mouse_events(text)

    if X10_MARKER.decode(_BYTE_TEXT_ENCODING) in text:
        data = _as_bytes(buf)
        log.debug("decoding %d-byte buffer as X10", len(data))
        return parse_x10_mouse_events(data)

    raise NotAMouseEventError()
