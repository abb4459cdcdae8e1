"""X10 mouse report decoding.

X10 reports look like ``ESC [ M Cb Cx Cy`` where each of ``Cb``, ``Cx`` and
``Cy`` is one byte carrying its value plus 32. Coordinates therefore top out
at 223 (255 - 32); larger positions arrive truncated to a byte and decode to
negative numbers. That wraparound is reproduced, not clamped.

See http://www.xfree86.org/current/ctlseqs.html#Mouse%20Tracking
"""

from __future__ import annotations

import logging

from .codec import X10_BYTE_OFFSET, decode_button
from .errors import MalformedX10EventError
from .events import X10MouseEvent

X10_MARKER = b"\x1b[M"
X10_BODY_LENGTH = 3

log = logging.getLogger(__name__)


def _decode_coordinate(value: int) -> int:
    # Reports are 1-based; events are 0-based.
    return value - X10_BYTE_OFFSET - 1


def parse_x10_mouse_events(buf: bytes) -> list[X10MouseEvent]:
    """Decode every ``ESC [ M`` report in ``buf``, in order.

    Reports are concatenated without separators. Any stray bytes before the
    first marker, or any body that is not exactly three bytes, rejects the
    whole buffer with ``MalformedX10EventError``.
    """
    data = bytes(buf)
    if X10_MARKER not in data:
        raise MalformedX10EventError(f"no X10 marker in {data!r}")

    leading, *bodies = data.split(X10_MARKER)
    if leading:
        raise MalformedX10EventError(f"unexpected bytes before X10 marker: {leading!r}")

    events: list[X10MouseEvent] = []
    for body in bodies:
        if len(body) != X10_BODY_LENGTH:
            log.debug("rejecting X10 body %r", body)
            raise MalformedX10EventError(
                f"X10 report body must be {X10_BODY_LENGTH} bytes, got {len(body)}: {body!r}"
            )
        decoded = decode_button(body[0], is_sgr=False)
        events.append(
            X10MouseEvent(
                x=_decode_coordinate(body[1]),
                y=_decode_coordinate(body[2]),
                shift=decoded.shift,
                alt=decoded.alt,
                ctrl=decoded.ctrl,
                action=decoded.action,
                button=decoded.button,
            )
        )
    return events
