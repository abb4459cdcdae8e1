"""SGR extended mouse report decoding.

SGR reports look like ``ESC [ < Cb ; Cx ; Cy M`` (or a trailing ``m`` for a
release), with decimal fields and no upper bound on the coordinates.

See https://invisible-island.net/xterm/ctlseqs/ctlseqs.html#h3-Extended-coordinates
"""

from __future__ import annotations

import dataclasses
import logging
import re

from .codec import decode_button
from .errors import MalformedSGRMouseEventError
from .events import MouseAction, SGRMouseEvent

SGR_MARKER = "\x1b[<"
SGR_SEGMENT_RE = re.compile(r"([0-9]+);([0-9]+);([0-9]+)([Mm])")

log = logging.getLogger(__name__)


def parse_sgr_mouse_events(buf: str) -> list[SGRMouseEvent]:
    """Decode every ``ESC [ <`` report in ``buf``, in order.

    A lowercase ``m`` terminator turns the event into a release unless it is
    a wheel event or already a motion event; some terminals (Windows
    Terminal) report plain motion with ``m``.
    """
    if SGR_MARKER not in buf:
        raise MalformedSGRMouseEventError(f"no SGR marker in {buf!r}")

    events: list[SGRMouseEvent] = []
    for segment in buf.split(SGR_MARKER):
        if not segment:
            continue
        match = SGR_SEGMENT_RE.fullmatch(segment)
        if match is None:
            log.debug("rejecting SGR segment %r", segment)
            raise MalformedSGRMouseEventError(f"malformed SGR mouse report: {segment!r}")

        code, x, y, terminator = match.groups()
        decoded = decode_button(int(code), is_sgr=True)
        if terminator == "m" and decoded.action != MouseAction.MOTION and not decoded.is_wheel:
            decoded = dataclasses.replace(decoded, action=MouseAction.RELEASE)

        events.append(
            SGRMouseEvent(
                x=int(x) - 1,
                y=int(y) - 1,
                shift=decoded.shift,
                alt=decoded.alt,
                ctrl=decoded.ctrl,
                action=decoded.action,
                button=decoded.button,
            )
        )
    return events
