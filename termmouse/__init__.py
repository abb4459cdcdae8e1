"""Public package surface for termmouse.

Decodes X10 and SGR terminal mouse reports into ``MouseEvent`` records.
Most implementation lives in submodules under ``termmouse``.
"""

from __future__ import annotations

from .codec import DecodedButton, decode_button
from .errors import (
    EmptyBufferError,
    MalformedSGRMouseEventError,
    MalformedX10EventError,
    MouseParseError,
    NotAMouseEventError,
)
from .events import (
    MouseAction,
    MouseButton,
    MouseEvent,
    MouseEventType,
    SGRMouseEvent,
    X10MouseEvent,
    legacy_event_type,
)
from .formatting import format_mouse_event, mouse_event_label
from .parser import parse_mouse_events
from .sgr import parse_sgr_mouse_events
from .x10 import parse_x10_mouse_events


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "parse_mouse_events",
    "parse_x10_mouse_events",
    "parse_sgr_mouse_events",
    "decode_button",
    "DecodedButton",
    "MouseEvent",
    "X10MouseEvent",
    "SGRMouseEvent",
    "MouseAction",
    "MouseButton",
    "MouseEventType",
    "legacy_event_type",
    "format_mouse_event",
    "mouse_event_label",
    "MouseParseError",
    "EmptyBufferError",
    "NotAMouseEventError",
    "MalformedX10EventError",
    "MalformedSGRMouseEventError",
    "main",
]
