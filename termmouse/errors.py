"""Decode failures raised by the mouse-report parsers.

Every failure is terminal for the whole buffer: no partial event list is ever
returned alongside an error.
"""

from __future__ import annotations


class MouseParseError(ValueError):
    """Base class for all mouse-report decode failures."""


class EmptyBufferError(MouseParseError):
    """The input buffer had zero length."""

    def __init__(self) -> None:
        super().__init__("empty buffer")


class NotAMouseEventError(MouseParseError):
    """Neither the SGR nor the X10 marker was found in the buffer."""

    def __init__(self) -> None:
        super().__init__("not a mouse event")


class MalformedX10EventError(MouseParseError):
    """An X10 segment did not consist of exactly three body bytes."""


class MalformedSGRMouseEventError(MouseParseError):
    """An SGR segment did not match ``button;x;y`` followed by ``M`` or ``m``."""
