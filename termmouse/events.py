"""Mouse event records and the enumerations they are built from.

``MouseEvent`` holds the protocol-independent fields. The two subclasses
``X10MouseEvent`` and ``SGRMouseEvent`` tag which wire protocol produced the
event, because the two are rendered differently (see ``formatting``).

The deprecated ``type`` view is computed from ``(action, button)`` on every
access and cannot be assigned.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar


class MouseAction(IntEnum):
    """What happened to the button: pressed, released, or moved while reporting."""

    PRESS = 0
    RELEASE = 1
    MOTION = 2


class MouseButton(IntEnum):
    """X11-style button numbering.

    Left/middle/right are buttons 1-3, wheel up/down/left/right are 4-7,
    backward/forward are 8-9, and 10-11 have no conventional name.
    """

    NONE = 0
    LEFT = 1
    MIDDLE = 2
    RIGHT = 3
    WHEEL_UP = 4
    WHEEL_DOWN = 5
    WHEEL_LEFT = 6
    WHEEL_RIGHT = 7
    BACKWARD = 8
    FORWARD = 9
    BUTTON_10 = 10
    BUTTON_11 = 11
    UNKNOWN = 12


class MouseEventType(IntEnum):
    """Flattened legacy view of ``(action, button)``.

    Deprecated: use ``MouseEvent.action`` and ``MouseEvent.button`` instead.
    """

    UNKNOWN = 0
    LEFT = 1
    RIGHT = 2
    MIDDLE = 3
    RELEASE = 4
    WHEEL_UP = 5
    WHEEL_DOWN = 6
    WHEEL_LEFT = 7
    WHEEL_RIGHT = 8
    BACKWARD = 9
    FORWARD = 10
    MOTION = 11


MOUSE_ACTION_LABELS: dict[int, str] = {
    MouseAction.PRESS: "press",
    MouseAction.RELEASE: "release",
    MouseAction.MOTION: "motion",
}

MOUSE_BUTTON_LABELS: dict[int, str] = {
    MouseButton.NONE: "none",
    MouseButton.LEFT: "left",
    MouseButton.MIDDLE: "middle",
    MouseButton.RIGHT: "right",
    MouseButton.WHEEL_UP: "wheel up",
    MouseButton.WHEEL_DOWN: "wheel down",
    MouseButton.WHEEL_LEFT: "wheel left",
    MouseButton.WHEEL_RIGHT: "wheel right",
    MouseButton.BACKWARD: "backward",
    MouseButton.FORWARD: "forward",
    MouseButton.BUTTON_10: "button 10",
    MouseButton.BUTTON_11: "button 11",
    MouseButton.UNKNOWN: "unknown",
}

MOUSE_EVENT_TYPE_LABELS: dict[int, str] = {
    MouseEventType.UNKNOWN: "unknown",
    MouseEventType.LEFT: "left",
    MouseEventType.RIGHT: "right",
    MouseEventType.MIDDLE: "middle",
    MouseEventType.RELEASE: "release",
    MouseEventType.WHEEL_UP: "wheel up",
    MouseEventType.WHEEL_DOWN: "wheel down",
    MouseEventType.WHEEL_LEFT: "wheel left",
    MouseEventType.WHEEL_RIGHT: "wheel right",
    MouseEventType.BACKWARD: "backward",
    MouseEventType.FORWARD: "forward",
    MouseEventType.MOTION: "motion",
}

WHEEL_BUTTONS = frozenset(
    {
        MouseButton.WHEEL_UP,
        MouseButton.WHEEL_DOWN,
        MouseButton.WHEEL_LEFT,
        MouseButton.WHEEL_RIGHT,
    }
)

_PRESS_TYPES: dict[MouseButton, MouseEventType] = {
    MouseButton.LEFT: MouseEventType.LEFT,
    MouseButton.MIDDLE: MouseEventType.MIDDLE,
    MouseButton.RIGHT: MouseEventType.RIGHT,
    MouseButton.WHEEL_UP: MouseEventType.WHEEL_UP,
    MouseButton.WHEEL_DOWN: MouseEventType.WHEEL_DOWN,
    MouseButton.WHEEL_LEFT: MouseEventType.WHEEL_LEFT,
    MouseButton.WHEEL_RIGHT: MouseEventType.WHEEL_RIGHT,
    MouseButton.BACKWARD: MouseEventType.BACKWARD,
    MouseButton.FORWARD: MouseEventType.FORWARD,
}

_MOTION_TYPES: dict[MouseButton, MouseEventType] = {
    MouseButton.LEFT: MouseEventType.LEFT,
    MouseButton.MIDDLE: MouseEventType.MIDDLE,
    MouseButton.RIGHT: MouseEventType.RIGHT,
    MouseButton.BACKWARD: MouseEventType.BACKWARD,
    MouseButton.FORWARD: MouseEventType.FORWARD,
}


def legacy_event_type(action: MouseAction, button: MouseButton) -> MouseEventType:
    """Map ``(action, button)`` onto the deprecated ``MouseEventType``.

    Presses of buttons with a legacy name map to that name. Any release maps
    to ``RELEASE``. Motion maps to the dragged button when it has a legacy
    name and to plain ``MOTION`` otherwise. Everything else, such as presses
    of buttons 10/11 or of no button, is ``UNKNOWN``.
    """
    if action == MouseAction.PRESS:
        return _PRESS_TYPES.get(button, MouseEventType.UNKNOWN)
    if action == MouseAction.RELEASE:
        return MouseEventType.RELEASE
    if action == MouseAction.MOTION:
        return _MOTION_TYPES.get(button, MouseEventType.MOTION)
    return MouseEventType.UNKNOWN


@dataclass(frozen=True)
class MouseEvent:
    """One decoded mouse report with 0-based cell coordinates.

    Coordinates may be negative: X10 reports wrap once the terminal position
    no longer fits in a single byte.
    """

    protocol: ClassVar[str] = ""

    x: int
    y: int
    shift: bool = False
    alt: bool = False
    ctrl: bool = False
    action: MouseAction = MouseAction.PRESS
    button: MouseButton = MouseButton.NONE

    @property
    def type(self) -> MouseEventType:
        """Deprecated legacy event type, derived from ``action`` and ``button``."""
        return legacy_event_type(self.action, self.button)

    @property
    def is_wheel(self) -> bool:
        """True for the four scroll-wheel buttons."""
        return self.button in WHEEL_BUTTONS

    @property
    def is_sgr(self) -> bool:
        return False

    def __str__(self) -> str:
        from .formatting import format_mouse_event

        return format_mouse_event(self)


@dataclass(frozen=True)
class X10MouseEvent(MouseEvent):
    """Event decoded from a legacy ``ESC [ M`` report."""

    protocol: ClassVar[str] = "x10"


@dataclass(frozen=True)
class SGRMouseEvent(MouseEvent):
    """Event decoded from an extended ``ESC [ <`` report."""

    protocol: ClassVar[str] = "sgr"

    @property
    def is_sgr(self) -> bool:
        return True
