"""Human-readable labels for decoded mouse events.

SGR events are described by button and action (``"left press"``); X10
events keep the historical single-word legacy type (``"left"``). Lookups
that fall outside the label tables render as an empty string so that
formatting never raises.
"""

from __future__ import annotations

from .events import (
    MOUSE_ACTION_LABELS,
    MOUSE_BUTTON_LABELS,
    MOUSE_EVENT_TYPE_LABELS,
    WHEEL_BUTTONS,
    MouseAction,
    MouseButton,
    MouseEvent,
)


def _modifier_prefix(*, ctrl: bool, alt: bool, shift: bool) -> str:
    """Return the ``ctrl+``, ``alt+``, ``shift+`` prefix, always in that order."""
    parts: list[str] = []
    if ctrl:
        parts.append("ctrl+")
    if alt:
        parts.append("alt+")
    if shift:
        parts.append("shift+")
    return "".join(parts)


def mouse_event_label(
    *,
    ctrl: bool,
    alt: bool,
    shift: bool,
    is_sgr: bool,
    action: int,
    button: int,
    event_type: int,
) -> str:
    """Render the raw formatting inputs of one event.

    ``event_type`` is only consulted for non-SGR events and may be any int;
    values outside ``MouseEventType`` yield an empty body.
    """
    prefix = _modifier_prefix(ctrl=ctrl, alt=alt, shift=shift)
    if not is_sgr:
        return prefix + MOUSE_EVENT_TYPE_LABELS.get(event_type, "")

    if button == MouseButton.NONE and action == MouseAction.MOTION:
        return prefix + MOUSE_ACTION_LABELS.get(action, "")
    if button in WHEEL_BUTTONS:
        return prefix + MOUSE_BUTTON_LABELS.get(button, "")
    return f"{prefix}{MOUSE_BUTTON_LABELS.get(button, '')} {MOUSE_ACTION_LABELS.get(action, '')}"


def format_mouse_event(event: MouseEvent) -> str:
    """Return the display label for ``event``, e.g. ``"ctrl+shift+right press"``."""
    return mouse_event_label(
        ctrl=event.ctrl,
        alt=event.alt,
        shift=event.shift,
        is_sgr=event.is_sgr,
        action=event.action,
        button=event.button,
        event_type=event.type,
    )
