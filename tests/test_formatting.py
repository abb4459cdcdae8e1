"""Display-label tests for decoded mouse events.

X10 events render their legacy type; SGR events render button and action.
Formatting is total: out-of-range values give empty text, never an error.
"""

from __future__ import annotations

import unittest

from termmouse.events import MouseAction, MouseButton, MouseEvent, MouseEventType, SGRMouseEvent, X10MouseEvent
from termmouse.formatting import format_mouse_event, mouse_event_label
from termmouse.parser import parse_mouse_events


def label(**overrides) -> str:
    kwargs = dict(
        ctrl=False,
        alt=False,
        shift=False,
        is_sgr=False,
        action=MouseAction.PRESS,
        button=MouseButton.NONE,
        event_type=MouseEventType.UNKNOWN,
    )
    kwargs.update(overrides)
    return mouse_event_label(**kwargs)


class MouseEventLabelTests(unittest.TestCase):
    def test_legacy_type_labels(self) -> None:
        expected = {
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
        for event_type, text in expected.items():
            with self.subTest(event_type=event_type):
                self.assertEqual(label(event_type=event_type), text)

    def test_modifier_prefix_order(self) -> None:
        self.assertEqual(label(shift=True, ctrl=True, event_type=MouseEventType.LEFT), "ctrl+shift+left")
        self.assertEqual(label(alt=True, event_type=MouseEventType.LEFT), "alt+left")
        self.assertEqual(
            label(ctrl=True, alt=True, shift=True, event_type=MouseEventType.LEFT),
            "ctrl+alt+shift+left",
        )

    def test_out_of_range_legacy_type_is_empty(self) -> None:
        self.assertEqual(label(event_type=-100), "")
        self.assertEqual(label(event_type=99), "")
        self.assertEqual(label(ctrl=True, event_type=99), "ctrl+")

    def test_sgr_labels(self) -> None:
        self.assertEqual(label(is_sgr=True, action=MouseAction.MOTION, button=MouseButton.NONE), "motion")
        self.assertEqual(label(is_sgr=True, action=MouseAction.PRESS, button=MouseButton.WHEEL_UP), "wheel up")
        self.assertEqual(label(is_sgr=True, action=MouseAction.MOTION, button=MouseButton.LEFT), "left motion")
        self.assertEqual(label(is_sgr=True, action=MouseAction.RELEASE, button=MouseButton.BUTTON_10), "button 10 release")
        self.assertEqual(label(is_sgr=True, action=MouseAction.PRESS, button=MouseButton.NONE), "none press")

    def test_sgr_out_of_range_values_render_empty_parts(self) -> None:
        self.assertEqual(label(is_sgr=True, action=7, button=42), " ")


class FormatMouseEventTests(unittest.TestCase):
    def test_x10_and_sgr_variants_of_same_event(self) -> None:
        fields = dict(x=3, y=4, ctrl=True, shift=True, action=MouseAction.PRESS, button=MouseButton.RIGHT)
        self.assertEqual(format_mouse_event(X10MouseEvent(**fields)), "ctrl+shift+right")
        self.assertEqual(format_mouse_event(SGRMouseEvent(**fields)), "ctrl+shift+right press")

    def test_str_uses_formatter(self) -> None:
        self.assertEqual(str(SGRMouseEvent(x=0, y=0, button=MouseButton.WHEEL_DOWN, alt=True)), "alt+wheel down")
        self.assertEqual(str(X10MouseEvent(x=0, y=0, action=MouseAction.RELEASE)), "release")

    def test_base_event_renders_as_legacy(self) -> None:
        self.assertEqual(str(MouseEvent(x=0, y=0, button=MouseButton.MIDDLE)), "middle")

    def test_coordinates_are_not_rendered(self) -> None:
        self.assertEqual(str(X10MouseEvent(x=100, y=200, button=MouseButton.LEFT)), "left")

    def test_decoded_batch_labels(self) -> None:
        events = parse_mouse_events("\x1b[<0;5;5M\x1b[<35;6;5M\x1b[<0;6;5m\x1b[<65;6;5m")
        self.assertEqual([str(event) for event in events], ["left press", "motion", "left release", "wheel down"])


if __name__ == "__main__":
    unittest.main()
