"""Button and modifier decoding shared by the X10 and SGR parsers.

Both protocols encode the button the same way; X10 adds a fixed offset of 32
so the byte stays printable. Bit layout after removing that offset::

    bits 0-1  button index within the selected group
    bit 2     shift
    bit 3     alt
    bit 4     ctrl
    bit 5     motion
    bit 6     wheel group (buttons 4-7)
    bit 7     extra group (buttons 8-11)

See https://invisible-island.net/xterm/ctlseqs/ctlseqs.html#h3-Extended-coordinates
"""

from __future__ import annotations

from dataclasses import dataclass

from .events import WHEEL_BUTTONS, MouseAction, MouseButton

X10_BYTE_OFFSET = 32

BIT_SHIFT = 0b0000_0100
BIT_ALT = 0b0000_1000
BIT_CTRL = 0b0001_0000
BIT_MOTION = 0b0010_0000
BIT_WHEEL = 0b0100_0000
BIT_EXTRA = 0b1000_0000
BUTTON_BITS_MASK = 0b0000_0011


@dataclass(frozen=True)
class DecodedButton:
    """Button, action, and modifiers of one report, before coordinates are known."""

    action: MouseAction
    button: MouseButton
    shift: bool
    alt: bool
    ctrl: bool

    @property
    def is_wheel(self) -> bool:
        return self.button in WHEEL_BUTTONS


def decode_button(code: int, *, is_sgr: bool) -> DecodedButton:
    """Decode a protocol button code into button, action, and modifier flags.

    X10 codes are reduced by ``X10_BYTE_OFFSET`` first; SGR codes are used
    as-is. A low-bit value of 3 in the primary group is the X10 encoding of
    "some button was released" and yields ``RELEASE`` with ``MouseButton.NONE``.
    The motion bit overrides that release, since some terminals set both.
    """
    e = code if is_sgr else code - X10_BYTE_OFFSET
    index = e & BUTTON_BITS_MASK
    action = MouseAction.PRESS

    if e & BIT_EXTRA:
        button = MouseButton(MouseButton.BACKWARD + index)
    elif e & BIT_WHEEL:
        button = MouseButton(MouseButton.WHEEL_UP + index)
    elif index == BUTTON_BITS_MASK:
        action = MouseAction.RELEASE
        button = MouseButton.NONE
    else:
        button = MouseButton(MouseButton.LEFT + index)

    # Wheel reports never carry the motion bit on well-behaved terminals.
    if e & BIT_MOTION and button not in WHEEL_BUTTONS:
        action = MouseAction.MOTION

    return DecodedButton(
        action=action,
        button=button,
        shift=bool(e & BIT_SHIFT),
        alt=bool(e & BIT_ALT),
        ctrl=bool(e & BIT_CTRL),
    )
