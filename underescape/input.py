"""Keyboard, mouse and gamepad input state with edge detection."""

from __future__ import annotations

from enum import IntEnum, IntFlag
from typing import Iterable

from underescape.geometry import Point, Vector2

ANALOG_LIMIT = 30000
TRIGGER_MAX = 255


class KeyId(IntEnum):
    """Keyboard scan codes usable for key checks."""

    DUMMY = 0x00
    ESCAPE = 0x01
    ONE = 0x02
    TWO = 0x03
    THREE = 0x04
    FOUR = 0x05
    FIVE = 0x06
    SIX = 0x07
    SEVEN = 0x08
    EIGHT = 0x09
    NINE = 0x0A
    ZERO = 0x0B
    BACK = 0x0E
    TAB = 0x0F
    Q = 0x10
    W = 0x11
    E = 0x12
    R = 0x13
    T = 0x14
    Y = 0x15
    U = 0x16
    I = 0x17  # noqa: E741
    O = 0x18  # noqa: E741
    P = 0x19
    RETURN = 0x1C
    LCONTROL = 0x1D
    A = 0x1E
    S = 0x1F
    D = 0x20
    F = 0x21
    G = 0x22
    H = 0x23
    J = 0x24
    K = 0x25
    L = 0x26
    LSHIFT = 0x2A
    BACKSLASH = 0x2B
    Z = 0x2C
    X = 0x2D
    C = 0x2E
    V = 0x2F
    B = 0x30
    N = 0x31
    M = 0x32
    SPACE = 0x39
    F1 = 0x3B
    F2 = 0x3C
    F3 = 0x3D
    F4 = 0x3E
    F5 = 0x3F
    F6 = 0x40
    F7 = 0x41
    F8 = 0x42
    F9 = 0x43
    F10 = 0x44
    NUMPAD7 = 0x47
    NUMPAD8 = 0x48
    NUMPAD9 = 0x49
    SUBTRACT = 0x4A
    NUMPAD4 = 0x4B
    NUMPAD5 = 0x4C
    NUMPAD6 = 0x4D
    ADD = 0x4E
    NUMPAD1 = 0x4F
    NUMPAD2 = 0x50
    NUMPAD3 = 0x51
    NUMPAD0 = 0x52
    NUMPADDECIMAL = 0x53
    F11 = 0x57
    F12 = 0x58
    F13 = 0x64
    F14 = 0x65
    F15 = 0x66
    NUMPADENTER = 0x9C
    RCONTROL = 0x9D
    UP = 0xC8
    LEFT = 0xCB
    RIGHT = 0xCD
    DOWN = 0xD0


class MouseButton(IntFlag):
    """Mouse button bits as they appear in the button mask."""

    LEFT = 0x0001
    RIGHT = 0x0002
    MIDDLE = 0x0004


class Keyboard:
    """Keyboard state of this frame and the frame before."""

    def __init__(self) -> None:
        self._current: frozenset[KeyId] = frozenset()
        self._previous: frozenset[KeyId] = frozenset()

    def update(self, pressed: Iterable[KeyId | int]) -> None:
        """Start a new frame with the given keys held down."""
        self._previous = self._current
        self._current = frozenset(KeyId(key) for key in pressed)

    def button(self, key: KeyId) -> bool:
        """True while the key is held."""
        return key in self._current

    def trigger(self, key: KeyId) -> bool:
        """True only on the frame the key went down."""
        return key in self._current and key not in self._previous

    def released(self, key: KeyId) -> bool:
        """True only on the frame the key went up."""
        return key not in self._current and key in self._previous


class Mouse:
    """Mouse button mask, cursor and wheel for this frame and the last."""

    def __init__(self) -> None:
        self._current = 0
        self._previous = 0
        self.cursor = Point()
        self.wheel = 0

    def update(self, buttons: int, cursor: Point, wheel: int) -> None:
        """Start a new frame with the given button mask, cursor and wheel."""
        self._previous = self._current
        self._current = int(buttons)
        self.cursor = cursor
        self.wheel = wheel

    def button(self, button: MouseButton) -> bool:
        """True while the button is held."""
        return bool(self._current & button)

    def trigger(self, button: MouseButton) -> bool:
        """True only on the frame the button went down."""
        return bool(self._current & button) and not self._previous & button

    def released(self, button: MouseButton) -> bool:
        """True only on the frame the button went up."""
        return not self._current & button and bool(self._previous & button)


def _clamp_axis(value: int) -> float:
    if value < 0:
        return float(max(value, -ANALOG_LIMIT))
    if value > 0:
        return float(min(value, ANALOG_LIMIT))
    return 0.0


def analog_stick(x: int, y: int) -> Vector2:
    """Map raw stick axes to the range -1..1, with the Y axis flipped."""
    ax = _clamp_axis(x)
    ay = _clamp_axis(y)
    return Vector2(ax, -ay) * (1.0 / ANALOG_LIMIT)


def trigger_value(raw: int) -> float:
    """Map a raw trigger reading to the range 0..1."""
    return raw / TRIGGER_MAX