import pytest

from underescape.geometry import Point, Vector2
from underescape.input import (
    KeyId,
    Keyboard,
    Mouse,
    MouseButton,
    analog_stick,
    trigger_value,
)


def test_raw_scan_codes_map_to_named_keys():
    kb = Keyboard()
    kb.update([0x01, 0x43, 0x39])
    assert kb.button(KeyId.ESCAPE)
    assert kb.trigger(KeyId.F9)
    assert kb.trigger(KeyId.SPACE)
    assert not kb.button(KeyId.A)


def test_keyboard_press_hold_release_sequence():
    kb = Keyboard()
    kb.update([KeyId.SPACE])
    assert kb.button(KeyId.SPACE)
    assert kb.trigger(KeyId.SPACE)
    assert not kb.released(KeyId.SPACE)

    kb.update([KeyId.SPACE])
    assert kb.button(KeyId.SPACE)
    assert not kb.trigger(KeyId.SPACE)

    kb.update([])
    assert not kb.button(KeyId.SPACE)
    assert kb.released(KeyId.SPACE)

    kb.update([])
    assert not kb.released(KeyId.SPACE)


def test_keyboard_keys_are_independent():
    kb = Keyboard()
    kb.update([KeyId.A, KeyId.D])
    kb.update([KeyId.D, KeyId.LSHIFT])
    assert kb.released(KeyId.A)
    assert kb.button(KeyId.D) and not kb.trigger(KeyId.D)
    assert kb.trigger(KeyId.LSHIFT)
    assert not kb.button(KeyId.F)


def test_keyboard_accepts_raw_codes():
    kb = Keyboard()
    kb.update([0x21])
    assert kb.trigger(KeyId.F)


def test_keyboard_rejects_unknown_code():
    kb = Keyboard()
    with pytest.raises(ValueError):
        kb.update([0x0C])


def test_mouse_edges_and_state():
    mouse = Mouse()
    mouse.update(MouseButton.LEFT, Point(10, 20), 1)
    assert mouse.button(MouseButton.LEFT)
    assert mouse.trigger(MouseButton.LEFT)
    assert not mouse.button(MouseButton.RIGHT)
    assert mouse.cursor == Point(10, 20)
    assert mouse.wheel == 1

    mouse.update(MouseButton.LEFT | MouseButton.RIGHT, Point(11, 21), 0)
    assert not mouse.trigger(MouseButton.LEFT)
    assert mouse.trigger(MouseButton.RIGHT)

    mouse.update(0, Point(11, 21), 0)
    assert mouse.released(MouseButton.LEFT)
    assert mouse.released(MouseButton.RIGHT)
    assert not mouse.released(MouseButton.MIDDLE)


def test_analog_stick_full_deflection_flips_y():
    assert analog_stick(30000, 30000) == Vector2(1.0, -1.0)
    assert analog_stick(-30000, -30000) == Vector2(-1.0, 1.0)


def test_analog_stick_clamps_beyond_limit():
    assert analog_stick(32767, -32768) == analog_stick(30000, -30000)


def test_analog_stick_centre_is_zero():
    v = analog_stick(0, 0)
    assert v.x == 0.0 and v.y == 0.0


@pytest.mark.parametrize("x", [-32768, -15000, -1, 0, 1, 20000, 32767])
def test_analog_stick_stays_in_unit_range(x):
    v = analog_stick(x, x)
    assert -1.0 <= v.x <= 1.0
    assert v.y == pytest.approx(-v.x)


def test_trigger_value_bounds():
    assert trigger_value(0) == 0.0
    assert trigger_value(255) == 1.0
    assert 0.0 < trigger_value(128) < 1.0