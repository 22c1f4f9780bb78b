"""A throwable item that the player can pick up, carry, throw and put down."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, Protocol

from underescape.geometry import Vector2
from underescape.input import Keyboard, KeyId, Mouse

ITEM_TEXTURE = "data/ball.png"

WHITE = 0xFFFFFFFF
HELD_COLOR = 0xFFFF00FF
FLYING_COLOR = 0xFF00FFFF


class _Canvas(Protocol):
    def draw_texture(self, file_name: str, position: Vector2, *args: Any, **kwargs: Any) -> None: ...


class ItemState(Enum):
    """Where the item is in its life."""

    DUMMY = auto()
    PLACE = auto()
    GET = auto()
    THROW = auto()
    BREAK = auto()


class GameObject:
    """An item lying on the ground, carried, or flying after a throw."""

    width = 32.0
    height = 32.0
    throw_speed = 8.0
    gravity_step = 0.981
    place_fall_step = 7.5

    def __init__(self) -> None:
        self.x_speed = 100.0
        self.y_speed = 20.0
        self.mouse_offset = Vector2()
        self.pos = Vector2()
        self.center = Vector2()
        self.catching = False
        self.broken = False
        self.item_fall = 1.0
        self.color = WHITE
        self.ga = 1.0
        self.v = 0.0
        self.state = ItemState.PLACE

    def _update_center(self) -> None:
        self.center = Vector2(
            (self.pos.x + self.width) / 2, (self.pos.y + self.height) / 2
        )

    def initialize(self, ground: Vector2) -> None:
        """Place the item on the ground at its start position."""
        self.pos = Vector2(800.0, ground.y - self.height)
        self.color = WHITE
        self._update_center()

    def update(
        self,
        char_pos: Vector2,
        caught: bool,
        char_width: float,
        char_height: float,
        thrown: bool,
        ground: Vector2,
        put: bool,
        keyboard: Keyboard,
        mouse: Mouse,
    ) -> None:
        """Change state from the player's actions and move for one frame."""
        if caught:
            self.state = ItemState.GET
        if thrown:
            self.state = ItemState.THROW
        if put:
            self.state = ItemState.PLACE

        if self.state is ItemState.GET:
            self.get_move(char_pos, char_width, char_height)
        elif self.state is ItemState.THROW:
            self.throw_move(ground, char_pos, keyboard, mouse)
        elif self.state is ItemState.PLACE:
            self.put_move(ground)

    def get_move(self, char_pos: Vector2, char_width: float, char_height: float) -> None:
        """Hold the item at the character's side."""
        self.catching = True
        self.pos = Vector2(char_pos.x + char_width, char_pos.y + char_height / 2)
        self._update_center()
        self.color = HELD_COLOR
        self.ga = 1.0
        self.v = 0.0

    def put_move(self, ground: Vector2) -> None:
        """Let the item drop to the ground and rest there."""
        if self.pos.y + self.height < ground.y:
            self.pos.y += self.place_fall_step
        else:
            self.pos.y = ground.y - self.height
        self.color = WHITE

    def throw_move(
        self, ground: Vector2, char_pos: Vector2, keyboard: Keyboard, mouse: Mouse
    ) -> None:
        """Fly along an arc aimed at the mouse cursor until it lands."""
        if self.catching and keyboard.trigger(KeyId.C):
            cursor = mouse.cursor
            self.mouse_offset = Vector2(cursor.x - char_pos.x, char_pos.y - cursor.y)
        self.catching = False

        self.v = -(self.mouse_offset.y / self.y_speed)

        if self.pos.y + self.height < ground.y:
            self.pos.x += self.mouse_offset.x / self.x_speed
            self.pos.y += self.v + self.item_fall * self.ga
            self.color = FLYING_COLOR

        if self.pos.y + self.height >= ground.y:
            self.pos.y = ground.y - self.height
            self.state = ItemState.PLACE
            self.color = WHITE

        self.ga += self.gravity_step

    def draw(self, canvas: _Canvas) -> None:
        """Draw the item in its current colour."""
        canvas.draw_texture(ITEM_TEXTURE, self.pos, self.color)