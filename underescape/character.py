"""The player character: movement, collisions and the detection gauge."""

from __future__ import annotations

from typing import Protocol

from underescape.geometry import Rect, Vector2
from underescape.input import Keyboard, KeyId

WINDOW_WIDTH = 1920
WINDOW_HEIGHT = 1080

CHARACTER_TEXTURE = "data/minihuman透過1.png"
GAUGE_TEXTURE = "data/gauge.png"
CAUGHT_MESSAGE = "おわりだよー"

WHITE = 0xFFFFFFFF
HIDDEN_COLOR = 0xFF0000FF
SPOTTED_COLOR = 0xFFFF0000
GAUGE_COLOR = 0xFF00FFFF


class _Canvas(Protocol):
    def draw_texture(
        self, file_name: str, position: Vector2, color: int = ..., rect: Rect | None = ...
    ) -> None: ...

    def draw_text(self, size: int, text: str, position: Vector2) -> None: ...


class Character:
    """The player, who hides behind walls and avoids enemy sight."""

    width = 125.0
    height = 192.0
    run_speed = 1.0
    dash_speed = 1.5
    walk_speed = 0.5
    jump_speed = -20.0
    fall_speed = 0.7
    friction = 0.8
    cut_speed = 0.1
    max_gauge = 10
    one_gauge_frame = 60
    downer_frame = 180

    def __init__(self) -> None:
        self.pos = Vector2()
        self.velocity = Vector2()
        self.gauge_pos = Vector2()
        self.color = WHITE
        self.speed = self.walk_speed
        self.landing = False
        self.catching = False
        self.alive = True
        self.caught = False
        self.gauge = 0
        self._gauge_count_frame = 0
        self._down_gauge_count = 0

    def initialize(self, ground: Vector2) -> None:
        """Stand the character on the ground at its start position."""
        self.pos = Vector2(100.0, ground.y - self.height)
        self.gauge_pos = Vector2(0.0, 0.0)

    def update(self, keyboard: Keyboard) -> None:
        """Move by the keyboard and keep inside the window."""
        self.control(keyboard)
        self.check_window()

    def check_window(self) -> None:
        """Clamp the character to the window edges."""
        if self.pos.x < 0.0:
            self.pos.x = 0.0
        if self.pos.x + self.width > WINDOW_WIDTH:
            self.pos.x = WINDOW_WIDTH - self.width
        if self.pos.y < 0.0:
            self.pos.y = 0.0
        if self.pos.y + self.height > WINDOW_HEIGHT:
            self.pos.y = WINDOW_HEIGHT - self.height

    def control(self, keyboard: Keyboard) -> None:
        """Apply walking, running, jumping and gravity for one frame."""
        accel = Vector2()

        self.speed = self.run_speed
        if keyboard.button(KeyId.LSHIFT):
            self.speed = self.dash_speed
        if keyboard.button(KeyId.LCONTROL):
            self.speed = self.walk_speed
        if keyboard.button(KeyId.A):
            accel.x = -self.speed
        if keyboard.button(KeyId.D):
            accel.x = self.speed

        if keyboard.trigger(KeyId.SPACE) and self.landing:
            accel.y += self.jump_speed
            self.landing = False

        if not self.landing:
            accel.y += self.fall_speed

        self.velocity = self.velocity + accel
        self.pos = self.pos + self.velocity

        self.velocity.x *= self.friction
        if abs(self.velocity.x) < self.cut_speed:
            self.velocity.x = 0.0

    def round_hit(self, ground: Vector2) -> None:
        """Stop on the ground when the character crosses it."""
        if self.pos.y + self.height > ground.y and self.pos.y < ground.y:
            self.pos.y = ground.y - self.height
            self.velocity.y = 0.0
            self.landing = True

    def check_wall_hit(self, wall_pos: Vector2, wall_width: float, wall_height: float) -> bool:
        """True when the character lies wholly inside the wall's rectangle."""
        return (
            wall_pos.x <= self.pos.x
            and wall_pos.x + wall_width >= self.pos.x + self.width
            and wall_pos.y <= self.pos.y
            and wall_pos.y + wall_height >= self.pos.y + self.height
        )

    def check_enemy_hit(self, enemy_pos: Vector2, radius: float) -> bool:
        """True when the enemy's sight circle touches the character."""
        x, y, w, h = self.pos.x, self.pos.y, self.width, self.height
        ex, ey = enemy_pos.x, enemy_pos.y

        in_wide = x - radius < ex < x + w + radius and y < ey < y + h
        in_tall = x < ex < x + w and y - radius < ey < y + h + radius
        if in_wide or in_tall:
            return True

        corners = (
            Vector2(x, y),
            Vector2(x + w, y),
            Vector2(x, y + h),
            Vector2(x + w, y + h),
        )
        return any((enemy_pos - corner).length() <= radius for corner in corners)

    def check_obtain_item(
        self,
        keyboard: Keyboard,
        item_pos: Vector2,
        item_width: float,
        item_height: float,
    ) -> bool:
        """Pick up an overlapping item when F is pressed."""
        overlaps = (
            self.pos.x < item_pos.x + item_width
            and self.pos.x + self.width > item_pos.x
            and self.pos.y < item_pos.y + item_height
            and self.pos.y + self.height > item_pos.y
        )
        if overlaps and keyboard.trigger(KeyId.F):
            self.catching = True
            return True
        return False

    def check_hit(
        self,
        wall_pos: Vector2,
        wall_width: float,
        wall_height: float,
        enemy_pos: Vector2,
        radius: float,
    ) -> None:
        """Update the gauge and colour by hiding and being seen."""
        if self.check_wall_hit(wall_pos, wall_width, wall_height):
            self.downer_gauge()
            self.color = HIDDEN_COLOR
        elif self.check_enemy_hit(enemy_pos, radius):
            self.upper_gauge()
            self.color = SPOTTED_COLOR
        else:
            self.downer_gauge()
            self.color = WHITE

    def check_throw(self, keyboard: Keyboard) -> bool:
        """True when a held item is thrown with C."""
        return self.catching and keyboard.trigger(KeyId.C)

    def check_put(self, keyboard: Keyboard) -> bool:
        """True when a held item is put down with R."""
        return self.catching and keyboard.trigger(KeyId.R)

    def upper_gauge(self) -> None:
        """Count a frame in sight; fill one gauge step every so many frames."""
        self._down_gauge_count = 0
        self._gauge_count_frame += 1
        if self._gauge_count_frame == self.one_gauge_frame:
            if self.gauge < self.max_gauge:
                self.gauge += 1
                self._gauge_count_frame = 0
            if self.gauge >= self.max_gauge:
                self.caught = True

    def downer_gauge(self) -> None:
        """Count a frame out of sight; drain one gauge step every so often."""
        self._down_gauge_count += 1
        if self._down_gauge_count >= self.downer_frame:
            if self.gauge > 0:
                self.gauge -= 1
            self._down_gauge_count = 0

    @property
    def gauge_rect(self) -> Rect:
        """The visible part of the gauge image."""
        return Rect(0, 0, 20 * self.gauge, 30)

    def draw(self, canvas: _Canvas) -> None:
        """Draw the character, the gauge frame and the filled gauge."""
        canvas.draw_texture(CHARACTER_TEXTURE, self.pos, self.color)
        canvas.draw_texture(GAUGE_TEXTURE, self.gauge_pos, WHITE, Rect(0, 0, 200, 30))
        canvas.draw_texture(GAUGE_TEXTURE, self.gauge_pos, GAUGE_COLOR, self.gauge_rect)
        if self.caught:
            canvas.draw_text(40, CAUGHT_MESSAGE, Vector2(800.0, 500.0))