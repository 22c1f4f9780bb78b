"""Patrolling enemy that hears sounds, chases their source and jumps."""

from __future__ import annotations

import math
from enum import Enum, auto
from typing import Any, Protocol

from underescape.geometry import Rect, Vector2
from underescape.input import Keyboard, KeyId

ENEMY_TEXTURE = "data/abe.png"
EXCLAMATION_TEXTURE = "data/ball.png"
SIGHT_TEXTURE = "data/敵視界.png"

WHITE = 0xFFFFFFFF


class _Canvas(Protocol):
    def draw_texture(self, file_name: str, position: Vector2, *args: Any, **kwargs: Any) -> None: ...


class EnemyStatus(Enum):
    """What the enemy is currently doing."""

    STOP = auto()
    WANDERING = auto()
    CHASE = auto()
    VIGILANCE = auto()
    SURPRISED = auto()


class Enemy:
    """An enemy that walks between two bounds and reacts to sounds."""

    width_size = 64
    height_size = 64
    exclamation_width_size = 32
    exclamation_height_size = 32
    speed = 4.0
    chase_speed = 6.0
    source_end_range = 4
    vigilance_time = 150
    surprised_time = 30
    jump_height = 150.0
    jump_upspeed = 3.0
    jump_downspeed = 100.0

    def __init__(self) -> None:
        self.pos = Vector2(300.0, 500.0)
        self.rect = Rect(0, 0, self.height_size, self.width_size)
        self.anchor = Vector2(self.width_size / 2.0, self.height_size / 2.0)
        self.scale = Vector2(1.0, 1.0)
        self.exclamation_pos = Vector2()
        self.exclamation_rect = Rect(
            0, 0, self.exclamation_height_size, self.exclamation_width_size
        )
        self.exclamation_anchor = Vector2(
            self.exclamation_width_size / 2.0, self.exclamation_height_size / 2.0
        )
        self.exclamation_scale = Vector2(1.0, 1.0)
        self.left = 0.0
        self.right = 0.0
        self.gravity = 0
        self.jump_ready = False
        self.ground = 600.0
        self.direction = 1
        self.chase_pos = Vector2()
        self.vigilance_timer = 0
        self.surprised_timer = 0
        self.circle_radius = 200.0
        self.circle_center = Vector2()
        self.status = EnemyStatus.WANDERING

    def initialize(
        self,
        pos: Vector2 | None = None,
        left: float = 300.0,
        right: float = 300.0,
        direction: int = 1,
        ground: float = 500.0,
    ) -> None:
        """Place the enemy and set its patrol bounds; equal bounds stand still."""
        if pos is None:
            pos = Vector2(300.0, 500.0)
        self.ground = ground
        if left == right:
            self.status = EnemyStatus.STOP
        if left > right:
            left, right = right, left
        self.pos = Vector2(pos.x, pos.y)
        self.right = right
        self.left = left
        self.direction = direction
        self.gravity = 100
        self.jump_ready = False
        self.circle_center = Vector2(
            self.pos.x + self.circle_radius, self.pos.y + self.circle_radius
        )

    def update(self, keyboard: Keyboard) -> None:
        """Advance the state machine and apply gravity for one frame."""
        status = self.status
        if status is EnemyStatus.WANDERING:
            if self.direction == 1:
                self.pos.x += self.speed
                if self.pos.x >= self.right:
                    self._turn_around()
            else:
                self.pos.x -= self.speed
                if self.pos.x <= self.left:
                    self._turn_around()
        elif status is EnemyStatus.CHASE:
            if self.chase_pos.x > self.pos.x:
                self.pos.x += self.chase_speed
                self.direction = 1
            else:
                self.pos.x -= self.chase_speed
                self.direction = -1
            if abs(self.chase_pos.x - self.pos.x) < self.source_end_range:
                self.vigilance_timer = 0
                self.status = EnemyStatus.VIGILANCE
        elif status is EnemyStatus.VIGILANCE:
            self.vigilance_timer += 1
            if self.vigilance_timer >= self.vigilance_time:
                self.status = (
                    EnemyStatus.STOP if self.left == self.right else EnemyStatus.WANDERING
                )
        elif status is EnemyStatus.SURPRISED:
            self.surprised_timer += 1
            if self.surprised_timer >= self.surprised_time:
                self.status = EnemyStatus.CHASE

        if self.wants_jump(keyboard):
            self.jump()
        self.pos = self.apply_gravity(
            self.pos,
            self.ground,
            self.height_size,
            self.anchor,
            self.jump_height,
            self.jump_upspeed,
            self.jump_downspeed,
        )

    def _turn_around(self) -> None:
        self.direction *= -1
        if self.left == self.right:
            self.status = EnemyStatus.STOP

    def draw(self, canvas: _Canvas) -> None:
        """Draw the enemy, a surprise mark when surprised, and its sight."""
        self.scale.x = abs(self.scale.x) * self.direction
        canvas.draw_texture(
            ENEMY_TEXTURE,
            Vector2(self.pos.x - self.width_size / 2, self.pos.y),
            WHITE,
            self.rect,
            anchor=self.anchor,
            scale=self.scale,
        )
        if self.status is EnemyStatus.SURPRISED:
            lift = (self.exclamation_height_size - self.exclamation_anchor.y) - (
                self.height_size // 5
            )
            self.exclamation_pos = Vector2(
                self.pos.x, (self.pos.y - self.anchor.y) - lift * self.scale.y
            )
            self.exclamation_scale = Vector2(abs(self.scale.x), abs(self.scale.y))
            canvas.draw_texture(
                EXCLAMATION_TEXTURE,
                Vector2(
                    self.exclamation_pos.x - self.exclamation_width_size / 2,
                    self.exclamation_pos.y,
                ),
                WHITE,
                self.exclamation_rect,
                anchor=self.exclamation_anchor,
                scale=self.exclamation_scale,
            )
        canvas.draw_texture(SIGHT_TEXTURE, self.pos)

    def sound_sensor(self, source: Vector2, size: float) -> None:
        """React to a sound of loudness ``size`` made at ``source``."""
        dx = abs(source.x - self.pos.x)
        dy = abs(source.y - self.pos.y)
        if math.hypot(dx, dy) <= size:
            if self.status in (EnemyStatus.WANDERING, EnemyStatus.VIGILANCE):
                self.status = EnemyStatus.SURPRISED
                self.surprised_timer = 0
            self.chase_pos = Vector2(source.x, source.y)

    def wants_jump(self, keyboard: Keyboard) -> bool:
        """True when the enemy should jump this frame (the F key for now)."""
        return keyboard.trigger(KeyId.F)

    def jump(self) -> None:
        """Start a jump if standing on the ground."""
        if self.jump_ready:
            self.gravity = 180
            self.jump_ready = False

    def apply_gravity(
        self,
        pos: Vector2 | None = None,
        ground: float = 600.0,
        height_size: int = 32,
        anchor: Vector2 | None = None,
        jump_height: float = 50.0,
        upspeed: float = 5.0,
        downspeed: float = 100.0,
    ) -> Vector2:
        """Return ``pos`` moved by the jump curve and held above the ground."""
        pos = Vector2() if pos is None else Vector2(pos.x, pos.y)
        anchor = Vector2() if anchor is None else anchor
        jump_height /= 57
        pos.y += math.sin(self.gravity * 3.14 / 100) * jump_height * upspeed
        floor_gravity = 100 - 0.5 * downspeed
        if self.gravity >= floor_gravity:
            self.gravity = int(self.gravity - upspeed)
            if self.gravity <= floor_gravity:
                self.gravity = int(floor_gravity)
        limit = ground - (height_size - anchor.y)
        if pos.y > limit:
            pos.y = limit
            self.jump_ready = True
        return pos