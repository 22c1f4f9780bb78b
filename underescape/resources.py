"""Handle caches for textures, sounds and fonts, and the effect play list."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, Generic, Hashable, Iterator, TypeVar

from underescape.geometry import Vector2

ERROR_HANDLE = -1
DEFAULT_EFFECT_SCALE = 25.0

K = TypeVar("K", bound=Hashable)


class BlendMode(IntEnum):
    """Alpha blending modes used when drawing."""

    NOBLEND = 0
    ALPHA = 1
    ADD = 2
    SUB = 3
    INVSRC = 10


class ResourceError(RuntimeError):
    """Raised when a resource cannot be loaded or created."""


class ResourceRegistry(Generic[K]):
    """Loads each resource once and hands out its cached handle.

    ``loader`` receives the key and returns an integer handle; a handle of
    -1 means the load failed.
    """

    def __init__(self, loader: Callable[[K], int], kind: str = "resource") -> None:
        self._loader = loader
        self._kind = kind
        self._handles: dict[K, int] = {}

    def __contains__(self, key: object) -> bool:
        return key in self._handles

    def __len__(self) -> int:
        return len(self._handles)

    def __iter__(self) -> Iterator[K]:
        return iter(self._handles)

    def find(self, key: K) -> int | None:
        """Return the handle already loaded for ``key``, or None."""
        return self._handles.get(key)

    def load(self, key: K) -> int:
        """Load ``key`` unless it is loaded already, and return its handle."""
        handle = self._handles.get(key)
        if handle is not None:
            return handle
        handle = self._loader(key)
        if handle is None or handle == ERROR_HANDLE:
            raise ResourceError(f"failed to load {self._kind} {key!r}")
        self._handles[key] = handle
        return handle

    def get(self, key: K) -> int:
        """Return the handle for ``key``, loading it on first use."""
        return self.load(key)

    def clear(self) -> None:
        """Forget every loaded handle."""
        self._handles.clear()


@dataclass(slots=True)
class PlayingEffect:
    """An effect instance being played at a screen position."""

    handle: int = 0
    pos: Vector2 = field(default_factory=Vector2)


class EffectPlayList:
    """Effects started for drawing every frame until they finish."""

    def __init__(self) -> None:
        self._effects: list[PlayingEffect] = []
        self.enabled = True

    def __len__(self) -> int:
        return len(self._effects)

    def __iter__(self) -> Iterator[PlayingEffect]:
        return iter(self._effects)

    def start(self, handle: int, pos: Vector2) -> PlayingEffect:
        """Add a started effect with its play handle and position."""
        if handle == ERROR_HANDLE:
            raise ResourceError("failed to start effect")
        effect = PlayingEffect(handle, Vector2(pos.x, pos.y))
        self._effects.append(effect)
        return effect

    def draw_all(
        self,
        is_playing: Callable[[int], bool],
        draw: Callable[[int, Vector2], None],
    ) -> int:
        """Draw every effect still playing and drop the finished ones.

        Returns the number of effects drawn.
        """
        still_playing = []
        for effect in self._effects:
            if not is_playing(effect.handle):
                continue
            draw(effect.handle, effect.pos)
            still_playing.append(effect)
        self._effects = still_playing
        return len(still_playing)

    def clear(self) -> None:
        """Drop every effect."""
        self._effects.clear()


def split_color(color: int) -> tuple[int, int, int, int]:
    """Split a 0xAARRGGBB colour into (alpha, red, green, blue)."""
    return (
        (color & 0xFF000000) >> 24,
        (color & 0x00FF0000) >> 16,
        (color & 0x0000FF00) >> 8,
        color & 0x000000FF,
    )