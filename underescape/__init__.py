"""Game logic for a side-scrolling stealth game: geometry, input, timing and game objects."""

__version__ = "0.1.0"

__all__ = ["character", "clock", "enemy", "gameobject", "geometry", "input", "resources", "timer"]