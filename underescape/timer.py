"""Stage countdown timer kept in frames and shown as three digits."""

from __future__ import annotations


class Timer:
    """Counts a stage's time down one frame per update."""

    def __init__(self, max_seconds: int = 300, frames_per_second: int = 60) -> None:
        self.max_seconds = max_seconds
        self.frames_per_second = frames_per_second
        self.frame_timer = 0
        self.hundreds = 0
        self.tens = 0
        self.ones = 0

    def initialize(self) -> None:
        """Reset the countdown to the full stage time."""
        self.frame_timer = self.max_seconds * self.frames_per_second

    def update(self) -> None:
        """Advance the countdown by one frame."""
        self.change_timer()

    def change_timer(self) -> None:
        """Refresh the digits on whole seconds and count one frame down."""
        if self.frame_timer < 0:
            return
        fps = self.frames_per_second
        if self.frame_timer % fps == 0:
            rest = self.frame_timer
            self.hundreds, rest = divmod(rest, fps * 100)
            self.tens, rest = divmod(rest, fps * 10)
            self.ones = rest // fps
        self.frame_timer -= 1

    @property
    def digits(self) -> tuple[int, int, int]:
        """The shown seconds as (hundreds, tens, ones)."""
        return (self.hundreds, self.tens, self.ones)

    @property
    def seconds(self) -> int:
        """The shown seconds as one number."""
        return self.hundreds * 100 + self.tens * 10 + self.ones