"""Frame timing: delta time, frames per second and frame pacing."""

from __future__ import annotations

ONE_SECOND_MS = 1000.0
MAX_DELTA_TIME = 0.16
DEFAULT_FRAME_RATE = 60
FPS_SAMPLE_FRAMES = 60


class FrameClock:
    """Tracks frame timing from millisecond timestamps.

    Call :meth:`tick` at the start of every frame and :meth:`wait_time`
    at its end to learn how long to sleep to hold the frame rate.
    """

    def __init__(
        self,
        frame_rate: int = DEFAULT_FRAME_RATE,
        delta_time_scale: float = 1.0,
    ) -> None:
        self.frame_rate = frame_rate
        self.delta_time_scale = delta_time_scale
        self.fps = 0.0
        self.frame_count = 0
        self._start_time = 0
        self._prev_time = 0
        self._delta_time = 0.0

    def tick(self, now: int) -> float:
        """Begin a frame at time ``now`` (ms) and return the unscaled delta."""
        if self.frame_count == 0:
            self._start_time = now
        elif self.frame_count == FPS_SAMPLE_FRAMES:
            elapsed = now - self._start_time
            self.fps = ONE_SECOND_MS / (elapsed / FPS_SAMPLE_FRAMES)
            self.frame_count = 0
            self._start_time = now

        self.frame_count += 1

        self._delta_time = min((now - self._prev_time) / ONE_SECOND_MS, MAX_DELTA_TIME)
        self._prev_time = now
        return self._delta_time

    def wait_time(self, now: int) -> int:
        """Milliseconds to wait at time ``now`` to keep the frame rate, or 0."""
        took = now - self._start_time
        wait = self.frame_count * int(ONE_SECOND_MS) // self.frame_rate - took
        return max(wait, 0)

    def delta_time(self) -> float:
        """Seconds since the last frame, multiplied by the time scale."""
        return self._delta_time * self.delta_time_scale

    def unscaled_delta_time(self) -> float:
        """Seconds since the last frame, without the time scale."""
        return self._delta_time