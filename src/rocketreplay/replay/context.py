from __future__ import annotations

from rocketreplay.telemetry.timeline import Timeline
from rocketreplay.telemetry.types import Status


class ReplayContext:
    """
    State owned by the render loop.

    Holds the accumulated replay time and the active timeline. The timeline
    itself is never modified here: a new import swaps the reference.
    """

    def __init__(self, timeline: Timeline) -> None:
        self._timeline = timeline
        self._elapsed_time = 0.0
        self._paused = False

    # ---------------------------------------- #

    @property
    def timeline(self) -> Timeline:
        return self._timeline

    @property
    def elapsed_time(self) -> float:
        return self._elapsed_time

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def finished(self) -> bool:
        return self._elapsed_time >= self._timeline.duration

    # ---------------------------------------- #

    def advance(self, dt: float) -> Status:
        """Add one frame's delta time and return the state to render."""
        if not self._paused and dt > 0:
            self._elapsed_time += dt
        return self.current()

    def current(self) -> Status:
        return self._timeline.status(self._elapsed_time)

    # ---------------------------------------- #

    def reset(self) -> None:
        self._elapsed_time = 0.0

    def replace_timeline(self, timeline: Timeline) -> None:
        self._timeline = timeline
        self._elapsed_time = 0.0

    def toggle_pause(self) -> bool:
        self._paused = not self._paused
        return self._paused
