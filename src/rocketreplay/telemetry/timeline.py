from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

from rocketreplay.telemetry.status_codes import is_terminal
from rocketreplay.telemetry.types import ZERO_STATUS, Status, lerp

DEFAULT_SAMPLE_INTERVAL_S: Final[float] = 0.25
DEFAULT_ALERT_DURATION_S: Final[float] = 5.0


@dataclass(frozen=True)
class Episode:
    """
    One flight attempt: samples [from_index, to_index] replayed over the
    window [begin_time, end_time).

    The window is the data span followed by the alert pause, during which
    the sample at to_index is held.
    """

    from_index: int
    to_index: int
    begin_time: float
    end_time: float


# ---------------------------------------- #


def segment_episodes(
    samples: Sequence[Status],
    sample_interval: float = DEFAULT_SAMPLE_INTERVAL_S,
    alert_duration: float = DEFAULT_ALERT_DURATION_S,
) -> list[Episode]:
    """
    Partition the sample table into flight attempts.

    Every sample with a terminal status code closes an attempt. A table that
    ends while still flying gets its last index as a closing boundary so the
    partial flight still replays.

    Attempt ``i`` replays over ``[from_index * Δ + i * A, to_index * Δ + (i + 1) * A)``
    with Δ the sample interval and A the alert duration. A later attempt
    starts one past the previous terminal sample, which leaves a gap of one
    Δ between windows; ``Timeline`` keeps holding the terminal sample there.
    """
    if not samples:
        return []

    ends = [i for i, s in enumerate(samples) if is_terminal(s.status_code)]
    last = len(samples) - 1
    if not is_terminal(samples[last].status_code):
        ends.append(last)

    episodes: list[Episode] = []
    from_index = 0
    for i, to_index in enumerate(ends):
        begin = from_index * sample_interval + i * alert_duration
        end = to_index * sample_interval + (i + 1) * alert_duration
        episodes.append(Episode(from_index, to_index, begin, end))
        from_index = to_index + 1

    return episodes


# ---------------------------------------- #


class Timeline:
    """
    Continuously queryable replay of a sample table.

    Immutable once built; importing new telemetry means building a new
    Timeline. ``status`` is a pure function of the queried time, so replay
    controls may jump backwards freely.
    """

    def __init__(
        self,
        samples: Sequence[Status],
        episodes: Sequence[Episode],
        sample_interval: float = DEFAULT_SAMPLE_INTERVAL_S,
        alert_duration: float = DEFAULT_ALERT_DURATION_S,
    ) -> None:
        if sample_interval <= 0:
            raise ValueError("sample_interval must be positive")

        self._samples = tuple(samples)
        self._episodes = tuple(episodes)
        self._sample_interval = float(sample_interval)
        self._alert_duration = float(alert_duration)

    # ---------------------------------------- #

    @property
    def samples(self) -> tuple[Status, ...]:
        return self._samples

    @property
    def episodes(self) -> tuple[Episode, ...]:
        return self._episodes

    @property
    def sample_interval(self) -> float:
        return self._sample_interval

    @property
    def alert_duration(self) -> float:
        return self._alert_duration

    @property
    def duration(self) -> float:
        """Replay time at which the last episode's alert pause ends."""
        return self._episodes[-1].end_time if self._episodes else 0.0

    def __len__(self) -> int:
        return len(self._samples)

    # ---------------------------------------- #

    def episode_at(self, t: float) -> int | None:
        """
        Index of the episode replaying at time ``t``.

        A time in the gap before an episode's window belongs to the episode
        before it, which is still holding its terminal sample. Times past the
        last window resolve to the last episode.
        """
        if not self._episodes:
            return None

        t = max(0.0, t)
        for i, e in enumerate(self._episodes):
            if t < e.end_time:
                return i if i == 0 or t >= e.begin_time else i - 1
        return len(self._episodes) - 1

    # ---------------------------------------- #

    def status(self, t: float) -> Status:
        """Interpolated rocket state at replay time ``t`` (seconds)."""
        i = self.episode_at(t)
        if i is None:
            return ZERO_STATUS

        episode = self._episodes[i]
        dt = max(0.0, t) - episode.begin_time
        if dt >= (episode.to_index - episode.from_index) * self._sample_interval:
            return self._samples[episode.to_index]

        j = math.floor(dt / self._sample_interval)
        idx = min(episode.from_index + j, episode.to_index)

        s0 = self._samples[idx]
        if idx == episode.to_index:
            return s0

        s1 = self._samples[idx + 1]
        alpha = (dt - j * self._sample_interval) / self._sample_interval
        return Status(
            position=lerp(s0.position, s1.position, alpha),
            velocity=lerp(s0.velocity, s1.velocity, alpha),
            fuel=s0.fuel + alpha * (s1.fuel - s0.fuel),
            # Categorical; never interpolated.
            status_code=s0.status_code,
        )


# ---------------------------------------- #


def create_timeline(
    samples: Sequence[Status],
    sample_interval: float = DEFAULT_SAMPLE_INTERVAL_S,
    alert_duration: float = DEFAULT_ALERT_DURATION_S,
) -> Timeline:
    episodes = segment_episodes(samples, sample_interval, alert_duration)
    return Timeline(samples, episodes, sample_interval, alert_duration)
