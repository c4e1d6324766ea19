from __future__ import annotations

from typing import Final

from rocketreplay.telemetry.timeline import Timeline, create_timeline
from rocketreplay.telemetry.types import Status, Vec3

# Demo descent shown until telemetry is imported.
BUILTIN_PATH: Final[tuple[Vec3, ...]] = (
    Vec3(500.0, 150.0, 500.0),
    Vec3(250.0, 150.0, 250.0),
    Vec3(100.0, 100.0, 100.0),
    Vec3(20.0, 50.0, 30.0),
    Vec3(7.0, 10.0, -3.0),
    Vec3(-4.0, 0.0, 1.0),
)

BUILTIN_DURATION_S: Final[float] = 30.0


def builtin_samples() -> list[Status]:
    """Position-only samples; velocity, fuel and status are not tracked."""
    return [
        Status(position=p, velocity=Vec3.zero(), fuel=0.0, status_code=0)
        for p in BUILTIN_PATH
    ]


def builtin_timeline() -> Timeline:
    interval = BUILTIN_DURATION_S / (len(BUILTIN_PATH) - 1)
    return create_timeline(builtin_samples(), sample_interval=interval)
