from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


class Vec3(NamedTuple):
    """
    Point or direction in scene coordinates.

    The scene is y-up: x and z span the ground plane, y is altitude.
    """

    x: float
    y: float
    z: float

    @staticmethod
    def zero() -> Vec3:
        return Vec3(0.0, 0.0, 0.0)


def lerp(p0: Vec3, p1: Vec3, alpha: float) -> Vec3:
    return Vec3(
        p0.x + alpha * (p1.x - p0.x),
        p0.y + alpha * (p1.y - p0.y),
        p0.z + alpha * (p1.z - p0.z),
    )


# ---------------------------------------- #


@dataclass(frozen=True)
class Status:
    """
    Canonical rocket state at one instant of the replay.

    position: metres, scene coordinates
    velocity: metres per second, scene coordinates
    fuel: remaining fuel, telemetry units
    status_code: flight outcome (see telemetry.status_codes), 0 while flying
    """

    position: Vec3
    velocity: Vec3
    fuel: float
    status_code: int


ZERO_STATUS = Status(
    position=Vec3.zero(),
    velocity=Vec3.zero(),
    fuel=0.0,
    status_code=0,
)
