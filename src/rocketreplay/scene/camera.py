from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Final

import numpy as np

from rocketreplay.telemetry.types import Vec3

VIEWPOINT: Final[Vec3] = Vec3(-20.0, 1.7, 40.0)
UP: Final[np.ndarray] = np.array([0.0, 1.0, 0.0])
DEFAULT_FOV_Y: Final[float] = 0.8  # radians
NEAR_PLANE: Final[float] = 0.1


def _normalize(v: np.ndarray) -> np.ndarray:
    n = float(np.linalg.norm(v))
    return v / n if n > 0 else v


# ---------------------------------------- #


def look_at(eye, target, up=UP) -> np.ndarray:
    """
    Right-handed 4x4 view matrix; the camera looks down its own -z axis.
    """
    eye = np.asarray(eye, dtype=float)
    target = np.asarray(target, dtype=float)
    up = np.asarray(up, dtype=float)

    f = _normalize(target - eye)
    s = np.cross(f, up)
    if np.linalg.norm(s) < 1e-9:
        # Looking straight up or down; any horizontal axis will do.
        s = np.cross(f, np.array([0.0, 0.0, 1.0]))
    s = _normalize(s)
    u = np.cross(s, f)

    view = np.identity(4)
    view[0, :3] = s
    view[1, :3] = u
    view[2, :3] = -f
    view[:3, 3] = -view[:3, :3] @ eye
    return view


# ---------------------------------------- #


def perspective_project(
    points,
    view: np.ndarray,
    width: float,
    height: float,
    fov_y: float = DEFAULT_FOV_Y,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Project world points (N, 3) into widget pixels.

    Returns (xy, visible): xy is (N, 2) with y growing downwards, visible
    is False for points behind the near plane (their xy is meaningless).
    """
    pts = np.atleast_2d(np.asarray(points, dtype=float))
    homo = np.hstack([pts, np.ones((pts.shape[0], 1))])
    cam = homo @ view.T

    depth = -cam[:, 2]
    visible = depth > NEAR_PLANE
    safe_depth = np.where(visible, depth, 1.0)

    aspect = width / height if height > 0 else 1.0
    f = 1.0 / math.tan(fov_y / 2.0)
    x_ndc = f * cam[:, 0] / (aspect * safe_depth)
    y_ndc = f * cam[:, 1] / safe_depth

    xy = np.empty((pts.shape[0], 2))
    xy[:, 0] = (x_ndc + 1.0) * 0.5 * width
    xy[:, 1] = (1.0 - y_ndc) * 0.5 * height
    return xy, visible


# ---------------------------------------- #


@dataclass
class FixedCamera:
    """Camera standing at a fixed viewpoint, turning to keep the target in view."""

    position: np.ndarray = field(default_factory=lambda: np.array(VIEWPOINT, dtype=float))
    target: np.ndarray = field(default_factory=lambda: np.zeros(3))

    def update(self, target: Vec3) -> None:
        self.target = np.array(target, dtype=float)

    def view(self) -> np.ndarray:
        return look_at(self.position, self.target)


# ---------------------------------------- #


@dataclass
class FollowCamera:
    """
    Chase camera that eases towards a spot ``radius`` metres from the target
    and ``height_offset`` metres above it.

    Motion is per frame: each update closes ``acceleration`` of the gap, with
    every axis capped at ``max_speed`` metres per frame.
    """

    position: np.ndarray = field(default_factory=lambda: np.array(VIEWPOINT, dtype=float))
    target: np.ndarray = field(default_factory=lambda: np.zeros(3))
    radius: float = 45.0
    height_offset: float = 1.7
    acceleration: float = 0.01
    max_speed: float = 200.0 / 3.6

    def goal(self, target) -> np.ndarray:
        t = np.asarray(target, dtype=float)
        return t + np.array([0.0, self.height_offset, self.radius])

    def update(self, target: Vec3) -> None:
        self.target = np.array(target, dtype=float)
        step = (self.goal(self.target) - self.position) * self.acceleration
        self.position = self.position + np.clip(step, -self.max_speed, self.max_speed)

    def snap(self, target: Vec3) -> None:
        """Jump straight to the resting spot, e.g. after a replay reset."""
        self.target = np.array(target, dtype=float)
        self.position = self.goal(self.target)

    def view(self) -> np.ndarray:
        return look_at(self.position, self.target)
