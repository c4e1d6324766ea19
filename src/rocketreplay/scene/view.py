from __future__ import annotations

import numpy as np
from PySide6 import QtCore, QtGui, QtWidgets

from rocketreplay.scene.camera import FixedCamera, FollowCamera, perspective_project
from rocketreplay.scene.geometry import ROCKET_HEIGHT, flight_paths, ground_grid, platform_outline
from rocketreplay.telemetry.timeline import Timeline
from rocketreplay.telemetry.types import Status
from rocketreplay.ui.hud import HudOverlay, status_color


class SceneView(QtWidgets.QWidget):
    """
    Two side-by-side views of the landing zone: a chase camera on the left
    and a fixed ground observer on the right, both locked on the rocket.

    Cameras and HUD are owned here and handed the rocket state each frame.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self.follow_camera = FollowCamera()
        self.fixed_camera = FixedCamera()
        self.hud = HudOverlay()

        self._grid = ground_grid()
        self._platform = platform_outline()
        self._path = np.zeros((0, 2, 3))
        self._status: Status | None = None

        self.setMinimumSize(800, 450)
        self.setAutoFillBackground(True)

    # ---------------------------------------- #

    def set_timeline(self, timeline: Timeline) -> None:
        self._path = flight_paths([s.position for s in timeline.samples], timeline.episodes)
        first = timeline.status(0.0)
        self.follow_camera.snap(first.position)
        self.fixed_camera.update(first.position)
        self.update()

    def set_status(self, status: Status) -> None:
        self._status = status
        self.follow_camera.update(status.position)
        self.fixed_camera.update(status.position)
        self.update()

    # ---------------------------------------- #

    def paintEvent(self, e: QtGui.QPaintEvent) -> None:
        p = QtGui.QPainter(self)
        p.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)
        p.fillRect(self.rect(), QtGui.QColor("#0b0f14"))

        w = self.width() // 2
        left = QtCore.QRect(0, 0, w, self.height())
        right = QtCore.QRect(w, 0, self.width() - w, self.height())

        self._paint_viewport(p, left, self.follow_camera.view())
        self._paint_viewport(p, right, self.fixed_camera.view())

        p.setPen(QtGui.QPen(QtGui.QColor("#27313A"), 2))
        p.drawLine(w, 0, w, self.height())

        self.hud.paint(p, left)
        p.end()

    # ---------------------------------------- #

    def _paint_viewport(
        self, p: QtGui.QPainter, rect: QtCore.QRect, view: np.ndarray
    ) -> None:
        p.save()
        p.setClipRect(rect)
        p.translate(rect.topLeft())

        def project(points: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
            return perspective_project(points, view, rect.width(), rect.height())

        p.fillRect(0, 0, rect.width(), rect.height(), QtGui.QColor("#0d1218"))

        # Ground grid
        p.setPen(QtGui.QPen(QtGui.QColor("#1b2a34"), 1))
        self._draw_segments(p, project, self._grid)

        # Landing platform
        p.setPen(QtGui.QPen(QtGui.QColor("#7AA2FF"), 2))
        self._draw_segments(p, project, self._platform)

        # Flight path
        p.setPen(QtGui.QPen(QtGui.QColor(90, 110, 130, 160), 1, QtCore.Qt.PenStyle.DashLine))
        self._draw_segments(p, project, self._path)

        # Rocket
        if self._status is not None:
            base = np.array(self._status.position, dtype=float)
            nose = base + np.array([0.0, ROCKET_HEIGHT, 0.0])
            xy, visible = project(np.stack([base, nose]))
            if visible.all():
                color = QtGui.QColor(status_color(self._status.status_code))
                pen = QtGui.QPen(color, 4)
                pen.setCapStyle(QtCore.Qt.PenCapStyle.RoundCap)
                p.setPen(pen)
                tail = QtCore.QPointF(float(xy[0, 0]), float(xy[0, 1]))
                tip = QtCore.QPointF(float(xy[1, 0]), float(xy[1, 1]))
                p.drawLine(tail, tip)
                p.setBrush(color)
                p.drawEllipse(tip, 3.0, 3.0)

        p.restore()

    # ---------------------------------------- #

    @staticmethod
    def _draw_segments(p: QtGui.QPainter, project, segments: np.ndarray) -> None:
        if len(segments) == 0:
            return

        n = segments.shape[0]
        xy, visible = project(segments.reshape(-1, 3))
        xy = xy.reshape(n, 2, 2)
        # Segments crossing the near plane are dropped rather than clipped.
        visible = visible.reshape(n, 2).all(axis=1)
        lines = [
            QtCore.QLineF(float(a[0]), float(a[1]), float(b[0]), float(b[1]))
            for (a, b), ok in zip(xy, visible)
            if ok
        ]
        if lines:
            p.drawLines(lines)
