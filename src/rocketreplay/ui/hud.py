from __future__ import annotations

import math

from PySide6 import QtCore, QtGui

from rocketreplay.telemetry.status_codes import (
    CRASHED_CODES,
    LANDED_CODES,
    STATUS_FLYING,
    format_status,
)
from rocketreplay.telemetry.types import Status
from rocketreplay.util.time import format_mission_time

GREEN = "#2fe37a"
BLUE = "#7AA2FF"
RED = "#ff4b4b"
AMBER = "#ffcc66"
MUTED = "#c8d2dc"


def status_color(code: int) -> str:
    if code == STATUS_FLYING:
        return GREEN
    if code in LANDED_CODES:
        return BLUE
    if code in CRASHED_CODES:
        return RED
    return AMBER


# ---------------------------------------- #


class HudOverlay:
    """
    Paints flight data on top of the scene.

    Stateless apart from what the render loop last handed over; the scene
    view calls ``paint`` from its own paintEvent.
    """

    def __init__(self) -> None:
        self._status: Status | None = None
        self._elapsed = 0.0
        self._attempt: tuple[int, int] | None = None
        self._paused = False

    def set_state(
        self,
        status: Status,
        elapsed: float,
        attempt: tuple[int, int] | None = None,
        paused: bool = False,
    ) -> None:
        self._status = status
        self._elapsed = elapsed
        self._attempt = attempt
        self._paused = paused

    # ---------------------------------------- #

    def paint(self, p: QtGui.QPainter, rect: QtCore.QRect) -> None:
        p.save()
        p.setClipRect(rect)

        self._hud_text(
            p, rect.left() + 14, rect.top() + 24, format_mission_time(self._elapsed), color=MUTED
        )

        if self._attempt is not None:
            n, total = self._attempt
            self._hud_text(
                p, rect.left() + 14, rect.top() + 44, f"ATTEMPT {n}/{total}", color=MUTED
            )

        if self._paused:
            self._hud_text(
                p, rect.right() - 110, rect.top() + 24, "PAUSED", color=AMBER, box=True
            )

        s = self._status
        if s is not None:
            speed = math.sqrt(sum(c * c for c in s.velocity))
            lines = [
                f"ALT {s.position.y:9.2f} m",
                f"POS {s.position.x:8.1f} {s.position.z:8.1f}",
                f"VSP {s.velocity.y:9.2f} m/s",
                f"SPD {speed:9.2f} m/s",
                f"FUEL {s.fuel:8.2f}",
            ]
            y0 = rect.bottom() - 18 - 20 * (len(lines) - 1)
            for i, line in enumerate(lines):
                self._hud_text(p, rect.left() + 14, y0 + 20 * i, line, color=GREEN, box=True)

            label = format_status(s.status_code).upper()
            color = status_color(s.status_code)
            if s.status_code == STATUS_FLYING:
                self._hud_text(
                    p, rect.right() - 110, rect.bottom() - 18, label, color=color, box=True
                )
            else:
                self._alert_banner(p, rect, label, color)

        p.restore()

    # ---------------------------------------- #

    def _alert_banner(
        self, p: QtGui.QPainter, rect: QtCore.QRect, text: str, color: str
    ) -> None:
        font = QtGui.QFont()
        font.setPointSize(22)
        font.setBold(True)
        p.setFont(font)

        fm = QtGui.QFontMetrics(font)
        w = fm.horizontalAdvance(text) + 40
        h = fm.height() + 20
        r = QtCore.QRect(rect.center().x() - w // 2, rect.top() + rect.height() // 4, w, h)

        p.fillRect(r, QtGui.QColor(0, 0, 0, 150))
        p.setPen(QtGui.QPen(QtGui.QColor(color), 2))
        p.drawRect(r)
        p.drawText(r, QtCore.Qt.AlignmentFlag.AlignCenter, text)

    # ---------------------------------------- #

    def _hud_text(
        self,
        p: QtGui.QPainter,
        x: int,
        y: int,
        text: str,
        color: str,
        box: bool = False,
    ) -> None:
        font = QtGui.QFont("monospace")
        font.setPointSize(11)
        font.setBold(True)
        p.setFont(font)

        fm = QtGui.QFontMetrics(font)
        w = fm.horizontalAdvance(text)
        h = fm.height()

        if box:
            r = QtCore.QRect(x - 6, y - h + 4, w + 12, h + 6)
            p.fillRect(r, QtGui.QColor(0, 0, 0, 120))
            p.setPen(QtGui.QPen(QtGui.QColor("#1b2a34"), 1))
            p.drawRect(r)

        p.setPen(QtGui.QColor(color))
        p.drawText(x, y, text)
