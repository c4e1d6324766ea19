from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from rocketreplay.telemetry.timeline import (
    DEFAULT_ALERT_DURATION_S,
    DEFAULT_SAMPLE_INTERVAL_S,
)


@dataclass(frozen=True)
class ReplayConfig:
    sample_interval_s: float = DEFAULT_SAMPLE_INTERVAL_S
    alert_duration_s: float = DEFAULT_ALERT_DURATION_S
    frame_interval_ms: int = 16


def _repo_root() -> Path:
    return Path(__file__).resolve().parents[3]


# ---------------------------------------- #


def _positive_number(value: Any, default: float) -> float:
    # bool is an int subclass; "true" is not a duration
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    return float(value) if value > 0 else default


def _alert_duration(value: Any, default: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    return float(value) if value >= 0 else default


# ---------------------------------------- #


def load_replay_config(path: Path | None = None) -> ReplayConfig:
    """
    Read the [replay] table of replay.toml.

    A missing file or table gives the defaults; individual values of the
    wrong type or out of range fall back to their default.
    """
    if path is None:
        path = _repo_root() / "replay.toml"

    try:
        import tomllib
    except Exception as exc:  # pragma: no cover
        raise RuntimeError("tomllib unavailable; need Python 3.11+") from exc

    try:
        data: Any = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return ReplayConfig()

    table = data.get("replay")
    if not isinstance(table, dict):
        return ReplayConfig()

    defaults = ReplayConfig()

    frame_interval = table.get("frame_interval_ms")
    if (
        isinstance(frame_interval, bool)
        or not isinstance(frame_interval, int)
        or frame_interval <= 0
    ):
        frame_interval = defaults.frame_interval_ms

    return ReplayConfig(
        sample_interval_s=_positive_number(
            table.get("sample_interval_s"), defaults.sample_interval_s
        ),
        alert_duration_s=_alert_duration(
            table.get("alert_duration_s"), defaults.alert_duration_s
        ),
        frame_interval_ms=frame_interval,
    )
