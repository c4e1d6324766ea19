from pathlib import Path

from PySide6 import QtCore

from rocketreplay.telemetry.reader import load_samples
from rocketreplay.telemetry.samples import TelemetryFormatError
from rocketreplay.telemetry.timeline import create_timeline
from rocketreplay.util.replay_config import ReplayConfig, load_replay_config


class TelemetryImporter(QtCore.QObject):
    """
    Turns a telemetry CSV file into a Timeline.

    A successful load emits ``timeline``; any failure emits ``error`` and
    nothing else, so the receiver keeps whatever it was replaying.
    """

    timeline = QtCore.Signal(object)
    error = QtCore.Signal(str)
    info = QtCore.Signal(str)

    # ---------------------------------------- #

    def __init__(self, config: ReplayConfig | None = None, parent=None):
        super().__init__(parent)
        self._config = config or load_replay_config()

    @property
    def config(self) -> ReplayConfig:
        return self._config

    # ---------------------------------------- #

    @QtCore.Slot(str)
    def load(self, path: str) -> None:
        p = Path(path)
        try:
            samples = load_samples(p)
        except TelemetryFormatError as e:
            self.error.emit(f"Malformed telemetry in {p.name}, {e}")
            return
        except (OSError, UnicodeDecodeError) as e:
            self.error.emit(f"Cannot read {p}: {e}")
            return

        timeline = create_timeline(
            samples,
            sample_interval=self._config.sample_interval_s,
            alert_duration=self._config.alert_duration_s,
        )

        if not samples:
            self.info.emit(f"{p.name} contains no telemetry samples")
        else:
            self.info.emit(
                f"Imported {len(samples)} samples, "
                f"{len(timeline.episodes)} flight attempt(s) from {p.name}"
            )
        self.timeline.emit(timeline)
