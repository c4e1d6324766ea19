from __future__ import annotations

from PySide6 import QtCore, QtGui, QtWidgets

from rocketreplay.input.shortcuts import install_shortcuts, shortcut_hint
from rocketreplay.replay.context import ReplayContext
from rocketreplay.scene.view import SceneView
from rocketreplay.telemetry.builtin import builtin_timeline
from rocketreplay.telemetry.importer import TelemetryImporter
from rocketreplay.telemetry.timeline import Timeline
from rocketreplay.ui.import_dialog import ImportDialog
from rocketreplay.util.replay_config import ReplayConfig, load_replay_config


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, config: ReplayConfig | None = None):
        super().__init__()
        self.setWindowTitle("Rocket Replay")

        self._config = config or load_replay_config()
        self._context = ReplayContext(builtin_timeline())
        self._finish_reported = False

        self.scene = SceneView()
        self.setCentralWidget(self.scene)
        self.scene.set_timeline(self._context.timeline)

        # Importer
        self._importer = TelemetryImporter(config=self._config, parent=self)
        self._importer.timeline.connect(self.on_timeline)
        self._importer.error.connect(self.on_error)
        self._importer.info.connect(self.on_info)

        # Menu bar + shortcuts share the same actions
        actions = install_shortcuts(self)
        file_menu = self.menuBar().addMenu("&File")
        file_menu.addAction(actions["import_file"])
        file_menu.addSeparator()
        file_menu.addAction(actions["quit"])
        replay_menu = self.menuBar().addMenu("&Replay")
        replay_menu.addAction(actions["replay"])
        replay_menu.addAction(actions["toggle_pause"])
        view_menu = self.menuBar().addMenu("&View")
        view_menu.addAction(actions["fullscreen"])

        self.statusBar().showMessage(
            f"Built-in descent. Press {shortcut_hint('import_file')} to import telemetry."
        )

        # Render loop
        self._clock = QtCore.QElapsedTimer()
        self._clock.start()
        self._frame_timer = QtCore.QTimer(self)
        self._frame_timer.setInterval(self._config.frame_interval_ms)
        self._frame_timer.timeout.connect(self.on_frame)
        self._frame_timer.start()

    # ---------------------------------------- #

    @property
    def context(self) -> ReplayContext:
        return self._context

    # ---------------------------------------- #

    @QtCore.Slot()
    def on_frame(self) -> None:
        dt = self._clock.restart() / 1000.0
        status = self._context.advance(dt)

        timeline = self._context.timeline
        attempt = None
        i = timeline.episode_at(self._context.elapsed_time)
        if i is not None and len(timeline.episodes) > 1:
            attempt = (i + 1, len(timeline.episodes))

        self.scene.hud.set_state(
            status, self._context.elapsed_time, attempt=attempt, paused=self._context.paused
        )
        self.scene.set_status(status)

        if self._context.finished and timeline.episodes and not self._finish_reported:
            self._finish_reported = True
            self.statusBar().showMessage(
                f"Replay finished. Press {shortcut_hint('replay')} to replay."
            )

    @QtCore.Slot(object)
    def on_timeline(self, timeline: Timeline) -> None:
        self._context.replace_timeline(timeline)
        self._finish_reported = False
        self.scene.set_timeline(timeline)

    @QtCore.Slot(str)
    def on_error(self, msg: str) -> None:
        self.statusBar().showMessage(msg, 5000)
        QtWidgets.QMessageBox.critical(self, "Import failed", msg)

    @QtCore.Slot(str)
    def on_info(self, msg: str) -> None:
        print(msg)
        self.statusBar().showMessage(msg, 5000)

    # ---------------------------------------- #

    def open_file(self, path: str) -> None:
        self._importer.load(path)

    def import_file(self) -> None:
        dialog = ImportDialog(self)
        dialog.file_selected.connect(self.open_file)
        dialog.exec()

    def replay(self) -> None:
        self._context.reset()
        self._finish_reported = False
        self.scene.follow_camera.snap(self._context.current().position)

    def toggle_pause(self) -> None:
        paused = self._context.toggle_pause()
        self.statusBar().showMessage("Paused" if paused else "Playing", 2000)

    def toggle_fullscreen(self) -> None:
        if self.isFullScreen():
            self.showNormal()
        else:
            self.showFullScreen()

    # ---------------------------------------- #

    def closeEvent(self, event: QtGui.QCloseEvent) -> None:
        self._frame_timer.stop()
        super().closeEvent(event)
