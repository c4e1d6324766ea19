from __future__ import annotations

from dataclasses import dataclass

from PySide6 import QtGui, QtWidgets
from typing import Protocol, cast


@dataclass(frozen=True)
class ShortcutSpec:
    name: str
    key: str


# ---------------------------------------- #

SHORTCUTS = {
    "import_file": ShortcutSpec("Import", "Ctrl+O"),
    "replay": ShortcutSpec("Replay", "R"),
    "toggle_pause": ShortcutSpec("Pause", "Space"),
    "fullscreen": ShortcutSpec("Fullscreen", "F"),
    "quit": ShortcutSpec("Quit", "Ctrl+Q"),
}


# ---------------------------------------- #


class ShortcutHost(Protocol):
    def import_file(self) -> None: ...

    def replay(self) -> None: ...

    def toggle_pause(self) -> None: ...

    def toggle_fullscreen(self) -> None: ...

    def close(self) -> bool: ...


# ---------------------------------------- #


def shortcut_hint(action: str) -> str:
    spec = SHORTCUTS.get(action)
    return "" if spec is None else spec.key


# ---------------------------------------- #


def make_action(window: ShortcutHost, action: str, fn) -> QtGui.QAction:
    qw = cast(QtWidgets.QWidget, window)
    spec = SHORTCUTS[action]
    a = QtGui.QAction(spec.name, qw)
    a.setShortcut(QtGui.QKeySequence(spec.key))
    a.triggered.connect(fn)
    return a


# ---------------------------------------- #


def install_shortcuts(window: ShortcutHost) -> dict[str, QtGui.QAction]:
    """
    Creates one QAction per shortcut and adds it to the window so it fires
    regardless of focus. The actions are returned so the menu bar can reuse
    them.
    """
    qw = cast(QtWidgets.QWidget, window)
    handlers = {
        "import_file": window.import_file,
        "replay": window.replay,
        "toggle_pause": window.toggle_pause,
        "fullscreen": window.toggle_fullscreen,
        "quit": window.close,
    }

    actions: dict[str, QtGui.QAction] = {}
    for name, fn in handlers.items():
        a = make_action(window, name, fn)
        QtWidgets.QWidget.addAction(qw, a)
        actions[name] = a
    return actions
