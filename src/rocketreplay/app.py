# rocketreplay/app.py

import sys

from PySide6 import QtWidgets

from rocketreplay.ui.main_window import MainWindow
from rocketreplay.ui.style import APP_QSS


def main() -> int:
    """
    Application entry point.

    Responsibilities:
    - Create QApplication
    - Apply global stylesheet
    - Create and show the MainWindow
    - Open the telemetry file given on the command line, if any
    - Run the Qt event loop
    """
    app = QtWidgets.QApplication(sys.argv)
    app.setApplicationName("RocketReplay")

    if APP_QSS:
        app.setStyleSheet(APP_QSS)

    w = MainWindow()
    w.resize(1400, 700)
    w.show()

    args = app.arguments()[1:]
    if args:
        w.open_file(args[0])

    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
