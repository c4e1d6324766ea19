from PySide6 import QtCore, QtWidgets

FILE_FILTER = "Telemetry CSV (*.csv *.txt);;All files (*)"


class ImportDialog(QtWidgets.QDialog):
    """Modal asking for the telemetry file to replay."""

    file_selected = QtCore.Signal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Import definitions from file ?")
        self.setModal(True)
        self.setMinimumWidth(520)

        intro = QtWidgets.QLabel("The definitions will be imported from the selected file.")
        intro.setWordWrap(True)

        self.path_edit = QtWidgets.QLineEdit()
        self.path_edit.setReadOnly(True)
        self.path_edit.setPlaceholderText("Import file")

        btn_browse = QtWidgets.QPushButton("Browse…")
        btn_browse.clicked.connect(self._browse)

        row = QtWidgets.QHBoxLayout()
        row.addWidget(self.path_edit, stretch=1)
        row.addWidget(btn_browse)

        buttons = QtWidgets.QDialogButtonBox(QtWidgets.QDialogButtonBox.StandardButton.Cancel)
        buttons.rejected.connect(self.reject)

        layout = QtWidgets.QVBoxLayout(self)
        layout.addWidget(intro)
        layout.addLayout(row)
        layout.addWidget(buttons)

    # ---------------------------------------- #

    def _browse(self) -> None:
        path, _ = QtWidgets.QFileDialog.getOpenFileName(
            self, "Import telemetry", "", FILE_FILTER
        )
        if not path:
            return

        self.path_edit.setText(path)
        self.file_selected.emit(path)
        self.accept()
