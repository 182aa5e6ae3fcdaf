from PyQt6.QtWidgets import QDialog, QVBoxLayout, QHBoxLayout, QLabel, QTextEdit, QPushButton, QApplication
import traceback

class DetailedErrorDialog(QDialog):
    """Modal error report with the traceback available for copying."""

    def __init__(self, title, message, details, parent=None):
        super().__init__(parent)
        self.setWindowTitle(title)
        self.setMinimumSize(520, 300)

        layout = QVBoxLayout(self)

        msg_label = QLabel(message)
        msg_label.setWordWrap(True)
        msg_label.setStyleSheet("font-size: 14px; font-weight: bold; color: #c62828;")
        layout.addWidget(msg_label)

        self.details_box = QTextEdit()
        self.details_box.setReadOnly(True)
        self.details_box.setPlainText(details)
        self.details_box.setStyleSheet("font-family: Consolas, monospace; border: 1px solid #ddd;")
        layout.addWidget(self.details_box)

        btn_layout = QHBoxLayout()
        self.copy_btn = QPushButton("Copy Details")
        self.copy_btn.clicked.connect(self.copy_to_clipboard)
        btn_layout.addWidget(self.copy_btn)
        btn_layout.addStretch()

        close_btn = QPushButton("Close")
        close_btn.clicked.connect(self.accept)
        close_btn.setDefault(True)
        btn_layout.addWidget(close_btn)
        layout.addLayout(btn_layout)

    def copy_to_clipboard(self):
        QApplication.clipboard().setText(self.details_box.toPlainText())
        self.copy_btn.setText("Copied")

def format_details(exception):
    return "".join(traceback.format_exception(type(exception), exception, exception.__traceback__))

def show_error(parent, title, message, exception):
    dialog = DetailedErrorDialog(title, message, format_details(exception), parent)
    return dialog.exec()
