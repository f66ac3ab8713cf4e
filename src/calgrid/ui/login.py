from __future__ import annotations

from typing import Tuple

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
)

from ..data import EventStoreClient, EventStoreError
from ..utils.qt import TaskRunner


class LoginDialog(QDialog):
    """Signs in against the calendar server before the main window opens."""

    def __init__(self, *, client: EventStoreClient, app_name: str) -> None:
        super().__init__()
        self.setObjectName("loginDialog")
        self.client = client
        self.runner = TaskRunner()
        self.setWindowTitle(f"{app_name} - Sign in")
        self.setModal(True)
        self.setMinimumWidth(360)

        layout = QVBoxLayout(self)
        header = QLabel("Sign in to continue")
        header.setObjectName("title")
        header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(header)

        self.status_label = QLabel("")
        self.status_label.setObjectName("statusLabel")
        self.status_label.setWordWrap(True)
        layout.addWidget(self.status_label)

        self.username_input = QLineEdit()
        self.username_input.setPlaceholderText("Username")
        layout.addWidget(self.username_input)

        self.password_input = QLineEdit()
        self.password_input.setPlaceholderText("Password")
        self.password_input.setEchoMode(QLineEdit.EchoMode.Password)
        layout.addWidget(self.password_input)

        button_row = QHBoxLayout()
        self.sign_in_button = QPushButton("Sign In")
        self.sign_in_button.clicked.connect(self._sign_in)
        button_row.addWidget(self.sign_in_button)

        self.sign_up_button = QPushButton("Create Account")
        self.sign_up_button.setObjectName("secondaryButton")
        self.sign_up_button.clicked.connect(self._sign_up)
        button_row.addWidget(self.sign_up_button)
        layout.addLayout(button_row)

        cancel_box = QDialogButtonBox(QDialogButtonBox.StandardButton.Cancel)
        cancel_box.rejected.connect(self.reject)
        layout.addWidget(cancel_box)

    # ------------------------------------------------------------------ helpers

    def _set_status(self, message: str, *, is_error: bool = False) -> None:
        color = "#dc2626" if is_error else "#15803d"
        self.status_label.setStyleSheet(f"color: {color};")
        self.status_label.setText(message)

    def _set_busy(self, busy: bool) -> None:
        self.sign_in_button.setEnabled(not busy)
        self.sign_up_button.setEnabled(not busy)

    def _collect_credentials(self) -> Tuple[str, str]:
        username = self.username_input.text().strip()
        password = self.password_input.text()
        if not username or not password:
            raise ValueError("Provide both username and password.")
        return username, password

    def _handle_error(self, exc: Exception) -> None:
        self._set_busy(False)
        detail = exc.detail if isinstance(exc, EventStoreError) and exc.detail else str(exc)
        self._set_status(detail, is_error=True)

    # ------------------------------------------------------------------ handlers

    def _sign_in(self) -> None:
        try:
            username, password = self._collect_credentials()
        except ValueError as exc:
            self._set_status(str(exc), is_error=True)
            return
        self._set_busy(True)
        self._set_status("Signing in…")

        def done(_token: str) -> None:
            self._set_busy(False)
            self.accept()

        self.runner.submit(self.client.sign_in, username, password, on_success=done, on_error=self._handle_error)

    def _sign_up(self) -> None:
        try:
            username, password = self._collect_credentials()
        except ValueError as exc:
            self._set_status(str(exc), is_error=True)
            return
        self._set_busy(True)

        def done(_message: str) -> None:
            self._set_busy(False)
            self._set_status("Account created. You can sign in now.")

        self.runner.submit(self.client.sign_up, username, password, on_success=done, on_error=self._handle_error)
