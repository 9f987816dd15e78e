# -*- coding: utf-8 -*-
"""Access denied page."""

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QLabel
from PyQt5.QtCore import Qt, pyqtSignal

from app.config import Config
from app.routes import DASHBOARD_PATH
from services.translation_manager import tr
from ui.components.action_button import ActionButton


class UnauthorizedPage(QWidget):
    """Shown when the session's role is not allowed on the requested screen."""

    navigation_requested = pyqtSignal(str)

    def __init__(self, parent=None):
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setAlignment(Qt.AlignCenter)
        layout.setSpacing(12)

        title = QLabel(tr("unauthorized.title"))
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(f"color: {Config.ERROR_COLOR}; font-size: 20pt; font-weight: 700;")
        layout.addWidget(title)

        message = QLabel(tr("unauthorized.message"))
        message.setAlignment(Qt.AlignCenter)
        message.setStyleSheet(f"color: {Config.TEXT_LIGHT};")
        layout.addWidget(message)

        self.btn_back = ActionButton(tr("unauthorized.back"), variant="primary", width=180)
        self.btn_back.clicked.connect(lambda: self.navigation_requested.emit(DASHBOARD_PATH))
        layout.addWidget(self.btn_back, 0, Qt.AlignCenter)

    def refresh(self, session=None):
        pass
