# -*- coding: utf-8 -*-
"""
Admin area pages.

The admin panel and the super admin console sit behind role checks; their
management screens are served elsewhere, so these pages only confirm who is
signed in and lead back out.
"""

from typing import Optional

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel
from PyQt5.QtCore import Qt, pyqtSignal

from app.config import Config
from app.routes import DASHBOARD_PATH
from models.user import Session
from services.translation_manager import tr
from ui.components.action_button import ActionButton


class AdminAreaPage(QWidget):
    """Landing page of an admin area."""

    navigation_requested = pyqtSignal(str)
    logout_requested = pyqtSignal()

    def __init__(self, title_key: str, subtitle_key: str, parent=None):
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(32, 28, 32, 28)
        layout.setSpacing(10)

        header = QHBoxLayout()
        self.title_label = QLabel(tr(title_key))
        self.title_label.setStyleSheet(f"color: {Config.TEXT_COLOR}; font-size: 18pt; font-weight: 700;")
        header.addWidget(self.title_label)
        header.addStretch()

        self.btn_back = ActionButton(tr("admin.back"), variant="secondary", width=170)
        self.btn_back.clicked.connect(lambda: self.navigation_requested.emit(DASHBOARD_PATH))
        header.addWidget(self.btn_back)

        self.btn_logout = ActionButton(tr("button.logout"), variant="danger", width=100)
        self.btn_logout.clicked.connect(self.logout_requested.emit)
        header.addWidget(self.btn_logout)
        layout.addLayout(header)

        subtitle = QLabel(tr(subtitle_key))
        subtitle.setStyleSheet(f"color: {Config.TEXT_LIGHT};")
        layout.addWidget(subtitle)

        self.user_label = QLabel()
        layout.addWidget(self.user_label)
        layout.addStretch()

    def refresh(self, session: Optional[Session] = None):
        if session is None:
            self.user_label.clear()
            return
        self.user_label.setText(
            tr("dashboard.role", role=session.identity.role.display_name)
            + f" ({session.identity.email})"
        )


class AdminPanelPage(AdminAreaPage):
    def __init__(self, parent=None):
        super().__init__("admin_panel.title", "admin_panel.subtitle", parent)


class SuperAdminPage(AdminAreaPage):
    def __init__(self, parent=None):
        super().__init__("super_admin.title", "super_admin.subtitle", parent)
