# -*- coding: utf-8 -*-
"""
Dashboard page - landing screen after login.
"""

from typing import Optional

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QFrame, QGraphicsDropShadowEffect
)
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QColor

from app.config import Config
from app.routes import ADMIN_PANEL_PATH, SUPER_ADMIN_PATH
from models.user import Role, Session
from services.translation_manager import tr
from ui.components.action_button import ActionButton


class DashboardPage(QWidget):
    """Greets the user and offers the entries their role may open."""

    new_quotation_requested = pyqtSignal()
    navigation_requested = pyqtSignal(str)
    logout_requested = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._setup_ui()

    def _setup_ui(self):
        self.setStyleSheet(f"background-color: {Config.BACKGROUND_COLOR};")

        layout = QVBoxLayout(self)
        layout.setAlignment(Qt.AlignCenter)

        card = QFrame()
        card.setObjectName("dashboard-card")
        card.setFixedWidth(520)
        card.setStyleSheet(f"""
            QFrame#dashboard-card {{
                background-color: {Config.CARD_BACKGROUND};
                border-radius: 12px;
            }}
        """)
        shadow = QGraphicsDropShadowEffect()
        shadow.setBlurRadius(20)
        shadow.setColor(QColor(0, 0, 0, 25))
        shadow.setOffset(0, 4)
        card.setGraphicsEffect(shadow)

        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(32, 28, 32, 28)
        card_layout.setSpacing(12)

        self.welcome_label = QLabel()
        self.welcome_label.setStyleSheet(f"color: {Config.TEXT_COLOR}; font-size: 18pt; font-weight: 700;")
        card_layout.addWidget(self.welcome_label)

        self.role_label = QLabel()
        self.role_label.setStyleSheet(f"color: {Config.TEXT_LIGHT};")
        card_layout.addWidget(self.role_label)
        card_layout.addSpacing(12)

        self.btn_new_quotation = ActionButton(tr("dashboard.new_quotation"), variant="primary", width=None, height=48)
        self.btn_new_quotation.clicked.connect(self.new_quotation_requested.emit)
        card_layout.addWidget(self.btn_new_quotation)

        admin_row = QHBoxLayout()
        self.btn_admin_panel = ActionButton(tr("dashboard.admin_panel"), variant="outline", width=None)
        self.btn_admin_panel.clicked.connect(lambda: self.navigation_requested.emit(ADMIN_PANEL_PATH))
        admin_row.addWidget(self.btn_admin_panel)

        self.btn_super_admin = ActionButton(tr("dashboard.super_admin"), variant="outline", width=None)
        self.btn_super_admin.clicked.connect(lambda: self.navigation_requested.emit(SUPER_ADMIN_PATH))
        admin_row.addWidget(self.btn_super_admin)
        card_layout.addLayout(admin_row)

        card_layout.addSpacing(8)
        self.btn_logout = ActionButton(tr("button.logout"), variant="danger", width=None)
        self.btn_logout.clicked.connect(self.logout_requested.emit)
        card_layout.addWidget(self.btn_logout)

        layout.addWidget(card)

    def refresh(self, session: Optional[Session] = None):
        """Update greeting and role-specific entries for the current session."""
        if session is None:
            self.welcome_label.setText("")
            self.role_label.setText("")
            self.btn_admin_panel.setVisible(False)
            self.btn_super_admin.setVisible(False)
            return

        identity = session.identity
        self.welcome_label.setText(tr("dashboard.welcome", name=identity.display_name))
        self.role_label.setText(tr("dashboard.role", role=identity.role.display_name))
        self.btn_admin_panel.setVisible(identity.role in (Role.ADMIN, Role.SUPER_ADMIN))
        self.btn_super_admin.setVisible(identity.role == Role.SUPER_ADMIN)
