# -*- coding: utf-8 -*-
"""
Login Page - one form, parameterized by the role login flow it drives.
"""

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QLabel, QLineEdit, QFrame, QGraphicsDropShadowEffect, QHBoxLayout
)
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QColor, QFont, QPainter, QPaintEvent

from app.config import Config
from controllers.login_controller import PROFILES, RoleLoginFlow
from models.user import Session
from services.translation_manager import tr
from ui.components.action_button import ActionButton
from utils.logger import get_logger

logger = get_logger(__name__)


class LoginPage(QWidget):
    """Login card for one role."""

    navigation_requested = pyqtSignal(str)  # login path of another role

    def __init__(self, flow: RoleLoginFlow, parent=None):
        super().__init__(parent)
        self.flow = flow
        self.profile = flow.profile

        self._setup_ui()

        self.flow.loading_changed.connect(self._on_busy_changed)
        self.flow.login_failed.connect(self._show_error)
        self.flow.login_succeeded.connect(self._on_login_succeeded)

    def paintEvent(self, event: QPaintEvent):
        """Paint two-tone background"""
        painter = QPainter(self)
        mid_height = self.height() // 2
        painter.fillRect(0, 0, self.width(), mid_height, QColor(Config.PRIMARY_COLOR))
        painter.fillRect(0, mid_height, self.width(), self.height() - mid_height,
                         QColor(Config.BACKGROUND_COLOR))

    def _setup_ui(self):
        main_layout = QVBoxLayout(self)
        main_layout.setAlignment(Qt.AlignCenter)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.addWidget(self._create_login_card())

    def _create_login_card(self) -> QFrame:
        card = QFrame()
        card.setObjectName("login_card")
        card.setFixedWidth(420)
        card.setStyleSheet("""
            QFrame#login_card {
                background-color: white;
                border-radius: 12px;
            }
        """)

        shadow = QGraphicsDropShadowEffect()
        shadow.setBlurRadius(25)
        shadow.setColor(QColor(150, 150, 150, 40))
        shadow.setOffset(0, 3)
        card.setGraphicsEffect(shadow)

        card_layout = QVBoxLayout(card)
        card_layout.setSpacing(6)
        card_layout.setContentsMargins(32, 32, 32, 32)

        self.title_label = QLabel(tr(self.profile.title_key))
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setFont(QFont("", 14, QFont.Bold))
        self.title_label.setStyleSheet(f"color: {Config.TEXT_COLOR};")
        card_layout.addWidget(self.title_label)

        subtitle = QLabel(tr("login.subtitle"))
        subtitle.setAlignment(Qt.AlignCenter)
        subtitle.setWordWrap(True)
        subtitle.setStyleSheet(f"color: {Config.TEXT_LIGHT};")
        card_layout.addWidget(subtitle)
        card_layout.addSpacing(16)

        card_layout.addWidget(QLabel(tr("login.email")))
        self.email_input = QLineEdit()
        self.email_input.setPlaceholderText(tr("login.email_placeholder"))
        self.email_input.setFixedHeight(40)
        self.email_input.textChanged.connect(self._hide_error)
        self.email_input.returnPressed.connect(self._on_login)
        card_layout.addWidget(self.email_input)

        card_layout.addSpacing(8)
        card_layout.addWidget(QLabel(tr("login.password")))
        self.password_input = QLineEdit()
        self.password_input.setPlaceholderText(tr("login.password_placeholder"))
        self.password_input.setEchoMode(QLineEdit.Password)
        self.password_input.setFixedHeight(40)
        self.password_input.textChanged.connect(self._hide_error)
        self.password_input.returnPressed.connect(self._on_login)
        card_layout.addWidget(self.password_input)

        self.error_label = QLabel()
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(f"""
            color: {Config.ERROR_COLOR};
            background-color: {Config.ERROR_BACKGROUND};
            border-radius: 6px;
            padding: 8px;
        """)
        self.error_label.hide()
        card_layout.addSpacing(8)
        card_layout.addWidget(self.error_label)

        card_layout.addSpacing(12)
        self.login_button = ActionButton(tr("login.submit"), variant="primary", width=None, height=44)
        self.login_button.clicked.connect(self._on_login)
        card_layout.addWidget(self.login_button)

        card_layout.addSpacing(12)
        switch_row = QHBoxLayout()
        for role in sorted(PROFILES, key=lambda r: r.rank):
            if role == self.profile.role:
                continue
            profile = PROFILES[role]
            link = QLabel(f'<a href="{profile.login_path}">{tr("login.switch." + role.value)}</a>')
            link.setTextInteractionFlags(Qt.LinksAccessibleByMouse)
            link.linkActivated.connect(self.navigation_requested.emit)
            switch_row.addWidget(link, 0, Qt.AlignCenter)
        card_layout.addLayout(switch_row)

        return card

    def _on_login(self):
        """Handle login attempt"""
        self._hide_error()
        self.flow.submit(self.email_input.text(), self.password_input.text())

    def _on_busy_changed(self, busy: bool):
        self.login_button.setEnabled(not busy)
        self.email_input.setEnabled(not busy)
        self.password_input.setEnabled(not busy)
        self.login_button.setText(tr("login.submitting") if busy else tr("login.submit"))

    def _on_login_succeeded(self, session: Session):
        self._clear_form()

    def _show_error(self, message: str):
        self.error_label.setText(message)
        self.error_label.show()

    def _hide_error(self):
        if self.error_label.isVisible():
            self.error_label.hide()

    def _clear_form(self):
        self.email_input.clear()
        self.password_input.clear()
        self.error_label.hide()

    def refresh(self, session=None):
        """Called when the page becomes visible."""
        self.password_input.clear()
        self.email_input.setFocus()
