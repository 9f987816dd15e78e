# -*- coding: utf-8 -*-
"""
Action Button Component - Reusable button with consistent styling.

Used by the wizard footer, login form and the dashboard/admin pages so
every action button shares one size and color scheme.
"""

from PyQt5.QtWidgets import QPushButton
from PyQt5.QtCore import Qt

from app.config import Config

_VARIANTS = {
    "primary": (Config.PRIMARY_COLOR, "white", "none", Config.PRIMARY_DARK),
    "secondary": ("#6B7280", "white", "none", "#4B5563"),
    "outline": ("#F0F7FF", Config.PRIMARY_COLOR, f"1px solid {Config.PRIMARY_COLOR}", "#E0EAFF"),
    "danger": (Config.ERROR_COLOR, "white", "none", "#991B1B"),
}


class ActionButton(QPushButton):
    """
    Reusable action button.

    Variants:
    - primary: main actions (Next, Submit, Sign In)
    - secondary: Previous, Back
    - outline: navigation entries on the dashboard
    - danger: Logout

    Usage:
        btn = ActionButton(tr("wizard.next"), variant="primary")
        btn = ActionButton(tr("button.logout"), variant="danger", width=100)
    """

    def __init__(
        self,
        text: str,
        variant: str = "primary",
        width: int = 120,
        height: int = 40,
        parent=None
    ):
        super().__init__(text, parent)
        self.variant = variant if variant in _VARIANTS else "primary"

        if width:
            self.setFixedWidth(width)
        self.setFixedHeight(height)
        self.setCursor(Qt.PointingHandCursor)
        self._apply_style()

    def _apply_style(self):
        background, color, border, hover = _VARIANTS[self.variant]
        self.setStyleSheet(f"""
            QPushButton {{
                background-color: {background};
                color: {color};
                border: {border};
                padding: 8px 12px;
                border-radius: 6px;
                font-size: 13px;
            }}
            QPushButton:hover {{
                background-color: {hover};
            }}
            QPushButton:disabled {{
                background-color: #D1D5DB;
                color: #F9FAFB;
            }}
        """)
