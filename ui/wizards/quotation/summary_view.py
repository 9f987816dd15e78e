# -*- coding: utf-8 -*-
"""
Quote summary shown once a quotation has been submitted.

Read-only: it receives a copy of the entered data and the quote reference.
From here the customer can go back to the dashboard or open a WhatsApp chat
whose first message quotes the reference.
"""

import copy
import re
from typing import Any, Dict, Optional

from PyQt5.QtWidgets import QFrame, QHBoxLayout, QLabel, QScrollArea, QVBoxLayout, QWidget
from PyQt5.QtCore import Qt, QUrl, QUrlQuery, pyqtSignal
from PyQt5.QtGui import QDesktopServices, QFont

from app.config import Config
from models.quotation import QUOTATION_STEPS
from services.translation_manager import tr
from ui.components.action_button import ActionButton
from ui.wizards.quotation.steps import display_value


def whatsapp_url(number: str, reference_number: str) -> QUrl:
    """wa.me link to `number` with a first message quoting the reference."""
    url = QUrl(Config.WHATSAPP_URL + re.sub(r"\D", "", number))
    query = QUrlQuery()
    query.addQueryItem("text", tr("summary.whatsapp_message", reference=reference_number))
    url.setQuery(query)
    return url


class QuoteSummaryView(QWidget):
    """Summary of a submitted quotation."""

    dashboard_requested = pyqtSignal()

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.reference_number: Optional[str] = None
        self._step_data: Dict[str, Dict[str, Any]] = {}
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 20, 24, 20)
        layout.setSpacing(12)

        self.title_label = QLabel(tr("summary.title"))
        title_font = QFont()
        title_font.setPointSize(18)
        title_font.setBold(True)
        self.title_label.setFont(title_font)
        layout.addWidget(self.title_label)

        self.reference_label = QLabel()
        self.reference_label.setStyleSheet(f"color: {Config.PRIMARY_COLOR}; font-weight: bold;")
        self.reference_label.setTextInteractionFlags(Qt.TextSelectableByMouse)
        layout.addWidget(self.reference_label)

        thanks = QLabel(tr("summary.thanks"))
        thanks.setStyleSheet(f"color: {Config.TEXT_LIGHT};")
        layout.addWidget(thanks)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.NoFrame)
        self.sections_widget = QWidget()
        self.sections_layout = QVBoxLayout(self.sections_widget)
        self.sections_layout.setAlignment(Qt.AlignTop)
        scroll.setWidget(self.sections_widget)
        layout.addWidget(scroll, 1)

        contact_label = QLabel(tr("summary.whatsapp_title"))
        contact_label.setStyleSheet("font-weight: bold;")
        layout.addWidget(contact_label)

        contact_row = QHBoxLayout()
        self.btn_whatsapp_uae = ActionButton(
            tr("summary.whatsapp.uae", number=Config.WHATSAPP_UAE), variant="outline", width=None
        )
        self.btn_whatsapp_uae.clicked.connect(lambda: self.contact_on_whatsapp(Config.WHATSAPP_UAE))
        contact_row.addWidget(self.btn_whatsapp_uae)

        self.btn_whatsapp_india = ActionButton(
            tr("summary.whatsapp.india", number=Config.WHATSAPP_INDIA), variant="outline", width=None
        )
        self.btn_whatsapp_india.clicked.connect(lambda: self.contact_on_whatsapp(Config.WHATSAPP_INDIA))
        contact_row.addWidget(self.btn_whatsapp_india)
        contact_row.addStretch()
        layout.addLayout(contact_row)

        self.btn_dashboard = ActionButton(tr("summary.back_to_dashboard"), variant="primary", width=180)
        self.btn_dashboard.clicked.connect(self.dashboard_requested.emit)
        layout.addWidget(self.btn_dashboard, 0, Qt.AlignRight)

    def show_quotation(self, reference_number: str, step_data: Dict[str, Dict[str, Any]]):
        """Render a submitted quotation. The data is copied, never kept by reference."""
        self.reference_number = reference_number
        self._step_data = copy.deepcopy(step_data)
        self.reference_label.setText(tr("summary.reference", reference=reference_number))
        self._render_sections()

    def contact_on_whatsapp(self, number: str):
        if not self.reference_number:
            return
        self._open_url(whatsapp_url(number, self.reference_number))

    def _open_url(self, url: QUrl):
        QDesktopServices.openUrl(url)

    def section_lines(self, step_id: str) -> Dict[str, str]:
        """Field label to display text for one step, skipping empty values."""
        lines = {}
        for name, value in self._step_data.get(step_id, {}).items():
            if value in (None, "", {}, []) or value is False:
                continue
            lines[tr(f"field.{name}")] = display_value(step_id, name, value)
        return lines

    def _render_sections(self):
        while self.sections_layout.count():
            item = self.sections_layout.takeAt(0)
            if item.widget():
                item.widget().deleteLater()

        rendered = 0
        for step in QUOTATION_STEPS:
            lines = self.section_lines(step.value)
            if not lines:
                continue
            self.sections_layout.addWidget(self._create_section(tr(f"step.{step.value}.title"), lines))
            rendered += 1

        if not rendered:
            self.sections_layout.addWidget(QLabel(tr("summary.empty")))

    def _create_section(self, title: str, lines: Dict[str, str]) -> QFrame:
        card = QFrame()
        card.setStyleSheet(f"""
            QFrame {{
                background-color: {Config.CARD_BACKGROUND};
                border: 1px solid {Config.BORDER_COLOR};
                border-radius: 8px;
            }}
            QLabel {{ border: none; }}
        """)
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(16, 12, 16, 12)

        heading = QLabel(title)
        heading.setStyleSheet("font-weight: bold;")
        card_layout.addWidget(heading)

        for label, text in lines.items():
            row = QLabel(f"{label}: {text}")
            row.setWordWrap(True)
            card_layout.addWidget(row)
        return card
