# -*- coding: utf-8 -*-
"""
Base Wizard - Abstract base class for wizards.

Provides the wizard shell:
- Header with title, "Step X of Y", percent complete and logout
- Step container (one page per step plus the summary page)
- Previous / Next-or-Submit footer
- Validation of the active step before it is left forward
"""

from typing import Dict, List, Optional
from abc import abstractmethod

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QFrame, QStackedWidget, QProgressBar
)
from PyQt5.QtCore import pyqtSignal
from PyQt5.QtGui import QFont

from app.config import Config
from .base_step import ABCQWidgetMeta, BaseStep, StepValidationResult
from .error_boundary import ErrorBoundary
from .step_navigator import StepNavigator
from .wizard_context import WizardContext
from ui.components.action_button import ActionButton
from ui.error_handler import ErrorHandler
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)


class BaseWizard(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for wizards.

    Subclasses must implement:
    - create_context(): build a fresh context (called again on every reset)
    - create_steps(): step widgets in step order
    - create_summary_view(): widget shown once submitted
    - show_summary(): fill the summary view from the submitted context
    """

    wizard_submitted = pyqtSignal(str)  # reference number
    logout_requested = pyqtSignal()

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)

        self.navigator = StepNavigator(self.create_context, parent=self)
        self.steps: List[BaseStep] = self.create_steps()
        self._steps_by_id: Dict[str, BaseStep] = {step.step_id: step for step in self.steps}
        self._boundaries: Dict[str, ErrorBoundary] = {
            step.step_id: ErrorBoundary(step.get_step_title(), parent=self)
            for step in self.steps
        }
        self._visible_step: Optional[BaseStep] = None

        missing = set(self.navigator.step_ids) - set(self._steps_by_id)
        if missing:
            raise ValueError(f"No step widget for: {sorted(missing)}")

        self.summary_view = self.create_summary_view()

        self._setup_ui()

        for step in self.steps:
            step.step_data_changed.connect(
                lambda data, step_id=step.step_id: self.navigator.record_step_data(step_id, data)
            )
            step.advance_requested.connect(self._handle_next)
            step.retreat_requested.connect(self._handle_previous)

        self.navigator.step_changed.connect(self._on_step_changed)
        self.navigator.submitted.connect(self._on_submitted)
        self.navigator.state_reset.connect(self._on_state_reset)

        self._refresh()

    # =========================================================================
    # Abstract Methods
    # =========================================================================

    @abstractmethod
    def create_context(self) -> WizardContext:
        """Build a fresh wizard context."""

    @abstractmethod
    def create_steps(self) -> List[BaseStep]:
        """Create the step widgets."""

    @abstractmethod
    def create_summary_view(self) -> QWidget:
        """Create the view shown after submission."""

    @abstractmethod
    def show_summary(self):
        """Fill the summary view from the submitted context."""

    # =========================================================================
    # Optional Methods
    # =========================================================================

    def get_wizard_title(self) -> str:
        return tr("wizard.title")

    def get_submit_button_text(self) -> str:
        return tr("wizard.submit")

    def on_submit(self):
        """Called once after the wizard flipped to submitted."""
        pass

    # =========================================================================
    # Public API
    # =========================================================================

    @property
    def context(self) -> WizardContext:
        return self.navigator.context

    def active_step(self) -> BaseStep:
        return self._steps_by_id[self.navigator.active_step_id()]

    def reset_wizard(self):
        """Discard all entered data and return to the first step."""
        self.navigator.reset()

    # =========================================================================
    # UI Setup
    # =========================================================================

    def _setup_ui(self):
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        main_layout.addWidget(self._create_header())

        separator = QFrame()
        separator.setFrameShape(QFrame.HLine)
        separator.setStyleSheet(f"background-color: {Config.BORDER_COLOR};")
        separator.setFixedHeight(1)
        main_layout.addWidget(separator)

        self.step_container = QStackedWidget()
        for step in self.steps:
            self.step_container.addWidget(step)
        self.step_container.addWidget(self.summary_view)
        main_layout.addWidget(self.step_container, 1)

        self.footer = self._create_footer()
        main_layout.addWidget(self.footer)

    def _create_header(self) -> QWidget:
        header = QWidget()
        header.setStyleSheet(f"background-color: {Config.CARD_BACKGROUND};")

        layout = QVBoxLayout(header)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(10)

        title_row = QHBoxLayout()
        self.title_label = QLabel(self.get_wizard_title())
        title_font = QFont()
        title_font.setPointSize(14)
        title_font.setBold(True)
        self.title_label.setFont(title_font)
        title_row.addWidget(self.title_label)
        title_row.addStretch()

        self.btn_logout = ActionButton(tr("button.logout"), variant="danger", width=100)
        self.btn_logout.clicked.connect(self.logout_requested.emit)
        title_row.addWidget(self.btn_logout)
        layout.addLayout(title_row)

        self.progress_widget = QWidget()
        progress_layout = QHBoxLayout(self.progress_widget)
        progress_layout.setContentsMargins(0, 0, 0, 0)
        progress_layout.setSpacing(8)

        self.progress_label = QLabel()
        progress_layout.addWidget(self.progress_label)

        self.progress_bar = QProgressBar()
        self.progress_bar.setMaximum(100)
        self.progress_bar.setTextVisible(False)
        self.progress_bar.setFixedHeight(6)
        self.progress_bar.setStyleSheet(f"""
            QProgressBar {{
                border: none;
                background-color: {Config.BORDER_COLOR};
                border-radius: 3px;
            }}
            QProgressBar::chunk {{
                background-color: {Config.PRIMARY_COLOR};
                border-radius: 3px;
            }}
        """)
        progress_layout.addWidget(self.progress_bar, 1)

        self.percent_label = QLabel()
        progress_layout.addWidget(self.percent_label)

        layout.addWidget(self.progress_widget)
        return header

    def _create_footer(self) -> QWidget:
        footer = QWidget()
        footer.setStyleSheet(f"background-color: {Config.CARD_BACKGROUND};")

        layout = QHBoxLayout(footer)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        self.btn_previous = ActionButton(tr("wizard.previous"), variant="secondary")
        self.btn_previous.clicked.connect(self._handle_previous)
        layout.addWidget(self.btn_previous)

        layout.addStretch()

        self.btn_next = ActionButton(tr("wizard.next"), variant="primary", width=140)
        self.btn_next.clicked.connect(self._handle_next)
        layout.addWidget(self.btn_next)

        return footer

    # =========================================================================
    # Navigation Handlers
    # =========================================================================

    def _handle_previous(self):
        self.navigator.retreat()

    def _handle_next(self):
        if self.navigator.is_submitted:
            return

        step = self.active_step()
        boundary = self._boundaries[step.step_id]

        data = boundary.protect(step.collect_data, "reading fields")()
        if data is None:
            return
        self.navigator.record_step_data(step.step_id, data)

        result = boundary.protect(step.validate, "validation")()
        if result is None:
            return
        if not result.is_valid:
            self._on_validation_failed(result)
            return

        if self.navigator.is_last_step():
            self._handle_submit()
        else:
            self.navigator.advance()

    def _handle_submit(self):
        if self.navigator.submit():
            self.on_submit()

    # =========================================================================
    # Event Handlers
    # =========================================================================

    def _on_step_changed(self, old_step: int, new_step: int):
        self._refresh()

    def _on_submitted(self, reference_number: str):
        self._refresh()
        self.wizard_submitted.emit(reference_number)

    def _on_state_reset(self):
        self._visible_step = None
        self._refresh()

    def _refresh(self):
        """Render whatever the navigator says is active."""
        submitted = self.navigator.is_submitted
        self.footer.setVisible(not submitted)
        self.progress_widget.setVisible(not submitted)

        if submitted:
            self._hide_visible_step()
            self.show_summary()
            self.step_container.setCurrentWidget(self.summary_view)
            return

        step = self.active_step()
        if step is not self._visible_step:
            self._hide_visible_step()
            self._boundaries[step.step_id].protect(step.on_show, "showing step")(
                self.navigator.step_data(step.step_id)
            )
            self._visible_step = step
        self.step_container.setCurrentWidget(step)

        self._update_progress()
        self._update_navigation_buttons()

    def _hide_visible_step(self):
        if self._visible_step is not None:
            self._boundaries[self._visible_step.step_id].protect(
                self._visible_step.on_hide, "hiding step"
            )()
            self._visible_step = None

    def _update_progress(self):
        current = self.navigator.current_step
        total = self.navigator.total_steps
        percentage = self.navigator.progress_percentage()

        self.progress_label.setText(tr("wizard.step_of", current=current, total=total))
        self.percent_label.setText(tr("wizard.percent_complete", percent=percentage))
        self.progress_bar.setValue(percentage)

    def _update_navigation_buttons(self):
        self.btn_previous.setEnabled(self.navigator.can_retreat())
        if self.navigator.is_last_step():
            self.btn_next.setText(self.get_submit_button_text())
        else:
            self.btn_next.setText(tr("wizard.next"))

    def _on_validation_failed(self, result: StepValidationResult):
        message = "\n".join(f"• {error}" for error in result.errors)
        logger.debug(f"Step {self.navigator.active_step_id()} not valid: {result.errors}")
        ErrorHandler.show_warning(self, message)
