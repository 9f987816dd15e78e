# -*- coding: utf-8 -*-
"""
Base Step - Abstract base class for wizard steps.

A step is a view over its own slice of the wizard data. It never touches
the wizard state directly: it receives data through populate_data() and
reports through signals.

Subclasses implement:
- setup_ui(): Create the step's UI
- validate(): Validate step data
- collect_data(): Collect data from UI
- populate_data(): Populate UI with data
"""

from typing import List, Dict, Any, Optional
from abc import ABCMeta, abstractmethod
from dataclasses import dataclass, field

from PyQt5.QtWidgets import QWidget, QVBoxLayout
from PyQt5.QtCore import pyqtSignal


@dataclass
class StepValidationResult:
    """Result of step validation."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)

    def add_error(self, message: str):
        """Add an error message."""
        self.errors.append(message)
        self.is_valid = False


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class BaseStep(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for wizard steps.

    Signals:
        step_data_changed(dict): the user edited one or more fields
        advance_requested(): the step asks the wizard to go forward
        retreat_requested(): the step asks the wizard to go back
    """

    step_data_changed = pyqtSignal(dict)
    advance_requested = pyqtSignal()
    retreat_requested = pyqtSignal()

    def __init__(self, step_id: str, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.step_id = step_id
        self._is_initialized = False
        # Set while populate_data() writes into widgets, so edits are not echoed back
        self._populating = False

        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(24, 20, 24, 20)
        self.main_layout.setSpacing(16)

    def initialize(self):
        """Build the UI the first time the step is shown."""
        if not self._is_initialized:
            self.setup_ui()
            self._is_initialized = True

    def on_show(self, data: Dict[str, Any]):
        """Called when the step becomes the active one."""
        self.initialize()
        self._populating = True
        try:
            self.populate_data(data)
        finally:
            self._populating = False

    def on_hide(self):
        """Called when another step becomes active."""
        pass

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def setup_ui(self):
        """Create all widgets and layouts. Called once."""

    @abstractmethod
    def validate(self) -> StepValidationResult:
        """Validate the step's own data."""

    @abstractmethod
    def collect_data(self) -> Dict[str, Any]:
        """Read the current field values from the UI."""

    @abstractmethod
    def populate_data(self, data: Dict[str, Any]):
        """Show previously recorded data (empty dict for a fresh step)."""

    # =========================================================================
    # Optional Methods
    # =========================================================================

    def get_step_title(self) -> str:
        return self.__class__.__name__

    def get_step_description(self) -> str:
        return ""

    # =========================================================================
    # Helper Methods
    # =========================================================================

    def emit_data_changed(self, data: Dict[str, Any]):
        """Report an edit unless the UI is being populated."""
        if not self._populating:
            self.step_data_changed.emit(data)
