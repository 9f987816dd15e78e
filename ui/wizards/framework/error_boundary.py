# -*- coding: utf-8 -*-
"""
Error Boundary for Wizard Steps.

Catches exceptions raised by step lifecycle calls (showing a step, reading
its fields) so a faulty step cannot leave the wizard half updated.
"""

from typing import Optional, Callable
from functools import wraps

from PyQt5.QtWidgets import QWidget
from PyQt5.QtCore import pyqtSignal, QObject

from services.translation_manager import tr
from ui.error_handler import ErrorHandler
from utils.logger import get_logger

logger = get_logger(__name__)


class ErrorBoundary(QObject):
    """
    Error boundary for wizard steps.

    Wraps step methods with error handling to prevent crashes.
    """

    error_occurred = pyqtSignal(str, str)  # error_type, error_message

    def __init__(self, step_name: str, parent: Optional[QWidget] = None,
                 show_dialog: bool = True):
        """
        Args:
            step_name: Name of the step being protected
            parent: Parent widget for error dialogs
            show_dialog: Whether failures open a warning dialog
        """
        super().__init__(parent)
        self.step_name = step_name
        self.parent_widget = parent
        self.show_dialog = show_dialog
        self.error_count = 0
        self.last_error: Optional[Exception] = None

    def protect(self, func: Callable, operation_name: str = "operation") -> Callable:
        """
        Wrap a function with the boundary.

        The wrapper returns None when the call raised.
        """
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                self._handle_error(e, operation_name)
                return None

        return wrapper

    def _handle_error(self, error: Exception, operation: str):
        self.error_count += 1
        self.last_error = error

        logger.error(f"Error in {self.step_name} during {operation}: {error}", exc_info=True)
        self.error_occurred.emit(type(error).__name__, str(error))

        if self.show_dialog and self.parent_widget:
            ErrorHandler.show_warning(self.parent_widget, tr("error.step.failed"))
