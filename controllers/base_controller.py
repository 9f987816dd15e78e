# -*- coding: utf-8 -*-
"""
Base Controller
===============
Shared plumbing for controllers that run work off the GUI thread.

A controller exposes a loading flag (with a change signal for the UI) and
remembers the last user-facing error it reported.
"""

from dataclasses import dataclass
from typing import Any

from PyQt5.QtCore import QObject, pyqtSignal

from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class OperationResult:
    """Outcome of one background operation, handed back to the GUI thread."""
    success: bool
    data: Any = None
    message: str = ""

    @classmethod
    def ok(cls, data: Any = None) -> "OperationResult":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, message: str) -> "OperationResult":
        return cls(success=False, message=message)


class BaseController(QObject):
    """
    Base controller class.

    Signals:
        loading_changed(bool): emitted only when the flag actually flips
    """

    loading_changed = pyqtSignal(bool)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._loading = False
        self._last_error = ""

    @property
    def is_loading(self) -> bool:
        return self._loading

    @property
    def last_error(self) -> str:
        return self._last_error

    def _set_loading(self, loading: bool):
        if self._loading != loading:
            self._loading = loading
            self.loading_changed.emit(loading)

    def _set_error(self, error: str):
        self._last_error = error
        if error:
            logger.warning(f"{type(self).__name__}: {error}")

    def _log_operation(self, operation: str, **details):
        summary = ", ".join(f"{key}={value}" for key, value in details.items())
        logger.info(f"{type(self).__name__}.{operation}({summary})")
