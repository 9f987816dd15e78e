# -*- coding: utf-8 -*-
"""Centralized error dialogs for the UI layer."""

from PyQt5.QtWidgets import QMessageBox, QWidget

from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)


class ErrorHandler:
    """Shows user-facing problems in a modal dialog."""

    @staticmethod
    def show_warning(parent: QWidget, message: str, title: str = None):
        logger.debug(f"Warning dialog: {message}")
        QMessageBox.warning(parent, title or tr("dialog.warning"), message)
