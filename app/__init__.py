# -*- coding: utf-8 -*-
"""
Luxone Quotation Application Core Module
"""

from .config import Config

# MainWindow pulls in the whole UI, so it is imported lazily to keep
# `from app.config import ...` free of import cycles.
__all__ = ["Config", "MainWindow", "get_stylesheet"]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "MainWindow":
        from .main_window import MainWindow
        return MainWindow
    elif name == "get_stylesheet":
        from .styles import get_stylesheet
        return get_stylesheet
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
