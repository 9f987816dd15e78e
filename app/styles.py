# -*- coding: utf-8 -*-
"""
Luxone branding stylesheet for PyQt5.
"""

from .config import Config


def get_stylesheet() -> str:
    """Generate the main application stylesheet with Luxone branding."""
    return f"""
    /* ===== Global Styles ===== */
    QWidget {{
        font-family: "{Config.FONT_FAMILY}", sans-serif;
        font-size: {Config.FONT_SIZE}pt;
        color: {Config.TEXT_COLOR};
    }}

    QMainWindow {{
        background-color: {Config.BACKGROUND_COLOR};
    }}

    /* ===== Input Fields ===== */
    QLineEdit, QTextEdit, QSpinBox {{
        background-color: white;
        border: 1px solid {Config.INPUT_BORDER};
        border-radius: 6px;
        padding: 6px 10px;
        min-height: 22px;
    }}

    QLineEdit:focus, QTextEdit:focus, QSpinBox:focus {{
        border: 2px solid {Config.PRIMARY_COLOR};
        padding: 5px 9px;
    }}

    QLineEdit:disabled {{
        background-color: #F1F5F9;
        color: #94A3B8;
        border-color: {Config.BORDER_COLOR};
    }}

    /* ===== ComboBox ===== */
    QComboBox {{
        background-color: white;
        border: 1px solid {Config.INPUT_BORDER};
        border-radius: 6px;
        padding: 6px 10px;
        min-height: 22px;
        min-width: 220px;
    }}

    QComboBox:hover {{
        border-color: {Config.PRIMARY_COLOR};
    }}

    /* ===== Tables ===== */
    QTableWidget {{
        background-color: white;
        border: 1px solid {Config.BORDER_COLOR};
        gridline-color: {Config.BORDER_COLOR};
    }}

    QHeaderView::section {{
        background-color: {Config.BACKGROUND_COLOR};
        border: none;
        border-bottom: 1px solid {Config.BORDER_COLOR};
        padding: 6px;
        font-weight: 600;
    }}
    """
