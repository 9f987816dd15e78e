# -*- coding: utf-8 -*-
"""
Luxone Quotation UI Components
"""

from .action_button import ActionButton

__all__ = [
    "ActionButton",
]
