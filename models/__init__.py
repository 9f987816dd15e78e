# -*- coding: utf-8 -*-
"""
Luxone Quotation Data Models
"""

from .user import Role, Identity, Session
from .quotation import QuotationStep, QUOTATION_STEPS

__all__ = [
    "Role",
    "Identity",
    "Session",
    "QuotationStep",
    "QUOTATION_STEPS",
]
