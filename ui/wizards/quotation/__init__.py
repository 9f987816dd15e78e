# -*- coding: utf-8 -*-
"""
Quotation Wizard Package.

This package contains:
- QuotationContext: state of one quotation attempt
- FormStep: field-driven step widget used for all seven steps
- QuoteSummaryView: read-only summary shown after submission
- QuotationWizard: the wizard itself
"""

from .quotation_context import QuotationContext
from .quotation_wizard import QuotationWizard
from .summary_view import QuoteSummaryView

__all__ = [
    'QuotationContext',
    'QuotationWizard',
    'QuoteSummaryView'
]
