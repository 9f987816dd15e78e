# -*- coding: utf-8 -*-
"""
Quotation step sequence.

The wizard walks these steps in declaration order.
"""

from enum import Enum
from typing import List


class QuotationStep(str, Enum):
    SCOPE_OF_WORK = "scope_of_work"
    MATERIAL_OPTIONS = "material_options"
    WORKTOP_LAYOUT = "worktop_layout"
    DESIGN_OPTIONS = "design_options"
    TIMELINE = "timeline"
    PROJECT_TYPE = "project_type"
    CONTACT_INFO = "contact_info"


QUOTATION_STEPS: List[QuotationStep] = list(QuotationStep)
