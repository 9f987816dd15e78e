# -*- coding: utf-8 -*-
"""
Quotation Context - state of one quotation attempt.

Extends WizardContext with the quotation step sequence, the LUX quote
reference and a flattened view of the entered data for submission.
"""

import random
import string
from datetime import datetime
from typing import Any, Dict

from app.config import Config
from models.quotation import QUOTATION_STEPS
from ui.wizards.framework import WizardContext

_REFERENCE_ALPHABET = string.ascii_uppercase + string.digits


class QuotationContext(WizardContext):
    """Context for the quotation wizard."""

    def __init__(self):
        super().__init__([step.value for step in QUOTATION_STEPS])

    def _generate_reference_number(self) -> str:
        """
        Format: LUX-YYYY-MM-XXXXX
        Example: LUX-2026-03-7K2QD
        """
        now = datetime.now()
        suffix = "".join(random.choices(_REFERENCE_ALPHABET, k=5))
        return f"{Config.QUOTE_PREFIX}-{now.year}-{now.month:02d}-{suffix}"

    def flattened_data(self) -> Dict[str, Any]:
        """All step slices merged in step order into one form."""
        data: Dict[str, Any] = {}
        for step_id in self.step_ids:
            data.update(self.get_step_data(step_id))
        return data

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["data"] = self.flattened_data()
        return result
