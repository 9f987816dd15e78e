# -*- coding: utf-8 -*-
"""
Step validation service for the Quotation Wizard.

Validates one step's own data without UI coupling. The wizard engine never
calls this; the Next button does, before asking the engine to advance.
"""

import re
from typing import Any, Dict, List, Tuple

from models.quotation import QuotationStep
from services.translation_manager import tr

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_UAE_PHONE_RE = re.compile(r"^(\+971|0)?[25]\d{8}$")
_NAME_RE = re.compile(r"^[A-Za-z\s]+$")


class StepValidator:
    """Validates quotation step data."""

    REQUIRED_FIELDS: Dict[QuotationStep, List[str]] = {
        QuotationStep.SCOPE_OF_WORK: ["serviceLevel"],
        QuotationStep.MATERIAL_OPTIONS: ["materialSource", "materialType"],
        QuotationStep.WORKTOP_LAYOUT: ["worktopLayout"],
        QuotationStep.DESIGN_OPTIONS: ["sinkCategory"],
        QuotationStep.TIMELINE: ["timeline"],
        QuotationStep.PROJECT_TYPE: ["projectType"],
        QuotationStep.CONTACT_INFO: ["name", "email", "contactNumber", "location"],
    }

    @staticmethod
    def is_required(step_id: QuotationStep, field_name: str) -> bool:
        return field_name in StepValidator.REQUIRED_FIELDS.get(QuotationStep(step_id), [])

    @staticmethod
    def validate_step(step_id: QuotationStep, data: Dict[str, Any]) -> Tuple[bool, str]:
        """
        Validate the data recorded for one step.

        Args:
            step_id: Step being validated
            data: That step's slice of the wizard data

        Returns:
            Tuple of (is_valid, error_message)
        """
        step_id = QuotationStep(step_id)
        data = data or {}

        errors = []
        for field_name in StepValidator.REQUIRED_FIELDS.get(step_id, []):
            if _is_blank(data.get(field_name)):
                errors.append(tr("validation.required", field=tr(f"field.{field_name}")))

        if step_id == QuotationStep.DESIGN_OPTIONS:
            if data.get("sinkCategory") == "client" and _is_blank(data.get("sinkType")):
                errors.append(tr("validation.sink_type"))

        elif step_id == QuotationStep.CONTACT_INFO:
            errors.extend(StepValidator._contact_format_errors(data))

        if errors:
            return False, "\n".join(errors)
        return True, ""

    @staticmethod
    def _contact_format_errors(data: Dict[str, Any]) -> List[str]:
        errors = []

        for field_name in ("name", "designerName"):
            value = (data.get(field_name) or "").strip()
            if value and (len(value) < 2 or not _NAME_RE.match(value)):
                errors.append(tr("validation.name", field=tr(f"field.{field_name}")))

        for field_name in ("email", "designerEmail"):
            value = (data.get(field_name) or "").strip()
            if value and not _EMAIL_RE.match(value):
                errors.append(tr("validation.email"))

        for field_name in ("contactNumber", "designerContact"):
            value = (data.get(field_name) or "").replace(" ", "")
            if value and not _UAE_PHONE_RE.match(value):
                errors.append(tr("validation.phone"))

        return errors


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False
