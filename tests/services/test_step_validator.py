# -*- coding: utf-8 -*-
"""
Tests for quotation step validation rules.
"""
import pytest

from models.quotation import QuotationStep
from services.wizard.step_validator import StepValidator


VALID_CONTACT = {
    "name": "Sara Ahmed",
    "email": "sara@example.com",
    "contactNumber": "050 123 4567",
    "location": "Dubai Marina",
}


def test_required_fields_per_step():
    valid, message = StepValidator.validate_step(QuotationStep.MATERIAL_OPTIONS, {})
    assert not valid
    assert "Material Source is required." in message
    assert len(message.splitlines()) == 2


def test_whitespace_counts_as_blank():
    valid, _ = StepValidator.validate_step(QuotationStep.SCOPE_OF_WORK, {"serviceLevel": "  "})
    assert not valid


def test_optional_fields_are_not_required():
    valid, message = StepValidator.validate_step(
        QuotationStep.MATERIAL_OPTIONS, {"materialSource": "luxone", "materialType": "quartz"}
    )
    assert valid
    assert message == ""


def test_sink_type_required_only_for_client_sink():
    step = QuotationStep.DESIGN_OPTIONS
    assert StepValidator.validate_step(step, {"sinkCategory": "luxone"})[0]
    assert not StepValidator.validate_step(step, {"sinkCategory": "client"})[0]
    assert StepValidator.validate_step(step, {"sinkCategory": "client", "sinkType": "top-mounted"})[0]


def test_valid_contact():
    assert StepValidator.validate_step(QuotationStep.CONTACT_INFO, VALID_CONTACT) == (True, "")


@pytest.mark.parametrize("field, value", [
    ("name", "S"),
    ("name", "Sara 2"),
    ("email", "sara@example"),
    ("email", "sara example.com"),
    ("contactNumber", "12345"),
    ("contactNumber", "0701234567"),
    ("designerEmail", "designer@"),
    ("designerContact", "+44 20 7946 0958"),
    ("designerName", "X"),
])
def test_contact_format_errors(field, value):
    data = dict(VALID_CONTACT, **{field: value})
    valid, message = StepValidator.validate_step(QuotationStep.CONTACT_INFO, data)
    assert not valid
    assert message


@pytest.mark.parametrize("number", ["0501234567", "+971501234567", "501234567", "+971 2 1234 5678"])
def test_uae_phone_formats(number):
    data = dict(VALID_CONTACT, contactNumber=number)
    assert StepValidator.validate_step(QuotationStep.CONTACT_INFO, data)[0]


def test_is_required():
    assert StepValidator.is_required(QuotationStep.CONTACT_INFO, "email")
    assert not StepValidator.is_required(QuotationStep.CONTACT_INFO, "designerEmail")
    assert StepValidator.is_required("timeline", "timeline")
