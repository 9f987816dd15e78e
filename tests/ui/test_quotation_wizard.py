# -*- coding: utf-8 -*-
"""
Tests for the Quotation Wizard widget.

Tests cover:
- Wizard initialization
- Next/Previous with validation
- Submission and the quote summary
- Reset
- Sending on a worker thread
- WhatsApp contact links
"""
import pytest
from PyQt5.QtCore import QUrl, QUrlQuery

from app.config import Config
from models.quotation import QuotationStep
from models.user import Identity, Role, Session
from services.exceptions import NetworkException
from ui.wizards.quotation import QuotationWizard, QuoteSummaryView
from ui.wizards.quotation.steps import PROJECT_TYPES
from ui.wizards.quotation.summary_view import whatsapp_url

VALID_STEPS = [
    {"serviceLevel": "fabrication-delivery"},
    {"materialSource": "luxone", "materialType": "quartz", "materialColor": "Golden River"},
    {"worktopLayout": "l-shape"},
    {"sinkCategory": "client", "sinkType": "under-mounted", "hobCutOutAddon": True},
    {"timeline": "3-6weeks"},
    {"projectType": PROJECT_TYPES[0][0]},
    {"name": "Sara Ahmed", "email": "sara@example.com",
     "contactNumber": "0501234567", "location": "Dubai Marina"},
]

SESSION = Session(
    identity=Identity(email="sara@example.com", role=Role.USER),
    token="jwt-token",
    user_type=Role.USER,
)


@pytest.fixture
def wizard(qtbot, fake_quotations):
    wizard = QuotationWizard(quotation_service=fake_quotations, session_provider=lambda: SESSION)
    qtbot.addWidget(wizard)
    return wizard


def fill_and_next(wizard, values):
    step = wizard.active_step()
    for name, value in values.items():
        step.set_field(name, value)
    wizard.btn_next.click()


def complete(qtbot, wizard):
    """Fill every step and wait until the quotation has been sent."""
    for values in VALID_STEPS[:-1]:
        fill_and_next(wizard, values)
    with qtbot.waitSignal(wizard.submission_finished, timeout=3000) as blocker:
        fill_and_next(wizard, VALID_STEPS[-1])
    return blocker.args


class TestWizardInitialization:

    def test_wizard_has_seven_steps(self, wizard):
        assert len(wizard.steps) == 7
        assert wizard.navigator.current_step == 1

    def test_progress_labels(self, wizard):
        assert wizard.progress_label.text() == "Step 1 of 7"
        assert wizard.percent_label.text() == "14% Complete"
        assert not wizard.btn_previous.isEnabled()


class TestNavigation:

    def test_next_blocked_by_missing_fields(self, wizard, warnings_shown):
        wizard.btn_next.click()

        assert wizard.navigator.current_step == 1
        assert warnings_shown
        assert "Service Level is required." in warnings_shown[-1]

    def test_next_records_and_advances(self, wizard):
        fill_and_next(wizard, VALID_STEPS[0])

        assert wizard.navigator.current_step == 2
        assert wizard.navigator.step_data(QuotationStep.SCOPE_OF_WORK.value)["serviceLevel"] == \
            "fabrication-delivery"
        assert wizard.progress_label.text() == "Step 2 of 7"

    def test_previous_keeps_entered_data(self, wizard):
        fill_and_next(wizard, VALID_STEPS[0])
        wizard.btn_previous.click()

        assert wizard.navigator.current_step == 1
        step = wizard.active_step()
        assert step.collect_data()["serviceLevel"] == "fabrication-delivery"

    def test_edits_are_recorded_before_next(self, wizard):
        wizard.active_step().set_field("serviceLevel", "fabrication")
        assert wizard.navigator.step_data(QuotationStep.SCOPE_OF_WORK.value) == {
            "serviceLevel": "fabrication"
        }

    def test_last_step_shows_submit(self, wizard):
        for values in VALID_STEPS[:-1]:
            fill_and_next(wizard, values)

        assert wizard.navigator.current_step == 7
        assert wizard.btn_next.text() == "Get My Quote"


class TestSubmission:

    def test_submit_shows_summary(self, qtbot, wizard, fake_quotations):
        complete(qtbot, wizard)

        assert wizard.navigator.is_submitted
        assert wizard.step_container.currentWidget() is wizard.summary_view
        assert wizard.footer.isHidden()

        reference = wizard.context.reference_number
        assert wizard.summary_view.reference_number == reference
        assert reference in wizard.summary_view.reference_label.text()

        data, quote_id, token = fake_quotations.submissions[0]
        assert quote_id == reference
        assert token == "jwt-token"
        assert data["email"] == "sara@example.com"
        assert data["materialType"] == "quartz"

    def test_summary_renders_labels(self, qtbot, wizard):
        complete(qtbot, wizard)

        lines = wizard.summary_view.section_lines(QuotationStep.MATERIAL_OPTIONS.value)
        assert lines["Material Type"] == "Quartz"
        assert lines["Material Source"] == "Luxone Own Material"

        design = wizard.summary_view.section_lines(QuotationStep.DESIGN_OPTIONS.value)
        assert design["Hob Cut Out"] == "Yes"
        assert "Drain Grooves" not in design

    def test_submission_failure_keeps_quote(self, qtbot, warnings_shown, fake_quotations):
        fake_quotations.error = NetworkException("down")
        wizard = QuotationWizard(quotation_service=fake_quotations)
        qtbot.addWidget(wizard)

        reference, delivered = complete(qtbot, wizard)

        assert not delivered
        assert wizard.navigator.is_submitted
        assert reference == wizard.context.reference_number
        assert any(reference in message for message in warnings_shown)
        assert fake_quotations.submissions[0][2] is None

    def test_dashboard_button(self, wizard, qtbot):
        complete(qtbot, wizard)
        with qtbot.waitSignal(wizard.dashboard_requested):
            wizard.summary_view.btn_dashboard.click()

    def test_reset_after_submit(self, qtbot, wizard):
        complete(qtbot, wizard)
        wizard.reset_wizard()

        assert wizard.navigator.current_step == 1
        assert not wizard.navigator.is_submitted
        assert not wizard.footer.isHidden()
        assert wizard.active_step().collect_data()["serviceLevel"] == ""


class TestBackgroundSend:

    def test_summary_shown_while_sending(self, qtbot, wizard, fake_quotations):
        gate = fake_quotations.hold()
        for values in VALID_STEPS:
            fill_and_next(wizard, values)

        assert wizard.step_container.currentWidget() is wizard.summary_view
        assert wizard.summary_view.reference_number == wizard.context.reference_number

        with qtbot.waitSignal(wizard.submission_finished, timeout=3000) as blocker:
            gate.set()
        assert blocker.args == [wizard.context.reference_number, True]

    def test_failure_after_reset_shows_no_warning(self, qtbot, wizard, fake_quotations, warnings_shown):
        fake_quotations.error = NetworkException("down")
        gate = fake_quotations.hold()
        for values in VALID_STEPS:
            fill_and_next(wizard, values)
        reference = wizard.context.reference_number
        wizard.reset_wizard()

        with qtbot.waitSignal(wizard.submission_finished, timeout=3000) as blocker:
            gate.set()

        assert blocker.args == [reference, False]
        assert warnings_shown == []
        assert wizard.navigator.current_step == 1


def test_summary_view_copies_data(qtbot):
    view = QuoteSummaryView()
    qtbot.addWidget(view)
    data = {QuotationStep.TIMELINE.value: {"timeline": "asap-2weeks"}}

    view.show_quotation("LUX-2026-10-ABCDE", data)
    data[QuotationStep.TIMELINE.value]["timeline"] = "6weeks-plus"

    assert view.section_lines(QuotationStep.TIMELINE.value) == {"Timeline": "ASAP to 2 Weeks"}


def test_whatsapp_url_quotes_reference():
    url = whatsapp_url("+971 58 581 5601", "LUX-2026-10-ABCDE")

    assert url.host() == "wa.me"
    assert url.path() == "/971585815601"
    text = QUrlQuery(url).queryItemValue("text", QUrl.FullyDecoded)
    assert "LUX-2026-10-ABCDE" in text


def test_whatsapp_button_opens_chat(qtbot, monkeypatch):
    opened = []
    monkeypatch.setattr(QuoteSummaryView, "_open_url", lambda self, url: opened.append(url))
    view = QuoteSummaryView()
    qtbot.addWidget(view)

    view.btn_whatsapp_uae.click()
    assert opened == []

    view.show_quotation("LUX-2026-10-ABCDE", {})
    view.btn_whatsapp_uae.click()

    assert len(opened) == 1
    assert opened[0].path() == "/" + "".join(c for c in Config.WHATSAPP_UAE if c.isdigit())
