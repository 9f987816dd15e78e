# -*- coding: utf-8 -*-
"""
Smoke tests to ensure the application window wires together.
These tests drive the real pages through the main window.
"""
import pytest

from app.config import Pages
from models.user import Role


@pytest.fixture
def make_window(qtbot, session_store, fake_auth, fake_quotations):
    from app.main_window import MainWindow

    def _make(verify_session=False):
        window = MainWindow(
            session_store=session_store,
            auth_service=fake_auth,
            quotation_service=fake_quotations,
            verify_session=verify_session,
        )
        qtbot.addWidget(window)
        return window

    return _make


def current_page(window):
    for page_id, page in window.pages.items():
        if window.stack.currentWidget() is page:
            return page_id
    return None


def test_imports():
    """Test that all main modules can be imported."""
    from app import MainWindow, get_stylesheet
    from controllers import RoleLoginFlow
    from services import ApiAuthService, QuotationService, SessionStore
    from ui.wizards.quotation import QuotationWizard

    assert "QMainWindow" in get_stylesheet()
    assert MainWindow and RoleLoginFlow and ApiAuthService and QuotationService
    assert SessionStore and QuotationWizard


def test_starts_on_login_without_session(make_window):
    window = make_window()

    assert window.navigator.current_path == "/login"
    assert current_page(window) == Pages.LOGIN


def test_restores_stored_session(make_window, login_as):
    login_as(Role.ADMIN)
    window = make_window()

    assert current_page(window) == Pages.DASHBOARD
    dashboard = window.pages[Pages.DASHBOARD]
    assert not dashboard.btn_admin_panel.isHidden()
    assert dashboard.btn_super_admin.isHidden()


def test_admin_cannot_open_super_admin_console(make_window, login_as):
    login_as(Role.ADMIN)
    window = make_window()

    window.navigator.navigate("/super-admin")

    assert current_page(window) == Pages.UNAUTHORIZED
    window.pages[Pages.UNAUTHORIZED].btn_back.click()
    assert current_page(window) == Pages.DASHBOARD


def test_login_page_signs_in(qtbot, make_window, session_store):
    window = make_window()
    page = window.pages[Pages.LOGIN]

    page.email_input.setText("customer@example.com")
    page.password_input.setText("secret")
    with qtbot.waitSignal(page.flow.login_succeeded, timeout=3000):
        page.login_button.click()

    assert session_store.load().role == Role.USER
    assert current_page(window) == Pages.DASHBOARD


def test_login_page_shows_rejection(qtbot, make_window, session_store):
    window = make_window()
    window.navigator.navigate("/admin-login")
    page = window.pages[Pages.ADMIN_LOGIN]

    page.email_input.setText("admin@luxone.ae")
    page.password_input.setText("nope")
    with qtbot.waitSignal(page.flow.login_failed, timeout=3000):
        page.login_button.click()

    assert page.error_label.text() == "Invalid credentials"
    assert session_store.load() is None
    assert current_page(window) == Pages.ADMIN_LOGIN


def test_rejected_token_at_startup_returns_to_login(qtbot, make_window, login_as, session_store):
    login_as(Role.USER, token="expired")
    window = make_window(verify_session=True)

    assert current_page(window) == Pages.DASHBOARD
    with qtbot.waitSignal(window.session_restorer.session_checked, timeout=3000):
        pass

    assert session_store.load() is None
    assert current_page(window) == Pages.LOGIN


def test_leaving_login_page_discards_pending_login(qtbot, make_window, fake_auth, session_store):
    window = make_window()
    page = window.pages[Pages.LOGIN]
    gate = fake_auth.hold()

    page.email_input.setText("customer@example.com")
    page.password_input.setText("secret")
    page.login_button.click()
    assert page.flow.is_busy

    page.navigation_requested.emit("/admin-login")
    assert not page.flow.is_busy
    assert page.email_input.isEnabled()

    gate.set()
    page.flow.wait_for_workers()
    qtbot.wait(100)

    assert session_store.load() is None
    assert current_page(window) == Pages.ADMIN_LOGIN


def sign_in(qtbot, window, email):
    page = window.pages[Pages.LOGIN]
    page.email_input.setText(email)
    page.password_input.setText("secret")
    with qtbot.waitSignal(page.flow.login_succeeded, timeout=3000):
        page.login_button.click()


def test_quotation_then_logout(qtbot, make_window, login_as, session_store, fake_quotations):
    login_as(Role.USER)
    window = make_window()
    wizard = window.quotation_wizard

    window.pages[Pages.DASHBOARD].btn_new_quotation.click()
    assert current_page(window) == Pages.QUOTATION

    wizard.active_step().set_field("serviceLevel", "fabrication")
    wizard.btn_next.click()
    assert wizard.navigator.current_step == 2

    wizard.navigator.submit()
    assert wizard.navigator.is_submitted

    wizard.btn_logout.click()

    assert session_store.load() is None
    assert current_page(window) == Pages.LOGIN
    assert not wizard.navigator.is_submitted
    assert wizard.navigator.current_step == 1
    assert wizard.navigator.step_data("scope_of_work") == {}

    sign_in(qtbot, window, "customer@example.com")
    assert current_page(window) == Pages.DASHBOARD

    window.pages[Pages.DASHBOARD].btn_new_quotation.click()

    assert current_page(window) == Pages.QUOTATION
    assert wizard.navigator.current_step == 1
    assert not wizard.navigator.is_submitted
    for step_id in wizard.navigator.step_ids:
        assert wizard.navigator.step_data(step_id) == {}
    assert wizard.active_step().collect_data()["serviceLevel"] == ""
