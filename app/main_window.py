# -*- coding: utf-8 -*-
"""
Main application window.

A page stack driven by the Navigator: pages never switch the stack
themselves, they ask the navigator for a path and the window shows
whatever page the guarded navigation lands on.
"""

from typing import Dict, Optional

from PyQt5.QtWidgets import QMainWindow, QStackedWidget, QShortcut, QWidget
from PyQt5.QtGui import QKeySequence

from .config import Config, Pages
from .navigator import Navigator
from .routes import DASHBOARD_PATH, HOME_PATH, QUOTATION_PATH
from controllers.login_controller import PROFILES, RoleLoginFlow, SessionRestorer
from models.user import Role
from services.api_auth_service import ApiAuthService
from services.quotation_service import QuotationService
from services.session_store import SessionStore
from ui.pages import AdminPanelPage, DashboardPage, LoginPage, SuperAdminPage, UnauthorizedPage
from ui.wizards.quotation import QuotationWizard
from utils.logger import get_logger

logger = get_logger(__name__)


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, session_store: Optional[SessionStore] = None,
                 auth_service: Optional[ApiAuthService] = None,
                 quotation_service: Optional[QuotationService] = None,
                 verify_session: Optional[bool] = None,
                 parent=None):
        super().__init__(parent)
        self.session_store = session_store or SessionStore()
        self.auth_service = auth_service or ApiAuthService()
        self.navigator = Navigator(self.session_store, self)

        self.login_flows: Dict[Role, RoleLoginFlow] = {
            role: RoleLoginFlow(profile, self.session_store, self.navigator,
                                self.auth_service, parent=self)
            for role, profile in PROFILES.items()
        }
        self.session_restorer = SessionRestorer(self.session_store, self.auth_service, parent=self)

        self._setup_window()
        self._create_widgets(quotation_service)
        self._setup_shortcuts()
        self._connect_signals()

        self.start(verify_session)

    def _setup_window(self):
        self.setWindowTitle(Config.APP_TITLE)
        self.setMinimumSize(Config.WINDOW_MIN_WIDTH, Config.WINDOW_MIN_HEIGHT)

    def _create_widgets(self, quotation_service: Optional[QuotationService]):
        self.stack = QStackedWidget()
        self.setCentralWidget(self.stack)

        self.quotation_wizard = QuotationWizard(
            quotation_service=quotation_service,
            session_provider=self.navigator.current_session,
        )

        self.pages: Dict[str, QWidget] = {
            Pages.LOGIN: LoginPage(self.login_flows[Role.USER]),
            Pages.ADMIN_LOGIN: LoginPage(self.login_flows[Role.ADMIN]),
            Pages.SUPER_ADMIN_LOGIN: LoginPage(self.login_flows[Role.SUPER_ADMIN]),
            Pages.DASHBOARD: DashboardPage(),
            Pages.QUOTATION: self.quotation_wizard,
            Pages.ADMIN_PANEL: AdminPanelPage(),
            Pages.SUPER_ADMIN: SuperAdminPage(),
            Pages.UNAUTHORIZED: UnauthorizedPage(),
        }
        for page in self.pages.values():
            self.stack.addWidget(page)

    def _setup_shortcuts(self):
        self.logout_shortcut = QShortcut(QKeySequence("Ctrl+Q"), self)
        self.logout_shortcut.activated.connect(self._handle_logout)

    def _connect_signals(self):
        self.navigator.location_changed.connect(self._on_location_changed)
        self.session_restorer.session_checked.connect(self._on_session_checked)
        self.navigator.register_reset_callback(self.quotation_wizard.reset_wizard)
        for flow in self.login_flows.values():
            self.navigator.register_reset_callback(flow.cancel)

        for page in self.pages.values():
            if hasattr(page, "navigation_requested"):
                page.navigation_requested.connect(self.navigator.navigate)
            if hasattr(page, "logout_requested"):
                page.logout_requested.connect(self._handle_logout)

        self.pages[Pages.DASHBOARD].new_quotation_requested.connect(self._start_new_quotation)
        self.quotation_wizard.dashboard_requested.connect(lambda: self.navigator.navigate(DASHBOARD_PATH))

    def start(self, verify_session: Optional[bool] = None):
        """Restore any stored session and show the landing page."""
        session = self.session_restorer.start(verify_session)
        if session:
            logger.info(f"Restored session for {session.identity.email}")
        self.navigator.navigate(HOME_PATH)

    def _on_session_checked(self, session):
        if session is not None:
            if self.navigator.current_page == Pages.DASHBOARD:
                self.pages[Pages.DASHBOARD].refresh(session)
            return
        # Token rejected: drop wizard state and re-guard wherever we are
        self.quotation_wizard.reset_wizard()
        self.navigator.navigate(self.navigator.current_path or HOME_PATH)

    def _on_location_changed(self, path: str, page_id: str):
        # A login left behind by navigating away must not sign anyone in
        for flow in self.login_flows.values():
            if flow.profile.page != page_id:
                flow.cancel()

        page = self.pages.get(page_id)
        if page is None:
            logger.error(f"No widget for page: {page_id}")
            return

        if hasattr(page, "refresh"):
            page.refresh(self.navigator.current_session())
        self.stack.setCurrentWidget(page)
        logger.debug(f"Showing {page_id} for {path}")

    def _start_new_quotation(self):
        self.quotation_wizard.reset_wizard()
        self.navigator.navigate(QUOTATION_PATH)

    def _handle_logout(self):
        if self.navigator.current_session() is None:
            return
        self.navigator.logout()

    def closeEvent(self, event):
        for flow in self.login_flows.values():
            flow.cancel()
            flow.wait_for_workers()
        self.session_restorer.wait_for_workers()
        self.quotation_wizard.wait_for_workers()
        logger.info("Application closing")
        event.accept()
