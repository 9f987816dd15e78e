# -*- coding: utf-8 -*-
"""
Login Controller
================
One login flow, parameterized per role.

The credential request runs on a worker thread. Its result comes back through
a queued signal and is applied on the GUI thread, tagged with a sequence
number so a cancelled or superseded request can never touch the session.
The startup re-check of a stored token runs the same way.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Set

from PyQt5.QtCore import QThread, pyqtSignal

from app.config import Config, Pages
from app.navigator import Navigator
from app.routes import (
    ADMIN_DASHBOARD_PATH, ADMIN_LOGIN_PATH, HOME_PATH, LOGIN_PATH,
    SUPER_ADMIN_LOGIN_PATH, SUPER_ADMIN_PATH
)
from controllers.base_controller import BaseController, OperationResult
from models.user import Role, Session
from services.api_auth_service import ApiAuthService
from services.error_mapper import map_exception
from services.exceptions import (
    ApiException, AuthenticationError, NetworkException, SessionStorageError
)
from services.session_store import SessionStore
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class LoginProfile:
    """Per-role login parameters."""
    role: Role
    endpoint: str
    redirect_path: str
    login_path: str
    page: str
    title_key: str


PROFILES: Dict[Role, LoginProfile] = {
    Role.USER: LoginProfile(
        role=Role.USER,
        endpoint=Config.USER_LOGIN_ENDPOINT,
        redirect_path=HOME_PATH,
        login_path=LOGIN_PATH,
        page=Pages.LOGIN,
        title_key="login.title.user",
    ),
    Role.ADMIN: LoginProfile(
        role=Role.ADMIN,
        endpoint=Config.ADMIN_LOGIN_ENDPOINT,
        redirect_path=ADMIN_DASHBOARD_PATH,
        login_path=ADMIN_LOGIN_PATH,
        page=Pages.ADMIN_LOGIN,
        title_key="login.title.admin",
    ),
    Role.SUPER_ADMIN: LoginProfile(
        role=Role.SUPER_ADMIN,
        endpoint=Config.SUPER_ADMIN_LOGIN_ENDPOINT,
        redirect_path=SUPER_ADMIN_PATH,
        login_path=SUPER_ADMIN_LOGIN_PATH,
        page=Pages.SUPER_ADMIN_LOGIN,
        title_key="login.title.super_admin",
    ),
}


class LoginWorker(QThread):
    """Background worker for one credential verification."""

    result_ready = pyqtSignal(int, object)  # sequence, OperationResult

    def __init__(self, sequence: int, profile: LoginProfile, email: str, password: str,
                 auth_service: ApiAuthService, parent=None):
        super().__init__(parent)
        self.sequence = sequence
        self.profile = profile
        self.email = email
        self.password = password
        self.auth_service = auth_service

    def run(self):
        """Run credential verification in background."""
        try:
            session = self.auth_service.authenticate(
                self.profile.endpoint, self.email, self.password, self.profile.role
            )
            result = OperationResult.ok(session)
        except (ApiException, NetworkException) as e:
            result = OperationResult.fail(map_exception(e, "login"))
        except Exception as e:
            logger.error(f"Unexpected error during login: {e}", exc_info=True)
            result = OperationResult.fail(tr("error.unexpected"))

        self.result_ready.emit(self.sequence, result)


class RoleLoginFlow(BaseController):
    """
    Login flow for one role.

    Signals:
        login_succeeded(Session): session persisted and redirect done
        login_failed(str): user-facing reason; session untouched
        loading_changed(bool): a request is in flight
    """

    login_succeeded = pyqtSignal(object)
    login_failed = pyqtSignal(str)

    def __init__(self, profile: LoginProfile, session_store: SessionStore,
                 navigator: Navigator, auth_service: Optional[ApiAuthService] = None,
                 parent=None):
        super().__init__(parent)
        self.profile = profile
        self._session_store = session_store
        self._navigator = navigator
        self._auth_service = auth_service or ApiAuthService()

        self._sequence = 0
        self._active_sequence: Optional[int] = None
        self._workers: Set[LoginWorker] = set()

    @property
    def is_busy(self) -> bool:
        return self._active_sequence is not None

    def submit(self, email: str, password: str) -> bool:
        """
        Start a login attempt.

        Returns:
            False if a previous attempt of this flow is still in flight
        """
        if self.is_busy:
            logger.debug(f"{self.profile.role.value} login already in flight, ignoring submit")
            return False

        email = (email or "").strip()
        if not email or not password:
            message = tr("error.login.missing_fields")
            self._set_error(message)
            self.login_failed.emit(message)
            return False

        self._sequence += 1
        self._active_sequence = self._sequence
        self._log_operation("submit", role=self.profile.role.value, email=email)

        worker = LoginWorker(self._sequence, self.profile, email, password,
                             self._auth_service, parent=self)
        worker.result_ready.connect(self._on_result)
        worker.finished.connect(lambda w=worker: self._workers.discard(w))
        worker.finished.connect(worker.deleteLater)
        self._workers.add(worker)

        self._set_loading(True)
        worker.start()
        return True

    def cancel(self):
        """Discard the pending attempt. Its result will be ignored."""
        if self._active_sequence is None:
            return
        logger.info(f"{self.profile.role.value} login #{self._active_sequence} cancelled")
        self._active_sequence = None
        self._set_loading(False)

    def wait_for_workers(self, msecs: int = 5000):
        """Block until background workers finish (used on shutdown)."""
        for worker in list(self._workers):
            worker.wait(msecs)

    def _on_result(self, sequence: int, result: OperationResult):
        if sequence != self._active_sequence:
            logger.debug(f"Discarding stale login result #{sequence}")
            return

        self._active_sequence = None
        self._set_loading(False)

        if not result.success:
            self._set_error(result.message)
            self.login_failed.emit(result.message)
            return

        session: Session = result.data
        try:
            self._session_store.save(session.identity, session.token, session.user_type)
        except SessionStorageError as e:
            logger.error(f"Login for {session.identity.email} not kept: {e.message}")
            message = tr("error.session.storage")
            self._set_error(message)
            self.login_failed.emit(message)
            return
        logger.info(f"Login succeeded for {session.identity.email} via {self.profile.role.value} flow")

        self._navigator.navigate(self.profile.redirect_path)
        self.login_succeeded.emit(session)


class SessionCheckWorker(QThread):
    """Background re-check of a stored token."""

    result_ready = pyqtSignal(object, object)  # checked Session, Identity or exception

    def __init__(self, session: Session, auth_service: ApiAuthService, parent=None):
        super().__init__(parent)
        self.session = session
        self.auth_service = auth_service

    def run(self):
        try:
            outcome = self.auth_service.verify(self.session.token)
        except (ApiException, NetworkException) as e:
            outcome = e
        except Exception as e:
            logger.error(f"Unexpected error verifying session: {e}", exc_info=True)
            outcome = NetworkException(str(e), original_error=e, context="verify")

        self.result_ready.emit(self.session, outcome)


class SessionRestorer(BaseController):
    """
    Restores the stored session at startup.

    The stored session is used straight away; when verification is on, its
    token is re-checked in the background. A rejected token clears the store.
    When the service cannot be reached the session is kept so the app can
    start offline.

    Signals:
        session_checked(object): the verified Session, or None if it was rejected
    """

    session_checked = pyqtSignal(object)

    def __init__(self, session_store: SessionStore,
                 auth_service: Optional[ApiAuthService] = None, parent=None):
        super().__init__(parent)
        self._session_store = session_store
        self._auth_service = auth_service or ApiAuthService()
        self._workers: Set[SessionCheckWorker] = set()

    def start(self, verify: Optional[bool] = None) -> Optional[Session]:
        """Load the stored session and, if asked, start verifying it."""
        session = self._session_store.load()
        if session is None:
            return None

        if verify is None:
            verify = Config.VERIFY_SESSION_ON_STARTUP
        if not verify:
            return session

        worker = SessionCheckWorker(session, self._auth_service, parent=self)
        worker.result_ready.connect(self._on_result)
        worker.finished.connect(lambda w=worker: self._workers.discard(w))
        worker.finished.connect(worker.deleteLater)
        self._workers.add(worker)

        self._set_loading(True)
        worker.start()
        return session

    def wait_for_workers(self, msecs: int = 5000):
        for worker in list(self._workers):
            worker.wait(msecs)

    def _on_result(self, checked: Session, outcome):
        self._set_loading(False)

        current = self._session_store.load()
        if current is None or current.token != checked.token:
            logger.debug("Session changed while it was being verified, ignoring result")
            return

        if isinstance(outcome, AuthenticationError):
            logger.info(f"Stored session rejected ({outcome.status_code}), clearing")
            self._session_store.clear()
            self.session_checked.emit(None)
            return

        if isinstance(outcome, Exception):
            logger.warning(f"Could not verify stored session, keeping it: {outcome}")
            self.session_checked.emit(current)
            return

        if outcome != current.identity:
            try:
                current = self._session_store.save(outcome, current.token, current.user_type)
            except SessionStorageError as e:
                logger.warning(f"Refreshed identity not stored: {e.message}")
        self.session_checked.emit(current)
