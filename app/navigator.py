# -*- coding: utf-8 -*-
"""
Navigator - the single entry point for changing the visible page.

Every navigation re-reads the session from the SessionStore and runs the
guard against the target route before anything is shown.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional

from PyQt5.QtCore import QObject, pyqtSignal

from app.routes import (
    LOGIN_PATH, UNAUTHORIZED_PATH, find_route, login_path_for, normalize_path
)
from models.user import Session
from services.auth_guard import GuardDecision, evaluate
from services.session_store import SessionStore
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class NavigationResult:
    """Where a navigation request actually landed."""

    requested_path: str
    path: str
    page: str
    # None when the requested path matched no route
    decision: Optional[GuardDecision]

    @property
    def redirected(self) -> bool:
        return self.path != self.requested_path


class Navigator(QObject):
    """
    Guarded navigation over the route table.

    Signals:
        location_changed(path, page): emitted after every navigation
    """

    location_changed = pyqtSignal(str, str)

    def __init__(self, session_store: SessionStore, parent=None):
        super().__init__(parent)
        self._session_store = session_store
        self._reset_callbacks: List[Callable[[], None]] = []
        self._current_path: Optional[str] = None
        self._current_page: Optional[str] = None

    @property
    def current_path(self) -> Optional[str]:
        return self._current_path

    @property
    def current_page(self) -> Optional[str]:
        return self._current_page

    def current_session(self) -> Optional[Session]:
        return self._session_store.load()

    def register_reset_callback(self, callback: Callable[[], None]):
        """Register state to discard on logout (e.g. the quotation wizard)."""
        self._reset_callbacks.append(callback)

    def navigate(self, path: str) -> NavigationResult:
        requested = normalize_path(path)
        route = find_route(requested)

        if route is None:
            logger.info(f"No route for '{requested}', falling back to {LOGIN_PATH}")
            return self._land(requested, LOGIN_PATH, None)

        decision = evaluate(self._session_store.load(), route.requirement)

        if decision == GuardDecision.ALLOW:
            target = route.path
        elif decision == GuardDecision.DENY_UNAUTHENTICATED:
            target = login_path_for(requested)
            logger.info(f"'{requested}' requires login, redirecting to {target}")
        else:
            target = UNAUTHORIZED_PATH
            logger.warning(f"Access to '{requested}' forbidden for current role")

        return self._land(requested, target, decision)

    def logout(self) -> NavigationResult:
        """Clear the session, discard wizard state and return to login."""
        self._session_store.clear()
        for callback in self._reset_callbacks:
            callback()
        logger.info("User logged out")
        return self.navigate(LOGIN_PATH)

    def _land(self, requested: str, target: str,
              decision: Optional[GuardDecision]) -> NavigationResult:
        # Redirect targets are public routes, so no second guard pass is needed
        page = find_route(target).page
        self._current_path = target
        self._current_page = page

        logger.debug(f"Navigate {requested} -> {target} ({page})")
        self.location_changed.emit(target, page)
        return NavigationResult(requested_path=requested, path=target,
                                page=page, decision=decision)
