# -*- coding: utf-8 -*-
"""
Shared fixtures for the Luxone quotation tests.
"""
import os
import sys
import tempfile
import threading
from pathlib import Path

# Must be set before Qt or app.config are imported
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("LUXQUOTE_DATA_DIR", tempfile.mkdtemp(prefix="luxquote-tests-"))
os.environ["VERIFY_SESSION_ON_STARTUP"] = "false"

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
from PyQt5.QtCore import QSettings

from models.user import Identity, Role, Session
from services.exceptions import AuthenticationError
from services.session_store import SessionStore
from ui.error_handler import ErrorHandler


IDENTITIES = {
    Role.USER: Identity(email="customer@example.com", role=Role.USER, full_name="Sara Ahmed"),
    Role.ADMIN: Identity(email="admin@luxone.ae", role=Role.ADMIN, full_name="Omar Admin"),
    Role.SUPER_ADMIN: Identity(email="root@luxone.ae", role=Role.SUPER_ADMIN),
}


@pytest.fixture
def identities():
    return dict(IDENTITIES)


@pytest.fixture
def settings(tmp_path):
    """QSettings backed by a throwaway INI file."""
    return QSettings(str(tmp_path / "session.ini"), QSettings.IniFormat)


@pytest.fixture
def session_store(settings):
    return SessionStore(settings)


class UnwritableSettings(QSettings):
    """QSettings that reports every sync as failed."""

    def status(self):
        return QSettings.AccessError


@pytest.fixture
def unwritable_store(tmp_path):
    return SessionStore(UnwritableSettings(str(tmp_path / "broken.ini"), QSettings.IniFormat))


@pytest.fixture
def login_as(session_store):
    """Persist a session for the given role and return it."""
    def _login(role: Role, token: str = "token-123") -> Session:
        return session_store.save(IDENTITIES[role], token, role)
    return _login


@pytest.fixture(autouse=True)
def warnings_shown(monkeypatch):
    """Record warning dialogs instead of opening modal message boxes."""
    shown = []
    monkeypatch.setattr(
        ErrorHandler, "show_warning",
        staticmethod(lambda parent, message, title=None: shown.append(message))
    )
    return shown


class FakeAuthService:
    """
    Stand-in for ApiAuthService.

    `accounts` maps email to (password, Identity). When `gate` is set the
    call blocks until the test releases it, simulating a slow backend.
    """

    def __init__(self, accounts=None, verify_error=None):
        self.accounts = accounts or {}
        self.verify_error = verify_error
        self.calls = []
        self.gate = None

    def hold(self):
        self.gate = threading.Event()
        return self.gate

    def authenticate(self, endpoint, email, password, user_type=Role.USER):
        self.calls.append((endpoint, email))
        if self.gate is not None:
            self.gate.wait(5)
        account = self.accounts.get(email)
        if account is None or account[0] != password:
            raise AuthenticationError("Invalid credentials", status_code=401, context=endpoint)
        return Session(identity=account[1], token=f"token-for-{email}", user_type=user_type)

    def verify(self, token):
        if self.verify_error is not None:
            raise self.verify_error
        for email, (_password, identity) in self.accounts.items():
            if token == f"token-for-{email}":
                return identity
        raise AuthenticationError("Token expired", status_code=401)


@pytest.fixture
def fake_auth():
    return FakeAuthService(accounts={
        identity.email: ("secret", identity) for identity in IDENTITIES.values()
    })


class FakeQuotationService:
    """Records submissions; raises `error` when set. `hold()` works as on FakeAuthService."""

    def __init__(self, error=None):
        self.error = error
        self.submissions = []
        self.gate = None

    def hold(self):
        self.gate = threading.Event()
        return self.gate

    def submit_quotation(self, data, quote_id, token=None):
        self.submissions.append((data, quote_id, token))
        if self.gate is not None:
            self.gate.wait(5)
        if self.error is not None:
            raise self.error
        return 42


@pytest.fixture
def fake_quotations():
    return FakeQuotationService()
