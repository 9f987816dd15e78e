# -*- coding: utf-8 -*-
"""
Session Store - durable persistence of the authenticated session.

The token, the serialized user and the login flow tag are written and read
as one unit. A partial or malformed record is treated as "no session".
"""

import json
from typing import Optional

from PyQt5.QtCore import QSettings

from app.config import Config
from models.user import Identity, Role, Session
from services.exceptions import SessionCorruptionError, SessionStorageError
from utils.logger import get_logger

logger = get_logger(__name__)


class SessionStore:
    """Reads and writes the current session through QSettings."""

    TOKEN_KEY = "auth/token"
    USER_KEY = "auth/user"
    USER_TYPE_KEY = "auth/userType"

    KEYS = (TOKEN_KEY, USER_KEY, USER_TYPE_KEY)

    def __init__(self, settings: Optional[QSettings] = None):
        if settings is None:
            Config.DATA_DIR.mkdir(parents=True, exist_ok=True)
            settings = QSettings(str(Config.SESSION_FILE), QSettings.IniFormat)
        self._settings = settings

    def save(self, identity: Identity, token: str, user_type: Role) -> Session:
        """
        Persist a session, replacing any previous one.

        Raises:
            ValueError: if token or identity is missing
            SessionStorageError: if the record could not be written
        """
        session = Session(identity=identity, token=token, user_type=Role(user_type))

        self._settings.setValue(self.TOKEN_KEY, session.token)
        self._settings.setValue(self.USER_KEY, json.dumps(identity.to_dict()))
        self._settings.setValue(self.USER_TYPE_KEY, session.user_type.value)
        self._settings.sync()

        status = self._settings.status()
        if status != QSettings.NoError:
            logger.error(f"Session storage write failed (status={status})")
            # A half-written record must not be mistaken for a login
            for key in self.KEYS:
                self._settings.remove(key)
            raise SessionStorageError("could not write session", status=status)

        logger.info(f"Session saved for {identity.email} ({identity.role.value})")
        return session

    def load(self) -> Optional[Session]:
        """Rebuild the stored session, or None if nothing valid is stored."""
        if not any(self._settings.contains(key) for key in self.KEYS):
            return None

        try:
            return self._decode()
        except SessionCorruptionError as e:
            logger.warning(f"Discarding corrupt stored session: {e.message}")
            self.clear()
            return None

    def clear(self):
        """Remove all persisted session fields."""
        for key in self.KEYS:
            self._settings.remove(key)
        self._settings.sync()
        logger.debug("Session storage cleared")

    def _read_str(self, key: str) -> str:
        value = self._settings.value(key)
        if not isinstance(value, str) or not value:
            raise SessionCorruptionError(f"missing or invalid value for {key}", key=key)
        return value

    def _decode(self) -> Session:
        token = self._read_str(self.TOKEN_KEY)
        raw_user = self._read_str(self.USER_KEY)
        raw_type = self._read_str(self.USER_TYPE_KEY)

        try:
            identity = Identity.from_dict(json.loads(raw_user))
        except (json.JSONDecodeError, ValueError) as e:
            raise SessionCorruptionError(f"bad user record: {e}", key=self.USER_KEY)

        user_type = Role.parse(raw_type)
        if user_type is None:
            raise SessionCorruptionError(f"unknown user type {raw_type!r}", key=self.USER_TYPE_KEY)

        return Session(identity=identity, token=token, user_type=user_type)
