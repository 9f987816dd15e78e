# -*- coding: utf-8 -*-
"""
User identity and session models.

A Session pairs the authenticated identity with the credential token issued
by the login endpoint, plus the login flow that created it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class Role(str, Enum):
    """Caller role. Routes declare explicit allow-sets of these."""

    USER = "user"
    ADMIN = "admin"
    SUPER_ADMIN = "super_admin"

    @property
    def rank(self) -> int:
        """Privilege order (user < admin < super_admin), for display only."""
        return _ROLE_RANKS[self]

    @property
    def display_name(self) -> str:
        return _ROLE_NAMES[self]

    @classmethod
    def parse(cls, value: Any) -> Optional["Role"]:
        """Return the Role for a raw value, or None if it is not a known role."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


_ROLE_RANKS = {Role.USER: 0, Role.ADMIN: 1, Role.SUPER_ADMIN: 2}
_ROLE_NAMES = {Role.USER: "User", Role.ADMIN: "Admin", Role.SUPER_ADMIN: "Super Admin"}


@dataclass(frozen=True)
class Identity:
    """Authenticated user as returned by the credential service."""

    email: str
    role: Role
    full_name: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.full_name or self.email

    def to_dict(self) -> Dict[str, Any]:
        return {
            "email": self.email,
            "full_name": self.full_name,
            "role": self.role.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Identity":
        """
        Build an identity from an API/storage payload.

        Raises:
            ValueError: if email or role is missing, or the role is unknown
        """
        if not isinstance(data, dict):
            raise ValueError("user payload must be an object")

        email = data.get("email")
        if not email or not isinstance(email, str):
            raise ValueError("user payload has no email")

        role = Role.parse(data.get("role"))
        if role is None:
            raise ValueError(f"unknown role: {data.get('role')!r}")

        full_name = data.get("full_name") or data.get("fullName") or None
        return cls(email=email, role=role, full_name=full_name)


@dataclass(frozen=True)
class Session:
    """The authenticated identity and its credential token."""

    identity: Identity
    token: str
    user_type: Role

    def __post_init__(self):
        if not self.token:
            raise ValueError("session token must not be empty")
        if self.identity is None:
            raise ValueError("session requires an identity")

    @property
    def role(self) -> Role:
        return self.identity.role
