# -*- coding: utf-8 -*-
"""
Authorization guard.

Decides whether a session may open a screen with a given route requirement.
Pure function: no I/O, no logging, no state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, Optional

from models.user import Role, Session


class GuardDecision(Enum):
    ALLOW = "allow"
    DENY_UNAUTHENTICATED = "deny_unauthenticated"
    DENY_FORBIDDEN = "deny_forbidden"


@dataclass(frozen=True)
class RouteRequirement:
    """
    Access policy attached to a protected screen.

    An empty allow-set means any authenticated session. Public screens carry
    no requirement at all (None).
    """

    allowed_roles: FrozenSet[Role] = field(default_factory=frozenset)

    @classmethod
    def any_authenticated(cls) -> "RouteRequirement":
        return cls()

    @classmethod
    def roles(cls, roles: Iterable[Role]) -> "RouteRequirement":
        return cls(allowed_roles=frozenset(Role(r) for r in roles))


def evaluate(session: Optional[Session],
             requirement: Optional[RouteRequirement]) -> GuardDecision:
    """Return the guard decision for a session against a route requirement."""
    if requirement is None:
        return GuardDecision.ALLOW

    if session is None:
        return GuardDecision.DENY_UNAUTHENTICATED

    if requirement.allowed_roles and session.identity.role not in requirement.allowed_roles:
        return GuardDecision.DENY_FORBIDDEN

    return GuardDecision.ALLOW
