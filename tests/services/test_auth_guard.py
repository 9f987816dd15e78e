# -*- coding: utf-8 -*-
"""
Tests for the route guard decision function.
"""
import pytest

from models.user import Identity, Role, Session
from services.auth_guard import GuardDecision, RouteRequirement, evaluate


def _session(role):
    return Session(identity=Identity(email=f"{role.value}@example.com", role=role),
                   token="t", user_type=role)


ADMINS = RouteRequirement.roles([Role.ADMIN, Role.SUPER_ADMIN])
SUPER_ADMINS = RouteRequirement.roles([Role.SUPER_ADMIN])


def test_public_route_allows_anyone():
    assert evaluate(None, None) == GuardDecision.ALLOW
    assert evaluate(_session(Role.USER), None) == GuardDecision.ALLOW


@pytest.mark.parametrize("requirement", [
    RouteRequirement.any_authenticated(), ADMINS, SUPER_ADMINS,
])
def test_protected_route_without_session_is_unauthenticated(requirement):
    assert evaluate(None, requirement) == GuardDecision.DENY_UNAUTHENTICATED


def test_any_authenticated_accepts_every_role():
    for role in Role:
        assert evaluate(_session(role), RouteRequirement.any_authenticated()) == GuardDecision.ALLOW


def test_allow_sets_are_explicit():
    """Super admin is listed explicitly; roles are not a hierarchy."""
    assert evaluate(_session(Role.USER), ADMINS) == GuardDecision.DENY_FORBIDDEN
    assert evaluate(_session(Role.ADMIN), ADMINS) == GuardDecision.ALLOW
    assert evaluate(_session(Role.SUPER_ADMIN), ADMINS) == GuardDecision.ALLOW

    assert evaluate(_session(Role.ADMIN), SUPER_ADMINS) == GuardDecision.DENY_FORBIDDEN
    assert evaluate(_session(Role.SUPER_ADMIN), SUPER_ADMINS) == GuardDecision.ALLOW


def test_role_from_identity_not_login_flow():
    """A user who signed in through the admin form is still a user."""
    session = Session(identity=Identity(email="u@example.com", role=Role.USER),
                      token="t", user_type=Role.ADMIN)
    assert evaluate(session, ADMINS) == GuardDecision.DENY_FORBIDDEN


def test_roles_accepts_raw_values():
    requirement = RouteRequirement.roles(["admin"])
    assert requirement.allowed_roles == frozenset({Role.ADMIN})


def test_role_rank_orders_privilege():
    assert Role.USER.rank < Role.ADMIN.rank < Role.SUPER_ADMIN.rank
