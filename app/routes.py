# -*- coding: utf-8 -*-
"""
Route table.

Maps location paths to page identifiers and their access requirements.
A route with no requirement is public.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from app.config import Pages
from models.user import Role
from services.auth_guard import RouteRequirement

LOGIN_PATH = "/login"
ADMIN_LOGIN_PATH = "/admin-login"
SUPER_ADMIN_LOGIN_PATH = "/super-admin-login"
UNAUTHORIZED_PATH = "/unauthorized"
DASHBOARD_PATH = "/dashboard"
HOME_PATH = "/"
QUOTATION_PATH = "/quotation"
ADMIN_PANEL_PATH = "/admin-panel"
ADMIN_DASHBOARD_PATH = "/admin/dashboard"
SUPER_ADMIN_PATH = "/super-admin"

_ADMINS = RouteRequirement.roles([Role.ADMIN, Role.SUPER_ADMIN])
_SUPER_ADMINS = RouteRequirement.roles([Role.SUPER_ADMIN])


@dataclass(frozen=True)
class Route:
    path: str
    page: str
    requirement: Optional[RouteRequirement] = None


ROUTES: List[Route] = [
    # Public
    Route(LOGIN_PATH, Pages.LOGIN),
    Route("/user-login", Pages.LOGIN),
    Route("/admin", Pages.ADMIN_LOGIN),
    Route(ADMIN_LOGIN_PATH, Pages.ADMIN_LOGIN),
    Route(SUPER_ADMIN_LOGIN_PATH, Pages.SUPER_ADMIN_LOGIN),
    Route(UNAUTHORIZED_PATH, Pages.UNAUTHORIZED),

    # Any authenticated session
    Route(HOME_PATH, Pages.DASHBOARD, RouteRequirement.any_authenticated()),
    Route(DASHBOARD_PATH, Pages.DASHBOARD, RouteRequirement.any_authenticated()),
    Route(QUOTATION_PATH, Pages.QUOTATION, RouteRequirement.any_authenticated()),

    # Role restricted
    Route(ADMIN_PANEL_PATH, Pages.ADMIN_PANEL, _ADMINS),
    Route(ADMIN_DASHBOARD_PATH, Pages.ADMIN_PANEL, _ADMINS),
    Route(SUPER_ADMIN_PATH, Pages.SUPER_ADMIN, _SUPER_ADMINS),
]

_ROUTES_BY_PATH: Dict[str, Route] = {route.path: route for route in ROUTES}


def normalize_path(path: str) -> str:
    """Drop query/fragment and trailing slashes; '' becomes '/'."""
    path = (path or "").split("?", 1)[0].split("#", 1)[0].strip()
    if not path.startswith("/"):
        path = "/" + path
    return path.rstrip("/") or "/"


def find_route(path: str) -> Optional[Route]:
    """Exact match only. None means the catch-all applies."""
    return _ROUTES_BY_PATH.get(normalize_path(path))


def login_path_for(path: str) -> str:
    """Pick the login screen that matches the area the caller tried to open."""
    if "super-admin" in path:
        return SUPER_ADMIN_LOGIN_PATH
    if "admin" in path:
        return ADMIN_LOGIN_PATH
    return LOGIN_PATH
