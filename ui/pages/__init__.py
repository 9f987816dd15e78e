# -*- coding: utf-8 -*-
"""
Luxone Quotation UI Pages
"""

from .login_page import LoginPage
from .dashboard_page import DashboardPage
from .unauthorized_page import UnauthorizedPage
from .admin_page import AdminPanelPage, SuperAdminPage

__all__ = [
    "LoginPage",
    "DashboardPage",
    "UnauthorizedPage",
    "AdminPanelPage",
    "SuperAdminPage",
]
