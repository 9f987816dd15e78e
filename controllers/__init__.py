# -*- coding: utf-8 -*-
"""
Luxone Quotation Controllers
============================
Controller layer between the UI pages and the services.

Controllers provide:
- Standardized results via OperationResult
- Qt signals for UI updates
- Background work off the GUI thread

Usage:
    from controllers import PROFILES, RoleLoginFlow
    from models.user import Role

    flow = RoleLoginFlow(PROFILES[Role.ADMIN], session_store, navigator)
    flow.login_failed.connect(page.show_error)
    flow.submit(email, password)
"""

from controllers.base_controller import (
    BaseController,
    OperationResult,
)

from controllers.login_controller import (
    LoginProfile,
    LoginWorker,
    PROFILES,
    RoleLoginFlow,
    SessionCheckWorker,
    SessionRestorer,
)

__all__ = [
    "BaseController",
    "OperationResult",
    "LoginProfile",
    "LoginWorker",
    "PROFILES",
    "RoleLoginFlow",
    "SessionCheckWorker",
    "SessionRestorer",
]
