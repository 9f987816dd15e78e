# -*- coding: utf-8 -*-
"""
Luxone Quotation Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "ApiAuthService",
    "QuotationService",
    "SessionStore",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "ApiAuthService":
        from .api_auth_service import ApiAuthService
        return ApiAuthService
    elif name == "QuotationService":
        from .quotation_service import QuotationService
        return QuotationService
    elif name == "SessionStore":
        from .session_store import SessionStore
        return SessionStore
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
