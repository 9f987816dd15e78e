# -*- coding: utf-8 -*-
"""Centralized error message mapper."""

from services.translation_manager import tr
from services.exceptions import ApiException, AuthenticationError, NetworkException
from utils.logger import get_logger

logger = get_logger(__name__)


def map_auth_error(error: AuthenticationError) -> str:
    """Login failures show the reason reported by the service."""
    if error.message:
        return error.message
    return tr("error.login.invalid_credentials")


def map_api_error(error: ApiException) -> str:
    """Map API exception to a user-friendly message.

    Technical details are logged only - never shown to the user.
    """
    status = error.status_code
    if status:
        logger.warning(f"API error ({status}) in {error.context or 'unknown'}: {error.message}")

    if status == 401:
        return tr("error.api.unauthorized")
    if status == 403:
        return tr("error.api.forbidden")
    if status and status >= 500:
        return tr("error.api.server")
    if not status:
        return tr("error.api.invalid_response")
    return tr("error.api.connection")


def map_network_error(error: NetworkException) -> str:
    """Map network exception to user-friendly translated message."""
    msg = str(error.original_error) if error.original_error else ""
    if "timeout" in msg.lower() or "timed out" in msg.lower():
        return tr("error.api.timeout")
    return tr("error.api.connection")


def map_exception(error: Exception, context: str = None) -> str:
    """Map any exception to a user-friendly message."""
    if isinstance(error, AuthenticationError):
        return map_auth_error(error)

    if isinstance(error, ApiException):
        if not error.context and context:
            error.context = context
        return map_api_error(error)

    if isinstance(error, NetworkException):
        return map_network_error(error)

    logger.warning(f"Unexpected error in {context or 'unknown'}: {error}")
    return tr("error.unexpected")
