# -*- coding: utf-8 -*-
"""Custom exceptions for the application."""


class ApiException(Exception):
    """Exception raised for API errors."""

    def __init__(self, message: str, status_code: int = None,
                 response_data: dict = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_data = response_data or {}
        self.context = context

    def __str__(self):
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class NetworkException(Exception):
    """Exception raised for network/connection errors."""

    def __init__(self, message: str, original_error: Exception = None,
                 context: str = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error
        self.context = context


class AuthenticationError(ApiException):
    """Credentials were rejected by the login endpoint.

    `message` carries the reason reported by the service and is safe to show
    on the login form.
    """


class SessionCorruptionError(Exception):
    """Persisted session is partial or malformed."""

    def __init__(self, message: str, key: str = None):
        super().__init__(message)
        self.message = message
        self.key = key


class SessionStorageError(Exception):
    """Session could not be written to durable storage."""

    def __init__(self, message: str, status: int = None):
        super().__init__(message)
        self.message = message
        self.status = status
