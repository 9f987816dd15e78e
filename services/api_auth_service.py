# -*- coding: utf-8 -*-
"""
API Authentication Service - credential verification against the REST API.

POST {API_BASE_URL}/users/login | /users/admin-login | /users/super-admin-login
Body: {"email": "...", "password": "..."}

Expected success response (2xx):
    {
        "token": "...",
        "user": {"email": "...", "full_name": "...", "role": "user"}
    }

Failure response (non-2xx):
    {"error": "Invalid credentials"}
"""

from typing import Optional

from models.user import Identity, Role, Session
from app.config import Config
from services.api_client import ApiClient
from services.exceptions import ApiException, AuthenticationError
from utils.logger import get_logger

logger = get_logger(__name__)


class ApiAuthService:
    """Authentication service that delegates to the REST API."""

    def __init__(self, client: Optional[ApiClient] = None):
        self.client = client or ApiClient()

    def authenticate(self, endpoint: str, email: str, password: str,
                     user_type: Role = Role.USER) -> Session:
        """
        Verify credentials against one of the login endpoints.

        Returns:
            The new Session (not yet persisted)

        Raises:
            AuthenticationError: credentials rejected or missing
            ApiException: the service answered with an unusable body
            NetworkException: the service could not be reached
        """
        if not email or not password:
            raise AuthenticationError("Please enter your email and password")

        try:
            data = self.client.post(endpoint, {"email": email, "password": password})
        except ApiException as e:
            logger.warning(f"Login rejected ({e.status_code}) for {email} at {endpoint}")
            raise AuthenticationError(
                e.message,
                status_code=e.status_code,
                response_data=e.response_data,
                context=endpoint
            )

        session = self._build_session(data, user_type)
        logger.info(f"API login successful for: {email} ({session.role.value})")
        return session

    def verify(self, token: str) -> Identity:
        """
        Confirm a stored token is still accepted.

        GET /users/verify with the bearer token; 2xx body is {"user": {...}}.

        Raises:
            AuthenticationError: the token was rejected (401/403)
            ApiException: any other service failure
            NetworkException: the service could not be reached
        """
        client = ApiClient(base_url=self.client.base_url, timeout=self.client.timeout, token=token)
        try:
            data = client.get(Config.VERIFY_ENDPOINT)
        except ApiException as e:
            if e.status_code in (401, 403):
                raise AuthenticationError(e.message, status_code=e.status_code,
                                          context=Config.VERIFY_ENDPOINT)
            raise

        try:
            return Identity.from_dict((data or {}).get("user"))
        except (ValueError, AttributeError) as e:
            raise ApiException(f"Invalid verify response: {e}", context=Config.VERIFY_ENDPOINT)

    @staticmethod
    def _build_session(data, user_type: Role) -> Session:
        """Build a Session from the login response JSON."""
        if not isinstance(data, dict):
            raise ApiException("Invalid login response")

        token = data.get("token") or data.get("accessToken") or data.get("access_token")
        try:
            identity = Identity.from_dict(data.get("user"))
            return Session(identity=identity, token=token, user_type=user_type)
        except ValueError as e:
            logger.error(f"Invalid login response: {e}")
            raise ApiException(f"Invalid login response: {e}")
