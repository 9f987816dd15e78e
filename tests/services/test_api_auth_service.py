# -*- coding: utf-8 -*-
"""
Tests for ApiAuthService and the ApiClient error mapping.

requests.request is replaced with a canned response; no network is used.
"""
import json

import pytest
import requests

from models.user import Role
from services.api_auth_service import ApiAuthService
from services.api_client import ApiClient
from services.exceptions import ApiException, AuthenticationError, NetworkException


class FakeResponse:
    def __init__(self, status_code=200, body=None, text=None):
        self.status_code = status_code
        self._body = body
        if text is not None:
            self.text = text
        else:
            self.text = json.dumps(body) if body is not None else ""

    def json(self):
        if self._body is None:
            return json.loads(self.text)
        return self._body

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error", response=self)


@pytest.fixture
def http(monkeypatch):
    """Queue of responses (or exceptions) returned by requests.request."""
    calls = []
    queue = []

    def fake_request(method, url, json=None, params=None, headers=None, timeout=None):
        calls.append({"method": method, "url": url, "json": json, "headers": headers})
        outcome = queue.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    monkeypatch.setattr(requests, "request", fake_request)
    fake_request.calls = calls
    fake_request.queue = queue
    return fake_request


@pytest.fixture
def service():
    return ApiAuthService(ApiClient(base_url="http://api.test/api", timeout=5))


USER_BODY = {
    "token": "jwt-token",
    "user": {"email": "sara@example.com", "full_name": "Sara Ahmed", "role": "user"},
}


def test_authenticate_builds_session(http, service):
    http.queue.append(FakeResponse(200, USER_BODY))

    session = service.authenticate("/users/login", "sara@example.com", "secret")

    assert session.token == "jwt-token"
    assert session.identity.email == "sara@example.com"
    assert session.identity.role == Role.USER
    assert session.user_type == Role.USER

    call = http.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "http://api.test/api/users/login"
    assert call["json"] == {"email": "sara@example.com", "password": "secret"}


def test_authenticate_records_login_flow(http, service):
    body = {"accessToken": "t", "user": {"email": "a@luxone.ae", "role": "admin"}}
    http.queue.append(FakeResponse(200, body))

    session = service.authenticate("/users/admin-login", "a@luxone.ae", "pw", Role.ADMIN)

    assert session.user_type == Role.ADMIN
    assert session.token == "t"


def test_rejected_credentials_carry_service_message(http, service):
    http.queue.append(FakeResponse(401, {"error": "Invalid credentials"}))

    with pytest.raises(AuthenticationError) as exc_info:
        service.authenticate("/users/login", "sara@example.com", "wrong")

    assert exc_info.value.message == "Invalid credentials"
    assert exc_info.value.status_code == 401


def test_missing_credentials_do_not_call_service(http, service):
    with pytest.raises(AuthenticationError):
        service.authenticate("/users/login", "", "secret")
    assert http.calls == []


@pytest.mark.parametrize("body", [
    {"user": {"email": "a@example.com", "role": "user"}},
    {"token": "t"},
    {"token": "t", "user": {"email": "a@example.com", "role": "owner"}},
    ["not", "an", "object"],
])
def test_malformed_login_response(http, service, body):
    http.queue.append(FakeResponse(200, body))

    with pytest.raises(ApiException) as exc_info:
        service.authenticate("/users/login", "a@example.com", "pw")
    assert not isinstance(exc_info.value, AuthenticationError)


def test_connection_failure_is_network_exception(http, service):
    http.queue.append(requests.exceptions.ConnectionError("refused"))

    with pytest.raises(NetworkException):
        service.authenticate("/users/login", "a@example.com", "pw")


def test_undecodable_body_is_api_exception(http, service):
    http.queue.append(FakeResponse(200, text="<html>oops</html>"))

    with pytest.raises(ApiException) as exc_info:
        service.authenticate("/users/login", "a@example.com", "pw")
    assert exc_info.value.message == "Invalid response from service"


def test_verify_sends_bearer_token(http, service):
    http.queue.append(FakeResponse(200, {"user": USER_BODY["user"]}))

    identity = service.verify("jwt-token")

    assert identity.email == "sara@example.com"
    assert http.calls[0]["method"] == "GET"
    assert http.calls[0]["headers"]["Authorization"] == "Bearer jwt-token"


def test_verify_rejected_token(http, service):
    http.queue.append(FakeResponse(401, {"message": "Token expired"}))

    with pytest.raises(AuthenticationError):
        service.verify("old-token")


def test_verify_server_error_is_not_a_rejection(http, service):
    http.queue.append(FakeResponse(503, {"error": "maintenance"}))

    with pytest.raises(ApiException) as exc_info:
        service.verify("jwt-token")
    assert not isinstance(exc_info.value, AuthenticationError)
    assert exc_info.value.status_code == 503
