# -*- coding: utf-8 -*-
"""
Luxone API Client
=================

Thin wrapper around `requests` shared by the auth and quotation services.
Maps HTTP failures to ApiException and transport failures to NetworkException.
"""

import json
from typing import Any, Dict, Optional

import requests

from app.config import Config
from services.exceptions import ApiException, NetworkException
from utils.logger import get_logger

logger = get_logger(__name__)

# Body fields never written to the log
_REDACTED_FIELDS = {"password", "token"}


class ApiClient:
    """
    HTTP client for the Luxone backend.

    Usage:
        client = ApiClient(token=session.token)
        result = client.post("/quotations", payload)
    """

    def __init__(self, base_url: str = None, timeout: int = None, token: str = None):
        self.base_url = (base_url or Config.API_BASE_URL).rstrip("/")
        self.timeout = timeout or Config.API_TIMEOUT
        self.access_token: Optional[str] = token

    def set_access_token(self, token: Optional[str]):
        self.access_token = token

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return headers

    def request(
        self,
        method: str,
        endpoint: str,
        json_data: Optional[Dict] = None,
        params: Optional[Dict] = None
    ) -> Any:
        """
        Perform an HTTP request and return the decoded JSON body.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            endpoint: API endpoint, e.g. "/users/login"
            json_data: JSON payload
            params: Query parameters

        Returns:
            Decoded response body, or None for an empty body

        Raises:
            ApiException: non-2xx status or undecodable body
            NetworkException: connection failure or timeout
        """
        url = f"{self.base_url}{endpoint}"

        logger.info(f"[API REQ] {method} {endpoint}")
        if json_data:
            logger.debug(f"[API REQ] Body: {_redact(json_data)}")

        try:
            response = requests.request(
                method=method,
                url=url,
                json=json_data,
                params=params,
                headers=self._headers(),
                timeout=self.timeout,
            )
            response.raise_for_status()

            result = None
            if response.text:
                result = response.json()

            logger.info(f"[API RES] {response.status_code} {endpoint}")
            return result

        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else 0
            response_data = {}
            try:
                response_data = e.response.json() if e.response is not None else {}
            except ValueError:
                pass
            if not isinstance(response_data, dict):
                response_data = {}

            message = response_data.get("error") or response_data.get("message") or str(e)
            logger.error(f"[API ERR] {status_code} {method} {endpoint} | {message}")
            raise ApiException(
                message=message,
                status_code=status_code,
                response_data=response_data,
                context=endpoint
            )
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.error(f"Network error: {endpoint} - {e}")
            raise NetworkException(
                message=str(e),
                original_error=e,
                context=endpoint
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed: {endpoint} - {e}")
            raise NetworkException(
                message=str(e),
                original_error=e,
                context=endpoint
            )
        except ValueError as e:
            logger.error(f"Invalid JSON from {endpoint}: {e}")
            raise ApiException(
                message="Invalid response from service",
                context=endpoint
            )

    def get(self, endpoint: str, params: Optional[Dict] = None) -> Any:
        return self.request("GET", endpoint, params=params)

    def post(self, endpoint: str, json_data: Dict) -> Any:
        return self.request("POST", endpoint, json_data=json_data)


def _redact(data: Dict) -> str:
    safe = {k: ("***" if k in _REDACTED_FIELDS else v) for k, v in data.items()}
    try:
        return json.dumps(safe, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        return str(safe)
