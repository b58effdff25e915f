"""Low-level HTTP client for the platform REST API.

Handles bearer authentication, timeouts and error mapping.
"""
from __future__ import annotations
import logging
import os
from typing import Optional, Dict, Any, TYPE_CHECKING

import requests

from .exceptions import APIError, NotFoundError

if TYPE_CHECKING:
    from tfprovider.config.settings import ProviderConfig

REQUEST_TIMEOUT = 60

logger = logging.getLogger(__name__)


class PlatformClient:
    """HTTP client handed to lifecycle callbacks.

    Usage:
        client = PlatformClient("https://example.cloud.databricks.com", token="dapi...")
        response = client.get("/api/2.0/groups/get", params={"group_id": "123"})
    """

    def __init__(self, host: Optional[str] = None, token: Optional[str] = None, timeout: int = REQUEST_TIMEOUT):
        """Initialize platform client.

        Args:
            host: Workspace base URL (defaults to DATABRICKS_HOST env var)
            token: Personal access token (defaults to DATABRICKS_TOKEN env var)
            timeout: Per-request timeout in seconds
        """
        self.host = (host or os.environ.get("DATABRICKS_HOST", "")).rstrip("/")
        self._token: Optional[str] = token or os.environ.get("DATABRICKS_TOKEN")
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: "ProviderConfig") -> "PlatformClient":
        """Build a client from loaded provider settings."""
        return cls(config.host, token=config.token_resolved, timeout=config.request_timeout)

    def _headers(self, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        if not self._token:
            raise APIError(401, "Not authenticated - set DATABRICKS_TOKEN or pass token explicitly", "")
        headers = dict(extra or {})
        headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def get(self, path: str, params: Optional[Dict] = None, **kwargs) -> requests.Response:
        """Execute GET request.

        Raises:
            NotFoundError: On HTTP 404
            APIError: On any other HTTP error
        """
        headers = self._headers(kwargs.pop("headers", None))
        url = f"{self.host}{path}"
        logger.debug(f"GET {url}")
        resp = requests.get(url, params=params, headers=headers, timeout=self.timeout, **kwargs)
        self._handle_error(resp)
        return resp

    def post(self, path: str, json: Optional[Dict] = None, **kwargs) -> requests.Response:
        """Execute POST request with a JSON payload."""
        headers = self._headers(kwargs.pop("headers", None))
        url = f"{self.host}{path}"
        logger.debug(f"POST {url}")
        resp = requests.post(url, json=json, headers=headers, timeout=self.timeout, **kwargs)
        self._handle_error(resp)
        return resp

    def put(self, path: str, json: Optional[Dict] = None, **kwargs) -> requests.Response:
        """Execute PUT request with a JSON payload."""
        headers = self._headers(kwargs.pop("headers", None))
        url = f"{self.host}{path}"
        logger.debug(f"PUT {url}")
        resp = requests.put(url, json=json, headers=headers, timeout=self.timeout, **kwargs)
        self._handle_error(resp)
        return resp

    def patch(self, path: str, json: Optional[Dict] = None, **kwargs) -> requests.Response:
        """Execute PATCH request with a JSON payload."""
        headers = self._headers(kwargs.pop("headers", None))
        url = f"{self.host}{path}"
        logger.debug(f"PATCH {url}")
        resp = requests.patch(url, json=json, headers=headers, timeout=self.timeout, **kwargs)
        self._handle_error(resp)
        return resp

    def delete(self, path: str, json: Optional[Dict] = None, **kwargs) -> requests.Response:
        """Execute DELETE request."""
        headers = self._headers(kwargs.pop("headers", None))
        url = f"{self.host}{path}"
        logger.debug(f"DELETE {url}")
        resp = requests.delete(url, json=json, headers=headers, timeout=self.timeout, **kwargs)
        self._handle_error(resp)
        return resp

    def _handle_error(self, resp: requests.Response) -> None:
        """Centralized error handling for HTTP responses.

        Raises:
            NotFoundError: If the resource does not exist
            APIError: If response status indicates any other error
        """
        if resp.status_code < 400:
            return
        message = _error_message(resp)
        if resp.status_code == 404:
            raise NotFoundError(message, resp.url)
        raise APIError(resp.status_code, message, resp.url)


def _error_message(resp: requests.Response) -> str:
    """Prefer the API's JSON ``message`` field over the raw body."""
    try:
        payload: Any = resp.json()
    except ValueError:
        return resp.text
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return resp.text
