"""
HTTP client for the OPNsense JSON API.

This module provides a thin wrapper around a requests session that
handles authentication, TLS verification and error mapping.
"""

from typing import Optional

import requests

from opnsense_lib.common import trace
from opnsense_lib.config import ProviderSettings

from .errors import ApiError, NotFoundError


class ApiClient:
    """HTTP client for the OPNsense API."""

    def __init__(self, settings: ProviderSettings, session: Optional[requests.Session] = None):
        self.settings = settings
        self.base_url = settings.api_url
        self.session = session if session is not None else requests.Session()
        self.session.auth = (settings.api_key, settings.api_secret)
        self.session.verify = not settings.allow_insecure
        self.session.headers.update({"Accept": "application/json"})

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def get(self, path: str):
        """Send a GET request and return the decoded JSON body."""
        return self._request("GET", path)

    def post(self, path: str, body: Optional[dict] = None):
        """Send a POST request with a JSON body and return the decoded JSON body."""
        return self._request("POST", path, json=body if body is not None else {})

    def _request(self, method: str, path: str, **kwargs):
        url = self.url(path)
        trace(f"{method} {url}", kwargs.get("json"))

        try:
            response = self.session.request(method, url, timeout=self.settings.timeout, **kwargs)
        except requests.RequestException as e:
            raise ApiError(f"{method} {url} failed: {e}") from e

        if response.status_code == 404:
            raise NotFoundError(f"{method} {url}: not found", status_code=404)

        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise ApiError(
                f"{method} {url} returned HTTP {response.status_code}",
                status_code=response.status_code,
            ) from e

        try:
            data = response.json()
        except ValueError as e:
            raise ApiError(f"{method} {url} returned a non-JSON response") from e

        trace(f"{method} {url} -> {response.status_code}")
        return data

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
