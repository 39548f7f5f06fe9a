"""Requests-backed HTTP transport for the KYC service."""
from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

import requests

from kyc_client.constants import DEFAULT_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)


class KycTransport(Protocol):
    """What the API client needs from an HTTP collaborator.

    Implementations raise ``requests.HTTPError`` (with ``.response`` set) for
    error status codes so the client can inspect the status and body.
    """

    def request(self, method: str, path: str, *, json: Any = None) -> requests.Response:
        ...


class RequestsTransport:
    """Send JSON requests to the KYC service through a ``requests.Session``."""

    def __init__(
        self,
        base_url: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._base_url = (base_url or "").rstrip("/")
        # An injected session belongs to the caller and is left open on close().
        self._owns_session = session is None
        self._session = session or requests.Session()
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    def request(self, method: str, path: str, *, json: Any = None) -> requests.Response:
        url = f"{self._base_url}/{path.lstrip('/')}"
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        # Payloads carry the API key; only the route is logged.
        logger.debug("KYC request %s %s", method, path)
        response = self._session.request(
            method,
            url,
            json=json,
            headers=headers,
            timeout=self._timeout,
        )
        logger.debug(
            "KYC response %s %s -> %s",
            method,
            path,
            response.status_code,
            extra={"status_code": response.status_code},
        )
        response.raise_for_status()
        return response

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> RequestsTransport:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
