"""Client exceptions."""
from __future__ import annotations

from typing import Any

from kyc_client.constants import WRONG_FIELDS_STATUS_CODE


class KycClientException(Exception):
    """Base exception for KYC client errors."""
    pass


class MissingSessionDataError(KycClientException, ValueError):
    """Raised when a start-session request is sent without session data."""

    def __init__(self, message: str = "Start session request must have session data"):
        super().__init__(message)


class WrongFieldsDataError(KycClientException):
    """Exception raised when the service rejects request fields (HTTP 400).

    ``payload`` is the decoded error body exactly as the service returned it.
    """

    status_code = WRONG_FIELDS_STATUS_CODE

    def __init__(self, payload: Any, *, message: str | None = None):
        final_message = message or f"Service rejected request fields: {payload}"
        super().__init__(final_message)
        self.payload = payload


class KycConfigurationError(KycClientException, RuntimeError):
    """Exception raised when client settings are incomplete."""

    def __init__(self, missing: list[str]):
        super().__init__(f"KYC client configuration is incomplete: missing {', '.join(missing)}")
        self.missing = missing


class UnexpectedResponseError(KycClientException, ValueError):
    """Raised when a successful response body is not a JSON object."""

    def __init__(self, body: object):
        super().__init__(f"Expected a JSON object in response body, got {type(body).__name__}")
        self.body = body
