"""Shared fixtures for the KYC client test suite.

Transports are hand-written fakes that return real ``requests.Response``
objects, so the client exercises the same ``raise_for_status``/``json``
behaviour it sees in production.
"""
from __future__ import annotations

import copy
import json
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

import pytest
import requests

from kyc_client.config import get_settings
from kyc_client.domain.entities.parsed_document_data import ParsedDocumentData
from kyc_client.domain.entities.session_data import SessionData

_REASONS = {200: "OK", 400: "Bad Request", 401: "Unauthorized", 404: "Not Found", 500: "Internal Server Error"}


def build_response(status_code: int, body: Any = None, *, raw: Optional[bytes] = None) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response.reason = _REASONS.get(status_code, "")
    response.url = "https://kyc.test/kyc"
    response.headers["Content-Type"] = "application/json"
    response._content = raw if raw is not None else json.dumps(body).encode("utf-8")
    return response


@dataclass
class RecordedCall:
    method: str
    path: str
    json: Any


class FakeTransport:
    """Replays queued responses and records every request it receives."""

    def __init__(self, *responses: requests.Response, error: Optional[Exception] = None) -> None:
        self._responses = list(responses)
        self._error = error
        self.calls: List[RecordedCall] = []

    def request(self, method: str, path: str, *, json: Any = None) -> requests.Response:
        self.calls.append(RecordedCall(method=method, path=path, json=copy.deepcopy(json)))
        if self._error is not None:
            raise self._error
        response = self._responses.pop(0) if len(self._responses) > 1 else self._responses[0]
        response.raise_for_status()
        return response


@pytest.fixture
def make_response() -> Callable[..., requests.Response]:
    return build_response


@pytest.fixture
def make_transport() -> Callable[..., FakeTransport]:
    return FakeTransport


@pytest.fixture
def session_data() -> SessionData:
    return SessionData(
        email="jane.doe@example.com",
        first_name="Jane",
        last_name="Doe",
        personal_code="49001011234",
        phone_number="+37060000000",
        date_of_birth="1990-01-01",
        country_code="LT",
        language="en",
        callback_url="https://merchant.example.com/kyc/callback",
        redirect_url="https://merchant.example.com/kyc/done",
        external_reference_id="customer-42",
    )


@pytest.fixture
def parsed_document_data() -> ParsedDocumentData:
    return ParsedDocumentData(
        document_type="Passport",
        document_number="LT1234567",
        first_name="JANE",
        last_name="DOE",
        personal_code="49001011234",
        date_of_birth="1990-01-01",
        sex="F",
        nationality="LTU",
        issuing_country="LTU",
        date_of_issue="2020-05-01",
        date_of_expiry="2030-05-01",
        mrz="P<LTUDOE<<JANE<<<<<<<<<<<<<<<<<<<<<<<<<<<<<<",
    )


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    """Isolate every test from ambient KYC_* variables and the settings cache."""
    for name in ("KYC_API_KEY", "KYC_BASE_URL", "KYC_TIMEOUT_SECONDS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
