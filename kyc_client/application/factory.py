"""Build a ready-to-use KycApiClient from settings.

Keeps construction of the transport in one place so applications only need
to call ``build_kyc_api_client()``.
"""
from __future__ import annotations

from typing import Optional

import requests

from kyc_client.application.kyc_api_client import KycApiClient
from kyc_client.config import Settings, get_settings
from kyc_client.domain.exceptions import KycConfigurationError
from kyc_client.infrastructure.transport import RequestsTransport


def build_kyc_api_client(
    settings: Optional[Settings] = None,
    *,
    session: Optional[requests.Session] = None,
) -> KycApiClient:
    """Create a client backed by ``RequestsTransport``."""
    settings = settings or get_settings()
    api_key = (settings.kyc_api_key or "").strip()
    base_url = settings.ensure_base_url()

    missing = []
    if not api_key:
        missing.append("KYC_API_KEY")
    if not base_url:
        missing.append("KYC_BASE_URL")
    if missing:
        raise KycConfigurationError(missing)

    transport = RequestsTransport(
        base_url,
        session=session,
        timeout=settings.kyc_timeout_seconds,
    )
    return KycApiClient(transport, api_key)
