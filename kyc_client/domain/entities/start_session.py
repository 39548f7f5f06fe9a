"""
Start-session request and response entities.

Requests are immutable: ``with_api_key`` and ``with_session_data`` return a
new instance, so a request built once can be reused across clients without
the key of one client leaking into another.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from .session_data import SessionData


@dataclass(frozen=True)
class StartSessionRequest:
    """Request to open a new verification session."""

    session_data: Optional[SessionData] = None
    api_key: Optional[str] = None

    def with_api_key(self, api_key: str) -> StartSessionRequest:
        """Return a copy carrying ``api_key``."""
        return replace(self, api_key=api_key)

    def with_session_data(self, session_data: SessionData) -> StartSessionRequest:
        """Return a copy carrying ``session_data``."""
        return replace(self, session_data=session_data)


@dataclass(frozen=True)
class StartSessionResponse:
    """Session handle returned by the service."""

    token: Optional[str] = None
    session_id: Optional[str] = None
    url: Optional[str] = None
