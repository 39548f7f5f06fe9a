"""Get-data request and response entities."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .parsed_document_data import ParsedDocumentData
from .session_data import SessionData


@dataclass(frozen=True)
class GetDataRequest:
    api_key: str
    token: str


@dataclass(frozen=True)
class GetDataResponse:
    """Session configuration together with the extracted document fields."""

    session_data: Optional[SessionData] = None
    parsed_document_data: Optional[ParsedDocumentData] = None
