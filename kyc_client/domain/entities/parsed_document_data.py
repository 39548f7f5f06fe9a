"""ParsedDocumentData entity."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParsedDocumentData:
    """Fields the service extracted from the applicant's identity document."""

    document_type: str | None = None
    document_number: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    personal_code: str | None = None
    date_of_birth: str | None = None
    sex: str | None = None
    nationality: str | None = None
    issuing_country: str | None = None
    date_of_issue: str | None = None
    date_of_expiry: str | None = None
    mrz: str | None = None
