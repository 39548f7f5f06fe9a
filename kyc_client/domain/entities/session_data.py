"""SessionData entity describing a verification session's configuration."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SessionData:
    """Applicant details and session options sent when a session starts.

    Every field is optional; the service decides which ones it requires and
    reports missing ones as rejected fields.
    """

    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    personal_code: str | None = None
    phone_number: str | None = None
    date_of_birth: str | None = None  # YYYY-MM-DD, passed through as sent
    country_code: str | None = None
    language: str | None = None
    callback_url: str | None = None
    redirect_url: str | None = None
    external_reference_id: str | None = None
