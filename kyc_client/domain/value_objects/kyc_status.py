"""
KycStatus value object

Verification statuses reported by the get-status endpoint.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional


class KycStatus(str, Enum):
    """Known verification statuses."""
    PENDING = "Pending"
    PROCESSING = "Processing"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    EXPIRED = "Expired"

    @property
    def is_final(self) -> bool:
        """Whether the verification can no longer change."""
        return self in (KycStatus.APPROVED, KycStatus.REJECTED, KycStatus.EXPIRED)

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional[KycStatus]:
        """
        Resolve a raw status string, ignoring case.

        Args:
            value: Status as sent by the service

        Returns:
            Matching KycStatus, or None for missing or unknown values

        Examples:
            >>> KycStatus.parse("approved")
            <KycStatus.APPROVED: 'Approved'>
        """
        if not isinstance(value, str):
            return None
        normalized = value.strip().lower()
        for member in cls:
            if member.value.lower() == normalized:
                return member
        return None
