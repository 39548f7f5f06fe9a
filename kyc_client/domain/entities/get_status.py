"""Get-status request and response entities."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from kyc_client.domain.value_objects.kyc_status import KycStatus


@dataclass(frozen=True)
class GetStatusRequest:
    api_key: str
    email: str


@dataclass(frozen=True)
class GetStatusResponse:
    """
    Verification status for an applicant.

    ``status`` keeps the raw value sent by the service; ``state`` resolves it
    against the statuses this library knows about.
    """

    status: Optional[str] = None
    token: Optional[str] = None
    reason: Optional[str] = None

    @property
    def state(self) -> Optional[KycStatus]:
        return KycStatus.parse(self.status)

    @property
    def is_final(self) -> bool:
        state = self.state
        return state is not None and state.is_final
