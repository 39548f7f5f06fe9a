"""Mapper for the get-status operation."""
from __future__ import annotations

from typing import Any, Dict, Mapping

from kyc_client.domain.entities.get_status import GetStatusRequest, GetStatusResponse


class GetStatusMapper:
    def map_from_entity(self, entity: GetStatusRequest) -> Dict[str, Any]:
        return {
            "apiKey": entity.api_key,
            "email": entity.email,
        }

    def map_to_entity(self, data: Mapping[str, Any]) -> GetStatusResponse:
        return GetStatusResponse(
            status=data.get("status"),
            token=data.get("token"),
            reason=data.get("reason"),
        )
