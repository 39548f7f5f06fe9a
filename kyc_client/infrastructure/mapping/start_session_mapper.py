"""Mapper for the start-session operation."""
from __future__ import annotations

from typing import Any, Dict, Mapping

from kyc_client.domain.entities.start_session import StartSessionRequest, StartSessionResponse

from .session_data_mapper import SessionDataMapper


class StartSessionMapper:
    """Builds start-session payloads and decodes session handles."""

    def __init__(self, session_data_mapper: SessionDataMapper) -> None:
        self._session_data_mapper = session_data_mapper

    def map_from_entity(self, entity: StartSessionRequest) -> Dict[str, Any]:
        session_data = entity.session_data
        return {
            "apiKey": entity.api_key,
            "sessionData": (
                self._session_data_mapper.map_from_entity(session_data)
                if session_data is not None
                else None
            ),
        }

    def map_to_entity(self, data: Mapping[str, Any]) -> StartSessionResponse:
        return StartSessionResponse(
            token=data.get("token"),
            session_id=data.get("sessionId"),
            url=data.get("url"),
        )
