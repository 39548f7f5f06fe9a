"""Mapper for the get-data operation."""
from __future__ import annotations

from typing import Any, Dict, Mapping

from kyc_client.domain.entities.get_data import GetDataRequest, GetDataResponse

from .parsed_document_data_mapper import ParsedDocumentDataMapper
from .session_data_mapper import SessionDataMapper


class GetDataMapper:
    """Composes the session data and parsed document mappers."""

    def __init__(
        self,
        session_data_mapper: SessionDataMapper,
        parsed_document_data_mapper: ParsedDocumentDataMapper,
    ) -> None:
        self._session_data_mapper = session_data_mapper
        self._parsed_document_data_mapper = parsed_document_data_mapper

    def map_from_entity(self, entity: GetDataRequest) -> Dict[str, Any]:
        return {
            "apiKey": entity.api_key,
            "token": entity.token,
        }

    def map_to_entity(self, data: Mapping[str, Any]) -> GetDataResponse:
        session_data = data.get("sessionData")
        parsed_document_data = data.get("parsedDocumentData")
        return GetDataResponse(
            session_data=(
                self._session_data_mapper.map_to_entity(session_data)
                if isinstance(session_data, Mapping)
                else None
            ),
            parsed_document_data=(
                self._parsed_document_data_mapper.map_to_entity(parsed_document_data)
                if isinstance(parsed_document_data, Mapping)
                else None
            ),
        )
