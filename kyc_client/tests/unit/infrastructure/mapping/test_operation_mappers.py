"""Tests for the per-operation mappers."""
from unittest.mock import Mock

from kyc_client.domain.entities.get_data import GetDataRequest, GetDataResponse
from kyc_client.domain.entities.get_status import GetStatusRequest, GetStatusResponse
from kyc_client.domain.entities.parsed_document_data import ParsedDocumentData
from kyc_client.domain.entities.session_data import SessionData
from kyc_client.domain.entities.start_session import StartSessionRequest, StartSessionResponse
from kyc_client.infrastructure.mapping import (
    GetDataMapper,
    GetStatusMapper,
    ParsedDocumentDataMapper,
    SessionDataMapper,
    StartSessionMapper,
)


class TestStartSessionMapper:

    def test_nests_session_data_under_its_own_key(self, session_data):
        mapper = StartSessionMapper(SessionDataMapper())

        wire = mapper.map_from_entity(StartSessionRequest(session_data=session_data, api_key="key-abc"))

        assert set(wire) == {"apiKey", "sessionData"}
        assert wire["apiKey"] == "key-abc"
        assert wire["sessionData"] == SessionDataMapper().map_from_entity(session_data)

    def test_delegates_to_injected_session_data_mapper(self, session_data):
        sub_mapper = Mock()
        sub_mapper.map_from_entity.return_value = {"email": "stub"}
        mapper = StartSessionMapper(sub_mapper)

        wire = mapper.map_from_entity(StartSessionRequest(session_data=session_data, api_key="key"))

        sub_mapper.map_from_entity.assert_called_once_with(session_data)
        assert wire["sessionData"] == {"email": "stub"}

    def test_map_to_entity(self):
        mapper = StartSessionMapper(SessionDataMapper())

        response = mapper.map_to_entity({"token": "tok-1", "sessionId": "sess-1", "url": "https://kyc.test/s"})

        assert response == StartSessionResponse(token="tok-1", session_id="sess-1", url="https://kyc.test/s")

    def test_map_to_entity_tolerates_missing_metadata(self):
        response = StartSessionMapper(SessionDataMapper()).map_to_entity({"token": "tok-1"})

        assert response.token == "tok-1"
        assert response.session_id is None
        assert response.url is None


class TestGetDataMapper:

    def _mapper(self) -> GetDataMapper:
        return GetDataMapper(SessionDataMapper(), ParsedDocumentDataMapper())

    def test_map_from_entity(self):
        wire = self._mapper().map_from_entity(GetDataRequest(api_key="key-abc", token="tok-123"))

        assert wire == {"apiKey": "key-abc", "token": "tok-123"}

    def test_map_to_entity_uses_both_sub_mappers(self, session_data, parsed_document_data):
        wire = {
            "sessionData": SessionDataMapper().map_from_entity(session_data),
            "parsedDocumentData": ParsedDocumentDataMapper().map_from_entity(parsed_document_data),
        }

        response = self._mapper().map_to_entity(wire)

        assert response == GetDataResponse(session_data=session_data, parsed_document_data=parsed_document_data)

    def test_absent_nested_sections_become_none(self):
        response = self._mapper().map_to_entity({"parsedDocumentData": None})

        assert response.session_data is None
        assert response.parsed_document_data is None

    def test_partial_nested_sections(self):
        response = self._mapper().map_to_entity(
            {"sessionData": {"email": "a@b.com"}, "parsedDocumentData": {"documentType": "IdCard"}}
        )

        assert response.session_data == SessionData(email="a@b.com")
        assert response.parsed_document_data == ParsedDocumentData(document_type="IdCard")


class TestGetStatusMapper:

    def test_map_from_entity(self):
        wire = GetStatusMapper().map_from_entity(GetStatusRequest(api_key="key-abc", email="a@b.com"))

        assert wire == {"apiKey": "key-abc", "email": "a@b.com"}

    def test_map_to_entity(self):
        response = GetStatusMapper().map_to_entity({"status": "Rejected", "token": "tok-1", "reason": "Blurry"})

        assert response == GetStatusResponse(status="Rejected", token="tok-1", reason="Blurry")

    def test_map_to_entity_with_status_only(self):
        response = GetStatusMapper().map_to_entity({"status": "Approved"})

        assert response.status == "Approved"
        assert response.token is None
