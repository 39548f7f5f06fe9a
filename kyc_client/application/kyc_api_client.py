"""Client for the KYC identity-verification API."""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

import requests

from kyc_client.constants import (
    GET_DATA_PATH,
    GET_STATUS_PATH,
    START_SESSION_PATH,
    WRONG_FIELDS_STATUS_CODE,
)
from kyc_client.domain.entities.get_data import GetDataRequest, GetDataResponse
from kyc_client.domain.entities.get_status import GetStatusRequest, GetStatusResponse
from kyc_client.domain.entities.start_session import StartSessionRequest, StartSessionResponse
from kyc_client.domain.exceptions import (
    MissingSessionDataError,
    UnexpectedResponseError,
    WrongFieldsDataError,
)
from kyc_client.infrastructure.mapping import (
    GetDataMapper,
    GetStatusMapper,
    ParsedDocumentDataMapper,
    SessionDataMapper,
    StartSessionMapper,
)
from kyc_client.infrastructure.transport import KycTransport


class KycApiClient:
    """
    Runs the three KYC operations over an injected transport.

    Each call is one POST round trip. The client only holds the transport and
    the API key, so it is as thread-safe as the transport it wraps.
    """

    def __init__(
        self,
        transport: KycTransport,
        api_key: str,
        *,
        start_session_mapper: Optional[StartSessionMapper] = None,
        get_data_mapper: Optional[GetDataMapper] = None,
        get_status_mapper: Optional[GetStatusMapper] = None,
    ) -> None:
        self._transport = transport
        self._api_key = api_key
        session_data_mapper = SessionDataMapper()
        self._start_session_mapper = start_session_mapper or StartSessionMapper(session_data_mapper)
        self._get_data_mapper = get_data_mapper or GetDataMapper(
            session_data_mapper,
            ParsedDocumentDataMapper(),
        )
        self._get_status_mapper = get_status_mapper or GetStatusMapper()

    @property
    def api_key(self) -> str:
        return self._api_key

    def start_session(self, request: StartSessionRequest) -> StartSessionResponse:
        """Open a verification session.

        The caller's request is left untouched; a copy carrying the client's
        API key is sent.

        Raises:
            MissingSessionDataError: ``request.session_data`` is not set. No
                request is sent in that case.
            WrongFieldsDataError: the service answered 400.
        """
        if request.session_data is None:
            raise MissingSessionDataError()

        payload = self._start_session_mapper.map_from_entity(request.with_api_key(self._api_key))
        data = self._post(START_SESSION_PATH, payload)
        return self._start_session_mapper.map_to_entity(data)

    def get_data(self, token: str) -> GetDataResponse:
        """Fetch session data and extracted document fields for ``token``."""
        request = GetDataRequest(api_key=self._api_key, token=token)
        data = self._post(GET_DATA_PATH, self._get_data_mapper.map_from_entity(request))
        return self._get_data_mapper.map_to_entity(data)

    def get_status(self, email: str) -> GetStatusResponse:
        """Look up the verification status of the applicant with ``email``."""
        request = GetStatusRequest(api_key=self._api_key, email=email)
        data = self._post(GET_STATUS_PATH, self._get_status_mapper.map_from_entity(request))
        return self._get_status_mapper.map_to_entity(data)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _post(self, path: str, payload: Dict[str, Any]) -> Mapping[str, Any]:
        try:
            response = self._transport.request("POST", path, json=payload)
        except requests.HTTPError as exc:
            self._handle_http_error(exc)
            raise
        data = response.json()
        if not isinstance(data, Mapping):
            raise UnexpectedResponseError(data)
        return data

    def _handle_http_error(self, exc: requests.HTTPError) -> None:
        response = exc.response
        if response is None or response.status_code != WRONG_FIELDS_STATUS_CODE:
            return
        raise WrongFieldsDataError(_decode_error_body(response)) from exc


def _decode_error_body(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None
