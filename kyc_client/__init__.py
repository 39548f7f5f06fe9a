"""Client library for the KYC identity-verification API."""

from kyc_client.application import (
    KycApiClient,
    KycResult,
    Ok,
    TransportFailure,
    ValidationFailure,
    build_kyc_api_client,
    capture,
)
from kyc_client.domain.entities import (
    GetDataRequest,
    GetDataResponse,
    GetStatusRequest,
    GetStatusResponse,
    ParsedDocumentData,
    SessionData,
    StartSessionRequest,
    StartSessionResponse,
)
from kyc_client.domain.exceptions import (
    KycClientException,
    KycConfigurationError,
    MissingSessionDataError,
    UnexpectedResponseError,
    WrongFieldsDataError,
)
from kyc_client.domain.value_objects import KycStatus
from kyc_client.infrastructure.transport import KycTransport, RequestsTransport

__all__ = [
    "GetDataRequest",
    "GetDataResponse",
    "GetStatusRequest",
    "GetStatusResponse",
    "KycApiClient",
    "KycClientException",
    "KycConfigurationError",
    "KycResult",
    "KycStatus",
    "KycTransport",
    "MissingSessionDataError",
    "Ok",
    "ParsedDocumentData",
    "RequestsTransport",
    "SessionData",
    "StartSessionRequest",
    "StartSessionResponse",
    "TransportFailure",
    "UnexpectedResponseError",
    "ValidationFailure",
    "WrongFieldsDataError",
    "build_kyc_api_client",
    "capture",
]
