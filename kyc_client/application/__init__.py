"""Application layer: the API client and its call helpers."""

from .factory import build_kyc_api_client
from .kyc_api_client import KycApiClient
from .results import KycResult, Ok, TransportFailure, ValidationFailure, capture

__all__ = [
    "KycApiClient",
    "KycResult",
    "Ok",
    "TransportFailure",
    "ValidationFailure",
    "build_kyc_api_client",
    "capture",
]
