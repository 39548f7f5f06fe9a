"""Domain entities package"""

from .get_data import GetDataRequest, GetDataResponse
from .get_status import GetStatusRequest, GetStatusResponse
from .parsed_document_data import ParsedDocumentData
from .session_data import SessionData
from .start_session import StartSessionRequest, StartSessionResponse

__all__ = [
    "GetDataRequest",
    "GetDataResponse",
    "GetStatusRequest",
    "GetStatusResponse",
    "ParsedDocumentData",
    "SessionData",
    "StartSessionRequest",
    "StartSessionResponse",
]
