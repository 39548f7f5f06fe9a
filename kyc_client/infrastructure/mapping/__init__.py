"""Mapping infrastructure exports."""

from .get_data_mapper import GetDataMapper
from .get_status_mapper import GetStatusMapper
from .parsed_document_data_mapper import ParsedDocumentDataMapper
from .session_data_mapper import SessionDataMapper
from .start_session_mapper import StartSessionMapper

__all__ = [
    "GetDataMapper",
    "GetStatusMapper",
    "ParsedDocumentDataMapper",
    "SessionDataMapper",
    "StartSessionMapper",
]
