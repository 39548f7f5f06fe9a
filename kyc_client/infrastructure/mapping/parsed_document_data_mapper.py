"""Map ParsedDocumentData to and from its wire representation."""
from __future__ import annotations

from typing import Any, Dict, Mapping, Tuple

from kyc_client.domain.entities.parsed_document_data import ParsedDocumentData

# (attribute, wire key) pairs in the order the service documents them.
_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("document_type", "documentType"),
    ("document_number", "documentNumber"),
    ("first_name", "firstName"),
    ("last_name", "lastName"),
    ("personal_code", "personalCode"),
    ("date_of_birth", "dateOfBirth"),
    ("sex", "sex"),
    ("nationality", "nationality"),
    ("issuing_country", "issuingCountry"),
    ("date_of_issue", "dateOfIssue"),
    ("date_of_expiry", "dateOfExpiry"),
    ("mrz", "mrz"),
)


class ParsedDocumentDataMapper:
    """Converts extracted document fields between entity and wire form."""

    def map_from_entity(self, entity: ParsedDocumentData) -> Dict[str, Any]:
        return {wire_key: getattr(entity, attribute) for attribute, wire_key in _FIELDS}

    def map_to_entity(self, data: Mapping[str, Any]) -> ParsedDocumentData:
        return ParsedDocumentData(**{attribute: data.get(wire_key) for attribute, wire_key in _FIELDS})
