"""Map SessionData to and from its wire representation."""
from __future__ import annotations

from typing import Any, Dict, Mapping

from kyc_client.domain.entities.session_data import SessionData


class SessionDataMapper:
    """Field-level mapper shared by the start-session and get-data flows."""

    def map_from_entity(self, entity: SessionData) -> Dict[str, Any]:
        return {
            "email": entity.email,
            "firstName": entity.first_name,
            "lastName": entity.last_name,
            "personalCode": entity.personal_code,
            "phoneNumber": entity.phone_number,
            "dateOfBirth": entity.date_of_birth,
            "countryCode": entity.country_code,
            "language": entity.language,
            "callbackUrl": entity.callback_url,
            "redirectUrl": entity.redirect_url,
            "externalReferenceId": entity.external_reference_id,
        }

    def map_to_entity(self, data: Mapping[str, Any]) -> SessionData:
        return SessionData(
            email=data.get("email"),
            first_name=data.get("firstName"),
            last_name=data.get("lastName"),
            personal_code=data.get("personalCode"),
            phone_number=data.get("phoneNumber"),
            date_of_birth=data.get("dateOfBirth"),
            country_code=data.get("countryCode"),
            language=data.get("language"),
            callback_url=data.get("callbackUrl"),
            redirect_url=data.get("redirectUrl"),
            external_reference_id=data.get("externalReferenceId"),
        )
