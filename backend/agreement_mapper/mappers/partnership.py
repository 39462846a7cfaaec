"""
PartnershipMapper: partnership firm.

Partners supply the signatory, witnesses and "persons" rows.  The GST
certificate address takes precedence over the typed-in business
address, the reverse of the company rule.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from agreement_mapper.core.constants import DocumentType, EntityType
from agreement_mapper.mappers.access import (
    find_document,
    first_of,
    get_list,
    get_nested,
    pick_signatory,
    project_persons,
)
from agreement_mapper.mappers.base import EntityMapper
from agreement_mapper.mappers.formatting import calculate_age, format_date


class PartnershipMapper(EntityMapper):
    """Map a partnership-firm application to agreement PDF fields."""

    entity_type = EntityType.PARTNERSHIP
    description = "Partnership firm (partners, GST / business PAN documents)"

    def build_fields(self, application: dict[str, Any], now: datetime) -> dict[str, Any]:
        partners = get_list(application, "partners")
        documents = get_list(application, "documents")
        signatory = pick_signatory(partners)

        # GST certificate first, typed-in business address second
        gst_doc = find_document(documents, DocumentType.GST)
        business_address = first_of(
            get_nested(gst_doc, "data.address"),
            application.get("businessAddress"),
        )

        pan_doc = find_document(documents, DocumentType.BUSINESS_PAN)
        firm_pan = first_of(get_nested(pan_doc, "data.pan"), application.get("firmPan"))

        firm_name = first_of(application.get("firmName"), application.get("name"))

        return {
            "entityType": self.entity_type.value,

            # ── Page 1: party details ─────────────
            "date": format_date(now),
            "name": firm_name,
            "age": calculate_age(self._aadhaar_dob(signatory), today=now),
            "pan": firm_pan,
            "aadhaar": "",
            "residentialAddress": business_address,

            # ── Page 9: mail address ──────────────
            "email": first_of(application.get("email")),

            # ── Page 12: witnesses ────────────────
            **self._witnesses(partners),

            # ── Page 17: application form ─────────
            "passportPhoto": self._passport_photo(signatory, application),
            "applicantName": firm_name,

            # ── Page 18: business address + partners ──
            "businessAddress": business_address,
            "businessMobileNo": first_of(application.get("phone")),
            "persons": project_persons(partners, address_path="kyc.aadhaar.data.address"),
        }
