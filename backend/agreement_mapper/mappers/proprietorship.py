"""
ProprietorshipMapper: sole proprietor.

Same identity block as an individual, plus a business address taken
from the first Shop Act / Udyam / GST document.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from agreement_mapper.core.constants import DocumentType, EntityType
from agreement_mapper.mappers.access import find_document, first_of, get_list, get_nested, project_persons
from agreement_mapper.mappers.base import EntityMapper
from agreement_mapper.mappers.formatting import format_date

BUSINESS_ADDRESS_DOCUMENTS = (DocumentType.SHOP_ACT, DocumentType.UDYAM, DocumentType.GST)


class ProprietorshipMapper(EntityMapper):
    """Map a sole-proprietorship application to agreement PDF fields."""

    entity_type = EntityType.PROPRIETORSHIP
    description = "Sole proprietorship (proprietor KYC, business registration documents)"

    def build_fields(self, application: dict[str, Any], now: datetime) -> dict[str, Any]:
        references = get_list(application, "references")
        documents = get_list(application, "documents")
        identity = self._applicant_identity(application, now)

        business_doc = find_document(documents, *BUSINESS_ADDRESS_DOCUMENTS)
        business_address = first_of(
            get_nested(business_doc, "data.address"),
            application.get("businessAddress"),
        )

        return {
            "entityType": self.entity_type.value,

            # ── Page 1: party details ─────────────
            "date": format_date(now),
            **identity,

            # ── Page 9: mail address ──────────────
            "email": first_of(application.get("email")),

            # ── Page 12: witnesses ────────────────
            **self._witnesses(references),

            # ── Page 17: application form ─────────
            "passportPhoto": first_of(
                application.get("faceMatchImage"),
                application.get("livenessImage"),
            ),
            "applicantName": identity["name"],
            "aadhaarNo": identity["aadhaar"],

            # ── Page 18: business address ─────────
            "businessAddress": business_address,
            "businessMobileNo": first_of(application.get("phone")),
            "persons": project_persons(references),
        }
