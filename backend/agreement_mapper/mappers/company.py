"""
CompanyMapper: Pvt Ltd / LLP / OPC.

Directors supply the signatory, witnesses and "persons" rows; uploaded
GST and company PAN documents supply address and PAN.  DIN is printed
for Pvt Ltd and OPC, DPIN for LLP.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from agreement_mapper.core.constants import CompanySubType, DocumentType, EntityType
from agreement_mapper.mappers.access import (
    find_document,
    first_of,
    get_list,
    get_nested,
    pick_signatory,
    project_persons,
)
from agreement_mapper.mappers.base import EntityMapper
from agreement_mapper.mappers.formatting import format_date

DIN_SUB_TYPES = (CompanySubType.PVT_LTD, CompanySubType.OPC)


class CompanyMapper(EntityMapper):
    """Map a company application to agreement PDF fields."""

    entity_type = EntityType.COMPANY
    description = "Registered company (directors, GST / company PAN documents)"

    def build_fields(self, application: dict[str, Any], now: datetime) -> dict[str, Any]:
        directors = get_list(application, "directors")
        documents = get_list(application, "documents")
        signatory = pick_signatory(directors)

        sub_type = str(application.get("companySubType") or CompanySubType.PVT_LTD)
        is_llp = sub_type == CompanySubType.LLP

        # Registered address first, GST certificate second
        gst_doc = find_document(documents, DocumentType.GST)
        business_address = first_of(
            application.get("registeredAddress"),
            get_nested(gst_doc, "data.address"),
        )

        pan_doc = find_document(documents, DocumentType.COMPANY_PAN)
        company_pan = first_of(get_nested(pan_doc, "data.pan"), application.get("companyPan"))

        company_name = first_of(application.get("companyName"), application.get("name"))

        return {
            "entityType": self.entity_type.value,
            "companySubType": sub_type,

            # ── Page 1: party details ─────────────
            "date": format_date(now),
            "name": company_name,
            "age": "",
            "pan": company_pan,
            "aadhaar": "",
            "residentialAddress": business_address,

            # ── Page 9: mail address ──────────────
            "email": first_of(application.get("email")),

            # ── Page 12: witnesses ────────────────
            **self._witnesses(directors),

            # ── Page 17: application form ─────────
            "passportPhoto": self._passport_photo(signatory, application),
            "applicantName": company_name,
            "dinNo": get_nested(signatory, "din") if sub_type in DIN_SUB_TYPES else "",
            "dpinNo": get_nested(signatory, "dpin") if is_llp else "",
            "isLLP": is_llp,

            # ── Page 18: business address + directors ──
            "businessAddress": business_address,
            "businessMobileNo": first_of(application.get("phone")),
            "persons": project_persons(directors, address_path="kyc.aadhaar.data.address"),
        }
