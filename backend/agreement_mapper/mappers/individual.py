"""
IndividualMapper: natural-person applicant.

Identity comes from Aadhaar / PAN KYC; references double as witnesses
and fill the page 18 "persons" rows.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from agreement_mapper.core.constants import EntityType
from agreement_mapper.mappers.access import first_of, get_list, project_persons
from agreement_mapper.mappers.base import EntityMapper
from agreement_mapper.mappers.formatting import format_date


class IndividualMapper(EntityMapper):
    """Map an individual application to agreement PDF fields."""

    entity_type = EntityType.INDIVIDUAL
    description = "Individual applicant (Aadhaar / PAN KYC, references as witnesses)"

    def build_fields(self, application: dict[str, Any], now: datetime) -> dict[str, Any]:
        references = get_list(application, "references")
        identity = self._applicant_identity(application, now)

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
            "mobileNo": first_of(application.get("phone")),
            "emailAddress": first_of(application.get("email")),

            # ── Page 18: references as relatives ──
            "persons": project_persons(references),
        }
