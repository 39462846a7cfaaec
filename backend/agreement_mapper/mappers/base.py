"""
EntityMapper — abstract base class for all agreement field mappers.

Every entity type (individual, proprietorship, partnership, company)
gets one mapper.  The base class normalises the input, fixes "now" for
the call and logs the outcome; subclasses only build the field
dictionary.

Subclasses MUST implement:
    - entity_type (EntityType): discriminator emitted as "entityType"
    - build_fields(app, now): the actual field mapping
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any

from agreement_mapper.core.constants import EntityType
from agreement_mapper.core.logging import get_logger
from agreement_mapper.mappers.access import first_of, get_nested, name_at
from agreement_mapper.mappers.formatting import calculate_age, current_time, format_aadhaar

logger = get_logger(__name__)


class EntityMapper(ABC):
    """
    Base class for every entity mapper.

    Mappers are stateless; one instance can serve any number of
    concurrent calls.
    """

    entity_type: EntityType
    description: str = "No description"

    def map(self, application: dict[str, Any] | None, now: datetime | None = None) -> dict[str, Any]:
        """
        Map an application record to the PDF field dictionary.

        Args:
            application: Onboarding application record (never mutated).
                         None is treated as an empty record.
            now: Document time.  Defaults to the document clock, read
                 once per call.
        """
        if not isinstance(application, dict):
            application = {}
        if now is None:
            now = current_time()

        fields = self.build_fields(application, now)

        logger.debug(
            "Agreement fields mapped",
            entity_type=self.entity_type.value,
            persons=len(fields.get("persons", [])),
            populated=sum(1 for v in fields.values() if isinstance(v, str) and v),
        )
        return fields

    @abstractmethod
    def build_fields(self, application: dict[str, Any], now: datetime) -> dict[str, Any]:
        """Build the field dictionary.  Must never raise on missing data."""
        ...

    # ─── Helpers available to all mappers ──────────────

    @staticmethod
    def _witnesses(people: list[Any]) -> dict[str, str]:
        """Page 12 witness slots from the first two entries, by position."""
        return {
            "witness1Name": name_at(people, 0),
            "witness2Name": name_at(people, 1),
        }

    @staticmethod
    def _aadhaar_dob(record: Any) -> str:
        """Date of birth from an Aadhaar KYC payload (either key spelling)."""
        return first_of(
            get_nested(record, "kyc.aadhaar.data.dob"),
            get_nested(record, "kyc.aadhaar.data.date_of_birth"),
        )

    def _applicant_identity(self, application: dict[str, Any], now: datetime) -> dict[str, str]:
        """
        Page 1 identity block for a natural-person applicant.

        Aadhaar / PAN KYC first, then the same-named top-level field.
        """
        aadhaar = format_aadhaar(
            first_of(
                get_nested(application, "kyc.aadhaar.maskedNumber"),
                application.get("aadhaar"),
            )
        )
        return {
            "name": first_of(get_nested(application, "kyc.aadhaar.data.name"), application.get("name")),
            "age": calculate_age(
                first_of(self._aadhaar_dob(application), application.get("dob")),
                today=now,
            ),
            "pan": first_of(get_nested(application, "kyc.pan.number"), application.get("pan")),
            "aadhaar": aadhaar,
            "residentialAddress": first_of(
                get_nested(application, "kyc.aadhaar.data.address"),
                application.get("address"),
            ),
        }

    @staticmethod
    def _passport_photo(signatory: dict[str, Any], application: dict[str, Any]) -> str:
        """Signatory's face-match capture, else the application's liveness image."""
        return first_of(
            get_nested(signatory, "kyc.faceMatchImage"),
            application.get("livenessImage"),
        )
