"""
MapperResolver — maps an application's entity type to its field mapper.

The PDF generation pipeline detects the entity type and asks the
resolver for the matching mapper.  To add a new entity type:
    1. Add the tag to EntityType in core/constants.py
    2. Subclass EntityMapper in mappers/
    3. Register it in MAPPER_REGISTRY below
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from agreement_mapper.core.logging import get_logger
from agreement_mapper.mappers.base import EntityMapper
from agreement_mapper.mappers.company import CompanyMapper
from agreement_mapper.mappers.errors import UnsupportedEntityTypeError
from agreement_mapper.mappers.individual import IndividualMapper
from agreement_mapper.mappers.partnership import PartnershipMapper
from agreement_mapper.mappers.proprietorship import ProprietorshipMapper

logger = get_logger(__name__)


# ═══════════════════════════════════════════════════════════
#  Mapper Registry
# ═══════════════════════════════════════════════════════════
#
#  Maps entityType tag → mapper class.
#

MAPPER_REGISTRY: dict[str, type[EntityMapper]] = {
    mapper.entity_type.value: mapper
    for mapper in (IndividualMapper, ProprietorshipMapper, PartnershipMapper, CompanyMapper)
}


class MapperResolver:
    """
    Resolves an entity type to a mapper instance.

    Lookup order for map_application():
        1. Explicit entity_type argument
        2. The application's own "entityType" field
    """

    def __init__(self, registry: dict[str, type[EntityMapper]] | None = None) -> None:
        self.registry = MAPPER_REGISTRY if registry is None else registry

    def resolve(self, entity_type: str | None) -> EntityMapper:
        """
        Return the mapper for the given entity type.

        Raises:
            UnsupportedEntityTypeError: If nothing is registered for it.
        """
        key = str(entity_type) if entity_type else ""
        mapper_cls = self.registry.get(key)
        if mapper_cls is None:
            raise UnsupportedEntityTypeError(
                f"No agreement mapper registered for entity type '{key}'",
                entity_type=key,
                details={"supported": self.list_entity_types()},
            )
        logger.info("Mapper resolved", entity_type=key, mapper=mapper_cls.__name__)
        return mapper_cls()

    def map_application(
        self,
        application: dict[str, Any] | None,
        entity_type: str | None = None,
        now: datetime | None = None,
    ) -> dict[str, Any]:
        """Resolve the mapper for an application and run it."""
        if entity_type is None and isinstance(application, dict):
            entity_type = application.get("entityType")
        return self.resolve(entity_type).map(application, now=now)

    def list_entity_types(self) -> list[str]:
        """Return all registered entity type tags."""
        return list(self.registry.keys())

    def describe_entity_types(self) -> dict[str, str]:
        """Registered entity type tags with each mapper's description."""
        return {key: mapper_cls.description for key, mapper_cls in self.registry.items()}


def map_application(
    application: dict[str, Any] | None,
    entity_type: str | None = None,
    now: datetime | None = None,
) -> dict[str, Any]:
    """Map an application with the default registry."""
    return MapperResolver().map_application(application, entity_type=entity_type, now=now)
