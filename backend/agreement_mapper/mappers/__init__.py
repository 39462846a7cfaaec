"""
Agreement field mappers, one per entity type.

Exports:
    - IndividualMapper, ProprietorshipMapper, PartnershipMapper, CompanyMapper
    - MapperResolver / map_application(): dispatch on entityType
"""

from agreement_mapper.mappers.base import EntityMapper
from agreement_mapper.mappers.company import CompanyMapper
from agreement_mapper.mappers.errors import MappingError, UnsupportedEntityTypeError
from agreement_mapper.mappers.individual import IndividualMapper
from agreement_mapper.mappers.partnership import PartnershipMapper
from agreement_mapper.mappers.proprietorship import ProprietorshipMapper
from agreement_mapper.mappers.resolver import MAPPER_REGISTRY, MapperResolver, map_application

__all__ = [
    "EntityMapper",
    "IndividualMapper",
    "ProprietorshipMapper",
    "PartnershipMapper",
    "CompanyMapper",
    "MapperResolver",
    "MAPPER_REGISTRY",
    "map_application",
    "MappingError",
    "UnsupportedEntityTypeError",
]
