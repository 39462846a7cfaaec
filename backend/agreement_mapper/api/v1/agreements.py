"""
Agreement endpoints: map an application to PDF template fields.
"""

from fastapi import APIRouter, HTTPException

from agreement_mapper.api.schemas import (
    AgreementFieldsRequest,
    AgreementFieldsResponse,
    EntityTypesResponse,
)
from agreement_mapper.core.logging import get_logger
from agreement_mapper.mappers import MapperResolver, UnsupportedEntityTypeError

logger = get_logger(__name__)

router = APIRouter(prefix="/agreements", tags=["Agreements"])

resolver = MapperResolver()


@router.post("/fields", response_model=AgreementFieldsResponse)
async def map_agreement_fields(payload: AgreementFieldsRequest) -> AgreementFieldsResponse:
    """
    Map an onboarding application to agreement PDF fields.

    The entity type comes from the request, else from
    application.entityType.
    """
    try:
        fields = resolver.map_application(
            payload.application,
            entity_type=payload.entity_type,
            now=payload.now,
        )
    except UnsupportedEntityTypeError as exc:
        logger.warning("Agreement mapping rejected", entity_type=exc.entity_type)
        raise HTTPException(
            status_code=422,
            detail=str(exc),
        ) from exc

    return AgreementFieldsResponse(entity_type=fields["entityType"], fields=fields)


@router.get("/entity-types", response_model=EntityTypesResponse)
async def list_entity_types() -> EntityTypesResponse:
    """Entity types the service can map."""
    return EntityTypesResponse(entity_types=resolver.describe_entity_types())
