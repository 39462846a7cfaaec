"""API schema package."""

from agreement_mapper.api.schemas.agreements import (
    AgreementFieldsRequest,
    AgreementFieldsResponse,
    EntityTypesResponse,
)

__all__ = ["AgreementFieldsRequest", "AgreementFieldsResponse", "EntityTypesResponse"]
