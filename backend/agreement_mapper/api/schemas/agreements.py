"""Agreement field mapping request/response schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class AgreementFieldsRequest(BaseModel):
    """Request payload for the field mapping endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    application: dict[str, Any] = Field(default_factory=dict)
    entity_type: str | None = Field(default=None, alias="entityType")
    now: datetime | None = None


class AgreementFieldsResponse(BaseModel):
    """Mapped PDF fields for one application."""

    model_config = ConfigDict(populate_by_name=True)

    entity_type: str = Field(..., alias="entityType")
    fields: dict[str, Any]


class EntityTypesResponse(BaseModel):
    """Entity types with a registered mapper, keyed to its description."""

    model_config = ConfigDict(populate_by_name=True)

    entity_types: dict[str, str] = Field(..., alias="entityTypes")
