"""TIXAE reference data schemas."""

from datetime import datetime
from typing import Any
from pydantic import BaseModel, Field


class TixaeApiEndpointCreate(BaseModel):
    """Schema for documenting a TIXAE endpoint."""

    name: str = Field(..., min_length=1, max_length=255)
    method: str = Field(..., min_length=1, max_length=10)
    path: str = Field(..., min_length=1, max_length=500)
    description: str | None = None
    category: str | None = None
    parameters: dict[str, Any] = Field(default_factory=dict)
    response_example: Any = None


class TixaeApiEndpointResponse(TixaeApiEndpointCreate):
    """Schema for TIXAE endpoint response."""

    id: int

    model_config = {"from_attributes": True}


class TixaeAgentTemplateCreate(BaseModel):
    """Schema for creating an agent template."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    category: str | None = None
    config: dict[str, Any] = Field(default_factory=dict)


class TixaeAgentTemplateResponse(TixaeAgentTemplateCreate):
    """Schema for agent template response."""

    id: int
    created_at: datetime

    model_config = {"from_attributes": True}
