"""API key, integration and usage schemas."""

from datetime import datetime
from typing import Any
from pydantic import BaseModel, Field


class ApiKeyCreate(BaseModel):
    """Schema for issuing an API key.

    ``key`` is generated by the server when omitted.
    """

    user_id: str = Field(..., min_length=1, max_length=100)
    name: str | None = Field(None, max_length=255)
    key: str | None = Field(None, min_length=8, max_length=128)
    active: bool = True
    is_admin: bool = False


class ApiKeyResponse(BaseModel):
    """Schema for API key response."""

    id: int
    key: str
    name: str | None
    user_id: str
    active: bool
    is_admin: bool = False
    created_at: datetime
    last_used: datetime | None = None

    model_config = {"from_attributes": True}


class ApiKeyVerifyResponse(BaseModel):
    """Schema returned to a caller verifying its own key."""

    valid: bool = True
    id: int
    name: str | None
    user_id: str


class AgentIntegrationCreate(BaseModel):
    """Schema for allowing a domain to use an API key."""

    agent_id: str = Field(..., min_length=1, max_length=100)
    api_key_id: int
    domain: str = Field(..., min_length=1, max_length=255, description="example.com or *.example.com")
    active: bool = True


class AgentIntegrationResponse(AgentIntegrationCreate):
    """Schema for integration response."""

    id: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ApiUsageCreate(BaseModel):
    """Schema for recording one request made with an API key."""

    api_key_id: int
    method: str | None = None
    endpoint: str
    status_code: str
    request_payload: Any = None


class ApiUsageResponse(ApiUsageCreate):
    """Schema for usage record response."""

    id: int
    timestamp: datetime

    model_config = {"from_attributes": True}
