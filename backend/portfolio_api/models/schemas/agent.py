"""Agent schemas for API validation."""

from datetime import datetime
from typing import Any
from pydantic import BaseModel, Field


class AgentCreate(BaseModel):
    """Schema for registering an agent."""

    agent_id: str = Field(..., min_length=1, max_length=100)
    user_id: str = Field(..., min_length=1, max_length=100)
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    status: str = "active"
    config: dict[str, Any] = Field(default_factory=dict)


class AgentStatusUpdate(BaseModel):
    """Schema for changing an agent's status."""

    status: str = Field(..., min_length=1, max_length=50)


class AgentResponse(AgentCreate):
    """Schema for agent response."""

    id: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
