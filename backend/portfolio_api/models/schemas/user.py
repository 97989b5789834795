"""User schemas for API validation."""

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Schema for creating a user."""

    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1)
