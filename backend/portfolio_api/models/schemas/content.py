"""Portfolio, blog and contact schemas for API validation."""

from datetime import datetime
from pydantic import BaseModel, Field


class PortfolioItemCreate(BaseModel):
    """Schema for creating a portfolio item."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str
    image_url: str | None = None
    category: str | None = None
    link: str | None = None
    technologies: list[str] = Field(default_factory=list)
    featured: bool = False


class PortfolioItemResponse(PortfolioItemCreate):
    """Schema for portfolio item response."""

    id: int
    created_at: datetime

    model_config = {"from_attributes": True}


class BlogPostCreate(BaseModel):
    """Schema for creating a blog post."""

    title: str = Field(..., min_length=1, max_length=255)
    slug: str = Field(..., min_length=1, max_length=255)
    excerpt: str | None = None
    content: str
    image_url: str | None = None
    author: str | None = None
    tags: list[str] = Field(default_factory=list)
    publish_date: datetime | None = None


class BlogPostResponse(BlogPostCreate):
    """Schema for blog post response."""

    id: int
    publish_date: datetime

    model_config = {"from_attributes": True}


class MessageCreate(BaseModel):
    """Schema for a contact form submission."""

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3, max_length=255)
    subject: str | None = Field(None, max_length=255)
    message: str = Field(..., min_length=1)


class MessageResponse(MessageCreate):
    """Schema for stored message response."""

    id: int
    created_at: datetime

    model_config = {"from_attributes": True}
