"""Pydantic schemas."""

from portfolio_api.models.schemas.user import UserCreate
from portfolio_api.models.schemas.content import (
    PortfolioItemCreate,
    PortfolioItemResponse,
    BlogPostCreate,
    BlogPostResponse,
    MessageCreate,
    MessageResponse,
)
from portfolio_api.models.schemas.agent import AgentCreate, AgentStatusUpdate, AgentResponse
from portfolio_api.models.schemas.api_key import (
    ApiKeyCreate,
    ApiKeyResponse,
    ApiKeyVerifyResponse,
    AgentIntegrationCreate,
    AgentIntegrationResponse,
    ApiUsageCreate,
    ApiUsageResponse,
)
from portfolio_api.models.schemas.tixae import (
    TixaeApiEndpointCreate,
    TixaeApiEndpointResponse,
    TixaeAgentTemplateCreate,
    TixaeAgentTemplateResponse,
)

__all__ = [
    "UserCreate",
    "PortfolioItemCreate",
    "PortfolioItemResponse",
    "BlogPostCreate",
    "BlogPostResponse",
    "MessageCreate",
    "MessageResponse",
    "AgentCreate",
    "AgentStatusUpdate",
    "AgentResponse",
    "ApiKeyCreate",
    "ApiKeyResponse",
    "ApiKeyVerifyResponse",
    "AgentIntegrationCreate",
    "AgentIntegrationResponse",
    "ApiUsageCreate",
    "ApiUsageResponse",
    "TixaeApiEndpointCreate",
    "TixaeApiEndpointResponse",
    "TixaeAgentTemplateCreate",
    "TixaeAgentTemplateResponse",
]
