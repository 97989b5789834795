"""Database models."""

from portfolio_api.models.database.user import User
from portfolio_api.models.database.portfolio import PortfolioItem
from portfolio_api.models.database.blog_post import BlogPost
from portfolio_api.models.database.message import Message
from portfolio_api.models.database.agent import Agent
from portfolio_api.models.database.api_key import ApiKey
from portfolio_api.models.database.agent_integration import AgentIntegration
from portfolio_api.models.database.api_usage import ApiUsage
from portfolio_api.models.database.tixae import TixaeApiEndpoint, TixaeAgentTemplate

__all__ = [
    "User",
    "PortfolioItem",
    "BlogPost",
    "Message",
    "Agent",
    "ApiKey",
    "AgentIntegration",
    "ApiUsage",
    "TixaeApiEndpoint",
    "TixaeAgentTemplate",
]
