"""Abstract storage interface."""

from abc import ABC, abstractmethod

from portfolio_api.models.database import (
    Agent,
    AgentIntegration,
    ApiKey,
    ApiUsage,
    BlogPost,
    Message,
    PortfolioItem,
    TixaeAgentTemplate,
    TixaeApiEndpoint,
    User,
)
from portfolio_api.models.schemas import (
    AgentCreate,
    AgentIntegrationCreate,
    ApiKeyCreate,
    ApiUsageCreate,
    BlogPostCreate,
    MessageCreate,
    PortfolioItemCreate,
    TixaeAgentTemplateCreate,
    TixaeApiEndpointCreate,
    UserCreate,
)


class Storage(ABC):
    """
    Abstract interface for persisting site and agent API data.

    Single-row lookups return None when nothing matches. Update methods
    return the updated row, or None when the id matches nothing.
    """

    # Users
    @abstractmethod
    async def get_user(self, id: int) -> User | None:
        pass

    @abstractmethod
    async def get_user_by_username(self, username: str) -> User | None:
        pass

    @abstractmethod
    async def create_user(self, user: UserCreate) -> User:
        pass

    # Portfolio
    @abstractmethod
    async def get_portfolio_items(self) -> list[PortfolioItem]:
        pass

    @abstractmethod
    async def get_portfolio_item(self, id: int) -> PortfolioItem | None:
        pass

    @abstractmethod
    async def create_portfolio_item(self, item: PortfolioItemCreate) -> PortfolioItem:
        pass

    # Blog
    @abstractmethod
    async def get_blog_posts(self) -> list[BlogPost]:
        """Return all posts, newest publish_date first."""
        pass

    @abstractmethod
    async def get_blog_post(self, id: int) -> BlogPost | None:
        pass

    @abstractmethod
    async def create_blog_post(self, post: BlogPostCreate) -> BlogPost:
        pass

    # Messages
    @abstractmethod
    async def create_message(self, message: MessageCreate) -> Message:
        pass

    # Agents
    @abstractmethod
    async def create_agent(self, agent: AgentCreate) -> Agent:
        pass

    @abstractmethod
    async def get_agent_by_id(self, agent_id: str) -> Agent | None:
        """Look up an agent by its external agent_id, not the row id."""
        pass

    @abstractmethod
    async def get_agents_by_user_id(self, user_id: str) -> list[Agent]:
        pass

    @abstractmethod
    async def update_agent_status(self, agent_id: str, status: str) -> Agent | None:
        pass

    # API keys
    @abstractmethod
    async def create_api_key(self, api_key: ApiKeyCreate) -> ApiKey:
        pass

    @abstractmethod
    async def get_api_key_by_id(self, id: int) -> ApiKey | None:
        pass

    @abstractmethod
    async def get_api_keys_by_user_id(self, user_id: str) -> list[ApiKey]:
        pass

    @abstractmethod
    async def validate_api_key(self, key: str) -> ApiKey | None:
        """Return the key row if ``key`` exists and is active."""
        pass

    @abstractmethod
    async def deactivate_api_key(self, id: int) -> ApiKey | None:
        pass

    @abstractmethod
    async def update_api_key_last_used(self, id: int) -> None:
        pass

    # Agent integrations
    @abstractmethod
    async def create_agent_integration(
        self, integration: AgentIntegrationCreate
    ) -> AgentIntegration:
        pass

    @abstractmethod
    async def get_integrations_by_agent_id(self, agent_id: str) -> list[AgentIntegration]:
        pass

    @abstractmethod
    async def get_integrations_by_api_key_id(self, api_key_id: int) -> list[AgentIntegration]:
        pass

    @abstractmethod
    async def deactivate_integration(self, id: int) -> AgentIntegration | None:
        pass

    # API usage
    @abstractmethod
    async def record_api_usage(self, usage: ApiUsageCreate) -> ApiUsage:
        pass

    @abstractmethod
    async def get_api_usage_by_key_id(self, api_key_id: int) -> list[ApiUsage]:
        pass

    # TIXAE API documentation
    @abstractmethod
    async def get_tixae_api_endpoints(self) -> list[TixaeApiEndpoint]:
        pass

    @abstractmethod
    async def get_tixae_api_endpoint(self, id: int) -> TixaeApiEndpoint | None:
        pass

    @abstractmethod
    async def get_tixae_api_endpoint_by_name(self, name: str) -> TixaeApiEndpoint | None:
        pass

    @abstractmethod
    async def create_tixae_api_endpoint(
        self, endpoint: TixaeApiEndpointCreate
    ) -> TixaeApiEndpoint:
        pass

    # TIXAE agent templates
    @abstractmethod
    async def get_tixae_agent_templates(self) -> list[TixaeAgentTemplate]:
        pass

    @abstractmethod
    async def get_tixae_agent_template(self, id: int) -> TixaeAgentTemplate | None:
        pass

    @abstractmethod
    async def get_tixae_agent_template_by_name(self, name: str) -> TixaeAgentTemplate | None:
        pass

    @abstractmethod
    async def create_tixae_agent_template(
        self, template: TixaeAgentTemplateCreate
    ) -> TixaeAgentTemplate:
        pass
