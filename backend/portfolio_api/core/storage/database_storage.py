"""SQLAlchemy-backed storage implementation."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel
from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from portfolio_api.core.storage.base import Storage
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


class DatabaseStorage(Storage):
    """Storage over an async SQLAlchemy session factory.

    Each call opens its own session, so one instance can be shared across
    concurrent requests.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def _all(self, query: Select) -> list[Any]:
        async with self.session_factory() as session:
            result = await session.execute(query)
            return list(result.scalars().all())

    async def _first(self, query: Select) -> Any | None:
        async with self.session_factory() as session:
            result = await session.execute(query)
            return result.scalars().first()

    async def _insert(self, model: type, data: BaseModel) -> Any:
        # Unset optional fields fall back to column defaults
        row = model(**data.model_dump(exclude_none=True))
        async with self.session_factory() as session:
            session.add(row)
            await session.commit()
            await session.refresh(row)
            return row

    async def _update(self, query: Select, **values: Any) -> Any | None:
        async with self.session_factory() as session:
            result = await session.execute(query)
            row = result.scalars().first()
            if row is None:
                return None

            for name, value in values.items():
                setattr(row, name, value)

            await session.commit()
            await session.refresh(row)
            return row

    # Users
    async def get_user(self, id: int) -> User | None:
        return await self._first(select(User).where(User.id == id))

    async def get_user_by_username(self, username: str) -> User | None:
        return await self._first(select(User).where(User.username == username))

    async def create_user(self, user: UserCreate) -> User:
        return await self._insert(User, user)

    # Portfolio
    async def get_portfolio_items(self) -> list[PortfolioItem]:
        return await self._all(select(PortfolioItem))

    async def get_portfolio_item(self, id: int) -> PortfolioItem | None:
        return await self._first(select(PortfolioItem).where(PortfolioItem.id == id))

    async def create_portfolio_item(self, item: PortfolioItemCreate) -> PortfolioItem:
        return await self._insert(PortfolioItem, item)

    # Blog
    async def get_blog_posts(self) -> list[BlogPost]:
        return await self._all(select(BlogPost).order_by(BlogPost.publish_date.desc()))

    async def get_blog_post(self, id: int) -> BlogPost | None:
        return await self._first(select(BlogPost).where(BlogPost.id == id))

    async def create_blog_post(self, post: BlogPostCreate) -> BlogPost:
        return await self._insert(BlogPost, post)

    # Messages
    async def create_message(self, message: MessageCreate) -> Message:
        return await self._insert(Message, message)

    # Agents
    async def create_agent(self, agent: AgentCreate) -> Agent:
        return await self._insert(Agent, agent)

    async def get_agent_by_id(self, agent_id: str) -> Agent | None:
        return await self._first(select(Agent).where(Agent.agent_id == agent_id))

    async def get_agents_by_user_id(self, user_id: str) -> list[Agent]:
        return await self._all(select(Agent).where(Agent.user_id == user_id))

    async def update_agent_status(self, agent_id: str, status: str) -> Agent | None:
        return await self._update(
            select(Agent).where(Agent.agent_id == agent_id),
            status=status,
            updated_at=datetime.utcnow(),
        )

    # API keys
    async def create_api_key(self, api_key: ApiKeyCreate) -> ApiKey:
        return await self._insert(ApiKey, api_key)

    async def get_api_key_by_id(self, id: int) -> ApiKey | None:
        return await self._first(select(ApiKey).where(ApiKey.id == id))

    async def get_api_keys_by_user_id(self, user_id: str) -> list[ApiKey]:
        return await self._all(select(ApiKey).where(ApiKey.user_id == user_id))

    async def validate_api_key(self, key: str) -> ApiKey | None:
        return await self._first(
            select(ApiKey).where(ApiKey.key == key, ApiKey.active.is_(True))
        )

    async def deactivate_api_key(self, id: int) -> ApiKey | None:
        return await self._update(select(ApiKey).where(ApiKey.id == id), active=False)

    async def update_api_key_last_used(self, id: int) -> None:
        await self._update(select(ApiKey).where(ApiKey.id == id), last_used=datetime.utcnow())

    # Agent integrations
    async def create_agent_integration(
        self, integration: AgentIntegrationCreate
    ) -> AgentIntegration:
        return await self._insert(AgentIntegration, integration)

    async def get_integrations_by_agent_id(self, agent_id: str) -> list[AgentIntegration]:
        return await self._all(
            select(AgentIntegration).where(AgentIntegration.agent_id == agent_id)
        )

    async def get_integrations_by_api_key_id(self, api_key_id: int) -> list[AgentIntegration]:
        return await self._all(
            select(AgentIntegration).where(AgentIntegration.api_key_id == api_key_id)
        )

    async def deactivate_integration(self, id: int) -> AgentIntegration | None:
        return await self._update(
            select(AgentIntegration).where(AgentIntegration.id == id),
            active=False,
            updated_at=datetime.utcnow(),
        )

    # API usage
    async def record_api_usage(self, usage: ApiUsageCreate) -> ApiUsage:
        return await self._insert(ApiUsage, usage)

    async def get_api_usage_by_key_id(self, api_key_id: int) -> list[ApiUsage]:
        return await self._all(select(ApiUsage).where(ApiUsage.api_key_id == api_key_id))

    # TIXAE API documentation
    async def get_tixae_api_endpoints(self) -> list[TixaeApiEndpoint]:
        return await self._all(select(TixaeApiEndpoint))

    async def get_tixae_api_endpoint(self, id: int) -> TixaeApiEndpoint | None:
        return await self._first(select(TixaeApiEndpoint).where(TixaeApiEndpoint.id == id))

    async def get_tixae_api_endpoint_by_name(self, name: str) -> TixaeApiEndpoint | None:
        return await self._first(select(TixaeApiEndpoint).where(TixaeApiEndpoint.name == name))

    async def create_tixae_api_endpoint(
        self, endpoint: TixaeApiEndpointCreate
    ) -> TixaeApiEndpoint:
        return await self._insert(TixaeApiEndpoint, endpoint)

    # TIXAE agent templates
    async def get_tixae_agent_templates(self) -> list[TixaeAgentTemplate]:
        return await self._all(select(TixaeAgentTemplate))

    async def get_tixae_agent_template(self, id: int) -> TixaeAgentTemplate | None:
        return await self._first(select(TixaeAgentTemplate).where(TixaeAgentTemplate.id == id))

    async def get_tixae_agent_template_by_name(self, name: str) -> TixaeAgentTemplate | None:
        return await self._first(
            select(TixaeAgentTemplate).where(TixaeAgentTemplate.name == name)
        )

    async def create_tixae_agent_template(
        self, template: TixaeAgentTemplateCreate
    ) -> TixaeAgentTemplate:
        return await self._insert(TixaeAgentTemplate, template)


# Global storage instance
_storage: Storage | None = None


def get_storage() -> Storage:
    """Get global storage instance bound to the application database."""
    global _storage
    if _storage is None:
        from portfolio_api.core.storage.database import AsyncSessionLocal

        _storage = DatabaseStorage(AsyncSessionLocal)
    return _storage
