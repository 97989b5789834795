"""Tests for ApiKey, AgentIntegration and ApiUsage database models."""

import pytest
from datetime import datetime
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from portfolio_api.models.database import AgentIntegration, ApiKey, ApiUsage


@pytest.mark.unit
class TestApiKeyModel:
    """Test cases for the ApiKey model."""

    @pytest.mark.asyncio
    async def test_create_api_key(self, db_session):
        """Test creating a new API key record."""
        api_key = ApiKey(key="pk_model_key", user_id="user-1")
        db_session.add(api_key)
        await db_session.commit()
        await db_session.refresh(api_key)

        assert api_key.id is not None
        assert api_key.active is True
        assert api_key.is_admin is False
        assert api_key.name is None
        assert isinstance(api_key.created_at, datetime)
        assert api_key.last_used is None

    @pytest.mark.asyncio
    async def test_key_unique(self, db_session):
        """Test that key strings are unique."""
        db_session.add(ApiKey(key="pk_same", user_id="user-1"))
        await db_session.commit()

        db_session.add(ApiKey(key="pk_same", user_id="user-2"))

        with pytest.raises(Exception):  # IntegrityError
            await db_session.commit()

    @pytest.mark.asyncio
    async def test_integrations_and_usage_relationships(self, db_session):
        """Test navigating from a key to its integrations and usage."""
        api_key = ApiKey(key="pk_rel_key", user_id="user-1")
        db_session.add(api_key)
        await db_session.commit()
        await db_session.refresh(api_key)

        db_session.add(AgentIntegration(agent_id="agent-1", api_key_id=api_key.id, domain="a.com"))
        db_session.add(
            ApiUsage(api_key_id=api_key.id, method="GET", endpoint="/api/v1/x", status_code="200")
        )
        await db_session.commit()

        result = await db_session.execute(
            select(ApiKey)
            .where(ApiKey.id == api_key.id)
            .options(selectinload(ApiKey.integrations), selectinload(ApiKey.usage))
            .execution_options(populate_existing=True)
        )
        loaded = result.scalar_one()

        assert [i.domain for i in loaded.integrations] == ["a.com"]
        assert [u.status_code for u in loaded.usage] == ["200"]
        assert loaded.integrations[0].active is True
        assert isinstance(loaded.usage[0].timestamp, datetime)
