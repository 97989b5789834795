"""Agent API routes."""

from fastapi import APIRouter, Depends, HTTPException, status

from portfolio_api.core.storage.base import Storage
from portfolio_api.core.storage.database_storage import get_storage
from portfolio_api.models.schemas import (
    AgentCreate,
    AgentStatusUpdate,
    AgentResponse,
    AgentIntegrationResponse,
)

router = APIRouter(prefix="/agents", tags=["agents"])


@router.get("", response_model=list[AgentResponse])
async def list_agents(user_id: str, storage: Storage = Depends(get_storage)):
    """List the agents belonging to a user."""
    return await storage.get_agents_by_user_id(user_id)


@router.post("", response_model=AgentResponse, status_code=status.HTTP_201_CREATED)
async def create_agent(agent_data: AgentCreate, storage: Storage = Depends(get_storage)):
    """Register an agent."""
    if await storage.get_agent_by_id(agent_data.agent_id):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Agent with id {agent_data.agent_id} already exists",
        )
    return await storage.create_agent(agent_data)


@router.get("/{agent_id}", response_model=AgentResponse)
async def get_agent(agent_id: str, storage: Storage = Depends(get_storage)):
    """Get an agent by its agent ID."""
    agent = await storage.get_agent_by_id(agent_id)
    if not agent:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Agent with id {agent_id} not found",
        )
    return agent


@router.patch("/{agent_id}/status", response_model=AgentResponse)
async def update_agent_status(
    agent_id: str,
    status_data: AgentStatusUpdate,
    storage: Storage = Depends(get_storage),
):
    """Change an agent's status."""
    agent = await storage.update_agent_status(agent_id, status_data.status)
    if not agent:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Agent with id {agent_id} not found",
        )
    return agent


@router.get("/{agent_id}/integrations", response_model=list[AgentIntegrationResponse])
async def list_agent_integrations(agent_id: str, storage: Storage = Depends(get_storage)):
    """List the domain integrations registered for an agent."""
    return await storage.get_integrations_by_agent_id(agent_id)
