"""TIXAE reference data routes."""

from fastapi import APIRouter, Depends, HTTPException, status

from portfolio_api.core.storage.base import Storage
from portfolio_api.core.storage.database_storage import get_storage
from portfolio_api.models.schemas import (
    TixaeApiEndpointCreate,
    TixaeApiEndpointResponse,
    TixaeAgentTemplateCreate,
    TixaeAgentTemplateResponse,
)

router = APIRouter(prefix="/tixae", tags=["tixae"])


def _not_found(kind: str, ref) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"{kind} {ref} not found",
    )


# Endpoint documentation
@router.get("/endpoints", response_model=list[TixaeApiEndpointResponse])
async def list_endpoints(storage: Storage = Depends(get_storage)):
    """List documented TIXAE endpoints."""
    return await storage.get_tixae_api_endpoints()


@router.get("/endpoints/by-name/{name}", response_model=TixaeApiEndpointResponse)
async def get_endpoint_by_name(name: str, storage: Storage = Depends(get_storage)):
    """Get a TIXAE endpoint by name."""
    endpoint = await storage.get_tixae_api_endpoint_by_name(name)
    if not endpoint:
        raise _not_found("TIXAE endpoint", name)
    return endpoint


@router.get("/endpoints/{endpoint_id}", response_model=TixaeApiEndpointResponse)
async def get_endpoint(endpoint_id: int, storage: Storage = Depends(get_storage)):
    """Get a TIXAE endpoint by ID."""
    endpoint = await storage.get_tixae_api_endpoint(endpoint_id)
    if not endpoint:
        raise _not_found("TIXAE endpoint", endpoint_id)
    return endpoint


@router.post("/endpoints", response_model=TixaeApiEndpointResponse, status_code=status.HTTP_201_CREATED)
async def create_endpoint(
    endpoint_data: TixaeApiEndpointCreate,
    storage: Storage = Depends(get_storage),
):
    """Document a TIXAE endpoint."""
    if await storage.get_tixae_api_endpoint_by_name(endpoint_data.name):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"TIXAE endpoint {endpoint_data.name} already exists",
        )
    return await storage.create_tixae_api_endpoint(endpoint_data)


# Agent templates
@router.get("/templates", response_model=list[TixaeAgentTemplateResponse])
async def list_templates(storage: Storage = Depends(get_storage)):
    """List agent templates."""
    return await storage.get_tixae_agent_templates()


@router.get("/templates/by-name/{name}", response_model=TixaeAgentTemplateResponse)
async def get_template_by_name(name: str, storage: Storage = Depends(get_storage)):
    """Get an agent template by name."""
    template = await storage.get_tixae_agent_template_by_name(name)
    if not template:
        raise _not_found("Agent template", name)
    return template


@router.get("/templates/{template_id}", response_model=TixaeAgentTemplateResponse)
async def get_template(template_id: int, storage: Storage = Depends(get_storage)):
    """Get an agent template by ID."""
    template = await storage.get_tixae_agent_template(template_id)
    if not template:
        raise _not_found("Agent template", template_id)
    return template


@router.post("/templates", response_model=TixaeAgentTemplateResponse, status_code=status.HTTP_201_CREATED)
async def create_template(
    template_data: TixaeAgentTemplateCreate,
    storage: Storage = Depends(get_storage),
):
    """Create an agent template."""
    if await storage.get_tixae_agent_template_by_name(template_data.name):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Agent template {template_data.name} already exists",
        )
    return await storage.create_tixae_agent_template(template_data)
