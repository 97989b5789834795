"""API key administration and verification routes."""

from fastapi import APIRouter, Depends, HTTPException, Request, status

from portfolio_api.api.auth import require_admin_key
from portfolio_api.core.security import generate_api_key
from portfolio_api.core.storage.base import Storage
from portfolio_api.core.storage.database_storage import get_storage
from portfolio_api.models.schemas import (
    ApiKeyCreate,
    ApiKeyResponse,
    ApiKeyVerifyResponse,
    AgentIntegrationCreate,
    AgentIntegrationResponse,
    ApiUsageResponse,
)

admin_router = APIRouter(
    prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin_key)]
)
keys_router = APIRouter(prefix="/keys", tags=["keys"])


async def _get_api_key_or_404(key_id: int, storage: Storage):
    api_key = await storage.get_api_key_by_id(key_id)
    if not api_key:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"API key with id {key_id} not found",
        )
    return api_key


# Admin endpoints
@admin_router.post("/keys", response_model=ApiKeyResponse, status_code=status.HTTP_201_CREATED)
async def create_api_key(key_data: ApiKeyCreate, storage: Storage = Depends(get_storage)):
    """
    Issue an API key.

    A random key is generated unless one is supplied.
    """
    if key_data.key is None:
        key_data = key_data.model_copy(update={"key": generate_api_key()})
    return await storage.create_api_key(key_data)


@admin_router.get("/keys", response_model=list[ApiKeyResponse])
async def list_api_keys(user_id: str, storage: Storage = Depends(get_storage)):
    """List a user's API keys."""
    return await storage.get_api_keys_by_user_id(user_id)


@admin_router.get("/keys/{key_id}", response_model=ApiKeyResponse)
async def get_api_key(key_id: int, storage: Storage = Depends(get_storage)):
    """Get an API key by ID."""
    return await _get_api_key_or_404(key_id, storage)


@admin_router.post("/keys/{key_id}/deactivate", response_model=ApiKeyResponse)
async def deactivate_api_key(key_id: int, storage: Storage = Depends(get_storage)):
    """Deactivate an API key. Deactivated keys fail authentication."""
    api_key = await storage.deactivate_api_key(key_id)
    if not api_key:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"API key with id {key_id} not found",
        )
    return api_key


@admin_router.get("/keys/{key_id}/integrations", response_model=list[AgentIntegrationResponse])
async def list_key_integrations(key_id: int, storage: Storage = Depends(get_storage)):
    """List the domain integrations of an API key."""
    await _get_api_key_or_404(key_id, storage)
    return await storage.get_integrations_by_api_key_id(key_id)


@admin_router.get("/keys/{key_id}/usage", response_model=list[ApiUsageResponse])
async def list_key_usage(key_id: int, storage: Storage = Depends(get_storage)):
    """List recorded usage of an API key."""
    await _get_api_key_or_404(key_id, storage)
    return await storage.get_api_usage_by_key_id(key_id)


@admin_router.post(
    "/integrations",
    response_model=AgentIntegrationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_integration(
    integration_data: AgentIntegrationCreate,
    storage: Storage = Depends(get_storage),
):
    """Allow a domain to use an API key."""
    await _get_api_key_or_404(integration_data.api_key_id, storage)
    return await storage.create_agent_integration(integration_data)


@admin_router.post("/integrations/{integration_id}/deactivate", response_model=AgentIntegrationResponse)
async def deactivate_integration(integration_id: int, storage: Storage = Depends(get_storage)):
    """Deactivate a domain integration."""
    integration = await storage.deactivate_integration(integration_id)
    if not integration:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Integration with id {integration_id} not found",
        )
    return integration


# Key verification for API callers
@keys_router.get("/verify", response_model=ApiKeyVerifyResponse)
async def verify_api_key(request: Request):
    """Confirm the caller's key. Reached only after the key guard accepted it."""
    api_key = request.state.api_key
    return ApiKeyVerifyResponse(id=api_key.id, name=api_key.name, user_id=api_key.user_id)
