"""Route-level authorization for admin endpoints."""

import logging

from fastapi import HTTPException, Request, status

logger = logging.getLogger(__name__)


async def require_admin_key(request: Request):
    """
    Allow only administrator keys.

    The key guard middleware has already authenticated the caller and placed
    the key row on ``request.state.api_key``; this checks its admin flag.

    Raises:
        HTTPException(403): If the request carries no key or a non-admin key
    """
    api_key = getattr(request.state, "api_key", None)
    if api_key is None or not api_key.is_admin:
        logger.warning("Admin route %s refused for non-admin key", request.url.path)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin API key required",
        )
    return api_key
