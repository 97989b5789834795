"""API key guards for the agent API.

Protected requests pass three guards in order:

1. ``validate_api_key`` - the ``Authorization: Bearer <key>`` header must name
   an active key. The key row is attached to ``request.state.api_key``.
2. ``UsageRecorder`` - wraps the ASGI ``send`` callable and, once the response
   has finished, schedules one usage record without blocking the response.
3. ``verify_domain`` - the Origin (or Referer) hostname must match one of the
   key's active integration domains.

Non-GET bodies are buffered for the usage record; bodies larger than
``settings.max_request_body_bytes`` are refused with 413.

Rejections are JSON bodies of the form ``{"error": "..."}``.
"""

import asyncio
import json
import logging
from typing import Any, Iterable

from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from portfolio_api.core.config import settings
from portfolio_api.core.security import domain_matches, extract_hostname
from portfolio_api.core.storage.base import Storage
from portfolio_api.core.storage.database_storage import get_storage
from portfolio_api.models.database import ApiKey
from portfolio_api.models.schemas import ApiUsageCreate

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "

# Usage writes still in flight; holding a reference keeps the tasks alive
_pending_usage: set[asyncio.Task] = set()


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build a guard rejection response."""
    return JSONResponse(status_code=status_code, content={"error": message})


async def validate_api_key(request: Request, storage: Storage) -> JSONResponse | None:
    """
    Authenticate the request by its bearer token.

    Returns:
        None when the key is valid and active, otherwise the rejection response
    """
    auth_header = request.headers.get("authorization")

    if not auth_header or not auth_header.startswith(BEARER_PREFIX):
        return error_response(401, "Authorization header missing or invalid")

    token = auth_header[len(BEARER_PREFIX):]

    try:
        api_key = await storage.validate_api_key(token)
    except Exception as e:
        logger.error("API key validation error: %s", e)
        return error_response(500, "Error validating API key")

    if api_key is None:
        return error_response(403, "Invalid or inactive API key")

    request.state.api_key = api_key
    return None


def _parse_payload(body: bytes) -> Any:
    if not body:
        return None
    try:
        return json.loads(body)
    except ValueError:
        return body.decode("utf-8", errors="replace")


async def _write_usage(storage: Storage, usage: ApiUsageCreate) -> None:
    try:
        await storage.record_api_usage(usage)
        await storage.update_api_key_last_used(usage.api_key_id)
    except Exception as e:
        logger.warning("Failed to record API usage: %s", e)


class UsageRecorder:
    """Records one usage row per request once its response has finished."""

    def __init__(self, storage: Storage, api_key: ApiKey, request: Request, body: bytes = b""):
        self.storage = storage
        self.api_key_id = api_key.id
        self.method = request.method
        self.endpoint = request.url.path
        if request.url.query:
            self.endpoint += f"?{request.url.query}"
        self.payload = None if request.method == "GET" else _parse_payload(body)
        self.status_code: int | None = None
        self.recorded = False

    def wrap_send(self, send: Send) -> Send:
        """Return a ``send`` that reports the final response message."""

        async def send_wrapper(message: Message) -> None:
            if message["type"] == "http.response.start":
                self.status_code = message["status"]
            elif message["type"] == "http.response.body" and not message.get("more_body", False):
                self.finish()
            await send(message)

        return send_wrapper

    def finish(self, status_code: int | None = None) -> None:
        """Schedule the usage write. Only the first call has any effect."""
        if self.recorded:
            return
        self.recorded = True

        usage = ApiUsageCreate(
            api_key_id=self.api_key_id,
            method=self.method,
            endpoint=self.endpoint,
            status_code=str(status_code or self.status_code or 500),
            request_payload=self.payload,
        )
        task = asyncio.create_task(_write_usage(self.storage, usage))
        _pending_usage.add(task)
        task.add_done_callback(_pending_usage.discard)


async def wait_for_pending_usage() -> None:
    """Wait for all scheduled usage writes to complete."""
    while _pending_usage:
        await asyncio.gather(*list(_pending_usage))


def _is_domain_check_exempt(
    path: str, exempt_prefixes: Iterable[str], exempt_paths: Iterable[str]
) -> bool:
    return any(path.startswith(prefix) for prefix in exempt_prefixes) or path in exempt_paths


async def verify_domain(
    request: Request,
    storage: Storage,
    exempt_prefixes: Iterable[str] | None = None,
    exempt_paths: Iterable[str] | None = None,
) -> JSONResponse | None:
    """
    Check the caller's Origin/Referer against the key's integration domains.

    Returns:
        None when the request may proceed, otherwise the rejection response
    """
    api_key = getattr(request.state, "api_key", None)
    if api_key is None:
        return None

    if exempt_prefixes is None:
        exempt_prefixes = settings.domain_check_exempt_prefixes
    if exempt_paths is None:
        exempt_paths = settings.domain_check_exempt_paths

    if _is_domain_check_exempt(request.url.path, exempt_prefixes, exempt_paths):
        return None

    try:
        integrations = await storage.get_integrations_by_api_key_id(api_key.id)
    except Exception as e:
        logger.error("Domain verification error: %s", e)
        return error_response(500, "Error verifying domain")

    domains = [integration.domain for integration in integrations if integration.active]
    if not domains:
        return error_response(403, "No integrations configured for this API key")

    source = request.headers.get("origin") or request.headers.get("referer")
    hostname = extract_hostname(source)

    if hostname is None or not any(domain_matches(domain, hostname) for domain in domains):
        logger.warning("Domain verification failed: %s", source)
        return error_response(403, "This domain is not authorized to use this API key")

    return None


class ApiKeyGuardMiddleware:
    """ASGI middleware running the API key guards on protected paths."""

    def __init__(
        self,
        app: ASGIApp,
        storage: Storage | None = None,
        protected_prefixes: list[str] | None = None,
        domain_check_exempt_prefixes: list[str] | None = None,
        domain_check_exempt_paths: list[str] | None = None,
        max_body_bytes: int | None = None,
    ):
        self.app = app
        self.storage = storage
        self.protected_prefixes = (
            settings.protected_path_prefixes if protected_prefixes is None else protected_prefixes
        )
        self.exempt_prefixes = (
            settings.domain_check_exempt_prefixes
            if domain_check_exempt_prefixes is None
            else domain_check_exempt_prefixes
        )
        self.exempt_paths = (
            settings.domain_check_exempt_paths
            if domain_check_exempt_paths is None
            else domain_check_exempt_paths
        )
        self.max_body_bytes = (
            settings.max_request_body_bytes if max_body_bytes is None else max_body_bytes
        )

    def is_protected(self, path: str) -> bool:
        return any(path.startswith(prefix) for prefix in self.protected_prefixes)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or not self.is_protected(scope["path"]):
            await self.app(scope, receive, send)
            return

        storage = self.storage or get_storage()
        request = Request(scope, receive)

        rejection = await validate_api_key(request, storage)
        if rejection is not None:
            await rejection(scope, receive, send)
            return

        # Buffer the body so it can be both logged and replayed downstream
        body: bytes | None = b""
        if request.method != "GET":
            body = await _read_body(request, self.max_body_bytes)
            if body is not None:
                receive = _replay_body(body, receive)

        recorder = UsageRecorder(storage, request.state.api_key, request, body or b"")
        send = recorder.wrap_send(send)

        if body is None:
            logger.warning("Request body over %d bytes refused", self.max_body_bytes)
            await error_response(413, "Request body too large")(scope, receive, send)
            return

        rejection = await verify_domain(
            request, storage, self.exempt_prefixes, self.exempt_paths
        )
        if rejection is not None:
            await rejection(scope, receive, send)
            return

        try:
            await self.app(scope, receive, send)
        except BaseException:
            recorder.finish()
            raise


async def _read_body(request: Request, limit: int) -> bytes | None:
    """Read the request body, or return None once it grows past ``limit`` bytes."""
    content_length = request.headers.get("content-length")
    if content_length and content_length.isdigit() and int(content_length) > limit:
        return None

    chunks = []
    size = 0
    async for chunk in request.stream():
        size += len(chunk)
        if size > limit:
            return None
        chunks.append(chunk)
    return b"".join(chunks)


def _replay_body(body: bytes, receive: Receive) -> Receive:
    """Return a ``receive`` that delivers an already-read body once."""
    delivered = False

    async def replay() -> Message:
        nonlocal delivered
        if not delivered:
            delivered = True
            return {"type": "http.request", "body": body, "more_body": False}
        return await receive()

    return replay
