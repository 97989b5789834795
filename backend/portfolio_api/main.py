"""Main FastAPI application."""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from portfolio_api.core.config import settings
from portfolio_api.core.logging_config import configure_logging
from portfolio_api.core.storage.base import Storage
from portfolio_api.core.storage.database import init_db, close_db
from portfolio_api.api.middleware import ApiKeyGuardMiddleware, wait_for_pending_usage
from portfolio_api.api.routes import agents, api_keys, content, tixae

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    configure_logging()
    logger.info("Initializing database...")
    await init_db()
    logger.info("Database initialized successfully")

    yield

    # Shutdown
    logger.info("Flushing pending usage records...")
    await wait_for_pending_usage()
    logger.info("Closing database connections...")
    await close_db()
    logger.info("Application shutdown complete")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected errors and return a generic 500 body."""
    logger.error("Unhandled error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app(storage: Storage | None = None, use_lifespan: bool = True) -> FastAPI:
    """
    Build the application.

    Args:
        storage: Storage used by the API key guards. Defaults to the global database storage.
        use_lifespan: Set False to skip database setup (e.g. when tests manage the database).
    """
    app = FastAPI(
        title="Portfolio API",
        description="Portfolio site backend and agent API",
        version="0.1.0",
        lifespan=lifespan if use_lifespan else None,
    )

    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Guards run inside CORS so preflight responses keep their headers
    app.add_middleware(ApiKeyGuardMiddleware, storage=storage)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Public content
    app.include_router(content.router, prefix="/api")

    # Admin (admin key required, no domain check)
    app.include_router(api_keys.admin_router, prefix="/api")
    app.include_router(content.admin_router, prefix="/api")

    # Agent API (key guarded, domain checked)
    app.include_router(api_keys.keys_router, prefix="/api/v1")
    app.include_router(agents.router, prefix="/api/v1")
    app.include_router(tixae.router, prefix="/api/v1")

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": "Portfolio API",
            "version": "0.1.0",
            "status": "running",
        }

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "portfolio_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
    )
