"""
FastAPI Application

Main application setup and configuration.

Usage:
    uvicorn api.app:app --reload

    # Or run directly
    python -m api.app
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import health, tree, verify
from api.errors import (
    APIError,
    allowlist_error_handler,
    api_error_handler,
    generic_error_handler,
)
from core.config.runtime import load_config
from core.schemas.errors import AllowlistException


def _resolve_log_level() -> int:
    """Resolve log level from ALLOWLIST_LOG_LEVEL or allowlist.json, defaulting to INFO."""
    try:
        raw = load_config().logging.level
    except (OSError, ValueError):
        raw = "INFO"
    return getattr(logging, raw.upper(), logging.INFO)


logging.basicConfig(
    level=_resolve_log_level(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Merkle Allowlist API",
        description="""
HTTP API for allowlist Merkle commitments.

## Endpoints

- **POST /tree/root** - Compute the root commitment of an identifier list
- **POST /tree/proof** - Generate a membership proof for one identifier
- **POST /verify** - Verify a leaf and proof against a published root
- **GET /health** - Health check

Trees are rebuilt per request; nothing is persisted.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register exception handlers
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(AllowlistException, allowlist_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)

    # Include routers
    app.include_router(health.router)
    app.include_router(tree.router)
    app.include_router(verify.router)

    return app


# Create the application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
