"""Main FastAPI application for the home manager API."""

import logging
import traceback
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from home_manager.api.endpoints import router as forecast_router
from home_manager.api.responses import UTF8JSONResponse
from home_manager.config import (
    HOST, PORT, DEBUG, LOG_LEVEL, DOCS_ENABLED,
    SERVICE_NAME, SERVICE_VERSION
)
from home_manager.logging_config import configure_logging

configure_logging(LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    try:
        logger.info(f"Starting {SERVICE_NAME} {SERVICE_VERSION}")
        yield
    except Exception as e:
        logger.error(f"Startup error: {e}")
        logger.error(traceback.format_exc())
        raise
    finally:
        logger.info(f"Shutting down {SERVICE_NAME}")


async def http_exception_handler(_request: Request, exc: StarletteHTTPException) -> UTF8JSONResponse:
    """Render HTTP errors with the service's JSON content type."""
    return UTF8JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=getattr(exc, "headers", None)
    )


def create_app(docs_enabled: bool = DOCS_ENABLED) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        docs_enabled: Whether the OpenAPI schema and documentation UIs are served

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=SERVICE_NAME,
        description="Home management service API: sample weather forecast resource",
        version=SERVICE_VERSION,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        default_response_class=UTF8JSONResponse,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    app.include_router(forecast_router)

    @app.get("/", tags=["root"])
    async def api_info() -> dict:
        """API index endpoint.

        Returns:
            Basic service information and links
        """
        return {
            "message": SERVICE_NAME,
            "docs": "/docs" if docs_enabled else None,
            "redoc": "/redoc" if docs_enabled else None,
            "weatherforecast": "/weatherforecast",
            "health": "/health",
            "info": "/info"
        }

    return app


# Create app instance for uvicorn
app = create_app()


def main() -> None:
    """Main entry point for the application."""
    logger.info(f"Starting server on {HOST}:{PORT}")
    uvicorn.run(
        "home_manager.main:app" if DEBUG else app,
        host=HOST,
        port=PORT,
        reload=DEBUG,
        log_level="debug" if DEBUG else "info"
    )


if __name__ == "__main__":
    main()
