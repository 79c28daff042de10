"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, uvicorn, storefront.api, storefront.observability, storefront.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from storefront.configs import get_settings
from storefront.api import api_router
from storefront.api.deps.dependencies import get_service_cache
from storefront.api.routers.router_utils import error_response
from storefront.observability.logger import configure_logging
from storefront.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging on startup and closes the Square connection pool on shutdown.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(
        "Application startup",
        extra={
            "square_environment": settings.square.env,
            "platform_token_configured": bool(settings.square.access_token),
            "require_connected_seller": settings.server.require_connected_seller,
        },
    )

    yield

    await get_service_cache().aclose()
    logger.info("Application shutdown")


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report malformed requests as 400 in the storefront error envelope."""
    logger.warning(
        "Request validation failed",
        extra={"path": request.url.path, "error_count": len(exc.errors())},
    )
    details = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    return error_response(status.HTTP_400_BAD_REQUEST, details)


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    settings = get_settings()
    app = FastAPI(
        title="Storefront API",
        description="E-commerce storefront backed by the Square catalog, orders and checkout APIs",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Added last = outermost, so request logs carry the correlation id
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, request_validation_handler)

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def root() -> str:
        env = "Production" if get_settings().square.is_production else "Sandbox"
        return f"Square E-commerce API ({env}) is running"

    app.include_router(api_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "storefront.main:app",
        host=settings.server.host,
        port=settings.server.port,
    )
