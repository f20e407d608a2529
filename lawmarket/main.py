# 📄 File: lawmarket/main.py
#
# 🧭 Purpose (Layman Explanation):
# The control center that starts the legal marketplace API, connects all its parts together and
# makes sure every error comes back to the caller in the same readable shape.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point: lifespan (logging, database sessions, event
# handler registration, shutdown), middleware stack, router registration and exception
# handlers mapping the LawMarketException hierarchy onto HTTP responses.
#
# 🔗 Dependencies:
# - FastAPI framework, uvicorn
# - lawmarket.shared.config.settings
# - lawmarket.shared.infrastructure.database (connection, session)
# - lawmarket.api (middleware, v1 router)
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup (lawmarket.main:app)
# - Docker container entry point

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, Optional

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from lawmarket.api.middleware.logging import RequestLoggingMiddleware
from lawmarket.api.v1.health import health_router
from lawmarket.api.v1.router import api_v1_router
from lawmarket.modules.lawyers.domain.events.handlers import register_event_handlers
from lawmarket.shared.config.settings import get_settings
from lawmarket.shared.core.exceptions import LawMarketException
from lawmarket.shared.events.publisher import get_event_publisher
from lawmarket.shared.infrastructure.database.connection import close_database
from lawmarket.shared.infrastructure.database.session import initialize_sessions
from lawmarket.shared.utils.helpers import utc_now
from lawmarket.shared.utils.logging import setup_logging

settings = get_settings()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Handles startup and shutdown: logging, database sessions and
    domain event subscriptions.
    """
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    logger.info(f"{settings.APP_NAME} starting up ({settings.ENVIRONMENT})...")

    try:
        await initialize_sessions()
        logger.info("✅ Database sessions initialized")

        register_event_handlers(get_event_publisher())
        logger.info("✅ Domain event handlers registered")

        yield

    except Exception as e:
        logger.error(f"❌ Startup failed: {e}")
        raise

    finally:
        logger.info(f"🔄 {settings.APP_NAME} shutting down...")
        await close_database()
        logger.info("✅ Database connections closed")


def _error_response(
    request: Request,
    status_code: int,
    code: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
    timestamp: Optional[str] = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder({
            "success": False,
            "error": {
                "code": code,
                "message": message,
                "details": details or {},
                "timestamp": timestamp or utc_now().isoformat(),
                "request_id": getattr(request.state, "request_id", None),
            },
        }),
    )


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(LawMarketException)
    async def lawmarket_exception_handler(request: Request, exc: LawMarketException) -> JSONResponse:
        """Handle application exceptions raised by domain and application layers."""
        if exc.status_code >= 500:
            logger.error(f"{exc.error_code}: {exc.message}")
        return _error_response(
            request,
            status_code=exc.status_code,
            code=exc.error_code,
            message=exc.message,
            details=exc.details,
            timestamp=exc.timestamp.isoformat(),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = [
            {
                "field": ".".join(str(part) for part in error.get("loc", ()) if part != "body"),
                "message": error.get("msg"),
            }
            for error in exc.errors()
        ]
        return _error_response(
            request,
            status_code=400,
            code="VALIDATION_ERROR",
            message="Request validation failed",
            details={"errors": errors},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(f"Internal server error: {exc}", exc_info=True)
        return _error_response(
            request,
            status_code=500,
            code="INTERNAL_SERVER_ERROR",
            message="An internal server error occurred",
            details={"error_type": type(exc).__name__} if settings.DEBUG else {},
        )


def create_application() -> FastAPI:
    """
    Application factory function.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )

    # =========================================================================
    # MIDDLEWARE CONFIGURATION
    # =========================================================================

    if not settings.is_testing:
        app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    app.include_router(health_router, tags=["Health"])
    app.include_router(api_v1_router, prefix=settings.API_V1_PREFIX)

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================

    register_exception_handlers(app)

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "description": settings.APP_DESCRIPTION,
            "docs_url": "/docs" if settings.DEBUG else None,
            "health_check": "/health",
            "api_base": settings.API_V1_PREFIX,
        }

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        return Response(status_code=204)

    return app


app = create_application()


def main():
    """Run the development server (python -m lawmarket.main)."""
    uvicorn.run(
        "lawmarket.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.ENVIRONMENT == "development",
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
