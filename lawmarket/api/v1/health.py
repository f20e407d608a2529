# 📄 File: lawmarket/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# A quick "are you alive?" check that load balancers and monitoring can call.
# 🧪 Purpose (Technical Summary):
# Liveness and database readiness endpoints; readiness returns 503 when the database query fails.
# 🔗 Dependencies:
# FastAPI, lawmarket.shared.infrastructure.database.connection
# 🔄 Connected Modules / Calls From:
# lawmarket.main

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from lawmarket.shared.config.settings import get_settings
from lawmarket.shared.infrastructure.database.connection import db_manager

logger = logging.getLogger(__name__)

health_router = APIRouter()


@health_router.get("/health", summary="Liveness check")
async def health() -> dict:
    settings = get_settings()
    return {"status": "healthy", "service": settings.APP_NAME, "version": settings.APP_VERSION}


@health_router.get("/health/ready", summary="Readiness check")
async def readiness() -> JSONResponse:
    try:
        database = await db_manager.health_check()
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        database = {"status": "unhealthy", "error": type(e).__name__}

    ready = database.get("status") == "healthy"
    return JSONResponse(
        status_code=status.HTTP_200_OK if ready else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "ready" if ready else "not_ready", "database": database},
    )
