# 📄 File: lawmarket/shared/infrastructure/database/connection.py
#
# 🧭 Purpose (Layman Explanation):
# Opens and looks after the pool of connections to the marketplace database, and defines the
# base every database table description is built on.
#
# 🧪 Purpose (Technical Summary):
# Async SQLAlchemy engine management with pooling, health checks and shutdown, plus the shared
# declarative Base with a constraint naming convention used by the ORM models and Alembic.
#
# 🔗 Dependencies:
# - sqlalchemy (async engine, declarative base)
# - asyncpg (PostgreSQL async driver) / aiosqlite (local and test databases)
# - lawmarket.shared.config.settings (database configuration)
#
# 🔄 Connected Modules / Calls From:
# - lawmarket.shared.infrastructure.database.session (session factory)
# - module ORM models (Base)
# - migrations/env.py (target metadata)
# - lawmarket.main (startup / shutdown)

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import MetaData, text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

from lawmarket.shared.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Naming convention for database constraints
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

Base = declarative_base(metadata=MetaData(naming_convention=convention))


class DatabaseConnectionManager:
    """
    Owns the async engine for the configured database URL.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings
        self._engine: Optional[AsyncEngine] = None
        self._health_check_query = text("SELECT 1")

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    def _build_connection_params(self) -> Dict[str, Any]:
        """Build SQLAlchemy engine parameters from settings."""
        params: Dict[str, Any] = {
            "url": self.settings.DATABASE_URL,
            "echo": self.settings.DATABASE_ECHO,
        }
        if self.settings.uses_sqlite:
            # in-memory sqlite lives inside a single connection
            if ":memory:" in self.settings.DATABASE_URL:
                params["poolclass"] = StaticPool
            params["connect_args"] = {"check_same_thread": False}
            return params

        params.update({
            "pool_pre_ping": True,
            "pool_recycle": 3600,
            "pool_size": self.settings.DATABASE_POOL_SIZE,
            "max_overflow": self.settings.DATABASE_MAX_OVERFLOW,
            "pool_timeout": 30,
            "connect_args": {
                "server_settings": {"application_name": "lawmarket_api"},
                "command_timeout": 60,
            },
        })
        return params

    async def initialize(self) -> AsyncEngine:
        """Create the engine if it does not exist yet."""
        if self._engine is not None:
            logger.warning("Database engine already initialized")
            return self._engine

        logger.info("Initializing database connection pool...")
        self._engine = create_async_engine(**self._build_connection_params())
        logger.info(
            f"Database engine ready for {self._engine.url.get_backend_name()} "
            f"(pool size {self.settings.DATABASE_POOL_SIZE})"
        )
        return self._engine

    @property
    def engine(self) -> Optional[AsyncEngine]:
        return self._engine

    async def health_check(self) -> Dict[str, Any]:
        """Run a trivial query and report the outcome."""
        checked_at = datetime.now(timezone.utc).isoformat()
        if self._engine is None:
            return {"status": "unhealthy", "error": "Database engine not initialized", "timestamp": checked_at}

        async with self._engine.connect() as conn:
            await conn.execute(self._health_check_query)
        return {"status": "healthy", "timestamp": checked_at}

    async def close(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            logger.info("Database connection pool closed")


db_manager = DatabaseConnectionManager()


async def init_database() -> AsyncEngine:
    return await db_manager.initialize()


async def close_database() -> None:
    await db_manager.close()
