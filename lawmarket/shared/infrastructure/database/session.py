# 📄 File: lawmarket/shared/infrastructure/database/session.py
#
# 🧭 Purpose (Layman Explanation):
# Gives each web request its own conversation with the database and makes sure it is closed
# cleanly, undoing anything half-finished when something goes wrong.
#
# 🧪 Purpose (Technical Summary):
# Request-scoped AsyncSession provisioning. Repositories commit their own write transactions,
# so a transaction still open when the request ends only ever holds reads and is rolled back.
# Driver errors escaping a repository are wrapped in DatabaseError.
#
# 🔗 Dependencies:
# - sqlalchemy.ext.asyncio (AsyncSession, async_sessionmaker)
# - lawmarket.shared.infrastructure.database.connection (engine)
#
# 🔄 Connected Modules / Calls From:
# - module presentation dependencies (repository factories)
# - lawmarket.main (startup)

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from lawmarket.shared.core.exceptions import DatabaseError
from lawmarket.shared.infrastructure.database.connection import init_database

logger = logging.getLogger(__name__)


class RequestSessionFactory:
    """
    Hands out one AsyncSession per request.
    """

    def __init__(self):
        self._maker: Optional[async_sessionmaker[AsyncSession]] = None

    def bind(self, engine: AsyncEngine) -> None:
        self._maker = async_sessionmaker(engine, expire_on_commit=False)
        logger.info(f"Session factory bound to {engine.url.get_backend_name()} engine")

    @property
    def is_bound(self) -> bool:
        return self._maker is not None

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Yields:
            AsyncSession: Session closed (and rolled back if still open) on exit

        Raises:
            DatabaseError: If the factory is unbound or a driver error
                escapes the caller
        """
        if self._maker is None:
            raise DatabaseError("Session factory not bound to an engine", operation="session")

        session = self._maker()
        try:
            yield session
        except SQLAlchemyError as e:
            logger.error(f"Unhandled database error in request session: {e}")
            raise DatabaseError(f"Database operation failed: {e}", operation="session") from e
        finally:
            if session.in_transaction():
                await session.rollback()
            await session.close()


session_factory = RequestSessionFactory()


async def initialize_sessions() -> None:
    engine = await init_database()
    session_factory.bind(engine)


async def get_db_session() -> AsyncIterator[AsyncSession]:
    """
    FastAPI dependency that provides a request-scoped database session.

    Usage:
        def get_account_repository(
            session: AsyncSession = Depends(get_db_session),
        ) -> AccountRepository:
            return AccountRepositoryImpl(session)
    """
    if not session_factory.is_bound:
        await initialize_sessions()
    async with session_factory.session() as session:
        yield session
