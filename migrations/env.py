# 📄 File: migrations/env.py
# 🧭 Purpose (Layman Explanation):
# Tells Alembic how to reach the marketplace database and which tables it is responsible for,
# so schema changes can be applied safely in every environment.
# 🧪 Purpose (Technical Summary):
# Alembic environment for the async SQLAlchemy models: loads DATABASE_URL through python-dotenv,
# imports every module's ORM models into the shared metadata and runs migrations over asyncpg.
# 🔗 Dependencies:
# - alembic (migration tool)
# - SQLAlchemy async engine
# - asyncpg (PostgreSQL async driver)
# - python-dotenv (environment variables)
# 🔄 Connected Modules / Calls From:
# - alembic CLI commands (upgrade, downgrade, revision)
# - Deployment scripts

import asyncio
import os
from logging.config import fileConfig

from alembic import context
from dotenv import load_dotenv
from sqlalchemy import pool
from sqlalchemy.ext.asyncio import async_engine_from_config

from lawmarket.modules.accounts.infrastructure.database.models import AccountModel  # noqa: F401
from lawmarket.modules.clients.infrastructure.database.models import (  # noqa: F401
    ClientProfileModel,
    ClientSpecializationModel,
)
from lawmarket.modules.lawyers.infrastructure.database.models import (  # noqa: F401
    LawyerDocumentModel,
    LawyerLanguageModel,
    LawyerProfileModel,
    LawyerSpecializationModel,
)
from lawmarket.modules.specializations.infrastructure.database.models import SpecializationModel  # noqa: F401
from lawmarket.shared.infrastructure.database.connection import Base

load_dotenv()

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

# Schemas owned by the Supabase platform, never touched by our migrations
SUPABASE_SCHEMAS = {"auth", "storage", "realtime", "vault", "extensions"}


def get_database_url() -> str:
    """
    Get the async database URL from the environment.

    Plain postgresql:// URLs are upgraded to the asyncpg driver.
    """
    database_url = os.getenv("DATABASE_URL")
    if not database_url:
        database_url = config.get_main_option("sqlalchemy.url")
    if database_url.startswith("postgresql://"):
        database_url = database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return database_url


def include_object(object, name, type_, reflected, compare_to):
    if getattr(object, "schema", None) in SUPABASE_SCHEMAS:
        return False
    return True


def run_migrations_offline() -> None:
    """
    Run migrations in 'offline' mode, emitting SQL to the script output.
    """
    context.configure(
        url=get_database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
        include_object=include_object,
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
        compare_server_default=True,
        include_object=include_object,
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    configuration = config.get_section(config.config_ini_section) or {}
    configuration["sqlalchemy.url"] = get_database_url()

    connectable = async_engine_from_config(
        configuration,
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


def run_migrations_online() -> None:
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
