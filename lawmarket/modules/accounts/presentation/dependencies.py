# 📄 File: lawmarket/modules/accounts/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Works out who is calling the API and hands each endpoint the tools it needs (repositories,
# rule checkers, handlers) for that one request.
#
# 🧪 Purpose (Technical Summary):
# FastAPI dependency factories: session resolution through the SessionProvider, current-account
# loading with ban gating, and construction of account repositories, services and handlers.
#
# 🔗 Dependencies:
# FastAPI, fastapi.security.HTTPBearer, SupabaseSessionProvider, AccountRepositoryImpl
#
# 🔄 Connected Modules / Calls From:
# accounts routers, clients and lawyers presentation dependencies (current session / account)

"""
Accounts Module Dependencies

Resolution chain:
    bearer token -> SessionIdentity (get_current_session)
                 -> Account row     (get_current_account)

Tests override get_session_provider and get_account_repository.
"""

import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from lawmarket.modules.accounts.application.handlers.command_handlers import (
    BanAccountCommandHandler,
    ChangeAccountRoleCommandHandler,
    UnbanAccountCommandHandler,
    UpdateAccountProfileCommandHandler,
)
from lawmarket.modules.accounts.application.handlers.query_handlers import (
    GetAccountQueryHandler,
    ListAccountsQueryHandler,
)
from lawmarket.modules.accounts.domain.models.account import Account
from lawmarket.modules.accounts.domain.repositories.account_repository import AccountRepository
from lawmarket.modules.accounts.domain.services.account_domain_service import AccountDomainService
from lawmarket.modules.accounts.infrastructure.database.account_repository_impl import AccountRepositoryImpl
from lawmarket.modules.accounts.infrastructure.external.session_provider import SessionIdentity, SessionProvider
from lawmarket.modules.accounts.infrastructure.external.supabase_auth import SupabaseSessionProvider
from lawmarket.shared.core.exceptions import ForbiddenError, UnauthorizedError
from lawmarket.shared.events.publisher import EventPublisher, get_event_publisher
from lawmarket.shared.infrastructure.database.session import get_db_session
from lawmarket.shared.utils.logging import account_id_var

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)

_session_provider: Optional[SessionProvider] = None


# =========================================================================
# INFRASTRUCTURE
# =========================================================================

def get_session_provider() -> SessionProvider:
    global _session_provider
    if _session_provider is None:
        _session_provider = SupabaseSessionProvider()
    return _session_provider


def get_account_repository(session: AsyncSession = Depends(get_db_session)) -> AccountRepository:
    return AccountRepositoryImpl(session)


def get_account_domain_service() -> AccountDomainService:
    return AccountDomainService()


# =========================================================================
# CORE AUTHENTICATION DEPENDENCIES
# =========================================================================

async def get_current_session(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    session_provider: SessionProvider = Depends(get_session_provider),
) -> SessionIdentity:
    """
    Resolve the caller identity from the bearer token.

    Raises:
        UnauthorizedError: If no credentials were sent or the session is invalid
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Authentication required")

    identity = await session_provider.resolve(credentials.credentials)
    if identity is None:
        raise UnauthorizedError("Invalid or expired session")

    account_id_var.set(identity.account_id)
    return identity


async def get_current_account(
    identity: SessionIdentity = Depends(get_current_session),
    account_repository: AccountRepository = Depends(get_account_repository),
) -> Account:
    """
    Load the caller's Account.

    An account whose ban has expired is let through; the ban itself is
    only lifted by an admin.

    Raises:
        UnauthorizedError: If the session has no matching account
        ForbiddenError: If the account is under an active ban
    """
    account = await account_repository.find_by_id(identity.account_id)
    if account is None:
        logger.warning(f"Session for unknown account: {identity.account_id}")
        raise UnauthorizedError("Account not found for session")

    if account.is_ban_active:
        logger.info(f"Banned account access attempt: {account.id}")
        raise ForbiddenError("Account is banned", actor_id=account.id)

    return account


# =========================================================================
# HANDLERS
# =========================================================================

def get_account_query_handler(
    account_repository: AccountRepository = Depends(get_account_repository),
) -> GetAccountQueryHandler:
    return GetAccountQueryHandler(account_repository)


def get_list_accounts_handler(
    account_repository: AccountRepository = Depends(get_account_repository),
    domain_service: AccountDomainService = Depends(get_account_domain_service),
) -> ListAccountsQueryHandler:
    return ListAccountsQueryHandler(account_repository, domain_service)


def get_update_account_profile_handler(
    account_repository: AccountRepository = Depends(get_account_repository),
    event_publisher: EventPublisher = Depends(get_event_publisher),
) -> UpdateAccountProfileCommandHandler:
    return UpdateAccountProfileCommandHandler(account_repository, event_publisher)


def get_ban_account_handler(
    account_repository: AccountRepository = Depends(get_account_repository),
    domain_service: AccountDomainService = Depends(get_account_domain_service),
    event_publisher: EventPublisher = Depends(get_event_publisher),
) -> BanAccountCommandHandler:
    return BanAccountCommandHandler(account_repository, domain_service, event_publisher)


def get_unban_account_handler(
    account_repository: AccountRepository = Depends(get_account_repository),
    domain_service: AccountDomainService = Depends(get_account_domain_service),
    event_publisher: EventPublisher = Depends(get_event_publisher),
) -> UnbanAccountCommandHandler:
    return UnbanAccountCommandHandler(account_repository, domain_service, event_publisher)


def get_change_account_role_handler(
    account_repository: AccountRepository = Depends(get_account_repository),
    domain_service: AccountDomainService = Depends(get_account_domain_service),
    event_publisher: EventPublisher = Depends(get_event_publisher),
) -> ChangeAccountRoleCommandHandler:
    return ChangeAccountRoleCommandHandler(account_repository, domain_service, event_publisher)
