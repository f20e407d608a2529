# 📄 File: lawmarket/modules/accounts/infrastructure/database/account_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Reads accounts from the database, lists them page by page for admins, and saves changes
# such as bans and role updates.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of AccountRepository with domain/model mapping, filtered pagination
# and one committed transaction per write.
#
# 🔗 Dependencies:
# - AccountRepository interface, Account domain model, AccountModel
# - SQLAlchemy async session and query operations
#
# 🔄 Connected Modules / Calls From:
# - lawmarket.modules.accounts.presentation.dependencies (repository factory)

"""
Account Repository Implementation

Maps Account aggregates to AccountModel rows. Reads never commit;
update() commits its own transaction and rolls back on failure.
"""

import logging
from typing import List, Optional

from sqlalchemy import and_, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from lawmarket.modules.accounts.domain.models.account import Account
from lawmarket.modules.accounts.domain.models.role import Role
from lawmarket.modules.accounts.domain.repositories.account_repository import (
    AccountListFilter,
    AccountPage,
    AccountRepository,
)
from lawmarket.modules.accounts.infrastructure.database.models import AccountModel
from lawmarket.shared.core.exceptions import AccountNotFoundError, ConflictError, DatabaseError

logger = logging.getLogger(__name__)


class AccountRepositoryImpl(AccountRepository):
    """
    SQLAlchemy implementation of the AccountRepository interface.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize the account repository.

        Args:
            session: SQLAlchemy async session for database operations
        """
        self._session = session

    async def find_by_id(self, account_id: str) -> Optional[Account]:
        try:
            stmt = select(AccountModel).where(AccountModel.id == account_id)
            result = await self._session.execute(stmt)
            account_model = result.scalar_one_or_none()

            if account_model:
                return self._model_to_domain(account_model)

            logger.debug(f"Account not found: {account_id}")
            return None

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving account {account_id}: {str(e)}")
            raise DatabaseError(f"Failed to retrieve account: {str(e)}", operation="find_by_id") from e

    async def find_by_email(self, email: str) -> Optional[Account]:
        try:
            stmt = select(AccountModel).where(AccountModel.email == email.strip().lower())
            result = await self._session.execute(stmt)
            account_model = result.scalar_one_or_none()
            return self._model_to_domain(account_model) if account_model else None

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving account by email {email}: {str(e)}")
            raise DatabaseError(f"Failed to retrieve account by email: {str(e)}", operation="find_by_email") from e

    async def exists_by_email(self, email: str) -> bool:
        try:
            stmt = select(func.count()).select_from(AccountModel).where(
                AccountModel.email == email.strip().lower()
            )
            result = await self._session.execute(stmt)
            return result.scalar_one() > 0

        except SQLAlchemyError as e:
            logger.error(f"Database error checking account email {email}: {str(e)}")
            raise DatabaseError(f"Failed to check account email: {str(e)}", operation="exists_by_email") from e

    async def list(self, account_filter: AccountListFilter) -> AccountPage:
        conditions = []
        if account_filter.role is not None:
            conditions.append(AccountModel.role == account_filter.role.value)
        if account_filter.banned is not None:
            conditions.append(AccountModel.banned == account_filter.banned)
        if account_filter.onboarding_completed is not None:
            conditions.append(AccountModel.onboarding_completed == account_filter.onboarding_completed)

        count_stmt = select(func.count()).select_from(AccountModel)
        page_stmt = select(AccountModel)
        if conditions:
            count_stmt = count_stmt.where(and_(*conditions))
            page_stmt = page_stmt.where(and_(*conditions))
        page_stmt = (
            page_stmt.order_by(AccountModel.created_at, AccountModel.id)
            .offset(account_filter.offset)
            .limit(account_filter.limit)
        )

        try:
            total = (await self._session.execute(count_stmt)).scalar_one()
            models: List[AccountModel] = list((await self._session.execute(page_stmt)).scalars().all())
        except SQLAlchemyError as e:
            logger.error(f"Database error listing accounts: {str(e)}")
            raise DatabaseError(f"Failed to list accounts: {str(e)}", operation="list") from e

        return AccountPage.build(
            items=[self._model_to_domain(model) for model in models],
            page=account_filter.page,
            limit=account_filter.limit,
            total=total,
        )

    async def update(self, account: Account) -> Account:
        """
        Update an existing account in the database.

        Raises:
            AccountNotFoundError: If the row does not exist
            ConflictError: If the new state violates a unique constraint
            DatabaseError: For other database errors
        """
        try:
            account_model = await self._session.get(AccountModel, account.id)
            if account_model is None:
                raise AccountNotFoundError(account.id)

            self._update_model_from_domain(account_model, account)
            await self._session.commit()

            logger.info(f"Updated account: {account.id}")
            return self._model_to_domain(account_model)

        except IntegrityError as e:
            await self._session.rollback()
            logger.warning(f"Account update violated a constraint: {account.id}")
            raise ConflictError("Account update conflicts with existing data") from e
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error updating account {account.id}: {str(e)}")
            raise DatabaseError(f"Failed to update account: {str(e)}", operation="update") from e

    def _model_to_domain(self, account_model: AccountModel) -> Account:
        return Account.reconstitute(
            account_id=account_model.id,
            display_name=account_model.display_name,
            email=account_model.email,
            email_verified=account_model.email_verified,
            avatar_url=account_model.avatar_url,
            role=Role.create(account_model.role),
            banned=account_model.banned,
            ban_reason=account_model.ban_reason,
            ban_expires_at=account_model.ban_expires_at,
            onboarding_completed=account_model.onboarding_completed,
            created_at=account_model.created_at,
            updated_at=account_model.updated_at,
        )

    def _update_model_from_domain(self, account_model: AccountModel, account: Account) -> None:
        account_model.display_name = account.display_name
        account_model.avatar_url = account.avatar_url
        account_model.role = account.role.value.value
        account_model.banned = account.banned
        account_model.ban_reason = account.ban_reason
        account_model.ban_expires_at = account.ban_expires_at
        account_model.onboarding_completed = account.onboarding_completed
        account_model.updated_at = account.updated_at
