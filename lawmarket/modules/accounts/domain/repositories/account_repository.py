# 📄 File: lawmarket/modules/accounts/domain/repositories/account_repository.py
# 🧭 Purpose (Layman Explanation):
# Describes how accounts can be looked up, listed page by page, and saved, without saying
# which database is behind it.
#
# 🧪 Purpose (Technical Summary):
# Abstract repository contract for the Account aggregate plus the list filter and page result
# value types used by the admin listing.
#
# 🔗 Dependencies:
# abc, pydantic, Account domain model
#
# 🔄 Connected Modules / Calls From:
# AccountRepositoryImpl, account command/query handlers, current-account dependency

"""
Account Repository Interface

The storage layer guarantees email uniqueness; the domain never creates
accounts itself, it only reads and updates them.
"""

import math
from abc import ABC, abstractmethod
from typing import List, Optional

from pydantic import BaseModel, Field

from lawmarket.modules.accounts.domain.models.account import Account
from lawmarket.modules.accounts.domain.models.role import RoleType


class AccountListFilter(BaseModel):
    role: Optional[RoleType] = None
    banned: Optional[bool] = None
    onboarding_completed: Optional[bool] = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class AccountPage(BaseModel):
    items: List[Account]
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_previous: bool

    @classmethod
    def build(cls, items: List[Account], page: int, limit: int, total: int) -> "AccountPage":
        total_pages = math.ceil(total / limit) if limit else 0
        return cls(
            items=items,
            page=page,
            limit=limit,
            total=total,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_previous=page > 1,
        )


class AccountRepository(ABC):
    """
    Abstract repository interface for Account aggregate operations.
    """

    @abstractmethod
    async def find_by_id(self, account_id: str) -> Optional[Account]:
        """
        Retrieve an account by its id.

        Args:
            account_id: Account identifier issued by the auth provider

        Returns:
            Optional[Account]: Account if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[Account]:
        """
        Retrieve an account by email address (case-insensitive).

        Returns:
            Optional[Account]: Account if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        pass

    @abstractmethod
    async def list(self, account_filter: AccountListFilter) -> AccountPage:
        """
        List accounts matching the filter, oldest first.

        Args:
            account_filter: Optional role / banned / onboarding filters
                plus page and limit

        Returns:
            AccountPage: Requested page with pagination metadata
        """
        pass

    @abstractmethod
    async def update(self, account: Account) -> Account:
        """
        Persist the mutable state of an existing account.

        Returns:
            Account: The updated account

        Raises:
            AccountNotFoundError: If the account no longer exists
            DatabaseError: For storage failures
        """
        pass
