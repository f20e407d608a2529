# 📄 File: lawmarket/modules/accounts/presentation/api/schemas/account_schemas.py
# 🧭 Purpose (Layman Explanation):
# What account data looks like going in and out of the web API.
#
# 🧪 Purpose (Technical Summary):
# Request validation and response serialization models for the user-profile and admin routes,
# with camelCase aliases and converters from the Account aggregate.
#
# 🔗 Dependencies:
# pydantic, lawmarket.shared.core.schemas
#
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.accounts.presentation.api.v1.users / admin

from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from lawmarket.modules.accounts.domain.models.account import Account
from lawmarket.modules.accounts.domain.models.role import RoleType
from lawmarket.modules.accounts.domain.repositories.account_repository import AccountPage
from lawmarket.shared.core.schemas import CamelModel
from lawmarket.shared.utils.helpers import as_utc, utc_now


class AccountResponse(CamelModel):
    id: str
    display_name: str
    email: str
    email_verified: bool
    avatar_url: Optional[str] = None
    role: RoleType
    banned: bool
    ban_reason: Optional[str] = None
    ban_expires_at: Optional[datetime] = None
    onboarding_completed: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, account: Account) -> "AccountResponse":
        return cls(
            id=account.id,
            display_name=account.display_name,
            email=account.email,
            email_verified=account.email_verified,
            avatar_url=account.avatar_url,
            role=account.role.value,
            banned=account.banned,
            ban_reason=account.ban_reason,
            ban_expires_at=account.ban_expires_at,
            onboarding_completed=account.onboarding_completed,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )


class AccountListResponse(CamelModel):
    items: List[AccountResponse]
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_previous: bool

    @classmethod
    def from_page(cls, page: AccountPage) -> "AccountListResponse":
        return cls(
            items=[AccountResponse.from_domain(account) for account in page.items],
            page=page.page,
            limit=page.limit,
            total=page.total,
            total_pages=page.total_pages,
            has_next=page.has_next,
            has_previous=page.has_previous,
        )


class UpdateAccountProfileRequest(CamelModel):
    display_name: Optional[str] = Field(None, min_length=2, max_length=255)
    avatar_url: Optional[str] = Field(None, max_length=2048)


class BanAccountRequest(CamelModel):
    reason: str = Field(..., min_length=10, max_length=1000, description="At least 10 characters")
    expires_at: Optional[datetime] = Field(None, description="Optional end of the ban")

    @field_validator("expires_at")
    @classmethod
    def validate_expires_at(cls, v: Optional[datetime]) -> Optional[datetime]:
        if v is not None and as_utc(v) <= utc_now():
            raise ValueError("Ban expiry must be in the future")
        return v


class ChangeRoleRequest(CamelModel):
    role: RoleType
