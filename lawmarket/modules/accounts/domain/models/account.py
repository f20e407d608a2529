# 📄 File: lawmarket/modules/accounts/domain/models/account.py
# 🧭 Purpose (Layman Explanation):
# A person's account on the marketplace: their name, picture, role, and whether an admin has
# banned them. It holds the rules for editing a profile, changing a role and banning.
#
# 🧪 Purpose (Technical Summary):
# Account aggregate root. Built through create (validated, new) or reconstitute (trusted, from
# storage); mutations enforce role/ban invariants and record events on the embedded metadata.
#
# 🔗 Dependencies:
# pydantic, Role value object, account events, lawmarket.shared.domain.entity
#
# 🔄 Connected Modules / Calls From:
# AccountRepository, AccountDomainService, account command handlers, current-account dependency

"""
Account aggregate

Invariants:
- role is always one of admin, lawyer, client
- ban_reason and ban_expires_at are only set while banned is True
- no-op role changes are rejected instead of silently accepted

Accounts are provisioned by the authentication provider; this service
only mutates and reads them.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from lawmarket.modules.accounts.domain.events.account_events import (
    AccountBanned,
    AccountProfileUpdated,
    AccountRoleChanged,
    AccountUnbanned,
)
from lawmarket.modules.accounts.domain.models.role import Role
from lawmarket.shared.core.exceptions import ValidationError
from lawmarket.shared.domain.entity import (
    EntityMetadata,
    new_metadata,
    record_event,
    restore_metadata,
    touch,
)
from lawmarket.shared.domain.value_objects import Email
from lawmarket.shared.utils.helpers import as_utc, utc_now

MIN_DISPLAY_NAME_LENGTH = 2


def _validate_display_name(display_name: Optional[str]) -> str:
    name = (display_name or "").strip()
    if len(name) < MIN_DISPLAY_NAME_LENGTH:
        raise ValidationError("Name must be at least 2 characters", field="display_name", value=display_name)
    return name


class Account(BaseModel):
    meta: EntityMetadata
    display_name: str
    email: str
    email_verified: bool = False
    avatar_url: Optional[str] = None
    role: Role
    banned: bool = False
    ban_reason: Optional[str] = None
    ban_expires_at: Optional[datetime] = None
    onboarding_completed: bool = False

    # =========================================================================
    # CONSTRUCTION
    # =========================================================================

    @classmethod
    def create(
        cls,
        display_name: str,
        email: str,
        role: Optional[Role] = None,
        email_verified: bool = False,
        avatar_url: Optional[str] = None,
        account_id: Optional[str] = None,
    ) -> "Account":
        return cls(
            meta=new_metadata(account_id),
            display_name=_validate_display_name(display_name),
            email=Email.create(email).value,
            email_verified=email_verified,
            avatar_url=avatar_url,
            role=role or Role.client(),
        )

    @classmethod
    def reconstitute(
        cls,
        account_id: str,
        display_name: str,
        email: str,
        email_verified: bool,
        avatar_url: Optional[str],
        role: Role,
        banned: bool,
        ban_reason: Optional[str],
        ban_expires_at: Optional[datetime],
        onboarding_completed: bool,
        created_at: datetime,
        updated_at: Optional[datetime] = None,
    ) -> "Account":
        return cls(
            meta=restore_metadata(account_id, created_at, updated_at),
            display_name=display_name,
            email=email,
            email_verified=email_verified,
            avatar_url=avatar_url,
            role=role,
            banned=banned,
            ban_reason=ban_reason,
            ban_expires_at=as_utc(ban_expires_at),
            onboarding_completed=onboarding_completed,
        )

    @property
    def id(self) -> str:
        return self.meta.id

    @property
    def created_at(self) -> datetime:
        return self.meta.created_at

    @property
    def updated_at(self) -> datetime:
        return self.meta.updated_at

    # =========================================================================
    # PROFILE
    # =========================================================================

    def update_profile(self, display_name: Optional[str] = None, avatar_url: Optional[str] = None) -> None:
        """
        Update only the provided profile fields.

        Raises:
            ValidationError: If display_name is provided and shorter than
                2 characters after trimming
        """
        updated: List[str] = []
        if display_name is not None:
            self.display_name = _validate_display_name(display_name)
            updated.append("display_name")
        if avatar_url is not None:
            self.avatar_url = avatar_url or None
            updated.append("avatar_url")

        if updated:
            touch(self.meta)
            record_event(self.meta, AccountProfileUpdated(aggregate_id=self.id, updated_fields=updated))

    def complete_onboarding(self) -> None:
        self.onboarding_completed = True
        touch(self.meta)

    # =========================================================================
    # ROLE
    # =========================================================================

    def change_role(self, new_role: Role, acting_admin_id: str) -> None:
        if new_role == self.role:
            raise ValidationError("User already has this role", field="role", value=new_role)

        old_role = self.role
        self.role = new_role
        touch(self.meta)
        record_event(self.meta, AccountRoleChanged(
            aggregate_id=self.id,
            old_role=str(old_role),
            new_role=str(new_role),
            changed_by=acting_admin_id,
        ))

    # =========================================================================
    # BAN STATE
    # =========================================================================

    def ban(self, reason: str, expires_at: Optional[datetime] = None, acting_admin_id: Optional[str] = None) -> None:
        """
        Ban the account, optionally until a given moment.

        Raises:
            ValidationError: If already banned, the reason is blank, or the
                expiry is not in the future
        """
        if self.banned:
            raise ValidationError("User is already banned")
        if not reason or not reason.strip():
            raise ValidationError("Ban reason is required", field="reason")

        expires_at = as_utc(expires_at)
        if expires_at is not None and expires_at <= utc_now():
            raise ValidationError("Ban expiry must be in the future", field="expires_at", value=expires_at)

        self.banned = True
        self.ban_reason = reason.strip()
        self.ban_expires_at = expires_at
        touch(self.meta)
        record_event(self.meta, AccountBanned(
            aggregate_id=self.id,
            reason=self.ban_reason,
            expires_at=expires_at,
            banned_by=acting_admin_id,
        ))

    def unban(self, acting_admin_id: Optional[str] = None) -> None:
        if not self.banned:
            raise ValidationError("User is not banned")

        self.banned = False
        self.ban_reason = None
        self.ban_expires_at = None
        touch(self.meta)
        record_event(self.meta, AccountUnbanned(aggregate_id=self.id, unbanned_by=acting_admin_id))

    def is_ban_expired(self, now: Optional[datetime] = None) -> bool:
        """Advisory only: an expired ban stays in place until an admin lifts it."""
        if not self.banned or self.ban_expires_at is None:
            return False
        return (as_utc(now) or utc_now()) > self.ban_expires_at

    @property
    def is_ban_active(self) -> bool:
        return self.banned and not self.is_ban_expired()
