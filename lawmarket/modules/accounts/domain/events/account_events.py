# 📄 File: lawmarket/modules/accounts/domain/events/account_events.py
# 🧭 Purpose (Layman Explanation):
# Records of important things happening to an account: profile edits, role changes, bans, unbans.
# 🧪 Purpose (Technical Summary):
# Immutable domain events recorded by the Account aggregate and published after persistence.
# 🔗 Dependencies:
# lawmarket.shared.events.base
# 🔄 Connected Modules / Calls From:
# Account aggregate, account command handlers, EventPublisher

from datetime import datetime
from typing import List, Optional

from lawmarket.shared.events.base import DomainEvent


class AccountProfileUpdated(DomainEvent):
    event_type: str = "account.profile_updated"

    updated_fields: List[str]


class AccountRoleChanged(DomainEvent):
    """
    Fired when an admin moves an account to a different role.

    Triggers:
    - Audit trail
    - Access caches refresh on the next request
    """
    event_type: str = "account.role_changed"

    old_role: str
    new_role: str
    changed_by: str


class AccountBanned(DomainEvent):
    event_type: str = "account.banned"

    reason: str
    expires_at: Optional[datetime] = None
    banned_by: Optional[str] = None


class AccountUnbanned(DomainEvent):
    event_type: str = "account.unbanned"

    unbanned_by: Optional[str] = None
