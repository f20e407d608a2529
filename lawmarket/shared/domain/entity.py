# 📄 File: lawmarket/shared/domain/entity.py
# 🧭 Purpose (Layman Explanation):
# The bookkeeping every stored record shares: its id, when it was created and last changed,
# and the list of announcements waiting to go out once it is saved.
# 🧪 Purpose (Technical Summary):
# EntityMetadata value embedded in each aggregate plus free functions operating on it
# (new_metadata, restore_metadata, touch, record_event, pull_events). Aggregates compose this
# struct instead of inheriting from a base entity class.
# 🔗 Dependencies:
# pydantic, lawmarket.shared.events.base, lawmarket.shared.utils.helpers
# 🔄 Connected Modules / Calls From:
# Account, ClientProfile and LawyerProfile aggregates; command handlers (pull_events)

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from lawmarket.shared.events.base import DomainEvent
from lawmarket.shared.utils.helpers import as_utc, generate_id, utc_now


class EntityMetadata(BaseModel):
    """Identity, timestamps and pending events of one aggregate instance."""

    id: str
    created_at: datetime
    updated_at: datetime
    pending_events: List[DomainEvent] = Field(default_factory=list, exclude=True)


def new_metadata(entity_id: Optional[str] = None) -> EntityMetadata:
    now = utc_now()
    return EntityMetadata(id=entity_id or generate_id(), created_at=now, updated_at=now)


def restore_metadata(entity_id: str, created_at: datetime, updated_at: Optional[datetime] = None) -> EntityMetadata:
    created = as_utc(created_at)
    return EntityMetadata(id=entity_id, created_at=created, updated_at=as_utc(updated_at) or created)


def touch(meta: EntityMetadata) -> None:
    meta.updated_at = utc_now()


def record_event(meta: EntityMetadata, event: DomainEvent) -> None:
    meta.pending_events.append(event)


def pull_events(meta: EntityMetadata) -> List[DomainEvent]:
    """Return the pending events and clear them from the aggregate."""
    events = list(meta.pending_events)
    meta.pending_events.clear()
    return events
