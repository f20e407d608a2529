# 📄 File: lawmarket/shared/utils/helpers.py
# 🧭 Purpose (Layman Explanation):
# Small time and identifier helpers shared by every part of the marketplace.
# 🧪 Purpose (Technical Summary):
# UTC-aware clock access, naive-datetime normalisation for storage round-trips, and id generation.
# 🔗 Dependencies:
# datetime, uuid
# 🔄 Connected Modules / Calls From:
# Entity metadata, domain models, repository mappers, command handlers

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Treat naive datetimes coming back from storage as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def generate_id() -> str:
    return str(uuid4())
