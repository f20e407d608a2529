# 📄 File: lawmarket/shared/events/base.py

# 🧭 Purpose (Layman Explanation):
# The template every "something important happened" record follows, such as a user being banned
# or a lawyer submitting an application.

# 🧪 Purpose (Technical Summary):
# Immutable pydantic base class for domain events with identity, type tag, aggregate id and
# timestamp, plus a dict serialiser used by the publisher for structured logging.

# 🔗 Dependencies:
# - pydantic: immutable event models
# - lawmarket.shared.utils.helpers: id and clock helpers

# 🔄 Connected Modules / Calls From:
# Used by: account/client/lawyer event modules, EntityMetadata pending events, EventPublisher

from datetime import datetime
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

from lawmarket.shared.utils.helpers import generate_id, utc_now


class DomainEvent(BaseModel):
    """
    Base class for all domain events.

    Events are recorded on an aggregate while it is mutated and are only
    handed to the publisher once the repository write has returned.
    """

    model_config = ConfigDict(frozen=True)

    event_type: str = "domain.event"
    event_id: str = Field(default_factory=generate_id)
    aggregate_id: str
    occurred_at: datetime = Field(default_factory=utc_now)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")

    def __str__(self) -> str:
        return f"{self.event_type}({self.aggregate_id})"
