# 📄 File: lawmarket/modules/clients/domain/events/client_events.py
# 🧭 Purpose (Layman Explanation):
# Records of a client profile being created, finishing onboarding, or being edited.
# 🧪 Purpose (Technical Summary):
# Immutable domain events recorded by the ClientProfile aggregate.
# 🔗 Dependencies:
# lawmarket.shared.events.base
# 🔄 Connected Modules / Calls From:
# ClientProfile aggregate, client command handlers, EventPublisher

from typing import List

from lawmarket.shared.events.base import DomainEvent


class ClientProfileCreated(DomainEvent):
    event_type: str = "client.profile_created"

    account_id: str


class ClientOnboardingCompleted(DomainEvent):
    """
    Fired once per client, when onboarding moves from incomplete to complete.
    """
    event_type: str = "client.onboarding_completed"

    account_id: str
    specialization_count: int


class ClientProfileUpdated(DomainEvent):
    event_type: str = "client.profile_updated"

    updated_fields: List[str]
