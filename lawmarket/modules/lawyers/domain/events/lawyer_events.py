# 📄 File: lawmarket/modules/lawyers/domain/events/lawyer_events.py
# 🧭 Purpose (Layman Explanation):
# Records of a lawyer starting sign-up, finishing each step, and sending the application in.
# 🧪 Purpose (Technical Summary):
# Immutable domain events recorded by the LawyerProfile aggregate.
# 🔗 Dependencies:
# lawmarket.shared.events.base
# 🔄 Connected Modules / Calls From:
# LawyerProfile aggregate, lawyer command handlers, lawyers event handlers

from lawmarket.shared.events.base import DomainEvent


class LawyerProfileCreated(DomainEvent):
    event_type: str = "lawyer.profile_created"

    account_id: str
    email: str
    full_name: str


class LawyerOnboardingStepCompleted(DomainEvent):
    event_type: str = "lawyer.onboarding_step_completed"

    step: str
    next_step: str


class LawyerApplicationSubmitted(DomainEvent):
    """
    Fired when a lawyer sends a complete application for admin review.
    """
    event_type: str = "lawyer.application_submitted"

    lawyer_name: str
    email: str
