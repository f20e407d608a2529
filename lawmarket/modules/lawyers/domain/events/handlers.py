# 📄 File: lawmarket/modules/lawyers/domain/events/handlers.py
# 🧭 Purpose (Layman Explanation):
# Lets the admin team know a new lawyer application is waiting for review.
#
# 🧪 Purpose (Technical Summary):
# Async event handlers subscribed on the process-wide EventPublisher at startup. The
# notification is a structured log entry picked up by the admin alerting pipeline.
#
# 🔗 Dependencies:
# EventPublisher, StructuredLogger
#
# 🔄 Connected Modules / Calls From:
# lawmarket.main (register_event_handlers on startup)

from lawmarket.modules.lawyers.domain.events.lawyer_events import LawyerApplicationSubmitted
from lawmarket.shared.events.base import DomainEvent
from lawmarket.shared.events.publisher import EventPublisher
from lawmarket.shared.utils.logging import get_logger

logger = get_logger(__name__)


async def notify_admins_of_submission(event: DomainEvent) -> None:
    if not isinstance(event, LawyerApplicationSubmitted):
        return
    logger.log_business_event(
        event_type="admin_notification",
        description=f"New lawyer application from {event.lawyer_name} awaiting review",
        entity_id=event.aggregate_id,
        extra={"lawyer_email": event.email, "notification": "lawyer_application_review"},
    )


def register_event_handlers(publisher: EventPublisher) -> None:
    publisher.subscribe("lawyer.application_submitted", notify_admins_of_submission)
