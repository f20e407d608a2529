"""
Unit tests for the in-process event publisher and the lawyer submission
notification handler.
"""
import pytest

from lawmarket.modules.lawyers.domain.events.handlers import (
    notify_admins_of_submission,
    register_event_handlers,
)
from lawmarket.modules.lawyers.domain.events.lawyer_events import LawyerApplicationSubmitted
from lawmarket.modules.specializations.application.handlers.query_handlers import ListSpecializationsQueryHandler
from lawmarket.modules.specializations.application.queries.list_specializations import ListSpecializationsQuery
from lawmarket.shared.events.base import DomainEvent
from lawmarket.shared.events.publisher import EventPublisher


class SampleEvent(DomainEvent):
    event_type: str = "sample.happened"


class TestEventPublisher:
    @pytest.mark.asyncio
    async def test_subscribers_receive_matching_events(self):
        publisher = EventPublisher()
        received = []

        async def handler(event):
            received.append(event)

        publisher.subscribe("sample.happened", handler)
        await publisher.publish(SampleEvent(aggregate_id="agg-1"))
        await publisher.publish(DomainEvent(aggregate_id="agg-2"))

        assert [e.aggregate_id for e in received] == ["agg-1"]
        assert publisher.published_count == 2

    @pytest.mark.asyncio
    async def test_duplicate_subscription_is_ignored(self):
        publisher = EventPublisher()

        async def handler(event):
            pass

        publisher.subscribe("sample.happened", handler)
        publisher.subscribe("sample.happened", handler)

        assert publisher.handlers_for("sample.happened") == [handler]

    @pytest.mark.asyncio
    async def test_failing_handler_does_not_stop_others(self):
        publisher = EventPublisher()
        received = []

        async def broken(event):
            raise RuntimeError("mail server down")

        async def working(event):
            received.append(event)

        publisher.subscribe("sample.happened", broken)
        publisher.subscribe("sample.happened", working)
        await publisher.publish_all([SampleEvent(aggregate_id="agg-1")])

        assert publisher.failed_count == 1
        assert len(received) == 1

    def test_event_serializes_to_json_friendly_dict(self):
        payload = SampleEvent(aggregate_id="agg-1").to_dict()

        assert payload["event_type"] == "sample.happened"
        assert isinstance(payload["occurred_at"], str)


class TestSubmissionNotification:
    def test_register_subscribes_notification(self):
        publisher = EventPublisher()
        register_event_handlers(publisher)

        assert publisher.handlers_for("lawyer.application_submitted") == [notify_admins_of_submission]

    @pytest.mark.asyncio
    async def test_notification_is_logged(self, caplog):
        event = LawyerApplicationSubmitted(aggregate_id="lawyer-1", lawyer_name="Lou Lawyer", email="lou@lawfirm.com")

        with caplog.at_level("INFO"):
            await notify_admins_of_submission(event)

        assert any("Lou Lawyer" in record.getMessage() for record in caplog.records)

    @pytest.mark.asyncio
    async def test_other_events_are_ignored(self, caplog):
        with caplog.at_level("INFO"):
            await notify_admins_of_submission(SampleEvent(aggregate_id="agg-1"))

        assert not any("awaiting review" in record.getMessage() for record in caplog.records)


class TestListSpecializations:
    @pytest.mark.asyncio
    async def test_catalog_is_sorted_by_name(self, specialization_repository):
        items = await ListSpecializationsQueryHandler(specialization_repository).handle(ListSpecializationsQuery())

        assert [s.name for s in items] == ["Corporate Law", "Criminal Law", "Family Law", "Immigration Law"]
