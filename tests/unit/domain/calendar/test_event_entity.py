"""Unit tests for the Event entity."""

from datetime import datetime, timedelta, timezone

import pytest

from civic_portal.domain.calendar import (
    DateRange,
    Event,
    EventId,
    EventStatus,
    EventType,
    Location,
)
from civic_portal.domain.shared import (
    ErrorCode,
    InvalidStateTransition,
    Slug,
    Url,
    ValidationError,
)

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


class TestEventCreation:
    """Tests for Event.create()."""

    def test_create_derives_slug(self):
        event = Event.create(
            title="Open Data Workshop!",
            description="Hands-on session",
            type=EventType.WORKSHOP,
            date_range=DateRange.from_duration(NOW + timedelta(days=3), 4),
            location=Location.online(),
        )

        assert event.slug.value == "open-data-workshop"
        assert event.status == EventStatus.UPCOMING
        assert event.is_registration_open is False
        assert event.current_participants == 0

    def test_cjk_title_uses_id_based_slug(self):
        event = Event.create(
            title="開放資料工作坊",
            description="Hands-on session",
            type=EventType.WORKSHOP,
            date_range=DateRange.from_duration(NOW + timedelta(days=3), 4),
            location=Location.online(),
        )

        assert event.slug.value == f"event-{event.id.value[:8]}"

    def test_title_over_150_characters_rejected(self, make_event):
        with pytest.raises(ValidationError, match="Event title cannot exceed 150"):
            make_event(title="x" * 151)

    def test_participants_over_max_rejected(self, make_event):
        with pytest.raises(ValidationError, match="cannot exceed maximum participants"):
            make_event(max_participants=10, current_participants=11)

    def test_from_persistence_rehydrates_stored_event(self):
        # Arrange
        event_id = EventId.generate()
        created = datetime(2024, 5, 1)

        # Act
        event = Event.from_persistence(
            id=event_id,
            title="Budget Hearing",
            slug=Slug("budget-hearing"),
            description="Public review of the draft budget",
            type=EventType.MEETUP,
            status=EventStatus.PAST,
            date_range=DateRange.from_duration(NOW - timedelta(days=2), 2),
            location=Location.online(),
            tags=["budget"],
            created_at=created,
            updated_at=created,
        )

        # Assert
        assert event.id == event_id
        assert event.tags == ("budget",)
        assert event.max_participants is None
        assert event.created_at == datetime(2024, 5, 1, tzinfo=timezone.utc)

    def test_from_persistence_rejects_unknown_fields(self, make_event):
        event = make_event()

        with pytest.raises(TypeError):
            Event.from_persistence(
                id=event.id,
                title=event.title,
                slug=event.slug,
                description=event.description,
                type=event.type,
                status=event.status,
                date_range=event.date_range,
                location=event.location,
                created_at=event.created_at,
                updated_at=event.updated_at,
                attendees=12,
            )


class TestEventParticipants:
    """Tests for registration and participants."""

    def test_add_participant(self, make_event):
        event = make_event(max_participants=30)

        updated = event.add_participant()

        assert updated.current_participants == 1
        assert updated.available_spots == 29
        assert event.current_participants == 0

    def test_add_participant_to_full_event_fails(self, make_event):
        event = make_event(max_participants=2, current_participants=2)

        with pytest.raises(InvalidStateTransition, match="event is full or registration is closed") as exc_info:
            event.add_participant()

        assert exc_info.value.code == ErrorCode.INVALID_STATE_TRANSITION

    def test_add_participant_with_registration_closed_fails(self, make_event):
        event = make_event(is_registration_open=False)

        with pytest.raises(InvalidStateTransition):
            event.add_participant()

    def test_remove_participant_at_zero_fails(self, make_event):
        with pytest.raises(InvalidStateTransition, match="no participants registered"):
            make_event().remove_participant()

    def test_uncapped_event_never_fills(self, make_event):
        event = make_event(max_participants=None, current_participants=500)

        assert event.capacity is None
        assert event.available_spots is None
        assert event.is_full() is False
        assert event.can_add_participant() is True

    def test_can_register(self, make_event):
        event = make_event(registration_url=Url("https://example.org/register"))

        assert event.can_register(NOW) is True
        assert event.cancel().can_register(NOW) is False
        assert make_event().can_register(NOW) is False

    def test_cancel_closes_registration(self, make_event):
        cancelled = make_event().cancel()

        assert cancelled.status == EventStatus.CANCELLED
        assert cancelled.is_registration_open is False


class TestEventTime:
    """Tests for time-based queries."""

    def test_upcoming_event(self, make_event):
        event = make_event(start=NOW + timedelta(days=2, hours=1))

        assert event.is_upcoming(NOW) is True
        assert event.is_past(NOW) is False
        assert event.days_until_event(NOW) == 3

    def test_naive_now_is_read_as_utc(self, make_event):
        event = make_event(start=NOW + timedelta(days=2, hours=1))
        naive_now = NOW.replace(tzinfo=None)

        assert event.is_upcoming(naive_now) is True
        assert event.days_until_event(naive_now) == 3

    def test_ongoing_event(self, make_event):
        event = make_event(start=NOW - timedelta(hours=1))

        assert event.is_ongoing(NOW) is True

    def test_duration_hours(self, make_event):
        assert make_event(hours=48).duration_hours == 48


class TestEventUpdates:
    """Tests for update_details()."""

    def test_new_title_regenerates_slug(self, make_event):
        updated = make_event().update_details(title="Civic Hack Night")

        assert updated.slug.value == "civic-hack-night"

    def test_none_removes_cap_and_registration_link(self, make_event):
        event = make_event(registration_url=Url("https://example.org/register"))

        kept = event.update_details(title="Civic Hack Night")
        cleared = event.update_details(max_participants=None, registration_url=None)

        assert kept.max_participants == 50
        assert kept.registration_url == event.registration_url
        assert cleared.max_participants is None
        assert cleared.registration_url is None
        assert cleared.available_spots is None

    def test_search_includes_location_name(self, make_event):
        event = make_event(location=Location.online("Jitsi Room"))

        assert event.matches_search("jitsi") is True
        assert event.matches_search("zoom") is False
