"""Unit tests for EventService."""

from datetime import datetime, timedelta, timezone

import pytest

from civic_portal.domain.calendar import (
    EventCriteria,
    EventService,
    EventSortField,
    EventStatus,
    EventType,
    Location,
)
from civic_portal.domain.shared import SortDirection

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def workshop(make_event):
    return make_event(
        title="Data Workshop",
        type=EventType.WORKSHOP,
        max_participants=50,
        current_participants=25,
        start=NOW + timedelta(days=10),
        tags=("data",),
    )


@pytest.fixture
def hackathon(make_event):
    return make_event(
        title="Civic Hackathon",
        type=EventType.HACKATHON,
        max_participants=100,
        current_participants=100,
        start=NOW + timedelta(days=3),
        hours=48,
        is_featured=True,
        location=Location.physical(
            name="Hub", address="2 Side St", city="Taipei", country="Taiwan"
        ),
        tags=("data", "hack"),
    )


@pytest.fixture
def meetup(make_event):
    return make_event(
        title="Monthly Meetup",
        type=EventType.MEETUP,
        status=EventStatus.PAST,
        max_participants=None,
        current_participants=40,
        start=NOW - timedelta(days=20),
        hours=2,
        is_featured=True,
        is_registration_open=False,
    )


@pytest.fixture
def events(workshop, hackathon, meetup):
    return [workshop, hackathon, meetup]


class TestFilterEvents:
    """Tests for EventService.filter_events()."""

    def test_only_events_with_available_spots(self, workshop, hackathon):
        # Act
        result = EventService.filter_events(
            [workshop, hackathon], EventCriteria(has_available_spots=True)
        )

        # Assert
        assert result == [workshop]

    def test_type_filter_accepts_all(self, events):
        assert EventService.filter_events(events, EventCriteria(type="all")) == events
        assert EventService.filter_events(
            events, EventCriteria(type=EventType.MEETUP)
        ) == [events[2]]

    def test_time_flags_use_dates(self, events, workshop, hackathon):
        result = EventService.filter_events(events, EventCriteria(is_upcoming=True), now=NOW)

        assert result == [workshop, hackathon]

    def test_time_flags_accept_naive_now(self, events, workshop, hackathon):
        assert EventService.filter_events(
            events, EventCriteria(is_upcoming=True), now=NOW.replace(tzinfo=None)
        ) == [workshop, hackathon]
        assert EventService.filter_events(
            events, EventCriteria(is_upcoming=True), now=datetime(2020, 1, 1)
        ) == events

    def test_location_filters(self, events, hackathon):
        assert EventService.filter_events(events, EventCriteria(city="taipei")) == [hackathon]
        assert EventService.filter_events(
            events, EventCriteria(is_online=False)
        ) == [hackathon]

    def test_tags_match_any(self, events, workshop, hackathon):
        result = EventService.filter_events(events, EventCriteria(tags=("hack", "nothing")))

        assert result == [hackathon]

    def test_start_window(self, events, hackathon):
        result = EventService.filter_events(
            events,
            EventCriteria(start_after=NOW, start_before=NOW + timedelta(days=5)),
        )

        assert result == [hackathon]


class TestSortAndLists:
    """Tests for sorting and curated lists."""

    def test_default_sort_is_start_ascending(self, events, workshop, hackathon, meetup):
        assert EventService.sort_events(events) == [meetup, hackathon, workshop]

    def test_sort_by_registrations_desc(self, events, workshop, hackathon, meetup):
        result = EventService.sort_events(
            events, EventSortField.REGISTRATIONS, SortDirection.DESC
        )

        assert result == [hackathon, meetup, workshop]

    def test_uncapped_sorts_as_zero_capacity(self, events, meetup):
        result = EventService.sort_events(events, "capacity", "asc")

        assert result[0] == meetup

    def test_featured_excludes_cancelled(self, events, hackathon, meetup):
        cancelled = hackathon.cancel()

        result = EventService.get_featured_events([cancelled, meetup])

        assert result == [meetup]

    def test_featured_ranked_by_registrations(self, events, hackathon, meetup):
        assert EventService.get_featured_events(events) == [hackathon, meetup]

    def test_upcoming_and_past_use_status(self, events, workshop, hackathon, meetup):
        assert EventService.get_upcoming_events(events) == [hackathon, workshop]
        assert EventService.get_upcoming_events(events, limit=1) == [hackathon]
        assert EventService.get_past_events(events) == [meetup]

    def test_popular_event_types(self, make_event, events):
        extra = make_event(title="Second Workshop")

        result = EventService.get_popular_event_types(events + [extra])

        assert result[0].type == EventType.WORKSHOP
        assert result[0].count == 2

    def test_popular_tags(self, events):
        result = EventService.get_popular_tags(events, limit=1)

        assert [(t.tag, t.count) for t in result] == [("data", 2)]


class TestEventStats:
    """Tests for EventService.get_event_stats()."""

    def test_stats_count_capped_events_only(self, events):
        stats = EventService.get_event_stats(events)

        assert stats.total == 3
        assert stats.upcoming == 2
        assert stats.past == 1
        assert stats.featured == 2
        assert stats.with_available_spots == 2
        assert stats.total_capacity == 150
        assert stats.total_registered == 125
        assert stats.average_occupancy == pytest.approx(125 / 150)
        assert stats.type_distribution == {"workshop": 1, "hackathon": 1, "meetup": 1}

    def test_empty_stats(self):
        stats = EventService.get_event_stats([])

        assert stats.total == 0
        assert stats.average_occupancy == 0.0
