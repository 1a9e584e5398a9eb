"""Unit tests for ProjectAggregate and project domain events."""

from civic_portal.domain.projects import (
    ProjectAggregate,
    ProjectCategory,
    ProjectCreatedEvent,
    ProjectStatsUpdatedEvent,
    ProjectStatus,
    ProjectStatusChangedEvent,
    ProjectTagsChangedEvent,
)


def _create_aggregate(**overrides):
    params = {
        "title": "Open Budget",
        "description": "Explore how the city spends its money",
        "category": ProjectCategory.GOVERNMENT,
        "status": ProjectStatus.ACTIVE,
        "tags": ("budget", "transparency"),
        "star_count": 10,
        "fork_count": 2,
    }
    params.update(overrides)
    return ProjectAggregate.create(**params)


class TestProjectAggregateCreation:
    """Tests for aggregate factories."""

    def test_create_records_project_created_event(self):
        # Act
        aggregate = _create_aggregate()

        # Assert
        events = aggregate.get_domain_events()
        assert len(events) == 1
        assert isinstance(events[0], ProjectCreatedEvent)
        assert events[0].event_type == "ProjectCreated"
        assert events[0].aggregate_id == aggregate.id.value

    def test_from_project_records_nothing(self, make_project):
        aggregate = ProjectAggregate.from_project(make_project())

        assert aggregate.has_domain_events is False

    def test_get_domain_events_returns_copy(self):
        aggregate = _create_aggregate()

        aggregate.get_domain_events().clear()

        assert len(aggregate.get_domain_events()) == 1

    def test_clear_domain_events(self):
        aggregate = _create_aggregate()

        aggregate.clear_domain_events()

        assert aggregate.get_domain_events() == []


class TestChangeStatus:
    """Tests for change_status()."""

    def test_change_status_records_event(self):
        # Arrange
        aggregate = _create_aggregate()
        aggregate.clear_domain_events()

        # Act
        aggregate.change_status(ProjectStatus.COMPLETED)

        # Assert
        [event] = aggregate.get_domain_events()
        assert isinstance(event, ProjectStatusChangedEvent)
        assert event.previous_status == ProjectStatus.ACTIVE
        assert event.new_status == ProjectStatus.COMPLETED
        assert event.changed_at == aggregate.project.updated_at
        assert aggregate.project.status == ProjectStatus.COMPLETED

    def test_same_status_is_noop(self):
        aggregate = _create_aggregate()
        aggregate.clear_domain_events()
        before = aggregate.project

        aggregate.change_status(ProjectStatus.ACTIVE)

        assert aggregate.get_domain_events() == []
        assert aggregate.project is before

    def test_transition_table_is_not_enforced(self):
        aggregate = _create_aggregate(status=ProjectStatus.PLANNING)

        aggregate.change_status(ProjectStatus.COMPLETED)

        assert aggregate.project.status == ProjectStatus.COMPLETED


class TestUpdateGitHubStats:
    """Tests for update_github_stats()."""

    def test_records_before_and_after_counts(self):
        aggregate = _create_aggregate()
        aggregate.clear_domain_events()

        aggregate.update_github_stats(25, 4)

        [event] = aggregate.get_domain_events()
        assert isinstance(event, ProjectStatsUpdatedEvent)
        assert (event.previous_star_count, event.new_star_count) == (10, 25)
        assert (event.previous_fork_count, event.new_fork_count) == (2, 4)

    def test_unchanged_counts_are_noop(self):
        aggregate = _create_aggregate()
        aggregate.clear_domain_events()

        aggregate.update_github_stats(10, 2)

        assert aggregate.has_domain_events is False


class TestManageTags:
    """Tests for manage_tags()."""

    def test_adds_then_removes(self):
        # Arrange
        aggregate = _create_aggregate()
        aggregate.clear_domain_events()

        # Act
        aggregate.manage_tags(tags_to_add=["open-data", "budget"], tags_to_remove=["transparency"])

        # Assert
        [event] = aggregate.get_domain_events()
        assert isinstance(event, ProjectTagsChangedEvent)
        assert event.previous_tags == ("budget", "transparency")
        assert event.new_tags == ("budget", "open-data")
        assert event.added_tags == ("open-data",)
        assert event.removed_tags == ("transparency",)

    def test_add_and_remove_same_tag_is_noop(self):
        aggregate = _create_aggregate()
        aggregate.clear_domain_events()

        aggregate.manage_tags(tags_to_add=["maps"], tags_to_remove=["maps"])

        assert aggregate.has_domain_events is False
        assert aggregate.project.tags == ("budget", "transparency")

    def test_existing_tags_only_is_noop(self):
        aggregate = _create_aggregate()
        aggregate.clear_domain_events()

        aggregate.manage_tags(tags_to_add=["budget"])

        assert aggregate.has_domain_events is False


class TestEventSerialization:
    """Tests for DomainEvent.to_dict()."""

    def test_to_dict_shape(self):
        # Arrange
        aggregate = _create_aggregate()
        aggregate.clear_domain_events()
        aggregate.change_status(ProjectStatus.ARCHIVED)
        [event] = aggregate.get_domain_events()

        # Act
        record = event.to_dict()

        # Assert
        assert set(record) == {
            "event_id",
            "event_type",
            "aggregate_id",
            "aggregate_type",
            "event_version",
            "occurred_on",
            "event_data",
        }
        assert record["event_type"] == "ProjectStatusChanged"
        assert record["aggregate_type"] == "Project"
        assert record["event_version"] == 1
        assert record["event_data"] == {
            "previous_status": "active",
            "new_status": "archived",
            "changed_at": aggregate.project.updated_at.isoformat(),
        }

    def test_tags_serialize_as_lists(self):
        aggregate = _create_aggregate()
        aggregate.clear_domain_events()
        aggregate.manage_tags(tags_to_add=["maps"])

        data = aggregate.get_domain_events()[0].to_dict()["event_data"]

        assert data["added_tags"] == ["maps"]
        assert data["removed_tags"] == []

    def test_events_have_unique_ids(self):
        first = _create_aggregate().get_domain_events()[0]
        second = _create_aggregate().get_domain_events()[0]

        assert first.event_id != second.event_id
