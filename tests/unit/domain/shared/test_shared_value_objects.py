"""Tests for shared value objects: identifiers, Slug, Url, DomainEnum."""

import pytest

from civic_portal.domain.projects import ProjectId, ProjectStatus
from civic_portal.domain.shared import ErrorCode, Slug, Url, ValidationError
from civic_portal.domain.users import UserId


class TestIdentifiers:
    """Tests for UUID identifiers."""

    def test_generate_produces_valid_distinct_ids(self):
        first = ProjectId.generate()
        second = ProjectId.generate()

        assert first != second
        assert ProjectId(first.value) == first
        assert str(first) == first.value

    @pytest.mark.parametrize("value", ["", "   "])
    def test_blank_id_rejected(self, value):
        with pytest.raises(ValidationError, match="ProjectId cannot be empty") as exc_info:
            ProjectId(value)

        assert exc_info.value.code == ErrorCode.EMPTY_FIELD

    def test_non_uuid_rejected(self):
        with pytest.raises(ValidationError, match="must be a valid UUID") as exc_info:
            ProjectId("project-42")

        assert exc_info.value.code == ErrorCode.INVALID_FORMAT

    def test_project_id_requires_version_4(self):
        """Version 1 UUIDs are rejected for projects but accepted for users."""
        v1 = "6ba7b810-9dad-11d1-80b4-00c04fd430c8"

        with pytest.raises(ValidationError):
            ProjectId(v1)
        assert UserId(v1).value == v1

    def test_trailing_newline_rejected(self):
        value = ProjectId.generate().value

        with pytest.raises(ValidationError, match="must be a valid UUID"):
            ProjectId(value + "\n")
        with pytest.raises(ValidationError):
            UserId(value + "\n")

    def test_ids_of_different_kinds_are_not_equal(self):
        value = ProjectId.generate().value

        assert ProjectId(value) != UserId(value)


class TestSlug:
    """Tests for Slug."""

    def test_from_title_strips_symbols_and_collapses_spaces(self):
        slug = Slug.from_title("Test @#$% Event & More   Spaces")

        assert slug.value == "test-event-more-spaces"

    def test_from_title_collapses_underscores_and_hyphens(self):
        assert Slug.from_title("  Civic__Tech -- Night ").value == "civic-tech-night"

    def test_from_title_truncates_to_max_length(self):
        slug = Slug.from_title("word " * 40)

        assert len(slug.value) <= 100
        assert not slug.value.endswith("-")

    def test_title_without_ascii_characters_uses_fallback(self):
        assert Slug.from_title("開放資料工作坊", fallback="event-1a2b3c4d").value == "event-1a2b3c4d"

    def test_title_without_ascii_characters_and_no_fallback_fails(self):
        with pytest.raises(ValidationError, match="Slug cannot be empty"):
            Slug.from_title("開放資料工作坊")

    @pytest.mark.parametrize(
        "value", ["Upper", "double--hyphen", "-leading", "with space", "open-data\n"]
    )
    def test_invalid_slug_rejected(self, value):
        with pytest.raises(
            ValidationError,
            match="Slug must contain only lowercase letters, numbers, and hyphens",
        ):
            Slug(value)


class TestUrl:
    """Tests for Url."""

    def test_https_url(self):
        url = Url("https://github.com/civic/open-budget")

        assert url.domain == "github.com"
        assert url.is_secure() is True

    def test_http_url_is_not_secure(self):
        assert Url("http://example.org").is_secure() is False

    @pytest.mark.parametrize("value", ["ftp://example.org", "example.org", "https://"])
    def test_invalid_url_rejected(self, value):
        with pytest.raises(ValidationError, match="Invalid URL format"):
            Url(value)


class TestDomainEnum:
    """Tests for closed enumerations."""

    def test_lookup_by_value(self):
        assert ProjectStatus("active") is ProjectStatus.ACTIVE

    def test_unknown_value_raises_validation_error(self):
        with pytest.raises(ValidationError, match="Invalid ProjectStatus: bogus") as exc_info:
            ProjectStatus("bogus")

        assert exc_info.value.code == ErrorCode.INVALID_VALUE

    def test_values_in_declaration_order(self):
        assert ProjectStatus.values() == ["active", "completed", "planning", "archived"]
