"""Unit tests for the users context."""

from datetime import datetime, timezone

import pytest

from civic_portal.domain.shared import ErrorCode, ValidationError
from civic_portal.domain.users import Email, User, UserId


class TestEmail:
    """Tests for Email value object."""

    def test_valid_email(self):
        email = Email("ada@example.org")

        assert email.local_part == "ada"
        assert email.domain == "example.org"
        assert str(email) == "ada@example.org"

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "not-an-email",
            "ada@example",
            "ada..lovelace@example.org",
            "a b@example.org",
            "ada@example.org\n",
        ],
    )
    def test_invalid_email(self, value):
        with pytest.raises(ValidationError) as exc_info:
            Email(value)

        assert exc_info.value.code == ErrorCode.INVALID_FORMAT
        assert exc_info.value.field == "email"
        assert str(exc_info.value) == f"Invalid email format: {value}"

    def test_too_long_rejected(self):
        assert Email.is_valid("a" * 250 + "@x.io") is False


class TestUserId:
    def test_accepts_any_uuid_version(self):
        assert UserId("6ba7b810-9dad-11d1-80b4-00c04fd430c8").value.startswith("6ba7b810")

    def test_rejects_garbage(self):
        with pytest.raises(ValidationError, match="UserId must be a valid UUID"):
            UserId("user-1")


class TestUser:
    """Tests for User entity."""

    def test_create_trims_name(self):
        user = User.create(email=Email("ada@example.org"), name="  Ada Lovelace  ")

        assert user.name == "Ada Lovelace"
        assert user.created_at == user.updated_at

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            User.create(email=Email("ada@example.org"), name="   ")

        assert exc_info.value.code == ErrorCode.EMPTY_FIELD

    def test_name_over_100_characters_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            User.create(email=Email("ada@example.org"), name="x" * 101)

        assert exc_info.value.code == ErrorCode.FIELD_TOO_LONG

    def test_update_name_moves_updated_at_forward(self):
        user = User.create(email=Email("ada@example.org"), name="Ada")

        renamed = user.update_name("Ada King")

        assert renamed.name == "Ada King"
        assert renamed.id == user.id
        assert renamed.updated_at > user.updated_at
        assert user.name == "Ada"

    def test_from_persistence(self):
        stamp = datetime(2024, 1, 1, tzinfo=timezone.utc)
        user_id = UserId.generate()

        user = User.from_persistence(
            id=user_id,
            email=Email("ada@example.org"),
            name="Ada",
            created_at=stamp,
            updated_at=stamp,
        )

        assert user.id == user_id
        assert user.created_at == stamp
