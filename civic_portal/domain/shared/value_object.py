"""Base ValueObject class for domain model.

ValueObject - an immutable object compared by the values of its attributes,
not by identity. Two value objects with the same attributes are the same value.
"""

from abc import ABC
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .exceptions import ErrorCode, ValidationError


@dataclass(frozen=True, eq=True)
class ValueObject(ABC):
    """Base class for all domain value objects.

    ValueObject characteristics:
    - **Immutable**: Cannot change after creation (frozen=True)
    - **Equality by value**: Compared by attribute values, not by ID
    - **No identity**: Has no ID of its own
    - **Replaceable**: To change it, build a new one

    Example:
        >>> @dataclass(frozen=True)
        ... class GitHubMetrics(ValueObject):
        ...     stars: int
        ...     forks: int

        >>> GitHubMetrics(10, 2) == GitHubMetrics(10, 2)  # True (same value)
        >>> GitHubMetrics(10, 2).stars = 11  # FrozenInstanceError!
    """

    def __post_init__(self) -> None:
        """Hook for validation after initialization.

        Override this method to add validation rules.

        Raises:
            ValidationError: If validation fails.
        """
        pass


class DomainEnum(str, Enum):
    """Closed enumeration that fails with ValidationError on unknown values.

    Example:
        >>> class ProjectStatus(DomainEnum):
        ...     ACTIVE = "active"

        >>> ProjectStatus("bogus")  # ValidationError: Invalid ProjectStatus: bogus
    """

    @classmethod
    def _missing_(cls, value: object) -> Any:
        raise ValidationError(
            f"Invalid {cls.__name__}: {value}",
            field=cls.__name__,
            code=ErrorCode.INVALID_VALUE,
        )

    @classmethod
    def values(cls) -> list[str]:
        """All raw values in declaration order."""
        return [member.value for member in cls]


def validate_value_object(
    condition: bool,
    message: str,
    *,
    field: str | None = None,
    code: ErrorCode = ErrorCode.INVALID_VALUE,
) -> None:
    """Helper for validation in value objects and entities.

    Args:
        condition: Condition that must be True.
        message: Error message if condition is False.
        field: Name of the offending field.
        code: Failure reason.

    Raises:
        ValidationError: If condition is False.

    Example:
        >>> validate_value_object(stars >= 0, "Star count cannot be negative")
    """
    if not condition:
        raise ValidationError(message, field=field, code=code)


def ensure_text(
    value: str,
    *,
    field: str,
    label: str,
    max_length: int | None = None,
) -> None:
    """Reject blank text and text longer than max_length.

    Args:
        value: Text to check.
        field: Attribute name reported on the error.
        label: Human name used in the message ("Project title").
        max_length: Optional upper bound in characters.
    """
    validate_value_object(
        isinstance(value, str) and value.strip() != "",
        f"{label} cannot be empty",
        field=field,
        code=ErrorCode.EMPTY_FIELD,
    )
    if max_length is not None:
        ensure_max_length(value, max_length, field=field, label=label)


def ensure_max_length(value: str, max_length: int, *, field: str, label: str) -> None:
    """Reject text longer than max_length characters."""
    validate_value_object(
        len(value) <= max_length,
        f"{label} cannot exceed {max_length} characters",
        field=field,
        code=ErrorCode.FIELD_TOO_LONG,
    )


def ensure_non_negative(value: int, *, field: str, label: str) -> None:
    """Reject negative counts."""
    validate_value_object(
        value >= 0,
        f"{label} cannot be negative",
        field=field,
        code=ErrorCode.NEGATIVE_VALUE,
    )


def strip_text_fields(instance: object, *names: str) -> None:
    """Trim surrounding whitespace of string attributes on a frozen dataclass."""
    for name in names:
        value = getattr(instance, name)
        if isinstance(value, str):
            object.__setattr__(instance, name, value.strip())
