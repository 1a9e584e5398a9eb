"""UUID-backed identifier value objects."""

import re
from dataclasses import dataclass
from typing import ClassVar, Type, TypeVar
from uuid import uuid4

from .exceptions import ErrorCode
from .value_object import ValueObject, validate_value_object

UUID_V4_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)
UUID_ANY_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-8][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)

TIdentifier = TypeVar("TIdentifier", bound="Identifier")


@dataclass(frozen=True)
class Identifier(ValueObject):
    """Base for typed identifiers.

    Identifiers of different kinds never compare equal, even when they wrap
    the same string.

    Example:
        >>> ProjectId.generate()
        ProjectId(value='0b6f...')
        >>> ProjectId("")  # ValidationError: ProjectId cannot be empty
    """

    pattern: ClassVar[re.Pattern[str]] = UUID_V4_PATTERN

    value: str

    def __post_init__(self) -> None:
        name = type(self).__name__
        validate_value_object(
            isinstance(self.value, str) and self.value.strip() != "",
            f"{name} cannot be empty",
            field=name,
            code=ErrorCode.EMPTY_FIELD,
        )
        validate_value_object(
            bool(self.pattern.fullmatch(self.value)),
            f"{name} must be a valid UUID",
            field=name,
            code=ErrorCode.INVALID_FORMAT,
        )

    @classmethod
    def generate(cls: Type[TIdentifier]) -> TIdentifier:
        """Create a fresh random identifier."""
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value
