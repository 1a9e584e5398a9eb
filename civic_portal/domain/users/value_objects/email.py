"""Email Value Object."""

import re
from dataclasses import dataclass

from civic_portal.domain.shared import ErrorCode, ValueObject, validate_value_object

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MAX_EMAIL_LENGTH = 254


@dataclass(frozen=True)
class Email(ValueObject):
    """Email address, stored exactly as given.

    Example:
        >>> Email("ada@example.org").domain
        'example.org'
        >>> Email("ada..lovelace@example.org")  # ValidationError
    """

    value: str

    def __post_init__(self) -> None:
        validate_value_object(
            self.is_valid(self.value),
            f"Invalid email format: {self.value}",
            field="email",
            code=ErrorCode.INVALID_FORMAT,
        )

    @staticmethod
    def is_valid(value: object) -> bool:
        if not isinstance(value, str):
            return False
        if not value.strip() or len(value) > MAX_EMAIL_LENGTH:
            return False
        if ".." in value:
            return False
        return bool(EMAIL_PATTERN.fullmatch(value))

    @property
    def local_part(self) -> str:
        return self.value.split("@")[0]

    @property
    def domain(self) -> str:
        return self.value.split("@")[1]

    def __str__(self) -> str:
        return self.value
