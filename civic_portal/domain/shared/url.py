"""Url value object."""

from dataclasses import dataclass
from urllib.parse import urlparse

from .exceptions import ErrorCode
from .value_object import ValueObject, validate_value_object

MAX_URL_LENGTH = 2048


@dataclass(frozen=True)
class Url(ValueObject):
    """Absolute http(s) URL."""

    value: str

    def __post_init__(self) -> None:
        validate_value_object(
            isinstance(self.value, str) and self.value.strip() != "",
            "URL cannot be empty",
            field="url",
            code=ErrorCode.EMPTY_FIELD,
        )
        validate_value_object(
            len(self.value) <= MAX_URL_LENGTH,
            f"URL cannot exceed {MAX_URL_LENGTH} characters",
            field="url",
            code=ErrorCode.FIELD_TOO_LONG,
        )
        parsed = urlparse(self.value)
        validate_value_object(
            parsed.scheme in ("http", "https") and bool(parsed.netloc),
            f"Invalid URL format: {self.value}",
            field="url",
            code=ErrorCode.INVALID_FORMAT,
        )

    @property
    def domain(self) -> str:
        """Host part of the URL."""
        return urlparse(self.value).hostname or ""

    def is_secure(self) -> bool:
        return urlparse(self.value).scheme == "https"

    def __str__(self) -> str:
        return self.value
