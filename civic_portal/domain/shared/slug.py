"""Slug value object - URL fragment derived from a title."""

import re
from dataclasses import dataclass

from .exceptions import ErrorCode
from .value_object import ValueObject, validate_value_object

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
MAX_SLUG_LENGTH = 100

_NON_WORD = re.compile(r"[^\w\s-]", re.ASCII)
_SEPARATORS = re.compile(r"[\s_-]+", re.ASCII)


@dataclass(frozen=True)
class Slug(ValueObject):
    """Lowercase letters, digits and single hyphens, at most 100 characters.

    Example:
        >>> Slug.from_title("Test @#$% Event & More   Spaces").value
        'test-event-more-spaces'
    """

    value: str

    def __post_init__(self) -> None:
        validate_value_object(
            isinstance(self.value, str) and self.value.strip() != "",
            "Slug cannot be empty",
            field="slug",
            code=ErrorCode.EMPTY_FIELD,
        )
        validate_value_object(
            len(self.value) <= MAX_SLUG_LENGTH,
            f"Slug cannot exceed {MAX_SLUG_LENGTH} characters",
            field="slug",
            code=ErrorCode.FIELD_TOO_LONG,
        )
        validate_value_object(
            bool(SLUG_PATTERN.fullmatch(self.value)),
            "Slug must contain only lowercase letters, numbers, and hyphens",
            field="slug",
            code=ErrorCode.INVALID_FORMAT,
        )

    @classmethod
    def from_title(cls, title: str, fallback: str | None = None) -> "Slug":
        """Derive a slug from a human title.

        Characters outside ASCII letters, digits, whitespace, underscore and
        hyphen are dropped, so a title written entirely in a non-Latin
        script slugifies to nothing. Pass ``fallback`` (already a valid
        slug) to use in that case; without it the empty slug is rejected.

        Args:
            title: Source title.
            fallback: Slug used when the title yields no characters.

        Returns:
            Slug instance.

        Raises:
            ValidationError: If the result is empty and no fallback is given.
        """
        slug = _NON_WORD.sub("", title.lower().strip())
        slug = _SEPARATORS.sub("-", slug).strip("-")
        slug = slug[:MAX_SLUG_LENGTH].rstrip("-")
        if not slug and fallback is not None:
            slug = fallback
        return cls(slug)

    def __str__(self) -> str:
        return self.value
