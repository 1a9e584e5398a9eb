"""Core values and principles shown on the about page."""

from dataclasses import dataclass

from civic_portal.domain.shared import (
    ErrorCode,
    ValueObject,
    ensure_text,
    strip_text_fields,
    validate_value_object,
)

MAX_TITLE_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 500
MIN_PRIORITY = 0
MAX_PRIORITY = 100


@dataclass(frozen=True)
class CoreValue(ValueObject):
    """Organization value card. ``icon`` and ``color`` are presentation hints."""

    id: str
    title: str
    description: str
    icon: str = ""
    color: str = ""

    def __post_init__(self) -> None:
        strip_text_fields(self, "id", "title", "description", "icon", "color")
        self._validate("Core value")

    def _validate(self, label: str) -> None:
        ensure_text(self.id, field="id", label=f"{label} ID")
        ensure_text(
            self.title, field="title", label=f"{label} title", max_length=MAX_TITLE_LENGTH
        )
        ensure_text(
            self.description,
            field="description",
            label=f"{label} description",
            max_length=MAX_DESCRIPTION_LENGTH,
        )


@dataclass(frozen=True)
class OrganizationPrinciple(CoreValue):
    """Core value with a display priority (higher first)."""

    priority: int = 0

    def __post_init__(self) -> None:
        strip_text_fields(self, "id", "title", "description", "icon", "color")
        self._validate("Principle")
        validate_value_object(
            MIN_PRIORITY <= self.priority <= MAX_PRIORITY,
            f"Priority must be between {MIN_PRIORITY} and {MAX_PRIORITY}",
            field="priority",
            code=ErrorCode.INVALID_RANGE,
        )
