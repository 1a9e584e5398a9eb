"""Organization identifier."""

from dataclasses import dataclass

from civic_portal.domain.shared import ValueObject, ensure_text, strip_text_fields

MAX_ORGANIZATION_ID_LENGTH = 50


@dataclass(frozen=True)
class OrganizationId(ValueObject):
    """Human-readable organization key ("civic-hub")."""

    value: str

    def __post_init__(self) -> None:
        strip_text_fields(self, "value")
        ensure_text(
            self.value,
            field="organization_id",
            label="Organization ID",
            max_length=MAX_ORGANIZATION_ID_LENGTH,
        )

    def __str__(self) -> str:
        return self.value
