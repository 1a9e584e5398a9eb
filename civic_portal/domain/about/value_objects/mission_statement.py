"""Mission Statement - titled paragraph used for mission and vision."""

from dataclasses import dataclass

from civic_portal.domain.shared import ValueObject, ensure_text, strip_text_fields

MAX_TITLE_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 2000


@dataclass(frozen=True)
class MissionStatement(ValueObject):
    title: str
    description: str

    def __post_init__(self) -> None:
        strip_text_fields(self, "title", "description")
        ensure_text(self.title, field="title", label="Mission title", max_length=MAX_TITLE_LENGTH)
        ensure_text(
            self.description,
            field="description",
            label="Mission description",
            max_length=MAX_DESCRIPTION_LENGTH,
        )
