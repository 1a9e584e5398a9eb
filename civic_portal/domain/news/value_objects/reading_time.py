"""Reading Time - estimated minutes to read an article."""

import math
from dataclasses import dataclass

from civic_portal.domain.shared import ValueObject, ensure_non_negative

WORDS_PER_MINUTE = 200


@dataclass(frozen=True)
class ReadingTime(ValueObject):
    """Whole minutes of reading.

    Example:
        >>> ReadingTime.calculate_from_content("word " * 500).minutes
        3
    """

    minutes: int

    def __post_init__(self) -> None:
        ensure_non_negative(self.minutes, field="reading_time", label="Reading time")

    @classmethod
    def calculate_from_content(
        cls, content: str, words_per_minute: int = WORDS_PER_MINUTE
    ) -> "ReadingTime":
        """Words divided by reading speed, rounded up, at least one minute."""
        words = len(content.split())
        return cls(max(1, math.ceil(words / words_per_minute)))

    @property
    def display_text(self) -> str:
        return f"{self.minutes} min read"
