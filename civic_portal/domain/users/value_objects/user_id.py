"""User identifier."""

import re
from dataclasses import dataclass
from typing import ClassVar

from civic_portal.domain.shared import UUID_ANY_PATTERN, Identifier


@dataclass(frozen=True)
class UserId(Identifier):
    """UUID identifier of a user. Any UUID version is accepted."""

    pattern: ClassVar[re.Pattern[str]] = UUID_ANY_PATTERN
