"""Query primitives shared by query services and repository ports."""

import math
import unicodedata
from collections import Counter
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Sequence, TypeVar

from .exceptions import ErrorCode
from .value_object import DomainEnum, validate_value_object

T = TypeVar("T")

ALL = "all"
"""Filter value meaning "do not filter on this criterion"."""


class SortDirection(DomainEnum):
    """Sort order."""

    ASC = "asc"
    DESC = "desc"

    @property
    def descending(self) -> bool:
        return self == SortDirection.DESC


@dataclass(frozen=True)
class SortOptions:
    """Sort field and direction passed to repositories."""

    field: str
    direction: SortDirection = SortDirection.ASC


@dataclass(frozen=True)
class PaginationOptions:
    """1-indexed page with a page size."""

    page: int = 1
    limit: int = 10

    def __post_init__(self) -> None:
        validate_value_object(
            self.page >= 1,
            "Page must be at least 1",
            field="page",
            code=ErrorCode.INVALID_RANGE,
        )
        validate_value_object(
            self.limit >= 1,
            "Limit must be at least 1",
            field="limit",
            code=ErrorCode.INVALID_RANGE,
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a query result."""

    items: tuple[T, ...]
    total: int
    page: int
    total_pages: int

    @classmethod
    def paginate(cls, items: Sequence[T], pagination: PaginationOptions) -> "Page[T]":
        """Cut one page out of an already filtered and sorted sequence."""
        total = len(items)
        window = items[pagination.offset:pagination.offset + pagination.limit]
        return cls(
            items=tuple(window),
            total=total,
            page=pagination.page,
            total_pages=math.ceil(total / pagination.limit),
        )

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


@dataclass(frozen=True)
class TagCount:
    """Tag with the number of items carrying it."""

    tag: str
    count: int


def is_ignored(criterion: Any) -> bool:
    """True when a filter criterion is absent or set to "all"."""
    return criterion is None or criterion == ALL


def collation_key(text: str) -> tuple[str, str]:
    """Locale-independent sort key approximating human collation.

    Accents and case are ignored on the first level; the raw string breaks
    ties so ordering stays deterministic.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), text


def normalize_query(query: str | None) -> str:
    """Lowercased, stripped search query ("" when absent)."""
    return (query or "").strip().lower()


def text_matches(query: str, *haystacks: str | None) -> bool:
    """Case-insensitive substring match of an already normalized query."""
    return any(query in haystack.lower() for haystack in haystacks if haystack)


def sort_items(
    items: Iterable[T],
    key: Callable[[T], Any],
    direction: SortDirection,
    tiebreak: Callable[[T], Any] | None = None,
) -> list[T]:
    """Stable sort, with an optional ascending secondary key.

    The secondary key is applied first so that the primary sort, being
    stable, keeps tied items in secondary order.
    """
    result = list(items)
    if tiebreak is not None:
        result.sort(key=tiebreak)
    result.sort(key=key, reverse=direction.descending)
    return result


def count_tags(tag_lists: Iterable[Iterable[str]], limit: int) -> list[TagCount]:
    """Tag frequencies, most common first, first-seen order on ties."""
    counter: Counter[str] = Counter()
    for tags in tag_lists:
        counter.update(tags)
    return [TagCount(tag=tag, count=count) for tag, count in counter.most_common(limit)]
