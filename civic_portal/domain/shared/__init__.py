"""Shared Kernel - base classes for the whole domain layer.

The shared kernel holds the DDD building blocks:
- Entity: Immutable object with identity
- ValueObject: Immutable object compared by value
- AggregateRoot: Entry point of an aggregate, records domain events
- DomainEvent: Something that happened in the domain
- DomainException: Violated business rule
"""

from .aggregate_root import AggregateRoot
from .clock import ensure_aware, resolve_now, utc_now
from .domain_event import DomainEvent
from .entity import UNSET, Entity, Unset
from .exceptions import (
    DomainException,
    ErrorCode,
    InvalidStateTransition,
    ValidationError,
)
from .identifiers import UUID_ANY_PATTERN, UUID_V4_PATTERN, Identifier
from .querying import (
    ALL,
    Page,
    PaginationOptions,
    SortDirection,
    SortOptions,
    TagCount,
    collation_key,
    count_tags,
    is_ignored,
    normalize_query,
    sort_items,
    text_matches,
)
from .slug import Slug
from .url import Url
from .value_object import (
    DomainEnum,
    ValueObject,
    ensure_max_length,
    ensure_non_negative,
    ensure_text,
    strip_text_fields,
    validate_value_object,
)

__all__ = [
    # Base classes
    "Entity",
    "ValueObject",
    "DomainEnum",
    "AggregateRoot",
    "DomainEvent",
    "Identifier",
    "UNSET",
    "Unset",
    # Shared value objects
    "Slug",
    "Url",
    # Querying
    "ALL",
    "Page",
    "PaginationOptions",
    "SortDirection",
    "SortOptions",
    "TagCount",
    "collation_key",
    "count_tags",
    "is_ignored",
    "normalize_query",
    "sort_items",
    "text_matches",
    # Utilities
    "utc_now",
    "ensure_aware",
    "resolve_now",
    "validate_value_object",
    "ensure_text",
    "ensure_max_length",
    "ensure_non_negative",
    "strip_text_fields",
    "UUID_V4_PATTERN",
    "UUID_ANY_PATTERN",
    # Exceptions
    "DomainException",
    "ValidationError",
    "ErrorCode",
    "InvalidStateTransition",
]
