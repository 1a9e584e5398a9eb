"""Base domain exceptions.

Domain exceptions represent violated business rules. They belong to the
domain layer and do not depend on infrastructure.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Machine-readable reason attached to domain failures."""

    EMPTY_FIELD = "EMPTY_FIELD"
    FIELD_TOO_LONG = "FIELD_TOO_LONG"
    INVALID_RANGE = "INVALID_RANGE"
    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_VALUE = "INVALID_VALUE"
    NEGATIVE_VALUE = "NEGATIVE_VALUE"
    INVALID_STATE_TRANSITION = "INVALID_STATE_TRANSITION"


class DomainException(Exception):
    """Base exception for all domain errors.

    Domain exceptions are business rule violations, not technical errors.

    Example:
        >>> raise DomainException("Cannot publish article", article_id="...")
    """

    def __init__(self, message: str, **context: Any) -> None:
        """Initialize domain exception.

        Args:
            message: Human-readable error message.
            **context: Additional context (event_id, field, etc).
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context.

        Returns:
            Error message with context if available.
        """
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ValidationError(DomainException, ValueError):
    """Raised when a value object or entity is built from invalid data.

    Subclasses ValueError so callers that only know about the builtin
    still catch it.

    Example:
        >>> raise ValidationError(
        ...     "Project title cannot be empty",
        ...     field="title",
        ...     code=ErrorCode.EMPTY_FIELD,
        ... )
    """

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        code: ErrorCode = ErrorCode.INVALID_VALUE,
        **context: Any,
    ) -> None:
        super().__init__(message, **context)
        self.field = field
        self.code = code

    def __str__(self) -> str:
        return self.message


class InvalidStateTransition(DomainException):
    """Exception raised for operations the current state does not allow.

    Example:
        >>> if not event.can_add_participant():
        ...     raise InvalidStateTransition(
        ...         "Cannot add participant: event is full or registration is closed",
        ...         event_id=str(event.id),
        ...     )
    """

    code = ErrorCode.INVALID_STATE_TRANSITION
