"""UseCaseResult - success/failure outcome of a command handler."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class UseCaseResult(Generic[T]):
    """Outcome of a use case that can fail for expected reasons.

    Expected failures (unknown id, duplicate email, invalid input) come back
    as an error code instead of an exception. Unexpected errors still raise.

    Example:
        >>> result = await handler.handle(CreateUserCommand(email="a@b.co", name="Ada"))
        >>> if result.success:
        ...     print(result.value.id)
        ... else:
        ...     print(result.error)  # "EMAIL_ALREADY_EXISTS"
    """

    success: bool
    value: T | None = None
    error: str | None = None

    @classmethod
    def ok(cls, value: T) -> "UseCaseResult[T]":
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: str) -> "UseCaseResult[T]":
        """Failed result; ``error`` is a str enum member or a plain code."""
        return cls(success=False, error=error)
