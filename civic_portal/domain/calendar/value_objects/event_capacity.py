"""Event Capacity - seats and registrations."""

from dataclasses import dataclass

from civic_portal.domain.shared import (
    ErrorCode,
    ValueObject,
    ensure_non_negative,
    validate_value_object,
)


@dataclass(frozen=True)
class EventCapacity(ValueObject):
    """Registration counter bounded by a maximum.

    Invariant: 0 <= current_registered <= max_capacity.

    Example:
        >>> EventCapacity(100, 95).is_nearly_full()
        True
        >>> EventCapacity(100, 100).is_full()
        True
    """

    max_capacity: int
    current_registered: int = 0

    def __post_init__(self) -> None:
        ensure_non_negative(self.max_capacity, field="max_capacity", label="Max capacity")
        ensure_non_negative(
            self.current_registered,
            field="current_registered",
            label="Registered count",
        )
        validate_value_object(
            self.current_registered <= self.max_capacity,
            "Registered count cannot exceed max capacity",
            field="current_registered",
            code=ErrorCode.INVALID_RANGE,
        )

    @property
    def available_spots(self) -> int:
        return self.max_capacity - self.current_registered

    @property
    def occupancy_rate(self) -> float:
        """Share of seats taken, 0.0..1.0. A zero-seat event counts as full."""
        if self.max_capacity == 0:
            return 1.0
        return self.current_registered / self.max_capacity

    def is_full(self) -> bool:
        return self.current_registered >= self.max_capacity

    def is_nearly_full(self, threshold: float = 0.9) -> bool:
        return self.occupancy_rate >= threshold

    def with_registration(self, count: int = 1) -> "EventCapacity":
        """Copy with count more registrations.

        Raises:
            ValidationError: If the result would exceed max_capacity.
        """
        return EventCapacity(self.max_capacity, self.current_registered + count)
