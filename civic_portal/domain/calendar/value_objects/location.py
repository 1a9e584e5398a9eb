"""Location - where an event takes place."""

from dataclasses import dataclass

from civic_portal.domain.shared import (
    ErrorCode,
    ValueObject,
    ensure_text,
    validate_value_object,
)

MAX_NAME_LENGTH = 100


@dataclass(frozen=True)
class Coordinates(ValueObject):
    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        validate_value_object(
            -90 <= self.latitude <= 90,
            "Latitude must be between -90 and 90 degrees",
            field="latitude",
            code=ErrorCode.INVALID_RANGE,
        )
        validate_value_object(
            -180 <= self.longitude <= 180,
            "Longitude must be between -180 and 180 degrees",
            field="longitude",
            code=ErrorCode.INVALID_RANGE,
        )


@dataclass(frozen=True)
class Location(ValueObject):
    """Venue of an event, physical or online.

    Physical venues need a street address; online ones use the placeholder
    city "Virtual" and country "Online".

    Example:
        >>> Location.physical(
        ...     name="City Hall", address="1 Main St", city="Taipei", country="Taiwan"
        ... ).full_address
        'City Hall, 1 Main St, Taipei, Taiwan'
    """

    name: str
    city: str
    country: str
    is_online: bool = False
    address: str | None = None
    coordinates: Coordinates | None = None

    def __post_init__(self) -> None:
        ensure_text(
            self.name, field="name", label="Location name", max_length=MAX_NAME_LENGTH
        )
        ensure_text(self.city, field="city", label="Location city")
        ensure_text(self.country, field="country", label="Location country")
        validate_value_object(
            self.is_online or bool(self.address and self.address.strip()),
            "Physical location must have an address",
            field="address",
            code=ErrorCode.EMPTY_FIELD,
        )

    @classmethod
    def online(cls, name: str = "Online") -> "Location":
        return cls(name=name, city="Virtual", country="Online", is_online=True)

    @classmethod
    def physical(
        cls,
        *,
        name: str,
        address: str,
        city: str,
        country: str,
        coordinates: Coordinates | None = None,
    ) -> "Location":
        return cls(
            name=name,
            address=address,
            city=city,
            country=country,
            coordinates=coordinates,
        )

    @property
    def is_physical(self) -> bool:
        return not self.is_online

    @property
    def full_address(self) -> str:
        """Human-readable address; just the name for online venues."""
        if self.is_online:
            return self.name
        parts = [self.name]
        if self.address:
            parts.append(self.address)
        parts.extend((self.city, self.country))
        return ", ".join(parts)

    def has_coordinates(self) -> bool:
        return self.coordinates is not None
