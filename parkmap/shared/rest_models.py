from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import List, Optional

import attr

from parkmap.shared.availability import ParkingStatus, classify
from parkmap.shared.errors import ValidationError
from parkmap.shared.util import (blank_to_none, ensure, ensure_list_of, enforce_type, to_datetime, to_decimal,
                                 validate_non_neg, validate_not_blank, validate_pos, validate_range)

DEFAULT_CURRENCY = 'лв'
# numeric(5, 2) column
MAX_PRICE_PER_HOUR = Decimal('999.99')
# numeric(10, 8) and numeric(11, 8) columns
COORDINATE_PLACES = '0.00000001'


class ParkingType(Enum):
    STREET = 'street'
    UNDERGROUND = 'underground'
    MALL = 'mall'
    PRIVATE = 'private'


class Feature(Enum):
    ACCESSIBLE = 'accessible'
    SECURE = 'secure'
    COVERED = 'covered'
    EV_CHARGING = 'ev_charging'


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def validate_within_capacity(instance, attribute, value: int) -> None:
    if value > instance.total_spots:
        raise ValidationError('availableSpots must not exceed totalSpots')


@attr.s(frozen=True)
class NewParkingLocation:
    """Everything a caller supplies when registering a parking location."""
    name: str = attr.ib(validator=[enforce_type, validate_not_blank])
    address: str = attr.ib(validator=[enforce_type, validate_not_blank])
    district: str = attr.ib(validator=[enforce_type, validate_not_blank])
    total_spots: int = attr.ib(validator=[enforce_type, validate_pos])
    available_spots: int = attr.ib(validator=[enforce_type, validate_non_neg, validate_within_capacity])
    price_per_hour: Decimal = attr.ib(converter=to_decimal('0.01'),
                                      validator=[validate_non_neg, validate_range(0, MAX_PRICE_PER_HOUR)])
    type: ParkingType = attr.ib(converter=ensure(ParkingType))
    hours: str = attr.ib(validator=[enforce_type, validate_not_blank])
    latitude: Optional[Decimal] = attr.ib(converter=to_decimal(COORDINATE_PLACES, allow_none=True),
                                          validator=validate_range(-90, 90), default=None)
    longitude: Optional[Decimal] = attr.ib(converter=to_decimal(COORDINATE_PLACES, allow_none=True),
                                           validator=validate_range(-180, 180), default=None)
    currency: str = attr.ib(validator=[enforce_type, validate_not_blank], default=DEFAULT_CURRENCY)
    features: List[Feature] = attr.ib(converter=ensure_list_of(Feature), factory=list)
    landmark: Optional[str] = attr.ib(converter=blank_to_none,
                                      validator=attr.validators.optional(attr.validators.instance_of(str)),
                                      default=None)


@attr.s(frozen=True)
class ParkingLocation(NewParkingLocation):
    """A stored parking location.

    The status is never passed in: it is derived from the spot counts every time a
    record is built, so copies made with attr.evolve() stay consistent too.
    """
    id: int = attr.ib(validator=[enforce_type, validate_non_neg], default=0)
    last_updated: datetime = attr.ib(converter=to_datetime, factory=utcnow)
    status: ParkingStatus = attr.ib(init=False, default=attr.Factory(
        lambda self: classify(self.available_spots, self.total_spots), takes_self=True))

    @classmethod
    def from_new(cls, new: NewParkingLocation, location_id: int, last_updated: datetime) -> 'ParkingLocation':
        return cls(id=location_id, last_updated=last_updated, **attr.asdict(new, recurse=False))


@attr.s
class AvailabilityMessage:
    available_spots: int = attr.ib(validator=[enforce_type, validate_non_neg])


@attr.s
class ErrorMessage:
    error: str = attr.ib(validator=enforce_type)
