from abc import ABC, abstractmethod
from typing import List

from parkmap.shared.errors import ValidationError
from parkmap.shared.rest_models import NewParkingLocation, ParkingLocation


class LocationStore(ABC):
    """Keeps the parking locations; the only place they are changed.

    Lookups raise NotFoundError for an unknown id, bad input raises ValidationError and
    a broken backend raises StorageFailure. Nothing is retried here.
    """

    @abstractmethod
    async def get_all(self) -> List[ParkingLocation]:
        ...

    @abstractmethod
    async def get_by_id(self, location_id: int) -> ParkingLocation:
        ...

    @abstractmethod
    async def get_by_district(self, district: str) -> List[ParkingLocation]:
        """Case-insensitive substring match on the district name."""

    async def search(self, text: str) -> List[ParkingLocation]:
        """Locations whose name, address, district or landmark contains `text`, ignoring case."""
        if not isinstance(text, str) or not text.strip():
            raise ValidationError('Search query is required')
        return await self._search(text)

    async def update_availability(self, location_id: int, available_spots: int) -> ParkingLocation:
        """Set the free spot count, re-derive the status and stamp the update time."""
        if not isinstance(available_spots, int) or isinstance(available_spots, bool):
            raise ValidationError('availableSpots must be an integer')
        if available_spots < 0:
            raise ValidationError('availableSpots must be non-negative')
        return await self._update_availability(location_id, available_spots)

    @abstractmethod
    async def create(self, location: NewParkingLocation) -> ParkingLocation:
        ...

    async def close(self) -> None:
        pass

    @abstractmethod
    async def _search(self, text: str) -> List[ParkingLocation]:
        ...

    @abstractmethod
    async def _update_availability(self, location_id: int, available_spots: int) -> ParkingLocation:
        ...
