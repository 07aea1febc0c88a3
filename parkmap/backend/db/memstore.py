import asyncio
import itertools
import logging
from typing import Dict, List

import attr

from parkmap.backend.db.store import LocationStore
from parkmap.shared.errors import NotFoundError
from parkmap.shared.rest_models import NewParkingLocation, ParkingLocation, utcnow

logger = logging.getLogger('backend')


class MemoryStore(LocationStore):
    """In-process store keyed by id.

    Records are immutable and replaced whole under the write lock, so a reader sees either
    the old or the new record and never a count without its matching status.
    """

    def __init__(self) -> None:
        self.locations: Dict[int, ParkingLocation] = {}
        self._ids = itertools.count(1)
        self._write_lock = asyncio.Lock()

    async def get_all(self) -> List[ParkingLocation]:
        return list(self.locations.values())

    async def get_by_id(self, location_id: int) -> ParkingLocation:
        try:
            return self.locations[location_id]
        except KeyError:
            raise NotFoundError('Parking location {} not found'.format(location_id))

    async def get_by_district(self, district: str) -> List[ParkingLocation]:
        needle = district.lower()
        return [loc for loc in self.locations.values() if needle in loc.district.lower()]

    async def _search(self, text: str) -> List[ParkingLocation]:
        needle = text.lower()

        def matches(loc: ParkingLocation) -> bool:
            fields = (loc.name, loc.address, loc.district, loc.landmark)
            return any(needle in field.lower() for field in fields if field is not None)

        return [loc for loc in self.locations.values() if matches(loc)]

    async def _update_availability(self, location_id: int, available_spots: int) -> ParkingLocation:
        async with self._write_lock:
            location = await self.get_by_id(location_id)
            updated = attr.evolve(location, available_spots=available_spots, last_updated=utcnow())
            self.locations[location_id] = updated
        logger.debug("Availability of parking location {} set to {} ({})"
                     .format(location_id, available_spots, updated.status.value))
        return updated

    async def create(self, location: NewParkingLocation) -> ParkingLocation:
        async with self._write_lock:
            created = ParkingLocation.from_new(location, next(self._ids), utcnow())
            self.locations[created.id] = created
        logger.info("Created parking location {} '{}'".format(created.id, created.name))
        return created
