import logging
from contextlib import asynccontextmanager
from typing import List

import asyncpg
import attr
from asyncpg import Record

import parkmap.backend.db.sql_constants as c
from parkmap.backend.db.store import LocationStore
from parkmap.shared.errors import NotFoundError, StorageFailure
from parkmap.shared.rest_models import NewParkingLocation, ParkingLocation, utcnow

logger = logging.getLogger('backend')

# ParkingLocations.id is a serial (int4) column
MAX_LOCATION_ID = 2 ** 31 - 1


def _like_pattern(text: str) -> str:
    escaped = text.replace('\\', '\\\\').replace('%', '\\%').replace('_', '\\_')
    return '%{}%'.format(escaped)


def _check_location_id(location_id: int) -> None:
    if not 0 < location_id <= MAX_LOCATION_ID:
        raise NotFoundError('Parking location {} not found'.format(location_id))


def _to_location(record: Record) -> ParkingLocation:
    row = dict(record)
    # status is re-derived from the counts when the record is built
    row.pop('status')
    return ParkingLocation(**row)


class DbAccess(LocationStore):
    """PostgreSQL backed store."""

    @classmethod
    async def connect(cls, destination: str, init_tables: bool = False, reset_tables: bool = False) -> 'DbAccess':
        self = cls()
        try:
            self.pool: asyncpg.pool.Pool = await asyncpg.create_pool(dsn=destination)
        except (asyncpg.PostgresError, OSError) as e:
            raise StorageFailure('Could not connect to the database: {}'.format(e)) from e
        if reset_tables:
            await self._drop_tables()
        if init_tables or reset_tables:
            await self._create_tables()
        return self

    @asynccontextmanager
    async def _acquire(self):
        try:
            async with self.pool.acquire() as conn:
                yield conn
        except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError) as e:
            logger.error("Database error : '{}'".format(e))
            raise StorageFailure(str(e)) from e

    async def _drop_tables(self):
        logger.info("Dropping database tables.")
        async with self._acquire() as conn:
            await conn.execute(c.PARKINGLOCATIONS_DROP_TABLE)
        logger.info("Database tables dropped.")

    async def _create_tables(self):
        logger.info("Creating database tables.")
        async with self._acquire() as conn:
            async with conn.transaction():
                await conn.execute(c.PARKINGLOCATIONS_CREATE_TABLE)
        logger.info("Database tables created.")

    async def close(self) -> None:
        await self.pool.close()

    async def get_all(self) -> List[ParkingLocation]:
        async with self._acquire() as conn:
            records = await conn.fetch(c.PARKINGLOCATIONS_SELECT_ALL)
        return [_to_location(r) for r in records]

    async def get_by_id(self, location_id: int) -> ParkingLocation:
        _check_location_id(location_id)
        async with self._acquire() as conn:
            record = await conn.fetchrow(c.PARKINGLOCATIONS_SELECT_BY_ID, location_id)
        if record is None:
            raise NotFoundError('Parking location {} not found'.format(location_id))
        return _to_location(record)

    async def get_by_district(self, district: str) -> List[ParkingLocation]:
        async with self._acquire() as conn:
            records = await conn.fetch(c.PARKINGLOCATIONS_SELECT_BY_DISTRICT, _like_pattern(district))
        return [_to_location(r) for r in records]

    async def _search(self, text: str) -> List[ParkingLocation]:
        async with self._acquire() as conn:
            records = await conn.fetch(c.PARKINGLOCATIONS_SEARCH, _like_pattern(text))
        return [_to_location(r) for r in records]

    async def _update_availability(self, location_id: int, available_spots: int) -> ParkingLocation:
        _check_location_id(location_id)
        async with self._acquire() as conn:
            async with conn.transaction():
                record = await conn.fetchrow(c.PARKINGLOCATIONS_SELECT_BY_ID_FOR_UPDATE, location_id)
                if record is None:
                    raise NotFoundError('Parking location {} not found'.format(location_id))
                updated = attr.evolve(_to_location(record), available_spots=available_spots,
                                      last_updated=utcnow())
                record = await conn.fetchrow(c.PARKINGLOCATIONS_UPDATE_AVAILABILITY, location_id,
                                             updated.available_spots, updated.status.value, updated.last_updated)
        logger.debug("Availability of parking location {} set to {} ({})"
                     .format(location_id, available_spots, updated.status.value))
        return _to_location(record)

    async def create(self, location: NewParkingLocation) -> ParkingLocation:
        # id 0 is a placeholder, the database assigns the real one
        p = ParkingLocation.from_new(location, 0, utcnow())
        async with self._acquire() as conn:
            record = await conn.fetchrow(c.PARKINGLOCATIONS_INSERT,
                                         p.name, p.address, p.district, p.latitude, p.longitude,
                                         p.total_spots, p.available_spots, p.price_per_hour, p.currency,
                                         p.type.value, p.hours, [f.value for f in p.features],
                                         p.status.value, p.landmark, p.last_updated)
        created = _to_location(record)
        logger.info("Created parking location {} '{}'".format(created.id, created.name))
        return created
