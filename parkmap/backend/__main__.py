import asyncio
import logging

import testing.postgresql
from tornado import web
from tornado.log import enable_pretty_logging

from parkmap.backend.config import Config, parse_args
from parkmap.backend.db.dbaccess import DbAccess
from parkmap.backend.db.memstore import MemoryStore
from parkmap.backend.db.seed import seed_store
from parkmap.backend.db.store import LocationStore
from parkmap.backend.rest_server.rest_server import (IndividualLocationHandler, LocationAvailabilityHandler,
                                                     LocationDistrictHandler, LocationSearchHandler,
                                                     ParkingLocationsHandler)

logger = logging.getLogger('backend')


def make_app(store: LocationStore) -> web.Application:
    return web.Application([(r'/api/parking-locations', ParkingLocationsHandler, {'store': store}),
                            (r'/api/parking-locations/search/(.*)', LocationSearchHandler, {'store': store}),
                            (r'/api/parking-locations/district/(.*)', LocationDistrictHandler, {'store': store}),
                            (r'/api/parking-locations/([^/]+)', IndividualLocationHandler, {'store': store}),
                            (r'/api/parking-locations/([^/]+)/availability', LocationAvailabilityHandler,
                             {'store': store})])


async def create_store(config: Config, db_url: str) -> LocationStore:
    if config.store == 'postgres':
        store: LocationStore = await DbAccess.connect(db_url, init_tables=True, reset_tables=config.reset_tables)
    else:
        store = MemoryStore()
    if config.seed:
        await seed_store(store)
    return store


async def serve(config: Config, db_url: str) -> None:
    store = await create_store(config, db_url)
    make_app(store).listen(config.port)
    logger.info("Serving parking locations from the {} store on port {}".format(config.store, config.port))
    try:
        await asyncio.Event().wait()
    finally:
        await store.close()


def main(config: Config) -> None:
    enable_pretty_logging()
    logging.getLogger().setLevel(config.log_level)
    if config.temp_db:
        with testing.postgresql.Postgresql() as postgresql:
            asyncio.run(serve(config, postgresql.url()))
    else:
        asyncio.run(serve(config, config.db_url))


if __name__ == "__main__":
    main(parse_args())
