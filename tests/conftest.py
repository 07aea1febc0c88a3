import pytest
import pytest_asyncio
from tornado.httpclient import AsyncHTTPClient
from tornado.httpserver import HTTPServer
from tornado.testing import bind_unused_port

from parkmap.backend.__main__ import make_app
from parkmap.backend.db.memstore import MemoryStore
from parkmap.backend.db.seed import seed_store
from parkmap.shared.clients import ParkingLocationRest
from parkmap.shared.rest_models import NewParkingLocation


@pytest.fixture
def new_location():
    return NewParkingLocation(name='NDK Underground Parking', address='Bulgaria Blvd 1, Sofia Center',
                              district='Sofia Center', total_spots=150, available_spots=23,
                              price_per_hour='2.00', type='underground', hours='6:00-24:00',
                              latitude='42.6886', longitude='23.3188',
                              features=['accessible', 'secure', 'ev_charging'], landmark='NDK')


@pytest.fixture
def store():
    return MemoryStore()


@pytest_asyncio.fixture
async def seeded_store(store):
    await seed_store(store)
    return store


@pytest_asyncio.fixture
async def base_url(store):
    sock, port = bind_unused_port()
    server = HTTPServer(make_app(store))
    server.add_sockets([sock])
    yield 'http://127.0.0.1:{}'.format(port)
    server.stop()
    await server.close_all_connections()


@pytest_asyncio.fixture
async def http_client():
    client = AsyncHTTPClient(force_instance=True)
    yield client
    client.close()


@pytest.fixture
def plr(base_url, http_client):
    return ParkingLocationRest(base_url, http_client)
