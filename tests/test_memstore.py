import asyncio

import attr
import pytest

from parkmap.shared.availability import ParkingStatus, classify
from parkmap.shared.errors import NotFoundError, ValidationError
from parkmap.shared.rest_models import Feature, NewParkingLocation


@pytest.mark.asyncio
async def test_empty_store(store):
    assert await store.get_all() == []


@pytest.mark.asyncio
async def test_create_assigns_ids(store, new_location):
    first = await store.create(new_location)
    second = await store.create(new_location)
    assert first.id == 1
    assert second.id == 2
    assert len(await store.get_all()) == 2


@pytest.mark.asyncio
async def test_create_then_get_by_id(store, new_location):
    created = await store.create(new_location)
    loc = await store.get_by_id(created.id)
    assert loc == created
    assert attr.asdict(new_location) == {k: v for k, v in attr.asdict(loc).items()
                                         if k not in ('id', 'last_updated', 'status')}
    assert loc.status == classify(loc.available_spots, loc.total_spots)


@pytest.mark.asyncio
async def test_create_applies_defaults(store):
    created = await store.create(NewParkingLocation(name='Lot', address='Str 1', district='Lozenets',
                                                    total_spots=10, available_spots=10, price_per_hour='1.00',
                                                    type='private', hours='24/7'))
    assert created.currency == 'лв'
    assert created.features == []
    assert created.landmark is None
    assert created.status == ParkingStatus.AVAILABLE


@pytest.mark.asyncio
async def test_get_unknown_id(store):
    with pytest.raises(NotFoundError):
        await store.get_by_id(1234)


@pytest.mark.asyncio
async def test_get_by_district_case_insensitive(seeded_store):
    locations = await seeded_store.get_by_district('center')
    assert locations
    assert all(loc.district == 'Sofia Center' for loc in locations)


@pytest.mark.asyncio
async def test_get_by_district_no_match(seeded_store):
    assert await seeded_store.get_by_district('Boyana') == []


@pytest.mark.asyncio
async def test_search_by_name(seeded_store):
    locations = await seeded_store.search('NDK')
    names = {loc.name for loc in locations}
    assert 'NDK Underground Parking' in names


@pytest.mark.asyncio
async def test_search_by_landmark(seeded_store):
    locations = await seeded_store.search('metro station')
    assert [loc.name for loc in locations] == ['Mladost Metro Parking']


@pytest.mark.asyncio
async def test_search_skips_missing_landmark(seeded_store):
    locations = await seeded_store.search('studentski')
    assert [loc.landmark for loc in locations] == [None]


@pytest.mark.asyncio
async def test_search_no_match(seeded_store):
    assert await seeded_store.search('zzz-no-match') == []


@pytest.mark.asyncio
@pytest.mark.parametrize('text', ['', '   '])
async def test_search_blank(seeded_store, text):
    with pytest.raises(ValidationError):
        await seeded_store.search(text)


@pytest.mark.asyncio
async def test_update_availability(store, new_location):
    created = await store.create(new_location)
    updated = await store.update_availability(created.id, 0)
    assert updated.available_spots == 0
    assert updated.status == ParkingStatus.FULL
    assert updated.last_updated >= created.last_updated
    assert await store.get_by_id(created.id) == updated


@pytest.mark.asyncio
async def test_update_availability_twice(store, new_location):
    created = await store.create(new_location)
    first = await store.update_availability(created.id, 100)
    second = await store.update_availability(created.id, 100)
    assert (first.available_spots, first.status) == (second.available_spots, second.status)
    assert second.status == ParkingStatus.AVAILABLE


@pytest.mark.asyncio
async def test_update_availability_unknown_id(store):
    with pytest.raises(NotFoundError):
        await store.update_availability(1234, 5)


@pytest.mark.asyncio
async def test_update_availability_negative(store, new_location):
    created = await store.create(new_location)
    with pytest.raises(ValidationError):
        await store.update_availability(created.id, -1)


@pytest.mark.asyncio
async def test_update_availability_above_total(store, new_location):
    created = await store.create(new_location)
    with pytest.raises(ValidationError):
        await store.update_availability(created.id, created.total_spots + 1)
    assert (await store.get_by_id(created.id)).available_spots == created.available_spots


@pytest.mark.asyncio
async def test_update_availability_not_an_int(store, new_location):
    created = await store.create(new_location)
    with pytest.raises(ValidationError):
        await store.update_availability(created.id, '5')


@pytest.mark.asyncio
async def test_concurrent_updates_keep_status_consistent(store, new_location):
    created = await store.create(new_location)
    await asyncio.gather(*(store.update_availability(created.id, n) for n in (0, 10, 75, 150, 3)))
    loc = await store.get_by_id(created.id)
    assert loc.status == classify(loc.available_spots, loc.total_spots)


@pytest.mark.asyncio
async def test_features_survive_create(store, new_location):
    created = await store.create(new_location)
    assert created.features == [Feature.ACCESSIBLE, Feature.SECURE, Feature.EV_CHARGING]


@pytest.mark.asyncio
async def test_create_round_trip_with_fine_coordinates(store, new_location):
    new = attr.evolve(new_location, latitude='42.123456789', landmark='')
    created = await store.create(new)
    loc = await store.get_by_id(created.id)
    assert loc.latitude == new.latitude
    assert str(loc.latitude) == '42.12345679'
    assert loc.landmark is None
