import json
from datetime import datetime, timezone

import pytest

from parkmap.shared.errors import ValidationError
from parkmap.shared.rest_models import AvailabilityMessage, ParkingLocation
from parkmap.shared.util import load_model, model_to_dict, serialize_model, to_camel, to_snake


def test_serialize_model():
    json_str = '{"availableSpots": 10}'
    sam = AvailabilityMessage(10)
    assert serialize_model(sam) == json_str


def test_serialize_model_raises_error():
    with pytest.raises(ValueError):
        serialize_model(None)


def test_name_conversion():
    assert to_camel('price_per_hour') == 'pricePerHour'
    assert to_camel('id') == 'id'
    assert to_snake('pricePerHour') == 'price_per_hour'
    assert to_snake('lastUpdated') == 'last_updated'


def test_location_wire_format():
    loc = ParkingLocation(name='NDK', address='Bulgaria Blvd 1', district='Sofia Center', total_spots=150,
                          available_spots=23, price_per_hour='2.00', type='underground', hours='6:00-24:00',
                          latitude='42.6886', features=['ev_charging'], id=1,
                          last_updated=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc))
    data = json.loads(serialize_model(loc))
    assert data['pricePerHour'] == '2.00'
    assert data['latitude'] == '42.68860000'
    assert data['longitude'] is None
    assert data['type'] == 'underground'
    assert data['features'] == ['ev_charging']
    assert data['status'] == 'limited'
    assert data['lastUpdated'] == '2024-05-01T12:00:00+00:00'
    assert data['totalSpots'] == 150


def test_load_model_round_trip():
    loc = ParkingLocation(name='Mall of Sofia Parking', address='Aleksandar Stamboliyski Blvd 101',
                          district='Izgrev', total_spots=800, available_spots=156, price_per_hour='0.00',
                          type='mall', hours='10:00-22:00', features=['accessible', 'covered'],
                          landmark='Mall of Sofia', id=8)
    assert load_model(ParkingLocation, model_to_dict(loc), 'bad') == loc


def test_load_model_ignores_listed_keys():
    msg = load_model(AvailabilityMessage, {'availableSpots': 3, 'id': 9}, 'bad', ignore=('id',))
    assert msg.available_spots == 3


def test_load_model_unknown_key():
    with pytest.raises(ValidationError, match='bad availability'):
        load_model(AvailabilityMessage, {'availableSpots': 3, 'spots': 4}, 'bad availability')


def test_load_model_wrong_type():
    with pytest.raises(ValidationError, match='bad availability'):
        load_model(AvailabilityMessage, {'availableSpots': '3'}, 'bad availability')


def test_load_model_keeps_validation_message():
    with pytest.raises(ValidationError, match='availableSpots must be non-negative'):
        load_model(AvailabilityMessage, {'availableSpots': -3}, 'bad availability')


def test_load_model_not_a_mapping():
    with pytest.raises(ValidationError):
        load_model(AvailabilityMessage, [3], 'bad availability')
