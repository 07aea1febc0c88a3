import json
import logging
from typing import List
from urllib.parse import quote, urlencode

from tornado import httpclient

import parkmap.shared.rest_models as rest_models
from parkmap.shared.util import load_model, serialize_model

HEADERS = {'Content-Type': 'application/json; charset=UTF-8'}

logger = logging.getLogger('shared client')


def _load_location(data: dict) -> rest_models.ParkingLocation:
    return load_model(rest_models.ParkingLocation, data, 'Invalid parking location in response')


class ParkingLocationRest(object):
    """
    An async client for the parking location REST API.

    Error responses are raised as tornado.httpclient.HTTPClientError.
    """

    def __init__(self, base_url, http_client):
        self.client = http_client
        self.rest_url = f"{base_url}/api/parking-locations"

    async def _fetch_json(self, url: str, **kwargs):
        response = await self.client.fetch(httpclient.HTTPRequest(url, **kwargs))
        return json.loads(response.body)

    async def _fetch_locations(self, url: str) -> List[rest_models.ParkingLocation]:
        return [_load_location(item) for item in await self._fetch_json(url)]

    async def get_all(self, query: str = '', available_only: bool = False, free_only: bool = False,
                      mall_only: bool = False) -> List[rest_models.ParkingLocation]:
        args = {'q': query, 'availableOnly': available_only, 'freeOnly': free_only, 'mallOnly': mall_only}
        params = urlencode({k: str(v).lower() if isinstance(v, bool) else v for k, v in args.items() if v})
        return await self._fetch_locations(f"{self.rest_url}?{params}" if params else self.rest_url)

    async def get(self, location_id: int) -> rest_models.ParkingLocation:
        return _load_location(await self._fetch_json(f"{self.rest_url}/{location_id}"))

    async def search(self, query: str) -> List[rest_models.ParkingLocation]:
        return await self._fetch_locations(f"{self.rest_url}/search/{quote(query, safe='')}")

    async def by_district(self, district: str) -> List[rest_models.ParkingLocation]:
        return await self._fetch_locations(f"{self.rest_url}/district/{quote(district, safe='')}")

    async def update_availability(self, location_id: int, available_spots: int) -> rest_models.ParkingLocation:
        msgbody = serialize_model(rest_models.AvailabilityMessage(available_spots))
        data = await self._fetch_json(f"{self.rest_url}/{location_id}/availability", body=msgbody,
                                      headers=HEADERS, method='PATCH')
        logger.debug("Updated availability of parking location {}".format(location_id))
        return _load_location(data)

    async def create(self, location: rest_models.NewParkingLocation) -> rest_models.ParkingLocation:
        data = await self._fetch_json(self.rest_url, body=serialize_model(location), headers=HEADERS, method='POST')
        return _load_location(data)
