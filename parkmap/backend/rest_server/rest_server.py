import json
import logging
import re

from tornado import web

from parkmap.backend.db.store import LocationStore
from parkmap.backend.engine.query_engine import SearchFilters, query_locations
from parkmap.shared.errors import NotFoundError, ValidationError
from parkmap.shared.rest_models import AvailabilityMessage, ErrorMessage, NewParkingLocation
from parkmap.shared.util import load_model, serialize_model, serialize_models

logger = logging.getLogger('backend')

JSON_CONTENT_TYPE = 'application/json; charset=UTF-8'
LOCATION_ID_RE = re.compile(r'-?[0-9]+')
TRUE_FLAGS = ('true', '1', 'yes')
FALSE_FLAGS = ('false', '0', 'no', '')


class ParkingLocationHandlerBase(web.RequestHandler):
    def initialize(self, store: LocationStore) -> None:
        self.store = store

    def set_default_headers(self) -> None:
        self.set_header('Content-Type', JSON_CONTENT_TYPE)

    def write_error(self, status_code, **kwargs):
        if status_code >= 500:
            message = 'internal server error'
        else:
            message = self._reason
            if 'exc_info' in kwargs:
                err = kwargs['exc_info'][1]
                if isinstance(err, web.HTTPError) and err.log_message:
                    message = err.log_message
        self.finish(serialize_model(ErrorMessage(message)))

    def json_body(self) -> object:
        if not self.request.headers.get('Content-Type', '').startswith('application/json'):
            raise web.HTTPError(400, 'Invalid content type')
        try:
            return json.loads(self.request.body)
        except ValueError:
            raise web.HTTPError(400, 'Invalid JSON body')

    @staticmethod
    def load_from_json_data(cls: type, json_data: object, err_msg: str, ignore=()) -> object:
        try:
            return load_model(cls, json_data, err_msg, ignore)
        # Display validation errors
        except ValidationError as err:
            raise web.HTTPError(400, str(err))

    @staticmethod
    def parse_location_id(location_id: str) -> int:
        # int() also takes underscores, padding and non-ASCII digits
        if not LOCATION_ID_RE.fullmatch(location_id):
            raise web.HTTPError(400, 'Invalid parking location ID')
        return int(location_id)

    def get_flag(self, name: str) -> bool:
        value = self.get_query_argument(name, '').lower()
        if value in TRUE_FLAGS:
            return True
        if value in FALSE_FLAGS:
            return False
        raise web.HTTPError(400, 'Invalid value for {}'.format(name))


class ParkingLocationsHandler(ParkingLocationHandlerBase):
    async def get(self):
        filters = SearchFilters(available_only=self.get_flag('availableOnly'),
                                free_only=self.get_flag('freeOnly'),
                                mall_only=self.get_flag('mallOnly'))
        locations = await query_locations(self.store, self.get_query_argument('q', ''), filters)
        self.write(serialize_models(locations))

    async def post(self):
        # id, timestamp and status are always assigned by the store
        new = self.load_from_json_data(NewParkingLocation, self.json_body(), 'Invalid parking location data',
                                       ignore=('id', 'last_updated', 'status'))
        location = await self.store.create(new)
        self.set_status(201)
        self.write(serialize_model(location))


class IndividualLocationHandler(ParkingLocationHandlerBase):
    async def get(self, location_id: str):
        try:
            location = await self.store.get_by_id(self.parse_location_id(location_id))
        except NotFoundError:
            raise web.HTTPError(404, 'Parking location not found')
        self.write(serialize_model(location))


class LocationSearchHandler(ParkingLocationHandlerBase):
    async def get(self, query: str):
        try:
            locations = await self.store.search(query)
        except ValidationError as err:
            raise web.HTTPError(400, str(err))
        self.write(serialize_models(locations))


class LocationDistrictHandler(ParkingLocationHandlerBase):
    async def get(self, district: str):
        locations = await self.store.get_by_district(district)
        self.write(serialize_models(locations))


class LocationAvailabilityHandler(ParkingLocationHandlerBase):
    async def patch(self, location_id: str):
        lid = self.parse_location_id(location_id)
        msg = self.load_from_json_data(AvailabilityMessage, self.json_body(), 'Invalid availability data')
        try:
            location = await self.store.update_availability(lid, msg.available_spots)
        except NotFoundError:
            raise web.HTTPError(404, 'Parking location not found')
        except ValidationError as err:
            raise web.HTTPError(400, str(err))
        logger.info("Parking location {} now has {} free spots".format(lid, location.available_spots))
        self.write(serialize_model(location))
