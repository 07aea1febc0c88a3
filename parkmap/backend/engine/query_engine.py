from typing import Iterable, List

import attr

from parkmap.backend.db.store import LocationStore
from parkmap.shared.availability import ParkingStatus
from parkmap.shared.rest_models import ParkingLocation, ParkingType
from parkmap.shared.util import enforce_type


@attr.s(frozen=True)
class SearchFilters:
    available_only: bool = attr.ib(validator=enforce_type, default=False)
    free_only: bool = attr.ib(validator=enforce_type, default=False)
    mall_only: bool = attr.ib(validator=enforce_type, default=False)

    def accepts(self, location: ParkingLocation) -> bool:
        if self.available_only and location.status is not ParkingStatus.AVAILABLE:
            return False
        if self.free_only and location.price_per_hour != 0:
            return False
        if self.mall_only and location.type is not ParkingType.MALL:
            return False
        return True


def visible_locations(locations: Iterable[ParkingLocation], filters: SearchFilters) -> List[ParkingLocation]:
    return [loc for loc in locations if filters.accepts(loc)]


async def query_locations(store: LocationStore, text: str = '',
                          filters: SearchFilters = SearchFilters()) -> List[ParkingLocation]:
    """The locations to show for a search box value and a set of filter toggles.

    A blank search means every location. Never modifies the store.
    """
    if text and text.strip():
        candidates = await store.search(text)
    else:
        candidates = await store.get_all()
    return visible_locations(candidates, filters)
