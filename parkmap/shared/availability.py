from enum import Enum

# Below this share of total capacity a location counts as nearly full
LIMITED_RATIO = 0.2


class ParkingStatus(Enum):
    AVAILABLE = 'available'
    LIMITED = 'limited'
    FULL = 'full'


def classify(available: int, total: int) -> ParkingStatus:
    """Derive the availability tier of a location from its spot counts.

    Exactly LIMITED_RATIO of the total is still AVAILABLE, the comparison is strict.
    """
    if available == 0:
        return ParkingStatus.FULL
    if available < total * LIMITED_RATIO:
        return ParkingStatus.LIMITED
    return ParkingStatus.AVAILABLE
