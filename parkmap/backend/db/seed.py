import logging
from typing import List

from parkmap.backend.db.store import LocationStore
from parkmap.shared.rest_models import NewParkingLocation, ParkingLocation

logger = logging.getLogger('backend')

SOFIA_PARKING = [
    # NDK area
    dict(name='NDK Underground Parking', address='Bulgaria Blvd 1, Sofia Center', district='Sofia Center',
         latitude='42.6886', longitude='23.3188', total_spots=150, available_spots=23, price_per_hour='2.00',
         type='underground', hours='6:00-24:00', features=['accessible', 'secure', 'ev_charging'], landmark='NDK'),
    dict(name='NDK Street Parking', address='Bulgaria Blvd, Sofia Center', district='Sofia Center',
         latitude='42.6890', longitude='23.3195', total_spots=30, available_spots=8, price_per_hour='2.50',
         type='street', hours='8:00-20:00', features=['accessible'], landmark='NDK'),

    # Vitosha Boulevard
    dict(name='Vitosha Boulevard Blue Zone', address='Vitosha Blvd, Sofia Center', district='Sofia Center',
         latitude='42.6955', longitude='23.3220', total_spots=50, available_spots=0, price_per_hour='3.00',
         type='street', hours='8:00-20:00', features=[], landmark='Vitosha Blvd'),
    dict(name='Vitosha Center Parking', address='Vitosha Blvd 114, Sofia Center', district='Sofia Center',
         latitude='42.6962', longitude='23.3235', total_spots=80, available_spots=15, price_per_hour='2.80',
         type='underground', hours='24/7', features=['secure', 'covered'], landmark='Vitosha Blvd'),
    dict(name='Vitosha Mall Parking', address='Vitosha Blvd 89, Sofia Center', district='Sofia Center',
         latitude='42.6948', longitude='23.3242', total_spots=60, available_spots=12, price_per_hour='2.20',
         type='private', hours='10:00-22:00', features=['covered', 'secure'], landmark='Vitosha Blvd'),

    # Alexander Nevsky
    dict(name='Alexander Nevsky Cathedral Parking', address='Alexander Nevsky Square, Sofia Center',
         district='Sofia Center', latitude='42.6966', longitude='23.3330', total_spots=40, available_spots=18,
         price_per_hour='2.50', type='street', hours='8:00-18:00', features=['accessible'],
         landmark='Alexander Nevsky'),
    dict(name='Sofia University Parking', address='Tsar Osvoboditel Blvd 15, Sofia Center', district='Sofia Center',
         latitude='42.6951', longitude='23.3312', total_spots=70, available_spots=25, price_per_hour='1.80',
         type='private', hours='7:00-22:00', features=['accessible', 'secure'], landmark='Alexander Nevsky'),

    # Mall of Sofia
    dict(name='Mall of Sofia Parking', address='Aleksandar Stamboliyski Blvd 101', district='Izgrev',
         latitude='42.6611', longitude='23.3056', total_spots=800, available_spots=156, price_per_hour='0.00',
         type='mall', hours='10:00-22:00', features=['accessible', 'secure', 'covered', 'ev_charging'],
         landmark='Mall of Sofia'),
    dict(name='Mall of Sofia Outdoor', address='Aleksandar Stamboliyski Blvd 101', district='Izgrev',
         latitude='42.6615', longitude='23.3068', total_spots=200, available_spots=45, price_per_hour='0.00',
         type='mall', hours='10:00-22:00', features=['accessible'], landmark='Mall of Sofia'),

    # City Center blue zone
    dict(name='City Center Blue Zone A', address='Graf Ignatiev Str, Sofia Center', district='Sofia Center',
         latitude='42.6977', longitude='23.3189', total_spots=25, available_spots=0, price_per_hour='2.50',
         type='street', hours='8:00-20:00', features=[], landmark='City Center'),
    dict(name='City Center Blue Zone B', address='Rakovski Str, Sofia Center', district='Sofia Center',
         latitude='42.6985', longitude='23.3210', total_spots=30, available_spots=7, price_per_hour='2.50',
         type='street', hours='8:00-20:00', features=[], landmark='City Center'),
    dict(name='Central Department Store Parking', address='Maria Luiza Blvd 2, Sofia Center',
         district='Sofia Center', latitude='42.6973', longitude='23.3225', total_spots=120, available_spots=42,
         price_per_hour='2.00', type='underground', hours='9:00-21:00', features=['secure', 'covered'],
         landmark='City Center'),

    # Outer districts
    dict(name='Studentski Grad Parking', address='8-mi Dekemvri Blvd, Studentski Grad', district='Studentski Grad',
         latitude='42.6462', longitude='23.2742', total_spots=200, available_spots=120, price_per_hour='1.00',
         type='street', hours='24/7', features=['accessible']),
    dict(name='Mladost Metro Parking', address='Aleksandar Malinov Blvd, Mladost', district='Mladost',
         latitude='42.6319', longitude='23.3734', total_spots=150, available_spots=98, price_per_hour='1.50',
         type='private', hours='5:00-24:00', features=['accessible', 'secure'], landmark='Metro Station'),
]


async def seed_store(store: LocationStore) -> List[ParkingLocation]:
    """Fill an empty store with the Sofia sample locations. A store with data is left alone."""
    if await store.get_all():
        logger.info("Store already has parking data, skipping seed.")
        return []

    logger.info("Seeding store with Sofia parking data...")
    created = [await store.create(NewParkingLocation(**fields)) for fields in SOFIA_PARKING]
    logger.info("Seeded {} parking locations.".format(len(created)))
    return created
