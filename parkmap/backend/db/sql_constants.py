# flake8: noqa
PARKINGLOCATIONS_CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS ParkingLocations (
    id              serial PRIMARY KEY,
    name            text NOT NULL,
    address         text NOT NULL,
    district        text NOT NULL,
    latitude        numeric(10, 8),
    longitude       numeric(11, 8),
    total_spots     integer NOT NULL CHECK (total_spots >= 1),
    available_spots integer NOT NULL CHECK (available_spots >= 0 AND available_spots <= total_spots),
    price_per_hour  numeric(5, 2) NOT NULL CHECK (price_per_hour >= 0),
    currency        text NOT NULL,
    type            text NOT NULL,
    hours           text NOT NULL,
    features        text[] NOT NULL DEFAULT '{}',
    status          text NOT NULL,
    landmark        text,
    last_updated    timestamptz NOT NULL DEFAULT now()
);
"""

PARKINGLOCATIONS_DROP_TABLE = """
DROP TABLE IF EXISTS ParkingLocations;
"""

PARKINGLOCATIONS_INSERT = """
INSERT INTO ParkingLocations (name, address, district, latitude, longitude, total_spots, available_spots,
                              price_per_hour, currency, type, hours, features, status, landmark, last_updated)
VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10, $11, $12, $13, $14, $15)
RETURNING *;
"""

PARKINGLOCATIONS_SELECT_ALL = """
SELECT * FROM ParkingLocations
ORDER BY id;
"""

PARKINGLOCATIONS_SELECT_BY_ID = """
SELECT * FROM ParkingLocations
WHERE id = $1;
"""

PARKINGLOCATIONS_SELECT_BY_ID_FOR_UPDATE = """
SELECT * FROM ParkingLocations
WHERE id = $1
FOR UPDATE;
"""

# $1 is an ILIKE pattern, wildcards in user input are escaped by the caller
PARKINGLOCATIONS_SELECT_BY_DISTRICT = """
SELECT * FROM ParkingLocations
WHERE district ILIKE $1
ORDER BY id;
"""

PARKINGLOCATIONS_SEARCH = """
SELECT * FROM ParkingLocations
WHERE name ILIKE $1
   OR address ILIKE $1
   OR district ILIKE $1
   OR landmark ILIKE $1
ORDER BY id;
"""

PARKINGLOCATIONS_UPDATE_AVAILABILITY = """
UPDATE ParkingLocations
SET available_spots = $2, status = $3, last_updated = $4
WHERE id = $1
RETURNING *;
"""
