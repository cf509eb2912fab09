"""
Shared test fixtures.

Builds dispatchers from the small CSV dataset in ``tests/test_data``:

* 8 passengers (``Passenger 1`` .. ``Passenger 8``)
* 3 drivers -- driver 1 UNAVAILABLE, drivers 2 and 3 AVAILABLE,
  driver 3 has no trips
* 5 completed trips whose costs add up to 51.00 of driver revenue under
  the default fee split
"""

import os
from datetime import datetime

import pytest

from rideshare.domain.entities import Driver, Passenger, Trip
from rideshare.infrastructure.loader import CsvRecordLoader
from rideshare.services.dispatcher import TripDispatcher

TEST_DATA_DIRECTORY = os.path.join(os.path.dirname(__file__), "test_data")

START = datetime(2016, 8, 8, 10, 0)
END = datetime(2016, 8, 8, 10, 30)


def build_trip(trip_id=8, *, driver=None, driver_id=None, passenger=None,
               passenger_id=None, start_time=START, end_time=END, rating=5,
               cost=10.0):
    if driver is None and driver_id is None:
        driver_id = 1
    if passenger is None and passenger_id is None:
        passenger_id = 3
    return Trip(
        id=trip_id,
        driver=driver,
        driver_id=driver_id,
        passenger=passenger,
        passenger_id=passenger_id,
        start_time=start_time,
        end_time=end_time,
        rating=rating,
        cost=cost,
    )


def build_in_progress_trip(trip_id=9, **kwargs):
    return build_trip(trip_id, end_time=None, rating=None, cost=None, **kwargs)


# ── Fixtures ──────────────────────────────────────────────────────────


@pytest.fixture
def dispatcher() -> TripDispatcher:
    return TripDispatcher(directory=TEST_DATA_DIRECTORY)


@pytest.fixture
def loader() -> CsvRecordLoader:
    return CsvRecordLoader(TEST_DATA_DIRECTORY)


@pytest.fixture
def driver() -> Driver:
    return Driver(id=54, name="Rogers Bartell IV", vin="1C9EVBRM0YBC564DZ")


@pytest.fixture
def passenger() -> Passenger:
    return Passenger(id=1, name="Ada", phone_number="412-432-7640")
