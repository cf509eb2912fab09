"""
Trip Dispatcher
===============

Owns the whole entity graph and mediates trip assignment.

Loading
-------
1. Read passengers, trips and drivers independently from the record loader.
2. ``connect_trips``: resolve each trip's ``passenger_id`` / ``driver_id``
   and register the trip in both entities' trip lists.

Assignment (``request_trip``)
-----------------------------
Every step that can fail (driver selection, passenger lookup, id
allocation, trip construction) runs before the first mutation, so a
failed request leaves the graph exactly as it was.

Driver selection is first-AVAILABLE in load order.  A driver stays
UNAVAILABLE after dispatch; completing the trip does not free them.

Not safe for concurrent callers: serialise access to one instance.
Complexity: every lookup is a linear scan, O(N) in the collection size.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional

from rideshare.config import settings
from rideshare.domain.entities import Driver, Passenger, Trip, validate_id
from rideshare.domain.errors import NoDriversAvailableError, NotFoundError
from rideshare.infrastructure.loader import CsvRecordLoader

logger = logging.getLogger(__name__)


class TripDispatcher:
    def __init__(
        self,
        directory: Optional[str] = None,
        loader=None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        loader = loader or CsvRecordLoader(directory or settings.data_directory)
        self._clock = clock

        self._passengers = [Passenger.from_record(r) for r in loader.load_passengers()]
        self._trips = [Trip.from_record(r) for r in loader.load_trips()]
        self._drivers = [Driver.from_record(r) for r in loader.load_drivers()]
        self.connect_trips()

        logger.info(
            "Dispatcher loaded %d passengers, %d drivers, %d trips",
            len(self._passengers),
            len(self._drivers),
            len(self._trips),
        )

    # ── Collections ───────────────────────────────────────────────────

    @property
    def passengers(self) -> list[Passenger]:
        return self._passengers

    @property
    def drivers(self) -> list[Driver]:
        return self._drivers

    @property
    def trips(self) -> list[Trip]:
        return self._trips

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__}: {len(self._trips)} trips, "
            f"{len(self._drivers)} drivers, {len(self._passengers)} passengers>"
        )

    # ── Lookups ───────────────────────────────────────────────────────

    def find_passenger(self, passenger_id: int) -> Optional[Passenger]:
        validate_id(passenger_id, "passenger id")
        return next((p for p in self._passengers if p.id == passenger_id), None)

    def find_driver(self, driver_id: int) -> Optional[Driver]:
        validate_id(driver_id, "driver id")
        return next((d for d in self._drivers if d.id == driver_id), None)

    def find_next_trip_id(self) -> int:
        if not self._trips:
            raise NotFoundError("No trips loaded; cannot derive the next trip id")
        return max(trip.id for trip in self._trips) + 1

    def find_available_driver(self) -> Driver:
        driver = next((d for d in self._drivers if d.is_available), None)
        if driver is None:
            raise NoDriversAvailableError("No available drivers")
        return driver

    # ── Linking ───────────────────────────────────────────────────────

    def connect_trips(self) -> list[Trip]:
        for trip in self._trips:
            passenger = self.find_passenger(trip.passenger_id)
            if passenger is None:
                raise NotFoundError(
                    f"Trip {trip.id} references unknown passenger {trip.passenger_id}"
                )
            driver = self.find_driver(trip.driver_id)
            if driver is None:
                raise NotFoundError(
                    f"Trip {trip.id} references unknown driver {trip.driver_id}"
                )

            trip.connect(passenger, driver)
            passenger.add_trip(trip)
            driver.add_trip(trip)

        return self._trips

    # ── Assignment ────────────────────────────────────────────────────

    def request_trip(self, passenger_id: int) -> Trip:
        """Assign a new in-progress trip for *passenger_id* to a free driver."""
        try:
            driver = self.find_available_driver()
        except NoDriversAvailableError:
            logger.warning("Trip request for passenger %s rejected: no drivers", passenger_id)
            raise

        passenger = self.find_passenger(passenger_id)
        if passenger is None:
            raise NotFoundError(f"No passenger with id {passenger_id}")

        trip = Trip(
            id=self.find_next_trip_id(),
            passenger=passenger,
            passenger_id=passenger_id,
            driver=driver,
            start_time=self._clock(),
            end_time=None,
            rating=None,
        )

        driver.dispatch(trip)
        passenger.add_trip(trip)
        self._trips.append(trip)

        logger.info(
            "Trip %d assigned: driver=%d passenger=%d", trip.id, driver.id, passenger.id
        )
        return trip
