"""
Domain entities with business logic.

Relationships
-------------
``Trip`` holds plain ``passenger_id`` / ``driver_id`` fields from the
moment it is built; the object references are bound afterwards by
``Trip.connect``.  Registering a trip into a ``Passenger``'s or
``Driver``'s trip list is a separate step (``add_trip`` / ``dispatch``),
so every entity can be constructed independently and linked later.

Entities compare by identity and their reprs leave out the
back-references, so the cyclic graph never recurses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from .enums import DriverStatus
from .errors import ValidationError
from .pricing import RevenueStrategy, default_strategy

VIN_LENGTH = 17
MIN_RATING, MAX_RATING = 1, 5


def validate_id(value: Any, label: str = "id") -> int:
    """Return *value* if it is a positive integer, else raise."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(f"{label} must be a positive integer, got {value!r}")
    return value


def _validate_name(name: Any) -> None:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError(f"name must be non-empty text, got {name!r}")


class _Entity:
    """Freezes ``id`` once it has been assigned."""

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "id" and "id" in self.__dict__:
            raise ValidationError(f"{type(self).__name__}.id is immutable")
        super().__setattr__(name, value)


# ── Entities ──────────────────────────────────────────────────────────


@dataclass(eq=False)
class Passenger(_Entity):
    id: int
    name: str
    phone_number: str = ""
    trips: list[Trip] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        validate_id(self.id)
        _validate_name(self.name)
        self.trips = list(self.trips)

    @classmethod
    def from_record(cls, record) -> Passenger:
        return cls(id=record.id, name=record.name, phone_number=record.phone_number)

    def add_trip(self, trip: Trip) -> None:
        self.trips.append(trip)


@dataclass(eq=False)
class Driver(_Entity):
    id: int
    name: str
    vin: str
    status: DriverStatus = DriverStatus.AVAILABLE
    trips: list[Trip] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        validate_id(self.id)
        _validate_name(self.name)
        if not isinstance(self.vin, str) or len(self.vin) != VIN_LENGTH:
            raise ValidationError(
                f"VIN must be exactly {VIN_LENGTH} characters, got {self.vin!r}"
            )
        try:
            self.status = DriverStatus(self.status)
        except ValueError:
            raise ValidationError(f"Invalid driver status: {self.status!r}") from None
        self.trips = list(self.trips)

    @classmethod
    def from_record(cls, record) -> Driver:
        return cls(id=record.id, name=record.name, vin=record.vin, status=record.status)

    @property
    def is_available(self) -> bool:
        return self.status == DriverStatus.AVAILABLE

    def add_trip(self, trip: Trip) -> None:
        self.trips.append(trip)

    def dispatch(self, trip: Trip) -> None:
        """Take on a new trip and become UNAVAILABLE.

        Nothing flips the status back when the trip later completes.
        """
        self.add_trip(trip)
        self.status = DriverStatus.UNAVAILABLE

    def completed_trips(self) -> list[Trip]:
        return [trip for trip in self.trips if not trip.is_in_progress]

    def average_rating(self) -> float:
        """Mean rating over completed trips, or 0 if there are none."""
        completed = self.completed_trips()
        if not completed:
            return 0.0
        return sum(trip.rating for trip in completed) / len(completed)

    def driver_cost(
        self, trip: Trip, strategy: Optional[RevenueStrategy] = None
    ) -> float:
        """The driver's share of *trip*; 0 while the trip is in progress."""
        if trip.is_in_progress:
            return 0.0
        if trip.cost is None:
            raise ValidationError(f"Completed trip {trip.id} has no cost")
        if trip.cost < 0:
            raise ValidationError(
                f"Trip {trip.id} cost cannot be negative: {trip.cost}"
            )
        return (strategy or default_strategy()).driver_revenue(trip.cost)

    def total_revenue(self, strategy: Optional[RevenueStrategy] = None) -> float:
        strategy = strategy or default_strategy()
        return sum(self.driver_cost(trip, strategy) for trip in self.trips)


@dataclass(eq=False)
class Trip(_Entity):
    id: int
    start_time: datetime
    end_time: Optional[datetime] = None
    rating: Optional[int] = None
    cost: Optional[float] = None
    passenger_id: Optional[int] = None
    driver_id: Optional[int] = None
    passenger: Optional[Passenger] = field(default=None, repr=False)
    driver: Optional[Driver] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        validate_id(self.id)
        self.passenger_id = self._resolve_ref(self.passenger, self.passenger_id, "passenger")
        self.driver_id = self._resolve_ref(self.driver, self.driver_id, "driver")

        if self.cost is not None and self.cost < 0:
            raise ValidationError(f"Trip cost cannot be negative: {self.cost}")

        # A finished trip is always rated; an in-progress one never is.
        if (self.end_time is None) != (self.rating is None):
            raise ValidationError(
                "end_time and rating must be both set or both empty, "
                f"got end_time={self.end_time!r} rating={self.rating!r}"
            )
        if self.end_time is not None:
            if (self.start_time.tzinfo is None) != (self.end_time.tzinfo is None):
                raise ValidationError(
                    f"Trip {self.id} mixes timezone-aware and naive timestamps: "
                    f"start_time={self.start_time!r} end_time={self.end_time!r}"
                )
            if self.end_time < self.start_time:
                raise ValidationError(
                    f"Trip {self.id} ends ({self.end_time}) before it starts "
                    f"({self.start_time})"
                )
            if (
                isinstance(self.rating, bool)
                or not isinstance(self.rating, int)
                or not MIN_RATING <= self.rating <= MAX_RATING
            ):
                raise ValidationError(
                    f"rating must be an integer {MIN_RATING}-{MAX_RATING}, "
                    f"got {self.rating!r}"
                )

    @staticmethod
    def _resolve_ref(entity, ref_id: Optional[int], label: str) -> int:
        if entity is not None:
            if ref_id is None:
                ref_id = entity.id
            elif ref_id != entity.id:
                raise ValidationError(
                    f"{label}_id {ref_id} does not match {label} {entity.id}"
                )
        if ref_id is None:
            raise ValidationError(f"Trip requires a {label} or a {label}_id")
        return validate_id(ref_id, f"{label}_id")

    @classmethod
    def from_record(cls, record) -> Trip:
        return cls(
            id=record.id,
            passenger_id=record.passenger_id,
            driver_id=record.driver_id,
            start_time=record.start_time,
            end_time=record.end_time,
            rating=record.rating,
            cost=record.cost,
        )

    @property
    def is_in_progress(self) -> bool:
        return self.end_time is None

    @property
    def duration(self) -> Optional[float]:
        """Length of a completed trip in seconds."""
        if self.end_time is None:
            return None
        return (self.end_time - self.start_time).total_seconds()

    def connect(self, passenger: Passenger, driver: Driver) -> None:
        """Bind the object references for the ids this trip already holds.

        Does not add the trip to either entity's trip list.
        """
        if passenger.id != self.passenger_id:
            raise ValidationError(
                f"Trip {self.id} belongs to passenger {self.passenger_id}, "
                f"not {passenger.id}"
            )
        if driver.id != self.driver_id:
            raise ValidationError(
                f"Trip {self.id} belongs to driver {self.driver_id}, not {driver.id}"
            )
        self.passenger = passenger
        self.driver = driver
