"""
Record Loader -- reads the CSV source files into validated records.

Each method returns the rows of one file, in file order, parsed through
its pydantic schema.  The loader owns type coercion (ids, timestamps,
status text); the domain entities only re-check their own rules.
"""

from __future__ import annotations

import csv
import logging
import os
from typing import TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as SchemaError

from rideshare.domain.errors import RecordLoadError

from .records import DriverRecord, PassengerRecord, TripRecord

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseModel)


class CsvRecordLoader:
    PASSENGERS_FILE = "passengers.csv"
    DRIVERS_FILE = "drivers.csv"
    TRIPS_FILE = "trips.csv"

    def __init__(self, directory: str):
        self.directory = directory

    def load_passengers(self) -> list[PassengerRecord]:
        return self._load(self.PASSENGERS_FILE, PassengerRecord)

    def load_drivers(self) -> list[DriverRecord]:
        return self._load(self.DRIVERS_FILE, DriverRecord)

    def load_trips(self) -> list[TripRecord]:
        return self._load(self.TRIPS_FILE, TripRecord)

    def _load(self, filename: str, schema: type[R]) -> list[R]:
        path = os.path.join(self.directory, filename)
        if not os.path.isfile(path):
            raise RecordLoadError(f"Missing source file: {path}")

        records: list[R] = []
        with open(path, newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            try:
                for row in reader:
                    records.append(schema.model_validate(row))
            except SchemaError as exc:
                # line_num already counts the header row
                raise RecordLoadError(
                    f"{path}:{reader.line_num}: invalid row: {exc}"
                ) from exc
            except (UnicodeDecodeError, csv.Error) as exc:
                raise RecordLoadError(
                    f"{path}:{reader.line_num}: unreadable CSV: {exc}"
                ) from exc

        logger.debug("Loaded %d records from %s", len(records), path)
        return records
