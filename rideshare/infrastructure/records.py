"""Pydantic schemas for the rows of the tabular source files."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from rideshare.domain.enums import DriverStatus

# "2018-05-25 11:52:40 -0700": a space before an offset without a colon
_SPACED_OFFSET = re.compile(
    r"^(?P<date>\d{4}-\d{2}-\d{2})[ T](?P<time>\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?)"
    r"\s+(?P<sign>[+-])(?P<hh>\d{2}):?(?P<mm>\d{2})$"
)


class PassengerRecord(BaseModel):
    id: int = Field(..., gt=0)
    name: str
    phone_number: str = Field("", alias="phone_num")

    model_config = {"populate_by_name": True, "extra": "ignore"}


class DriverRecord(BaseModel):
    id: int = Field(..., gt=0)
    name: str
    vin: str
    status: DriverStatus = DriverStatus.AVAILABLE

    model_config = {"extra": "ignore"}


class TripRecord(BaseModel):
    id: int = Field(..., gt=0)
    passenger_id: int = Field(..., gt=0)
    driver_id: int = Field(..., gt=0)
    start_time: datetime
    end_time: Optional[datetime] = None
    cost: Optional[float] = None
    rating: Optional[int] = None

    model_config = {"extra": "ignore"}

    @field_validator("cost", "rating", mode="before")
    @classmethod
    def _blank_to_none(cls, v):
        # An empty cell marks a trip that is still in progress
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def _normalise_timestamp(cls, v):
        if not isinstance(v, str):
            return v
        v = v.strip()
        if not v:
            return None
        m = _SPACED_OFFSET.match(v)
        if m:
            return f"{m['date']}T{m['time']}{m['sign']}{m['hh']}:{m['mm']}"
        return v
