# schemas.py
# Defines the record kinds the client exports (crew, credentials, sea-time,
# vessels and schedules). Records are built by the caller and never mutated.

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple, Union

from .constants import SHIFT_MULTIPLIERS

Timestamp = Union[datetime, str]


@dataclass(frozen=True)
class Crew:
    context_id: str
    external_id: str
    first_name: str
    last_name: str
    middle_name: Optional[str] = None
    job_title: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    @property
    def location(self) -> str:
        return crew_location(self)


@dataclass(frozen=True)
class CrewCredential:
    context_id: str
    crew_external_id: str
    title: str
    number: Optional[str] = None
    type: Optional[str] = None
    endorsements: Tuple[str, ...] = ()
    issued_at: Optional[Timestamp] = None
    expires_at: Optional[Timestamp] = None


@dataclass(frozen=True)
class CrewSeatime:
    """
    A logged stint aboard a vessel. Either crewed_on/crewed_off or an explicit
    day count must be given; days_worked() turns it into credited days.
    """
    context_id: str
    crew_external_id: str
    vessel_name: str
    crewed_on: Optional[Timestamp] = None
    crewed_off: Optional[Timestamp] = None
    days: Optional[float] = None
    position: Optional[str] = None
    shift_hours: Optional[float] = None
    vessel_external_id: Optional[str] = None
    vessel_imo_number: Optional[str] = None
    vessel_mmsi_number: Optional[str] = None
    vessel_type: Optional[str] = None
    vessel_gross_tonnage: Optional[float] = None
    vessel_horsepower: Optional[float] = None
    waters: Optional[str] = None
    daily_rate: Optional[float] = None
    currency: Optional[str] = None

    def days_worked(self, now: Optional[datetime] = None) -> float:
        return seatime_days_worked(self, now=now)


@dataclass(frozen=True)
class Vessel:
    context_id: str
    external_id: str
    vessel_external_id: str
    name: str
    mmsi_number: Optional[str] = None
    imo_number: Optional[str] = None
    additional_identifier: Optional[str] = None


@dataclass(frozen=True)
class VesselSchedule:
    context_id: str
    external_id: str
    vessel_external_id: str
    vessel_name: str
    service_start_at: Timestamp
    service_end_at: Timestamp
    vessel_imo_number: Optional[str] = None
    vessel_mmsi_number: Optional[str] = None
    client: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class VesselSchedulePosition:
    context_id: str
    vessel_external_id: str
    position: str
    credential_title: str
    external_id: Optional[str] = None
    endorsements: Tuple[str, ...] = ()
    service_start_at: Optional[Timestamp] = None
    service_end_at: Optional[Timestamp] = None


@dataclass(frozen=True)
class CrewSchedule:
    context_id: str
    external_id: str
    crew_external_id: str
    vessel_external_id: str
    vessel_name: str
    service_start_at: Timestamp
    service_end_at: Timestamp
    vessel_imo_number: Optional[str] = None
    vessel_mmsi_number: Optional[str] = None


@dataclass(frozen=True)
class CrewSchedulePosition:
    context_id: str
    external_id: str
    crew_external_id: str
    vessel_external_id: str
    position: str
    credential_title: str
    endorsements: Tuple[str, ...] = ()
    service_start_at: Optional[Timestamp] = None
    service_end_at: Optional[Timestamp] = None


# ----- Derived values ----------------------------------------------------------

def crew_location(crew: Optional[Crew]) -> str:
    """
    "City, State" from the non-empty parts, then ", Country" appended when a
    country is set. Plain concatenation: a country alone gives ", Country".
    """
    if crew is None:
        return ""
    loc = ", ".join(p for p in (crew.city, crew.state) if p)
    if crew.country:
        loc += ", " + crew.country
    return loc


def parse_timestamp(value: Timestamp) -> datetime:
    """
    datetime from a datetime or ISO-8601 string ("Z" suffix accepted).
    Naive values are taken as UTC so any two timestamps can be subtracted.
    Raises ValueError for text that is not ISO-8601.
    """
    if isinstance(value, datetime):
        dt = value
    else:
        text = str(value).strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        dt = datetime.fromisoformat(text)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def seatime_days_worked(seatime: CrewSeatime, now: Optional[datetime] = None) -> float:
    """
    Credited sea-time days.

    - explicit day count: multiplied by the shift factor (8h -> 1.0, 12h -> 1.5);
      any other shift length credits 0.
    - crewed_on date: whole days from crewed_on to crewed_off (or now), counted
      inclusively; 8h shifts credit 1.0, every other shift length 1.5.
    - neither: 0.
    """
    if seatime.days is not None:
        base = float(seatime.days)
        if seatime.shift_hours is None:
            return base
        multiplier = SHIFT_MULTIPLIERS.get(seatime.shift_hours)
        if multiplier is None:
            return 0.0
        return base * multiplier

    if seatime.crewed_on:
        start = parse_timestamp(seatime.crewed_on)
        if seatime.crewed_off:
            end = parse_timestamp(seatime.crewed_off)
        else:
            end = parse_timestamp(now or datetime.now(timezone.utc))
        # timedelta.days floors partial days
        days = (end - start + timedelta(days=1)).days
        if seatime.shift_hours is None:
            return float(days)
        # TODO: unknown shift lengths get the 12h rate here but 0 on the
        # day-count branch above; align once the server side confirms which.
        if seatime.shift_hours == 8:
            return days * SHIFT_MULTIPLIERS[8]
        return days * SHIFT_MULTIPLIERS[12]

    return 0.0
