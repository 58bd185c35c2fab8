# record_kinds.py
# -----------------------------------------------------------------------------
# One descriptor per record kind: which dataclass it is, the file tag, the CSV
# columns (header label + how to read the cell off a record) and the required
# fields in the order they are checked.
#
# The upload pipeline is generic; everything kind-specific lives here.
# -----------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Callable, Dict, Tuple, Type

from . import constants as C
from .endorsements import encode_endorsements
from .schemas import (
    Crew, CrewCredential, CrewSeatime, Vessel, VesselSchedule,
    VesselSchedulePosition, CrewSchedule, CrewSchedulePosition,
    crew_location, seatime_days_worked,
)


@dataclass(frozen=True)
class Column:
    label: str
    getter: Callable[[Any], Any]


@dataclass(frozen=True)
class RecordKind:
    name: str
    tag: str
    record_type: Type
    columns: Tuple[Column, ...]
    required: Tuple[str, ...]

    @property
    def labels(self) -> list[str]:
        return [c.label for c in self.columns]


def _col(label: str, attr: str) -> Column:
    return Column(label, attrgetter(attr))


def _endorsements_col() -> Column:
    return Column("Endorsements", lambda r: encode_endorsements(r.endorsements))


CREW = RecordKind(
    name="crew",
    tag=C.CREW_TAG,
    record_type=Crew,
    columns=(
        _col("Context ID", "context_id"),
        _col("External ID", "external_id"),
        _col("First Name", "first_name"),
        _col("Last Name", "last_name"),
        _col("Middle Name", "middle_name"),
        _col("Job Title", "job_title"),
        _col("City", "city"),
        _col("State", "state"),
        _col("Country", "country"),
        Column("Location", crew_location),
        _col("Email", "email"),
        _col("Phone", "phone"),
    ),
    required=("context_id", "external_id", "first_name", "last_name"),
)

CREW_CREDENTIAL = RecordKind(
    name="crew credential",
    tag=C.CREDENTIALS_TAG,
    record_type=CrewCredential,
    columns=(
        _col("Context ID", "context_id"),
        _col("Crew External ID", "crew_external_id"),
        _col("Number", "number"),
        _col("Title", "title"),
        _col("Type", "type"),
        _endorsements_col(),
        _col("Issued At", "issued_at"),
        _col("Expires At", "expires_at"),
    ),
    required=("context_id", "crew_external_id", "title"),
)

# The crewed-on/off vs. day-count rule is checked in validation.py
CREW_SEATIME = RecordKind(
    name="crew seatime",
    tag=C.SEATIME_TAG,
    record_type=CrewSeatime,
    columns=(
        _col("Context ID", "context_id"),
        _col("Crew External ID", "crew_external_id"),
        _col("Crewed On", "crewed_on"),
        _col("Crewed Off", "crewed_off"),
        _col("Days", "days"),
        Column("Days Worked", seatime_days_worked),
        _col("Position", "position"),
        _col("Shift Hours", "shift_hours"),
        _col("Vessel Name", "vessel_name"),
        _col("Vessel External ID", "vessel_external_id"),
        _col("Vessel IMO Number", "vessel_imo_number"),
        _col("Vessel MMSI Number", "vessel_mmsi_number"),
        _col("Vessel Type", "vessel_type"),
        _col("Vessel Gross Tonnage", "vessel_gross_tonnage"),
        _col("Vessel Horsepower", "vessel_horsepower"),
        _col("Waters", "waters"),
        _col("Daily Rate", "daily_rate"),
        _col("Currency", "currency"),
    ),
    required=("context_id", "crew_external_id", "vessel_name"),
)

VESSEL = RecordKind(
    name="vessel",
    tag=C.VESSELS_TAG,
    record_type=Vessel,
    columns=(
        _col("Context ID", "context_id"),
        _col("External ID", "external_id"),
        _col("Vessel External ID", "vessel_external_id"),
        _col("Name", "name"),
        _col("MMSI Number", "mmsi_number"),
        _col("IMO Number", "imo_number"),
        _col("Additional Identifier", "additional_identifier"),
    ),
    required=("context_id", "external_id", "vessel_external_id", "name"),
)

VESSEL_SCHEDULE = RecordKind(
    name="vessel schedule",
    tag=C.VESSEL_SCHEDULES_TAG,
    record_type=VesselSchedule,
    columns=(
        _col("Context ID", "context_id"),
        _col("External ID", "external_id"),
        _col("Vessel External ID", "vessel_external_id"),
        _col("Vessel Name", "vessel_name"),
        _col("Vessel IMO Number", "vessel_imo_number"),
        _col("Vessel MMSI Number", "vessel_mmsi_number"),
        _col("Client", "client"),
        _col("Description", "description"),
        _col("Service Start At", "service_start_at"),
        _col("Service End At", "service_end_at"),
    ),
    required=("context_id", "external_id", "vessel_name", "vessel_external_id",
              "service_start_at", "service_end_at"),
)

VESSEL_SCHEDULE_POSITION = RecordKind(
    name="vessel schedule position",
    tag=C.VESSEL_SCHEDULE_POSITIONS_TAG,
    record_type=VesselSchedulePosition,
    columns=(
        _col("Context ID", "context_id"),
        _col("External ID", "external_id"),
        _col("Vessel External ID", "vessel_external_id"),
        _col("Position", "position"),
        _col("Credential Title", "credential_title"),
        _endorsements_col(),
        _col("Service Start At", "service_start_at"),
        _col("Service End At", "service_end_at"),
    ),
    required=("context_id", "vessel_external_id", "position", "credential_title"),
)

CREW_SCHEDULE = RecordKind(
    name="crew schedule",
    tag=C.CREW_SCHEDULES_TAG,
    record_type=CrewSchedule,
    columns=(
        _col("Context ID", "context_id"),
        _col("External ID", "external_id"),
        _col("Crew External ID", "crew_external_id"),
        _col("Vessel External ID", "vessel_external_id"),
        _col("Vessel Name", "vessel_name"),
        _col("Vessel IMO Number", "vessel_imo_number"),
        _col("Vessel MMSI Number", "vessel_mmsi_number"),
        _col("Service Start At", "service_start_at"),
        _col("Service End At", "service_end_at"),
    ),
    required=("context_id", "external_id", "crew_external_id", "vessel_external_id",
              "vessel_name", "service_start_at", "service_end_at"),
)

CREW_SCHEDULE_POSITION = RecordKind(
    name="crew schedule position",
    tag=C.CREW_SCHEDULE_POSITIONS_TAG,
    record_type=CrewSchedulePosition,
    columns=(
        _col("Context ID", "context_id"),
        _col("External ID", "external_id"),
        _col("Crew External ID", "crew_external_id"),
        _col("Vessel External ID", "vessel_external_id"),
        _col("Position", "position"),
        _col("Credential Title", "credential_title"),
        _endorsements_col(),
        _col("Service Start At", "service_start_at"),
        _col("Service End At", "service_end_at"),
    ),
    required=("context_id", "external_id", "vessel_external_id", "crew_external_id",
              "position", "credential_title"),
)

RECORD_KINDS: Tuple[RecordKind, ...] = (
    CREW, CREW_CREDENTIAL, CREW_SEATIME, VESSEL, VESSEL_SCHEDULE,
    VESSEL_SCHEDULE_POSITION, CREW_SCHEDULE, CREW_SCHEDULE_POSITION,
)

_BY_TYPE: Dict[type, RecordKind] = {k.record_type: k for k in RECORD_KINDS}


def kind_for(record: Any) -> RecordKind:
    """Look up the descriptor for a record instance."""
    try:
        return _BY_TYPE[type(record)]
    except KeyError:
        raise TypeError(f"Unsupported record type: {type(record).__name__}") from None
