# validation.py
# Required-field checks run before anything is serialized.
# The first missing field (in the kind's declared order) is the one reported.

from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple

from .errors import ValidationError
from .record_kinds import RecordKind, kind_for
from .schemas import CrewSeatime, parse_timestamp

RECORD_FIELD = "record"
SEATIME_PERIOD_FIELD = "crewed_on/crewed_off or days"
SEATIME_DATE_FIELDS = ("crewed_on", "crewed_off")


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def _unparseable_date(s: CrewSeatime) -> Optional[str]:
    """First crewed date that is set but not an ISO-8601 timestamp."""
    for f in SEATIME_DATE_FIELDS:
        value = getattr(s, f)
        if _is_blank(value):
            continue
        try:
            parse_timestamp(value)
        except (TypeError, ValueError):
            return f
    return None


def _seatime_period_ok(s: CrewSeatime) -> bool:
    """Either both crewed dates or a positive day count."""
    if not _is_blank(s.crewed_on) and not _is_blank(s.crewed_off):
        return True
    return s.days is not None and s.days > 0


def missing_field(record: Any, kind: Optional[RecordKind] = None) -> Optional[str]:
    """
    Name of the first required field the record lacks, or None when valid.
    A None record reports "record".
    """
    if record is None:
        return RECORD_FIELD
    kind = kind or kind_for(record)
    for f in kind.required:
        if _is_blank(getattr(record, f, None)):
            return f
    if isinstance(record, CrewSeatime):
        bad_date = _unparseable_date(record)
        if bad_date is not None:
            return bad_date
        if not _seatime_period_ok(record):
            return SEATIME_PERIOD_FIELD
    return None


def check_record(record: Any) -> Tuple[bool, str]:
    """Non-raising variant: (ok, message)."""
    field = missing_field(record)
    if field is not None:
        return False, f"The field «{field}» is required."
    return True, "OK"


def validate_record(record: Any, kind: Optional[RecordKind] = None,
                    index: Optional[int] = None) -> None:
    """Raise ValidationError if the record is missing a required field."""
    if kind is None and record is not None:
        kind = kind_for(record)
    field = missing_field(record, kind)
    if field is not None:
        raise ValidationError(field, kind=kind.name if kind else None, index=index)


def validate_batch(kind: RecordKind, records: Sequence[Any]) -> None:
    """
    Fail fast on the first invalid record. Records of a different kind are
    rejected with TypeError.
    """
    for i, rec in enumerate(records):
        if rec is not None and not isinstance(rec, kind.record_type):
            raise TypeError(
                f"Expected {kind.record_type.__name__}, got {type(rec).__name__} at #{i}"
            )
        validate_record(rec, kind, index=i)
