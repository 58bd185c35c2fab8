"""
Unit tests for required-field validation
"""
from datetime import datetime

import pytest

from oceo_export import record_kinds as K
from oceo_export.errors import ValidationError
from oceo_export.schemas import (
    Crew, CrewCredential, CrewSeatime, Vessel, VesselSchedule,
    VesselSchedulePosition, CrewSchedule, CrewSchedulePosition,
)
from oceo_export.validation import (
    SEATIME_PERIOD_FIELD, check_record, missing_field, validate_batch, validate_record,
)

START = datetime(2024, 5, 1)
END = datetime(2024, 5, 31)

VALID = {
    K.CREW: Crew("ctx", "C-1", "Jane", "Doe"),
    K.CREW_CREDENTIAL: CrewCredential("ctx", "C-1", "MMC"),
    K.CREW_SEATIME: CrewSeatime("ctx", "C-1", "Gulf Runner", crewed_on=START, crewed_off=END),
    K.VESSEL: Vessel("ctx", "V-ext", "V-1", "Gulf Runner"),
    K.VESSEL_SCHEDULE: VesselSchedule("ctx", "VS-1", "V-1", "Gulf Runner", START, END),
    K.VESSEL_SCHEDULE_POSITION: VesselSchedulePosition("ctx", "V-1", "Master", "Master 1600 GRT"),
    K.CREW_SCHEDULE: CrewSchedule("ctx", "CS-1", "C-1", "V-1", "Gulf Runner", START, END),
    K.CREW_SCHEDULE_POSITION: CrewSchedulePosition("ctx", "CSP-1", "C-1", "V-1", "Mate", "Mate 500 GRT"),
}

REQUIRED_CASES = [(kind, f) for kind in K.RECORD_KINDS for f in kind.required]


class TestRequiredFields:

    @pytest.mark.parametrize("kind", K.RECORD_KINDS, ids=lambda k: k.tag)
    def test_valid_records_pass(self, kind):
        assert missing_field(VALID[kind]) is None
        validate_record(VALID[kind])
        assert check_record(VALID[kind]) == (True, "OK")

    @pytest.mark.parametrize("kind,field", REQUIRED_CASES,
                             ids=[f"{k.tag}-{f}" for k, f in REQUIRED_CASES])
    def test_missing_required_field(self, kind, field):
        rec = VALID[kind]
        for blank in (None, "", "   "):
            bad = type(rec)(**{**rec.__dict__, field: blank})
            with pytest.raises(ValidationError) as exc:
                validate_record(bad)
            assert exc.value.field == field

    def test_first_missing_field_is_reported(self):
        bad = Crew("", "", "Jane", "")
        assert missing_field(bad) == "context_id"
        bad = Crew("ctx", "C-1", "", "")
        assert missing_field(bad) == "first_name"

    def test_vessel_schedule_order(self):
        """vessel name is checked before the vessel external id"""
        bad = VesselSchedule("ctx", "VS-1", "", "", START, END)
        assert missing_field(bad) == "vessel_name"

    def test_crew_schedule_position_order(self):
        bad = CrewSchedulePosition("ctx", "CSP-1", "", "", "Mate", "Mate 500 GRT")
        assert missing_field(bad) == "vessel_external_id"

    def test_optional_fields_may_be_absent(self):
        assert missing_field(VesselSchedulePosition("ctx", "V-1", "Master", "Master", external_id=None)) is None

    def test_none_record(self):
        with pytest.raises(ValidationError) as exc:
            validate_record(None, K.CREW)
        assert exc.value.field == "record"
        assert check_record(None)[0] is False

    def test_check_record_message(self):
        ok, msg = check_record(Crew("ctx", "C-1", "Jane", ""))
        assert ok is False
        assert "last_name" in msg


class TestSeatimePeriod:

    def _seatime(self, **kw):
        return CrewSeatime("ctx", "C-1", "Gulf Runner", **kw)

    def test_dates_pair(self):
        assert missing_field(self._seatime(crewed_on=START, crewed_off=END)) is None

    def test_positive_day_count(self):
        assert missing_field(self._seatime(days=12)) is None

    def test_only_crewed_on(self):
        assert missing_field(self._seatime(crewed_on=START)) == SEATIME_PERIOD_FIELD

    def test_zero_days(self):
        assert missing_field(self._seatime(days=0)) == SEATIME_PERIOD_FIELD

    def test_nothing(self):
        assert missing_field(self._seatime()) == SEATIME_PERIOD_FIELD

    def test_required_fields_come_first(self):
        rec = CrewSeatime("ctx", "C-1", "")
        assert missing_field(rec) == "vessel_name"

    def test_unparseable_crewed_off(self):
        rec = self._seatime(crewed_on=START, crewed_off="31/05/2024")
        with pytest.raises(ValidationError) as exc:
            validate_record(rec)
        assert exc.value.field == "crewed_off"

    def test_unparseable_date_reported_even_with_day_count(self):
        assert missing_field(self._seatime(crewed_on="soon", days=4)) == "crewed_on"

    def test_zulu_and_naive_pair_is_valid(self):
        rec = self._seatime(crewed_on="2024-05-01T00:00:00Z", crewed_off=END)
        assert missing_field(rec) is None


class TestValidateBatch:

    def test_reports_index_of_first_bad_record(self):
        batch = [VALID[K.CREW], Crew("ctx", "C-2", "", "Roe"), Crew("ctx", "", "", "")]
        with pytest.raises(ValidationError) as exc:
            validate_batch(K.CREW, batch)
        assert exc.value.index == 1
        assert exc.value.field == "first_name"
        assert exc.value.kind == "crew"

    def test_none_in_batch(self):
        with pytest.raises(ValidationError) as exc:
            validate_batch(K.CREW, [VALID[K.CREW], None])
        assert exc.value.field == "record"
        assert exc.value.index == 1

    def test_wrong_record_type(self):
        with pytest.raises(TypeError):
            validate_batch(K.CREW, [VALID[K.VESSEL]])

    def test_unsupported_type(self):
        with pytest.raises(TypeError, match="Unsupported record type"):
            validate_record(object())
