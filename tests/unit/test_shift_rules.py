from datetime import datetime, timezone
from decimal import Decimal

import pytest

from nurse_connect.core.exceptions import BadRequestError
from nurse_connect.schemas.staffing.shift_schema import ShiftCreate, ShiftUpdate
from nurse_connect.services.staffing.shift_rules import (
    missing_fields,
    normalize_status,
    prepare_new_shift,
    prepare_shift_replacement,
)

VALID = {
    "facility_id": 1,
    "unit": "ICU",
    "shift_type": "night",
    "start_time": "2025-03-01T19:00:00Z",
    "end_time": "2025-03-02T07:00:00Z",
    "hourly_rate": "62.50",
}


class TestMissingFields:

    def test_reports_in_declared_order(self):
        assert missing_fields({"unit": "ICU"}) == [
            "facility_id", "shift_type", "start_time", "end_time", "hourly_rate"
        ]

    @pytest.mark.parametrize("value", [None, "", "   ", 0, Decimal("0")])
    def test_falsy_values_are_missing(self, value):
        assert missing_fields({**VALID, "hourly_rate": value}) == ["hourly_rate"]

    def test_false_is_a_value(self):
        assert missing_fields({"flag": False}, required=("flag",)) == []


class TestPrepareNewShift:

    def test_forces_open_status(self):
        values = prepare_new_shift(ShiftCreate(**VALID, status="completed"))
        assert values["status"] == "open"
        assert values["requirements"] == []
        assert values["hourly_rate"] == Decimal("62.50")

    def test_keeps_requirements_order(self):
        values = prepare_new_shift(ShiftCreate(**VALID, requirements=["BLS", "ACLS", "RN"]))
        assert values["requirements"] == ["BLS", "ACLS", "RN"]

    def test_missing_fields_listed(self):
        with pytest.raises(BadRequestError) as exc_info:
            prepare_new_shift(ShiftCreate(unit="ICU"))

        assert exc_info.value.status_code == 400
        body = exc_info.value.to_dict()
        assert body["error"] == "Missing required fields"
        assert "facility_id" in body["fields"]
        assert "unit" not in body["fields"]

    def test_end_must_follow_start(self):
        with pytest.raises(BadRequestError) as exc_info:
            prepare_new_shift(ShiftCreate(**{**VALID, "end_time": VALID["start_time"]}))
        assert exc_info.value.detail == "End time must be after start time"

    def test_naive_and_aware_times_compare(self):
        values = prepare_new_shift(ShiftCreate(**{**VALID, "start_time": "2025-03-01T19:00:00"}))
        assert values["end_time"] == datetime(2025, 3, 2, 7, 0, tzinfo=timezone.utc)

    def test_negative_rate_rejected(self):
        with pytest.raises(BadRequestError):
            prepare_new_shift(ShiftCreate(**{**VALID, "hourly_rate": "-5"}))


class TestPrepareShiftReplacement:

    def test_status_required(self):
        with pytest.raises(BadRequestError) as exc_info:
            prepare_shift_replacement(ShiftUpdate(**VALID))
        assert exc_info.value.to_dict()["fields"] == ["status"]

    def test_status_normalized(self):
        values = prepare_shift_replacement(ShiftUpdate(**VALID, status=" Filled "))
        assert values["status"] == "filled"

    def test_unknown_status(self):
        with pytest.raises(BadRequestError) as exc_info:
            normalize_status("archived")
        body = exc_info.value.to_dict()
        assert body["error"] == "Invalid status"
        assert body["allowed"] == ["open", "filled", "cancelled", "completed"]
