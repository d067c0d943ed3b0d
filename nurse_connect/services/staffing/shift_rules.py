"""
Invariants enforced before a shift row is written.

* A new shift always starts ``open``, whatever status the caller sent.
* Required fields must be present; a value counts as missing when it is
  absent, null, blank or zero.
* An edit replaces every column, so it needs every required field plus a
  status from :class:`ShiftStatus`.
"""
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List

from nurse_connect.core.exceptions import BadRequestError
from nurse_connect.models.shared.enums import ShiftStatus
from nurse_connect.schemas.staffing.shift_schema import ShiftCreate, ShiftUpdate

REQUIRED_SHIFT_FIELDS = (
    "facility_id",
    "unit",
    "shift_type",
    "start_time",
    "end_time",
    "hourly_rate",
)

ALLOWED_SHIFT_STATUSES = tuple(s.value for s in ShiftStatus)


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)) or hasattr(value, "is_zero"):
        return value == 0
    return False


def missing_fields(data: Dict[str, Any], required: Iterable[str] = REQUIRED_SHIFT_FIELDS) -> List[str]:
    return [field for field in required if _is_missing(data.get(field))]


def _utc(value: datetime) -> datetime:
    # naive timestamps are taken as UTC
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


def _check_timing_and_rate(values: Dict[str, Any]) -> None:
    if _utc(values["end_time"]) <= _utc(values["start_time"]):
        raise BadRequestError("End time must be after start time")
    if values["hourly_rate"] < 0:
        raise BadRequestError("Hourly rate must be positive")


def normalize_status(status: Any) -> str:
    """Validate an edit's status against the shift status enumeration"""
    value = status.strip().lower() if isinstance(status, str) else status
    if value not in ALLOWED_SHIFT_STATUSES:
        raise BadRequestError("Invalid status", allowed=list(ALLOWED_SHIFT_STATUSES))
    return value


def prepare_new_shift(data: ShiftCreate) -> Dict[str, Any]:
    """Column values for a new shift, or BadRequestError if it cannot be created"""
    payload = data.dict()
    missing = missing_fields(payload)
    if missing:
        raise BadRequestError("Missing required fields", fields=missing)

    values = {field: payload[field] for field in REQUIRED_SHIFT_FIELDS}
    values["unit"] = values["unit"].strip()
    values["shift_type"] = values["shift_type"].strip()
    _check_timing_and_rate(values)

    values["status"] = ShiftStatus.OPEN.value
    values["requirements"] = list(payload.get("requirements") or [])
    return values


def prepare_shift_replacement(data: ShiftUpdate) -> Dict[str, Any]:
    """Column values for a full replace of an existing shift"""
    payload = data.dict()
    missing = missing_fields(payload, REQUIRED_SHIFT_FIELDS + ("status",))
    if missing:
        raise BadRequestError("Missing required fields", fields=missing)

    values = {field: payload[field] for field in REQUIRED_SHIFT_FIELDS}
    values["unit"] = values["unit"].strip()
    values["shift_type"] = values["shift_type"].strip()
    _check_timing_and_rate(values)

    values["status"] = normalize_status(payload["status"])
    values["requirements"] = list(payload.get("requirements") or [])
    return values
