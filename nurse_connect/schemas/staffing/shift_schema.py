from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ValidationError, validator

from nurse_connect.core.exceptions import BadRequestError


def _blank_to_none(v):
    if isinstance(v, str):
        v = v.strip()
        return v or None
    return v


class ShiftBase(BaseModel):
    """Shift payload as sent by facilities; presence is checked by the lifecycle rules."""
    facility_id: Optional[int] = None
    unit: Optional[str] = None
    shift_type: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    hourly_rate: Optional[Decimal] = None
    status: Optional[str] = None
    requirements: Optional[List[str]] = None

    @validator('facility_id', 'unit', 'shift_type', 'start_time', 'end_time', 'hourly_rate', 'status', pre=True)
    def blank_strings_are_missing(cls, v):
        return _blank_to_none(v)

class ShiftCreate(ShiftBase):
    # status is accepted but always overridden with "open"
    pass

class ShiftUpdate(ShiftBase):
    pass

class ShiftResponse(BaseModel):
    id: int
    facility_id: int
    facility_name: Optional[str] = None
    unit: str
    shift_type: str
    start_time: datetime
    end_time: datetime
    hourly_rate: float
    status: str
    requirements: List[str] = []

    @validator('requirements', pre=True)
    def null_requirements(cls, v):
        return v or []

    class Config:
        from_attributes = True

class ShiftDeleteResponse(BaseModel):
    success: bool
    message: str


class ShiftFilters(BaseModel):
    """Optional list filters parsed from the query string"""
    facility_id: Optional[int] = None
    status: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @validator('facility_id', 'status', 'start_date', 'end_date', pre=True)
    def blank_values_are_absent(cls, v):
        return _blank_to_none(v)

    @validator('start_date', 'end_date', pre=True)
    def timestamps_keep_calendar_date(cls, v):
        # "2025-03-01T10:00:00" filters on 2025-03-01
        if isinstance(v, str) and len(v.strip()) > 10:
            try:
                return datetime.fromisoformat(v.strip().replace("Z", "+00:00")).date()
            except ValueError:
                return v
        return v

    @classmethod
    def from_query(
        cls,
        facility_id: Optional[str] = None,
        status: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> "ShiftFilters":
        try:
            return cls(
                facility_id=facility_id,
                status=status,
                start_date=start_date,
                end_date=end_date,
            )
        except ValidationError as e:
            invalid = sorted({str(err["loc"][0]) for err in e.errors()})
            raise BadRequestError("Invalid filter", fields=invalid)
