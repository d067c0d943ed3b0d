from datetime import date
from typing import List, Optional, Tuple

from sqlalchemy import Date, Select, func, select
from sqlalchemy.sql.elements import ColumnElement

from nurse_connect.models.organization.facility import Facility
from nurse_connect.models.staffing.shift import Shift
from nurse_connect.schemas.staffing.shift_schema import ShiftFilters


def shift_listing_select() -> Select:
    """Shift columns joined with the owning facility's display name"""
    return (
        select(
            Shift.id,
            Shift.facility_id,
            Facility.name.label("facility_name"),
            Shift.unit,
            Shift.shift_type,
            Shift.start_time,
            Shift.end_time,
            Shift.hourly_rate,
            Shift.status,
            Shift.requirements,
        )
        .join(Facility, Shift.facility_id == Facility.id)
    )


def _calendar_date(column) -> ColumnElement:
    return func.date(column, type_=Date)


class ShiftQueryBuilder:
    """
    Accumulates filter predicates for the shift listing.

    Every predicate is a SQLAlchemy expression whose value travels as a bound
    parameter, so caller input never reaches the statement text. Predicates
    are ANDed together and the result is always ordered by start time.
    """

    def __init__(self):
        self._predicates: List[ColumnElement] = []

    @property
    def predicates(self) -> Tuple[ColumnElement, ...]:
        return tuple(self._predicates)

    def for_facility(self, facility_id: Optional[int]) -> "ShiftQueryBuilder":
        if facility_id is not None:
            self._predicates.append(Shift.facility_id == facility_id)
        return self

    def with_status(self, status: Optional[str]) -> "ShiftQueryBuilder":
        if status is not None and status.strip():
            self._predicates.append(Shift.status == status.strip())
        return self

    def starting_on(self, day: Optional[date]) -> "ShiftQueryBuilder":
        if day is not None:
            self._predicates.append(_calendar_date(Shift.start_time) == day)
        return self

    def ending_by(self, day: Optional[date]) -> "ShiftQueryBuilder":
        if day is not None:
            self._predicates.append(_calendar_date(Shift.end_time) <= day)
        return self

    def apply(self, filters: ShiftFilters) -> "ShiftQueryBuilder":
        return (
            self.for_facility(filters.facility_id)
            .with_status(filters.status)
            .starting_on(filters.start_date)
            .ending_by(filters.end_date)
        )

    def build(self) -> Select:
        return (
            shift_listing_select()
            .where(*self._predicates)
            .order_by(Shift.start_time.asc(), Shift.id.asc())
        )


def build_shift_query(filters: Optional[ShiftFilters] = None) -> Select:
    builder = ShiftQueryBuilder()
    if filters is not None:
        builder.apply(filters)
    return builder.build()
