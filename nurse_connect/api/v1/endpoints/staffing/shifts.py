from typing import List, Optional
from fastapi import APIRouter, Body, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from nurse_connect.core.database import get_async_session
from nurse_connect.core.exceptions import NotFoundError
from nurse_connect.schemas.staffing.shift_schema import (
    ShiftCreate, ShiftDeleteResponse, ShiftFilters, ShiftResponse, ShiftUpdate
)
from nurse_connect.services.staffing.shift_service import ShiftService

router = APIRouter()

@router.post("", response_model=ShiftResponse, status_code=201)
async def create_shift(
    shift: ShiftCreate,
    session: AsyncSession = Depends(get_async_session),
):
    """Post a new shift; it always starts out open"""
    return await ShiftService(session).create_shift(shift)

@router.get("", response_model=List[ShiftResponse])
async def get_shifts(
    facility_id: Optional[str] = Query(None),
    status: Optional[str] = Query(None),
    start_date: Optional[str] = Query(None, alias="startDate", description="Shifts starting on this date"),
    end_date: Optional[str] = Query(None, alias="endDate", description="Shifts ending on or before this date"),
    session: AsyncSession = Depends(get_async_session),
):
    """List shifts with optional filters, ordered by start time"""
    filters = ShiftFilters.from_query(
        facility_id=facility_id,
        status=status,
        start_date=start_date,
        end_date=end_date,
    )
    return await ShiftService(session).list_shifts(filters)

@router.get("/{shift_id}", response_model=ShiftResponse)
async def get_shift(
    shift_id: int,
    session: AsyncSession = Depends(get_async_session),
):
    shift = await ShiftService(session).get_shift(shift_id)
    if not shift:
        raise NotFoundError("Shift not found")
    return shift

@router.put("/edit/{shift_id}", response_model=ShiftResponse)
async def edit_shift(
    shift_id: int,
    shift: Optional[ShiftUpdate] = Body(None),
    session: AsyncSession = Depends(get_async_session),
):
    """Replace every field of a shift"""
    return await ShiftService(session).replace_shift(shift_id, shift)

@router.delete("/{shift_id}", response_model=ShiftDeleteResponse)
async def delete_shift(
    shift_id: int,
    session: AsyncSession = Depends(get_async_session),
):
    await ShiftService(session).delete_shift(shift_id)
    return {"success": True, "message": "Shift deleted successfully"}
