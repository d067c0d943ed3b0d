from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from nurse_connect.core.database import get_async_session
from nurse_connect.core.exceptions import NotFoundError
from nurse_connect.schemas.organization.facility_schema import FacilityResponse
from nurse_connect.services.organization.facility_service import FacilityService

router = APIRouter()

@router.get("", response_model=List[FacilityResponse])
async def get_facilities(session: AsyncSession = Depends(get_async_session)):
    """All facilities ordered by name"""
    return await FacilityService(session).list_facilities()

@router.get("/{facility_id}", response_model=FacilityResponse)
async def get_facility(
    facility_id: int,
    session: AsyncSession = Depends(get_async_session),
):
    facility = await FacilityService(session).get_facility(facility_id)
    if not facility:
        raise NotFoundError("Facility not found")
    return facility
