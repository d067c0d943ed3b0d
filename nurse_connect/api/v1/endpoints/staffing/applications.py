from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from nurse_connect.core.database import get_async_session
from nurse_connect.core.exceptions import NotFoundError
from nurse_connect.models.shared.enums import ApplicationStatus
from nurse_connect.schemas.staffing.application_schema import (
    ApplicationCreate, ApplicationListItem, ApplicationResponse, ApplicationStatusUpdate
)
from nurse_connect.services.staffing.application_service import ApplicationService

router = APIRouter()

@router.post("", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED)
async def apply_to_shift(
    application: ApplicationCreate,
    session: AsyncSession = Depends(get_async_session),
):
    """Apply a worker to an open shift"""
    return await ApplicationService(session).apply_to_shift(application)

@router.get("", response_model=List[ApplicationListItem])
async def get_applications(
    shift_id: Optional[int] = Query(None),
    user_id: Optional[int] = Query(None),
    application_status: Optional[ApplicationStatus] = Query(None, alias="status"),
    session: AsyncSession = Depends(get_async_session),
):
    return await ApplicationService(session).list_applications(
        shift_id=shift_id,
        user_id=user_id,
        status=application_status,
    )

@router.get("/{application_id}", response_model=ApplicationResponse)
async def get_application(
    application_id: int,
    session: AsyncSession = Depends(get_async_session),
):
    application = await ApplicationService(session).get_application(application_id)
    if not application:
        raise NotFoundError("Application not found")
    return application

@router.put("/{application_id}/status", response_model=ApplicationResponse)
async def update_application_status(
    application_id: int,
    status_update: ApplicationStatusUpdate,
    session: AsyncSession = Depends(get_async_session),
):
    """Accept, reject or withdraw an application"""
    return await ApplicationService(session).update_status(application_id, status_update)
