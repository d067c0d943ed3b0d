from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from nurse_connect.core.database import get_async_session
from nurse_connect.core.exceptions import AuthenticationError
from nurse_connect.core.request_context import get_request_context
from nurse_connect.schemas.auth.login import LoginRequest
from nurse_connect.schemas.organization.facility_schema import (
    FacilityAuthResponse, FacilityRegister, FacilityResponse
)
from nurse_connect.services.auth.auth_service import AuthService
from nurse_connect.services.organization.facility_service import FacilityService

router = APIRouter()

@router.post("/login", response_model=FacilityAuthResponse)
async def facility_login(
    request: Request,
    login_data: LoginRequest,
    session: AsyncSession = Depends(get_async_session),
):
    """Authenticate a facility and return it plus a signed access token"""
    auth_service = AuthService(session)

    facility = await auth_service.authenticate_facility(
        email=login_data.email,
        password=login_data.password,
        context=get_request_context(request),
    )
    if not facility:
        raise AuthenticationError()

    return FacilityAuthResponse(
        facility=FacilityResponse.model_validate(facility),
        token=auth_service.create_facility_token(facility),
    )

@router.post("/register", response_model=FacilityAuthResponse, status_code=status.HTTP_201_CREATED)
async def register_facility(
    facility_in: FacilityRegister,
    session: AsyncSession = Depends(get_async_session),
):
    """Register a facility and sign it in"""
    facility = await FacilityService(session).register_facility(facility_in)

    return FacilityAuthResponse(
        facility=FacilityResponse.model_validate(facility),
        token=AuthService.create_facility_token(facility),
    )
