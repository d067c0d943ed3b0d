from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from nurse_connect.core.database import get_async_session
from nurse_connect.core.exceptions import AuthenticationError
from nurse_connect.core.request_context import get_request_context
from nurse_connect.schemas.auth.login import LoginRequest, LoginResponse, UserResponse
from nurse_connect.services.auth.auth_service import AuthService

router = APIRouter()

@router.post("/login", response_model=LoginResponse)
async def login(
    request: Request,
    login_data: LoginRequest,
    session: AsyncSession = Depends(get_async_session),
):
    """Authenticate a worker and return the user plus a signed access token"""
    auth_service = AuthService(session)

    user = await auth_service.authenticate_user(
        email=login_data.email,
        password=login_data.password,
        context=get_request_context(request),
    )
    if not user:
        raise AuthenticationError()

    return LoginResponse(
        user=UserResponse.model_validate(user),
        token=auth_service.create_user_token(user),
    )
