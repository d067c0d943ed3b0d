import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from nurse_connect.core.exceptions import ServerError
from nurse_connect.core.request_context import RequestContext
from nurse_connect.core.security import create_access_token, verify_password
from nurse_connect.models.auth.user import User
from nurse_connect.models.organization.facility import Facility

logger = logging.getLogger(__name__)

FACILITY_TOKEN_TYPE = "facility"


def _origin(context: Optional[RequestContext]) -> str:
    return context.describe() if context else "unknown origin"


class AuthService:
    """Credential checks and token issuance for workers and facilities.

    Unknown identity and wrong password both come back as ``None`` so callers
    can answer with one uniform error.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def authenticate_user(self, email: str, password: str, context: Optional[RequestContext] = None) -> Optional[User]:
        """Authenticate a worker with email and password"""
        try:
            result = await self.session.execute(select(User).where(User.email == email))
            user = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Error authenticating user: {e}")
            raise ServerError.from_exception(e)

        if not user:
            logger.warning(f"Failed login for {email} ({_origin(context)}): user not found")
            return None
        if not verify_password(password, user.password_hash):
            logger.warning(f"Failed login for {email} ({_origin(context)}): bad password")
            return None

        logger.info(f"User logged in: {user.email}")
        return user

    async def authenticate_facility(self, email: str, password: str, context: Optional[RequestContext] = None) -> Optional[Facility]:
        try:
            result = await self.session.execute(select(Facility).where(Facility.contact_email == email))
            facility = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Error authenticating facility: {e}")
            raise ServerError.from_exception(e)

        if not facility:
            logger.warning(f"Failed facility login for {email} ({_origin(context)}): facility not found")
            return None
        if not verify_password(password, facility.password_hash):
            logger.warning(f"Failed facility login for {email} ({_origin(context)}): bad password")
            return None

        logger.info(f"Facility logged in: {facility.contact_email}")
        return facility

    @staticmethod
    def create_user_token(user: User) -> str:
        return create_access_token(
            data={
                "sub": str(user.id),
                "id": user.id,
                "email": user.email,
                "role": user.role,
            }
        )

    @staticmethod
    def create_facility_token(facility: Facility) -> str:
        return create_access_token(
            data={
                "sub": str(facility.id),
                "id": facility.id,
                "email": facility.contact_email,
                "type": FACILITY_TOKEN_TYPE,
            }
        )
