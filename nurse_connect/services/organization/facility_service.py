import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from nurse_connect.core.exceptions import BadRequestError, ServerError
from nurse_connect.core.security import get_password_hash
from nurse_connect.models.organization.facility import Facility
from nurse_connect.schemas.organization.facility_schema import FacilityRegister

logger = logging.getLogger(__name__)


class FacilityService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_facility(self, facility_id: int) -> Optional[Facility]:
        """Get facility by ID"""
        try:
            return await self.session.get(Facility, facility_id)
        except SQLAlchemyError as e:
            logger.error(f"Error getting facility {facility_id}: {e}")
            raise ServerError.from_exception(e)

    async def get_facility_by_email(self, email: str) -> Optional[Facility]:
        result = await self.session.execute(
            select(Facility).where(Facility.contact_email == email)
        )
        return result.scalar_one_or_none()

    async def list_facilities(self) -> List[Facility]:
        try:
            result = await self.session.scalars(select(Facility).order_by(Facility.name))
            return result.all()
        except SQLAlchemyError as e:
            logger.error(f"Error getting facilities: {e}")
            raise ServerError.from_exception(e)

    async def register_facility(self, data: FacilityRegister) -> Facility:
        """Create a facility; the password is stored only as a bcrypt hash"""
        try:
            if await self.get_facility_by_email(data.contact_email):
                raise BadRequestError("Email already registered")

            facility = Facility(
                **data.dict(exclude={"password"}),
                password_hash=get_password_hash(data.password),
            )
            self.session.add(facility)
            await self.session.commit()
            await self.session.refresh(facility)

            logger.info(f"Facility registered: {facility.contact_email} (id {facility.id})")
            return facility

        except BadRequestError:
            raise
        except IntegrityError as e:
            await self.session.rollback()
            logger.warning(f"Facility registration conflict for {data.contact_email}: {e}")
            raise BadRequestError("Email already registered")
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Facility registration error: {e}")
            raise ServerError.from_exception(e)
