import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from nurse_connect.core.exceptions import BadRequestError, NotFoundError, ServerError
from nurse_connect.models.auth.user import User
from nurse_connect.models.organization.facility import Facility
from nurse_connect.models.shared.enums import ApplicationStatus, ShiftStatus
from nurse_connect.models.staffing.application import Application
from nurse_connect.models.staffing.shift import Shift
from nurse_connect.schemas.staffing.application_schema import ApplicationCreate, ApplicationStatusUpdate

logger = logging.getLogger(__name__)


class ApplicationService:
    """Workers applying to open shifts, and facilities deciding on them"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _locked_shift(self, shift_id: int) -> Optional[Shift]:
        result = await self.session.execute(
            select(Shift).where(Shift.id == shift_id).with_for_update()
        )
        return result.scalar_one_or_none()

    async def apply_to_shift(self, data: ApplicationCreate) -> Application:
        try:
            shift = await self._locked_shift(data.shift_id)
            if not shift:
                raise NotFoundError("Shift not found")
            if shift.status != ShiftStatus.OPEN.value:
                raise BadRequestError("Shift is not open for applications")

            user = await self.session.get(User, data.user_id)
            if not user:
                raise NotFoundError("User not found")

            existing = await self.session.execute(
                select(Application.id).where(
                    Application.shift_id == data.shift_id,
                    Application.user_id == data.user_id,
                ).limit(1)
            )
            if existing.scalar_one_or_none() is not None:
                raise BadRequestError("Already applied to this shift")

            application = Application(
                shift_id=data.shift_id,
                user_id=data.user_id,
                notes=data.notes,
                status=ApplicationStatus.PENDING.value,
            )
            self.session.add(application)
            await self.session.commit()
            await self.session.refresh(application)

            logger.info(f"Application {application.id}: user {data.user_id} -> shift {data.shift_id}")
            return application

        except (BadRequestError, NotFoundError):
            await self.session.rollback()
            raise
        except IntegrityError as e:
            await self.session.rollback()
            logger.warning(f"Duplicate application for shift {data.shift_id} by user {data.user_id}: {e}")
            raise BadRequestError("Already applied to this shift")
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error creating application: {e}")
            raise ServerError.from_exception(e)

    async def list_applications(
        self,
        shift_id: Optional[int] = None,
        user_id: Optional[int] = None,
        status: Optional[ApplicationStatus] = None,
    ) -> List[Dict[str, Any]]:
        try:
            conditions = []
            if shift_id is not None:
                conditions.append(Application.shift_id == shift_id)
            if user_id is not None:
                conditions.append(Application.user_id == user_id)
            if status is not None:
                conditions.append(Application.status == status.value)

            result = await self.session.execute(
                select(
                    Application.id,
                    Application.shift_id,
                    Application.user_id,
                    Application.status,
                    Application.notes,
                    Application.created_at,
                    Application.updated_at,
                    Shift.unit,
                    Shift.start_time.label("shift_start_time"),
                    Facility.name.label("facility_name"),
                )
                .join(Shift, Application.shift_id == Shift.id)
                .join(Facility, Shift.facility_id == Facility.id)
                .where(*conditions)
                .order_by(Application.created_at.asc(), Application.id.asc())
            )
            return [dict(row) for row in result.mappings().all()]
        except SQLAlchemyError as e:
            logger.error(f"Error getting applications: {e}")
            raise ServerError.from_exception(e)

    async def get_application(self, application_id: int) -> Optional[Application]:
        try:
            return await self.session.get(Application, application_id)
        except SQLAlchemyError as e:
            logger.error(f"Error getting application {application_id}: {e}")
            raise ServerError.from_exception(e)

    async def update_status(self, application_id: int, data: ApplicationStatusUpdate) -> Application:
        """Change an application's status; accepting one fills its shift"""
        try:
            result = await self.session.execute(
                select(Application).where(Application.id == application_id).with_for_update()
            )
            application = result.scalar_one_or_none()
            if not application:
                raise NotFoundError("Application not found")

            if data.status == ApplicationStatus.ACCEPTED:
                shift = await self._locked_shift(application.shift_id)
                if not shift:
                    raise NotFoundError("Shift not found")
                if shift.status != ShiftStatus.OPEN.value:
                    raise BadRequestError("Shift is no longer open")
                shift.status = ShiftStatus.FILLED.value

            application.status = data.status.value
            await self.session.commit()
            await self.session.refresh(application)

            logger.info(f"Application {application_id} -> {application.status}")
            return application

        except (BadRequestError, NotFoundError):
            await self.session.rollback()
            raise
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error updating application {application_id}: {e}")
            raise ServerError.from_exception(e)
