import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from nurse_connect.core.exceptions import BadRequestError, NotFoundError, ServerError
from nurse_connect.models.staffing.shift import Shift
from nurse_connect.schemas.staffing.shift_schema import ShiftCreate, ShiftFilters, ShiftUpdate
from nurse_connect.services.staffing.shift_query import build_shift_query, shift_listing_select
from nurse_connect.services.staffing.shift_rules import prepare_new_shift, prepare_shift_replacement

logger = logging.getLogger(__name__)


class ShiftService:
    def __init__(self, session: AsyncSession):
        self.session = session

    # region Queries

    async def list_shifts(self, filters: Optional[ShiftFilters] = None) -> List[Dict[str, Any]]:
        """Shifts matching every supplied filter, earliest start first"""
        try:
            result = await self.session.execute(build_shift_query(filters))
            return [dict(row) for row in result.mappings().all()]
        except SQLAlchemyError as e:
            logger.error(f"Error getting shifts: {e}")
            raise ServerError.from_exception(e)

    async def get_shift(self, shift_id: int) -> Optional[Dict[str, Any]]:
        try:
            result = await self.session.execute(
                shift_listing_select().where(Shift.id == shift_id)
            )
            row = result.mappings().one_or_none()
            return dict(row) if row is not None else None
        except SQLAlchemyError as e:
            logger.error(f"Error getting shift {shift_id}: {e}")
            raise ServerError.from_exception(e)

    # endregion

    # region Lifecycle

    async def create_shift(self, data: ShiftCreate) -> Shift:
        values = prepare_new_shift(data)
        try:
            shift = Shift(**values)
            self.session.add(shift)
            await self.session.flush()
            await self.session.commit()
            await self.session.refresh(shift)

            logger.info(f"Shift created: {shift.id} ({shift.unit}, {shift.shift_type}) for facility {shift.facility_id}")
            return shift

        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error creating shift: {e}")
            raise ServerError.from_exception(e)

    async def _shift_exists(self, shift_id: int) -> bool:
        try:
            result = await self.session.execute(select(Shift.id).where(Shift.id == shift_id))
            return result.scalar_one_or_none() is not None
        except SQLAlchemyError as e:
            logger.error(f"Error looking up shift {shift_id}: {e}")
            raise ServerError.from_exception(e)

    async def replace_shift(self, shift_id: int, data: Optional[ShiftUpdate] = None) -> Shift:
        """Overwrite every column of an existing shift in one conditional UPDATE.

        A missing shift is reported as not found even when the body is invalid.
        """
        try:
            values = prepare_shift_replacement(data or ShiftUpdate())
        except BadRequestError:
            if not await self._shift_exists(shift_id):
                raise NotFoundError("Shift not found")
            raise

        try:
            result = await self.session.execute(
                update(Shift)
                .where(Shift.id == shift_id)
                .values(**values)
                .returning(Shift.id)
                .execution_options(synchronize_session=False)
            )
            if result.scalar_one_or_none() is None:
                await self.session.rollback()
                logger.info(f"Shift {shift_id} does not exist, nothing updated")
                raise NotFoundError("Shift not found")

            await self.session.commit()
            shift = await self.session.get(Shift, shift_id, populate_existing=True)

            logger.info(f"Shift updated: {shift_id} -> status {shift.status}")
            return shift

        except NotFoundError:
            raise
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error updating shift {shift_id}: {e}")
            raise ServerError.from_exception(e)

    async def delete_shift(self, shift_id: int) -> None:
        try:
            result = await self.session.execute(
                delete(Shift)
                .where(Shift.id == shift_id)
                .returning(Shift.id)
                .execution_options(synchronize_session=False)
            )
            if result.scalar_one_or_none() is None:
                await self.session.rollback()
                logger.info(f"Shift {shift_id} not found, nothing deleted")
                raise NotFoundError("Shift not found")

            await self.session.commit()
            logger.info(f"Shift deleted: {shift_id}")

        except NotFoundError:
            raise
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error deleting shift {shift_id}: {e}")
            raise ServerError.from_exception(e)

    # endregion
