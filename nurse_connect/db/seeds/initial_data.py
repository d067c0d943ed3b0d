import logging
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from nurse_connect.core.security import get_password_hash
from nurse_connect.models.auth.user import User
from nurse_connect.models.organization.facility import Facility
from nurse_connect.models.shared.enums import UserRole

logger = logging.getLogger(__name__)

DEMO_FACILITY_EMAIL = "admin@generalhospital.org"
DEMO_FACILITY_PASSWORD = "facility123"
DEMO_NURSE_EMAIL = "nurse@nurseconnect.dev"
DEMO_NURSE_PASSWORD = "nurse123"

async def create_initial_data(session: AsyncSession):
    """Create demo records so a fresh database can be logged into"""
    try:
        logger.info("Creating initial data...")

        await create_demo_facility(session)
        await create_demo_nurse(session)

        await session.commit()
        logger.info("Initial data created successfully")
        return True

    except Exception as e:
        logger.error(f"Error creating initial data: {str(e)}")
        await session.rollback()
        raise

async def create_demo_facility(session: AsyncSession):
    result = await session.execute(
        select(Facility).where(Facility.contact_email == DEMO_FACILITY_EMAIL)
    )
    if result.scalar_one_or_none():
        return

    session.add(Facility(
        name="General Hospital",
        address="100 Main Street",
        city="Springfield",
        state="IL",
        zip_code="62701",
        contact_name="Dana Reyes",
        contact_phone="555-0100",
        contact_email=DEMO_FACILITY_EMAIL,
        password_hash=get_password_hash(DEMO_FACILITY_PASSWORD),
    ))
    logger.info(f"Created demo facility: {DEMO_FACILITY_EMAIL}")

async def create_demo_nurse(session: AsyncSession):
    result = await session.execute(
        select(User).where(User.email == DEMO_NURSE_EMAIL)
    )
    if result.scalar_one_or_none():
        return

    session.add(User(
        email=DEMO_NURSE_EMAIL,
        first_name="Sam",
        last_name="Carter",
        role=UserRole.NURSE.value,
        password_hash=get_password_hash(DEMO_NURSE_PASSWORD),
    ))
    logger.info(f"Created demo nurse: {DEMO_NURSE_EMAIL}")
