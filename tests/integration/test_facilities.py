import pytest
from httpx import AsyncClient
from fastapi import status
from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError

from nurse_connect.core.security import decode_access_token, verify_password
from nurse_connect.models.organization.facility import Facility

NEW_FACILITY = {
    "name": "Mercy Clinic",
    "address": "9 Elm Road",
    "city": "Riverside",
    "state": "CA",
    "zip_code": "92501",
    "contact_name": "Jordan Lee",
    "contact_phone": "555-0199",
    "contact_email": "staffing@mercyclinic.org",
    "password": "Sup3rSecret!",
}


@pytest.mark.asyncio
class TestFacilityRegistration:

    async def test_register_returns_facility_and_token(self, client: AsyncClient):
        response = await client.post("/api/facility-auth/register", json=NEW_FACILITY)
        assert response.status_code == status.HTTP_201_CREATED

        data = response.json()
        assert data["facility"]["name"] == "Mercy Clinic"
        assert data["facility"]["contact_email"] == NEW_FACILITY["contact_email"]
        assert "password_hash" not in data["facility"]
        assert "password" not in data["facility"]
        assert NEW_FACILITY["password"] not in response.text

        claims = decode_access_token(data["token"])
        assert claims["type"] == "facility"
        assert claims["email"] == NEW_FACILITY["contact_email"]

    async def test_password_is_stored_hashed(self, client: AsyncClient, session_maker):
        await client.post("/api/facility-auth/register", json=NEW_FACILITY)

        async with session_maker() as session:
            facility = await session.scalar(
                select(Facility).where(Facility.contact_email == NEW_FACILITY["contact_email"])
            )
        assert facility.password_hash != NEW_FACILITY["password"]
        assert verify_password(NEW_FACILITY["password"], facility.password_hash)

    async def test_registered_facility_can_log_in(self, client: AsyncClient):
        await client.post("/api/facility-auth/register", json=NEW_FACILITY)

        response = await client.post(
            "/api/facility-auth/login",
            json={"email": NEW_FACILITY["contact_email"], "password": NEW_FACILITY["password"]},
        )
        assert response.status_code == status.HTTP_200_OK

    async def test_duplicate_email_rejected(self, client: AsyncClient):
        await client.post("/api/facility-auth/register", json=NEW_FACILITY)
        response = await client.post("/api/facility-auth/register", json=NEW_FACILITY)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "Email already registered"

    async def test_missing_password_rejected(self, client: AsyncClient):
        payload = {k: v for k, v in NEW_FACILITY.items() if k != "password"}
        response = await client.post("/api/facility-auth/register", json=payload)
        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.asyncio
class TestFacilityDirectory:

    async def test_list_is_ordered_by_name_without_hashes(self, client: AsyncClient):
        await client.post("/api/facility-auth/register", json=NEW_FACILITY)
        await client.post(
            "/api/facility-auth/register",
            json={**NEW_FACILITY, "name": "Aspen Care", "contact_email": "hr@aspencare.org"},
        )

        response = await client.get("/api/facilities")
        assert response.status_code == status.HTTP_200_OK

        facilities = response.json()
        names = [f["name"] for f in facilities]
        assert names == sorted(names)
        assert {"Aspen Care", "General Hospital", "Mercy Clinic"} <= set(names)
        assert all("password_hash" not in f for f in facilities)

    async def test_get_by_id(self, client: AsyncClient):
        response = await client.get("/api/facilities/1")
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["name"] == "General Hospital"
        assert "password_hash" not in response.json()

    async def test_get_missing_facility(self, client: AsyncClient):
        response = await client.get("/api/facilities/999")
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Facility not found"}


@pytest.mark.asyncio
async def test_facility_with_shifts_cannot_be_removed(create_shift, session_maker):
    assert (await create_shift()).status_code == status.HTTP_201_CREATED

    async with session_maker() as session:
        with pytest.raises(IntegrityError):
            await session.execute(delete(Facility).where(Facility.id == 1))
        await session.rollback()

        assert await session.get(Facility, 1) is not None
