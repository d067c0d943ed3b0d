import pytest
from httpx import AsyncClient
from fastapi import status
from sqlalchemy import insert

from nurse_connect.core.security import get_password_hash
from nurse_connect.models.auth.user import User

NURSE_ID = 1


async def add_nurse(session_maker, email: str) -> int:
    async with session_maker() as session:
        result = await session.execute(
            insert(User)
            .values(email=email, first_name="Alex", last_name="Kim", role="nurse",
                    password_hash=get_password_hash("nurse-pass"))
            .returning(User.id)
        )
        user_id = result.scalar_one()
        await session.commit()
    return user_id


@pytest.mark.asyncio
class TestApplications:

    async def test_apply_to_open_shift(self, client: AsyncClient, create_shift):
        shift = (await create_shift()).json()

        response = await client.post(
            "/api/applications",
            json={"shift_id": shift["id"], "user_id": NURSE_ID, "notes": "Available all day"},
        )
        assert response.status_code == status.HTTP_201_CREATED

        data = response.json()
        assert data["status"] == "pending"
        assert data["shift_id"] == shift["id"]
        assert data["user_id"] == NURSE_ID
        assert data["notes"] == "Available all day"

    async def test_cannot_apply_twice(self, client: AsyncClient, create_shift):
        shift = (await create_shift()).json()
        payload = {"shift_id": shift["id"], "user_id": NURSE_ID}

        await client.post("/api/applications", json=payload)
        response = await client.post("/api/applications", json=payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "Already applied to this shift"

    async def test_apply_to_missing_shift(self, client: AsyncClient):
        response = await client.post("/api/applications", json={"shift_id": 999, "user_id": NURSE_ID})
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Shift not found"}

    async def test_apply_as_unknown_user(self, client: AsyncClient, create_shift):
        shift = (await create_shift()).json()
        response = await client.post("/api/applications", json={"shift_id": shift["id"], "user_id": 42})
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "User not found"}

    async def test_accepting_fills_the_shift(self, client: AsyncClient, create_shift, session_maker):
        shift = (await create_shift()).json()
        other_nurse = await add_nurse(session_maker, "alex@nurseconnect.dev")

        first = (await client.post("/api/applications", json={"shift_id": shift["id"], "user_id": NURSE_ID})).json()
        second = (await client.post("/api/applications", json={"shift_id": shift["id"], "user_id": other_nurse})).json()

        accepted = await client.put(f"/api/applications/{first['id']}/status", json={"status": "accepted"})
        assert accepted.status_code == status.HTTP_200_OK
        assert accepted.json()["status"] == "accepted"

        fetched = await client.get(f"/api/shifts/{shift['id']}")
        assert fetched.json()["status"] == "filled"

        refused = await client.put(f"/api/applications/{second['id']}/status", json={"status": "accepted"})
        assert refused.status_code == status.HTTP_400_BAD_REQUEST
        assert refused.json()["error"] == "Shift is no longer open"

        rejected = await client.put(f"/api/applications/{second['id']}/status", json={"status": "rejected"})
        assert rejected.json()["status"] == "rejected"

    async def test_cannot_apply_to_filled_shift(self, client: AsyncClient, create_shift, session_maker):
        shift = (await create_shift()).json()
        await client.put(f"/api/shifts/edit/{shift['id']}", json={**{
            k: shift[k] for k in ("facility_id", "unit", "shift_type", "start_time", "end_time", "hourly_rate")
        }, "status": "filled"})

        response = await client.post("/api/applications", json={"shift_id": shift["id"], "user_id": NURSE_ID})
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "Shift is not open for applications"

    async def test_invalid_status_rejected(self, client: AsyncClient, create_shift):
        shift = (await create_shift()).json()
        application = (await client.post("/api/applications", json={"shift_id": shift["id"], "user_id": NURSE_ID})).json()

        response = await client.put(f"/api/applications/{application['id']}/status", json={"status": "hired"})
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    async def test_update_missing_application(self, client: AsyncClient):
        response = await client.put("/api/applications/999/status", json={"status": "rejected"})
        assert response.status_code == status.HTTP_404_NOT_FOUND

    async def test_list_and_get(self, client: AsyncClient, create_shift):
        icu = (await create_shift()).json()
        er = (await create_shift(unit="ER")).json()
        await client.post("/api/applications", json={"shift_id": icu["id"], "user_id": NURSE_ID})
        er_application = (await client.post("/api/applications", json={"shift_id": er["id"], "user_id": NURSE_ID})).json()

        everything = await client.get("/api/applications", params={"user_id": NURSE_ID})
        assert len(everything.json()) == 2

        response = await client.get("/api/applications", params={"shift_id": er["id"]})
        listed = response.json()
        assert [a["id"] for a in listed] == [er_application["id"]]
        assert listed[0]["unit"] == "ER"
        assert listed[0]["facility_name"] == "General Hospital"

        pending = await client.get("/api/applications", params={"status": "pending"})
        assert len(pending.json()) == 2

        fetched = await client.get(f"/api/applications/{er_application['id']}")
        assert fetched.status_code == status.HTTP_200_OK
        assert fetched.json()["shift_id"] == er["id"]

        missing = await client.get("/api/applications/999")
        assert missing.status_code == status.HTTP_404_NOT_FOUND

    async def test_deleting_shift_removes_its_applications(self, client: AsyncClient, create_shift):
        shift = (await create_shift()).json()
        application = (await client.post("/api/applications", json={"shift_id": shift["id"], "user_id": NURSE_ID})).json()

        response = await client.delete(f"/api/shifts/{shift['id']}")
        assert response.status_code == status.HTTP_200_OK

        gone = await client.get(f"/api/applications/{application['id']}")
        assert gone.status_code == status.HTTP_404_NOT_FOUND

        listed = await client.get("/api/applications", params={"user_id": NURSE_ID})
        assert listed.json() == []
