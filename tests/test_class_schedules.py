import pytest
from httpx import AsyncClient

from app.core.enums import GRADES, SECTIONS


@pytest.mark.asyncio
async def test_empty_class_schedule(client: AsyncClient) -> None:
    response = await client.get("/api/class-schedules/10/1")
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_non_numeric_grade_or_section(client: AsyncClient) -> None:
    response = await client.get("/api/class-schedules/ten/1")
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid grade or section"}

    response = await client.post("/api/class-schedules/10/x", json={"slots": []})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid grade or section"}


@pytest.mark.asyncio
async def test_class_schedule_resolves_teachers_and_sorts(client: AsyncClient, teacher: dict) -> None:
    tid = teacher["id"]
    for day, period in (("Tuesday", 2), ("Sunday", 5), ("Sunday", 1)):
        await client.post(
            "/api/schedule-slots",
            json={"teacherId": tid, "day": day, "period": period, "grade": 11, "section": 4},
        )
    # different class, excluded
    await client.post(
        "/api/schedule-slots",
        json={"teacherId": tid, "day": "Sunday", "period": 3, "grade": 11, "section": 5},
    )

    response = await client.get("/api/class-schedules/11/4")
    assert response.status_code == 200
    assert response.json() == [
        {"day": "Sunday", "period": 1, "subject": "Mathematics", "teacherName": "Ahmad Saleh"},
        {"day": "Sunday", "period": 5, "subject": "Mathematics", "teacherName": "Ahmad Saleh"},
        {"day": "Tuesday", "period": 2, "subject": "Mathematics", "teacherName": "Ahmad Saleh"},
    ]


@pytest.mark.asyncio
async def test_deleted_teacher_resolves_to_unknown(client: AsyncClient, teacher: dict) -> None:
    await client.post(
        "/api/schedule-slots",
        json={"teacherId": teacher["id"], "day": "Monday", "period": 3, "grade": 12, "section": 2},
    )
    await client.delete(f"/api/teachers/{teacher['id']}")

    response = await client.get("/api/class-schedules/12/2")
    assert response.json() == [
        {"day": "Monday", "period": 3, "subject": "Unknown", "teacherName": "Unknown"},
    ]


@pytest.mark.asyncio
async def test_save_then_fetch_class_schedule(client: AsyncClient) -> None:
    body = {"slots": [{"day": "Sunday", "period": 1, "teacherId": "t1"}]}
    response = await client.post("/api/class-schedules/10/1", json=body)
    assert response.status_code == 201
    created = response.json()
    assert len(created) == 1
    assert created[0]["grade"] == 10
    assert created[0]["section"] == 1

    fetched = await client.get("/api/class-schedules/10/1")
    rows = fetched.json()
    assert len(rows) == 1
    assert rows[0]["day"] == "Sunday"
    assert rows[0]["period"] == 1


@pytest.mark.asyncio
async def test_save_replaces_only_that_class(client: AsyncClient, teacher: dict) -> None:
    tid = teacher["id"]
    await client.post(
        "/api/schedule-slots",
        json={"teacherId": tid, "day": "Sunday", "period": 1, "grade": 10, "section": 1},
    )
    await client.post(
        "/api/schedule-slots",
        json={"teacherId": tid, "day": "Sunday", "period": 1, "grade": 10, "section": 2},
    )

    body = {
        "slots": [
            {"day": "Wednesday", "period": 4, "teacherId": tid, "grade": 12, "section": 8},
        ]
    }
    response = await client.post("/api/class-schedules/10/1", json=body)
    assert response.status_code == 201
    # path grade/section win over the body
    assert (response.json()[0]["grade"], response.json()[0]["section"]) == (10, 1)

    rows = (await client.get("/api/class-schedules/10/1")).json()
    assert [(r["day"], r["period"]) for r in rows] == [("Wednesday", 4)]

    untouched = (await client.get("/api/class-schedules/10/2")).json()
    assert len(untouched) == 1
    assert (await client.get("/api/class-schedules/12/8")).json() == []


@pytest.mark.asyncio
async def test_save_class_schedule_invalid(client: AsyncClient) -> None:
    response = await client.post("/api/class-schedules/10/1", json={"slots": None})
    assert response.status_code == 400
    assert response.json() == {"error": "Slots must be an array"}

    response = await client.post(
        "/api/class-schedules/10/1",
        json={"slots": [{"day": "Sunday", "period": 1}]},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid data"


@pytest.mark.asyncio
async def test_save_for_unlisted_grade_fails_validation(client: AsyncClient) -> None:
    response = await client.post(
        "/api/class-schedules/9/1",
        json={"slots": [{"day": "Sunday", "period": 1, "teacherId": "t1"}]},
    )
    assert response.status_code == 400
    assert (await client.get("/api/schedule-slots")).json() == []


@pytest.mark.asyncio
async def test_all_class_schedules_overview(client: AsyncClient, teacher: dict) -> None:
    await client.post(
        "/api/schedule-slots",
        json={"teacherId": teacher["id"], "day": "Thursday", "period": 2, "grade": 11, "section": 3},
    )

    response = await client.get("/api/class-schedules")
    assert response.status_code == 200
    data = response.json()
    assert len(data) == len(GRADES) * len(SECTIONS)
    assert (data[0]["grade"], data[0]["section"]) == (10, 1)
    assert (data[-1]["grade"], data[-1]["section"]) == (12, 8)

    by_class = {(c["grade"], c["section"]): c["slots"] for c in data}
    assert by_class[(11, 3)] == [
        {"day": "Thursday", "period": 2, "subject": "Mathematics", "teacherName": "Ahmad Saleh"},
    ]
    assert by_class[(10, 1)] == []


@pytest.mark.asyncio
async def test_invalid_class_save_keeps_existing_slots(client: AsyncClient, teacher: dict) -> None:
    seeded = await client.post(
        "/api/schedule-slots",
        json={"teacherId": teacher["id"], "day": "Sunday", "period": 1, "grade": 10, "section": 1},
    )
    assert seeded.status_code == 201

    body = {
        "slots": [
            {"day": "Monday", "period": 2, "teacherId": teacher["id"]},
            {"day": "Monday", "period": 9, "teacherId": teacher["id"]},
        ]
    }
    response = await client.post("/api/class-schedules/10/1", json=body)
    assert response.status_code == 400
    assert response.json()["details"][0]["loc"] == ["slots", 1, "period"]

    slots = (await client.get("/api/schedule-slots")).json()
    assert [s["id"] for s in slots] == [seeded.json()["id"]]
    rows = (await client.get("/api/class-schedules/10/1")).json()
    assert [(r["day"], r["period"]) for r in rows] == [("Sunday", 1)]
