"""
Roster API: Teacher Endpoint Tests
====================================

What:  /teachers through the same router factory as /students.
Why:   The shared CRUD path is covered by test_students_api.py; these tests
       focus on what differs: required department, one-to-many courses and
       delete leaving courses behind.
"""

import pytest
from sqlalchemy import select

from roster.models import Course


class TestCreateTeacher:

    @pytest.mark.asyncio
    async def test_create_returns_201(self, test_client):
        response = await test_client.post(
            "/teachers", json={"name": "Alan Turing", "department": "Mathematics"}
        )

        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "Alan Turing"
        assert body["department"] == "Mathematics"
        assert isinstance(body["id"], int)

    @pytest.mark.asyncio
    async def test_department_is_required(self, test_client):
        response = await test_client.post("/teachers", json={"name": "Alan Turing"})
        assert response.status_code == 422


class TestListTeachers:

    @pytest.mark.asyncio
    async def test_populate_course(self, test_client, seed_teacher):
        await seed_teacher("Alan", "Mathematics", ["Computability"])
        await seed_teacher("Grace", "Computing", [])

        body = (await test_client.get("/teachers", params={"populate": "Course"})).json()

        by_name = {row["name"]: row for row in body["data"]}
        assert [c["name"] for c in by_name["Alan"]["Course"]] == ["Computability"]
        assert by_name["Alan"]["Course"][0]["teacherId"] == by_name["Alan"]["id"]
        assert by_name["Grace"]["Course"] == []

    @pytest.mark.asyncio
    async def test_total_counts_teachers(self, test_client, seed_teacher):
        await seed_teacher("Alan", "Mathematics", ["A", "B", "C"])
        await seed_teacher("Grace", "Computing", ["D"])

        body = (await test_client.get("/teachers", params={"limit": "1"})).json()

        assert body["meta"] == {"totalItems": 2, "page": 1, "totalPages": 2}
        assert len(body["data"]) == 1
        assert "Course" not in body["data"][0]


class TestGetTeacher:

    @pytest.mark.asyncio
    async def test_courses_always_joined(self, test_client, seed_teacher):
        teacher_id = await seed_teacher("Alan", "Mathematics", ["Computability"])

        body = (await test_client.get(f"/teachers/{teacher_id}")).json()

        assert body["department"] == "Mathematics"
        assert [c["name"] for c in body["Course"]] == ["Computability"]

    @pytest.mark.asyncio
    async def test_unknown_id_returns_404(self, test_client):
        response = await test_client.get("/teachers/99999")

        assert response.status_code == 404
        assert response.json() == {"message": "Not found"}


class TestUpdateTeacher:

    @pytest.mark.asyncio
    async def test_partial_patch_keeps_department(self, test_client):
        created = (
            await test_client.post("/teachers", json={"name": "Alan", "department": "Maths"})
        ).json()

        updated = (
            await test_client.put(f"/teachers/{created['id']}", json={"name": "A. M. Turing"})
        ).json()

        assert updated["name"] == "A. M. Turing"
        assert updated["department"] == "Maths"

    @pytest.mark.asyncio
    async def test_null_department_is_rejected(self, test_client):
        created = (
            await test_client.post("/teachers", json={"name": "Alan", "department": "Maths"})
        ).json()

        response = await test_client.put(
            f"/teachers/{created['id']}", json={"department": None}
        )

        assert response.status_code == 422


class TestDeleteTeacher:

    @pytest.mark.asyncio
    async def test_delete_orphans_courses(self, test_client, seed_teacher, session_factory):
        teacher_id = await seed_teacher("Alan", "Mathematics", ["Computability"])

        response = await test_client.delete(f"/teachers/{teacher_id}")
        assert response.json() == {"message": "Deleted"}
        assert (await test_client.get(f"/teachers/{teacher_id}")).status_code == 404

        async with session_factory() as session:
            course = (await session.execute(select(Course))).scalar_one()
        assert course.name == "Computability"
        assert course.teacher_id is None

    @pytest.mark.asyncio
    async def test_unknown_id_returns_404(self, test_client):
        response = await test_client.delete("/teachers/99999")
        assert response.status_code == 404
