"""Tests for project endpoints."""

from datetime import timedelta
from uuid import uuid4

import pytest
from sqlmodel import select

from src.zenkai.models import Message, MessageRole, MessageType, Project, User
from tests.factories import ProjectFactory, UserFactory, utc_now
from tests.helpers import create_project_with_messages

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


class TestCreateProject:
    async def test_creates_project_with_first_message(self, client, alice, db_session, events):
        response = await client.post(
            "/api/v1/projects", json={"value": "Build a todo app"}, headers=alice
        )

        assert response.status_code == 201
        data = response.json()
        assert data["user_id"] == "user_alice"
        assert "-" in data["name"]

        messages = (await db_session.execute(select(Message))).scalars().all()
        assert len(messages) == 1
        assert str(messages[0].project_id) == data["id"]
        assert messages[0].content == "Build a todo app"
        assert messages[0].role == MessageRole.USER.value
        assert messages[0].type == MessageType.RESULT.value

    async def test_emits_one_event_after_commit(self, client, alice, db_session, events):
        response = await client.post(
            "/api/v1/projects", json={"value": "Build a todo app"}, headers=alice
        )

        project_id = response.json()["id"]
        assert len(events.sent) == 1
        event, event_id = events.sent[0]
        assert event.value == "Build a todo app"
        assert event.project_id == project_id

        message = (await db_session.execute(select(Message))).scalars().one()
        assert event_id == str(message.id)

    async def test_creates_caller_row_once(self, client, alice, db_session):
        await client.post("/api/v1/projects", json={"value": "one"}, headers=alice)
        await client.post("/api/v1/projects", json={"value": "two"}, headers=alice)

        users = (await db_session.execute(select(User))).scalars().all()
        assert [u.id for u in users] == ["user_alice"]

    async def test_empty_value_rejected_without_side_effects(
        self, client, alice, db_session, events
    ):
        response = await client.post("/api/v1/projects", json={"value": ""}, headers=alice)

        assert response.status_code == 422
        assert "Value is required." in response.text
        assert (await db_session.execute(select(Project))).scalars().all() == []
        assert events.sent == []

    async def test_too_long_value_rejected(self, client, alice, db_session, events):
        response = await client.post(
            "/api/v1/projects", json={"value": "a" * 10001}, headers=alice
        )

        assert response.status_code == 422
        assert "Value is too long." in response.text
        assert (await db_session.execute(select(Project))).scalars().all() == []
        assert events.sent == []

    async def test_requires_authentication(self, client, events):
        response = await client.post("/api/v1/projects", json={"value": "Build a todo app"})

        assert response.status_code == 401
        assert events.sent == []


class TestListProjects:
    async def test_only_callers_projects_newest_first(self, client, alice, db_session):
        now = utc_now()
        db_session.add(UserFactory.for_caller("user_alice"))
        db_session.add(UserFactory.for_caller("user_bob"))
        older = ProjectFactory.build(user_id="user_alice", updated_at=now - timedelta(hours=1))
        newer = ProjectFactory.build(user_id="user_alice", updated_at=now)
        foreign = ProjectFactory.build(user_id="user_bob", updated_at=now + timedelta(hours=1))
        db_session.add_all([older, newer, foreign])
        await db_session.commit()

        response = await client.get("/api/v1/projects", headers=alice)

        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == [str(newer.id), str(older.id)]

    async def test_empty_for_new_caller(self, client, alice):
        response = await client.get("/api/v1/projects", headers=alice)
        assert response.status_code == 200
        assert response.json() == []


class TestGetProject:
    async def test_owner_can_read(self, client, alice, db_session):
        project, _ = await create_project_with_messages(db_session, "user_alice", ["hi"])

        response = await client.get(f"/api/v1/projects/{project.id}", headers=alice)

        assert response.status_code == 200
        assert response.json()["name"] == project.name

    async def test_other_caller_gets_not_found(self, client, bob, db_session):
        project, _ = await create_project_with_messages(db_session, "user_alice", ["hi"])

        response = await client.get(f"/api/v1/projects/{project.id}", headers=bob)

        assert response.status_code == 404
        assert response.json()["detail"] == "Project not found."

    async def test_unknown_project_looks_the_same(self, client, bob, db_session):
        project, _ = await create_project_with_messages(db_session, "user_alice", ["hi"])
        unknown_id = uuid4()

        foreign = await client.get(f"/api/v1/projects/{project.id}", headers=bob)
        missing = await client.get(f"/api/v1/projects/{unknown_id}", headers=bob)

        assert foreign.status_code == missing.status_code == 404
        assert foreign.json()["detail"] == missing.json()["detail"]

    async def test_malformed_id_gets_not_found(self, client, alice):
        response = await client.get("/api/v1/projects/not-a-uuid", headers=alice)

        assert response.status_code == 404
        assert response.json()["detail"] == "Project not found."
