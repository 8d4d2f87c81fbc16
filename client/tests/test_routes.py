"""
Startup route resolution across every stored session combination.
"""
from __future__ import annotations

import json

import pytest

from attendance_core.routes import Route, resolve_initial_route
from attendance_core.session_store import Session, SessionStore, JsonFileStorage


pytestmark = pytest.mark.anyio


def store_with(tmp_path, **values):
    path = tmp_path / "session.json"
    path.write_text(json.dumps(values))
    return SessionStore(JsonFileStorage(path))


@pytest.mark.parametrize(
    "values, expected",
    [
        ({"userToken": "t", "userRole": "admin"}, Route.ADMIN_HOME),
        ({"userToken": "t", "userRole": "student"}, Route.STUDENT_HOME),
        ({"userToken": "t"}, Route.LOGIN),
        ({"userRole": "admin"}, Route.LOGIN),
        ({"userToken": "", "userRole": "admin"}, Route.LOGIN),
        ({"userToken": "t", "userRole": "teacher"}, Route.LOGIN),
        ({"userToken": "t", "userRole": ["admin"]}, Route.LOGIN),
        ({"userToken": "t", "userRole": {"name": "admin"}}, Route.LOGIN),
        ({}, Route.LOGIN),
    ],
)
async def test_route_for_stored_session(tmp_path, values, expected):
    assert await resolve_initial_route(store_with(tmp_path, **values)) is expected


async def test_after_clear_routes_to_login(store):
    await store.write(Session(token="t1", role="admin", profile={}))
    assert await resolve_initial_route(store) is Route.ADMIN_HOME

    await store.clear()

    assert await resolve_initial_route(store) is Route.LOGIN


async def test_read_failure_routes_to_login():
    class BrokenStore:
        async def read(self):
            raise OSError("disk gone")

    assert await resolve_initial_route(BrokenStore()) is Route.LOGIN


async def test_resolution_is_idempotent(store):
    await store.write(Session(token="t1", role="student", profile={"studentName": "Sam"}))

    first = await resolve_initial_route(store)
    second = await resolve_initial_route(store)

    assert first is second is Route.STUDENT_HOME
    assert await store.read() == Session("t1", "student", {"studentName": "Sam"})
