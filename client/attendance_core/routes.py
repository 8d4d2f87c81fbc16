"""
Startup route resolution: which screen to open first.
"""

from enum import Enum

from .config import log
from .session_store import Role


class Route(str, Enum):
    LOGIN = "Login"
    ADMIN_HOME = "AdminDashboard"
    STUDENT_HOME = "StudentDashboard"


_HOME_BY_ROLE = {
    Role.ADMIN.value: Route.ADMIN_HOME,
    Role.STUDENT.value: Route.STUDENT_HOME,
}


async def resolve_initial_route(store) -> Route:
    """Home screen for a signed-in admin or student, Login otherwise.

    Reads the session only; calling it repeatedly never changes state.
    """
    try:
        session = await store.read()
    except Exception as e:
        log.warning("Session read failed at startup: %s", e)
        return Route.LOGIN

    if not (session.token and session.role):
        return Route.LOGIN
    if not isinstance(session.role, str):
        log.warning("Stored role has unexpected type %s", type(session.role).__name__)
        return Route.LOGIN
    return _HOME_BY_ROLE.get(session.role, Route.LOGIN)
