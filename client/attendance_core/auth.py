"""
Login and logout — the only code that writes the session store.
"""

from .config import log
from .constants import (
    MIN_PASSWORD_LENGTH, MSG_FILL_ALL_FIELDS, MSG_PASSWORD_TOO_SHORT,
    MSG_ENTER_STUDENT_ID, MSG_INVALID_LOGIN_RESPONSE,
)
from .envelope import Success, Failure
from .errors import ValidationError
from .session_store import Session, Role


def is_valid_password(password):
    return len(str(password or "")) >= MIN_PASSWORD_LENGTH


def welcome_message(session):
    profile = session.profile if isinstance(session.profile, dict) else {}
    name = profile.get("adminName") or profile.get("studentName") or ""
    return f"Welcome back, {name}!" if name else "Welcome back!"


class AuthService:
    def __init__(self, client, store):
        self.client = client
        self.store = store

    async def teacher_login(self, unique_id, password):
        unique_id = str(unique_id or "").strip()
        if not unique_id or not str(password or "").strip():
            raise ValidationError(MSG_FILL_ALL_FIELDS)
        if not is_valid_password(password):
            raise ValidationError(MSG_PASSWORD_TOO_SHORT)

        envelope = await self.client.call(
            "/auth/admin/login", "POST", {"uniqueId": unique_id, "password": password},
        )
        return await self._complete_login(envelope, Role.ADMIN)

    async def student_login(self, student_id):
        student_id = str(student_id or "").strip()
        if not student_id:
            raise ValidationError(MSG_ENTER_STUDENT_ID)

        envelope = await self.client.call(
            "/auth/student/login", "POST", {"studentId": student_id},
        )
        return await self._complete_login(envelope, Role.STUDENT)

    async def _complete_login(self, envelope, role):
        """Persist the session for a successful login. Returns the envelope."""
        if not isinstance(envelope, Success):
            log.warning("Login (%s) rejected: %s", role.value, envelope.message)
            return envelope

        data = envelope.data if isinstance(envelope.data, dict) else {}
        token = data.get("token")
        if not token:
            log.error("Login (%s) response carried no token", role.value)
            return Failure(MSG_INVALID_LOGIN_RESPONSE)

        await self.store.write(Session(token=token, role=role.value, profile=data.get("user")))
        log.info("Logged in as %s", role.value)
        return envelope

    async def logout(self):
        await self.store.clear()
        log.info("Logged out")
