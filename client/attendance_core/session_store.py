"""
SessionStore — durable record of the signed-in user (token, role, profile).

The three values live under separate keys in a small JSON key-value file.
A write replaces the whole file in one step (temp file + os.replace), so a
crash mid-write leaves the previous record intact.

Only login and logout write here. RequestClient reads the token per call and
the route resolver reads the whole session at startup.
"""

import asyncio
import json
import os
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from .config import log
from .constants import KEY_TOKEN, KEY_ROLE, KEY_PROFILE, SESSION_KEYS, SESSION_FILE_NAME


class Role(str, Enum):
    ADMIN = "admin"
    STUDENT = "student"


@dataclass(frozen=True)
class Session:
    token: Optional[str] = None
    role: Optional[str] = None
    profile: Any = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token) and bool(self.role)

    @classmethod
    def empty(cls):
        return cls()


class JsonFileStorage:
    """Key-value storage backed by one JSON object on disk. Blocking I/O."""

    def __init__(self, path):
        self.path = Path(path)

    def _load(self):
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
            log.warning("Session storage unreadable (%s), treating as empty", e)
            return {}
        if not isinstance(data, dict):
            log.warning("Session storage holds %s, treating as empty", type(data).__name__)
            return {}
        return data

    def _dump(self, data):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=str(self.path.parent), prefix=".session-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self.path)
        except BaseException:
            try:
                os.unlink(tmp)
            except OSError:
                pass
            raise

    def get_many(self, keys):
        data = self._load()
        return {k: data.get(k) for k in keys}

    def set_many(self, values):
        data = self._load()
        data.update(values)
        self._dump(data)

    def remove_many(self, keys):
        data = self._load()
        for k in keys:
            data.pop(k, None)
        self._dump(data)


class SessionStore:
    def __init__(self, storage):
        self._storage = storage
        self._lock = asyncio.Lock()

    @classmethod
    def in_directory(cls, data_dir):
        return cls(JsonFileStorage(Path(data_dir) / SESSION_FILE_NAME))

    async def read(self) -> Session:
        """Load all three fields; any field never written comes back as None."""
        async with self._lock:
            values = await asyncio.to_thread(self._storage.get_many, SESSION_KEYS)
        return Session(
            token=values.get(KEY_TOKEN),
            role=values.get(KEY_ROLE),
            profile=values.get(KEY_PROFILE),
        )

    async def token(self) -> Optional[str]:
        session = await self.read()
        return session.token

    async def write(self, session: Session):
        """Persist token, role and profile in one storage operation."""
        if bool(session.token) != bool(session.role):
            raise ValueError("Session token and role must be set together")
        role = session.role.value if isinstance(session.role, Role) else session.role
        values = {KEY_TOKEN: session.token, KEY_ROLE: role, KEY_PROFILE: session.profile}
        async with self._lock:
            await asyncio.to_thread(self._storage.set_many, values)
        log.info("Session saved (role=%s)", role)

    async def clear(self):
        async with self._lock:
            await asyncio.to_thread(self._storage.remove_many, SESSION_KEYS)
        log.info("Session cleared")
