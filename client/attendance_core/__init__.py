"""
attendance_core — headless core of the attendance mobile client
==============================================================
Architecture: asyncio, single event loop. Blocking I/O runs in worker threads.

  constants.py       → Version, timeouts, storage keys, user-facing messages
  config.py          → Paths, logging, ClientConfig load/save
  errors.py          → ValidationError, InvalidTransition
  http_client.py     → requests.Session with pooling, no retries, CA bundle
  envelope.py        → Success / Failure result of every remote call
  request_client.py  → RequestClient (bearer injection, error normalization)
  session_store.py   → Session, SessionStore (atomic JSON key-value file)
  routes.py          → Route, resolve_initial_route()
  auth.py            → AuthService (teacher/student login, logout)
  api.py             → Endpoint wrappers for dashboards, courses, notifications
  recognition.py     → SimulatedRecognizer (opaque face capture)
  capture.py         → AttendanceCaptureMachine (permission → scan → submit)
  app.py             → ClientApp composition root
"""

from .envelope import Envelope, Success, Failure
from .errors import ClientError, ValidationError, InvalidTransition
from .session_store import Role, Session, SessionStore, JsonFileStorage
from .request_client import RequestClient
from .routes import Route, resolve_initial_route
from .auth import AuthService
from .capture import AttendanceCaptureMachine, AttendanceResult, Phase
from .recognition import SimulatedRecognizer
from .config import ClientConfig, load_config, save_config, setup_logging
from .app import ClientApp

__all__ = [
    "Envelope", "Success", "Failure",
    "ClientError", "ValidationError", "InvalidTransition",
    "Role", "Session", "SessionStore", "JsonFileStorage",
    "RequestClient",
    "Route", "resolve_initial_route",
    "AuthService",
    "AttendanceCaptureMachine", "AttendanceResult", "Phase",
    "SimulatedRecognizer",
    "ClientConfig", "load_config", "save_config", "setup_logging",
    "ClientApp",
]
