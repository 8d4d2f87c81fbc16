"""
ClientApp — wires config, session storage, transport and services.

A UI shell builds one ClientApp, awaits start() to pick the first screen,
hands `client`/`auth` to its screens and asks for a fresh capture machine
each time the mark-attendance screen opens.
"""

from .config import log, load_config, setup_logging
from .constants import CLIENT_VERSION
from .session_store import SessionStore
from .request_client import RequestClient
from .auth import AuthService
from .routes import Route, resolve_initial_route
from .recognition import SimulatedRecognizer
from .capture import AttendanceCaptureMachine
from . import http_client


class ClientApp:
    def __init__(self, config=None, store=None, http=None):
        self.config = config or load_config()
        self.store = store or SessionStore.in_directory(self.config.data_dir)
        self.client = RequestClient(
            self.config.server_url,
            self.store,
            http=http if http is not None else http_client.create_session(),
            timeout=self.config.request_timeout,
        )
        self.auth = AuthService(self.client, self.store)

    @classmethod
    def from_environment(cls):
        config = load_config()
        setup_logging(config.log_file)
        return cls(config)

    async def start(self) -> Route:
        route = await resolve_initial_route(self.store)
        log.info("v%s started (server=%s, route=%s)", CLIENT_VERSION, self.config.server_url, route.value)
        return route

    async def logout(self) -> Route:
        await self.auth.logout()
        return Route.LOGIN

    def new_capture(self, request_permission, recognizer=None, location=None):
        recognizer = recognizer or SimulatedRecognizer(delay=self.config.recognition_delay)
        return AttendanceCaptureMachine(self.client, request_permission, recognizer, location)

    def close(self):
        self.client.close()
