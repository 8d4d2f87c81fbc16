"""
RequestClient — one JSON request in, one Envelope out.

Injects the bearer token from the session store when there is one, and turns
every expected outcome (2xx, error status, no response at all) into a
Success or Failure. Nothing in the expected failure classes is raised.

The blocking requests call runs in a worker thread so the event loop keeps
serving other screens while a request is in flight.
"""

import asyncio
import json

import requests

from .config import log
from .constants import API_TIMEOUT, MSG_CONNECTION_FAILED, MSG_INVALID_RESPONSE
from .envelope import Success, Failure
from . import http_client


class RequestClient:
    def __init__(self, base_url, session_store, http=None, timeout=API_TIMEOUT):
        if not base_url:
            raise ValueError("base_url is required")
        self.base_url = base_url.rstrip("/")
        self._store = session_store
        self._http = http if http is not None else http_client.create_session()
        self._timeout = timeout

    async def _headers(self):
        headers = {"Accept": "application/json", "Content-Type": "application/json"}
        token = await self._store.token()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def call(self, endpoint, method="GET", body=None):
        """Issue one request and normalize the outcome. Never raises for
        connectivity or service errors."""
        method = method.upper()
        url = f"{self.base_url}{endpoint}"
        headers = await self._headers()
        data = json.dumps(body) if body is not None else None

        try:
            resp = await asyncio.to_thread(
                self._http.request,
                method,
                url,
                headers=headers,
                data=data,
                timeout=self._timeout,
            )
        except requests.ConnectionError as e:
            log.warning("%s %s network error: %s", method, endpoint, e)
            return Failure(MSG_CONNECTION_FAILED)
        except requests.RequestException as e:
            log.warning("%s %s failed: %s", method, endpoint, e)
            return Failure(str(e) or type(e).__name__)

        return self._normalize(method, endpoint, resp)

    def _normalize(self, method, endpoint, resp):
        status = resp.status_code
        try:
            parsed = resp.json()
        except ValueError:
            parsed = None
            is_json = False
        else:
            is_json = True

        if 200 <= status < 300:
            if not is_json:
                log.warning("%s %s: HTTP %d with non-JSON body", method, endpoint, status)
                return Failure(MSG_INVALID_RESPONSE, status)
            log.info("%s %s OK (HTTP %d)", method, endpoint, status)
            if isinstance(parsed, dict) and parsed.get("data") is not None:
                return Success(parsed["data"])
            return Success(parsed)

        message = None
        if isinstance(parsed, dict):
            message = parsed.get("error") or parsed.get("message")
        if not message or not isinstance(message, str):
            message = f"HTTP {status}"
        log.warning("%s %s failed: HTTP %d — %s", method, endpoint, status, message)
        return Failure(message, status)

    def close(self):
        try:
            self._http.close()
        except Exception:
            pass
