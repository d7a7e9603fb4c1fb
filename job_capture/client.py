"""Client for the job tracker server's application API.

Saving a captured record is a single `POST /api/applications`. The server uses
session cookies for auth, so an unauthenticated client gets a 401 rather than
a redirect.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional

import httpx

from .models import ApplicationPayload

log = logging.getLogger(__name__)


class TrackerError(Exception):
    """Base class for tracker API failures."""


class NotAuthenticatedError(TrackerError):
    """The server rejected the request with 401."""


class SaveApplicationError(TrackerError):
    """The server answered with a non-2xx status other than 401."""

    def __init__(self, status_code: int, message: str = "Failed to save application") -> None:
        super().__init__(f"{message} (HTTP {status_code})")
        self.status_code = status_code


class TrackerConnectionError(TrackerError):
    """The server could not be reached."""


class TrackerClient:
    """Post captured applications to a tracker server."""

    applications_path = "/api/applications"

    def __init__(
        self,
        server_url: str,
        timeout_s: float = 20.0,
        cookies: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.BaseTransport] = None,
        max_retries: int = 3,
        backoff_s: float = 2.0,
    ) -> None:
        if not server_url:
            raise TrackerError("Please set your JobTracker server URL")
        self._server_url = server_url.rstrip("/")
        self._timeout = timeout_s
        self._cookies = dict(cookies or {})
        self._transport = transport
        self._max_retries = max_retries
        self._backoff_s = backoff_s

    @property
    def applications_url(self) -> str:
        return f"{self._server_url}{self.applications_path}"

    def _client(self) -> httpx.Client:
        return httpx.Client(
            timeout=self._timeout,
            follow_redirects=True,
            cookies=self._cookies,
            transport=self._transport,
        )

    def save_application(self, payload: ApplicationPayload) -> Dict[str, Any]:
        """Create an application on the server and return the created row.

        Raises:
            NotAuthenticatedError: on 401.
            SaveApplicationError: on any other non-2xx status.
            TrackerConnectionError: when the request never gets a response.
        """
        body = payload.to_json()
        retries = 0
        with self._client() as client:
            while True:
                try:
                    resp = client.post(self.applications_url, json=body)
                except httpx.RequestError as exc:
                    raise TrackerConnectionError(f"Error connecting to JobTracker server: {exc}") from exc

                if resp.status_code == 429 and retries < self._max_retries:
                    sleep_s = self._backoff_s * (2**retries)
                    log.warning("Rate limited by %s, retrying in %.1fs", self._server_url, sleep_s)
                    time.sleep(sleep_s)
                    retries += 1
                    continue
                break

        if resp.status_code == 401:
            raise NotAuthenticatedError("Please log in to your JobTracker account first")
        if not resp.is_success:
            raise SaveApplicationError(resp.status_code)

        log.info("Saved application: %s @ %s", payload.position, payload.company_name)
        if not resp.content:
            return {}
        try:
            return resp.json()
        except ValueError:
            return {}
