"""User service client.

The flight service uses this client to check that a user exists
before it stores a flight referencing that user.  The check is a
plain ``GET /users/{id}`` against the user service's base URL:

* a 2xx answer means the user exists;
* 404 means it does not;
* anything else (connection failure, timeout, other status) raises
  :class:`UpstreamUnavailableError`.

Requests are made through a ``requests.Session`` with an explicit
timeout.  No retries are attempted.
"""

from __future__ import annotations

import logging
from typing import Optional

import requests

from flight_booking_api.app.core.errors import UpstreamUnavailableError

logger = logging.getLogger(__name__)


class UserServiceClient:
    """Existence checks against the user service.

    Args:
        base_url: Base URL of the user service, e.g.
            ``http://localhost:3001``.
        timeout: Seconds to wait for connect and read before giving up.
        session: Optional requests session.  If not supplied a session
            will be created automatically.
    """

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = 5.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def check_exists(self, user_id: int) -> bool:
        """Return whether user ``user_id`` exists.

        Raises:
            UpstreamUnavailableError: the user service could not be
                reached, timed out or answered with an unexpected status.
        """
        url = f"{self.base_url}/users/{user_id}"
        try:
            logger.debug("Checking user %s at %s", user_id, url)
            response = self.session.get(url, timeout=self.timeout)
        except requests.Timeout as exc:
            logger.error("User service timed out after %ss: %s", self.timeout, exc)
            raise UpstreamUnavailableError(f"timed out after {self.timeout}s") from exc
        except requests.RequestException as exc:
            logger.error("User service request failed: %s", exc)
            raise UpstreamUnavailableError(str(exc)) from exc

        if 200 <= response.status_code < 300:
            return True
        if response.status_code == 404:
            return False
        logger.error("User service answered %s for user %s", response.status_code, user_id)
        raise UpstreamUnavailableError(f"unexpected status {response.status_code}")
