"""Infrastructure: Discord REST API lookup of the bot's application.

This module is the **only** place that talks to Discord.  Every
``requests`` exception and every unusable response is re-raised as
:class:`~discord_scaffold.exceptions.IdentityLookupError`; deciding that
the failure is harmless is the core layer's job.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from discord_scaffold.exceptions import IdentityLookupError
from discord_scaffold.version import tool_name_and_version

logger = logging.getLogger(__name__)

APPLICATION_PATH: str = "/oauth2/applications/@me"


class DiscordApplicationClient:
    """Concrete :class:`IdentityLookup` backed by :mod:`requests`.

    Parameters
    ----------
    api_base:
        Discord REST API root, e.g. ``https://discord.com/api``.
    timeout:
        Seconds to wait for the response; ``None`` waits indefinitely.
    session:
        Optional :class:`requests.Session` (tests inject a mock).
    """

    def __init__(
        self,
        api_base: str = "https://discord.com/api",
        *,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._api_base = api_base.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()

    def _headers(self, token: str) -> dict[str, str]:
        return {
            "Authorization": f"Bot {token}",
            "Accept": "application/json",
            "User-Agent": tool_name_and_version(),
        }

    def fetch_application(self, token: str) -> dict[str, Any]:
        """Return the application record for the bot *token*.

        Raises
        ------
        IdentityLookupError
            On an empty token, transport error, non-2xx status, or a body
            that is not a JSON object.
        """
        if not token.strip():
            raise IdentityLookupError("Bot token is empty.")

        url = f"{self._api_base}{APPLICATION_PATH}"
        try:
            response = self._session.get(
                url,
                headers=self._headers(token),
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise IdentityLookupError(f"Discord lookup failed: {exc}") from exc

        logger.debug("GET %s -> %s", url, response.status_code)
        if not 200 <= response.status_code < 300:
            raise IdentityLookupError(
                f"Discord API error {response.status_code} for GET {APPLICATION_PATH}",
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise IdentityLookupError("Discord returned a non-JSON response.") from exc

        if not isinstance(payload, dict):
            raise IdentityLookupError("Discord returned an unexpected response shape.")
        return payload
