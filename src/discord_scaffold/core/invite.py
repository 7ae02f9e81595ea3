"""Bot invite-link resolution.

Looking up the application behind a bot token is a best-effort
convenience: every failure is folded into :class:`InviteUnavailable` so
the caller has to branch on the result type explicitly, and nothing
here ever raises.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from discord_scaffold.core.protocols import IdentityLookup
from discord_scaffold.exceptions import ScaffoldError

INVITE_URL_TEMPLATE: str = (
    "https://discord.com/oauth2/authorize?scope=bot&client_id={application_id}"
)
FALLBACK_MESSAGE: str = (
    "The given bot token was invalid so no invite link was generated."
)


@dataclass(frozen=True, slots=True)
class InviteLink:
    """The lookup succeeded and produced an application id."""

    application_id: str

    @property
    def url(self) -> str:
        """OAuth2 authorize URL for the bot."""
        return INVITE_URL_TEMPLATE.format(application_id=self.application_id)


@dataclass(frozen=True, slots=True)
class InviteUnavailable:
    """The lookup failed; *reason* is for diagnostics, not for the user."""

    reason: str


InviteResult = Union[InviteLink, InviteUnavailable]


class InviteResolver:
    """Turns a bot token into an :data:`InviteResult`.

    Parameters
    ----------
    lookup:
        Any object satisfying the :class:`IdentityLookup` protocol.
    """

    def __init__(self, lookup: IdentityLookup) -> None:
        self._lookup: IdentityLookup = lookup

    def resolve(self, token: str) -> InviteResult:
        """Look up *token* once; never raises."""
        try:
            record = self._lookup.fetch_application(token)
        except ScaffoldError as exc:
            return InviteUnavailable(str(exc))
        except Exception as exc:  # noqa: BLE001
            return InviteUnavailable(f"{type(exc).__name__}: {exc}")

        application_id = record.get("id") if isinstance(record, dict) else None
        # bool is an int subclass; reject it explicitly.
        if isinstance(application_id, bool) or not isinstance(application_id, (str, int)):
            return InviteUnavailable("response has no application id")
        application_id = str(application_id).strip()
        if not application_id:
            return InviteUnavailable("response has an empty application id")
        return InviteLink(application_id)


def describe_invite(result: InviteResult) -> str:
    """Render the line printed after the invite step."""
    if isinstance(result, InviteLink):
        return f"Invite your bot: {result.url}"
    return FALLBACK_MESSAGE
