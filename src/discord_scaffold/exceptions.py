"""Custom exception hierarchy for discord-scaffold.

All exceptions that cross layer boundaries must inherit from
:class:`ScaffoldError`.  Raw ``OSError``, ``subprocess`` and ``requests``
exceptions must NEVER propagate beyond the infrastructure layer; they
are caught there and re-raised as a typed subclass defined here.

Hierarchy
---------
ScaffoldError
├── PromptCancelledError
├── UpdateDeclinedError
├── TemplateError
├── FilesystemError
├── InstallFailedError
│   └── NpmNotFoundError
├── IdentityLookupError
└── EnvironmentError
"""

from __future__ import annotations


class ScaffoldError(Exception):
    """Base exception for all discord-scaffold errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- User input ------------------------------------------------------------

class PromptCancelledError(ScaffoldError):
    """Raised when the user cancels an interactive prompt (Ctrl+C / Esc)."""


class UpdateDeclinedError(ScaffoldError):
    """Raised when the user declines to update an existing directory.

    This is a deliberate abort rather than a failure; the CLI renders it
    as a plain quitting message.
    """


# --- Template / filesystem -------------------------------------------------

class TemplateError(ScaffoldError):
    """Raised when the bundled template is missing or unreadable."""


class FilesystemError(ScaffoldError):
    """Raised when creating, copying or writing files fails."""


# --- Dependency installation -----------------------------------------------

class InstallFailedError(ScaffoldError):
    """Raised when the dependency installer exits with a non-zero status."""

    def __init__(
        self,
        message: str,
        *,
        returncode: int | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.returncode: int | None = returncode


class NpmNotFoundError(InstallFailedError):
    """Raised when the npm executable cannot be located on PATH."""


# --- Discord API -----------------------------------------------------------

class IdentityLookupError(ScaffoldError):
    """Raised when the Discord application lookup fails for any reason."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(ScaffoldError):
    """Raised when an optional runtime dependency is not available."""
