"""Shared pytest fixtures and configuration for the discord-scaffold test suite.

Guidelines
----------
* No internet access in any test; the Discord lookup is always faked.
* npm is never executed; the installer is faked or ``subprocess.run``
  is patched.
* Real files are only written below ``tmp_path``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from discord_scaffold.core.models import AppTemplate
from discord_scaffold.exceptions import IdentityLookupError
from discord_scaffold.infra.template_loader import load_template

TEMPLATE_MANIFEST: dict[str, Any] = {
    "name": "discord-bot",
    "version": "1.0.0",
    "description": "A Discord bot.",
    "main": "src/index.js",
    "scripts": {"start": "node src/index.js"},
    "dependencies": {"discord.js": "^14.16.3"},
}


# ---------------------------------------------------------------------------
# Collaborator fakes
# ---------------------------------------------------------------------------

class ScriptedPrompter:
    """Prompter returning pre-scripted answers, recording every question."""

    def __init__(
        self,
        *,
        texts: list[str | None] | None = None,
        secrets: list[str | None] | None = None,
        confirms: list[bool | None] | None = None,
    ) -> None:
        self.texts = list(texts or [])
        self.secrets = list(secrets or [])
        self.confirms = list(confirms or [])
        self.calls: list[tuple[str, str, Any]] = []

    def ask_text(self, message: str, *, default: str = "", validate: Any = None) -> str | None:
        self.calls.append(("text", message, default))
        return self.texts.pop(0)

    def ask_secret(self, message: str, *, default: str = "") -> str | None:
        self.calls.append(("secret", message, default))
        return self.secrets.pop(0)

    def ask_confirm(self, message: str) -> bool | None:
        self.calls.append(("confirm", message, None))
        return self.confirms.pop(0)


class RecordingInstaller:
    """Installer that records target directories instead of running npm."""

    def __init__(self, error: Exception | None = None) -> None:
        self.directories: list[Path] = []
        self._error = error

    def install(self, directory: Path) -> None:
        self.directories.append(directory)
        if self._error is not None:
            raise self._error


class StaticLookup:
    """IdentityLookup returning a fixed record, or failing."""

    def __init__(self, record: dict[str, Any] | None = None) -> None:
        self.record = record
        self.tokens: list[str] = []

    def fetch_application(self, token: str) -> dict[str, Any]:
        self.tokens.append(token)
        if self.record is None:
            raise IdentityLookupError("Discord API error 401 for GET /oauth2/applications/@me")
        return self.record


# ---------------------------------------------------------------------------
# Filesystem helpers
# ---------------------------------------------------------------------------

def write_template(root: Path, manifest: dict[str, Any] | None = None) -> Path:
    """Create a minimal template tree under *root* and return it."""
    (root / "src" / "core").mkdir(parents=True)
    (root / "src" / "commands").mkdir(parents=True)
    (root / "package.json").write_text(
        json.dumps(manifest or TEMPLATE_MANIFEST, indent=2) + "\n",
        encoding="utf-8",
    )
    (root / "src" / "index.js").write_text("// entry v2\n", encoding="utf-8")
    (root / "src" / "core" / "client.js").write_text("// client v2\n", encoding="utf-8")
    (root / "src" / "commands" / "ping.js").write_text("// ping\n", encoding="utf-8")
    return root


def snapshot(root: Path) -> dict[str, bytes]:
    """Map every file below *root* (relative path) to its bytes."""
    return {
        str(path.relative_to(root)): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


@pytest.fixture()
def template_dir(tmp_path: Path) -> Path:
    return write_template(tmp_path / "template")


@pytest.fixture()
def app_template(template_dir: Path) -> AppTemplate:
    return load_template(template_dir)


@pytest.fixture()
def workspace(tmp_path: Path) -> Path:
    """Empty directory standing in for the user's working directory."""
    path = tmp_path / "workspace"
    path.mkdir()
    return path
