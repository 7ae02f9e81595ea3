"""End-to-end tests for the interactive flow (cli/app.py).

The questionary prompter, npm installer and Discord client are replaced
with fakes; the template and the target directory are real files under
``tmp_path``.

Coverage:
* Create path writes the project and prints the invite + summary.
* Dry run leaves the working directory empty and still prints the
  invite result.
* Declined update exits non-zero with a quitting message and changes
  nothing.
* Installer failure exits non-zero without attempting the lookup.
* Error boundary exit codes; exception text with brackets prints intact.
* Ctrl+C inside a prompt aborts with exit 130.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from discord_scaffold.cli import exit_codes
from discord_scaffold.cli.app import cli, main
from discord_scaffold.config import ENV_TEMPLATE_DIR
from discord_scaffold.core.invite import FALLBACK_MESSAGE
from discord_scaffold.exceptions import FilesystemError, InstallFailedError, UpdateDeclinedError

from conftest import RecordingInstaller, ScriptedPrompter, StaticLookup, snapshot


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

class Fakes:
    def __init__(self) -> None:
        self.prompter = ScriptedPrompter()
        self.installer = RecordingInstaller()
        self.lookup = StaticLookup({"id": "1234"})


@pytest.fixture()
def fakes(
    monkeypatch: pytest.MonkeyPatch,
    template_dir: Path,
    workspace: Path,
) -> Fakes:
    fakes = Fakes()
    monkeypatch.setenv(ENV_TEMPLATE_DIR, str(template_dir))
    monkeypatch.chdir(workspace)
    monkeypatch.setattr(
        "discord_scaffold.cli.prompts.QuestionaryPrompter", lambda: fakes.prompter,
    )
    monkeypatch.setattr(
        "discord_scaffold.infra.npm_installer.NpmInstaller",
        lambda executable="npm": fakes.installer,
    )
    monkeypatch.setattr(
        "discord_scaffold.infra.discord_client.DiscordApplicationClient",
        lambda *args, **kwargs: fakes.lookup,
    )
    return fakes


# ---------------------------------------------------------------------------
# Create path
# ---------------------------------------------------------------------------

class TestCreateFlow:
    def test_creates_project(
        self, fakes: Fakes, workspace: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        fakes.prompter.texts = ["my-bot"]
        fakes.prompter.secrets = ["secret-token"]

        assert main([]) == exit_codes.SUCCESS

        project = workspace / "my-bot"
        manifest = json.loads((project / "package.json").read_text(encoding="utf-8"))
        assert manifest["name"] == "my-bot"
        assert (project / ".env").read_text(encoding="utf-8") == "DISCORD_BOT_TOKEN=secret-token\n"
        assert fakes.installer.directories == [project.resolve()]
        assert fakes.lookup.tokens == ["secret-token"]

        err = capsys.readouterr().err
        assert "This utility will walk you through creating a discord-scaffold application." in err
        assert "Creating directory 'my-bot'..." in err
        assert "client_id=1234" in err
        assert "$ cd my-bot/" in err

    def test_name_prompt_defaults_to_template_name(self, fakes: Fakes) -> None:
        fakes.prompter.texts = ["my-bot"]
        fakes.prompter.secrets = ["t"]

        main([])

        assert fakes.prompter.calls[0] == ("text", "Application name?", "discord-bot")

    def test_dry_run_touches_nothing(
        self, fakes: Fakes, workspace: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        fakes.prompter.texts = ["my-bot"]
        fakes.prompter.secrets = ["bad-token"]
        fakes.lookup.record = None

        assert main(["--dry-run"]) == exit_codes.SUCCESS

        assert list(workspace.iterdir()) == []
        assert fakes.installer.directories == []
        assert fakes.lookup.tokens == ["bad-token"]
        err = capsys.readouterr().err
        assert "Installing modules..." in err
        assert FALLBACK_MESSAGE in err

    def test_installer_failure_stops_before_lookup(self, fakes: Fakes) -> None:
        fakes.prompter.texts = ["my-bot"]
        fakes.prompter.secrets = ["t"]
        fakes.installer = RecordingInstaller(InstallFailedError("npm ci failed", returncode=1))

        with pytest.raises(InstallFailedError):
            main([])

        assert fakes.lookup.tokens == []


# ---------------------------------------------------------------------------
# Update path
# ---------------------------------------------------------------------------

class TestUpdateFlow:
    def test_declined_update_changes_nothing(self, fakes: Fakes, workspace: Path) -> None:
        existing = workspace / "my-bot"
        (existing / "src").mkdir(parents=True)
        (existing / "src" / "index.js").write_text("// mine\n", encoding="utf-8")
        before = snapshot(workspace)
        fakes.prompter.texts = ["my-bot"]
        fakes.prompter.confirms = [False]

        with pytest.raises(UpdateDeclinedError):
            main([])

        assert snapshot(workspace) == before
        assert fakes.installer.directories == []

    def test_confirmed_update_refreshes_core(self, fakes: Fakes, workspace: Path) -> None:
        existing = workspace / "my-bot"
        (existing / "src").mkdir(parents=True)
        (existing / "src" / "index.js").write_text("// mine\n", encoding="utf-8")
        fakes.prompter.texts = ["my-bot"]
        fakes.prompter.confirms = [True]

        assert main([]) == exit_codes.SUCCESS

        assert (existing / "src" / "index.js").read_text(encoding="utf-8") == "// entry v2\n"
        assert (existing / "src" / "core" / "client.js").is_file()
        assert not (existing / "package.json").exists()
        assert fakes.installer.directories == []
        assert fakes.lookup.tokens == []


# ---------------------------------------------------------------------------
# Error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def _run_cli(self, monkeypatch: pytest.MonkeyPatch, side_effect: BaseException) -> int:
        monkeypatch.setattr(sys, "argv", ["discord-scaffold"])
        monkeypatch.setattr("discord_scaffold.cli.app.main", MagicMock(side_effect=side_effect))
        with pytest.raises(SystemExit) as exc_info:
            cli()
        return int(exc_info.value.code)

    def test_declined_update_quits(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = self._run_cli(monkeypatch, UpdateDeclinedError("Quitting..."))
        assert code == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "Quitting..." in err
        assert "Error:" not in err

    def test_scaffold_error_shows_hint(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = self._run_cli(
            monkeypatch, InstallFailedError("npm failed", hint="run npm install"),
        )
        assert code == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "npm failed" in err
        assert "run npm install" in err

    def test_bracketed_path_prints_intact(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = self._run_cli(
            monkeypatch,
            FilesystemError(
                "Cannot create directory '/home/u/bots[old]/my-bot'",
                hint="Check [b]permissions[/b]",
            ),
        )
        assert code == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "/home/u/bots[old]/my-bot" in err
        assert "Check [b]permissions[/b]" in err

    def test_unbalanced_closing_tag_exits_cleanly(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = self._run_cli(
            monkeypatch, FilesystemError("Cannot copy '/srv/tpl[' to '/x[/y]/my-bot'"),
        )
        assert code == exit_codes.GENERAL_ERROR
        assert "/x[/y]/my-bot" in capsys.readouterr().err

    def test_keyboard_interrupt(self, monkeypatch: pytest.MonkeyPatch) -> None:
        assert self._run_cli(monkeypatch, KeyboardInterrupt()) == exit_codes.KEYBOARD_INTERRUPT

    def test_ctrl_c_at_prompt_aborts(
        self,
        fakes: Fakes,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr(sys, "argv", ["discord-scaffold"])
        fakes.prompter.ask_text = MagicMock(side_effect=KeyboardInterrupt)

        with pytest.raises(SystemExit) as exc_info:
            cli()

        assert exc_info.value.code == exit_codes.KEYBOARD_INTERRUPT
        err = capsys.readouterr().err
        assert "Aborted by user." in err
        assert "Error:" not in err

    def test_unexpected_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        assert self._run_cli(monkeypatch, RuntimeError("boom")) == exit_codes.UNEXPECTED_ERROR

    def test_success_exit_code(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("discord_scaffold.cli.app.main", lambda: exit_codes.SUCCESS)
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.SUCCESS
