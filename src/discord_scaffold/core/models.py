"""Domain models for discord-scaffold.

All models are **frozen** dataclasses: immutable value objects with no
behaviour beyond data access.  A plan is built fresh for every run and
discarded once it has been executed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from discord_scaffold.core.invite import InviteResult


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class PlanMode(str, Enum):
    """Which branch the run took, decided by the target directory's existence."""

    CREATE = "create"
    UPDATE = "update"


class StepKind(str, Enum):
    """Identifies the action a :class:`Step` performs."""

    CREATE_DIRECTORY = "create_directory"
    COPY_BOILERPLATE = "copy_boilerplate"
    WRITE_MANIFEST = "write_manifest"
    WRITE_ENV = "write_env"
    INSTALL_DEPENDENCIES = "install_dependencies"
    GENERATE_INVITE = "generate_invite"
    UPDATE_CORE = "update_core"


# ---------------------------------------------------------------------------
# Template
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class AppTemplate:
    """The bundled reference application copied into generated projects."""

    root: Path
    """Directory containing the template tree."""

    manifest: dict[str, Any]
    """Parsed ``package.json`` of the template.  Treat as read-only."""

    @property
    def name(self) -> str:
        """Package name declared by the template manifest."""
        return str(self.manifest.get("name", ""))

    @property
    def core_dir(self) -> Path:
        """Core runtime subtree refreshed by the update plan."""
        return self.root / "src" / "core"

    @property
    def entry_point(self) -> Path:
        """Entry-point file refreshed by the update plan."""
        return self.root / "src" / "index.js"


# ---------------------------------------------------------------------------
# Plan
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ScaffoldTarget:
    """Resolved application name and its absolute directory."""

    name: str
    directory: Path


@dataclass(frozen=True, slots=True)
class Step:
    """One named action of a plan."""

    kind: StepKind
    message: str
    """Printed before the action runs (and also under dry run)."""

    exempt_from_dry_run: bool = False
    """When ``True`` the action runs even under ``--dry-run``."""


@dataclass(frozen=True, slots=True)
class Plan:
    """Ordered, immutable sequence of steps plus the values they act on."""

    mode: PlanMode
    target: ScaffoldTarget
    steps: tuple[Step, ...]
    token: str | None = None
    """Bot token collected on the create path; ``None`` for updates."""

    def __len__(self) -> int:
        """Number of steps."""
        return len(self.steps)

    @property
    def kinds(self) -> tuple[StepKind, ...]:
        """Step kinds in plan order."""
        return tuple(step.kind for step in self.steps)


@dataclass(frozen=True, slots=True)
class TargetDecision:
    """Outcome of target resolution: where to write and which plan to use."""

    target: ScaffoldTarget
    mode: PlanMode
    token: str | None = None


# ---------------------------------------------------------------------------
# Execution report
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RunReport:
    """What the runner did with a plan."""

    executed: tuple[StepKind, ...] = ()
    skipped: tuple[StepKind, ...] = ()
    invite: InviteResult | None = None
    """:data:`~discord_scaffold.core.invite.InviteResult` when the invite step ran."""
