"""Core / service layer — planning, validation and plan execution.

Rules
-----
* No ``print()`` calls; messages go through an injected ``report`` sink.
* No direct filesystem, process or network I/O outside the protocols.
* No imports from ``cli`` or ``infra``.
"""

from discord_scaffold.core.intake import collect_app_name, resolve_target
from discord_scaffold.core.invite import (
    InviteLink,
    InviteResolver,
    InviteResult,
    InviteUnavailable,
    describe_invite,
)
from discord_scaffold.core.models import (
    AppTemplate,
    Plan,
    PlanMode,
    RunReport,
    ScaffoldTarget,
    Step,
    StepKind,
    TargetDecision,
)
from discord_scaffold.core.planner import build_create_plan, build_plan, build_update_plan
from discord_scaffold.core.protocols import (
    DependencyInstaller,
    FileSystem,
    IdentityLookup,
    Prompter,
)
from discord_scaffold.core.runner import StepRunner, closing_summary

__all__: list[str] = [
    "AppTemplate",
    "DependencyInstaller",
    "FileSystem",
    "IdentityLookup",
    "InviteLink",
    "InviteResolver",
    "InviteResult",
    "InviteUnavailable",
    "Plan",
    "PlanMode",
    "Prompter",
    "RunReport",
    "ScaffoldTarget",
    "Step",
    "StepKind",
    "StepRunner",
    "TargetDecision",
    "build_create_plan",
    "build_plan",
    "build_update_plan",
    "closing_summary",
    "collect_app_name",
    "describe_invite",
    "resolve_target",
]
