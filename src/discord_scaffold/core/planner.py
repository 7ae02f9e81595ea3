"""Step planning for the create and update paths.

The two plans are deliberately asymmetric: an update refreshes only the
core subtree and the entry point, leaving the manifest, ``.gitignore``,
``.env`` and installed modules as the user left them.
"""

from __future__ import annotations

from discord_scaffold.core.models import (
    Plan,
    PlanMode,
    ScaffoldTarget,
    Step,
    StepKind,
    TargetDecision,
)


def build_update_plan(target: ScaffoldTarget) -> Plan:
    """Build the single-step plan that refreshes an existing project's core files."""
    return Plan(
        mode=PlanMode.UPDATE,
        target=target,
        steps=(
            Step(StepKind.UPDATE_CORE, f"Updating core files in '{target.name}'..."),
        ),
    )


def build_create_plan(target: ScaffoldTarget, token: str) -> Plan:
    """Build the six-step plan for a brand-new project.

    Only the invite step is exempt from dry run, and it comes after the
    install so a failed install means no lookup is attempted.
    """
    return Plan(
        mode=PlanMode.CREATE,
        target=target,
        token=token,
        steps=(
            Step(StepKind.CREATE_DIRECTORY, f"Creating directory '{target.name}'..."),
            Step(StepKind.COPY_BOILERPLATE, "Creating boilerplate..."),
            Step(StepKind.WRITE_MANIFEST, "Updating package.json..."),
            Step(StepKind.WRITE_ENV, "Writing .env..."),
            Step(StepKind.INSTALL_DEPENDENCIES, "Installing modules..."),
            Step(
                StepKind.GENERATE_INVITE,
                "\nGenerating bot invite link...",
                exempt_from_dry_run=True,
            ),
        ),
    )


def build_plan(decision: TargetDecision) -> Plan:
    """Pick the plan matching the resolved target."""
    if decision.mode is PlanMode.UPDATE:
        return build_update_plan(decision.target)
    return build_create_plan(decision.target, decision.token or "")
