"""Plan execution.

:class:`StepRunner` walks a :class:`~discord_scaffold.core.models.Plan`
in order, reporting each step's message before acting on it.  All side
effects go through injected collaborators, so the same plan can be run
against the real filesystem or against test fakes.

Guarantees
----------
* Steps run in plan order, each at most once.
* Under dry run only exempt steps perform their action; every message
  is still reported.
* The first failing step stops the run; its exception propagates
  unchanged and no later step is attempted.
"""

from __future__ import annotations

from collections.abc import Callable

from discord_scaffold.core.invite import InviteResolver, InviteResult, describe_invite
from discord_scaffold.core.manifest import (
    build_manifest,
    generator_description,
    render_manifest,
)
from discord_scaffold.core.models import AppTemplate, Plan, RunReport, Step, StepKind
from discord_scaffold.core.protocols import DependencyInstaller, FileSystem

GITIGNORE_NAME: str = ".gitignore"
GITIGNORE_CONTENT: str = "node_modules/\n.env\n"
ENV_NAME: str = ".env"
ENV_TOKEN_KEY: str = "DISCORD_BOT_TOKEN"
MANIFEST_NAME: str = "package.json"


def env_file_content(token: str) -> str:
    """Contents of the generated ``.env`` file."""
    return f"{ENV_TOKEN_KEY}={token}\n"


def closing_summary(name: str) -> str:
    """Next commands printed once the whole plan succeeded."""
    return f"Done!\n\nStart by running:\n\t$ cd {name}/\n\t$ npm start"


class StepRunner:
    """Executes plans against injected collaborators.

    Parameters
    ----------
    filesystem:
        Any object satisfying the :class:`FileSystem` protocol.
    installer:
        Any object satisfying the :class:`DependencyInstaller` protocol.
    invites:
        Resolver used by the invite step.
    template:
        The template the plan copies from.
    report:
        Sink for step messages and the invite line (usually the console).
    """

    def __init__(
        self,
        filesystem: FileSystem,
        installer: DependencyInstaller,
        invites: InviteResolver,
        template: AppTemplate,
        *,
        report: Callable[[str], None],
    ) -> None:
        self._fs = filesystem
        self._installer = installer
        self._invites = invites
        self._template = template
        self._report = report
        self._invite_result: InviteResult | None = None
        self._handlers: dict[StepKind, Callable[[Plan], None]] = {
            StepKind.CREATE_DIRECTORY: self._create_directory,
            StepKind.COPY_BOILERPLATE: self._copy_boilerplate,
            StepKind.WRITE_MANIFEST: self._write_manifest,
            StepKind.WRITE_ENV: self._write_env,
            StepKind.INSTALL_DEPENDENCIES: self._install_dependencies,
            StepKind.GENERATE_INVITE: self._generate_invite,
            StepKind.UPDATE_CORE: self._update_core,
        }

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self, plan: Plan, *, dry_run: bool = False) -> RunReport:
        """Execute *plan*; see the module docstring for the guarantees."""
        self._invite_result = None
        executed: list[StepKind] = []
        skipped: list[StepKind] = []

        for step in plan.steps:
            self._report(step.message)
            if dry_run and not step.exempt_from_dry_run:
                skipped.append(step.kind)
                continue
            self._execute(step, plan)
            executed.append(step.kind)

        return RunReport(
            executed=tuple(executed),
            skipped=tuple(skipped),
            invite=self._invite_result,
        )

    def _execute(self, step: Step, plan: Plan) -> None:
        """Dispatch *step* to its handler."""
        self._handlers[step.kind](plan)

    # ------------------------------------------------------------------
    # Step handlers
    # ------------------------------------------------------------------

    def _create_directory(self, plan: Plan) -> None:
        self._fs.make_directory(plan.target.directory)

    def _copy_boilerplate(self, plan: Plan) -> None:
        directory = plan.target.directory
        self._fs.copy_tree(self._template.root, directory)
        self._fs.write_text(directory / GITIGNORE_NAME, GITIGNORE_CONTENT)

    def _write_manifest(self, plan: Plan) -> None:
        manifest = build_manifest(
            self._template.manifest,
            name=plan.target.name,
            description=generator_description(),
        )
        self._fs.write_text(
            plan.target.directory / MANIFEST_NAME,
            render_manifest(manifest),
        )

    def _write_env(self, plan: Plan) -> None:
        self._fs.write_text(
            plan.target.directory / ENV_NAME,
            env_file_content(plan.token or ""),
        )

    def _install_dependencies(self, plan: Plan) -> None:
        self._installer.install(plan.target.directory)

    def _generate_invite(self, plan: Plan) -> None:
        result = self._invites.resolve(plan.token or "")
        self._invite_result = result
        self._report(describe_invite(result))

    def _update_core(self, plan: Plan) -> None:
        directory = plan.target.directory
        template = self._template
        self._fs.copy_tree(template.core_dir, directory / "src" / "core")
        self._fs.copy_file(template.entry_point, directory / "src" / "index.js")
