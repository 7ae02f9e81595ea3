"""Infrastructure: locating and loading the bundled template.

The template tree ships inside the package (``discord_scaffold/template``)
and is only ever read.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from discord_scaffold.core.models import AppTemplate
from discord_scaffold.exceptions import TemplateError

logger = logging.getLogger(__name__)


def load_template(root: Path) -> AppTemplate:
    """Load the template rooted at *root*.

    Raises
    ------
    TemplateError
        When the directory or its ``package.json`` is missing, or the
        manifest is not a JSON object.
    """
    if not root.is_dir():
        raise TemplateError(
            f"Template directory not found: {root}",
            hint="Reinstall discord-scaffold or unset DISCORD_SCAFFOLD_TEMPLATE_DIR.",
        )

    manifest_path = root / "package.json"
    try:
        raw = manifest_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TemplateError(f"Cannot read template manifest {manifest_path}: {exc}") from exc

    try:
        manifest = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise TemplateError(
            f"Template manifest {manifest_path} is not valid JSON: {exc}",
        ) from exc

    if not isinstance(manifest, dict):
        raise TemplateError(f"Template manifest {manifest_path} must be a JSON object.")

    logger.debug("Loaded template %s (%s)", root, manifest.get("name"))
    return AppTemplate(root=root, manifest=manifest)
