"""Manifest (``package.json``) rewriting for newly created projects.

Pure transformations only. Reading the template manifest and writing
the result are the caller's job.
"""

from __future__ import annotations

import json
from typing import Any

from discord_scaffold.version import tool_name_and_version


def generator_description() -> str:
    """Description stamped into generated manifests."""
    return f"Generated by {tool_name_and_version()}."


def build_manifest(
    template_manifest: dict[str, Any],
    *,
    name: str,
    description: str,
) -> dict[str, Any]:
    """Return a copy of *template_manifest* with name and description replaced.

    Key order is preserved; every other field is carried over verbatim
    and the input mapping is left untouched.
    """
    return {**template_manifest, "name": name, "description": description}


def render_manifest(manifest: dict[str, Any]) -> str:
    """Serialise *manifest* as 2-space indented JSON with a trailing newline."""
    return json.dumps(manifest, indent=2, ensure_ascii=False) + "\n"
