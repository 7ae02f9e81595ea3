"""npm package-name validation for application names.

The generated project is an npm package, so its name must satisfy the
registry's naming rules.  Rules come in two severities:

* **errors** make the name unusable for any package;
* **warnings** only forbid it for *new* packages (legacy names such as
  ``"JSONStream"`` are still valid for old ones).

Guarantees
----------
* Pure, no I/O.
* Verdicts are deterministic for a given input string.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import quote

MAX_NAME_LENGTH: int = 214

BLACKLIST: frozenset[str] = frozenset({"node_modules", "favicon.ico"})

NODE_BUILTINS: frozenset[str] = frozenset(
    {
        "assert",
        "async_hooks",
        "buffer",
        "child_process",
        "cluster",
        "console",
        "constants",
        "crypto",
        "dgram",
        "diagnostics_channel",
        "dns",
        "domain",
        "events",
        "fs",
        "http",
        "http2",
        "https",
        "inspector",
        "module",
        "net",
        "os",
        "path",
        "perf_hooks",
        "process",
        "punycode",
        "querystring",
        "readline",
        "repl",
        "stream",
        "string_decoder",
        "sys",
        "timers",
        "tls",
        "trace_events",
        "tty",
        "url",
        "util",
        "v8",
        "vm",
        "wasi",
        "worker_threads",
        "zlib",
    }
)

_SCOPED_NAME = re.compile(r"^(?:@([^/]+?)[/])?([^/]+?)$")
_SPECIAL_CHARACTERS = re.compile(r"[~'!()*]")

# Characters JavaScript's encodeURIComponent leaves untouched.
_URL_SAFE = "-_.!~*'()"


@dataclass(frozen=True, slots=True)
class NameVerdict:
    """Result of validating a candidate package name."""

    valid_for_new_packages: bool
    valid_for_old_packages: bool
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()


def _is_url_safe(value: str) -> bool:
    return quote(value, safe=_URL_SAFE) == value


def validate_package_name(name: str) -> NameVerdict:
    """Validate *name* against the npm package naming rules."""
    errors: list[str] = []
    warnings: list[str] = []

    if not name:
        errors.append("name length must be greater than zero")
    if name.startswith("."):
        errors.append("name cannot start with a period")
    if name.startswith("_"):
        errors.append("name cannot start with an underscore")
    if name.strip() != name:
        errors.append("name cannot contain leading or trailing spaces")

    for excluded in BLACKLIST:
        if name.lower() == excluded:
            errors.append(f"{excluded} is not a valid package name")

    if name in NODE_BUILTINS:
        warnings.append(f"{name} is a core module name")
    if len(name) > MAX_NAME_LENGTH:
        warnings.append(
            f"name can no longer contain more than {MAX_NAME_LENGTH} characters"
        )
    if name.lower() != name:
        warnings.append("name can no longer contain capital letters")
    if _SPECIAL_CHARACTERS.search(name.split("/")[-1]):
        warnings.append(
            "name can no longer contain special characters (\"~'!()*\")"
        )

    if not _is_url_safe(name):
        match = _SCOPED_NAME.match(name)
        scoped_ok = False
        if match is not None and match.group(1) is not None:
            scoped_ok = _is_url_safe(match.group(1)) and _is_url_safe(match.group(2))
        if not scoped_ok:
            errors.append("name can only contain URL-friendly characters")

    return NameVerdict(
        valid_for_new_packages=not errors and not warnings,
        valid_for_old_packages=not errors,
        errors=tuple(errors),
        warnings=tuple(warnings),
    )


def prompt_error(verdict: NameVerdict) -> str:
    """Render the inline error shown under the name prompt.

    Errors take precedence; warnings are shown only when there are none.
    """
    problems = verdict.errors or verdict.warnings
    return f"Error: {', '.join(problems)}."


def check_name(name: str) -> bool | str:
    """Inline validator: ``True`` for a usable new-package name, else the message."""
    verdict = validate_package_name(name)
    if verdict.valid_for_new_packages:
        return True
    return prompt_error(verdict)
