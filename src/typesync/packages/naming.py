"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Conversions between code package names and their types package names.
"""

from __future__ import annotations

import re

from .settings import DEFAULT_NAMING, NamingSettings

_SCOPED_RE = re.compile(r"^@.*?/")


def typed(name: str, *, settings: NamingSettings | None = None) -> str:
    """
    Return the assumed types package name for a code package.

    `@scope/name` becomes `@types/scope__name`; anything else gets the
    `@types/` prefix.
    """
    cfg = settings or DEFAULT_NAMING
    if _SCOPED_RE.match(name):
        parts = name.split("/")
        return f"{cfg.types_prefix}{parts[0][1:]}{cfg.scope_separator}{parts[1]}"
    return f"{cfg.types_prefix}{name}"


def untyped(name: str, *, settings: NamingSettings | None = None) -> str:
    """Return the assumed code package name for a types package name."""
    cfg = settings or DEFAULT_NAMING
    prefix = cfg.types_prefix
    if not name.startswith(prefix):
        return name
    rest = name[len(prefix) :]
    parts = rest.split(cfg.scope_separator)
    if len(parts) == 2:
        return f"@{parts[0]}/{parts[1]}"
    return rest
