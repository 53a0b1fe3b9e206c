"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Naming convention settings and explicit environment loading.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env_first(*names: str, default: str) -> str:
    """Look up `TYPESYNC_*` variables in order; blank values count as unset."""
    for name in names:
        raw = os.getenv(name)
        if raw is None:
            continue
        value = raw.strip()
        if value:
            return value
    return default


@dataclass(frozen=True, slots=True)
class NamingSettings:
    """Scope and separator used to derive type declaration package names."""

    types_scope: str = "types"
    scope_separator: str = "__"

    @property
    def types_prefix(self) -> str:
        return f"@{self.types_scope}/"

    @staticmethod
    def from_env() -> "NamingSettings":
        """Load settings from `TYPESYNC_*` environment variables."""
        return NamingSettings(
            types_scope=_env_first("TYPESYNC_TYPES_SCOPE", default="types").lstrip("@"),
            scope_separator=_env_first("TYPESYNC_SCOPE_SEPARATOR", default="__"),
        )


DEFAULT_NAMING = NamingSettings()
