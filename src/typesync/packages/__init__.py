"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Package naming conventions and manifest helpers.
"""

from .naming import typed, untyped
from .settings import DEFAULT_NAMING, NamingSettings
from .workspaces import WorkspacesArray, WorkspacesConfig, ensure_workspaces_array

__all__ = [
    "typed",
    "untyped",
    "NamingSettings",
    "DEFAULT_NAMING",
    "WorkspacesArray",
    "WorkspacesConfig",
    "ensure_workspaces_array",
]
