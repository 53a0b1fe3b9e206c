"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Normalization of `package.json` workspaces declarations.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, StrictStr, TypeAdapter, ValidationError

WorkspacesArray = list[str]

_WORKSPACES_ARRAY = TypeAdapter(list[StrictStr])


class WorkspacesConfig(BaseModel):
    """Object form of `workspaces` (yarn): `{"packages": [...], "nohoist": [...]}`."""

    model_config = ConfigDict(extra="allow")

    packages: Any = None
    nohoist: Any = None


def ensure_workspaces_array(
    data: WorkspacesArray | WorkspacesConfig | Mapping[str, Any] | None = None,
) -> WorkspacesArray:
    """
    Return `data` as a plain list of workspace globs.

    Missing data and lists containing non-strings yield an empty list. The
    object form is unwrapped through its `packages` field.
    """
    if not data:
        return []

    if isinstance(data, WorkspacesConfig):
        return ensure_workspaces_array(data.packages)

    if isinstance(data, Mapping):
        return ensure_workspaces_array(data.get("packages"))

    if not isinstance(data, list):
        return []

    try:
        _WORKSPACES_ARRAY.validate_python(data)
    except ValidationError:
        return []
    return data
