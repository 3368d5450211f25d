"""State container for the loaded config snapshot."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class ConfigState:
    data: dict[str, Any] | None = None
    path: str | None = None
    error: str | None = None
