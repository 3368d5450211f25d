"""Core configuration dataclasses.

We keep config parsing outside the core, but these dataclasses define the
shape of the individual config blocks the resolver reads. Raw values come
straight from JSON, so anything that is not a finite number is treated as
"not configured" instead of failing.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional


def coerce_number(value: Any) -> Optional[float]:
    """Return value as a finite number, or None when it is not usable."""

    # bool is an int subclass; a stray `true` must not become 1.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value):
        return None
    return value


def first_present(*values: Any) -> Any:
    """Return the first value that is not None (ordered override sources)."""

    for value in values:
        if value is not None:
            return value
    return None


def get_section(parent: Any, key: str) -> Optional[Mapping[str, Any]]:
    """Return parent[key] when it is a mapping, otherwise None."""

    if not isinstance(parent, Mapping):
        return None
    value = parent.get(key)
    if isinstance(value, Mapping):
        return value
    return None


def get_path(parent: Any, *keys: str) -> Optional[Mapping[str, Any]]:
    section = parent if isinstance(parent, Mapping) else None
    for key in keys:
        section = get_section(section, key)
        if section is None:
            return None
    return section


@dataclass(frozen=True)
class ChunkSettings:
    """A `blockStreamingChunk` or `draftChunk` block."""

    min_chars: Optional[float] = None
    max_chars: Optional[float] = None
    break_preference: Optional[str] = None

    @classmethod
    def from_mapping(cls, block: Optional[Mapping[str, Any]]) -> Optional["ChunkSettings"]:
        if block is None:
            return None
        preference = block.get("breakPreference")
        return cls(
            min_chars=coerce_number(block.get("minChars")),
            max_chars=coerce_number(block.get("maxChars")),
            break_preference=preference if isinstance(preference, str) else None,
        )


@dataclass(frozen=True)
class CoalesceSettings:
    """A `blockStreamingCoalesce` block."""

    min_chars: Optional[float] = None
    max_chars: Optional[float] = None
    idle_ms: Optional[float] = None

    @classmethod
    def from_mapping(cls, block: Optional[Mapping[str, Any]]) -> Optional["CoalesceSettings"]:
        if block is None:
            return None
        return cls(
            min_chars=coerce_number(block.get("minChars")),
            max_chars=coerce_number(block.get("maxChars")),
            idle_ms=coerce_number(block.get("idleMs")),
        )
