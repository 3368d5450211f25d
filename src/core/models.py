"""Core domain models.

These dataclasses are shared across the core and adapters so the resolver
never depends on how a provider registry or a config file is implemented.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

BREAK_PARAGRAPH = "paragraph"
BREAK_NEWLINE = "newline"
BREAK_SENTENCE = "sentence"
BREAK_PREFERENCES = (BREAK_PARAGRAPH, BREAK_NEWLINE, BREAK_SENTENCE)


@dataclass(frozen=True)
class CoalesceDefaults:
    """Streaming coalesce defaults advertised by a provider plugin."""

    min_chars: Optional[int] = None
    idle_ms: Optional[int] = None


@dataclass(frozen=True)
class ProviderPlugin:
    """Capabilities a provider plugin exposes to the resolver."""

    id: str
    text_chunk_limit: Optional[int] = None
    coalesce_defaults: Optional[CoalesceDefaults] = None


@dataclass(frozen=True)
class ResolvedChunking:
    """Effective chunk sizes and break preference for one provider/account."""

    min_chars: int
    max_chars: int
    break_preference: str


@dataclass(frozen=True)
class ResolvedCoalescing:
    """Effective coalescing window for one provider/account."""

    min_chars: int
    max_chars: int
    idle_ms: int
    joiner: str
