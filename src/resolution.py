"""Default wiring for block streaming resolution.

Callers that do not bring their own plugin system use these functions; they
share one resolver built from the built-in provider registry.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from adapters.provider_registry import StaticProviderRegistry
from core.block_streaming import BlockStreamingResolver
from core.models import ResolvedChunking, ResolvedCoalescing
from core.text_limits import ConfigTextLimitResolver


def build_resolver() -> BlockStreamingResolver:
    """Create a resolver backed by the built-in registry and config limits."""

    return BlockStreamingResolver(
        registry=StaticProviderRegistry(),
        text_limits=ConfigTextLimitResolver(),
    )


_RESOLVER = build_resolver()


def resolve_block_streaming_chunking(
    config: Optional[Mapping[str, Any]],
    provider: Optional[str] = None,
    account_id: Optional[str] = None,
) -> ResolvedChunking:
    return _RESOLVER.chunking(config, provider, account_id)


def resolve_telegram_draft_streaming_chunking(
    config: Optional[Mapping[str, Any]],
    account_id: Optional[str] = None,
) -> ResolvedChunking:
    return _RESOLVER.telegram_draft_chunking(config, account_id)


def resolve_block_streaming_coalescing(
    config: Optional[Mapping[str, Any]],
    provider: Optional[str] = None,
    account_id: Optional[str] = None,
    chunking: Optional[ResolvedChunking] = None,
) -> Optional[ResolvedCoalescing]:
    return _RESOLVER.coalescing(config, provider, account_id, chunking)
