"""Block streaming chunking and coalescing resolution.

This module is integration-agnostic. It reads a config snapshot and asks
its ports for provider capabilities, so the same rules apply whichever
plugin system or config loader sits in front of it.

Resolution order, lowest to highest precedence:
1) Built-in numeric defaults
2) Provider plugin defaults (text limit, coalesce defaults)
3) agents.defaults.*
4) <provider>.*
5) <provider>.accounts[<account>].*

Every value is clamped instead of rejected: a bad chunk size must never
block delivery.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Mapping, Optional

from core.config import ChunkSettings, CoalesceSettings, first_present, get_path, get_section
from core.models import (
    BREAK_NEWLINE,
    BREAK_PARAGRAPH,
    BREAK_PREFERENCES,
    BREAK_SENTENCE,
    ProviderPlugin,
    ResolvedChunking,
    ResolvedCoalescing,
)
from core.ports import AccountNormalizer, ProviderRegistry, TextLimitResolver
from core.provider_keys import (
    INTERNAL_MESSAGE_PROVIDER,
    find_account_section,
    normalize_account_id,
    normalize_chunk_provider,
)

LOGGER = logging.getLogger(__name__)

DEFAULT_BLOCK_STREAM_MIN = 800
DEFAULT_BLOCK_STREAM_MAX = 1200
DEFAULT_BLOCK_STREAM_COALESCE_IDLE_MS = 1000
DEFAULT_TELEGRAM_DRAFT_STREAM_MIN = 200
DEFAULT_TELEGRAM_DRAFT_STREAM_MAX = 800

TELEGRAM_PROVIDER = "telegram"

_JOINERS = {
    BREAK_SENTENCE: " ",
    BREAK_NEWLINE: "\n",
}


def _at_least(value: float, floor_value: int) -> int:
    return max(floor_value, math.floor(value))


def _break_preference(value: Optional[str]) -> str:
    if value in BREAK_PREFERENCES:
        return value
    return BREAK_PARAGRAPH


def joiner_for(chunking: Optional[ResolvedChunking]) -> str:
    """Return the separator that re-joins chunks split by `chunking`."""

    preference = chunking.break_preference if chunking else BREAK_PARAGRAPH
    return _JOINERS.get(preference, "\n\n")


def _clamp_chunking(
    settings: Optional[ChunkSettings],
    text_limit: int,
    default_min: int,
    default_max: int,
) -> ResolvedChunking:
    settings = settings or ChunkSettings()
    max_requested = _at_least(first_present(settings.max_chars, default_max), 1)
    max_chars = max(1, min(max_requested, text_limit))
    min_requested = _at_least(first_present(settings.min_chars, default_min), 1)
    min_chars = min(min_requested, max_chars)
    if max_chars < max_requested or min_chars < min_requested:
        LOGGER.debug(
            "Chunking clamped to limit %s (requested min=%s max=%s)",
            text_limit,
            min_requested,
            max_requested,
        )
    return ResolvedChunking(
        min_chars=min_chars,
        max_chars=max_chars,
        break_preference=_break_preference(settings.break_preference),
    )


class BlockStreamingResolver:
    """Computes chunking and coalescing parameters for a provider/account."""

    def __init__(
        self,
        registry: ProviderRegistry,
        text_limits: TextLimitResolver,
        normalize_account: AccountNormalizer = normalize_account_id,
    ) -> None:
        self._registry = registry
        self._text_limits = text_limits
        self._normalize_account = normalize_account
        self._known_providers = frozenset((*registry.ids(), INTERNAL_MESSAGE_PROVIDER))

    @property
    def known_providers(self) -> frozenset[str]:
        return self._known_providers

    def normalize_provider(self, provider: Optional[str]) -> Optional[str]:
        """Return the provider key, or None for unknown or missing input."""

        provider_key = normalize_chunk_provider(provider, self._known_providers)
        if provider and provider_key is None:
            LOGGER.debug("Unknown provider %r; using global defaults", provider)
        return provider_key

    def _plugin(self, provider_key: Optional[str]) -> Optional[ProviderPlugin]:
        if not provider_key:
            return None
        return self._registry.get(provider_key)

    def text_limit(
        self,
        config: Optional[Mapping[str, Any]],
        provider_key: Optional[str],
        account_id: Optional[str],
    ) -> int:
        """Return the provider hard limit, using the plugin limit as fallback."""

        plugin = self._plugin(provider_key)
        fallback = plugin.text_chunk_limit if plugin else None
        return self._text_limits.resolve(config, provider_key, account_id, fallback)

    def chunking(
        self,
        config: Optional[Mapping[str, Any]],
        provider: Optional[str] = None,
        account_id: Optional[str] = None,
    ) -> ResolvedChunking:
        """Resolve `agents.defaults.blockStreamingChunk` against the hard limit."""

        provider_key = self.normalize_provider(provider)
        text_limit = self.text_limit(config, provider_key, account_id)
        settings = ChunkSettings.from_mapping(
            get_path(config, "agents", "defaults", "blockStreamingChunk")
        )
        return _clamp_chunking(
            settings,
            text_limit,
            DEFAULT_BLOCK_STREAM_MIN,
            DEFAULT_BLOCK_STREAM_MAX,
        )

    def telegram_draft_chunking(
        self,
        config: Optional[Mapping[str, Any]],
        account_id: Optional[str] = None,
    ) -> ResolvedChunking:
        """Resolve the smaller chunking used for Telegram live-edited drafts."""

        text_limit = self.text_limit(config, TELEGRAM_PROVIDER, account_id)
        telegram_cfg = get_section(config, TELEGRAM_PROVIDER)
        account_cfg = find_account_section(telegram_cfg, self._normalize_account(account_id))
        draft_block = first_present(
            get_section(account_cfg, "draftChunk"),
            get_section(telegram_cfg, "draftChunk"),
        )
        return _clamp_chunking(
            ChunkSettings.from_mapping(draft_block),
            text_limit,
            DEFAULT_TELEGRAM_DRAFT_STREAM_MIN,
            DEFAULT_TELEGRAM_DRAFT_STREAM_MAX,
        )

    def _coalesce_override(
        self,
        config: Optional[Mapping[str, Any]],
        provider_key: str,
        account_id: Optional[str],
    ) -> Optional[Mapping[str, Any]]:
        # The account block replaces the provider block wholesale; never merge.
        provider_cfg = get_section(config, provider_key)
        account_cfg = find_account_section(provider_cfg, self._normalize_account(account_id))
        account_block = get_section(account_cfg, "blockStreamingCoalesce")
        if account_block is not None:
            if get_section(provider_cfg, "blockStreamingCoalesce") is not None:
                LOGGER.debug(
                    "Account %s coalesce block shadows %s provider block",
                    self._normalize_account(account_id),
                    provider_key,
                )
            return account_block
        return get_section(provider_cfg, "blockStreamingCoalesce")

    def coalescing(
        self,
        config: Optional[Mapping[str, Any]],
        provider: Optional[str] = None,
        account_id: Optional[str] = None,
        chunking: Optional[ResolvedChunking] = None,
    ) -> Optional[ResolvedCoalescing]:
        """Resolve the coalescing window, or None when no provider applies."""

        provider_key = self.normalize_provider(provider)
        if provider_key is None:
            return None

        text_limit = self.text_limit(config, provider_key, account_id)
        plugin = self._plugin(provider_key)
        plugin_defaults = plugin.coalesce_defaults if plugin else None

        block = first_present(
            self._coalesce_override(config, provider_key, account_id),
            get_path(config, "agents", "defaults", "blockStreamingCoalesce"),
        )
        settings = CoalesceSettings.from_mapping(block) or CoalesceSettings()

        min_requested = _at_least(
            first_present(
                settings.min_chars,
                plugin_defaults.min_chars if plugin_defaults else None,
                chunking.min_chars if chunking else None,
                DEFAULT_BLOCK_STREAM_MIN,
            ),
            1,
        )
        max_requested = _at_least(first_present(settings.max_chars, text_limit), 1)
        max_chars = max(1, min(max_requested, text_limit))
        min_chars = min(min_requested, max_chars)
        idle_ms = _at_least(
            first_present(
                settings.idle_ms,
                plugin_defaults.idle_ms if plugin_defaults else None,
                DEFAULT_BLOCK_STREAM_COALESCE_IDLE_MS,
            ),
            0,
        )
        return ResolvedCoalescing(
            min_chars=min_chars,
            max_chars=max_chars,
            idle_ms=idle_ms,
            joiner=joiner_for(chunking),
        )
