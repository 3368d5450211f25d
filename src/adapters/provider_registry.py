"""Built-in provider registry adapter.

Implements the core ProviderRegistry port with a static capability table.
Only providers that need a non-default limit or streaming behavior carry
extra fields; the rest fall back to the resolver's built-in defaults.
"""

from __future__ import annotations

from typing import Iterable, Optional

from core.models import CoalesceDefaults, ProviderPlugin

BUILTIN_PROVIDERS: tuple[ProviderPlugin, ...] = (
    ProviderPlugin(id="whatsapp", text_chunk_limit=4000),
    ProviderPlugin(id="telegram", text_chunk_limit=4000),
    # Discord rejects messages over 2000 chars and rate-limits rapid posts,
    # so it batches more text per send.
    ProviderPlugin(
        id="discord",
        text_chunk_limit=2000,
        coalesce_defaults=CoalesceDefaults(min_chars=1500, idle_ms=1000),
    ),
    ProviderPlugin(
        id="slack",
        text_chunk_limit=4000,
        coalesce_defaults=CoalesceDefaults(min_chars=1500, idle_ms=1000),
    ),
    ProviderPlugin(id="signal", text_chunk_limit=4000),
    ProviderPlugin(id="imessage", text_chunk_limit=4000),
)


class StaticProviderRegistry:
    """In-memory registry that satisfies the ProviderRegistry contract."""

    def __init__(self, plugins: Iterable[ProviderPlugin] = BUILTIN_PROVIDERS) -> None:
        self._plugins: dict[str, ProviderPlugin] = {}
        for plugin in plugins:
            self._plugins[plugin.id.strip().lower()] = plugin

    def get(self, provider_id: str) -> Optional[ProviderPlugin]:
        if not provider_id:
            return None
        return self._plugins.get(provider_id.strip().lower())

    def ids(self) -> tuple[str, ...]:
        return tuple(self._plugins)
