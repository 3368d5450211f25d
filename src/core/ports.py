"""Ports (interfaces) used by the block streaming resolver.

Ports define the minimal contracts for the provider registry and the text
limit lookup so the resolver can be reused with other plugin systems.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, Protocol

from core.models import ProviderPlugin

AccountNormalizer = Callable[[Optional[str]], str]


class ProviderRegistry(Protocol):
    """Capability lookup keyed by provider id."""

    def get(self, provider_id: str) -> Optional[ProviderPlugin]:
        ...

    def ids(self) -> tuple[str, ...]:
        ...


class TextLimitResolver(Protocol):
    """Applies configured text limits on top of a plugin fallback."""

    def resolve(
        self,
        config: Optional[Mapping[str, Any]],
        provider_key: Optional[str],
        account_id: Optional[str],
        fallback_limit: Optional[int] = None,
    ) -> int:
        ...
