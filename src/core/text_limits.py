"""Hard text limits per provider/account (core domain)."""

from __future__ import annotations

import math
from typing import Any, Mapping, Optional

from core.config import coerce_number, get_section
from core.ports import AccountNormalizer
from core.provider_keys import INTERNAL_MESSAGE_PROVIDER, find_account_section, normalize_account_id

DEFAULT_CHUNK_LIMIT = 4000


def _positive_limit(value: Any) -> Optional[int]:
    number = coerce_number(value)
    if number is None:
        return None
    limit = math.floor(number)
    return limit if limit > 0 else None


def resolve_text_chunk_limit(
    config: Optional[Mapping[str, Any]],
    provider_key: Optional[str],
    account_id: Optional[str],
    fallback_limit: Optional[int] = None,
    normalize_account: AccountNormalizer = normalize_account_id,
) -> int:
    """Return the hard message-size ceiling for a provider/account.

    Precedence: account `textChunkLimit` > provider `textChunkLimit` >
    plugin fallback > DEFAULT_CHUNK_LIMIT. Only positive numbers count.
    """

    fallback = _positive_limit(fallback_limit) or DEFAULT_CHUNK_LIMIT
    if not provider_key or provider_key == INTERNAL_MESSAGE_PROVIDER:
        return fallback

    provider_cfg = get_section(config, provider_key)
    if provider_cfg is None:
        return fallback

    account_cfg = find_account_section(provider_cfg, normalize_account(account_id))
    if account_cfg is not None:
        account_limit = _positive_limit(account_cfg.get("textChunkLimit"))
        if account_limit is not None:
            return account_limit

    provider_limit = _positive_limit(provider_cfg.get("textChunkLimit"))
    if provider_limit is not None:
        return provider_limit
    return fallback


class ConfigTextLimitResolver:
    """TextLimitResolver backed by the provider sections of the config."""

    def __init__(self, normalize_account: AccountNormalizer = normalize_account_id) -> None:
        self._normalize_account = normalize_account

    def resolve(
        self,
        config: Optional[Mapping[str, Any]],
        provider_key: Optional[str],
        account_id: Optional[str],
        fallback_limit: Optional[int] = None,
    ) -> int:
        return resolve_text_chunk_limit(
            config,
            provider_key,
            account_id,
            fallback_limit,
            normalize_account=self._normalize_account,
        )
