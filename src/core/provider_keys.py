"""Helpers for working with provider keys and account ids."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional

from core.config import get_section

PROVIDER_IDS = ("whatsapp", "telegram", "discord", "slack", "signal", "imessage")

# Loopback provider used for messages that never leave the process.
INTERNAL_MESSAGE_PROVIDER = "webchat"

BLOCK_CHUNK_PROVIDERS = frozenset((*PROVIDER_IDS, INTERNAL_MESSAGE_PROVIDER))

DEFAULT_ACCOUNT_ID = "default"


def normalize_chunk_provider(
    provider: Optional[str],
    known: Iterable[str] = BLOCK_CHUNK_PROVIDERS,
) -> Optional[str]:
    """Return the canonical provider key, or None when it is not registered."""

    if not provider or not isinstance(provider, str):
        return None
    cleaned = provider.strip().lower()
    if cleaned in known:
        return cleaned
    return None


def normalize_account_id(account_id: Optional[str]) -> str:
    """Return the canonical account key; blank ids map to the default account."""

    if not isinstance(account_id, str):
        return DEFAULT_ACCOUNT_ID
    trimmed = account_id.strip()
    if not trimmed:
        return DEFAULT_ACCOUNT_ID
    return trimmed.lower()


def find_account_section(
    provider_cfg: Optional[Mapping[str, Any]],
    account_key: str,
) -> Optional[Mapping[str, Any]]:
    """Return `accounts[account_key]`, matching the key case-insensitively."""

    accounts = get_section(provider_cfg, "accounts")
    if accounts is None:
        return None
    direct = get_section(accounts, account_key)
    if direct is not None:
        return direct
    for key in accounts:
        if isinstance(key, str) and key.strip().lower() == account_key:
            return get_section(accounts, key)
    return None


def list_account_keys(provider_cfg: Optional[Mapping[str, Any]]) -> list[str]:
    """Return the default account plus every configured account, normalized."""

    keys = [DEFAULT_ACCOUNT_ID]
    accounts = get_section(provider_cfg, "accounts") or {}
    for key in accounts:
        normalized = normalize_account_id(key)
        if normalized not in keys:
            keys.append(normalized)
    return keys
