from __future__ import annotations

from core.provider_keys import (
    DEFAULT_ACCOUNT_ID,
    INTERNAL_MESSAGE_PROVIDER,
    find_account_section,
    list_account_keys,
    normalize_account_id,
    normalize_chunk_provider,
)


def test_normalize_chunk_provider_trims_and_lowercases() -> None:
    assert normalize_chunk_provider("  Discord ") == "discord"
    assert normalize_chunk_provider("TELEGRAM") == "telegram"
    assert normalize_chunk_provider(INTERNAL_MESSAGE_PROVIDER) == INTERNAL_MESSAGE_PROVIDER


def test_normalize_chunk_provider_rejects_unknown_input() -> None:
    assert normalize_chunk_provider(None) is None
    assert normalize_chunk_provider("") is None
    assert normalize_chunk_provider("telegarm") is None
    assert normalize_chunk_provider("discord", known={"slack"}) is None


def test_normalize_account_id_defaults_blank_values() -> None:
    assert normalize_account_id(None) == DEFAULT_ACCOUNT_ID
    assert normalize_account_id("   ") == DEFAULT_ACCOUNT_ID
    assert normalize_account_id(" Work ") == "work"


def test_find_account_section_matches_case_insensitively() -> None:
    provider_cfg = {"accounts": {"Work": {"textChunkLimit": 100}, "bad": "nope"}}
    assert find_account_section(provider_cfg, "work") == {"textChunkLimit": 100}
    assert find_account_section(provider_cfg, "bad") is None
    assert find_account_section(provider_cfg, "other") is None
    assert find_account_section(None, "work") is None


def test_list_account_keys_starts_with_default() -> None:
    provider_cfg = {"accounts": {"Work": {}, "default": {}, "alerts": {}}}
    assert list_account_keys(provider_cfg) == ["default", "work", "alerts"]
    assert list_account_keys(None) == ["default"]
