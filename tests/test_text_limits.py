from __future__ import annotations

from core.text_limits import DEFAULT_CHUNK_LIMIT, ConfigTextLimitResolver, resolve_text_chunk_limit


def test_falls_back_to_builtin_limit_without_config() -> None:
    assert resolve_text_chunk_limit(None, None, None) == DEFAULT_CHUNK_LIMIT
    assert resolve_text_chunk_limit(None, "telegram", None) == DEFAULT_CHUNK_LIMIT


def test_plugin_fallback_beats_builtin_limit() -> None:
    assert resolve_text_chunk_limit(None, "discord", None, fallback_limit=2000) == 2000
    assert resolve_text_chunk_limit(None, "discord", None, fallback_limit=0) == DEFAULT_CHUNK_LIMIT


def test_provider_limit_beats_plugin_fallback() -> None:
    config = {"discord": {"textChunkLimit": 1500}}
    assert resolve_text_chunk_limit(config, "discord", None, fallback_limit=2000) == 1500


def test_account_limit_beats_provider_limit() -> None:
    config = {
        "discord": {
            "textChunkLimit": 1500,
            "accounts": {"Work": {"textChunkLimit": 900}, "home": {}},
        }
    }
    assert resolve_text_chunk_limit(config, "discord", "work", fallback_limit=2000) == 900
    assert resolve_text_chunk_limit(config, "discord", "home", fallback_limit=2000) == 1500


def test_ignores_invalid_configured_limits() -> None:
    config = {"slack": {"textChunkLimit": "big", "accounts": {"default": {"textChunkLimit": -5}}}}
    assert resolve_text_chunk_limit(config, "slack", None, fallback_limit=3000) == 3000

    config = {"slack": {"textChunkLimit": True}}
    assert resolve_text_chunk_limit(config, "slack", None) == DEFAULT_CHUNK_LIMIT


def test_floors_fractional_limits() -> None:
    config = {"signal": {"textChunkLimit": 1234.9}}
    assert resolve_text_chunk_limit(config, "signal", None) == 1234


def test_internal_provider_ignores_config() -> None:
    config = {"webchat": {"textChunkLimit": 10}}
    assert resolve_text_chunk_limit(config, "webchat", None) == DEFAULT_CHUNK_LIMIT


def test_resolver_uses_injected_account_normalizer() -> None:
    config = {"telegram": {"accounts": {"bot-main": {"textChunkLimit": 700}}}}
    resolver = ConfigTextLimitResolver(normalize_account=lambda value: f"bot-{value or 'x'}")
    assert resolver.resolve(config, "telegram", "main") == 700
    assert resolver.resolve(config, "telegram", None) == DEFAULT_CHUNK_LIMIT
