"""Shared report formatting helpers.

Keeping row building here keeps the CLI and the Textual inspector in step,
so both show the same values for the same config.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Iterable, Mapping, Optional

from rich.table import Table

from core.block_streaming import TELEGRAM_PROVIDER, BlockStreamingResolver
from core.config import get_section
from core.models import ResolvedChunking, ResolvedCoalescing
from core.ports import ProviderRegistry
from core.provider_keys import list_account_keys, normalize_account_id


@dataclass(frozen=True)
class ResolutionRow:
    """Resolved values for one provider/account pair."""

    provider: str
    account: str
    text_limit: int
    chunking: ResolvedChunking
    coalescing: Optional[ResolvedCoalescing]


def format_joiner(joiner: str) -> str:
    """Return the joiner with whitespace escaped for display."""

    escaped = joiner.replace("\n", "\\n")
    if escaped == " ":
        return "<space>"
    return escaped


def _accounts_for(config: Optional[Mapping[str, Any]], provider: str, account: Optional[str]) -> list[str]:
    if account is not None:
        return [normalize_account_id(account)]
    return list_account_keys(get_section(config, provider))


def build_resolution_rows(
    config: Optional[Mapping[str, Any]],
    resolver: BlockStreamingResolver,
    providers: Optional[Iterable[str]] = None,
    account: Optional[str] = None,
) -> list[ResolutionRow]:
    """Resolve chunking and coalescing for each provider and its accounts.

    Unknown provider names are skipped; with no providers given, every
    provider the resolver knows about is reported.
    """

    if providers is None:
        keys = sorted(resolver.known_providers)
    else:
        keys = []
        for provider in providers:
            key = resolver.normalize_provider(provider)
            if key and key not in keys:
                keys.append(key)

    rows: list[ResolutionRow] = []
    for provider_key in keys:
        for account_key in _accounts_for(config, provider_key, account):
            chunking = resolver.chunking(config, provider_key, account_key)
            rows.append(
                ResolutionRow(
                    provider=provider_key,
                    account=account_key,
                    text_limit=resolver.text_limit(config, provider_key, account_key),
                    chunking=chunking,
                    coalescing=resolver.coalescing(config, provider_key, account_key, chunking),
                )
            )
    return rows


def build_draft_rows(
    config: Optional[Mapping[str, Any]],
    resolver: BlockStreamingResolver,
    account: Optional[str] = None,
) -> list[ResolutionRow]:
    """Resolve Telegram draft chunking for each configured Telegram account."""

    rows: list[ResolutionRow] = []
    for account_key in _accounts_for(config, TELEGRAM_PROVIDER, account):
        rows.append(
            ResolutionRow(
                provider=TELEGRAM_PROVIDER,
                account=account_key,
                text_limit=resolver.text_limit(config, TELEGRAM_PROVIDER, account_key),
                chunking=resolver.telegram_draft_chunking(config, account_key),
                coalescing=None,
            )
        )
    return rows


def row_cells(row: ResolutionRow) -> tuple[str, ...]:
    """Return display strings for a row, in table column order."""

    chunking = row.chunking
    coalescing = row.coalescing
    if coalescing is None:
        coalesce_cells = ("-", "-", "-", "-")
    else:
        coalesce_cells = (
            str(coalescing.min_chars),
            str(coalescing.max_chars),
            str(coalescing.idle_ms),
            format_joiner(coalescing.joiner),
        )
    return (
        row.provider,
        row.account,
        str(row.text_limit),
        str(chunking.min_chars),
        str(chunking.max_chars),
        chunking.break_preference,
        *coalesce_cells,
    )


COLUMNS = (
    "provider",
    "account",
    "limit",
    "chunk min",
    "chunk max",
    "break",
    "coalesce min",
    "coalesce max",
    "idle ms",
    "joiner",
)


def render_resolution_table(rows: Iterable[ResolutionRow], title: str = "Block streaming") -> Table:
    """Build the rich table printed by the CLI."""

    table = Table(title=title, header_style="bold")
    for column in COLUMNS:
        justify = "left" if column in {"provider", "account", "break", "joiner"} else "right"
        table.add_column(column, justify=justify)
    for row in rows:
        table.add_row(*row_cells(row))
    return table


def render_provider_table(registry: ProviderRegistry) -> Table:
    table = Table(title="Providers", header_style="bold")
    table.add_column("provider")
    table.add_column("text limit", justify="right")
    table.add_column("coalesce min", justify="right")
    table.add_column("idle ms", justify="right")
    for provider_id in registry.ids():
        plugin = registry.get(provider_id)
        if plugin is None:
            continue
        defaults = plugin.coalesce_defaults
        table.add_row(
            plugin.id,
            "-" if plugin.text_chunk_limit is None else str(plugin.text_chunk_limit),
            "-" if defaults is None or defaults.min_chars is None else str(defaults.min_chars),
            "-" if defaults is None or defaults.idle_ms is None else str(defaults.idle_ms),
        )
    return table


def rows_to_json(rows: Iterable[ResolutionRow]) -> list[dict[str, Any]]:
    """Return JSON-ready dicts for the given rows."""

    return [asdict(row) for row in rows]
