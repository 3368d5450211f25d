from __future__ import annotations

from adapters.provider_registry import StaticProviderRegistry
from adapters.report_formatting import (
    build_draft_rows,
    build_resolution_rows,
    format_joiner,
    render_provider_table,
    render_resolution_table,
    row_cells,
    rows_to_json,
)
from core.block_streaming import BlockStreamingResolver
from core.text_limits import ConfigTextLimitResolver


def _resolver() -> BlockStreamingResolver:
    return BlockStreamingResolver(
        registry=StaticProviderRegistry(),
        text_limits=ConfigTextLimitResolver(),
    )


def test_format_joiner_escapes_whitespace() -> None:
    assert format_joiner("\n\n") == "\\n\\n"
    assert format_joiner("\n") == "\\n"
    assert format_joiner(" ") == "<space>"


def test_rows_cover_every_known_provider_and_account() -> None:
    config = {"discord": {"accounts": {"Work": {"textChunkLimit": 900}}}}
    rows = build_resolution_rows(config, _resolver())
    pairs = [(row.provider, row.account) for row in rows]

    assert ("discord", "default") in pairs
    assert ("discord", "work") in pairs
    assert ("webchat", "default") in pairs
    assert len(pairs) == 8

    work = next(row for row in rows if row.account == "work")
    assert work.text_limit == 900
    assert work.chunking.max_chars == 900


def test_rows_skip_unknown_providers_and_filter_account() -> None:
    rows = build_resolution_rows(None, _resolver(), providers=["Slack", "bogus", "slack"], account="Ops")
    assert [(row.provider, row.account) for row in rows] == [("slack", "ops")]


def test_draft_rows_use_draft_chunking() -> None:
    config = {"telegram": {"accounts": {"ops": {"draftChunk": {"maxChars": 500}}}}}
    rows = build_draft_rows(config, _resolver())
    assert [row.account for row in rows] == ["default", "ops"]
    assert rows[0].chunking.max_chars == 800
    assert rows[1].chunking.max_chars == 500
    assert all(row.coalescing is None for row in rows)


def test_row_cells_and_tables() -> None:
    rows = build_resolution_rows(None, _resolver(), providers=["discord"])
    cells = row_cells(rows[0])
    assert cells == ("discord", "default", "2000", "800", "1200", "paragraph", "1500", "2000", "1000", "\\n\\n")

    table = render_resolution_table(rows)
    assert table.row_count == 1
    assert len(table.columns) == len(cells)

    draft_cells = row_cells(build_draft_rows(None, _resolver())[0])
    assert draft_cells[-4:] == ("-", "-", "-", "-")

    assert render_provider_table(StaticProviderRegistry()).row_count == 6


def test_rows_to_json_nests_resolved_values() -> None:
    rows = build_resolution_rows(None, _resolver(), providers=["telegram"])
    payload = rows_to_json(rows)
    assert payload == [
        {
            "provider": "telegram",
            "account": "default",
            "text_limit": 4000,
            "chunking": {"min_chars": 800, "max_chars": 1200, "break_preference": "paragraph"},
            "coalescing": {"min_chars": 800, "max_chars": 4000, "idle_ms": 1000, "joiner": "\n\n"},
        }
    ]
