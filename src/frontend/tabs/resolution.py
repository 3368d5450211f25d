"""Resolution tab: resolved chunking and coalescing per provider/account."""

from __future__ import annotations

from typing import Any, Optional

from textual import on
from textual.containers import Container, Horizontal, Vertical
from textual.widgets import DataTable, Input, Static

from adapters.report_formatting import COLUMNS, build_draft_rows, build_resolution_rows, row_cells
from core.block_streaming import BlockStreamingResolver


class ResolutionTab(Container):
    """Table of resolved values, filterable by provider and account."""

    def __init__(self, resolver: BlockStreamingResolver, draft: bool = False, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._streaming_resolver = resolver
        self._draft_mode = draft
        self._table_ready = False

    @property
    def _prefix(self) -> str:
        return "draft" if self._draft_mode else "block"

    def compose(self):
        with Vertical(classes="resolution-panel"):
            with Horizontal(classes="resolution-filters"):
                if not self._draft_mode:
                    yield Input(placeholder="provider (all)", id=f"{self._prefix}-provider")
                yield Input(placeholder="account (all)", id=f"{self._prefix}-account")
            yield DataTable(id=f"{self._prefix}-table", cursor_type="row")
            yield Static("", id=f"{self._prefix}-output", classes="subtle")

    def on_mount(self) -> None:
        table = self.query_one(f"#{self._prefix}-table", DataTable)
        for column in COLUMNS:
            table.add_column(column, key=column)
        table.zebra_stripes = True
        table.styles.height = "1fr"
        self._table_ready = True
        self.reload_from_config()

    @on(Input.Submitted)
    def _on_filter_submitted(self) -> None:
        self.reload_from_config()

    def _filter_value(self, name: str) -> Optional[str]:
        value = self.query_one(f"#{self._prefix}-{name}", Input).value.strip()
        return value or None

    def reload_from_config(self) -> None:
        if not self._table_ready:
            return
        config = self.app.config_state.data
        account = self._filter_value("account")
        if self._draft_mode:
            rows = build_draft_rows(config, self._streaming_resolver, account=account)
        else:
            provider = self._filter_value("provider")
            providers = [provider] if provider else None
            rows = build_resolution_rows(config, self._streaming_resolver, providers=providers, account=account)

        table = self.query_one(f"#{self._prefix}-table", DataTable)
        table.clear()
        for row in rows:
            table.add_row(*row_cells(row), key=f"{row.provider}:{row.account}")

        output = self.query_one(f"#{self._prefix}-output", Static)
        if rows:
            output.update(f"{len(rows)} row(s)")
        else:
            output.update("No matching provider")
