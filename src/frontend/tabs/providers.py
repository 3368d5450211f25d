"""Providers tab: capabilities advertised by the provider registry."""

from __future__ import annotations

from typing import Any

from textual.containers import Container
from textual.widgets import DataTable

from core.ports import ProviderRegistry


class ProvidersTab(Container):
    def __init__(self, registry: ProviderRegistry, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._provider_registry = registry

    def compose(self):
        yield DataTable(id="providers-table", cursor_type="row")

    def on_mount(self) -> None:
        table = self.query_one("#providers-table", DataTable)
        table.add_column("provider", key="provider", width=12)
        table.add_column("text limit", key="text_chunk_limit", width=12)
        table.add_column("coalesce min", key="min_chars", width=14)
        table.add_column("idle ms", key="idle_ms", width=10)
        table.zebra_stripes = True
        for provider_id in self._provider_registry.ids():
            plugin = self._provider_registry.get(provider_id)
            if plugin is None:
                continue
            defaults = plugin.coalesce_defaults
            table.add_row(
                plugin.id,
                str(plugin.text_chunk_limit or "-"),
                str(defaults.min_chars if defaults and defaults.min_chars is not None else "-"),
                str(defaults.idle_ms if defaults and defaults.idle_ms is not None else "-"),
                key=plugin.id,
            )
