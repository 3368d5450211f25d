"""Main Textual app for the blockscope inspector."""

from __future__ import annotations

import json
from typing import Any, Optional

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Center, Container, Horizontal, Vertical
from textual.widgets import Button, ContentSwitcher, Footer, Static, Tab, Tabs

import settings
from adapters.provider_registry import StaticProviderRegistry
from resolution import build_resolver

from .constants import TELEGRAM_BLUE
from .state import ConfigState
from .tabs.providers import ProvidersTab
from .tabs.resolution import ResolutionTab


class InspectorApp(App):
    """Read-only browser for resolved block streaming settings."""

    BINDINGS = [
        ("ctrl+r", "reload_config", "Reload"),
        ("q", "quit", "Quit"),
        ("ctrl+c", "quit", "Quit"),
    ]

    CSS = """
    Screen {
        background: #0f1a21;
        color: #e8eef5;
    }

    #header {
        height: 7;
        padding: 1 4;
        border-bottom: solid #2a3a46;
    }

    #header-left, #header-right {
        width: 1fr;
    }

    #header-right {
        content-align: right top;
        text-align: right;
    }

    #title {
        text-style: bold;
    }

    .subtle {
        color: #c6d2dd;
    }

    .status-error {
        color: #ff6b6b;
    }

    #tabs-bar {
        height: 5;
        padding: 0 4;
        border-bottom: solid #2a3a46;
        align: center middle;
    }

    #tabs {
        width: auto;
    }

    .resolution-filters {
        height: 3;
    }

    .resolution-filters Input {
        width: 30;
    }
    """

    def __init__(self, config_file: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.config_state = ConfigState()
        self._config_file = config_file
        self._provider_registry = StaticProviderRegistry()
        self._streaming_resolver = build_resolver()

    def compose(self) -> ComposeResult:
        with Container(id="header"):
            with Horizontal(id="header-row"):
                with Vertical(id="header-left"):
                    yield Static(self._title_text(), id="title")
                    yield Static("read-only", classes="subtle")
                with Vertical(id="header-right"):
                    yield Static("", id="header-path", classes="subtle")
                    yield Static("", id="header-status")
                    yield Button("Reload", id="reload-btn")

        with Container(id="tabs-bar"):
            with Center():
                yield Tabs(
                    Tab("Block streaming", id="block"),
                    Tab("Telegram draft", id="draft"),
                    Tab("Providers", id="providers"),
                    id="tabs",
                )

        with ContentSwitcher(id="content"):
            yield ResolutionTab(self._streaming_resolver, id="block")
            yield ResolutionTab(self._streaming_resolver, draft=True, id="draft")
            yield ProvidersTab(self._provider_registry, id="providers")
        yield Footer()

    def on_mount(self) -> None:
        self._load_config()
        self.query_one("#content", ContentSwitcher).current = "block"

    def on_tabs_tab_activated(self, event: Tabs.TabActivated) -> None:
        if event.tab.id:
            self.query_one("#content", ContentSwitcher).current = event.tab.id

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "reload-btn":
            self.action_reload_config()

    def action_reload_config(self) -> None:
        self._load_config()

    def _load_config(self) -> None:
        self.config_state.path = settings.config_path(self._config_file)
        try:
            self.config_state.data = settings.load_config(self._config_file)
            self.config_state.error = None
        except FileNotFoundError:
            self.config_state.data = None
            self.config_state.error = "config.json missing"
        except json.JSONDecodeError as exc:
            self.config_state.data = None
            self.config_state.error = f"config.json error: {exc.msg}"
        except ValueError as exc:
            self.config_state.data = None
            self.config_state.error = str(exc)
        except OSError as exc:
            self.config_state.data = None
            self.config_state.error = f"config.json unreadable: {exc.strerror or exc}"
        self._refresh_header()
        for tab in self.query(ResolutionTab):
            tab.reload_from_config()

    def _refresh_header(self) -> None:
        self.query_one("#header-path", Static).update(f"config: {self.config_state.path}")
        status = self.query_one("#header-status", Static)
        status.remove_class("status-error")
        if self.config_state.error:
            status.update(self.config_state.error)
            status.add_class("status-error")
        elif self.config_state.data is None:
            status.update("no config: built-in defaults")
        else:
            status.update("config: loaded")

    @staticmethod
    def _title_text() -> Text:
        return Text.assemble(
            ("BLOCK", TELEGRAM_BLUE),
            ("SCOPE > Inspector", "bold"),
        )
