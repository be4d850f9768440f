#!/usr/bin/env python3
"""
Textual application for browsing and editing error reports.

The app is a thin shell: a single focusable Static shows the rendered
state and forwards every key to the Navigator.
"""

import logging
from typing import Optional

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Static

from .navigator import Navigator, ReportStore
from .states import AppState
from .views import render

logger = logging.getLogger(__name__)


class ReportView(Static):
    """Focusable view that owns all keyboard input."""

    can_focus = True

    def on_key(self, event: events.Key) -> None:
        key = event.character if event.is_printable and event.character else event.key
        # Keep app-level bindings (tab focus, ctrl+c) from seeing the key
        event.stop()
        event.prevent_default()
        self.app.apply_key(key)

    def on_paste(self, event: events.Paste) -> None:
        event.stop()
        self.app.apply_paste(event.text)


class ErrorReportApp(App[None]):
    """Error Report Manager TUI."""

    TITLE = "Error Report Manager"

    CSS = """
    Screen {
        background: $surface;
    }

    #report-view {
        width: 100%;
        height: 100%;
        padding: 1 2;
    }
    """

    def __init__(self, store: ReportStore, navigator: Optional[Navigator] = None, **kwargs):
        super().__init__(**kwargs)
        self.navigator = navigator or Navigator(store)
        self.app_state = AppState()
        self.rendered = ""

    def compose(self) -> ComposeResult:
        yield ReportView(id="report-view")

    def on_mount(self) -> None:
        logger.info("ErrorReportApp mounted")
        self.query_one("#report-view", ReportView).focus()
        self.refresh_view()

    def refresh_view(self) -> None:
        """Re-render the active screen."""
        self.rendered = render(self.app_state)
        self.query_one("#report-view", ReportView).update(Text(self.rendered))

    def apply_key(self, key: str) -> None:
        if not self.navigator.handle_key(self.app_state, key):
            self.exit()
            return
        self.refresh_view()

    def apply_paste(self, text: str) -> None:
        self.navigator.handle_paste(self.app_state, text)
        self.refresh_view()


def run_tui(store: ReportStore) -> None:
    """Run the TUI until the user quits."""
    ErrorReportApp(store).run()
