"""Shared pytest fixtures for errdex tests."""

from unittest.mock import MagicMock

import pytest

from errdex.config.settings import Settings
from errdex.ui.navigator import Navigator
from errdex.ui.states import AppState


@pytest.fixture
def settings():
    return Settings(
        meilisearch_url="http://localhost:7700",
        meilisearch_key="testMasterKey",
        index_name="error_reports_test",
        task_timeout_ms=1000,
    )


@pytest.fixture
def store():
    """Stand-in for ReportRepository; every call succeeds by default."""
    mock = MagicMock()
    mock.search.return_value = []
    mock.save.return_value = "new-id"
    return mock


@pytest.fixture
def clipboard_calls():
    """Record OS clipboard traffic; ``clipboard_calls["system"]`` is what a read returns."""
    return {"copied": [], "system": ""}


@pytest.fixture
def navigator(store, clipboard_calls):
    return Navigator(
        store,
        copy_to_clipboard=clipboard_calls["copied"].append,
        read_clipboard=lambda: clipboard_calls["system"],
    )


@pytest.fixture
def state():
    return AppState()


@pytest.fixture
def press(navigator, state):
    """Feed keys to the navigator; returns the last handle_key result."""

    def _press(*keys: str) -> bool:
        result = True
        for key in keys:
            result = navigator.handle_key(state, key)
        return result

    return _press
