"""
Centralized constants for errdex.

Layout numbers, backend limits and the environment variables the
application understands all live here.
"""

from pathlib import Path

ERRDEX_CONFIG_DIR = Path.home() / ".config" / "errdex"

# =============================================================================
# SEARCH BACKEND
# =============================================================================

DEFAULT_MEILISEARCH_URL = "http://localhost:7700"
DEFAULT_MEILISEARCH_KEY = "aSampleMasterKey"
DEFAULT_INDEX_NAME = "error_reports"

SEARCH_RESULT_LIMIT = 100  # Hits returned per search
DEFAULT_TASK_TIMEOUT_MS = 5000  # Wait for add/delete tasks to finish
TASK_POLL_INTERVAL_SECONDS = 0.05
REQUEST_TIMEOUT_SECONDS = 10

# Index layout: full-text fields vs. exact-filter-only fields
SEARCHABLE_ATTRIBUTES = [
    "symptom",
    "program",
    "program_version",
    "distro",
    "distro_version",
    "solution",
]
FILTERABLE_ATTRIBUTES = [
    "date",
    "resources",
]

# =============================================================================
# UI LAYOUT
# =============================================================================

DETAIL_LINE_WIDTH = 70  # Wrap width for field views and the field editor
DETAIL_PAGE_SIZE = 10  # Visible lines in a scrollable field view
FORM_VALUE_TRUNCATE_LENGTH = 50  # Form rows show at most this many chars

# =============================================================================
# LOGGING
# =============================================================================

DEFAULT_LOG_FILE = ERRDEX_CONFIG_DIR / "errdex.log"
MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 2

# =============================================================================
# ENVIRONMENT VARIABLES
# =============================================================================

ENV_VAR_DEFINITIONS = {
    "MEILISEARCH_URL": {
        "description": "Meilisearch server URL",
        "default": DEFAULT_MEILISEARCH_URL,
    },
    "MEILISEARCH_KEY": {
        "description": "Meilisearch API key",
        "default": DEFAULT_MEILISEARCH_KEY,
        "sensitive": True,
    },
    "MEILISEARCH_INDEX": {
        "description": "Index holding the error reports",
        "default": DEFAULT_INDEX_NAME,
    },
    "ERRDEX_TASK_TIMEOUT_MS": {
        "description": "Milliseconds to wait for a write task to complete",
        "default": str(DEFAULT_TASK_TIMEOUT_MS),
    },
}
