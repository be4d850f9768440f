"""
Meilisearch-backed storage for error reports.

Talks to the Meilisearch REST API with ``requests``. Every call is
synchronous: the TUI blocks until the backend answers. Transport failures
and error responses are re-raised as RepositoryError subclasses so callers
only need to know one exception family.
"""

import logging
import re
import time
from typing import Any, Optional
from urllib.parse import quote

import requests

from errdex.config.constants import (
    FILTERABLE_ATTRIBUTES,
    REQUEST_TIMEOUT_SECONDS,
    SEARCH_RESULT_LIMIT,
    SEARCHABLE_ATTRIBUTES,
    TASK_POLL_INTERVAL_SECONDS,
)
from errdex.config.settings import Settings
from errdex.exceptions import RepositoryConnectionError, RepositoryRequestError
from errdex.models.reports import ErrorReport, Filter

logger = logging.getLogger(__name__)

# Meilisearch document ids may only hold these characters
_UNSAFE_ID_CHARS = re.compile(r"[^A-Za-z0-9_-]")

_FINISHED_TASK_STATUSES = ("succeeded", "failed", "canceled")


def build_search_query(search_filter: Filter) -> str:
    """Space-join the filter's full-text terms in their fixed order."""
    return " ".join(search_filter.query_parts())


def build_filter_expression(search_filter: Filter) -> Optional[str]:
    """Build the structured filter for dates and resources.

    Returns:
        The AND-joined expression, or None when the filter has no
        structured constraints
    """
    clauses = []

    if search_filter.date_from is not None:
        clauses.append(f"date >= {int(search_filter.date_from.timestamp())}")
    if search_filter.date_to is not None:
        clauses.append(f"date <= {int(search_filter.date_to.timestamp())}")
    if search_filter.resources_any:
        resource_clauses = [
            f'resources = "{_quote(resource)}"' for resource in search_filter.resources_any
        ]
        clauses.append(f"({' OR '.join(resource_clauses)})")

    if not clauses:
        return None
    return " AND ".join(clauses)


def generate_report_id(program: str) -> str:
    """Time-based unique id: nanosecond timestamp plus the program name."""
    return f"{time.time_ns()}-{_UNSAFE_ID_CHARS.sub('_', program)}"


def _quote(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def _error_body(response: requests.Response) -> dict[str, Any]:
    """Meilisearch error payload, or {} when the body is not one."""
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


class ReportRepository:
    """Search, save, update and delete error reports in one Meilisearch index."""

    def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
        self.settings = settings
        self._session = session

    @property
    def session(self) -> requests.Session:
        """Lazily create the HTTP session carrying the API key."""
        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update(
                {"Authorization": f"Bearer {self.settings.meilisearch_key}"}
            )
        return self._session

    def _url(self, *parts: str) -> str:
        return "/".join([self.settings.meilisearch_url.rstrip("/"), *parts])

    def _index_url(self, *parts: str) -> str:
        return self._url("indexes", quote(self.settings.index_name, safe=""), *parts)

    def _request(self, method: str, url: str, action: str, **kwargs: Any) -> Any:
        """Send one request and return its decoded JSON body."""
        try:
            response = self.session.request(
                method, url, timeout=REQUEST_TIMEOUT_SECONDS, **kwargs
            )
        except requests.ConnectionError as e:
            logger.error("%s failed, backend unreachable: %s", action, e)
            raise RepositoryConnectionError(
                f"Failed to {action}", url=self.settings.meilisearch_url
            ) from e
        except requests.Timeout as e:
            logger.error("%s timed out: %s", action, e)
            raise RepositoryRequestError(
                f"Timed out trying to {action}", index=self.settings.index_name
            ) from e
        except requests.RequestException as e:
            logger.error("%s failed: %s", action, e)
            raise RepositoryRequestError(
                f"Failed to {action}", index=self.settings.index_name
            ) from e

        if not response.ok:
            error = _error_body(response)
            logger.error("%s failed with HTTP %d: %s", action, response.status_code, error)
            raise RepositoryRequestError(
                f"Failed to {action}: {error.get('message', f'HTTP {response.status_code}')}",
                index=self.settings.index_name,
                code=error.get("code"),
            )

        try:
            return response.json()
        except ValueError as e:
            raise RepositoryRequestError(
                f"Failed to {action}: invalid response", index=self.settings.index_name
            ) from e

    def _wait(self, task_info: Any, action: str) -> None:
        """Poll an enqueued write task until it finishes; raise unless it succeeded."""
        task_uid = task_info.get("taskUid") if isinstance(task_info, dict) else None
        if task_uid is None:
            raise RepositoryRequestError(
                f"Failed to {action}: no task returned", index=self.settings.index_name
            )

        deadline = time.monotonic() + self.settings.task_timeout_ms / 1000
        while True:
            task = self._request("GET", self._url("tasks", str(task_uid)), action)
            status = task.get("status")
            if status in _FINISHED_TASK_STATUSES:
                break
            if time.monotonic() >= deadline:
                raise RepositoryRequestError(
                    f"Timed out trying to {action}",
                    index=self.settings.index_name,
                    task_uid=task_uid,
                )
            time.sleep(TASK_POLL_INTERVAL_SECONDS)

        if status != "succeeded":
            error = task.get("error") or {}
            raise RepositoryRequestError(
                f"Failed to {action}: {error.get('message', status)}",
                index=self.settings.index_name,
                code=error.get("code"),
            )

    def search(self, search_filter: Filter) -> list[ErrorReport]:
        """Run a full-text search combined with the structured filter."""
        query = build_search_query(search_filter)
        body: dict[str, Any] = {"q": query, "limit": SEARCH_RESULT_LIMIT}
        expression = build_filter_expression(search_filter)
        if expression:
            body["filter"] = expression

        logger.debug("Searching with %s", body)
        response = self._request("POST", self._index_url("search"), "search", json=body)

        hits = response.get("hits", []) if isinstance(response, dict) else []
        reports = [ErrorReport.from_hit(hit) for hit in hits if isinstance(hit, dict)]
        logger.info("Search %r returned %d reports", query, len(reports))
        return reports

    def _put_document(self, document: dict[str, Any], action: str) -> None:
        task_info = self._request(
            "POST",
            self._index_url("documents"),
            action,
            params={"primaryKey": "id"},
            json=[document],
        )
        self._wait(task_info, action)

    def save(self, report: ErrorReport) -> str:
        """Persist a new report and assign its id.

        Returns:
            The new id, also stored on ``report.id``
        """
        report_id = generate_report_id(report.program)

        logger.debug("Saving report %s", report_id)
        self._put_document(report.to_document(report_id), "save error report")

        report.id = report_id
        logger.info("Saved report %s", report_id)
        return report_id

    def update(self, report: ErrorReport, report_id: str) -> None:
        """Replace the stored document at ``report_id`` with the report's fields."""
        logger.debug("Updating report %s", report_id)
        self._put_document(report.to_document(report_id), "update error report")

        report.id = report_id
        logger.info("Updated report %s", report_id)

    def delete(self, report_id: str) -> None:
        """Delete the report stored at ``report_id``."""
        logger.debug("Deleting report %s", report_id)
        action = "delete error report"
        task_info = self._request(
            "DELETE", self._index_url("documents", quote(report_id, safe="")), action
        )
        self._wait(task_info, action)
        logger.info("Deleted report %s", report_id)

    def ensure_index_configured(self) -> None:
        """Declare searchable and filterable attributes. Safe to repeat."""
        for setting, attributes in (
            ("searchable-attributes", SEARCHABLE_ATTRIBUTES),
            ("filterable-attributes", FILTERABLE_ATTRIBUTES),
        ):
            action = f"update {setting.replace('-', ' ')}"
            task_info = self._request(
                "PUT", self._index_url("settings", setting), action, json=attributes
            )
            self._wait(task_info, action)
        logger.info("Index %s configured", self.settings.index_name)
