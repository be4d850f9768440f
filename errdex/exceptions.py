"""Custom exception hierarchy for errdex.

Exception Hierarchy:
    ErrdexError (base)
    ├── RepositoryError - search backend operations
    │   ├── RepositoryConnectionError
    │   └── RepositoryRequestError
    └── ConfigurationError - settings/configuration issues

Usage:
    from errdex.exceptions import RepositoryError

    try:
        repository.delete(report_id)
    except RepositoryError as e:
        status = f"Error deleting report: {e}"
"""

from typing import Any, Optional


class ErrdexError(Exception):
    """Base exception for all errdex errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., IDs, index names)
    """

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


# =============================================================================
# Repository Errors
# =============================================================================


class RepositoryError(ErrdexError):
    """Base exception for search backend operations."""

    pass


class RepositoryConnectionError(RepositoryError):
    """The search backend could not be reached."""

    def __init__(
        self,
        message: str = "Search backend unreachable",
        *,
        url: Optional[str] = None,
        **context: Any,
    ) -> None:
        if url:
            context["url"] = url
        super().__init__(message, **context)


class RepositoryRequestError(RepositoryError):
    """The search backend rejected a request or a write task failed."""

    def __init__(
        self,
        message: str = "Search backend request failed",
        *,
        index: Optional[str] = None,
        code: Optional[str] = None,
        **context: Any,
    ) -> None:
        if index:
            context["index"] = index
        if code:
            context["code"] = code
        super().__init__(message, **context)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(ErrdexError):
    """Configuration or settings error."""

    def __init__(
        self,
        message: str = "Configuration error",
        *,
        setting: Optional[str] = None,
        **context: Any,
    ) -> None:
        if setting:
            context["setting"] = setting
        super().__init__(message, **context)
