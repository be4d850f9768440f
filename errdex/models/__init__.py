"""Data models for errdex.

- reports: the ErrorReport record and the search Filter
"""

from .reports import ErrorReport, Filter

__all__ = ["ErrorReport", "Filter"]
