"""Error report records and search filters."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Optional

from errdex.utils.text_formatting import first_line


@dataclass
class ErrorReport:
    """One knowledge-base entry describing a problem and how it was solved."""

    id: str = ""
    symptom: str = ""
    date: datetime = field(default_factory=datetime.now)
    program: str = ""
    program_version: str = ""
    distro: str = ""
    distro_version: str = ""
    resources: list[str] = field(default_factory=list)
    solution: str = ""

    @property
    def display_name(self) -> str:
        """Short one-line name used in lists and confirmations."""
        return f"{self.program} - {first_line(self.symptom)}"

    def copy(self) -> "ErrorReport":
        """Copy that can be edited without touching this report."""
        return replace(self, resources=list(self.resources))

    def to_document(self, report_id: Optional[str] = None) -> dict[str, Any]:
        """Serialize to the search-engine document shape."""
        return {
            "id": report_id if report_id is not None else self.id,
            "symptom": self.symptom,
            "date": int(self.date.timestamp()),
            "program": self.program,
            "program_version": self.program_version,
            "distro": self.distro,
            "distro_version": self.distro_version,
            "resources": list(self.resources),
            "solution": self.solution,
        }

    @classmethod
    def from_hit(cls, hit: dict[str, Any]) -> "ErrorReport":
        """Build a report from a search hit, tolerating missing or odd fields."""
        raw_resources = hit.get("resources")
        if isinstance(raw_resources, list):
            resources = [item for item in raw_resources if isinstance(item, str)]
        else:
            resources = []

        return cls(
            id=_get_string(hit, "id"),
            symptom=_get_string(hit, "symptom"),
            date=_get_date(hit, "date"),
            program=_get_string(hit, "program"),
            program_version=_get_string(hit, "program_version"),
            distro=_get_string(hit, "distro"),
            distro_version=_get_string(hit, "distro_version"),
            resources=resources,
            solution=_get_string(hit, "solution"),
        )


@dataclass
class Filter:
    """Search criteria. The default Filter matches every report."""

    q: str = ""
    symptom: str = ""
    program: str = ""
    program_version: str = ""
    distro: str = ""
    distro_version: str = ""
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None
    resources_any: list[str] = field(default_factory=list)
    solution: str = ""

    def query_parts(self) -> list[str]:
        """Full-text terms in query order, empty ones omitted."""
        parts = [
            self.q,
            self.symptom,
            self.program,
            self.program_version,
            self.distro,
            self.distro_version,
            self.solution,
        ]
        return [part for part in parts if part]


def _get_date(data: dict[str, Any], key: str) -> datetime:
    """Unix-seconds field as a datetime; the epoch when missing or unrepresentable."""
    value = data.get(key)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(int(value))
        except (OverflowError, OSError, ValueError):
            pass
    return datetime.fromtimestamp(0)


def _get_string(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    return value if isinstance(value, str) else ""
