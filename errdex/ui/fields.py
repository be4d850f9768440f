"""
Form steps and the mapping between record fields and editable text.

Scalar fields are edited verbatim. The resources list is edited one
resource per line and cleaned up (stripped, blanks dropped) on commit.
"""

from enum import Enum
from typing import TypeVar

from errdex.models.reports import ErrorReport, Filter


class EntryStep(Enum):
    """Steps of the new-entry and edit forms, in order."""

    SYMPTOM = "symptom"
    PROGRAM = "program"
    PROGRAM_VERSION = "program_version"
    DISTRO = "distro"
    DISTRO_VERSION = "distro_version"
    RESOURCES = "resources"
    SOLUTION = "solution"
    CONFIRM = "confirm"


class SearchStep(Enum):
    """Steps of the search form, in order."""

    SYMPTOM = "symptom"
    PROGRAM = "program"
    PROGRAM_VERSION = "program_version"
    DISTRO = "distro"
    DISTRO_VERSION = "distro_version"
    SOLUTION = "solution"
    EXECUTE = "execute"


FIELD_LABELS = {
    "symptom": "Symptom",
    "program": "Program",
    "program_version": "Program Version",
    "distro": "Distro",
    "distro_version": "Distro Version",
    "resources": "Resources",
    "solution": "Solution",
}

StepT = TypeVar("StepT", EntryStep, SearchStep)


def next_step(step: StepT) -> StepT:
    """The following step, or the same step when already last."""
    steps = list(type(step))
    position = steps.index(step)
    return steps[min(position + 1, len(steps) - 1)]


def previous_step(step: StepT) -> StepT:
    """The preceding step, or the same step when already first."""
    steps = list(type(step))
    position = steps.index(step)
    return steps[max(position - 1, 0)]


def is_last_step(step: StepT) -> bool:
    return step is list(type(step))[-1]


def field_label(step: StepT) -> str:
    """Human label for a field step; terminal steps have none."""
    return FIELD_LABELS.get(step.value, "")


def editor_title(step: EntryStep) -> str:
    if step is EntryStep.RESOURCES:
        return "Resources (one per line)"
    return field_label(step)


def get_field_text(report: ErrorReport, step: EntryStep) -> str:
    """Text shown in the field editor for ``step``."""
    if step is EntryStep.CONFIRM:
        return ""
    if step is EntryStep.RESOURCES:
        return "\n".join(report.resources)
    return getattr(report, step.value)


def set_field_text(report: ErrorReport, step: EntryStep, text: str) -> None:
    """Store edited text back into the report."""
    if step is EntryStep.CONFIRM:
        return
    if step is EntryStep.RESOURCES:
        report.resources = parse_resources(text)
    else:
        setattr(report, step.value, text)


def parse_resources(text: str) -> list[str]:
    """One resource per line; whitespace trimmed, blank lines dropped, order kept."""
    return [line.strip() for line in text.split("\n") if line.strip()]


def get_filter_text(search_filter: Filter, step: SearchStep) -> str:
    if step is SearchStep.EXECUTE:
        return ""
    return getattr(search_filter, step.value)


def set_filter_text(search_filter: Filter, step: SearchStep, text: str) -> None:
    if step is not SearchStep.EXECUTE:
        setattr(search_filter, step.value, text)
