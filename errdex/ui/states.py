"""
Application state for the error report TUI.

Exactly one screen state is active at a time. Each screen state is its own
dataclass carrying only what that mode needs; ``AppState`` holds the active
one plus the status message and the internal clipboard.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from errdex.models.reports import ErrorReport, Filter

from .fields import EntryStep, SearchStep
from .result_browser import ResultSet
from .text_buffer import TextBuffer


class NavigationState(Enum):
    """Names of the UI modes."""

    MENU = "menu"
    SEARCH_FORM = "search_form"
    SEARCH_RESULTS = "search_results"
    ENTRY_FORM = "entry_form"
    ENTRY_FIELD_EDITOR = "entry_field_editor"
    EDIT_FORM = "edit_form"
    EDIT_FIELD_EDITOR = "edit_field_editor"
    DELETE_CONFIRM = "delete_confirm"


class MenuOption(Enum):
    SEARCH = 0
    NEW_ENTRY = 1


MENU_LABELS = {
    MenuOption.SEARCH: "Search Error Reports",
    MenuOption.NEW_ENTRY: "Enter New Error Report",
}


@dataclass
class MenuState:
    cursor: int = 0

    @property
    def option(self) -> MenuOption:
        return MenuOption(self.cursor)


@dataclass
class SearchFormState:
    step: SearchStep = SearchStep.SYMPTOM
    filter: Filter = field(default_factory=Filter)


@dataclass
class SearchResultsState:
    results: ResultSet = field(default_factory=ResultSet)


@dataclass
class EntryFormState:
    """Form for a report that has not been saved yet."""

    report: ErrorReport = field(default_factory=ErrorReport)
    step: EntryStep = EntryStep.SYMPTOM


@dataclass
class EditFormState:
    """Form for an existing report.

    ``report`` is a working copy; the search results are kept untouched so
    cancelling returns to them as they were.
    """

    report: ErrorReport
    original_id: str
    results: ResultSet
    step: EntryStep = EntryStep.SYMPTOM


FormState = Union[EntryFormState, EditFormState]


@dataclass
class FieldEditorState:
    """Multi-line editor for the current step of ``form``.

    Committing writes the buffer into ``form.report``; cancelling drops it.
    """

    form: FormState
    buffer: TextBuffer

    @property
    def step(self) -> EntryStep:
        return self.form.step


@dataclass
class DeleteConfirmState:
    results: ResultSet
    target_id: str
    target_name: str
    cursor: int = 0


ScreenState = Union[
    MenuState,
    SearchFormState,
    SearchResultsState,
    EntryFormState,
    EditFormState,
    FieldEditorState,
    DeleteConfirmState,
]


@dataclass
class AppState:
    """The whole UI state, passed through every key transition."""

    screen: ScreenState = field(default_factory=MenuState)
    message: str = ""
    clipboard: str = ""

    @property
    def mode(self) -> NavigationState:
        screen = self.screen
        if isinstance(screen, MenuState):
            return NavigationState.MENU
        if isinstance(screen, SearchFormState):
            return NavigationState.SEARCH_FORM
        if isinstance(screen, SearchResultsState):
            return NavigationState.SEARCH_RESULTS
        if isinstance(screen, EntryFormState):
            return NavigationState.ENTRY_FORM
        if isinstance(screen, EditFormState):
            return NavigationState.EDIT_FORM
        if isinstance(screen, FieldEditorState):
            if isinstance(screen.form, EditFormState):
                return NavigationState.EDIT_FIELD_EDITOR
            return NavigationState.ENTRY_FIELD_EDITOR
        if isinstance(screen, DeleteConfirmState):
            return NavigationState.DELETE_CONFIRM
        raise TypeError(f"Unknown screen state: {screen!r}")
