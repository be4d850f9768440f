"""
Key handling for the error report TUI.

``Navigator.handle_key`` takes the application state and one key name,
dispatches to the handler of the active screen and mutates the state in
place. Keys use Textual's names ("escape", "enter", "shift+tab", "ctrl+s",
...); a printable character arrives as the character itself.

Backend calls happen inline and block until they return. Their failures
become status messages; nothing is retried.
"""

import logging
from typing import Callable, Optional, Protocol

from errdex.exceptions import RepositoryError
from errdex.models.reports import ErrorReport, Filter
from errdex.utils import clipboard

from .fields import (
    EntryStep,
    SearchStep,
    get_field_text,
    get_filter_text,
    is_last_step,
    next_step,
    previous_step,
    set_field_text,
    set_filter_text,
)
from .result_browser import DISPLAY_MODE_KEYS, ResultSet
from .states import (
    AppState,
    DeleteConfirmState,
    EditFormState,
    EntryFormState,
    FieldEditorState,
    FormState,
    MENU_LABELS,
    MenuOption,
    MenuState,
    SearchFormState,
    SearchResultsState,
)
from .text_buffer import TextBuffer

logger = logging.getLogger(__name__)
key_logger = logging.getLogger("key_events")

MSG_SAVED = "Error report saved successfully!"
MSG_UPDATED = "Error report updated successfully!"
MSG_DELETED = "Report deleted successfully!"


class ReportStore(Protocol):
    """The backend operations the navigator needs."""

    def search(self, search_filter: Filter) -> list[ErrorReport]: ...

    def save(self, report: ErrorReport) -> str: ...

    def update(self, report: ErrorReport, report_id: str) -> None: ...

    def delete(self, report_id: str) -> None: ...


def is_printable(key: str) -> bool:
    return len(key) == 1 and key.isprintable()


class Navigator:
    """Drives state transitions for every screen."""

    def __init__(
        self,
        store: ReportStore,
        copy_to_clipboard: Optional[Callable[[str], object]] = None,
        read_clipboard: Optional[Callable[[], str]] = None,
    ):
        self.store = store
        self.copy_to_clipboard = copy_to_clipboard or clipboard.copy_to_system
        self.read_clipboard = read_clipboard or clipboard.read_from_system
        self._handlers = {
            MenuState: self._menu_key,
            SearchFormState: self._search_form_key,
            SearchResultsState: self._search_results_key,
            EntryFormState: self._form_key,
            EditFormState: self._form_key,
            FieldEditorState: self._field_editor_key,
            DeleteConfirmState: self._delete_confirm_key,
        }

    def handle_key(self, state: AppState, key: str) -> bool:
        """Apply one key press.

        Returns:
            False when the application should quit, True otherwise
        """
        key_logger.debug("%s: %r", state.mode.value, key)
        handler = self._handlers[type(state.screen)]
        return handler(state, key) is not False

    def handle_paste(self, state: AppState, text: str) -> None:
        """Insert pasted terminal text into the active editor or search field."""
        screen = state.screen
        if isinstance(screen, FieldEditorState):
            screen.buffer.paste(text)
        elif isinstance(screen, SearchFormState) and screen.step is not SearchStep.EXECUTE:
            current = get_filter_text(screen.filter, screen.step)
            set_filter_text(screen.filter, screen.step, current + text)

    # Menu

    def _back_to_menu(self, state: AppState) -> None:
        """Leave a flow without saving; its status message no longer applies."""
        state.message = ""
        state.screen = MenuState()

    def _menu_key(self, state: AppState, key: str) -> Optional[bool]:
        screen: MenuState = state.screen
        if key in ("q", "ctrl+c"):
            logger.info("Quit requested from menu")
            return False
        if key in ("up", "k", "shift+tab"):
            screen.cursor = max(0, screen.cursor - 1)
        elif key in ("down", "j", "tab"):
            screen.cursor = min(len(MENU_LABELS) - 1, screen.cursor + 1)
        elif key == "enter":
            state.message = ""
            if screen.option is MenuOption.SEARCH:
                state.screen = SearchFormState()
            else:
                state.screen = EntryFormState(report=ErrorReport())
        return None

    # Search form

    def _search_form_key(self, state: AppState, key: str) -> None:
        screen: SearchFormState = state.screen
        if key == "escape":
            self._back_to_menu(state)
        elif key == "enter":
            if is_last_step(screen.step):
                self._run_search(state, screen)
            else:
                screen.step = next_step(screen.step)
        elif key == "tab":
            screen.step = next_step(screen.step)
        elif key == "shift+tab":
            screen.step = previous_step(screen.step)
        elif screen.step is SearchStep.EXECUTE:
            return
        elif key == "backspace":
            current = get_filter_text(screen.filter, screen.step)
            set_filter_text(screen.filter, screen.step, current[:-1])
        elif is_printable(key):
            current = get_filter_text(screen.filter, screen.step)
            set_filter_text(screen.filter, screen.step, current + key)

    def _run_search(self, state: AppState, screen: SearchFormState) -> None:
        try:
            reports = self.store.search(screen.filter)
        except RepositoryError as e:
            logger.error("Search failed: %s", e)
            state.message = f"Search failed: {e}"
            return
        state.message = ""
        state.screen = SearchResultsState(results=ResultSet(results=reports))

    # Search results

    def _search_results_key(self, state: AppState, key: str) -> None:
        results = state.screen.results
        if key == "escape":
            self._back_to_menu(state)
        elif key in ("up", "k"):
            results.move_up()
        elif key in ("down", "j"):
            results.move_down()
        elif key in DISPLAY_MODE_KEYS:
            results.set_display_mode(DISPLAY_MODE_KEYS[key])
        elif key in ("enter", "e"):
            selected = results.selected
            if selected is not None:
                state.screen = EditFormState(
                    report=selected.copy(), original_id=selected.id, results=results
                )
        elif key in ("delete", "x"):
            selected = results.selected
            if selected is not None:
                state.screen = DeleteConfirmState(
                    results=results, target_id=selected.id, target_name=selected.display_name
                )

    # Entry and edit forms

    def _form_key(self, state: AppState, key: str) -> None:
        form = state.screen
        if key == "escape":
            if isinstance(form, EditFormState):
                state.screen = SearchResultsState(results=form.results)
            else:
                self._back_to_menu(state)
        elif key == "enter":
            if form.step is EntryStep.CONFIRM:
                self._persist(state, form)
            else:
                text = get_field_text(form.report, form.step)
                state.screen = FieldEditorState(form=form, buffer=TextBuffer.from_text(text))
        elif key == "tab":
            form.step = next_step(form.step)
        elif key == "shift+tab":
            form.step = previous_step(form.step)

    def _persist(self, state: AppState, form: FormState) -> None:
        try:
            if isinstance(form, EditFormState):
                self.store.update(form.report, form.original_id)
                message = MSG_UPDATED
            else:
                self.store.save(form.report)
                message = MSG_SAVED
        except RepositoryError as e:
            verb = "updating" if isinstance(form, EditFormState) else "saving"
            logger.error("Error %s report: %s", verb, e)
            state.message = f"Error {verb} report: {e}"
            return
        state.message = message
        state.screen = MenuState()

    # Field editor

    def _field_editor_key(self, state: AppState, key: str) -> None:
        screen: FieldEditorState = state.screen
        buffer = screen.buffer
        if key == "escape":
            state.screen = screen.form
        elif key == "ctrl+s":
            set_field_text(screen.form.report, screen.step, buffer.text)
            state.screen = screen.form
        elif key == "ctrl+c":
            state.clipboard = buffer.copy_line()
            self.copy_to_clipboard(state.clipboard)
        elif key == "ctrl+v":
            system_text = self.read_clipboard()
            if system_text:
                state.clipboard = system_text
            buffer.paste(state.clipboard)
        elif key == "enter":
            buffer.split_line()
        elif key == "backspace":
            buffer.backspace()
        elif key == "delete":
            buffer.delete_forward()
        elif key == "up":
            buffer.move_up()
        elif key == "down":
            buffer.move_down()
        elif key == "left":
            buffer.move_left()
        elif key == "right":
            buffer.move_right()
        elif key == "home":
            buffer.home()
        elif key == "end":
            buffer.end()
        elif is_printable(key):
            buffer.insert(key)

    # Delete confirmation

    def _delete_confirm_key(self, state: AppState, key: str) -> None:
        screen: DeleteConfirmState = state.screen
        if key == "escape":
            state.screen = SearchResultsState(results=screen.results)
        elif key in ("up", "k"):
            screen.cursor = 0
        elif key in ("down", "j"):
            screen.cursor = 1
        elif key == "enter":
            if screen.cursor == 0:
                self._delete(state, screen)
            state.screen = SearchResultsState(results=screen.results)

    def _delete(self, state: AppState, screen: DeleteConfirmState) -> None:
        try:
            self.store.delete(screen.target_id)
        except RepositoryError as e:
            logger.error("Error deleting report %s: %s", screen.target_id, e)
            state.message = f"Error deleting report: {e}"
            return
        screen.results.remove_selected()
        state.message = MSG_DELETED
