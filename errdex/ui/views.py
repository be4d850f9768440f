"""
Plain-text rendering of each screen state.

Every function returns the full screen as a string; the Textual app puts
it into a single Static widget.
"""

from errdex.config.constants import DETAIL_LINE_WIDTH, FORM_VALUE_TRUNCATE_LENGTH
from errdex.models.reports import ErrorReport
from errdex.utils.text_formatting import chunk_line, truncate

from .fields import (
    EntryStep,
    SearchStep,
    editor_title,
    field_label,
    get_filter_text,
)
from .result_browser import DisplayMode, ResultSet, render_scrollable_field
from .states import (
    AppState,
    DeleteConfirmState,
    EditFormState,
    EntryFormState,
    FieldEditorState,
    FormState,
    MENU_LABELS,
    MenuState,
    SearchFormState,
    SearchResultsState,
)

CURSOR_GLYPH = "█"
# One character per newline so cursor columns still line up
NEWLINE_GLYPH = "⏎"
DATE_FORMAT = "%Y-%m-%d"

DETAIL_TITLES = {
    DisplayMode.SYMPTOM: "Symptom",
    DisplayMode.PROGRAM: "Program",
    DisplayMode.DISTRO: "Distro",
    DisplayMode.SOLUTION: "Solution",
}

DELETE_OPTIONS = ["Yes, delete it", "No, cancel"]


def _marker(active: bool) -> str:
    return ">" if active else " "


def _message_lines(state: AppState, prefix: str = "") -> list[str]:
    if not state.message:
        return []
    return [f"{prefix}{state.message}", ""]


def render(state: AppState) -> str:
    """Render whichever screen is active."""
    screen = state.screen
    if isinstance(screen, MenuState):
        return render_menu(state, screen)
    if isinstance(screen, SearchFormState):
        return render_search_form(state, screen)
    if isinstance(screen, SearchResultsState):
        return render_search_results(state, screen.results)
    if isinstance(screen, (EntryFormState, EditFormState)):
        return render_form(state, screen)
    if isinstance(screen, FieldEditorState):
        return render_field_editor(screen)
    if isinstance(screen, DeleteConfirmState):
        return render_delete_confirm(screen)
    raise TypeError(f"Unknown screen state: {screen!r}")


def render_menu(state: AppState, screen: MenuState) -> str:
    lines = ["Error Report Manager", ""]
    lines += _message_lines(state, "✓ ")
    for option, label in MENU_LABELS.items():
        lines.append(f"{_marker(screen.cursor == option.value)} {label}")
    lines += ["", "Press q to quit"]
    return "\n".join(lines)


def render_search_form(state: AppState, screen: SearchFormState) -> str:
    lines = ["Search Error Reports", ""]
    lines += _message_lines(state)
    for step in SearchStep:
        if step is SearchStep.EXECUTE:
            continue
        value = get_filter_text(screen.filter, step)
        lines.append(f"{_marker(screen.step is step)} {field_label(step)}: {value}")
    lines.append(f"{_marker(screen.step is SearchStep.EXECUTE)} Execute Search")
    lines += ["", "Press Enter to select, Tab/Shift+Tab to navigate, Esc to go back"]
    return "\n".join(lines)


def _detail_lines(results: ResultSet) -> list[str]:
    selected = results.selected
    if selected is None:
        return []

    lines = ["", "--- Details ---"]
    if results.display_mode is DisplayMode.ALL:
        lines += [
            f"Date: {selected.date.strftime(DATE_FORMAT)}",
            f"Program: {selected.program} {selected.program_version}",
            f"Distro: {selected.distro} {selected.distro_version}",
            f"Symptom: {selected.symptom}",
        ]
        if selected.resources:
            lines.append(f"Resources: {', '.join(selected.resources)}")
        lines.append(f"Solution: {selected.solution}")
    else:
        lines.append(f"{DETAIL_TITLES[results.display_mode]} (scroll: j/k):")
        lines += render_scrollable_field(results.field_text(), results.scroll_offset)
    return lines


def render_search_results(state: AppState, results: ResultSet) -> str:
    lines = ["Search Results", ""]
    lines += _message_lines(state)
    if not results.results:
        lines.append("No results found")
    else:
        for index, report in enumerate(results.results):
            lines.append(f"{_marker(index == results.cursor)} {report.display_name}")
        lines += _detail_lines(results)
    lines += [
        "",
        "Press s=symptom, p=program, d=distro, o=solution, a=all",
        "Press Enter/e to edit, x to delete, Esc to go back",
    ]
    return "\n".join(lines)


def _form_value(report: ErrorReport, step: EntryStep) -> str:
    if step is EntryStep.RESOURCES:
        value = ", ".join(report.resources)
    else:
        value = getattr(report, step.value)
    return truncate(value, FORM_VALUE_TRUNCATE_LENGTH)


def render_form(state: AppState, form: FormState) -> str:
    is_edit = isinstance(form, EditFormState)
    lines = ["Edit Error Report" if is_edit else "Enter New Error Report", ""]
    lines += _message_lines(state)
    for step in EntryStep:
        if step is EntryStep.CONFIRM:
            continue
        lines.append(f"{_marker(form.step is step)} {field_label(step)}: {_form_value(form.report, step)}")
    action = "Update Report" if is_edit else "Save Report"
    lines.append(f"{_marker(form.step is EntryStep.CONFIRM)} {action}")
    lines += ["", "Press Enter to edit field, Tab/Shift+Tab to navigate, Esc to go back"]
    return "\n".join(lines)


def render_field_editor(screen: FieldEditorState, width: int = DETAIL_LINE_WIDTH) -> str:
    buffer = screen.buffer
    lines = [f"Edit {editor_title(screen.step)}", ""]

    for line_index, line in enumerate(buffer.lines):
        pieces = chunk_line(line.replace("\n", NEWLINE_GLYPH), width)
        is_current = line_index == buffer.line_cursor
        for piece_index, piece in enumerate(pieces):
            if not is_current:
                lines.append(f"  {piece}")
                continue
            prefix = ">" if piece_index == 0 else "|"
            column = buffer.char_cursor - piece_index * width
            is_last_piece = piece_index == len(pieces) - 1
            # The cursor belongs to this piece, or sits just past the last one
            if 0 <= column < len(piece) or (is_last_piece and column == len(piece)):
                piece = piece[:column] + CURSOR_GLYPH + piece[column:]
            lines.append(f"{prefix} {piece}")

    lines += [
        "",
        "Press Ctrl+S to save, Esc to cancel, Enter for new line",
        "Arrow keys to navigate, Ctrl+C to copy line, Ctrl+V to paste",
    ]
    return "\n".join(lines)


def render_delete_confirm(screen: DeleteConfirmState) -> str:
    lines = [
        "Delete Error Report",
        "",
        "Are you sure you want to delete this report?",
        "",
        f"Report: {screen.target_name}",
        "",
    ]
    for index, option in enumerate(DELETE_OPTIONS):
        lines.append(f"{_marker(screen.cursor == index)} {option}")
    lines += ["", "Press Enter to select, Esc to cancel"]
    return "\n".join(lines)
