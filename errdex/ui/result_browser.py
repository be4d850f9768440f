"""
Search result selection and the scrollable single-field detail view.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from errdex.config.constants import DETAIL_LINE_WIDTH, DETAIL_PAGE_SIZE
from errdex.models.reports import ErrorReport
from errdex.utils.text_formatting import wrap_text

MORE_ABOVE = "↑ (more above)"
MORE_BELOW = "↓ (more below)"
EMPTY_FIELD = "(empty)"


class DisplayMode(Enum):
    """What the detail pane shows for the selected result."""

    ALL = "all"
    SYMPTOM = "symptom"
    PROGRAM = "program"
    DISTRO = "distro"
    SOLUTION = "solution"


# Keys that switch the detail pane
DISPLAY_MODE_KEYS = {
    "s": DisplayMode.SYMPTOM,
    "p": DisplayMode.PROGRAM,
    "d": DisplayMode.DISTRO,
    "o": DisplayMode.SOLUTION,
    "a": DisplayMode.ALL,
}


def render_scrollable_field(
    text: str,
    scroll_offset: int,
    line_width: int = DETAIL_LINE_WIDTH,
    page_size: int = DETAIL_PAGE_SIZE,
) -> list[str]:
    """Window of word-wrapped ``text`` starting at ``scroll_offset``.

    Returns:
        The display lines, with scroll indicators when content is hidden
        above or below the window
    """
    if not text:
        return [EMPTY_FIELD]

    wrapped = wrap_text(text, line_width)
    start = max(0, min(scroll_offset, len(wrapped) - 1))
    end = min(start + page_size, len(wrapped))

    lines = wrapped[start:end]
    if start > 0:
        lines.insert(0, MORE_ABOVE)
    if end < len(wrapped):
        lines.append(MORE_BELOW)
    return lines


def max_scroll(text: str, line_width: int = DETAIL_LINE_WIDTH, page_size: int = DETAIL_PAGE_SIZE) -> int:
    """Largest useful scroll offset for ``text``."""
    return max(0, len(wrap_text(text, line_width)) - page_size)


@dataclass
class ResultSet:
    """Results of the last search with a selection cursor and a detail pane."""

    results: list[ErrorReport] = field(default_factory=list)
    cursor: int = 0
    display_mode: DisplayMode = DisplayMode.ALL
    scroll_offset: int = 0

    @property
    def selected(self) -> Optional[ErrorReport]:
        if 0 <= self.cursor < len(self.results):
            return self.results[self.cursor]
        return None

    def move_up(self) -> None:
        """Select the previous result (ALL mode) or scroll the field view up."""
        if self.display_mode is DisplayMode.ALL:
            if self.cursor > 0:
                self.cursor -= 1
                self.scroll_offset = 0
        elif self.scroll_offset > 0:
            self.scroll_offset -= 1

    def move_down(self) -> None:
        """Select the next result (ALL mode) or scroll the field view down."""
        if self.display_mode is DisplayMode.ALL:
            if self.cursor < len(self.results) - 1:
                self.cursor += 1
                self.scroll_offset = 0
        elif self.scroll_offset < max_scroll(self.field_text()):
            self.scroll_offset += 1

    def set_display_mode(self, mode: DisplayMode) -> None:
        self.display_mode = mode
        self.scroll_offset = 0

    def field_text(self) -> str:
        """Text of the selected result for the current single-field mode."""
        report = self.selected
        if report is None:
            return ""
        if self.display_mode is DisplayMode.SYMPTOM:
            return report.symptom
        if self.display_mode is DisplayMode.PROGRAM:
            return f"{report.program} {report.program_version}"
        if self.display_mode is DisplayMode.DISTRO:
            return f"{report.distro} {report.distro_version}"
        if self.display_mode is DisplayMode.SOLUTION:
            return report.solution
        return ""

    def remove_selected(self) -> None:
        """Drop the selected result and keep the cursor in range."""
        if self.selected is not None:
            del self.results[self.cursor]
        if self.cursor >= len(self.results):
            self.cursor = max(0, len(self.results) - 1)
        self.scroll_offset = 0
