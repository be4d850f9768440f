"""
In-memory multi-line text editing for the field editor.

The buffer always holds at least one line. ``line_cursor`` indexes the
current line and ``char_cursor`` is a character offset into it, with
``0 <= char_cursor <= len(current line)``. Every operation keeps those
bounds, so none of them can fail.

Offsets count Python characters (code points). Wide and combining
characters are not treated specially.
"""

from typing import Optional


class TextBuffer:
    """Lines of text plus a (line, column) cursor."""

    def __init__(self, lines: Optional[list[str]] = None, line_cursor: int = 0, char_cursor: int = 0):
        self.lines = list(lines) if lines else [""]
        self.line_cursor = line_cursor
        self.char_cursor = char_cursor
        self.check_invariants()

    @classmethod
    def from_text(cls, text: str) -> "TextBuffer":
        """Seed a buffer from a field value; the cursor starts at (0, 0)."""
        return cls(text.split("\n"))

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    @property
    def current_line(self) -> str:
        return self.lines[self.line_cursor]

    @property
    def cursor(self) -> tuple[int, int]:
        return self.line_cursor, self.char_cursor

    def check_invariants(self) -> None:
        """Assert the cursor and line bounds. A failure is a programming error."""
        assert self.lines, "buffer has no lines"
        assert 0 <= self.line_cursor < len(self.lines), (
            f"line cursor {self.line_cursor} out of range for {len(self.lines)} lines"
        )
        assert 0 <= self.char_cursor <= len(self.current_line), (
            f"char cursor {self.char_cursor} out of range for line of {len(self.current_line)}"
        )

    # Editing

    def insert(self, text: str) -> None:
        """Insert text at the cursor and move past it. Newlines are kept literally."""
        line = self.current_line
        self.lines[self.line_cursor] = line[:self.char_cursor] + text + line[self.char_cursor:]
        self.char_cursor += len(text)

    def split_line(self) -> None:
        """Break the current line at the cursor; move to the start of the new line."""
        line = self.current_line
        self.lines[self.line_cursor] = line[:self.char_cursor]
        self.lines.insert(self.line_cursor + 1, line[self.char_cursor:])
        self.line_cursor += 1
        self.char_cursor = 0

    def backspace(self) -> None:
        """Delete the character before the cursor, joining lines at column 0."""
        if self.char_cursor > 0:
            line = self.current_line
            self.lines[self.line_cursor] = line[:self.char_cursor - 1] + line[self.char_cursor:]
            self.char_cursor -= 1
        elif self.line_cursor > 0:
            previous = self.lines[self.line_cursor - 1]
            self.lines[self.line_cursor - 1] = previous + self.current_line
            del self.lines[self.line_cursor]
            self.line_cursor -= 1
            self.char_cursor = len(previous)

    def delete_forward(self) -> None:
        """Delete the character under the cursor, pulling up the next line at line end."""
        line = self.current_line
        if self.char_cursor < len(line):
            self.lines[self.line_cursor] = line[:self.char_cursor] + line[self.char_cursor + 1:]
        elif self.line_cursor < len(self.lines) - 1:
            self.lines[self.line_cursor] = line + self.lines[self.line_cursor + 1]
            del self.lines[self.line_cursor + 1]

    # Navigation

    def move_up(self) -> None:
        if self.line_cursor > 0:
            self.line_cursor -= 1
            self._clamp_column()

    def move_down(self) -> None:
        if self.line_cursor < len(self.lines) - 1:
            self.line_cursor += 1
            self._clamp_column()

    def move_left(self) -> None:
        if self.char_cursor > 0:
            self.char_cursor -= 1
        elif self.line_cursor > 0:
            self.line_cursor -= 1
            self.char_cursor = len(self.current_line)

    def move_right(self) -> None:
        if self.char_cursor < len(self.current_line):
            self.char_cursor += 1
        elif self.line_cursor < len(self.lines) - 1:
            self.line_cursor += 1
            self.char_cursor = 0

    def home(self) -> None:
        self.char_cursor = 0

    def end(self) -> None:
        self.char_cursor = len(self.current_line)

    def _clamp_column(self) -> None:
        if self.char_cursor > len(self.current_line):
            self.char_cursor = len(self.current_line)

    # Clipboard

    def copy_line(self) -> str:
        """Return the current line for the clipboard."""
        return self.current_line

    def paste(self, text: str) -> None:
        """Insert clipboard text on the current line. Empty text is ignored."""
        if text:
            self.insert(text)

    def __repr__(self) -> str:
        return f"TextBuffer(lines={self.lines!r}, cursor={self.cursor})"
