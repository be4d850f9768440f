"""
Text formatting utilities for errdex.

Reusable wrapping and truncation helpers for the terminal views. All
lengths are counted in characters, not display cells.
"""


def first_line(text: str) -> str:
    """Return the first line of a possibly multi-line string."""
    return text.split("\n", 1)[0]


def truncate(text: str, max_len: int = 50) -> str:
    """
    Truncate text to a maximum length with ellipsis.

    Args:
        text: The text to truncate
        max_len: Maximum length before truncation (default: 50)

    Returns:
        Truncated text with "..." if it was too long, otherwise original text
    """
    if len(text) > max_len:
        return text[:max_len] + "..."
    return text


def wrap_line(line: str, width: int) -> list[str]:
    """
    Word-wrap a single line.

    Breaks at the last space that keeps the piece within ``width``; a word
    longer than ``width`` is broken at the width boundary. Pieces are
    stripped of surrounding whitespace.

    Args:
        line: Text without newlines
        width: Maximum piece length; values <= 0 disable wrapping

    Returns:
        The wrapped pieces, never empty
    """
    if width <= 0 or len(line) <= width:
        return [line]

    wrapped = []
    while len(line) > width:
        break_at = line.rfind(" ", 1, width + 1)
        if break_at == -1:
            break_at = width
        wrapped.append(line[:break_at].strip())
        line = line[break_at:].strip()

    if line:
        wrapped.append(line)

    return wrapped


def wrap_text(text: str, width: int) -> list[str]:
    """Word-wrap multi-line text, keeping its own line breaks."""
    wrapped = []
    for line in text.split("\n"):
        wrapped.extend(wrap_line(line, width))
    return wrapped


def chunk_line(line: str, width: int) -> list[str]:
    """Split a line into fixed-width slices.

    Unlike wrap_line nothing is stripped, so a column offset maps exactly
    onto (slice index, offset in slice). Used by the field editor view.
    """
    if width <= 0 or len(line) <= width:
        return [line]
    return [line[i:i + width] for i in range(0, len(line), width)]
