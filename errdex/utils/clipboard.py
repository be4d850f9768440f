"""
Best-effort access to the OS clipboard.

Shells out to the platform clipboard tools. Every failure is swallowed:
callers fall back to their own internal clipboard.
"""

import logging
import subprocess
import sys

logger = logging.getLogger(__name__)

CLIPBOARD_TIMEOUT_SECONDS = 5

_COPY_COMMANDS = {
    "darwin": [["pbcopy"]],
    "linux": [
        ["xclip", "-selection", "clipboard"],
        ["xsel", "--clipboard", "--input"],
    ],
    "win32": [["clip"]],
}

_PASTE_COMMANDS = {
    "darwin": [["pbpaste"]],
    "linux": [
        ["xclip", "-selection", "clipboard", "-o"],
        ["xsel", "--clipboard", "--output"],
    ],
    "win32": [["powershell", "-command", "Get-Clipboard"]],
}


def _commands_for(table: dict[str, list[list[str]]]) -> list[list[str]]:
    platform = "linux" if sys.platform.startswith("linux") else sys.platform
    return table.get(platform, [])


def copy_to_system(text: str) -> bool:
    """Copy text to the system clipboard.

    Returns:
        True if one of the clipboard tools accepted the text
    """
    for command in _commands_for(_COPY_COMMANDS):
        try:
            subprocess.run(
                command,
                input=text.encode("utf-8"),
                check=True,
                capture_output=True,
                timeout=CLIPBOARD_TIMEOUT_SECONDS,
            )
            return True
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug("%s not available: %s", command[0], e)
    return False


def read_from_system() -> str:
    """Read the system clipboard.

    Returns:
        The clipboard text with surrounding whitespace stripped, or an empty
        string when no tool is available or the read fails
    """
    for command in _commands_for(_PASTE_COMMANDS):
        try:
            result = subprocess.run(
                command,
                check=True,
                capture_output=True,
                timeout=CLIPBOARD_TIMEOUT_SECONDS,
            )
            return result.stdout.decode("utf-8", errors="replace").strip()
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug("%s not available: %s", command[0], e)
    return ""
