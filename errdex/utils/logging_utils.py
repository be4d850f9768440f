"""Logging setup for errdex.

Standard Logger Initialization Pattern
--------------------------------------
Modules use the standard Python pattern:

    import logging
    logger = logging.getLogger(__name__)

and the CLI calls setup_tui_logging() once before the TUI starts. Output
goes to a rotating file so nothing is written to the terminal the TUI owns.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from errdex.config.constants import DEFAULT_LOG_FILE, LOG_BACKUP_COUNT, MAX_LOG_BYTES

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_tui_logging(
    debug: bool = False, log_file: Optional[Path] = None
) -> tuple[logging.Logger, logging.Logger]:
    """
    Set up file logging for the TUI.

    The root logger is set to WARNING to avoid noise from third-party libs.
    errdex's own loggers (errdex.*) are set to INFO. With ``debug`` both
    are lowered to DEBUG and every dispatched key is recorded through the
    ``key_events`` logger.

    Returns:
        tuple: (main_logger, key_events_logger)
    """
    log_path = Path(log_file) if log_file else DEFAULT_LOG_FILE
    key_logger = logging.getLogger("key_events")
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)

        root = logging.getLogger()
        if not any(isinstance(h, RotatingFileHandler) for h in root.handlers):
            handler = RotatingFileHandler(
                log_path, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUP_COUNT
            )
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            root.addHandler(handler)
        root.setLevel(logging.DEBUG if debug else logging.WARNING)

        errdex_logger = logging.getLogger("errdex")
        errdex_logger.setLevel(logging.DEBUG if debug else logging.INFO)

        key_logger.setLevel(logging.DEBUG if debug else logging.WARNING)

        return errdex_logger, key_logger

    except OSError as e:
        # We can't log this failure since logging is what's failing
        print(f"Warning: logging setup failed: {e}", file=sys.stderr)
        return logging.getLogger("errdex"), key_logger
