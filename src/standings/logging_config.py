"""Logging setup for the hbl-standings CLI.

The console gets INFO+ (DEBUG with ``-v``) on stderr so JSON written to
stdout stays clean. Every run also writes a DEBUG log with logger names
under ``{data_dir}/logs/``.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import TextIO

CONSOLE_FORMAT = "%(asctime)s %(levelname)-5s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"

# Handlers installed here are tagged so a later call replaces only them
CONSOLE_HANDLER_NAME = "standings.console"
FILE_HANDLER_NAME = "standings.file"


def run_log_path(data_dir: str | Path) -> Path:
    """Fresh ``run-<timestamp>.log`` path under ``{data_dir}/logs/``.

    Two runs within the same second get ``-1``, ``-2`` ... suffixes instead
    of sharing a file.
    """
    log_dir = Path(data_dir) / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)

    stem = "run-" + datetime.now().strftime("%Y-%m-%d-%H%M%S")
    candidate = log_dir / f"{stem}.log"
    n = 0
    while candidate.exists():
        n += 1
        candidate = log_dir / f"{stem}-{n}.log"
    return candidate


def setup_logging(
    data_dir: str = "data",
    console_level: int = logging.INFO,
    stream: TextIO | None = None,
) -> Path:
    """Attach the console and run-file handlers to the root logger.

    Handlers from an earlier call are closed and replaced; handlers owned by
    anything else (pytest's capture, an embedding application) are left
    alone.

    Args:
        data_dir: Base data directory. ``logs/`` is created inside it.
        console_level: Minimum level for console output.
        stream: Console stream, stderr when omitted.

    Returns:
        Path to the newly created log file.
    """
    log_file = run_log_path(data_dir)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for handler in standings_handlers(root):
        root.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(stream if stream is not None else sys.stderr)
    _install(
        root,
        console,
        CONSOLE_HANDLER_NAME,
        console_level,
        logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"),
    )

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    _install(
        root, file_handler, FILE_HANDLER_NAME, logging.DEBUG, logging.Formatter(FILE_FORMAT)
    )

    return log_file


def standings_handlers(logger: logging.Logger) -> list[logging.Handler]:
    """Handlers on ``logger`` that setup_logging() installed."""
    names = (CONSOLE_HANDLER_NAME, FILE_HANDLER_NAME)
    return [h for h in logger.handlers if h.get_name() in names]


def _install(
    root: logging.Logger,
    handler: logging.Handler,
    name: str,
    level: int,
    formatter: logging.Formatter,
) -> None:
    handler.set_name(name)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    root.addHandler(handler)
