"""Logging setup for the blockfont command line.

Library modules only create module loggers. The CLI calls
:func:`configure_logging` once with its ``-v`` and ``--log-file`` flags:

    - stderr gets short ``LEVEL name: message`` records, WARNING and above,
      or DEBUG with ``-v``;
    - a log file, when given, always records DEBUG with timestamps, so a
      kerning or font lookup decision can be traced without cluttering the
      rendered art on the terminal.
"""

from __future__ import annotations

import logging
from typing import Optional

CONSOLE_FORMAT = '%(levelname)s %(name)s: %(message)s'
FILE_FORMAT = '%(asctime)s %(levelname)-8s [%(name)s] %(message)s'


def configure_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Attach the blockfont handlers to the root logger.

    Args:
        verbose: Show DEBUG records on stderr.
        log_file: Path of a file receiving every record at DEBUG level.
    """
    console_level = logging.DEBUG if verbose else logging.WARNING

    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        root_logger.addHandler(file_handler)

    root_logger.setLevel(logging.DEBUG if log_file else console_level)
    # PIL logs PNG chunk details at DEBUG
    logging.getLogger('PIL').setLevel(logging.INFO)
