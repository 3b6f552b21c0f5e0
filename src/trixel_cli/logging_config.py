"""
Logging Configuration
Sets up the loggers for the CLI and the mesh engine it drives.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

LOGGER_NAMES = ("trixel_core", "trixel_cli")


def setup_logging(level: Union[int, str] = logging.WARNING, log_file: Optional[str] = None) -> None:
    """
    Configures the 'trixel_core' and 'trixel_cli' loggers.

    Args:
        level: Logging level (e.g. logging.DEBUG or "DEBUG")
        log_file: Optional path to save logs to a file.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level)

        # Avoid duplicate handlers when invoked repeatedly (tests, CliRunner).
        if logger.hasHandlers():
            logger.handlers.clear()

        # Diagnostics go to stderr so stdout stays machine-readable.
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if log_file:
            file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        logger.propagate = False

    logging.getLogger("trixel_cli").debug("Logging initialized.")
