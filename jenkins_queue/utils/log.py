#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

import logging
import sys
from typing import IO

logger = logging.getLogger("jenkins_queue")


def get_formatter(format_str: str) -> logging.Formatter:
    return logging.Formatter(format_str)


def clear_console_logging() -> None:
    logger.handlers[:] = []
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.INFO)


# Set default logging handler to avoid "No handler found" warnings.
clear_console_logging()


def setup_console_logging(level: int = logging.DEBUG) -> None:
    """Write all log messages to stdout without any additional information like
    date/time or logger name. Just the log line is written.

    The debug traces of the check end up in front of the status line.
    """
    setup_logging_handler(sys.stdout, get_formatter("%(message)s"))
    logger.setLevel(level)


def setup_logging_handler(stream: IO[str], formatter: logging.Formatter) -> None:
    handler = logging.StreamHandler(stream=stream)
    handler.setFormatter(formatter)

    del logger.handlers[:]  # Remove all previously existing handlers
    logger.addHandler(handler)
