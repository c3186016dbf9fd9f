# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Read a whole activity log into an EventLog."""

from __future__ import annotations

import contextlib
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO

from pxlsconv.codec import decode_line
from pxlsconv.errors import RecordDecodeError
from pxlsconv.logging import get_logger
from pxlsconv.models import Event, EventLog

logger = get_logger(__name__)

STDIN_PATH = "-"


def read_log(stream: BinaryIO) -> EventLog:
    """Decode every record in ``stream``, in order.

    The stream is read line by line until a read returns no bytes. The first
    record that fails to decode aborts the whole read; the error carries the
    record's line number and byte offset. The stream is left open.
    """
    events: list[Event] = []
    line_number = 0
    offset = 0
    while True:
        raw = stream.readline()
        if not raw:
            break
        line_number += 1
        try:
            events.append(decode_line(raw))
        except RecordDecodeError as e:
            logger.debug("record_decode_failed", line=line_number, offset=offset, error=e.message)
            e.locate(line_number, offset, raw)
            raise
        offset += len(raw)

    return EventLog(events)


@contextlib.contextmanager
def open_input(path: str | Path) -> Iterator[BinaryIO]:
    """Open a log for binary reading; ``"-"`` is standard input, left open on exit."""
    if str(path) == STDIN_PATH:
        yield sys.stdin.buffer
        return
    with Path(path).open("rb") as f:
        yield f


def read_path(path: str | Path) -> EventLog:
    """Read the log at ``path`` (or ``"-"`` for stdin) with ``read_log``."""
    with open_input(path) as stream:
        log = read_log(stream)
    logger.info("log_read", path=str(path), events=len(log))
    return log
