# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Log-to-canvas conversion pipeline."""

from __future__ import annotations

import time
from dataclasses import dataclass

from pxlsconv.export import canvas_records
from pxlsconv.logging import get_logger
from pxlsconv.models import EventLog
from pxlsconv.sink import RecordSink, write_records
from pxlsconv.timeline import TimelineSummary, require_events, summarize

logger = get_logger(__name__)


@dataclass(frozen=True)
class ConversionReport:
    events: int
    summary: TimelineSummary
    records: int
    elapsed_ms: int


def convert_log(log: EventLog, sink: RecordSink, *, name: str, platform: str) -> ConversionReport:
    """Stream the canvas records for ``log`` to ``sink``.

    Raises:
        EmptyLogError: the log holds no records (nothing is written)
    """
    require_events(log)
    logger.info("log_loaded", events=len(log))

    summary = summarize(log)
    logger.info("canvas_size", width=summary.width, height=summary.height)
    logger.info("canvas_duration", duration_ms=summary.duration_ms)

    started = time.monotonic()
    records = write_records(
        sink,
        canvas_records(log, name=name, platform=platform, summary=summary),
    )
    elapsed_ms = int((time.monotonic() - started) * 1000)
    logger.info("write_complete", records=records, elapsed_ms=elapsed_ms)

    return ConversionReport(events=len(log), summary=summary, records=records, elapsed_ms=elapsed_ms)
