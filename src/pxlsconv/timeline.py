# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Canvas size and time span derived from an event log."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from pxlsconv.errors import EmptyLogError
from pxlsconv.models import Event


@dataclass(frozen=True)
class TimelineSummary:
    """Bounding canvas size and first/last event times."""

    width: int
    height: int
    start: int
    end: int

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    @property
    def duration_ms(self) -> int:
        """Milliseconds from first to last event (negative if the log is out of order)."""
        return self.end - self.start


def require_events(events: Sequence[Event]) -> None:
    """Raise EmptyLogError if ``events`` is empty."""
    if not events:
        raise EmptyLogError()


def summarize(events: Sequence[Event]) -> TimelineSummary:
    """Summarize a non-empty log.

    Width and height are one past the largest x and y seen. Start and end are
    the times of the first and last events in log order; the log is trusted
    to be chronological and is not checked.
    """
    require_events(events)

    width = 0
    height = 0
    for event in events:
        width = max(width, event.pos[0] + 1)
        height = max(height, event.pos[1] + 1)

    return TimelineSummary(width=width, height=height, start=events[0].time, end=events[-1].time)
