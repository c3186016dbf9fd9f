# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Tests for timeline summaries."""

from __future__ import annotations

import io

import pytest

from pxlsconv.errors import EmptyLogError
from pxlsconv.grammar import ActionKind
from pxlsconv.models import Event, EventLog, UserIdentity
from pxlsconv.reader import read_log
from pxlsconv.timeline import TimelineSummary, require_events, summarize


def _event(time: int, x: int, y: int) -> Event:
    return Event(time=time, pos=(x, y), index=0, action=ActionKind.PLACE, id=UserIdentity("u"))


def test_summary_of_sample_log(two_record_log: bytes) -> None:
    summary = summarize(read_log(io.BytesIO(two_record_log)))

    assert summary == TimelineSummary(width=774, height=1762, start=1616141027016, end=1705800647016)
    assert summary.size == (774, 1762)
    assert summary.duration_ms == 1705800647016 - 1616141027016


def test_single_event() -> None:
    summary = summarize(EventLog([_event(5, 0, 0)]))

    assert summary == TimelineSummary(width=1, height=1, start=5, end=5)
    assert summary.duration_ms == 0


def test_width_and_height_come_from_different_events() -> None:
    summary = summarize([_event(1, 10, 0), _event(2, 0, 20), _event(3, 3, 3)])
    assert summary.size == (11, 21)


def test_start_and_end_follow_log_order() -> None:
    summary = summarize([_event(300, 0, 0), _event(100, 0, 0), _event(200, 0, 0)])

    assert summary.start == 300
    assert summary.end == 200
    assert summary.duration_ms == -100


def test_empty_log_is_rejected() -> None:
    with pytest.raises(EmptyLogError):
        summarize(EventLog())

    with pytest.raises(EmptyLogError):
        require_events([])


def test_require_events_accepts_non_empty() -> None:
    require_events([_event(1, 1, 1)])
