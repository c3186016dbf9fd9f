# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Pytest configuration and fixtures."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

import pytest
import structlog

from pxlsconv.grammar import ActionKind
from pxlsconv.models import Event, UserIdentity

if TYPE_CHECKING:
    from pathlib import Path

HASH_ID = "982b5ed74632b00ad8d75ae4995117b5f93ac9432fe1a3c73444132fc0e1248f"

HASH_LINE = f"2021-03-19 08:03:47,016\t{HASH_ID}\t773\t1761\t4\tuser undo".encode()
USERNAME_LINE = b"2024-01-21 01:30:47,016\tEtos2\t43\t21\t3\tconsole nuke"


@pytest.fixture
def reset_structlog() -> Iterator[None]:
    """Undo any configure_logging() done by a test or CLI invocation."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def hash_line() -> bytes:
    """Record whose identity is a content hash."""
    return HASH_LINE


@pytest.fixture
def username_line() -> bytes:
    """Record whose identity is a username."""
    return USERNAME_LINE


@pytest.fixture
def hash_event() -> Event:
    return Event(
        time=1616141027016,
        pos=(773, 1761),
        index=4,
        action=ActionKind.UNDO,
        id=UserIdentity(HASH_ID),
    )


@pytest.fixture
def username_event() -> Event:
    return Event(
        time=1705800647016,
        pos=(43, 21),
        index=3,
        action=ActionKind.NUKE,
        id=UserIdentity("Etos2"),
    )


@pytest.fixture
def two_record_log() -> bytes:
    """Both sample records joined by a single line feed, no final terminator."""
    return HASH_LINE + b"\n" + USERNAME_LINE


@pytest.fixture
def log_file(tmp_path: Path, two_record_log: bytes) -> Path:
    """Two-record log on disk."""
    path = tmp_path / "pixels.log"
    path.write_bytes(two_record_log)
    return path
