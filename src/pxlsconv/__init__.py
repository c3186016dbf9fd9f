# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""pxls.space activity log decoding and canvas conversion.

Public API:
    - decode_line / encode_line: single-record codec
    - read_log / read_path: whole-log reader
    - summarize: canvas size and time span
    - canvas_records: ordered record stream for a container encoder
    - Exception hierarchy
"""

from pxlsconv.codec import decode_line, encode_line, format_timestamp, parse_timestamp
from pxlsconv.errors import (
    EmptyLogError,
    InvalidEncodingError,
    InvalidIntegerError,
    InvalidTimestampError,
    PxlsError,
    RecordDecodeError,
    TrailingDataError,
    UnexpectedEofError,
    UnknownActionError,
)
from pxlsconv.export import CanvasMeta, EndOfStream, MetaId, PaletteChunk, Placement, canvas_records
from pxlsconv.grammar import ActionKind
from pxlsconv.models import Event, EventLog, IdentityKind, UserIdentity, classify_identity
from pxlsconv.reader import read_log, read_path
from pxlsconv.timeline import TimelineSummary, require_events, summarize

__all__ = [
    # Codec
    "decode_line",
    "encode_line",
    "format_timestamp",
    "parse_timestamp",
    # Reader
    "read_log",
    "read_path",
    # Types
    "ActionKind",
    "Event",
    "EventLog",
    "IdentityKind",
    "UserIdentity",
    "classify_identity",
    # Timeline
    "TimelineSummary",
    "require_events",
    "summarize",
    # Export
    "CanvasMeta",
    "EndOfStream",
    "MetaId",
    "PaletteChunk",
    "Placement",
    "canvas_records",
    # Exceptions
    "PxlsError",
    "RecordDecodeError",
    "UnexpectedEofError",
    "TrailingDataError",
    "InvalidTimestampError",
    "InvalidEncodingError",
    "InvalidIntegerError",
    "UnknownActionError",
    "EmptyLogError",
]
