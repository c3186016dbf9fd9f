# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Record sinks."""

from __future__ import annotations

import base64
import json
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Protocol

from pxlsconv.export import CanvasMeta, CanvasRecord, EndOfStream, MetaId, PaletteChunk, Placement

if TYPE_CHECKING:
    from typing import TextIO


class RecordSink(Protocol):
    """Anything that accepts canvas records in stream order."""

    def write_record(self, record: CanvasRecord) -> None: ...


def record_to_dict(record: CanvasRecord) -> dict[str, Any]:
    """Convert a canvas record to a JSON-serializable dict."""
    if isinstance(record, CanvasMeta):
        return {
            "record": "canvas_meta",
            "data": {
                "size": list(record.size),
                "time_start": record.time_start,
                "time_end": record.time_end,
                "name": record.name,
                "platform": record.platform,
            },
        }
    if isinstance(record, PaletteChunk):
        return {
            "record": "palette_chunk",
            "data": {"offset": record.offset, "colors": [list(c) for c in record.colors]},
        }
    if isinstance(record, Placement):
        return {
            "record": "placement",
            "data": {"pos": list(record.pos), "time": record.time, "color_index": record.color_index},
        }
    if isinstance(record, MetaId):
        return {
            "record": "meta_id",
            "data": {"id_b64": base64.b64encode(record.data).decode("ascii")},
        }
    if isinstance(record, EndOfStream):
        return {"record": "eos", "data": {}}
    raise TypeError(f"unsupported record type: {type(record).__name__}")


class JsonlRecordSink:
    """Write canvas records as JSON Lines to a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self.count = 0

    def write_record(self, record: CanvasRecord) -> None:
        self._stream.write(json.dumps(record_to_dict(record), separators=(",", ":")) + "\n")
        self.count += 1


class ListRecordSink:
    """Collect records in memory."""

    def __init__(self) -> None:
        self.records: list[CanvasRecord] = []

    def write_record(self, record: CanvasRecord) -> None:
        self.records.append(record)


def write_records(sink: RecordSink, records: Iterable[CanvasRecord]) -> int:
    """Write every record to ``sink`` and return how many were written."""
    count = 0
    for record in records:
        sink.write_record(record)
        count += 1
    return count
