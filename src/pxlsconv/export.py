# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Canvas records handed to a container encoder.

The container's wire layout belongs to the sink. This module only fixes
which records are produced and in what order:

1. one ``CanvasMeta``
2. one ``PaletteChunk``
3. a ``Placement`` followed by a ``MetaId`` for every event
4. one ``EndOfStream``
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Union

from pxlsconv.models import Event
from pxlsconv.palette import DEFAULT_PALETTE, Color, remap_color_index
from pxlsconv.timeline import TimelineSummary, summarize


@dataclass(frozen=True)
class CanvasMeta:
    size: tuple[int, int]
    time_start: int
    time_end: int | None
    name: str
    platform: str


@dataclass(frozen=True)
class PaletteChunk:
    offset: int
    colors: tuple[Color, ...]


@dataclass(frozen=True)
class Placement:
    pos: tuple[int, int]
    time: int
    color_index: int


@dataclass(frozen=True)
class MetaId:
    """Raw identity bytes of the user behind the preceding placement."""

    data: bytes


@dataclass(frozen=True)
class EndOfStream:
    pass


CanvasRecord = Union[CanvasMeta, PaletteChunk, Placement, MetaId, EndOfStream]


def placement_for(event: Event) -> Placement:
    return Placement(pos=event.pos, time=event.time, color_index=remap_color_index(event.index))


def canvas_records(
    events: Sequence[Event],
    *,
    name: str,
    platform: str,
    palette: Sequence[Color] = DEFAULT_PALETTE,
    offset: int = 0,
    summary: TimelineSummary | None = None,
) -> Iterator[CanvasRecord]:
    """Yield the full record stream for a non-empty log.

    Args:
        events: Decoded log, in input order
        name: Canvas name for the metadata record
        platform: Platform label for the metadata record
        palette: Colors for the palette record
        offset: Palette slot of the first color
        summary: Precomputed summary of ``events``

    Raises:
        EmptyLogError: ``events`` is empty (on the first ``next``)
    """
    if summary is None:
        summary = summarize(events)

    yield CanvasMeta(
        size=summary.size,
        time_start=summary.start,
        time_end=summary.end,
        name=name,
        platform=platform,
    )
    yield PaletteChunk(offset=offset, colors=tuple(palette))
    for event in events:
        yield placement_for(event)
        yield MetaId(event.id.raw)
    yield EndOfStream()
