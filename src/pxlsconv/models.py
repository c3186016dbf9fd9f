# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Decoded log types."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import overload

from pxlsconv.grammar import CONTENT_HASH_LENGTH, ActionKind


class IdentityKind(Enum):
    """How a raw identity field was classified."""

    CONTENT_HASH = "content_hash"
    USERNAME = "username"


@dataclass(frozen=True)
class UserIdentity:
    """User identity from a log record.

    ``kind`` is derived from the UTF-8 byte length of ``value`` and cannot be
    passed in. A 64-byte username is classified as a content hash; the log
    format gives no way to tell the two apart.
    """

    value: str
    kind: IdentityKind = field(init=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", classify_identity(self.raw))

    @property
    def raw(self) -> bytes:
        return self.value.encode("utf-8")

    @property
    def is_content_hash(self) -> bool:
        return self.kind is IdentityKind.CONTENT_HASH

    def __str__(self) -> str:
        return self.value


def classify_identity(raw: bytes) -> IdentityKind:
    """Classify an identity field by its raw byte length."""
    if len(raw) == CONTENT_HASH_LENGTH:
        return IdentityKind.CONTENT_HASH
    return IdentityKind.USERNAME


@dataclass(frozen=True)
class Event:
    """One decoded log record."""

    time: int  # ms since epoch, UTC
    pos: tuple[int, int]
    index: int
    action: ActionKind
    id: UserIdentity

    @property
    def x(self) -> int:
        return self.pos[0]

    @property
    def y(self) -> int:
        return self.pos[1]


class EventLog(Sequence[Event]):
    """Immutable, input-ordered sequence of events."""

    __slots__ = ("_events",)

    def __init__(self, events: Iterable[Event] = ()) -> None:
        self._events: tuple[Event, ...] = tuple(events)

    @property
    def events(self) -> tuple[Event, ...]:
        return self._events

    @property
    def first(self) -> Event:
        return self._events[0]

    @property
    def last(self) -> Event:
        return self._events[-1]

    @overload
    def __getitem__(self, index: int) -> Event: ...

    @overload
    def __getitem__(self, index: slice) -> EventLog: ...

    def __getitem__(self, index: int | slice) -> Event | EventLog:
        if isinstance(index, slice):
            return EventLog(self._events[index])
        return self._events[index]

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(self._events)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, EventLog):
            return self._events == other._events
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._events)

    def __repr__(self) -> str:
        return f"EventLog({len(self._events)} events)"
