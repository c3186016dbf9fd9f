# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Decode and encode single log records.

``decode_line`` and ``encode_line`` are exact inverses: every record the
decoder accepts re-encodes to the same bytes (less an optional terminator),
and every encodable event decodes back to an equal event.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

from pxlsconv.errors import (
    InvalidEncodingError,
    InvalidIntegerError,
    InvalidTimestampError,
    TrailingDataError,
    UnexpectedEofError,
    UnknownActionError,
)
from pxlsconv.grammar import (
    FIELD_COUNT,
    FIELD_ORDER,
    FIELD_SEPARATOR,
    RECORD_TERMINATOR,
    U16_MAX,
    U32_MAX,
    ActionKind,
    action_from_label,
    action_label,
)
from pxlsconv.models import Event, UserIdentity

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)

_TIMESTAMP_RE = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r" (?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2}),(?P<millis>\d{3})",
    re.ASCII,
)

# No sign, no whitespace, no leading zeros: anything else would not re-encode
# to the same bytes.
_DECIMAL_RE = re.compile(r"0|[1-9][0-9]*", re.ASCII)
_MAX_DECIMAL_DIGITS = len(str(U32_MAX))


def parse_timestamp(text: str) -> int:
    """Parse ``YYYY-MM-DD HH:MM:SS,mmm`` (UTC) into epoch milliseconds."""
    match = _TIMESTAMP_RE.fullmatch(text)
    if match is None:
        raise InvalidTimestampError(text, "expected YYYY-MM-DD HH:MM:SS,mmm")

    parts = {name: int(value) for name, value in match.groupdict().items()}
    try:
        moment = datetime(
            parts["year"],
            parts["month"],
            parts["day"],
            parts["hour"],
            parts["minute"],
            parts["second"],
            parts["millis"] * 1000,
            tzinfo=timezone.utc,
        )
    except ValueError as e:
        raise InvalidTimestampError(text, str(e)) from e
    return (moment - _EPOCH) // _ONE_MS


def format_timestamp(millis: int) -> str:
    """Format epoch milliseconds in the canonical log form."""
    try:
        moment = _EPOCH + millis * _ONE_MS
    except OverflowError as e:
        raise InvalidTimestampError(str(millis), "outside the representable range") from e
    # strftime does not zero-pad years below 1000 on every platform.
    return (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d} "
        f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d},"
        f"{moment.microsecond // 1000:03d}"
    )


def _decode_text(field: str, data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidEncodingError(field, data) from e


def _decode_unsigned(field: str, data: bytes, limit: int) -> int:
    text = _decode_text(field, data)
    if _DECIMAL_RE.fullmatch(text) is None:
        raise InvalidIntegerError(field, text)
    if len(text) > _MAX_DECIMAL_DIGITS or int(text) > limit:
        raise InvalidIntegerError(field, text, f"exceeds {limit}")
    return int(text)


def _decode_identity(data: bytes) -> UserIdentity:
    return UserIdentity(_decode_text("identity", data))


def _decode_action(data: bytes) -> ActionKind:
    label = _decode_text("action", data)
    kind = action_from_label(label)
    if kind is None:
        raise UnknownActionError(label)
    return kind


def decode_line(data: bytes) -> Event:
    """Decode one raw record into an Event.

    A single trailing line feed is accepted and ignored. Any other line feed
    ends the record, and what follows it is trailing data, as is non-empty
    data after the sixth field.

    Fields are decoded left to right and the first failure is raised, so a
    short record with a malformed first field reports the malformed field.

    Raises:
        UnexpectedEofError: record ends before a field
        TrailingDataError: data after the sixth field
        InvalidTimestampError: malformed or impossible timestamp
        InvalidEncodingError: field is not UTF-8
        InvalidIntegerError: bad coordinate or palette index
        UnknownActionError: action label not recognised
    """
    if data.endswith(RECORD_TERMINATOR):
        data = data[: -len(RECORD_TERMINATOR)]
    record, stray, rest = data.partition(RECORD_TERMINATOR)
    parts = record.split(FIELD_SEPARATOR, FIELD_COUNT)

    def take(position: int) -> bytes:
        if position >= len(parts):
            raise UnexpectedEofError(FIELD_ORDER[position])
        return parts[position]

    time = parse_timestamp(_decode_text("time", take(0)))
    identity = _decode_identity(take(1))
    x = _decode_unsigned("x", take(2), U32_MAX)
    y = _decode_unsigned("y", take(3), U32_MAX)
    index = _decode_unsigned("index", take(4), U16_MAX)
    action = _decode_action(take(5))

    if len(parts) > FIELD_COUNT and parts[FIELD_COUNT]:
        raise TrailingDataError(parts[FIELD_COUNT])
    if stray:
        raise TrailingDataError(stray + rest)

    return Event(time=time, pos=(x, y), index=index, action=action, id=identity)


def _encode_unsigned(field: str, value: int, limit: int) -> bytes:
    if not 0 <= value <= limit:
        raise ValueError(f"{field} must be between 0 and {limit}, got {value}")
    return str(value).encode("ascii")


def _encode_identity(identity: UserIdentity) -> bytes:
    raw = identity.raw
    if FIELD_SEPARATOR in raw or RECORD_TERMINATOR in raw:
        raise ValueError(f"identity {identity.value!r} contains a separator")
    return raw


def encode_line(event: Event, *, terminator: bool = False) -> bytes:
    """Serialize an Event to its canonical record bytes.

    Args:
        event: Event to encode
        terminator: Append the record terminator

    Raises:
        ValueError: a field cannot be represented in the record grammar
    """
    fields = (
        format_timestamp(event.time).encode("ascii"),
        _encode_identity(event.id),
        _encode_unsigned("x", event.pos[0], U32_MAX),
        _encode_unsigned("y", event.pos[1], U32_MAX),
        _encode_unsigned("index", event.index, U16_MAX),
        action_label(event.action).encode("ascii"),
    )
    line = FIELD_SEPARATOR.join(fields)
    if terminator:
        line += RECORD_TERMINATOR
    return line
