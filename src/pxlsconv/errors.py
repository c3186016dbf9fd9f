# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Exception hierarchy for log decoding and conversion."""

from __future__ import annotations


class PxlsError(Exception):
    """Base exception for pxlsconv."""

    pass


class RecordDecodeError(PxlsError):
    """A single log record could not be decoded.

    The reader attaches the record's position with ``locate`` before the
    error leaves ``read_log``; errors raised by ``decode_line`` directly
    carry no position.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        self.line_number: int | None = None
        self.offset: int | None = None
        self.raw: bytes | None = None

    def locate(self, line_number: int, offset: int, raw: bytes | None = None) -> RecordDecodeError:
        """Attach the 1-based line number and byte offset of the failing record."""
        self.line_number = line_number
        self.offset = offset
        self.raw = raw
        return self

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        return f"line {self.line_number}: {self.message}"


class UnexpectedEofError(RecordDecodeError):
    """Record ended before all six fields were read."""

    def __init__(self, field: str) -> None:
        super().__init__(f"unexpected end of record (missing field {field!r})")
        self.field = field


class TrailingDataError(RecordDecodeError):
    """Data found after the sixth field."""

    def __init__(self, data: bytes) -> None:
        super().__init__(f"expected end of record or newline (found {data!r})")
        self.data = data


class InvalidTimestampError(RecordDecodeError):
    """Timestamp is not in canonical form or is not a real date/time."""

    def __init__(self, text: str, reason: str | None = None) -> None:
        detail = f": {reason}" if reason else ""
        super().__init__(f"invalid timestamp {text!r}{detail}")
        self.text = text


class InvalidEncodingError(RecordDecodeError):
    """Field bytes are not valid UTF-8."""

    def __init__(self, field: str, data: bytes) -> None:
        super().__init__(f"field {field!r} is not valid UTF-8 ({data!r})")
        self.field = field
        self.data = data


class InvalidIntegerError(RecordDecodeError):
    """Numeric field is not a canonical decimal or overflows its width."""

    def __init__(self, field: str, text: str, reason: str = "not an unsigned decimal") -> None:
        super().__init__(f"invalid integer in field {field!r} ({text!r}): {reason}")
        self.field = field
        self.text = text


class UnknownActionError(RecordDecodeError):
    """Action label is not one of the canonical labels."""

    def __init__(self, label: str) -> None:
        super().__init__(f"invalid action ({label})")
        self.label = label


class EmptyLogError(PxlsError):
    """A log was read successfully but contained no records."""

    def __init__(self, message: str = "log is empty") -> None:
        super().__init__(message)
