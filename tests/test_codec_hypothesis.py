# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Hypothesis-based property tests for the record codec.

Checks that:
- every encodable event decodes back to itself
- every accepted record re-encodes to the same bytes
- arbitrary bytes either decode or raise a RecordDecodeError
"""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from pxlsconv.codec import decode_line, encode_line, format_timestamp, parse_timestamp
from pxlsconv.errors import RecordDecodeError
from pxlsconv.grammar import CONTENT_HASH_LENGTH, U16_MAX, U32_MAX, ActionKind
from pxlsconv.models import Event, IdentityKind, UserIdentity, classify_identity

# =============================================================================
# Strategies
# =============================================================================

# 0001-01-01 00:00:00,000 .. 9999-12-31 23:59:59,999
MIN_MILLIS = -62135596800000
MAX_MILLIS = 253402300799999

timestamps = st.integers(min_value=MIN_MILLIS, max_value=MAX_MILLIS)

identity_text = st.text(
    alphabet=st.characters(exclude_categories=("Cs",), exclude_characters="\t\n"),
    max_size=80,
)
content_hashes = st.text(alphabet="0123456789abcdef", min_size=64, max_size=64)


identities = st.builds(UserIdentity, st.one_of(identity_text, content_hashes))


events = st.builds(
    Event,
    time=timestamps,
    pos=st.tuples(st.integers(0, U32_MAX), st.integers(0, U32_MAX)),
    index=st.integers(0, U16_MAX),
    action=st.sampled_from(list(ActionKind)),
    id=identities,
)


# =============================================================================
# Properties
# =============================================================================


@given(events)
def test_decode_inverts_encode(event: Event) -> None:
    decoded = decode_line(encode_line(event))
    assert decoded == event
    assert decoded.id.kind is event.id.kind


@given(events, st.booleans())
def test_encode_inverts_decode(event: Event, terminator: bool) -> None:
    record = encode_line(event, terminator=terminator)
    assert encode_line(decode_line(record), terminator=terminator) == record


@given(timestamps)
def test_timestamp_text_round_trip(millis: int) -> None:
    text = format_timestamp(millis)
    assert len(text) == len("YYYY-MM-DD HH:MM:SS,mmm")
    assert parse_timestamp(text) == millis


@given(identity_text)
def test_identity_classification(value: str) -> None:
    kind = classify_identity(value.encode("utf-8"))
    if len(value.encode("utf-8")) == CONTENT_HASH_LENGTH:
        assert kind is IdentityKind.CONTENT_HASH
    else:
        assert kind is IdentityKind.USERNAME
    assert UserIdentity(value).kind is kind


@given(st.binary(max_size=120))
def test_arbitrary_bytes_decode_or_fail_cleanly(data: bytes) -> None:
    try:
        event = decode_line(data)
    except RecordDecodeError:
        return
    assert encode_line(event) == data.removesuffix(b"\n").removesuffix(b"\t")
