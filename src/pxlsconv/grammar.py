# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Record grammar for pxls.space activity logs.

A record is six tab-separated fields terminated by a line feed:

    time <TAB> identity <TAB> x <TAB> y <TAB> index <TAB> action

The action labels come from the platform's own vocabulary. Two of them are
crossed on purpose ("mod overwrite" is a rollback, "rollback" is an overwrite)
and must stay that way.
"""

from __future__ import annotations

from enum import Enum

FIELD_SEPARATOR = b"\t"
RECORD_TERMINATOR = b"\n"

FIELD_ORDER = ("time", "identity", "x", "y", "index", "action")
FIELD_COUNT = len(FIELD_ORDER)

# Documentation form; parsing is strict and does not go through strptime.
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S,%3f"
TIMESTAMP_DECIMAL_SEPARATOR = ","
TIMESTAMP_FRACTION_DIGITS = 3

# Hex-encoded SHA-256 digests stand in for anonymized users.
CONTENT_HASH_LENGTH = 64

U32_MAX = 2**32 - 1
U16_MAX = 2**16 - 1


class ActionKind(Enum):
    """Closed set of canvas actions found in the log."""

    PLACE = "place"
    UNDO = "undo"
    ROLLBACK = "rollback"
    ROLLBACK_UNDO = "rollback_undo"
    OVERWRITE = "overwrite"
    NUKE = "nuke"


ACTION_LABELS: dict[ActionKind, str] = {
    ActionKind.PLACE: "user place",
    ActionKind.UNDO: "user undo",
    ActionKind.ROLLBACK: "mod overwrite",
    ActionKind.ROLLBACK_UNDO: "rollback undo",
    ActionKind.OVERWRITE: "rollback",
    ActionKind.NUKE: "console nuke",
}

LABEL_ACTIONS: dict[str, ActionKind] = {label: kind for kind, label in ACTION_LABELS.items()}


def action_label(kind: ActionKind) -> str:
    """Return the canonical log label for an action."""
    return ACTION_LABELS[kind]


def action_from_label(label: str) -> ActionKind | None:
    """Look up an action by its exact log label, or None if unknown."""
    return LABEL_ACTIONS.get(label)
