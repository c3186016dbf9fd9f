# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging layer for pxlsconv."""

from __future__ import annotations

from pxlsconv.logging.config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
