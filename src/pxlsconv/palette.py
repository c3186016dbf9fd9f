# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Default pxls palette and index remapping."""

from __future__ import annotations

Color = tuple[int, int, int, int]

# pxls uses 255 for "no color"; it maps to the transparent slot 0.
ERASER_INDEX = 255

DEFAULT_PALETTE: tuple[Color, ...] = (
    (0x00, 0x00, 0x00, 0x00),  # Transparent
    (0xFF, 0xFF, 0xFF, 0xFF),  # Light Grey
    (0xB9, 0xB3, 0xCF, 0xFF),  # Medium Grey
    (0x77, 0x7F, 0x8C, 0xFF),  # Dark Grey
    (0x00, 0x00, 0x00, 0xFF),  # Black
    (0x38, 0x22, 0x15, 0xFF),  # Dark Chocolate
    (0x7C, 0x3F, 0x20, 0xFF),  # Chocolate
    (0xC0, 0x6F, 0x37, 0xFF),  # Brown
    (0xFE, 0xAD, 0x6C, 0xFF),  # Peach
    (0xFF, 0xD2, 0xB1, 0xFF),  # Beige
    (0xFF, 0xA4, 0xD0, 0xFF),  # Pink
    (0xF1, 0x4F, 0xB4, 0xFF),  # Magenta
    (0xE9, 0x73, 0xFF, 0xFF),  # Mauve
    (0xA6, 0x30, 0xD2, 0xFF),  # Purple
    (0x53, 0x1D, 0x8C, 0xFF),  # Dark Purple
    (0x24, 0x23, 0x67, 0xFF),  # Navy
    (0x03, 0x34, 0xBF, 0xFF),  # Blue
    (0x14, 0x9C, 0xFF, 0xFF),  # Azure
    (0x8D, 0xF5, 0xFF, 0xFF),  # Aqua
    (0x01, 0xBF, 0xA5, 0xFF),  # Light Teal
    (0x16, 0x77, 0x7E, 0xFF),  # Dark Teal
    (0x05, 0x45, 0x23, 0xFF),  # Forest
    (0x18, 0x86, 0x2F, 0xFF),  # Dark Green
    (0x61, 0xE0, 0x21, 0xFF),  # Green
    (0xB1, 0xFF, 0x37, 0xFF),  # Lime
    (0xFF, 0xFF, 0xA5, 0xFF),  # Pastel Yellow
    (0xFD, 0xE1, 0x11, 0xFF),  # Yellow
    (0xFF, 0x9F, 0x17, 0xFF),  # Orange
    (0xF6, 0x6E, 0x08, 0xFF),  # Rust
    (0x55, 0x00, 0x22, 0xFF),  # Maroon
    (0x99, 0x01, 0x1A, 0xFF),  # Rose
    (0xF3, 0x0F, 0x0C, 0xFF),  # Red
    (0xFF, 0x78, 0x72, 0xFF),  # Watermelon
)


def remap_color_index(index: int) -> int:
    """Map a pxls palette index to a canvas color slot."""
    if index == ERASER_INDEX:
        return 0
    return index + 1
