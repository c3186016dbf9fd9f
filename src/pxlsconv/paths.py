# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Filesystem paths for converted output."""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_data_dir

ENV_OUTPUT_ROOT = "PXLSCONV_OUTPUT_ROOT"

OUTPUT_SUFFIX = ".jsonl"


def default_output_root() -> Path:
    """Get the default directory for converted canvases."""
    env_root = os.getenv(ENV_OUTPUT_ROOT)
    if env_root:
        return Path(env_root)
    return Path(user_data_dir("pxlsconv", "pxlsconv")) / "out"


def output_path_for(output_root: Path, canvas_name: str) -> Path:
    """Return ``<output_root>/<canvas_name>.jsonl``, creating the directory."""
    output_root.mkdir(parents=True, exist_ok=True)
    return output_root / f"{canvas_name}{OUTPUT_SUFFIX}"
