# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Application settings."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pxlsconv.paths import default_output_root, output_path_for


class Settings(BaseSettings):
    output_root: Path = Field(default_factory=default_output_root)
    log_level: str = "WARNING"
    log_format: Literal["console", "json"] = "console"
    canvas_name: str = "c86"
    platform: str = "pxls.space"

    model_config = SettingsConfigDict(
        env_prefix="PXLSCONV_",
        extra="ignore",
    )

    def default_output_path(self) -> Path:
        return output_path_for(self.output_root, self.canvas_name)
