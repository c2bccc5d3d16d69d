"""Runtime configuration for the HTTP surface."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class AppConfig:
    """Values read once at import time."""

    max_upload_mb: int = 50
    default_target: str = "utf-8"

    @property
    def max_upload_bytes(self) -> int:
        """Maximum upload payload in bytes."""
        return self.max_upload_mb * 1024 * 1024


def load_config() -> AppConfig:
    return AppConfig(
        max_upload_mb=int(os.environ.get("REENCODER_MAX_UPLOAD_MB", AppConfig.max_upload_mb)),
        default_target=os.environ.get("REENCODER_DEFAULT_TARGET", AppConfig.default_target),
    )


APP_CONFIG = load_config()
