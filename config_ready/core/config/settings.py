# File: config_ready/core/config/settings.py

import os
from pathlib import Path

from config_ready.core.common.enums import LayoutConvention


class Settings:
    # --- Paths ---
    # Project root holding vendor/ and the destination config dir.
    ROOT_DIR: Path = Path(os.getenv("CONFIG_READY_ROOT", os.getcwd()))

    # --- Aggregation ---
    # Raw value; validated on use so a bad env var doesn't break import
    LAYOUT: str = os.getenv("CONFIG_READY_LAYOUT", LayoutConvention.RESOURCES.value).lower()

    @property
    def layout(self) -> LayoutConvention:
        return LayoutConvention(self.LAYOUT)

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("CONFIG_READY_LOG_LEVEL", "INFO").upper()


settings = Settings()
