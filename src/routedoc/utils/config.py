"""Runtime configuration read from the environment."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Final


def _env_str(name: str, *, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def _env_level(name: str, *, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else default


OUTPUT_PATH: Final[Path] = Path(
    _env_str("ROUTEDOC_OUTPUT", default="openapi/documentation.yaml")
).expanduser()
OPENAPI_VERSION: Final[str] = _env_str("ROUTEDOC_OPENAPI_VERSION", default="3.1.0")
LOG_LEVEL: Final[int] = _env_level("ROUTEDOC_LOG_LEVEL", default=logging.WARNING)


__all__ = ["LOG_LEVEL", "OPENAPI_VERSION", "OUTPUT_PATH"]
