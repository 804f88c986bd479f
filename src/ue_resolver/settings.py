"""Runtime settings resolved from CLI flags and ``UERESOLVE_*`` variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_TIMEOUT = 20.0
DEFAULT_MAX_WORKERS = 4
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class Settings:
    timeout: float = DEFAULT_TIMEOUT
    max_workers: int = DEFAULT_MAX_WORKERS
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None


def _positive_float(raw: Optional[str], default: float) -> float:
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _positive_int(raw: Optional[str], default: int) -> int:
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def load_settings(
    env: Optional[Mapping[str, str]] = None,
    *,
    timeout: Optional[float] = None,
    max_workers: Optional[int] = None,
    log_level: Optional[str] = None,
    log_file: Optional[str] = None,
) -> Settings:
    """Explicit arguments win over the environment, which wins over defaults."""

    source = os.environ if env is None else env
    return Settings(
        timeout=timeout if timeout and timeout > 0 else _positive_float(source.get("UERESOLVE_TIMEOUT"), DEFAULT_TIMEOUT),
        max_workers=max_workers
        if max_workers and max_workers > 0
        else _positive_int(source.get("UERESOLVE_MAX_WORKERS"), DEFAULT_MAX_WORKERS),
        log_level=(log_level or source.get("UERESOLVE_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
        log_file=log_file or source.get("UERESOLVE_LOG_FILE") or None,
    )
