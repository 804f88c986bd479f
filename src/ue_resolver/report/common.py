"""Rendering helpers shared by console and JSON outputs."""

from __future__ import annotations

from datetime import datetime, timezone
import platform
from typing import Dict


class ConsoleTheme:
    """ANSI-aware styling helper."""

    GREEN = "32"
    YELLOW = "33"
    RED = "31"
    GREY = "90"

    def __init__(self, *, no_color: bool = False):
        self.no_color = no_color

    def colorize(self, text: str, color_code: str) -> str:
        if self.no_color:
            return text
        return f"\x1b[{color_code}m{text}\x1b[0m"


def report_metadata() -> Dict[str, str]:
    return {
        "machine": platform.node(),
        "system": platform.system(),
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "python": platform.python_version(),
    }
