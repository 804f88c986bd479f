"""Load version metadata for discovered installations.

Strategies are tried in order until one produces a version:

``editor-version``
    ``Engine/Binaries/<Platform>/UnrealEditor.version`` for the host platform.
``build-version``
    ``Engine/Build/Build.version``.
``path-pattern``
    A ``UE_5.3`` style token in the install path itself.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
import json
import logging
import os
import re
from typing import Callable, List, Optional, Sequence, Tuple, TYPE_CHECKING

from .types import Installation
from .version_info import VersionInfo

if TYPE_CHECKING:  # pragma: no cover
    from ue_resolver.probe.base import ProbeContext

logger = logging.getLogger(__name__)

PRODUCT_LABEL = "UE"

BINARIES_DIRS = {"Windows": "Win64", "Darwin": "Mac", "Linux": "Linux"}

_PATH_VERSION = re.compile(r"UE_([45])[._]?(\d+(?:[._]\d+)*)?", re.IGNORECASE)


@dataclass
class VersionMatch:
    version: VersionInfo
    display_name: str


Strategy = Callable[[Installation, "ProbeContext"], Optional[VersionMatch]]


def _read_descriptor(path: str, ctx: "ProbeContext") -> Optional[VersionMatch]:
    if not ctx.fs.is_file(path):
        return None
    try:
        version = VersionInfo.from_descriptor(json.loads(ctx.fs.read_text(path)))
    except (OSError, ValueError, TypeError) as exc:
        logger.debug("Failed to parse version file %s: %s", path, exc)
        return None
    return VersionMatch(version=version, display_name=f"{PRODUCT_LABEL} {version}")


def editor_version_file(installation: Installation, ctx: "ProbeContext") -> Optional[VersionMatch]:
    binaries = BINARIES_DIRS.get(ctx.system, "Win64")
    path = os.path.join(installation.path, "Engine", "Binaries", binaries, "UnrealEditor.version")
    return _read_descriptor(path, ctx)


def build_version_file(installation: Installation, ctx: "ProbeContext") -> Optional[VersionMatch]:
    path = os.path.join(installation.path, "Engine", "Build", "Build.version")
    return _read_descriptor(path, ctx)


def _segment(parts: Sequence[str], index: int, default: int) -> int:
    try:
        return int(parts[index])
    except (IndexError, ValueError):
        return default


def version_from_path(installation: Installation, ctx: Optional["ProbeContext"] = None) -> Optional[VersionMatch]:
    match = _PATH_VERSION.search(installation.path)
    if not match:
        return None
    major_text, rest = match.group(1), match.group(2) or ""
    version_text = ".".join(part for part in (major_text, rest.replace("_", ".")) if part)
    parts = version_text.split(".")
    version = VersionInfo(
        major=_segment(parts, 0, 5),
        minor=_segment(parts, 1, 0),
        patch=_segment(parts, 2, 0),
    )
    return VersionMatch(version=version, display_name=f"{PRODUCT_LABEL} {version_text}")


VERSION_STRATEGIES: Tuple[Tuple[str, Strategy], ...] = (
    ("editor-version", editor_version_file),
    ("build-version", build_version_file),
    ("path-pattern", version_from_path),
)


def load_version_info(installation: Installation, ctx: "ProbeContext") -> Optional[str]:
    """Populate ``installation.version`` in place; return the strategy that hit."""

    for name, strategy in VERSION_STRATEGIES:
        try:
            found = strategy(installation, ctx)
        except Exception as exc:
            logger.debug("Version strategy %s failed for %s: %s", name, installation.path, exc)
            continue
        if found is None:
            continue
        installation.version = found.version
        installation.display_name = found.display_name
        logger.debug("Version %s for %s via %s", found.version, installation.path, name)
        return name
    logger.debug("No version information for %s", installation.path)
    return None


def load_versions(installations: List[Installation], ctx: "ProbeContext") -> None:
    """Load versions for every installation on a bounded worker pool."""

    if not installations:
        return
    workers = max(1, min(ctx.max_workers, len(installations)))
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="version-loader") as pool:
        list(pool.map(lambda item: load_version_info(item, ctx), installations))
