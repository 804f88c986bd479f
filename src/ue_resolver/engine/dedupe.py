"""Collapse candidates that point at the same install directory."""

from __future__ import annotations

import posixpath
from typing import Iterable, List, Set

from .types import Installation


def normalize_install_path(path: str) -> str:
    """Case-folded, separator-agnostic form of ``path`` used as a dedupe key."""

    unified = path.strip().replace("\\", "/")
    # posixpath.normpath keeps a leading "//" (UNC share); anything else collapses.
    return posixpath.normpath(unified).casefold() if unified else ""


def dedupe_installations(installations: Iterable[Installation]) -> List[Installation]:
    """Keep the first installation per normalized path, preserving order."""

    seen: Set[str] = set()
    unique: List[Installation] = []
    for installation in installations:
        key = normalize_install_path(installation.path)
        if key in seen:
            continue
        seen.add(key)
        unique.append(installation)
    return unique
