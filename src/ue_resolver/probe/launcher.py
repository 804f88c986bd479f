"""Discover launcher-installed engines from ``LauncherInstalled.dat``."""

from __future__ import annotations

import json
import logging
import os
from typing import List

from ue_resolver.engine.types import Installation

from .base import ProbeContext, ProbeOutcome

logger = logging.getLogger(__name__)

ENGINE_APP_NAMES = ("UE_4", "UE_5")

# (environment variable, path segments below it)
MANIFEST_LOCATIONS = (
    ("LOCALAPPDATA", ("UnrealEngine", "Common", "LauncherInstalled.dat")),
    ("PROGRAMDATA", ("Epic", "UnrealEngineLauncher", "LauncherInstalled.dat")),
)


def manifest_paths(ctx: ProbeContext) -> List[str]:
    paths: List[str] = []
    for variable, segments in MANIFEST_LOCATIONS:
        base = ctx.env.get(variable)
        if not base:
            continue
        paths.append(os.path.join(base, *segments))
    return paths


def parse_launcher_manifest(text: str) -> List[Installation]:
    manifest = json.loads(text)
    entries = manifest.get("InstallationList") if isinstance(manifest, dict) else None
    if not isinstance(entries, list):
        return []

    installations: List[Installation] = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        app_name = entry.get("AppName")
        if app_name not in ENGINE_APP_NAMES:
            continue
        location = entry.get("InstallLocation")
        if not location:
            logger.debug("Launcher entry %s has no InstallLocation; skipping", app_name)
            continue
        installations.append(
            Installation(
                path=str(location),
                association_id=app_name,
                display_name=entry.get("DisplayName") or f"UE {entry.get('AppVersion', '')}".strip(),
                installed_date=entry.get("InstallDate"),
            )
        )
    return installations


def probe_launcher(ctx: ProbeContext) -> ProbeOutcome:
    installations: List[Installation] = []
    for path in manifest_paths(ctx):
        if not ctx.fs.is_file(path):
            continue
        try:
            found = parse_launcher_manifest(ctx.fs.read_text(path))
        except Exception as exc:
            logger.debug("Failed to parse launcher manifest %s: %s", path, exc)
            continue
        logger.debug("Launcher manifest %s lists %d engine(s)", path, len(found))
        installations.extend(found)
    return ProbeOutcome(installations=installations)
