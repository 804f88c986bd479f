"""Discover engine builds registered under HKCU via ``reg query``."""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from ue_resolver.engine.types import Installation

from .base import ProbeContext, ProbeOutcome

logger = logging.getLogger(__name__)

BUILDS_KEY = r"HKEY_CURRENT_USER\SOFTWARE\Epic Games\Unreal Engine\Builds"

_FULL_ENTRY = re.compile(r"\{([^}]+)\}\s+REG_SZ\s+(.+)$")
_GUID_PREFIX = re.compile(r"^(\{[^}]+\})")
_REG_SZ_VALUE = re.compile(r"REG_SZ\s+(.+)$")


def _registry_installation(guid: str, engine_path: str) -> Installation:
    return Installation(path=engine_path, association_id=guid, display_name=f"UE Engine {guid}")


def parse_registry_output(text: str) -> List[Installation]:
    """Parse ``reg query`` output into installations.

    Two layouts are accepted: ``{GUID}  REG_SZ  <path>`` on one line, or a
    line starting with ``{GUID}`` whose ``REG_SZ <path>`` value follows on
    the next line.
    """

    installations: List[Installation] = []
    pending_guid: Optional[str] = None
    for line in text.splitlines():
        trimmed = line.strip()
        if not trimmed:
            continue

        full = _FULL_ENTRY.search(trimmed)
        if full:
            installations.append(_registry_installation(f"{{{full.group(1)}}}", full.group(2).strip()))
            pending_guid = None
            continue

        if trimmed.startswith("{"):
            guid_match = _GUID_PREFIX.match(trimmed)
            pending_guid = None
            if guid_match:
                value = _REG_SZ_VALUE.search(trimmed)
                if value:
                    installations.append(_registry_installation(guid_match.group(1), value.group(1).strip()))
                else:
                    pending_guid = guid_match.group(1)
            continue

        if pending_guid is not None:
            value = _REG_SZ_VALUE.match(trimmed)
            if value:
                installations.append(_registry_installation(pending_guid, value.group(1).strip()))
        pending_guid = None
    return installations


def probe_registry(ctx: ProbeContext) -> ProbeOutcome:
    try:
        result = ctx.run_command(["reg", "query", BUILDS_KEY, "/s"])
    except (OSError, ValueError) as exc:
        logger.debug("Registry query for UE engines failed: %s", exc)
        return ProbeOutcome()
    if result.timed_out:
        logger.debug("Registry query timed out: %s", BUILDS_KEY)
        return ProbeOutcome(warnings=[f"Registry query for engine builds timed out after {ctx.timeout:g}s"])
    if result.returncode != 0:
        # Key missing or reg.exe unavailable; nothing registered.
        logger.debug("Registry query failed (%s): %s", result.returncode, result.stderr.strip())
        return ProbeOutcome()
    try:
        installations = parse_registry_output(result.stdout or "")
    except Exception as exc:
        logger.debug("Failed to parse registry output for UE engines: %s", exc)
        return ProbeOutcome()
    logger.debug("Registry reported %d engine build(s)", len(installations))
    return ProbeOutcome(installations=installations)
