"""Resolve the engine installation a project should build with."""

from __future__ import annotations

from functools import cmp_to_key
import logging
from typing import List, Optional, Sequence

from ue_resolver.probe.base import EngineProbe, ProbeContext
from ue_resolver.probe.runner import DiscoveryResult, run_probes

from .association import read_project_association
from .dedupe import dedupe_installations
from .types import EngineAssociation, EngineOverrideError, Installation, ResolutionResult
from .version_info import compare_versions
from .version_loader import load_versions

logger = logging.getLogger(__name__)

OVERRIDE_ASSOCIATION_ID = "ENGINE_PATH_OVERRIDE"


def find_engine_installations(
    ctx: Optional[ProbeContext] = None,
    *,
    probes: Optional[Sequence[EngineProbe]] = None,
) -> DiscoveryResult:
    """Run the probes, drop duplicate paths and load version metadata."""

    ctx = ctx or ProbeContext()
    discovered = run_probes(ctx, probes)
    unique = dedupe_installations(discovered.installations)
    if len(unique) != len(discovered.installations):
        logger.debug("Dropped %d duplicate installation(s)", len(discovered.installations) - len(unique))
    load_versions(unique, ctx)
    return DiscoveryResult(installations=unique, warnings=list(discovered.warnings))


def _override_installation(engine_path: str, ctx: ProbeContext) -> Installation:
    if not ctx.fs.exists(engine_path):
        raise EngineOverrideError(f"Engine path override does not exist: {engine_path}")
    installation = Installation(
        path=engine_path,
        association_id=OVERRIDE_ASSOCIATION_ID,
        display_name="UE Engine (override)",
    )
    load_versions([installation], ctx)
    return installation


def rank_installations(installations: Sequence[Installation]) -> List[Installation]:
    """Newest version first; ties keep discovery order."""

    return sorted(installations, key=cmp_to_key(lambda a, b: compare_versions(a.version, b.version)), reverse=True)


def match_association(
    association: EngineAssociation, installations: Sequence[Installation]
) -> Optional[Installation]:
    for installation in installations:
        if installation.association_id == association.guid:
            return installation
    return None


def resolve_engine(
    project_path: Optional[str] = None,
    *,
    ctx: Optional[ProbeContext] = None,
    engine_path: Optional[str] = None,
    probes: Optional[Sequence[EngineProbe]] = None,
) -> ResolutionResult:
    """Pick the engine for ``project_path``, or the best available one.

    ``engine_path`` skips discovery and becomes the only candidate. The
    function does not raise: unexpected failures are reported through
    ``ResolutionResult.error``.
    """

    warnings: List[str] = []
    try:
        ctx = ctx or ProbeContext()

        uproject_engine: Optional[EngineAssociation] = None
        if project_path:
            lookup = read_project_association(project_path, ctx)
            uproject_engine = lookup.association
            warnings.extend(lookup.warnings)

        if engine_path:
            installations = [_override_installation(engine_path, ctx)]
        else:
            discovery = find_engine_installations(ctx, probes=probes)
            installations = discovery.installations
            warnings.extend(discovery.warnings)

        engine: Optional[Installation] = None
        if uproject_engine and installations:
            engine = match_association(uproject_engine, installations)
            if engine is None and uproject_engine.guid:
                warnings.append(f"Engine with association ID {uproject_engine.guid} not found in installed engines")

        if engine is None and installations:
            engine = rank_installations(installations)[0]
            warnings.append(f"Using engine {engine.display_name or engine.association_id} (not associated with project)")

        if engine is None:
            logger.debug("No engine installations found")
        return ResolutionResult(engine=engine, uproject_engine=uproject_engine, warnings=warnings)
    except Exception as exc:
        logger.debug("Engine resolution failed", exc_info=True)
        return ResolutionResult(error=str(exc) or exc.__class__.__name__, warnings=warnings)
