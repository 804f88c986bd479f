"""Assemble the probe set for a host and collect candidates in probe order."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import List, Optional, Sequence

from ue_resolver.engine.types import Installation

from .base import EngineProbe, ProbeContext, run_parallel
from .environment import probe_environment
from .launcher import probe_launcher
from .registry import probe_registry

logger = logging.getLogger(__name__)

# Order matters: earlier probes win when two report the same path.
ENGINE_PROBES = (
    EngineProbe("registry", probe_registry, systems=("Windows",)),
    EngineProbe("launcher", probe_launcher, systems=("Windows",)),
    EngineProbe("environment", probe_environment),
)


@dataclass
class DiscoveryResult:
    installations: List[Installation] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def default_probes(system: str) -> List[EngineProbe]:
    return [probe for probe in ENGINE_PROBES if probe.applies_to(system)]


def run_probes(ctx: ProbeContext, probes: Optional[Sequence[EngineProbe]] = None) -> DiscoveryResult:
    """Run probes concurrently and concatenate their outputs in probe order."""

    selected = list(probes) if probes is not None else default_probes(ctx.system)
    result = DiscoveryResult()
    if not selected:
        return result
    outcomes = run_parallel(selected, ctx)
    for probe, outcome in zip(selected, outcomes):
        logger.debug("Probe %s found %d candidate(s)", probe.name, len(outcome.installations))
        result.installations.extend(outcome.installations)
        result.warnings.extend(outcome.warnings)
    return result
