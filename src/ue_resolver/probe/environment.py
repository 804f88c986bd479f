"""Discover an engine named by an environment variable."""

from __future__ import annotations

import logging

from ue_resolver.engine.types import Installation

from .base import ProbeContext, ProbeOutcome

logger = logging.getLogger(__name__)

ENGINE_ENV_VARS = ("UE_ENGINE_PATH", "UE_ROOT", "UNREAL_ENGINE_PATH")


def probe_environment(ctx: ProbeContext) -> ProbeOutcome:
    """Return the first variable that names an existing path, and only that one."""

    for variable in ENGINE_ENV_VARS:
        engine_path = ctx.env.get(variable)
        if not engine_path:
            continue
        if not ctx.fs.exists(engine_path):
            logger.debug("%s points at missing path %s", variable, engine_path)
            continue
        return ProbeOutcome(
            installations=[
                Installation(
                    path=engine_path,
                    association_id=f"ENV_{variable}",
                    display_name=f"UE Engine (from {variable})",
                )
            ]
        )
    return ProbeOutcome()
