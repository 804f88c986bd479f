"""Read the ``EngineAssociation`` a project declares in its ``.uproject``."""

from __future__ import annotations

from dataclasses import dataclass, field
import json
import logging
import os
from typing import List, Optional, TYPE_CHECKING

from .types import EngineAssociation

if TYPE_CHECKING:  # pragma: no cover
    from ue_resolver.probe.base import ProbeContext

logger = logging.getLogger(__name__)

PROJECT_EXTENSION = ".uproject"


@dataclass
class AssociationLookup:
    association: Optional[EngineAssociation] = None
    warnings: List[str] = field(default_factory=list)


def find_project_file(project_path: str, ctx: "ProbeContext") -> AssociationLookup | str:
    """Return the descriptor path for ``project_path`` or a lookup carrying a warning."""

    if ctx.fs.is_dir(project_path):
        candidates = [name for name in ctx.fs.list_dir(project_path) if name.endswith(PROJECT_EXTENSION)]
        if not candidates:
            return AssociationLookup(warnings=["No .uproject file found in project directory"])
        return os.path.join(project_path, candidates[0])
    if not project_path.endswith(PROJECT_EXTENSION):
        return AssociationLookup(warnings=["Project path is not a .uproject file"])
    return project_path


def read_project_association(project_path: str, ctx: "ProbeContext") -> AssociationLookup:
    """Never raises; every failure becomes a warning on the returned lookup."""

    try:
        located = find_project_file(project_path, ctx)
        if isinstance(located, AssociationLookup):
            return located

        uproject = json.loads(ctx.fs.read_text(located))
        value = uproject.get("EngineAssociation") if isinstance(uproject, dict) else None
        if not value:
            return AssociationLookup(warnings=["No EngineAssociation found in .uproject file"])

        logger.debug("%s declares EngineAssociation %s", located, value)
        return AssociationLookup(association=EngineAssociation(guid=str(value), name=str(value)))
    except Exception as exc:
        return AssociationLookup(warnings=[f"Failed to read project file: {exc}"])
