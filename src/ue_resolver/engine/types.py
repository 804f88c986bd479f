"""Typed structures shared by probes, the version loader and the resolver."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

from .version_info import VersionInfo


class ResolverError(Exception):
    """Base class for errors raised inside engine resolution."""


class EngineOverrideError(ResolverError):
    """An explicit engine path was supplied but does not exist."""


@dataclass
class Installation:
    path: str
    association_id: str
    display_name: str
    installed_date: Optional[str] = None
    version: Optional[VersionInfo] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "associationId": self.association_id,
            "displayName": self.display_name,
            "installedDate": self.installed_date,
            "version": self.version.to_dict() if self.version else None,
        }


@dataclass(frozen=True)
class EngineAssociation:
    """The engine a project declares via ``EngineAssociation``."""

    guid: str
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"guid": self.guid, "name": self.name}


@dataclass
class ResolutionResult:
    """Outcome of a resolution call.

    ``error`` is only populated when resolution failed unexpectedly; in that
    case ``engine`` is always ``None``. Warnings may accompany either outcome.
    """

    engine: Optional[Installation] = None
    uproject_engine: Optional[EngineAssociation] = None
    warnings: List[str] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        return {
            "engine": self.engine.to_dict() if self.engine else None,
            "uprojectEngine": self.uproject_engine.to_dict() if self.uproject_engine else None,
            "warnings": list(self.warnings),
            "error": self.error,
        }
