"""Engine installation records, version metadata and resolution results."""

from .types import EngineAssociation, EngineOverrideError, Installation, ResolutionResult, ResolverError
from .version_info import VersionInfo, compare_versions

__all__ = [
    "EngineAssociation",
    "EngineOverrideError",
    "Installation",
    "ResolutionResult",
    "ResolverError",
    "VersionInfo",
    "compare_versions",
]
