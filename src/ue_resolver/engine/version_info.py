"""Structured engine version records and their ordering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple


def _non_negative(payload: dict, key: str, default: Optional[int] = None) -> int:
    value = payload.get(key, default)
    if value is None:
        raise ValueError(f"Version descriptor is missing {key}.")
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an integer, got {value!r}.")
    number = int(value)
    if number < 0:
        raise ValueError(f"{key} must be non-negative, got {number}.")
    return number


@dataclass(frozen=True)
class VersionInfo:
    """Version metadata read from an engine's ``*.version`` descriptor."""

    major: int
    minor: int
    patch: int = 0
    changelist: int = 0
    compatible_changelist: int = 0
    is_licensee_version: bool = False
    is_promoted_build: bool = False
    branch_name: str = ""
    build_id: str = ""

    @classmethod
    def from_descriptor(cls, payload: Any) -> "VersionInfo":
        """Build a record from ``Build.version`` / ``UnrealEditor.version`` JSON."""

        if not isinstance(payload, dict):
            raise ValueError("Version descriptor must be a JSON object.")
        return cls(
            major=_non_negative(payload, "MajorVersion"),
            minor=_non_negative(payload, "MinorVersion"),
            patch=_non_negative(payload, "PatchVersion", 0),
            changelist=int(payload.get("Changelist") or 0),
            compatible_changelist=int(payload.get("CompatibleChangelist") or 0),
            is_licensee_version=bool(int(payload.get("IsLicenseeVersion") or 0)),
            is_promoted_build=bool(int(payload.get("IsPromotedBuild") or 0)),
            branch_name=str(payload.get("BranchName") or ""),
            build_id=str(payload.get("BuildId") or ""),
        )

    def sort_key(self) -> Tuple[int, int, int, int]:
        return (self.major, self.minor, self.patch, self.changelist)

    def to_dict(self) -> dict[str, Any]:
        return {
            "MajorVersion": self.major,
            "MinorVersion": self.minor,
            "PatchVersion": self.patch,
            "Changelist": self.changelist,
            "CompatibleChangelist": self.compatible_changelist,
            "IsLicenseeVersion": int(self.is_licensee_version),
            "IsPromotedBuild": int(self.is_promoted_build),
            "BranchName": self.branch_name,
            "BuildId": self.build_id,
        }

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def compare_versions(a: Optional[VersionInfo], b: Optional[VersionInfo]) -> int:
    """Return <0, 0 or >0 as ``a`` sorts below, equal to or above ``b``.

    A missing version ranks below any known version; two missing versions
    compare equal.
    """

    if a is None and b is None:
        return 0
    if a is None:
        return -1
    if b is None:
        return 1
    for left, right in zip(a.sort_key(), b.sort_key()):
        if left != right:
            return left - right
    return 0
