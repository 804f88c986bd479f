"""Ensure src/ is importable when running tests without installation."""

from __future__ import annotations

from pathlib import Path
import json
import sys

import pytest

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def _write_build_version(root: Path, major: int, minor: int, patch: int, changelist: int = 0) -> Path:
    version_file = root / "Engine" / "Build" / "Build.version"
    version_file.parent.mkdir(parents=True, exist_ok=True)
    version_file.write_text(
        json.dumps(
            {
                "MajorVersion": major,
                "MinorVersion": minor,
                "PatchVersion": patch,
                "Changelist": changelist,
                "CompatibleChangelist": changelist,
                "IsLicenseeVersion": 0,
                "IsPromotedBuild": 1,
                "BranchName": f"++UE{major}+Release-{major}.{minor}",
                "BuildId": "",
            }
        ),
        encoding="utf-8",
    )
    return version_file


@pytest.fixture
def write_build_version():
    return _write_build_version
