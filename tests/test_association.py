from __future__ import annotations

import json
from pathlib import Path

from ue_resolver.engine.association import read_project_association
from ue_resolver.probe.base import ProbeContext


def _ctx() -> ProbeContext:
    return ProbeContext(env={})


def _uproject(path: Path, payload) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_directory_with_uproject(tmp_path: Path) -> None:
    _uproject(tmp_path / "Game" / "Game.uproject", {"FileVersion": 3, "EngineAssociation": "{GUID-1}"})
    lookup = read_project_association(str(tmp_path / "Game"), _ctx())
    assert lookup.association is not None
    assert lookup.association.guid == "{GUID-1}"
    assert lookup.association.name == "{GUID-1}"
    assert lookup.warnings == []


def test_direct_file_accepts_any_string(tmp_path: Path) -> None:
    path = _uproject(tmp_path / "Game.uproject", {"EngineAssociation": "5.4"})
    lookup = read_project_association(str(path), _ctx())
    assert lookup.association is not None
    assert lookup.association.guid == "5.4"


def test_directory_without_uproject_warns(tmp_path: Path) -> None:
    (tmp_path / "README.md").write_text("hi", encoding="utf-8")
    lookup = read_project_association(str(tmp_path), _ctx())
    assert lookup.association is None
    assert lookup.warnings == ["No .uproject file found in project directory"]


def test_non_project_path_warns(tmp_path: Path) -> None:
    lookup = read_project_association(str(tmp_path / "notes.txt"), _ctx())
    assert lookup.association is None
    assert lookup.warnings == ["Project path is not a .uproject file"]


def test_missing_association_warns(tmp_path: Path) -> None:
    path = _uproject(tmp_path / "Game.uproject", {"FileVersion": 3, "EngineAssociation": ""})
    lookup = read_project_association(str(path), _ctx())
    assert lookup.association is None
    assert lookup.warnings == ["No EngineAssociation found in .uproject file"]


def test_unreadable_file_becomes_warning(tmp_path: Path) -> None:
    path = tmp_path / "Game.uproject"
    path.write_text("{ not json", encoding="utf-8")
    lookup = read_project_association(str(path), _ctx())
    assert lookup.association is None
    assert len(lookup.warnings) == 1
    assert lookup.warnings[0].startswith("Failed to read project file:")


def test_missing_file_becomes_warning(tmp_path: Path) -> None:
    lookup = read_project_association(str(tmp_path / "Missing.uproject"), _ctx())
    assert lookup.association is None
    assert lookup.warnings[0].startswith("Failed to read project file:")
