from __future__ import annotations

import json
from pathlib import Path

from ue_resolver.engine.types import EngineAssociation, Installation, ResolutionResult
from ue_resolver.engine.version_info import VersionInfo
from ue_resolver.report.common import ConsoleTheme
from ue_resolver.report.console import render_resolution
from ue_resolver.report.json_report import resolution_document, write_resolution_json


def _result() -> ResolutionResult:
    engine = Installation(
        "C:/Epic/UE_5.4",
        "{GUID-1}",
        "UE 5.4.1",
        installed_date="2024-05-01",
        version=VersionInfo(5, 4, 1, changelist=42, branch_name="++UE5+Release-5.4"),
    )
    return ResolutionResult(
        engine=engine,
        uproject_engine=EngineAssociation("{GUID-1}", "{GUID-1}"),
        warnings=["careful"],
    )


def test_resolution_document_uses_camel_case() -> None:
    document = resolution_document(_result(), metadata={"machine": "test"})
    assert document["metadata"] == {"machine": "test"}
    assert document["engine"]["associationId"] == "{GUID-1}"
    assert document["engine"]["installedDate"] == "2024-05-01"
    assert document["engine"]["version"]["Changelist"] == 42
    assert document["uprojectEngine"] == {"guid": "{GUID-1}", "name": "{GUID-1}"}
    assert document["warnings"] == ["careful"]


def test_write_resolution_json_for_error(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "result.json"
    write_resolution_json(ResolutionResult(error="boom", warnings=["w"]), str(target), metadata={})
    payload = json.loads(target.read_text(encoding="utf-8"))
    assert payload == {"metadata": {}, "engine": None, "uprojectEngine": None, "warnings": ["w"], "error": "boom"}


def test_console_verbose_shows_branch(capsys) -> None:
    render_resolution(_result(), theme=ConsoleTheme(no_color=True), verbose=True)
    out = capsys.readouterr().out
    assert "UE 5.4.1 [5.4.1] ({GUID-1})" in out
    assert "Branch: ++UE5+Release-5.4" in out
    assert "careful" in out
