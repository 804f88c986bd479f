from __future__ import annotations

from pathlib import Path

from ue_resolver.probe.base import ProbeContext
from ue_resolver.probe.environment import probe_environment


def test_first_existing_variable_wins(tmp_path: Path) -> None:
    root_a = tmp_path / "A"
    root_b = tmp_path / "B"
    root_a.mkdir()
    root_b.mkdir()
    ctx = ProbeContext(env={"UE_ROOT": str(root_a), "UNREAL_ENGINE_PATH": str(root_b)})

    outcome = probe_environment(ctx)

    assert len(outcome.installations) == 1
    installation = outcome.installations[0]
    assert installation.path == str(root_a)
    assert installation.association_id == "ENV_UE_ROOT"
    assert installation.display_name == "UE Engine (from UE_ROOT)"


def test_missing_paths_and_empty_values_are_skipped(tmp_path: Path) -> None:
    existing = tmp_path / "Engine"
    existing.mkdir()
    ctx = ProbeContext(
        env={
            "UE_ENGINE_PATH": str(tmp_path / "missing"),
            "UE_ROOT": "",
            "UNREAL_ENGINE_PATH": str(existing),
        }
    )
    outcome = probe_environment(ctx)
    assert [item.association_id for item in outcome.installations] == ["ENV_UNREAL_ENGINE_PATH"]


def test_no_variables_is_empty() -> None:
    assert probe_environment(ProbeContext(env={})).installations == []
