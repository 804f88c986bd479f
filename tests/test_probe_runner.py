from __future__ import annotations

import threading
import time

import pytest

from ue_resolver.engine.types import Installation
from ue_resolver.probe.base import EngineProbe, ProbeContext, ProbeOutcome
from ue_resolver.probe.runner import default_probes, run_probes


def _static(*paths: str):
    def _probe(ctx: ProbeContext) -> ProbeOutcome:
        return ProbeOutcome(installations=[Installation(path, f"id-{path}", path) for path in paths])

    return _probe


def test_default_probes_are_gated_by_host() -> None:
    assert [probe.name for probe in default_probes("Windows")] == ["registry", "launcher", "environment"]
    assert [probe.name for probe in default_probes("Linux")] == ["environment"]
    assert [probe.name for probe in default_probes("Darwin")] == ["environment"]


def test_results_follow_probe_order_not_completion_order() -> None:
    def _slow(ctx: ProbeContext) -> ProbeOutcome:
        time.sleep(0.2)
        return _static("/slow")(ctx)

    probes = [EngineProbe("slow", _slow), EngineProbe("fast", _static("/fast-1", "/fast-2"))]
    result = run_probes(ProbeContext(env={}), probes)
    assert [item.path for item in result.installations] == ["/slow", "/fast-1", "/fast-2"]


def test_hung_probe_times_out_with_warning() -> None:
    release = threading.Event()

    def _hung(ctx: ProbeContext) -> ProbeOutcome:
        release.wait(5)
        return _static("/late")(ctx)

    probes = [EngineProbe("hung", _hung), EngineProbe("ok", _static("/ok"))]
    try:
        result = run_probes(ProbeContext(env={}, timeout=0.2), probes)
    finally:
        release.set()

    assert [item.path for item in result.installations] == ["/ok"]
    assert result.warnings == ["Engine probe 'hung' timed out after 0.2s"]


def test_probe_exception_propagates() -> None:
    def _broken(ctx: ProbeContext) -> ProbeOutcome:
        raise RuntimeError("probe exploded")

    with pytest.raises(RuntimeError, match="probe exploded"):
        run_probes(ProbeContext(env={}), [EngineProbe("ok", _static("/ok")), EngineProbe("broken", _broken)])
