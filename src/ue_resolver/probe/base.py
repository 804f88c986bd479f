"""Shared probe infrastructure and dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import os
from pathlib import Path
import platform
import subprocess
import threading
import time
from typing import Callable, List, Mapping, Optional, Sequence, Tuple, TYPE_CHECKING, Union

from ue_resolver.engine.types import Installation
from ue_resolver.settings import DEFAULT_MAX_WORKERS, DEFAULT_TIMEOUT

if TYPE_CHECKING:  # pragma: no cover
    from ue_resolver.settings import Settings

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Wrapper around subprocess output."""

    command: Union[str, Sequence[str]]
    stdout: str
    stderr: str
    returncode: int
    timed_out: bool = False


@dataclass
class ProbeOutcome:
    """Candidates found by one probe plus any user-facing warnings."""

    installations: List[Installation] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class EngineProbe:
    """A named discovery routine, optionally restricted to some host systems."""

    name: str
    run: Callable[["ProbeContext"], ProbeOutcome]
    systems: Optional[Tuple[str, ...]] = None

    def applies_to(self, system: str) -> bool:
        return self.systems is None or system in self.systems


class HostFileSystem:
    """Read-only filesystem access used by probes and loaders."""

    def exists(self, path: str) -> bool:
        return Path(path).exists()

    def is_dir(self, path: str) -> bool:
        return Path(path).is_dir()

    def is_file(self, path: str) -> bool:
        return Path(path).is_file()

    def read_text(self, path: str) -> str:
        return Path(path).read_text(encoding="utf-8-sig")

    def list_dir(self, path: str) -> List[str]:
        return sorted(entry.name for entry in Path(path).iterdir())


class ProbeContext:
    """Host capabilities shared by probes: environment, filesystem, processes."""

    def __init__(
        self,
        *,
        system: Optional[str] = None,
        env: Optional[Mapping[str, str]] = None,
        fs: Optional[HostFileSystem] = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_workers: int = DEFAULT_MAX_WORKERS,
        workdir: Optional[str] = None,
    ) -> None:
        self.system = system or platform.system()
        self.env: Mapping[str, str] = os.environ if env is None else env
        self.fs = fs or HostFileSystem()
        self.timeout = timeout
        self.max_workers = max_workers
        self.workdir = workdir or os.getcwd()

    @classmethod
    def from_settings(cls, settings: "Settings", **kwargs) -> "ProbeContext":
        return cls(timeout=settings.timeout, max_workers=settings.max_workers, **kwargs)

    def run_command(
        self,
        command: Union[str, Sequence[str]],
        *,
        check: bool = False,
        timeout: Optional[float] = None,
        env: Optional[dict[str, str]] = None,
    ) -> CommandResult:
        """Execute a command with a timeout, capturing output."""

        effective_timeout = timeout or self.timeout

        if isinstance(command, str):
            shell = True
            cmd = command
        else:
            shell = False
            cmd = list(command)

        try:
            proc = subprocess.run(
                cmd,
                shell=shell,
                capture_output=True,
                timeout=effective_timeout,
                text=True,
                errors="replace",
                check=check,
                env=env,
                cwd=self.workdir,
            )
        except subprocess.TimeoutExpired as exc:
            stdout = exc.stdout if isinstance(exc.stdout, str) else ""
            return CommandResult(command, stdout, "timeout", returncode=-1, timed_out=True)
        except FileNotFoundError:
            return CommandResult(command, "", "not found", returncode=-1)
        except subprocess.CalledProcessError as exc:
            return CommandResult(command, exc.stdout, exc.stderr, returncode=exc.returncode)

        return CommandResult(command, proc.stdout, proc.stderr, returncode=proc.returncode)


def run_parallel(
    probes: Sequence[EngineProbe], ctx: ProbeContext, *, timeout: Optional[float] = None
) -> List[ProbeOutcome]:
    """Execute probes in parallel threads, returning outcomes in probe order.

    A probe still running at the deadline yields an empty outcome with a
    warning. An exception raised by a probe is re-raised here once every
    thread has finished or timed out.
    """

    limit = timeout or ctx.timeout
    outcomes: List[Optional[ProbeOutcome]] = [None] * len(probes)
    errors: List[Optional[BaseException]] = [None] * len(probes)

    def _runner(idx: int, probe: EngineProbe) -> None:
        try:
            outcomes[idx] = probe.run(ctx)
        except Exception as exc:
            errors[idx] = exc

    threads = [
        threading.Thread(target=_runner, args=(idx, probe), name=f"probe-{probe.name}", daemon=True)
        for idx, probe in enumerate(probes)
    ]
    for thread in threads:
        thread.start()
    deadline = time.monotonic() + limit
    for thread in threads:
        thread.join(max(0.0, deadline - time.monotonic()))

    for idx, (probe, thread) in enumerate(zip(probes, threads)):
        if thread.is_alive():
            logger.debug("Probe %s still running after %ss; ignoring its results", probe.name, limit)
            outcomes[idx] = ProbeOutcome(warnings=[f"Engine probe '{probe.name}' timed out after {limit:g}s"])
            continue
        error = errors[idx]
        if error is not None:
            raise error
    return [outcome or ProbeOutcome() for outcome in outcomes]
