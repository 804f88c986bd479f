"""Console renderer for resolution results."""

from __future__ import annotations

from typing import Sequence

from ue_resolver.engine.types import Installation, ResolutionResult

from .common import ConsoleTheme


def _describe(installation: Installation) -> str:
    version = f" [{installation.version}]" if installation.version else " [version unknown]"
    return f"{installation.display_name}{version} ({installation.association_id})"


def render_resolution(result: ResolutionResult, *, theme: ConsoleTheme, verbose: bool = False) -> None:
    if result.error:
        print(theme.colorize(f"Error: {result.error}", ConsoleTheme.RED))
    elif result.engine:
        print(f"Engine: {theme.colorize(_describe(result.engine), ConsoleTheme.GREEN)}")
        print(f"   Path: {result.engine.path}")
        if verbose and result.engine.version:
            version = result.engine.version
            print(f"   Changelist: {version.changelist} (compatible {version.compatible_changelist})")
            if version.branch_name:
                print(f"   Branch: {version.branch_name}")
            if version.build_id:
                print(f"   Build: {version.build_id}")
    else:
        print(theme.colorize("No Unreal Engine installations found.", ConsoleTheme.YELLOW))

    if result.uproject_engine:
        print(f"Project association: {result.uproject_engine.guid}")

    if result.warnings:
        print("\nWarnings:")
        for warning in result.warnings:
            print(f" - {theme.colorize(warning, ConsoleTheme.YELLOW)}")


def render_installations(
    installations: Sequence[Installation], *, theme: ConsoleTheme, warnings: Sequence[str] = ()
) -> None:
    if not installations:
        print(theme.colorize("No Unreal Engine installations found.", ConsoleTheme.YELLOW))
    for idx, installation in enumerate(installations, start=1):
        print(f" {idx}. {_describe(installation)}")
        print(f"    {theme.colorize(installation.path, ConsoleTheme.GREY)}")
        if installation.installed_date:
            print(f"    Installed: {installation.installed_date}")
    for warning in warnings:
        print(f" - {theme.colorize(warning, ConsoleTheme.YELLOW)}")
