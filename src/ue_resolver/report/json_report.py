"""JSON renderer for resolution results."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from ue_resolver.engine.types import Installation, ResolutionResult

from .common import report_metadata


def _write(document: Dict[str, Any], path: str) -> None:
    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(document, indent=2), encoding="utf-8")


def resolution_document(result: ResolutionResult, metadata: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    document: Dict[str, Any] = {"metadata": metadata if metadata is not None else report_metadata()}
    document.update(result.to_dict())
    return document


def write_resolution_json(
    result: ResolutionResult, path: str, metadata: Optional[Dict[str, str]] = None
) -> None:
    _write(resolution_document(result, metadata), path)


def write_installations_json(
    installations: Sequence[Installation],
    path: str,
    *,
    warnings: Sequence[str] = (),
    metadata: Optional[Dict[str, str]] = None,
) -> None:
    document = {
        "metadata": metadata if metadata is not None else report_metadata(),
        "installations": [installation.to_dict() for installation in installations],
        "warnings": list(warnings),
    }
    _write(document, path)
