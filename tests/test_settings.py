from __future__ import annotations

import logging

from ue_resolver.logging_config import parse_level
from ue_resolver.probe.base import ProbeContext
from ue_resolver.settings import DEFAULT_MAX_WORKERS, DEFAULT_TIMEOUT, load_settings


def test_defaults_without_environment() -> None:
    settings = load_settings({})
    assert settings.timeout == DEFAULT_TIMEOUT
    assert settings.max_workers == DEFAULT_MAX_WORKERS
    assert settings.log_level == "WARNING"
    assert settings.log_file is None


def test_environment_overrides() -> None:
    settings = load_settings(
        {
            "UERESOLVE_TIMEOUT": "5",
            "UERESOLVE_MAX_WORKERS": "8",
            "UERESOLVE_LOG_LEVEL": "debug",
            "UERESOLVE_LOG_FILE": "resolve.log",
        }
    )
    assert settings.timeout == 5.0
    assert settings.max_workers == 8
    assert settings.log_level == "DEBUG"
    assert settings.log_file == "resolve.log"


def test_invalid_environment_values_fall_back() -> None:
    settings = load_settings({"UERESOLVE_TIMEOUT": "soon", "UERESOLVE_MAX_WORKERS": "-3"})
    assert settings.timeout == DEFAULT_TIMEOUT
    assert settings.max_workers == DEFAULT_MAX_WORKERS


def test_explicit_values_win() -> None:
    settings = load_settings({"UERESOLVE_TIMEOUT": "5", "UERESOLVE_LOG_LEVEL": "ERROR"}, timeout=1.5, log_level="info")
    assert settings.timeout == 1.5
    assert settings.log_level == "INFO"


def test_context_from_settings() -> None:
    ctx = ProbeContext.from_settings(load_settings({}, timeout=3, max_workers=2), system="Linux", env={})
    assert ctx.timeout == 3
    assert ctx.max_workers == 2
    assert ctx.system == "Linux"


def test_parse_level() -> None:
    assert parse_level("debug") == logging.DEBUG
    assert parse_level("nonsense") == logging.WARNING
    assert parse_level(None) == logging.WARNING
