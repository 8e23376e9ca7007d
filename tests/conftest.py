"""Pytest configuration and fixtures for gcd-tool tests."""

from __future__ import annotations

import logging
from typing import Generator

import pytest

from gcd_tool.core.config import ENV_LOG_LEVEL, ENV_ZERO_IDENTITY


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove gcd-tool environment variables so tests see the defaults."""
    monkeypatch.delenv(ENV_ZERO_IDENTITY, raising=False)
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    return monkeypatch


@pytest.fixture(autouse=True)
def restore_logger_level() -> Generator[logging.Logger, None, None]:
    """Undo the package logger level set by main() after each test."""
    logger = logging.getLogger("gcd_tool")
    level = logger.level
    yield logger
    logger.setLevel(level)


@pytest.fixture
def coprime_pairs() -> list[tuple[int, int]]:
    """Pairs of values whose gcd is 1."""
    return [(14, 15), (1, 2**64 - 1), (17, 19), (2**32, 2**32 + 1)]


@pytest.fixture
def sample_values() -> list[int]:
    """Non-zero values used for property checks."""
    return [1, 2, 6, 12, 15, 33, 330, 2431, 1024, 7919, 2**63, 2**64 - 1]
