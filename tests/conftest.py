"""Shared pytest fixtures for pwtool tests.

Provides reusable configuration objects, deterministic entropy sources,
and samplers used across multiple test modules.
"""

from __future__ import annotations

import os

import pytest

from pwtool.builder import PasswordBuilder
from pwtool.config import PwtoolConfig
from pwtool.entropy import MockUniformSource, SystemEntropySource
from pwtool.sampling import UniformSampler


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep PWTOOL_* variables from the developer's shell out of tests."""
    for key in list(os.environ):
        if key.startswith("PWTOOL_"):
            monkeypatch.delenv(key)


@pytest.fixture
def default_config() -> PwtoolConfig:
    """Return a PwtoolConfig with all default values and no .env lookup."""
    return PwtoolConfig(_env_file=None)


@pytest.fixture
def diagnostic_config() -> PwtoolConfig:
    """Return a config with diagnostic mode and full logging enabled."""
    return PwtoolConfig(_env_file=None, log_level="full", diagnostic_mode=True)


@pytest.fixture
def mock_source() -> MockUniformSource:
    """Return a seeded MockUniformSource for reproducible runs."""
    return MockUniformSource(seed=42)


@pytest.fixture
def system_source() -> SystemEntropySource:
    """Return the OS-backed entropy source."""
    return SystemEntropySource()


@pytest.fixture
def sampler(mock_source: MockUniformSource) -> UniformSampler:
    """Return a sampler over the seeded mock source."""
    return UniformSampler(mock_source)


@pytest.fixture
def builder(sampler: UniformSampler) -> PasswordBuilder:
    """Return a builder over the seeded mock sampler."""
    return PasswordBuilder(sampler)
