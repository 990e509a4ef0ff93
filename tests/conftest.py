"""Pytest configuration.

Run pytest from this project's root; pythonpath in pyproject.toml puts src/
and the project root on sys.path so severity_registry and tests.fakes import
without an install.
"""

from unittest.mock import MagicMock

import pytest

from severity_registry.domain.naming import RuleLabels
from severity_registry.infrastructure.gateways.settings_store import InMemorySettingsStore


@pytest.fixture
def labels() -> RuleLabels:
    return RuleLabels()


@pytest.fixture
def store() -> InMemorySettingsStore:
    return InMemorySettingsStore()


@pytest.fixture
def telemetry() -> MagicMock:
    return MagicMock()
