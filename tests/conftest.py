# ============================================================================
# RescueTower - Test Configuration and Fixtures
#
# Purpose: Shared pytest fixtures for testing
# Inputs: None
# Outputs: Fixtures for use in tests
# Dependencies: pytest
# Usage: pytest tests/ (fixtures are automatically available)
#
# Changelog:
#   2026-03-03: Initial fixtures (sample components, catalog, tower)
#   2026-03-08: isolate_env fixture clears RESCUETOWER_* overrides
# ============================================================================

import pytest

from RescueTower.catalog import Catalog, Component
from RescueTower.config import Config
from RescueTower.sample_data import sample_components
from RescueTower.tower import RescueTower


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch):
    """Drop any RESCUETOWER_* variables from the developer's shell."""
    import os

    for key in list(os.environ):
        if key.startswith("RESCUETOWER_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def components():
    """The eight built-in sample components as a plain list, in seed order."""
    return sample_components()


@pytest.fixture
def trio():
    """Three components in the order used by the end-to-end walkthrough."""
    return [
        Component("Motor", "propulsao", 9),
        Component("Chip", "controle", 10),
        Component("Base", "estrutura", 7),
    ]


@pytest.fixture
def config():
    return Config()


@pytest.fixture
def catalog(config, components):
    return Catalog(config.catalog, components)


@pytest.fixture
def tower(config):
    """Tower preloaded with the sample components."""
    t = RescueTower(config)
    t.load_sample_data()
    return t
