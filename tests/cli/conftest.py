"""Fixtures for CLI tests."""

import pytest
from typer.testing import CliRunner

from pagewire.constants import ENV_CATALOG, ENV_LOG_LEVEL, ENV_STRICT


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep PAGEWIRE_* variables from the outer environment out of the tests."""
    for name in (ENV_CATALOG, ENV_LOG_LEVEL, ENV_STRICT):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()
