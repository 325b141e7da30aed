"""
Shared test configuration.

Every test starts with a clean scan configuration: PEEKCURSOR_* variables
from the developer's shell are removed and the cached default config is
reset, so results never depend on the environment.
"""

import pytest

from peekcursor import config as config_module


@pytest.fixture(autouse=True)
def clean_scan_config(monkeypatch):
    """Fixture: isolate tests from PEEKCURSOR_* environment variables."""
    for name in ("PEEKCURSOR_ENCODING", "PEEKCURSOR_MAX_RUNS", "PEEKCURSOR_SHOW_WHITESPACE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config_module, "_default_config", None)
    yield
