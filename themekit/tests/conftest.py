# themekit/tests/conftest.py
"""
Shared fixtures: every test runs in its own working directory with a fresh
config cache, so a stray config.yaml, .env or THEMEKIT_* variable cannot leak
between tests.
"""
import pytest

from themekit.utils import config


@pytest.fixture(autouse=True)
def isolated_workdir(tmp_path, monkeypatch):
    """Runs each test inside tmp_path with no config overrides in effect."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("THEMEKIT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("THEMEKIT_TEMPLATES_DIR", raising=False)
    config._CONFIG_CACHE = None
    yield tmp_path
    config._CONFIG_CACHE = None
