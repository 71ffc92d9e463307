"""
Global test fixtures for the REANA client.

Every test runs against a clean environment: the REANA variables are reset
to a known server URL, settings are re-read, and the follow loop does not
sleep.
"""

import pytest

TEST_SERVER_URL = "https://localhost:8080"
TEST_TOKEN = "1234"

_REANA_ENV_VARS = [
    "REANA_SERVER_URL",
    "REANA_ACCESS_TOKEN",
    "REANA_WORKON",
    "REANA_CHECK_INTERVAL",
    "REANA_SKIP_TLS_VERIFY",
]


@pytest.fixture(autouse=True)
def reana_env(monkeypatch):
    """Isolate tests from the user's REANA configuration."""
    from reana_cli.config.settings import clear_settings_cache

    for name in _REANA_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("REANA_SERVER_URL", TEST_SERVER_URL)
    monkeypatch.setenv("REANA_CHECK_INTERVAL", "0")

    clear_settings_cache()
    yield
    clear_settings_cache()
