# tests/conftest.py
import pytest
from loguru import logger

from cipherdesk.config.loader import reset_config_cache

@pytest.fixture(autouse=True)
def isolated_app_dir(tmp_path, monkeypatch):
    """Keeps config and log files inside a per-test directory."""
    monkeypatch.setenv("APPDATA", str(tmp_path))
    monkeypatch.delenv("CIPHERDESK_LOG_LEVEL", raising=False)
    reset_config_cache()
    yield tmp_path
    reset_config_cache()
    # Drop sinks added by setup_logging so they do not outlive the test's streams
    logger.remove()
