import pytest

from core import logger


@pytest.fixture(autouse=True)
def log_file(tmp_path, monkeypatch):
    """Send the event log to a temp file instead of ./log.json."""
    path = tmp_path / "log.json"
    monkeypatch.setattr(logger, "LOG_FILE", str(path))
    monkeypatch.setattr(logger, "LOG_LEVEL", "INFO")
    return path
