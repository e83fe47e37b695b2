"""Shared fixtures: keep event logs out of the working directory."""

import os

import pytest

from core import config, events


@pytest.fixture(autouse=True)
def isolated_logs(tmp_path, monkeypatch):
    """Point every log file at a per-test temporary directory."""
    log_dir = tmp_path / "logs"
    monkeypatch.setattr(config, "LOG_DIR", str(log_dir))
    monkeypatch.setattr(config, "EVENT_LOG_FILE", os.path.join(str(log_dir), "events.jsonl"))
    monkeypatch.setattr(config, "APP_LOG_FILE", os.path.join(str(log_dir), "passgen.log"))
    events.shutdown_logging()
    yield log_dir
    events.shutdown_logging()
