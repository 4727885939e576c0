"""Pytest configuration shared by all tests."""

import shutil
from pathlib import Path

import pytest

from websearch.utils.config import reset_settings
from websearch.utils.logging_config import reset_logging

CONFIG_ENV_VARS = ("APP_NAME", "ENVIRONMENT", "LOG_LEVEL", "API_TIMEOUT", "TAVILY_API_KEY")


@pytest.fixture(scope="session", autouse=True)
def backup_env_file():
    """Backup .env file during test session to prevent pollution."""
    env_file = Path(".env")
    backup_file = Path(".env.test_backup")

    if env_file.exists():
        shutil.copy(env_file, backup_file)
        env_file.unlink()

    yield

    if backup_file.exists():
        shutil.move(backup_file, env_file)


@pytest.fixture(autouse=True)
def clean_config(monkeypatch: pytest.MonkeyPatch):
    """Start every test with no config variables and fresh singletons."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    reset_logging()

    yield

    reset_settings()
    reset_logging()
