"""Tests for configuration."""

import os
from pathlib import Path

import pytest

from planner.config import PlannerConfig

ENV_VARS = (
    "PLANNER_EVENTS_FILE",
    "PLANNER_LOG_DIR",
    "PLANNER_LOG_FILENAME",
    "PLANNER_MAX_OCCURRENCES",
    "PLANNER_DEFAULT_DAYS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_planner_config_defaults():
    """Test PlannerConfig default values."""
    config = PlannerConfig()
    assert config.events_file == Path("data/events.json")
    assert config.log_dir == Path("logs")
    assert config.log_filename == "planner.log"
    assert config.max_occurrences == 365
    assert config.default_days == 7


def test_planner_config_from_env_all_vars(monkeypatch):
    """Test loading all config values from environment."""
    monkeypatch.setenv("PLANNER_EVENTS_FILE", "/custom/events.json")
    monkeypatch.setenv("PLANNER_LOG_DIR", "/custom/logs")
    monkeypatch.setenv("PLANNER_LOG_FILENAME", "custom.log")
    monkeypatch.setenv("PLANNER_MAX_OCCURRENCES", "100")
    monkeypatch.setenv("PLANNER_DEFAULT_DAYS", "14")

    config = PlannerConfig.from_env()
    assert config.events_file == Path("/custom/events.json")
    assert config.log_dir == Path("/custom/logs")
    assert config.log_filename == "custom.log"
    assert config.max_occurrences == 100
    assert config.default_days == 14


@pytest.mark.parametrize("value", ["lots", "0", "-5"])
def test_planner_config_invalid_int_keeps_default(monkeypatch, value):
    monkeypatch.setenv("PLANNER_MAX_OCCURRENCES", value)
    assert PlannerConfig.from_env().max_occurrences == 365


def test_planner_config_from_env_file(tmp_path, monkeypatch):
    """Test loading config from .env file."""
    env_file = tmp_path / ".env"
    env_file.write_text("PLANNER_DEFAULT_DAYS=3\n")

    # Change to tmp_path so .env file is found
    original_cwd = os.getcwd()
    try:
        os.chdir(tmp_path)
        config = PlannerConfig.from_env()
    finally:
        os.chdir(original_cwd)
        os.environ.pop("PLANNER_DEFAULT_DAYS", None)

    assert config.default_days == 3


def test_planner_config_validation():
    with pytest.raises(ValueError):
        PlannerConfig(max_occurrences=0)
