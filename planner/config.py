"""Configuration for the planner."""

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

from planner.constants import DEFAULT_EVENTS_FILE, DEFAULT_MAX_OCCURRENCES


class PlannerConfig(BaseModel):
    """Planner configuration with Pydantic validation."""

    # Storage paths
    events_file: Path = Field(default=Path(DEFAULT_EVENTS_FILE))
    log_dir: Path = Field(default=Path("logs"))
    log_filename: str = Field(default="planner.log")

    # Expansion
    max_occurrences: int = Field(default=DEFAULT_MAX_OCCURRENCES, ge=1)

    # CLI defaults
    default_days: int = Field(default=7, ge=1)

    @classmethod
    def from_env(cls) -> "PlannerConfig":
        """Load configuration from environment variables and .env file."""
        load_dotenv(find_dotenv(usecwd=True))

        config_dict = {}

        # Storage paths
        if "PLANNER_EVENTS_FILE" in os.environ:
            config_dict["events_file"] = Path(os.environ["PLANNER_EVENTS_FILE"])
        if "PLANNER_LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["PLANNER_LOG_DIR"])
        if "PLANNER_LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["PLANNER_LOG_FILENAME"]

        # Integer settings
        for env_name, key in (
            ("PLANNER_MAX_OCCURRENCES", "max_occurrences"),
            ("PLANNER_DEFAULT_DAYS", "default_days"),
        ):
            if env_name in os.environ:
                try:
                    value = int(os.environ[env_name])
                except ValueError:
                    continue  # Keep default if invalid
                if value >= 1:
                    config_dict[key] = value

        return cls(**config_dict)
