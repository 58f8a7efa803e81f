"""Command line interface for the planner."""

import logging
import sys

from planner.config import PlannerConfig

FILE_LOG_FORMAT = "%(asctime)s %(name)s [%(levelname)s] %(message)s"
CONSOLE_LOG_FORMAT = "%(levelname)s: %(message)s"


def _console_level(verbose: bool, quiet: bool) -> int:
    """Pick the stderr log level; --quiet wins over --verbose."""
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.INFO
    return logging.WARNING


def setup_logging(
    verbose: bool = False, quiet: bool = False, config: PlannerConfig | None = None
) -> None:
    """Send everything to the log file and warnings (or more) to stderr.

    Replaces any handlers already installed on the root logger, so it is
    safe to call once per command invocation.

    Args:
        verbose: Show info messages on the console
        quiet: Show only errors on the console
        config: Log location settings (read from the environment if omitted)
    """
    config = config or PlannerConfig.from_env()
    config.log_dir.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(config.log_dir / config.log_filename)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(_console_level(verbose, quiet))
    console_handler.setFormatter(logging.Formatter(CONSOLE_LOG_FORMAT))

    logging.basicConfig(
        level=logging.DEBUG, handlers=[file_handler, console_handler], force=True
    )


def main() -> None:
    """Run the ``planner`` console script."""
    from cli.parser import app

    app()


__all__ = ["main", "setup_logging"]
