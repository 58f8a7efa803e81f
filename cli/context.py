"""Per-invocation state shared by the CLI commands."""

from planner.config import PlannerConfig
from planner.storage.event_store import JSONEventStore


class CLIContext:
    """Holds the output flags plus config and store, built on first use.

    Commands that never touch the store (``--help``) do not read the
    events file.
    """

    def __init__(
        self,
        verbose: bool = False,
        quiet: bool = False,
        config: PlannerConfig | None = None,
    ):
        self.verbose = verbose
        self.quiet = quiet
        self._config = config
        self._store: JSONEventStore | None = None

    @property
    def config(self) -> PlannerConfig:
        """Settings from the environment unless given up front."""
        if self._config is None:
            self._config = PlannerConfig.from_env()
        return self._config

    @property
    def store(self) -> JSONEventStore:
        """JSON store at ``config.events_file``."""
        if self._store is None:
            self._store = JSONEventStore(self.config.events_file)
        return self._store


# Installed by the Typer callback before any command runs
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Return the context installed by the app callback.

    Raises:
        RuntimeError: If a command is called outside the Typer app
    """
    if _ctx is None:
        raise RuntimeError("No CLI context; run commands through the planner app.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    global _ctx
    _ctx = ctx
