import pytest

from planner import create_app
from planner.config import PlannerConfig
from planner.storage import JSONEventStore


@pytest.fixture
def events_file(tmp_path):
    """Path to an events file inside the test's temp directory."""
    return tmp_path / "events.json"


@pytest.fixture
def config(tmp_path, events_file):
    """Configuration pointing at temp storage."""
    return PlannerConfig(events_file=events_file, log_dir=tmp_path / "logs")


@pytest.fixture
def store(events_file):
    """Empty JSON event store."""
    return JSONEventStore(events_file)


@pytest.fixture
def app(config):
    """Create and configure a Flask app for testing."""
    app = create_app(config)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
