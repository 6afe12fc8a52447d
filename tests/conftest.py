"""
Shared fixtures for scheduler, driver and API tests.
"""

import pytest
from fastapi.testclient import TestClient

from change_flow.core.config import Config, reset_config
from change_flow.core.dependencies import reset_dependencies
from change_flow.services import Scheduler, SlotQueue


def make_config(**overrides) -> Config:
    """Config that ignores any .env file in the working directory."""
    return Config(_env_file=None, **overrides)


@pytest.fixture
def config():
    """Default config with 100-tick tasks."""
    return make_config()


@pytest.fixture
def fast_config():
    """Two ticks per task keeps scenario tests short."""
    return make_config(step_threshold=2)


@pytest.fixture
def scheduler(config):
    return Scheduler(config)


@pytest.fixture
def fast_scheduler(fast_config):
    return Scheduler(fast_config)


@pytest.fixture
def single_slot_scheduler(fast_config):
    """Scheduler whose completion pool holds exactly one slot."""
    return Scheduler(fast_config, slot_queue=SlotQueue(x=1250, top_y=80, spacing=80))


@pytest.fixture
def client(monkeypatch):
    """Test client over a fresh scheduler loaded with the default roster."""
    monkeypatch.setenv("CHANGE_FLOW_STEP_THRESHOLD", "2")
    monkeypatch.setenv("CHANGE_FLOW_AUTOSTART_DRIVER", "false")
    monkeypatch.setenv("CHANGE_FLOW_LOAD_DEFAULTS_ON_START", "true")
    reset_config()
    reset_dependencies()

    from change_flow.main import app

    with TestClient(app) as test_client:
        yield test_client

    reset_dependencies()
    reset_config()
