"""Pytest configuration and shared fixtures for downdash tests."""

import logging

import pytest
from hypothesis import HealthCheck, settings

# The autouse state reset is safe to share across generated examples.
settings.register_profile('downdash', suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile('downdash')


@pytest.fixture(autouse=True)
def reset_package_state(monkeypatch: pytest.MonkeyPatch):
    """Start every test unconfigured, with no log hooks and a clean root logger."""
    from downdash import _config, _logging

    monkeypatch.setattr(_config, '_config', None)
    monkeypatch.setattr(_logging, '_configured', False)
    _logging.clear_log_hooks()

    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    _logging.clear_log_hooks()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def letters():
    """Sample sequence used by the lookup tests."""
    return ['a', 'b', 'c']


@pytest.fixture
def scores():
    """Sample mapping with insertion-ordered keys."""
    return {'ada': 3, 'bob': 0, 'cy': 5}


@pytest.fixture
def captured_events():
    """Configure DEBUG logging and collect every emitted event dict."""
    from downdash._logging import add_log_hook, configure_logging

    events: list[dict] = []
    configure_logging(level='DEBUG', json_output=True)
    add_log_hook(events.append)
    return events
