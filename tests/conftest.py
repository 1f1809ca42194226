"""Pytest configuration for lazyseq tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
from hypothesis import HealthCheck, settings
from lazyseq._config import reset_config
from lazyseq._logging import clear_log_hooks

settings.register_profile('lazyseq', max_examples=100, suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile('lazyseq')


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Start every test with no installed config, no lazyseq env vars and no lazyseq handlers."""
    monkeypatch.delenv('LAZYSEQ_LOG_LEVEL', raising=False)
    monkeypatch.delenv('LAZYSEQ_MAX_DEPTH', raising=False)
    reset_config()
    yield
    reset_config()
    clear_log_hooks()
    library_logger = logging.getLogger('lazyseq')
    library_logger.handlers.clear()
    library_logger.setLevel(logging.NOTSET)
    library_logger.propagate = True


@pytest.fixture
def nested_tree() -> list:
    """The nested structure used across the flatten tests."""
    return [1, [2, [3, 4]], 5]


class Spy:
    """Callable that records every argument tuple it is called with."""

    def __init__(self, result=True) -> None:
        self.calls: list[tuple] = []
        self.result = result

    def __call__(self, value, key=None):
        self.calls.append((value, key))
        return self.result


@pytest.fixture
def spy() -> Spy:
    return Spy()
