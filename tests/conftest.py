"""Pytest configuration and shared fixtures for lifecycle store tests."""

from typing import Generator

import pytest

from lifecycle_store.config.settings import Settings
from lifecycle_store.lifecycle import APPOINTMENT_GRAPH, LOAN_GRAPH, TASK_GRAPH
from lifecycle_store.store import RecordStore, StoreConfig, appointment_book, library_catalog, task_list
from tests.utils import FrozenClock


@pytest.fixture
def test_settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Settings isolated from the developer's environment."""
    for key in ("DEBUG", "LOG_LEVEL", "LOG_FILE", "APPOINTMENT_ID_PREFIX", "ID_START", "TIMESTAMP_FORMAT"):
        monkeypatch.delenv(key, raising=False)
    return Settings(
        _env_file=None,
        DEBUG=False,
        LOG_LEVEL="DEBUG",
        APPOINTMENT_ID_PREFIX="consulta",
        ID_START=1,
    )


@pytest.fixture
def clock() -> FrozenClock:
    """A clock that only moves when told to."""
    return FrozenClock()


@pytest.fixture
def appointments(test_settings: Settings, clock: FrozenClock) -> RecordStore:
    return appointment_book(test_settings, clock=clock)


@pytest.fixture
def library(test_settings: Settings, clock: FrozenClock) -> RecordStore:
    return library_catalog(test_settings, clock=clock)


@pytest.fixture
def tasks(test_settings: Settings, clock: FrozenClock) -> RecordStore:
    return task_list(test_settings, clock=clock)


@pytest.fixture
def plain_store(clock: FrozenClock) -> RecordStore:
    """Appointment graph with integer ids and no label constraints."""
    return RecordStore(StoreConfig(name="plain", graph=APPOINTMENT_GRAPH), clock=clock)


@pytest.fixture(params=["appointment", "loan", "task"])
def any_store(request: pytest.FixtureRequest, clock: FrozenClock) -> Generator[RecordStore, None, None]:
    """One store per domain graph, for properties every domain must satisfy."""
    graph = {"appointment": APPOINTMENT_GRAPH, "loan": LOAN_GRAPH, "task": TASK_GRAPH}[request.param]
    yield RecordStore(StoreConfig(name=request.param, graph=graph), clock=clock)
