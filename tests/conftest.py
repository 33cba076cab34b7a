"""Shared pytest fixtures for apiscope tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from apiscope.manager import FactoryAPIManager
from apiscope.storage_mode import StorageMode
from tests.helpers import RecordingAPI, RecordingAPIManager


@pytest.fixture()
def manager() -> Iterator[RecordingAPIManager]:
    """Thread-local manager, reset on teardown."""
    manager = RecordingAPIManager()
    yield manager
    manager.reset()


@pytest.fixture(params=[StorageMode.THREAD, StorageMode.CONTEXT], ids=lambda mode: mode.value)
def any_mode_manager(request: pytest.FixtureRequest) -> Iterator[RecordingAPIManager]:
    """Manager parametrized over every storage mode."""
    manager = RecordingAPIManager(storage_mode=request.param)
    yield manager
    manager.reset()


@pytest.fixture()
def context_manager() -> FactoryAPIManager[RecordingAPI]:
    """Context-variable manager built from a plain factory."""
    return FactoryAPIManager(RecordingAPI, storage_mode=StorageMode.CONTEXT)
