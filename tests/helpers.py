from __future__ import annotations

from apiscope.api import API
from apiscope.manager import APIManager
from apiscope.storage_mode import StorageMode


class RecordingAPI(API):
    """API that counts ``release`` calls."""

    def __init__(self, label: str = "default") -> None:
        self.label = label
        self.release_count = 0

    @property
    def released(self) -> bool:
        return self.release_count > 0

    def release(self) -> None:
        self.release_count += 1

    def __repr__(self) -> str:
        return f"RecordingAPI({self.label!r})"


class RecordingAPIManager(APIManager[RecordingAPI]):
    """Manager creating ``RecordingAPI`` instances and remembering each one."""

    def __init__(self, *, storage_mode: StorageMode | str = StorageMode.THREAD) -> None:
        super().__init__(storage_mode=storage_mode)
        self.created: list[RecordingAPI] = []

    def create(self) -> RecordingAPI:
        api = RecordingAPI(f"created-{len(self.created)}")
        self.created.append(api)
        return api


class MarkerError(Exception):
    """Exception raised by units of work in tests."""
