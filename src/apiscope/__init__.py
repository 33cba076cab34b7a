from apiscope.api import API, SupportsRelease
from apiscope.exceptions import (
    APIScopeAsyncStorageModeError,
    APIScopeError,
    APIScopeInvalidStorageModeError,
    APIScopeManagerNotSetError,
)
from apiscope.facade import APIFacade
from apiscope.manager import APIManager, FactoryAPIManager
from apiscope.storage_mode import StorageMode

__all__ = [
    "API",
    "APIFacade",
    "APIManager",
    "APIScopeAsyncStorageModeError",
    "APIScopeError",
    "APIScopeInvalidStorageModeError",
    "APIScopeManagerNotSetError",
    "FactoryAPIManager",
    "StorageMode",
    "SupportsRelease",
]
