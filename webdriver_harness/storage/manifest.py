"""Storage manifest definition for the plugin system."""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import BaseModel

from webdriver_harness.config import HarnessConfig
from webdriver_harness.storage.base import ResultStorage

ConfigT = TypeVar("ConfigT", bound=BaseModel)


@dataclass(frozen=True, kw_only=True)
class StorageManifest(Generic[ConfigT]):
    """Manifest describing a storage plugin.

    The config factory extracts the backend settings from the harness
    configuration; the storage factory opens the backend for one store call.
    """

    config_factory: Callable[[HarnessConfig], ConfigT]
    storage_factory: Callable[[ConfigT], AbstractAsyncContextManager[ResultStorage]]
