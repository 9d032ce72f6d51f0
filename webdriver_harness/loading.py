"""Loading of browser and storage plugins from entry points."""

from importlib.metadata import entry_points
from typing import Any

from webdriver_harness.browsers.manifest import BrowserManifest
from webdriver_harness.storage.manifest import StorageManifest

BROWSER_ENTRY_POINT_GROUP = "webdriver_harness.browsers"
STORAGE_ENTRY_POINT_GROUP = "webdriver_harness.storage"


class PluginNotFoundError(Exception):
    """Raised when no plugin is registered under a key."""


class BrowserNotFoundError(PluginNotFoundError):
    """Raised when the configured browser is not supported."""


class StorageNotFoundError(PluginNotFoundError):
    """Raised when the configured storage backend is not registered."""


def normalize_browser_name(name: str) -> str:
    """Map a WebDriver browser type to its entry point key.

    >>> normalize_browser_name("Internet Explorer")
    'internet-explorer'
    """
    return "-".join(name.strip().lower().split())


def _load(group: str, key: str) -> tuple[Any, list[str]]:
    entries = entry_points(group=group)
    for entry in entries:
        if entry.name == key:
            return entry.load(), []
    return None, [e.name for e in entries]


def load_browser_manifest(browser_name: str) -> BrowserManifest[Any]:
    """Load a browser manifest by browser name.

    Args:
        browser_name: Browser as configured, e.g. "firefox" or
            "internet explorer"

    Raises:
        BrowserNotFoundError: If no browser with the given name is registered

    """
    manifest, available = _load(
        BROWSER_ENTRY_POINT_GROUP, normalize_browser_name(browser_name)
    )
    if manifest is None:
        raise BrowserNotFoundError(
            f"Unsupported browser '{browser_name}'. Available browsers: {available}"
        )
    return manifest  # type: ignore[no-any-return]


def load_storage_manifest(key: str) -> StorageManifest[Any]:
    """Load a storage manifest by key (e.g. "elasticsearch").

    Raises:
        StorageNotFoundError: If no storage backend with the given key is found

    """
    manifest, available = _load(STORAGE_ENTRY_POINT_GROUP, key)
    if manifest is None:
        raise StorageNotFoundError(
            f"Storage '{key}' not found. Available storages: {available}"
        )
    return manifest  # type: ignore[no-any-return]
