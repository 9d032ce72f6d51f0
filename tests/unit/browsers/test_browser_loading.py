"""Tests for browser and storage manifest loading."""

import pytest

from webdriver_harness.browsers import (
    chrome_manifest,
    firefox_manifest,
    internet_explorer_manifest,
)
from webdriver_harness.loading import (
    BrowserNotFoundError,
    StorageNotFoundError,
    load_browser_manifest,
    load_storage_manifest,
    normalize_browser_name,
)
from webdriver_harness.storage.elasticsearch import elasticsearch_manifest


@pytest.mark.parametrize(
    ("browser_name", "expected"),
    [
        ("chrome", chrome_manifest),
        ("firefox", firefox_manifest),
        ("internet explorer", internet_explorer_manifest),
        ("Internet Explorer", internet_explorer_manifest),
        (" Firefox ", firefox_manifest),
    ],
)
def test_load_browser_manifest_returns_manifest(
    browser_name: str, expected: object
) -> None:
    """Loads browser manifest by configured browser name."""
    assert load_browser_manifest(browser_name) is expected


def test_load_browser_manifest_raises_for_unsupported_browser() -> None:
    """Raises BrowserNotFoundError for unknown browsers."""
    with pytest.raises(BrowserNotFoundError) as exc_info:
        load_browser_manifest("netscape")

    assert "Unsupported browser 'netscape'" in str(exc_info.value)
    assert "chrome" in str(exc_info.value)


def test_load_storage_manifest_returns_manifest() -> None:
    """Loads storage manifest by key."""
    assert load_storage_manifest("elasticsearch") is elasticsearch_manifest


def test_load_storage_manifest_raises_for_unknown_storage() -> None:
    """Raises StorageNotFoundError for unknown storage key."""
    with pytest.raises(StorageNotFoundError, match="Storage 'mongo' not found"):
        load_storage_manifest("mongo")


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("chrome", "chrome"),
        ("internet explorer", "internet-explorer"),
        ("  MicrosoftEdge ", "microsoftedge"),
    ],
)
def test_normalize_browser_name(name: str, expected: str) -> None:
    """Lower-cases and joins words with dashes."""
    assert normalize_browser_name(name) == expected
