"""Browser manifests building remote capabilities for each supported browser."""

from webdriver_harness.browsers.chrome import chrome_manifest
from webdriver_harness.browsers.firefox import firefox_manifest
from webdriver_harness.browsers.internet_explorer import internet_explorer_manifest
from webdriver_harness.browsers.manifest import BrowserManifest

__all__ = [
    "BrowserManifest",
    "chrome_manifest",
    "firefox_manifest",
    "internet_explorer_manifest",
]
