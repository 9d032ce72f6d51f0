"""Chrome browser manifest."""

from selenium.webdriver.chrome.options import Options as ChromeOptions

from webdriver_harness.browsers.manifest import BrowserManifest
from webdriver_harness.config import HarnessConfig


def chrome_options(config: HarnessConfig) -> ChromeOptions:
    """Create Chrome options and pass them through the config hook."""
    return config.setup_chrome_options(ChromeOptions())


chrome_manifest = BrowserManifest(
    browser_name="chrome",
    options_factory=chrome_options,
)
