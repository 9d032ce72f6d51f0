"""Firefox browser manifest."""

from selenium.webdriver.firefox.options import Options as FirefoxOptions

from webdriver_harness.browsers.manifest import BrowserManifest
from webdriver_harness.config import HarnessConfig


def firefox_options(config: HarnessConfig) -> FirefoxOptions:
    """Create Firefox options and pass them through the config hook."""
    return config.setup_firefox_options(FirefoxOptions())


firefox_manifest = BrowserManifest(
    browser_name="firefox",
    options_factory=firefox_options,
)
