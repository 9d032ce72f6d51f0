"""Internet Explorer browser manifest."""

from selenium.webdriver.ie.options import Options as IeOptions

from webdriver_harness.browsers.manifest import BrowserManifest
from webdriver_harness.config import HarnessConfig


def ie_options(config: HarnessConfig) -> IeOptions:
    return config.setup_ie_options(IeOptions())


internet_explorer_manifest = BrowserManifest(
    browser_name="internet explorer",
    options_factory=ie_options,
)
