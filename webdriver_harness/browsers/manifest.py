"""Browser manifest definition for the plugin system."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from selenium.webdriver.common.options import ArgOptions

from webdriver_harness.config import HarnessConfig

OptionsT = TypeVar("OptionsT", bound=ArgOptions)


@dataclass(frozen=True, kw_only=True)
class BrowserManifest(Generic[OptionsT]):
    """Manifest describing a browser plugin.

    The options factory receives the harness configuration so projects can
    customise capabilities through the config's ``setup_*`` hooks.
    """

    browser_name: str
    options_factory: Callable[[HarnessConfig], OptionsT]

    def build_options(self, config: HarnessConfig) -> OptionsT:
        """Build the capability object for a new remote session."""
        return self.options_factory(config)
