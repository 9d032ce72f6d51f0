"""Layered harness configuration.

Values are read from ``config.ini`` in the config directory and from
``<project_name>/config.<env>.ini`` below it, where ``project_name`` and
``env`` are required keys. Minimal required values are:

- ``env``: selects the environment specific file
- ``driver_dir``: path to local driver binaries
- ``browser_name``: one of the registered browsers (chrome, firefox,
  internet explorer)
- ``base_url``: base URL to which pages append their path

The process environment and properties added at runtime are layered on top,
so later layers override earlier ones.
"""

import configparser
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.firefox.options import Options as FirefoxOptions
from selenium.webdriver.ie.options import Options as IeOptions

log = logging.getLogger(__name__)

# External
PROJECT_NAME = "project_name"
ENV = "env"
BROWSER_NAME = "browser_name"
DRIVER_DIR = "driver_dir"
HUB_ADDRESS = "hub_address"
STORE_RESULT = "store_result"
REPORT = "report"
REPORT_DIR = "report_dir"
TEST_NAME = "test_name"
BASE_URL = "base_url"
WAIT_BEFORE_ELEMENT_INIT = "wait_before_element_init"
STORAGE = "storage"

# Internal
LOG_FILE_NAME = "driver.log"
SCREEN_FILE_NAME = "endingScreen.png"
PAGE_SOURCE_FILE_NAME = "pageSource.html"

DEFAULT_HUB_ADDRESS = "http://localhost:4444/wd/hub"
DEFAULT_STORAGE = "elasticsearch"

TRUE_VALUES = frozenset({"1", "true", "on", "yes"})

_TOP_SECTION = "__top__"


class ConfigError(Exception):
    """Base error for configuration problems."""


class ConfigFileNotFoundError(ConfigError):
    """Raised when a required INI file does not exist."""


class PropertyNotFoundError(ConfigError, KeyError):
    """Raised when a property is missing and no default was given."""

    def __str__(self) -> str:
        return str(self.args[0])


def as_boolean(value: Any) -> bool:
    """Coerce a configuration value to a boolean.

    "1", "true", "on" and "yes" are true regardless of case; any other string
    is false.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int | float):
        return value != 0
    return str(value).strip().lower() in TRUE_VALUES


def _unquote(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def read_ini(path: Path) -> dict[str, str]:
    """Read an INI file into a flat mapping.

    Section headers are optional. Keys from every section are merged in file
    order, so a key defined twice keeps its last value.
    """
    if not path.is_file():
        raise ConfigFileNotFoundError(f"{path} not found")

    parser = configparser.ConfigParser(
        interpolation=None,
        strict=False,
        default_section="__defaults__",
        inline_comment_prefixes=(";",),
    )
    parser.optionxform = str  # type: ignore[assignment,method-assign]
    parser.read_string(f"[{_TOP_SECTION}]\n" + path.read_text(), source=str(path))

    values: dict[str, str] = {}
    for section in parser.sections():
        for key, value in parser.items(section, raw=True):
            values[key] = _unquote(value)
    return values


class HarnessConfig:
    """Key/value configuration assembled from ordered layers.

    Subclass it to customise browser capabilities through the ``setup_*``
    hooks.
    """

    def __init__(
        self,
        config_dir: Path | str,
        *,
        base_dir: Path | str | None = None,
        environ: Mapping[str, str] | None = None,
        overrides: Mapping[str, str] | None = None,
    ) -> None:
        self._config_dir = Path(config_dir)
        self._base_dir = Path(base_dir) if base_dir else self._config_dir.parent
        self._runtime: dict[str, Any] = dict(overrides or {})
        process = dict(os.environ if environ is None else environ)

        default = read_ini(self.default_config_file)
        # project_name and env select the environment file, so resolve them
        # before that layer exists
        self._layers: dict[str, Mapping[str, Any]] = {
            "ini_default": default,
            "env": process,
            "runtime": self._runtime,
        }
        env_file = self._config_dir / self.project_name / f"config.{self.env}.ini"
        self._layers = {
            "ini_default": default,
            "ini_env": read_ini(env_file),
            "env": process,
            "runtime": self._runtime,
        }
        log.debug(
            "Loaded configuration: project=%s env=%s files=%s, %s",
            self.project_name,
            self.env,
            self.default_config_file,
            env_file,
        )

    @property
    def default_config_file(self) -> Path:
        return self._config_dir / "config.ini"

    def get_property(self, name: str, default: Any = None) -> Any:
        """Look up a property; later layers override the preceding ones.

        Raises:
            PropertyNotFoundError: If no layer defines the property and no
                default is given

        """
        value = None
        for layer in self._layers.values():
            if name in layer:
                value = layer[name]
        if value is not None:
            return value
        if default is not None:
            return default
        raise PropertyNotFoundError(f"{name} property not found")

    def add_property(self, name: str, value: Any) -> None:
        """Set a property in the runtime layer, overriding every file."""
        self._runtime[name] = value

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    @property
    def config_dir(self) -> Path:
        return self._config_dir

    @property
    def project_name(self) -> str:
        return str(self.get_property(PROJECT_NAME))

    @property
    def env(self) -> str:
        return str(self.get_property(ENV))

    @property
    def browser_name(self) -> str:
        return str(self.get_property(BROWSER_NAME))

    @property
    def driver_dir(self) -> str:
        return str(self.get_property(DRIVER_DIR))

    @property
    def base_url(self) -> str:
        return str(self.get_property(BASE_URL))

    @property
    def hub_address(self) -> str:
        return str(self.get_property(HUB_ADDRESS, DEFAULT_HUB_ADDRESS))

    @property
    def store_result(self) -> bool:
        return as_boolean(self.get_property(STORE_RESULT, True))

    @property
    def reporting_active(self) -> bool:
        return as_boolean(self.get_property(REPORT, True))

    @property
    def common_report_dir(self) -> Path:
        return Path(self.get_property(REPORT_DIR, self._base_dir / "Reports"))

    @property
    def wait_before_element_init(self) -> float:
        return float(self.get_property(WAIT_BEFORE_ELEMENT_INIT, 0))

    @property
    def storage_backend(self) -> str:
        return str(self.get_property(STORAGE, DEFAULT_STORAGE))

    def setup_firefox_options(self, options: FirefoxOptions) -> FirefoxOptions:
        """Customise Firefox options, e.g. attach a profile."""
        return options

    def setup_chrome_options(self, options: ChromeOptions) -> ChromeOptions:
        """Customise Chrome options, e.g. add arguments or extensions."""
        return options

    def setup_ie_options(self, options: IeOptions) -> IeOptions:
        return options
