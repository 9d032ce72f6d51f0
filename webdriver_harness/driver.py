"""Remote WebDriver session bound to the harness configuration."""

import logging
import re
from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from types import TracebackType
from typing import Any, Self

from selenium import webdriver
from selenium.webdriver.common.options import ArgOptions
from selenium.webdriver.remote.webdriver import WebDriver

from webdriver_harness.config import (
    LOG_FILE_NAME,
    PAGE_SOURCE_FILE_NAME,
    SCREEN_FILE_NAME,
    TEST_NAME,
    HarnessConfig,
)

log = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

_UNSAFE_PATH_CHARS = re.compile(r"[^\w.-]+")


def safe_path_name(name: str) -> str:
    """Turn a test or project name into a single path component.

    >>> safe_path_name("tests/test_login.py::test_valid[chrome]")
    'tests_test_login.py_test_valid_chrome'
    """
    return _UNSAFE_PATH_CHARS.sub("_", name).strip("_") or "unnamed"


@dataclass(kw_only=True)
class RemoteDriver:
    """A remote browser session with per-test reporting.

    Attribute access not defined here is forwarded to the wrapped Selenium
    ``WebDriver``, so ``driver.find_element(...)`` works as usual.
    """

    webdriver: WebDriver = field(repr=False)
    config: HarnessConfig = field(repr=False)
    logger: logging.Logger = field(default=log, repr=False)
    _handler: logging.Handler | None = field(default=None, init=False, repr=False)
    _closed: bool = field(default=False, init=False)

    @classmethod
    @contextmanager
    def from_config(
        cls, config: HarnessConfig, options: ArgOptions
    ) -> Generator["RemoteDriver", None, None]:
        """Open a session on the configured hub and quit it on exit.

        The ``test_name`` property should be set beforehand so the driver log
        lands in the right report directory.
        """
        log.info(
            "Opening remote session: hub=%s, browser=%s",
            config.hub_address,
            options.capabilities.get("browserName"),
        )
        session = webdriver.Remote(command_executor=config.hub_address, options=options)
        driver = cls(webdriver=session, config=config)
        try:
            driver.attach_log()
            yield driver
        finally:
            driver.quit()

    def __getattr__(self, name: str) -> Any:
        if name == "webdriver":
            raise AttributeError(name)
        return getattr(self.webdriver, name)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.quit()

    @property
    def test_report_dir(self) -> Path:
        """Directory holding the log, page source and screenshot of this test."""
        test_name = str(self.config.get_property(TEST_NAME, "unnamed"))
        return (
            self.config.common_report_dir
            / safe_path_name(self.config.project_name)
            / safe_path_name(test_name)
        )

    @property
    def log_path(self) -> Path:
        return self.test_report_dir / LOG_FILE_NAME

    @property
    def screen_path(self) -> Path:
        return self.test_report_dir / SCREEN_FILE_NAME

    @property
    def current_url(self) -> str:
        return self.webdriver.current_url

    def attach_log(self) -> None:
        """Start writing driver log records into the test report directory."""
        if self._handler is not None or not self.config.reporting_active:
            return
        self.test_report_dir.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(self.log_path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        self.logger.addHandler(handler)
        if self.logger.level == logging.NOTSET:
            self.logger.setLevel(logging.DEBUG)
        self._handler = handler

    def detach_log(self) -> None:
        if self._handler is None:
            return
        self.logger.removeHandler(self._handler)
        self._handler.close()
        self._handler = None

    def log(self, level: int, message: str) -> None:
        """Write a message to the driver log."""
        self.logger.log(level, message)

    def open(self, path: str = "") -> None:
        """Navigate to ``path`` relative to the configured base URL."""
        url = f"{self.config.base_url.rstrip('/')}/{path.lstrip('/')}"
        self.log(logging.INFO, f"Opening {url}")
        self.webdriver.get(url)

    def report_page_source(self) -> Path | None:
        """Save the current page source when reporting is active."""
        if not self.config.reporting_active:
            return None
        path = self.test_report_dir / PAGE_SOURCE_FILE_NAME
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.webdriver.page_source, encoding="utf-8")
        return path

    def report_result_screen(self) -> Path | None:
        """Save a screenshot of the final page when reporting is active."""
        if not self.config.reporting_active:
            return None
        path = self.screen_path
        path.parent.mkdir(parents=True, exist_ok=True)
        if not self.webdriver.save_screenshot(str(path)):
            self.log(logging.WARNING, f"Could not save screenshot to {path}")
            return None
        return path

    def quit(self) -> None:
        """End the remote session; calling it again does nothing."""
        if self._closed:
            return
        self._closed = True
        try:
            self.webdriver.quit()
        finally:
            self.detach_log()
