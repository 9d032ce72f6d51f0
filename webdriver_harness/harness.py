"""Setup and teardown lifecycle around a single browser test."""

import logging
from contextlib import ExitStack

from webdriver_harness.config import TEST_NAME, HarnessConfig
from webdriver_harness.driver import RemoteDriver
from webdriver_harness.loading import load_browser_manifest
from webdriver_harness.models.result import Result, ResultStatus, now_millis
from webdriver_harness.storage.persist import store_result

log = logging.getLogger(__name__)


class HarnessNotStartedError(RuntimeError):
    """Raised when the lifecycle is used before ``start``."""


class TestHarness:
    """Prepares a remote browser for one test and records its outcome.

    Typical use::

        harness = TestHarness(config)
        driver = harness.start("test_login", severity="critical")
        ...
        harness.finish("success")
    """

    __test__ = False

    def __init__(self, config: HarnessConfig) -> None:
        self.config = config
        self._driver: RemoteDriver | None = None
        self._result: Result | None = None
        self._exit_stack = ExitStack()

    @property
    def driver(self) -> RemoteDriver:
        if self._driver is None:
            raise HarnessNotStartedError("Harness has not been started")
        return self._driver

    @property
    def result(self) -> Result:
        if self._result is None:
            raise HarnessNotStartedError("Harness has not been started")
        return self._result

    def start(self, test_name: str, severity: str | None = None) -> RemoteDriver:
        """Open the browser session and create the result record.

        Raises:
            BrowserNotFoundError: If the configured browser is not supported

        """
        browser_name = self.config.browser_name
        manifest = load_browser_manifest(browser_name)
        options = manifest.build_options(self.config)

        self.config.add_property(TEST_NAME, test_name)
        driver = self._exit_stack.enter_context(
            RemoteDriver.from_config(self.config, options)
        )
        self._driver = driver
        driver.log(logging.INFO, f"=== {test_name} starting ===")

        self._result = Result(
            project_name=self.config.project_name,
            environment=self.config.env,
            browser=browser_name,
            test_name=test_name,
            started=now_millis(),
            status="success",
            severity=severity,
            log_path=str(driver.log_path),
            screen_path=str(driver.screen_path),
        )
        return driver

    def record_failure(self, message: str) -> None:
        """Write the failure and the page it happened on to the driver log."""
        driver = self.driver
        driver.log(logging.ERROR, message)
        driver.log(logging.ERROR, f"Error page: {driver.current_url}")

    def finish(self, status: ResultStatus, message: str | None = None) -> Result:
        """Report the final page, quit the session and store the result."""
        driver = self.driver
        result = self.result

        try:
            driver.report_page_source()
            driver.report_result_screen()
        finally:
            driver.log(logging.INFO, f"=== {result.test_name} finished ===")
            self._exit_stack.close()
        result.ended = now_millis()

        if status != "success":
            result.status = status
            result.error = message

        log.info(
            "Test finished: test=%s status=%s duration=%.2fs",
            result.test_name,
            result.status,
            result.duration,
        )

        if self.config.store_result:
            store_result(self.config, result)
        return result
