"""pytest plugin wiring the harness lifecycle into fixtures."""

import os
from collections.abc import Generator, Mapping
from pathlib import Path

import pytest

from webdriver_harness.config import (
    BROWSER_NAME,
    ENV,
    HUB_ADDRESS,
    STORE_RESULT,
    HarnessConfig,
)
from webdriver_harness.driver import RemoteDriver
from webdriver_harness.harness import TestHarness
from webdriver_harness.models.result import Result, ResultStatus

CONFIG_DIR_ENV_VAR = "HARNESS_CONFIG_DIR"

REPORTS_KEY = pytest.StashKey[dict[str, pytest.TestReport]]()


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("webdriver-harness", "remote WebDriver harness")
    group.addoption(
        "--harness-config-dir",
        help="Directory holding config.ini and <project>/config.<env>.ini",
    )
    group.addoption("--harness-env", help="Override the env property")
    group.addoption("--harness-browser", help="Override the browser_name property")
    group.addoption("--harness-hub", help="Override the hub_address property")
    group.addoption(
        "--harness-no-store",
        action="store_true",
        default=False,
        help="Do not store test results",
    )
    parser.addini(
        "harness_config_dir",
        help="Directory holding the harness INI files",
        default="",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers", "severity(level): severity recorded with the test result"
    )


@pytest.hookimpl(wrapper=True)
def pytest_runtest_makereport(
    item: pytest.Item, call: pytest.CallInfo[None]
) -> Generator[None, pytest.TestReport, pytest.TestReport]:
    """Keep the per-phase reports so fixture teardown can see the outcome."""
    report = yield
    item.stash.setdefault(REPORTS_KEY, {})[report.when] = report
    return report


def resolve_config_dir(config: pytest.Config) -> Path:
    """Pick the config dir: command line, ini file, environment, <rootdir>/config."""
    if value := config.getoption("harness_config_dir"):
        return Path(value)
    if value := config.getini("harness_config_dir"):
        return config.rootpath / value
    if value := os.environ.get(CONFIG_DIR_ENV_VAR):
        return Path(value)
    return config.rootpath / "config"


def command_line_overrides(config: pytest.Config) -> Mapping[str, str]:
    overrides: dict[str, str] = {}
    for option, name in (
        ("harness_env", ENV),
        ("harness_browser", BROWSER_NAME),
        ("harness_hub", HUB_ADDRESS),
    ):
        if value := config.getoption(option):
            overrides[name] = value
    if config.getoption("harness_no_store"):
        overrides[STORE_RESULT] = "false"
    return overrides


def outcome_from_reports(item: pytest.Item) -> tuple[ResultStatus, str | None]:
    """Derive result status and message from the setup and call reports."""
    reports = item.stash.get(REPORTS_KEY, {})
    for when in ("setup", "call"):
        report = reports.get(when)
        if report is None:
            continue
        if report.failed:
            return "failed", report.longreprtext
        if report.skipped:
            return "skipped", skip_reason(report)
    return "success", None


def skip_reason(report: pytest.TestReport) -> str:
    if reason := getattr(report, "wasxfail", None):
        return f"xfail: {reason}"
    if isinstance(report.longrepr, tuple):
        return report.longrepr[2]
    return report.longreprtext


@pytest.fixture(scope="session")
def harness_config(pytestconfig: pytest.Config) -> HarnessConfig:
    """Harness configuration shared by the session.

    Override this fixture in a ``conftest.py`` to use a ``HarnessConfig``
    subclass with customised browser options.
    """
    return HarnessConfig(
        resolve_config_dir(pytestconfig),
        overrides=command_line_overrides(pytestconfig),
    )


@pytest.fixture
def harness(
    request: pytest.FixtureRequest, harness_config: HarnessConfig
) -> Generator[TestHarness, None, None]:
    """Run the browser lifecycle around the requesting test."""
    marker = request.node.get_closest_marker("severity")
    severity = None
    if marker is not None:
        severity = marker.args[0] if marker.args else marker.kwargs.get("level")

    impl = TestHarness(harness_config)
    impl.start(request.node.name, severity=severity)
    yield impl

    status, message = outcome_from_reports(request.node)
    try:
        if status == "failed":
            impl.record_failure(message or "")
    finally:
        impl.finish(status, message)


@pytest.fixture
def driver(harness: TestHarness) -> RemoteDriver:
    """Remote browser session for the requesting test."""
    return harness.driver


@pytest.fixture
def harness_result(harness: TestHarness) -> Result:
    return harness.result
