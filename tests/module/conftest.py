"""Fixtures for module tests using testcontainers."""

from collections.abc import Generator
from pathlib import Path

import pytest
from selenium.webdriver.common.desired_capabilities import DesiredCapabilities
from testcontainers.core import testcontainers_config
from testcontainers.elasticsearch import ElasticSearchContainer
from testcontainers.selenium import BrowserWebDriverContainer

from webdriver_harness.testing.ini import write_config_tree

ELASTICSEARCH_IMAGE = "docker.elastic.co/elasticsearch/elasticsearch:8.13.4"


@pytest.fixture(scope="session", autouse=True)
def _disable_ryuk() -> None:
    """Disable the extra cleanup instance, we use contexts to clean containers."""
    testcontainers_config.ryuk_disabled = True


@pytest.fixture(scope="session")
def elasticsearch_url() -> Generator[str, None, None]:
    """Start a single node Elasticsearch cluster."""
    with ElasticSearchContainer(ELASTICSEARCH_IMAGE, mem_limit="2G") as es:
        yield es.get_url()


@pytest.fixture(scope="session")
def hub_address() -> Generator[str, None, None]:
    """Start a standalone Chrome Selenium server."""
    with BrowserWebDriverContainer(DesiredCapabilities.CHROME) as chrome:
        yield chrome.get_connection_url()


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Write a config tree with storage disabled."""
    return write_config_tree(
        tmp_path / "config",
        defaults={
            "project_name": "shop",
            "env": "dev",
            "browser_name": "chrome",
            "driver_dir": "/opt/drivers",
            "base_url": "http://shop.test",
            "report_dir": tmp_path / "reports",
            "store_result": "false",
        },
    )
