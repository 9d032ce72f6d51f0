"""Shared fixtures."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from webdriver_harness.config import HarnessConfig
from webdriver_harness.testing.ini import write_config_tree


@pytest.fixture
def default_values(tmp_path: Path) -> dict[str, Any]:
    """Minimal values for config.ini."""
    return {
        "project_name": "shop",
        "env": "dev",
        "browser_name": "chrome",
        "driver_dir": "/opt/drivers",
        "base_url": "http://shop.test",
        "report_dir": tmp_path / "reports",
    }


@pytest.fixture
def make_config(
    tmp_path: Path, default_values: dict[str, Any]
) -> Callable[..., HarnessConfig]:
    """Return a function writing an INI tree and loading it."""

    def _make(
        env_values: dict[str, Any] | None = None,
        environ: dict[str, str] | None = None,
        overrides: dict[str, str] | None = None,
        **defaults: Any,
    ) -> HarnessConfig:
        config_dir = write_config_tree(
            tmp_path / "config",
            defaults={**default_values, **defaults},
            env_values=env_values,
        )
        return HarnessConfig(config_dir, environ=environ or {}, overrides=overrides)

    return _make
