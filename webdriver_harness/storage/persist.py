"""Synchronous entry point for persisting results at teardown."""

import asyncio
import logging
from typing import Any

from webdriver_harness.config import HarnessConfig
from webdriver_harness.loading import load_storage_manifest
from webdriver_harness.models.result import Result
from webdriver_harness.storage.manifest import StorageManifest

log = logging.getLogger(__name__)


def store_result(config: HarnessConfig, result: Result) -> str:
    """Store a result with the backend selected by the ``storage`` property."""
    manifest = load_storage_manifest(config.storage_backend)
    return asyncio.run(_store(manifest, manifest.config_factory(config), result))


async def _store(
    manifest: StorageManifest[Any], storage_config: Any, result: Result
) -> str:
    async with manifest.storage_factory(storage_config) as storage:
        document_id = await storage.store(result)
    log.info(
        "Stored result: test=%s status=%s id=%s",
        result.test_name,
        result.status,
        document_id,
    )
    return document_id
