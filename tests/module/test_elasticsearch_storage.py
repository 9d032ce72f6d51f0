"""Module test storing results in a real Elasticsearch cluster."""

import asyncio
from pathlib import Path
from typing import Any

import aiohttp

from webdriver_harness.config import HarnessConfig
from webdriver_harness.storage.persist import store_result
from webdriver_harness.testing.factories import ResultFactory


async def fetch_document(url: str, index: str, document_id: str) -> dict[str, Any]:
    async with aiohttp.ClientSession(base_url=url) as session:
        async with session.get(f"/{index}/_doc/{document_id}") as response:
            assert response.status == 200
            data: dict[str, Any] = await response.json()
    return data


def test_store_result_indexes_document(
    config_dir: Path, elasticsearch_url: str
) -> None:
    """A stored result can be read back from the index."""
    config = HarnessConfig(
        config_dir,
        environ={
            "elasticsearch_url": elasticsearch_url,
            "elasticsearch_index": "module-results",
        },
    )
    result = ResultFactory.build(
        test_name="test_checkout",
        status="failed",
        error="AssertionError: cart is empty",
        started=1_000,
        ended=2_000,
    )

    document_id = store_result(config, result)

    document = asyncio.run(
        fetch_document(elasticsearch_url, "module-results", document_id)
    )
    assert document["_source"] == result.to_document()
