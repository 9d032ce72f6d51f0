"""Elasticsearch result storage implementation."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

import aiohttp

from webdriver_harness.models.result import Result
from webdriver_harness.storage.base import ResultStorage
from webdriver_harness.storage.elasticsearch.config import ElasticsearchConfig

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class ElasticsearchStorage(ResultStorage):
    """Indexes results through the Elasticsearch document API."""

    config: ElasticsearchConfig
    session: aiohttp.ClientSession = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: ElasticsearchConfig
    ) -> AsyncGenerator["ElasticsearchStorage", None]:
        """Create storage with managed session lifecycle."""
        headers = {"Accept": "application/json"}
        auth = None
        if config.api_key is not None:
            headers["Authorization"] = f"ApiKey {config.api_key.get_secret_value()}"
        elif config.username and config.password is not None:
            auth = aiohttp.BasicAuth(config.username, config.password.get_secret_value())

        async with aiohttp.ClientSession(
            base_url=config.url,
            headers=headers,
            auth=auth,
        ) as session:
            yield cls(config=config, session=session)

    async def store(self, result: Result) -> str:
        """Index the result document and return its generated id."""
        url = f"{self.config.index}/_doc"
        log.debug(
            "Indexing result: url=%s, index=%s, test=%s",
            self.config.url,
            self.config.index,
            result.test_name,
        )

        async with self.session.post(url, json=result.to_document()) as response:
            if not response.ok:
                text = await response.text()
                raise RuntimeError(
                    f"Failed to store result: {response.status} {text}"
                )
            data = await response.json()

        return str(data["_id"])
