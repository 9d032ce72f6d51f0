"""Elasticsearch storage module."""

from webdriver_harness.storage.elasticsearch.config import ElasticsearchConfig
from webdriver_harness.storage.elasticsearch.manifest import elasticsearch_manifest
from webdriver_harness.storage.elasticsearch.storage import ElasticsearchStorage

__all__ = ["ElasticsearchConfig", "ElasticsearchStorage", "elasticsearch_manifest"]
