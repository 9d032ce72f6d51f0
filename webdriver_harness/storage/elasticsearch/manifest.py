"""Elasticsearch storage manifest."""

from webdriver_harness.storage.elasticsearch.config import ElasticsearchConfig
from webdriver_harness.storage.elasticsearch.storage import ElasticsearchStorage
from webdriver_harness.storage.manifest import StorageManifest

elasticsearch_manifest = StorageManifest(
    config_factory=ElasticsearchConfig.from_harness_config,
    storage_factory=ElasticsearchStorage.from_config,
)
