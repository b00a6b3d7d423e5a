"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

from collections.abc import Callable

from gluon_model_store.l1_entities.config import StoreConfig
from gluon_model_store.l2_use_cases.model_cache_use_case import ModelCache
from gluon_model_store.l2_use_cases.ports.archiver import Archiver
from gluon_model_store.l2_use_cases.ports.downloader import Downloader
from gluon_model_store.l2_use_cases.ports.hash_verifier import HashVerifier
from gluon_model_store.l2_use_cases.ports.model_resolver import ModelResolver
from gluon_model_store.l3_interface_adapters.gateways.http_downloader import HttpDownloader
from gluon_model_store.l3_interface_adapters.gateways.sha1_hash_verifier import Sha1HashVerifier
from gluon_model_store.l3_interface_adapters.gateways.zip_archiver import ZipArchiver


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(
        self,
        config: StoreConfig,
        on_progress: Callable[[int], None] | None = None,
    ) -> None:
        self.config = config

        self.downloader: Downloader = HttpDownloader(on_progress=on_progress, timeout=config.timeout)
        self.archiver: Archiver = ZipArchiver()
        self.verifier: HashVerifier = Sha1HashVerifier()

        self.model_cache = ModelCache(
            downloader=self.downloader,
            archiver=self.archiver,
            verifier=self.verifier,
            repo_url=config.repo_url,
        )
        self.model_resolver: ModelResolver = self.model_cache
