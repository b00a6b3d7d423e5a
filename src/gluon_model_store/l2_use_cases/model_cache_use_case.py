"""Use case: verify-else-fetch cache of pretrained model parameter files."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from gluon_model_store.l1_entities.errors import IntegrityError
from gluon_model_store.l1_entities.model_registry import (
    APACHE_REPO_URL,
    ARCHIVE_SUFFIX,
    DEFAULT_ROOT,
    MODEL_SHA1,
    PARAMS_SUFFIX,
    download_url,
    expected_hash,
    model_file_stem,
)
from gluon_model_store.l1_entities.model_registry import short_hash as _short_hash
from gluon_model_store.l2_use_cases.ports.archiver import Archiver
from gluon_model_store.l2_use_cases.ports.downloader import Downloader
from gluon_model_store.l2_use_cases.ports.hash_verifier import HashVerifier

log = logging.getLogger('gms.cache')


class ModelCache:
    """Resolves registered model names to verified ``.params`` files under a root directory.

    A cached file is trusted only after its full hash matches the registry.
    A mismatching file on disk triggers a single re-fetch; a mismatch after a
    fresh download raises ``IntegrityError``.
    """

    def __init__(
        self,
        downloader: Downloader,
        archiver: Archiver,
        verifier: HashVerifier,
        repo_url: str = APACHE_REPO_URL,
        registry: Mapping[str, str] = MODEL_SHA1,
    ) -> None:
        self._downloader = downloader
        self._archiver = archiver
        self._verifier = verifier
        self._repo_url = repo_url
        self._registry = registry

    @property
    def repo_url(self) -> str:
        return self._repo_url

    def short_hash(self, name: str) -> str:
        return _short_hash(name, self._registry)

    def available_models(self) -> list[str]:
        return sorted(self._registry)

    def cache_path(self, name: str, root: str | Path = DEFAULT_ROOT) -> Path:
        """Where *name* lives inside *root*. No I/O."""
        return Path(root).expanduser() / f'{model_file_stem(name, self._registry)}{PARAMS_SUFFIX}'

    def is_cached(self, name: str, root: str | Path = DEFAULT_ROOT) -> bool:
        file_path = self.cache_path(name, root)
        return file_path.is_file() and self._verifier.verify(file_path, expected_hash(name, self._registry))

    def resolve(self, name: str, root: str | Path = DEFAULT_ROOT) -> Path:
        """Return the local path of *name*, downloading it when missing or corrupted."""
        sha1 = expected_hash(name, self._registry)
        file_stem = model_file_stem(name, self._registry)
        root_dir = Path(root).expanduser()
        file_path = root_dir / f'{file_stem}{PARAMS_SUFFIX}'

        if file_path.is_file():
            if self._verifier.verify(file_path, sha1):
                log.debug('Cache hit for %s at %s', name, file_path)
                return file_path
            log.warning('Mismatch in the content of model file %s detected. Downloading again.', file_path)
        else:
            log.info('Model file %s is not found. Downloading.', file_path)

        root_dir.mkdir(parents=True, exist_ok=True)

        zip_path = root_dir / f'{file_stem}{ARCHIVE_SUFFIX}'
        url = download_url(self._repo_url, file_stem)
        log.info('Fetching %s', url)
        self._downloader.download(url, zip_path, overwrite=True)
        # The archive is removed even when extraction fails.
        try:
            self._archiver.extract(zip_path, file_path)
        finally:
            zip_path.unlink(missing_ok=True)

        if self._verifier.verify(file_path, sha1):
            log.info('Model %s stored at %s', name, file_path)
            return file_path
        raise IntegrityError(f'Downloaded file {file_path} has different hash. Please try again.')

    def purge(self, root: str | Path = DEFAULT_ROOT) -> None:
        """Delete every cached ``.params`` file under *root*. Missing directories are fine."""
        root_dir = Path(root).expanduser()
        if not root_dir.is_dir():
            log.debug('Nothing to purge: %s does not exist', root_dir)
            return
        removed = 0
        for path in root_dir.glob(f'*{PARAMS_SUFFIX}'):
            if path.is_file():
                path.unlink(missing_ok=True)
                removed += 1
        log.info('Purged %d model file(s) from %s', removed, root_dir)
