"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

import hashlib
import shutil
from pathlib import Path

import pytest

from gluon_model_store.l1_entities.errors import DownloadError
from gluon_model_store.l2_use_cases.model_cache_use_case import ModelCache
from gluon_model_store.l3_interface_adapters.gateways.sha1_hash_verifier import Sha1HashVerifier

GOOD_WEIGHTS = b'pretrained weights v1'
BAD_WEIGHTS = b'truncated garbage'

TINY_SHA1 = hashlib.sha1(GOOD_WEIGHTS).hexdigest()  # noqa: S324
TEST_REGISTRY = {
    'tinynet': TINY_SHA1,
    'othernet': hashlib.sha1(b'other weights').hexdigest(),  # noqa: S324
}
TEST_REPO = 'http://models.example.com/'


# --- Protocol-conforming Fakes ---


class FakeDownloader:
    """Fake downloader — "downloads" a fixed payload and records every call."""

    def __init__(self, payload: bytes = GOOD_WEIGHTS, error: Exception | None = None) -> None:
        self.payload = payload
        self.error = error
        self.calls: list[tuple[str, Path, bool]] = []

    def download(self, url: str, path: Path, *, overwrite: bool = True) -> Path:
        self.calls.append((url, path, overwrite))
        if self.error is not None:
            raise self.error
        path.write_bytes(self.payload)
        return path


class FakeArchiver:
    """Fake archiver — treats the archive as the raw parameter file."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.calls: list[tuple[Path, Path]] = []

    def extract(self, archive_path: Path, target_path: Path) -> Path:
        self.calls.append((archive_path, target_path))
        if self.error is not None:
            raise self.error
        shutil.copyfile(archive_path, target_path)
        return target_path


# --- Standard Fixtures ---


@pytest.fixture
def fake_downloader() -> FakeDownloader:
    return FakeDownloader()


@pytest.fixture
def fake_archiver() -> FakeArchiver:
    return FakeArchiver()


@pytest.fixture
def cache_root(tmp_path: Path) -> Path:
    return tmp_path / 'models'


@pytest.fixture
def model_cache(fake_downloader: FakeDownloader, fake_archiver: FakeArchiver) -> ModelCache:
    return ModelCache(
        downloader=fake_downloader,
        archiver=fake_archiver,
        verifier=Sha1HashVerifier(),
        repo_url=TEST_REPO,
        registry=TEST_REGISTRY,
    )


@pytest.fixture
def network_error() -> DownloadError:
    return DownloadError('Failed to download: connection refused')
