"""Tests for the module-level get_model_file / purge API."""

from __future__ import annotations

import hashlib
import io
import zipfile
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

import gluon_model_store
from gluon_model_store.l1_entities.errors import IntegrityError, UnknownModelError

_GET = 'gluon_model_store.l3_interface_adapters.gateways.http_downloader.requests.get'
_PATHS = 'gluon_model_store.l3_interface_adapters.gateways.yaml_config_loader.DEFAULT_CONFIG_PATHS'
_REGISTRY = 'gluon_model_store.l1_entities.model_registry._MODEL_SHA1'

WEIGHTS = b'resnet weights'
SHA1 = hashlib.sha1(WEIGHTS).hexdigest()  # noqa: S324
STEM = f'toynet-{SHA1[:8]}'


def _zip_bytes(name: str, data: bytes) -> bytes:
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, 'w') as zf:
        zf.writestr(name, data)
    return buf.getvalue()


def _response(body: bytes) -> MagicMock:
    resp = MagicMock()
    resp.__enter__.return_value = resp
    resp.__exit__.return_value = False
    resp.headers = {'Content-Length': str(len(body))}
    resp.iter_content.return_value = iter([body])
    return resp


@pytest.fixture(autouse=True)
def _isolated(tmp_path: Path, monkeypatch):
    monkeypatch.delenv('MXNET_GLUON_REPO', raising=False)
    monkeypatch.delenv('MXNET_HOME', raising=False)
    with patch(_PATHS, [tmp_path / 'no-config.yaml']), patch.dict(_REGISTRY, {'toynet': SHA1}):
        yield


class TestGetModelFile:
    def test_downloads_and_returns_verified_path(self, tmp_path: Path):
        root = tmp_path / 'models'
        with patch(_GET, return_value=_response(_zip_bytes(f'{STEM}.params', WEIGHTS))) as mock_get:
            path = gluon_model_store.get_model_file('toynet', root=root)
        assert path == root / f'{STEM}.params'
        assert path.read_bytes() == WEIGHTS
        assert not (root / f'{STEM}.zip').exists()
        url = mock_get.call_args.args[0]
        assert url == f'http://apache-mxnet.s3-accelerate.dualstack.amazonaws.com/gluon/models/{STEM}.zip'

    @pytest.mark.parametrize('override', ['http://mirror.local/repo', 'http://mirror.local/repo/'])
    def test_gluon_repo_override(self, override: str, tmp_path: Path, monkeypatch):
        monkeypatch.setenv('MXNET_GLUON_REPO', override)
        with patch(_GET, return_value=_response(_zip_bytes(f'{STEM}.params', WEIGHTS))) as mock_get:
            gluon_model_store.get_model_file('toynet', root=tmp_path)
        assert mock_get.call_args.args[0] == f'http://mirror.local/repo/gluon/models/{STEM}.zip'

    def test_mxnet_home_sets_default_root(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv('MXNET_HOME', str(tmp_path / 'mxhome'))
        with patch(_GET, return_value=_response(_zip_bytes(f'{STEM}.params', WEIGHTS))):
            path = gluon_model_store.get_model_file('toynet')
        assert path == tmp_path / 'mxhome' / 'models' / f'{STEM}.params'

    def test_cache_hit_skips_network(self, tmp_path: Path):
        (tmp_path / f'{STEM}.params').write_bytes(WEIGHTS)
        with patch(_GET) as mock_get:
            gluon_model_store.get_model_file('toynet', root=tmp_path)
        mock_get.assert_not_called()

    def test_bad_download_raises_integrity_error(self, tmp_path: Path):
        with (
            patch(_GET, return_value=_response(_zip_bytes(f'{STEM}.params', b'tampered'))),
            pytest.raises(IntegrityError),
        ):
            gluon_model_store.get_model_file('toynet', root=tmp_path)

    def test_unknown_model(self, tmp_path: Path):
        with patch(_GET) as mock_get, pytest.raises(UnknownModelError):
            gluon_model_store.get_model_file('nonesuch', root=tmp_path / 'models')
        mock_get.assert_not_called()
        assert not (tmp_path / 'models').exists()


class TestPurge:
    def test_purges_params_files(self, tmp_path: Path):
        (tmp_path / 'a.params').write_bytes(b'1')
        (tmp_path / 'keep.txt').write_bytes(b'2')
        gluon_model_store.purge(root=tmp_path)
        assert sorted(p.name for p in tmp_path.iterdir()) == ['keep.txt']

    def test_missing_root(self, tmp_path: Path):
        gluon_model_store.purge(root=tmp_path / 'nope')
