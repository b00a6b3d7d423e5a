"""gluon-model-store -- local cache of pretrained Gluon model weights."""

__version__ = '0.1.0'

from gluon_model_store.l1_entities.errors import (  # noqa: E402
    ArchiveError,
    DownloadError,
    IntegrityError,
    ModelStoreError,
    UnknownModelError,
)
from gluon_model_store.l4_frameworks_and_drivers.model_store import get_model_file, purge  # noqa: E402

__all__ = [
    'ArchiveError',
    'DownloadError',
    'IntegrityError',
    'ModelStoreError',
    'UnknownModelError',
    '__version__',
    'get_model_file',
    'purge',
]
