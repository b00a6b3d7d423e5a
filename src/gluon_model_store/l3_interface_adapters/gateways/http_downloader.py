"""Gateway: HTTP downloader — implements Downloader port."""

from __future__ import annotations

import logging
import os
import uuid
from collections.abc import Callable
from pathlib import Path

import requests

from gluon_model_store.l1_entities.errors import DownloadError

log = logging.getLogger('gms.download')

DEFAULT_TIMEOUT = 30.0
DEFAULT_CHUNK_SIZE = 1 << 20


class _ProgressReporter:
    """Turns byte counts into whole-percent callbacks, skipping repeats."""

    def __init__(self, callback: Callable[[int], None], total: int) -> None:
        self._callback = callback
        self.total = total
        self.n = 0
        self._last = -1
        if self.total > 0:
            self._emit(0)

    def update(self, n: int) -> None:
        self.n += n
        if self.total > 0:
            self._emit(min(int(self.n / self.total * 100), 100))

    def _emit(self, percent: int) -> None:
        if percent != self._last:
            self._last = percent
            self._callback(percent)


class HttpDownloader:
    """Streams a URL to disk through a unique ``.part`` sibling, then moves it into place."""

    def __init__(
        self,
        on_progress: Callable[[int], None] | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        self._on_progress = on_progress
        self._timeout = timeout
        self._chunk_size = chunk_size

    def download(self, url: str, path: Path, *, overwrite: bool = True) -> Path:
        path = Path(path)
        if path.exists() and not overwrite:
            log.debug('Keeping existing %s', path)
            return path

        path.parent.mkdir(parents=True, exist_ok=True)
        # One partial file per writer.
        part_path = path.with_name(f'{path.name}.{uuid.uuid4().hex[:12]}.part')
        log.debug('Downloading %s → %s', url, path)
        try:
            with requests.get(url, stream=True, timeout=self._timeout) as resp:
                resp.raise_for_status()
                total = int(resp.headers.get('Content-Length') or 0)
                reporter = _ProgressReporter(self._on_progress, total) if self._on_progress else None
                with part_path.open('wb') as f:
                    for chunk in resp.iter_content(chunk_size=self._chunk_size):
                        if not chunk:
                            continue
                        f.write(chunk)
                        if reporter is not None:
                            reporter.update(len(chunk))
            os.replace(part_path, path)
        except (requests.RequestException, OSError) as e:
            part_path.unlink(missing_ok=True)
            raise DownloadError(f'Failed to download {url}: {e}') from e
        log.debug('Saved %d bytes to %s', path.stat().st_size, path)
        return path
