"""Port: fetch a remote archive to a local file."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class Downloader(Protocol):
    """Abstract downloader — writes the body of *url* to *path*."""

    def download(self, url: str, path: Path, *, overwrite: bool = True) -> Path:
        """Fetch *url* into *path*, replacing an existing file when *overwrite* is set. Raises on failure."""
        ...
