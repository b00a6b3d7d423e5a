"""Port: unpack a model archive."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class Archiver(Protocol):
    """Abstract archiver — extracts the parameter file of an archive."""

    def extract(self, archive_path: Path, target_path: Path) -> Path:
        """Extract the parameter entry of *archive_path* so it ends up at *target_path*."""
        ...
