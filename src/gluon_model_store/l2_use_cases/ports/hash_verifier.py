"""Port: content hashing."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class HashVerifier(Protocol):
    def content_hash(self, path: Path) -> str:
        """Hex digest of the file at *path*."""
        ...

    def verify(self, path: Path, expected: str) -> bool:
        """True when the digest of *path* equals *expected*."""
        ...
