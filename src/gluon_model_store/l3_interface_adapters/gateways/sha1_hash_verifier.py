"""Gateway: SHA-1 file hashing — implements HashVerifier port."""

from __future__ import annotations

import hashlib
from pathlib import Path

_CHUNK_SIZE = 1 << 20


class Sha1HashVerifier:
    def content_hash(self, path: Path) -> str:
        sha1 = hashlib.sha1()  # noqa: S324 -- content fingerprint, not security
        with Path(path).open('rb') as f:
            for chunk in iter(lambda: f.read(_CHUNK_SIZE), b''):
                sha1.update(chunk)
        return sha1.hexdigest()

    def verify(self, path: Path, expected: str) -> bool:
        return self.content_hash(path) == expected.lower()
