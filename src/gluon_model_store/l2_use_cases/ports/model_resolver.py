"""Port: pretrained model resolution."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class ModelResolver(Protocol):
    """Abstract model resolver — maps model name to local file path."""

    def resolve(self, name: str, root: str | Path = ...) -> Path:
        """Resolve a model name to a verified local path. Raises on failure."""
        ...
