"""Configuration Pydantic models — pure schema, no infrastructure defaults."""

from __future__ import annotations

from pydantic import BaseModel, Field


class StoreConfig(BaseModel):
    root: str
    repo_url: str
    timeout: float = Field(gt=0)
