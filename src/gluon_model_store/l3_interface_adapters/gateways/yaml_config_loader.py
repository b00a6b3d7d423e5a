"""Gateway: YAML configuration loader."""

from __future__ import annotations

from pathlib import Path

import yaml

from gluon_model_store.l3_interface_adapters.gateways.paths import DEFAULT_CONFIG_PATHS


class YamlConfigLoader:
    """Reads the store config file, falling back to the per-user default location."""

    def load_raw(self, config_path: str | None = None) -> dict:
        """Return the YAML data as a raw dict (before Pydantic validation)."""
        if config_path is not None:
            path = Path(config_path)
            if not path.exists():
                raise FileNotFoundError(f'Config file not found: {path}')
            return _read_yaml(path)
        for default_path in DEFAULT_CONFIG_PATHS:
            if default_path.exists():
                return _read_yaml(default_path)
        return {}


def _read_yaml(path: Path) -> dict:
    try:
        data = yaml.safe_load(path.read_text(encoding='utf-8')) or {}
    except yaml.YAMLError as e:
        raise ValueError(f'Config file {path} is not valid YAML: {e}') from e
    if not isinstance(data, dict):
        raise ValueError(f'Config file {path} must contain a mapping, got {type(data).__name__}')
    return data
