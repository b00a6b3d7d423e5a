"""Library entry points for model-construction code.

The container is rebuilt on every call so changes to ``MXNET_GLUON_REPO`` and
``MXNET_HOME`` take effect without re-importing the package.
"""

from __future__ import annotations

from pathlib import Path

from gluon_model_store.l3_interface_adapters.gateways.yaml_config_loader import YamlConfigLoader
from gluon_model_store.l4_frameworks_and_drivers.container import DependencyContainer
from gluon_model_store.l4_frameworks_and_drivers.infra_config import build_store_config


def _container(root: str | Path | None) -> DependencyContainer:
    raw = YamlConfigLoader().load_raw()
    config = build_store_config(raw, overrides={'root': None if root is None else str(root)})
    return DependencyContainer(config)


def get_model_file(name: str, root: str | Path | None = None) -> Path:
    """Return location for the pretrained model on the local file system.

    Downloads from the model zoo when the file is missing or its content does
    not match the registered hash. The root directory is created if needed.

    Parameters
    ----------
    name : str
        Name of the model.
    root : str or Path, optional
        Location for keeping the model parameters. Defaults to
        ``$MXNET_HOME/models`` or ``~/.mxnet/models``.
    """
    container = _container(root)
    return container.model_resolver.resolve(name, container.config.root)


def purge(root: str | Path | None = None) -> None:
    """Purge all pretrained model files in the local file store."""
    container = _container(root)
    container.model_cache.purge(container.config.root)
