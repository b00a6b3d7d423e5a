"""Store configuration defaults and environment overrides — lives in L4, not domain."""

from __future__ import annotations

import copy
import os
from collections.abc import Mapping

from gluon_model_store.l1_entities.config import StoreConfig
from gluon_model_store.l1_entities.model_registry import APACHE_REPO_URL, DEFAULT_ROOT

REPO_ENV_VAR = 'MXNET_GLUON_REPO'
HOME_ENV_VAR = 'MXNET_HOME'

STORE_CONFIG_DEFAULTS: dict = {
    'root': DEFAULT_ROOT,
    'repo_url': APACHE_REPO_URL,
    'timeout': 30.0,
}


def env_overrides(environ: Mapping[str, str]) -> dict:
    """Config keys set by ``MXNET_HOME`` / ``MXNET_GLUON_REPO``. Empty values are ignored."""
    overrides: dict = {}
    home = environ.get(HOME_ENV_VAR)
    if home:
        overrides['root'] = os.path.join(home, 'models')
    repo = environ.get(REPO_ENV_VAR)
    if repo:
        overrides['repo_url'] = repo
    return overrides


def build_store_config(
    raw: dict,
    environ: Mapping[str, str] | None = None,
    overrides: dict | None = None,
) -> StoreConfig:
    """Layer defaults, *raw* file data, environment, then explicit *overrides*; validate."""
    merged = copy.deepcopy(STORE_CONFIG_DEFAULTS)
    merged.update(raw)
    merged.update(env_overrides(os.environ if environ is None else environ))
    if overrides:
        merged.update({k: v for k, v in overrides.items() if v is not None})
    return StoreConfig.model_validate(merged)
