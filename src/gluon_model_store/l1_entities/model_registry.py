"""Pretrained model registry — model name to SHA-1 of its parameter file."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from gluon_model_store.l1_entities.errors import UnknownModelError

DEFAULT_ROOT = '~/.mxnet/models'
APACHE_REPO_URL = 'http://apache-mxnet.s3-accelerate.dualstack.amazonaws.com/'

SHORT_HASH_LEN = 8
PARAMS_SUFFIX = '.params'
ARCHIVE_SUFFIX = '.zip'

_MODEL_SHA1 = {
    'alexnet': '44335d1f0046b328243b32a26a4fbd62d9057b45',
    'densenet121': 'f27dbf2dbd5ce9a80b102d89c7483342cd33cb31',
    'densenet161': 'b6c8a95717e3e761bd88d145f4d0a214aaa515dc',
    'densenet169': '2603f878403c6aa5a71a124c4a3307143d6820e9',
    'densenet201': '1cdbc116bc3a1b65832b18cf53e1cb8e7da017eb',
    'inceptionv3': 'ed47ec45a937b656fcc94dabde85495bbef5ba1f',
    'mobilenet0.25': '9f83e440996887baf91a6aff1cccc1c903a64274',
    'mobilenet0.5': '8e9d539cc66aa5efa71c4b6af983b936ab8701c3',
    'mobilenet0.75': '529b2c7f4934e6cb851155b22c96c9ab0a7c4dc2',
    'mobilenet1.0': '6b8c5106c730e8750bcd82ceb75220a3351157cd',
    'mobilenetv2_1.0': '36da4ff1867abccd32b29592d79fc753bca5a215',
    'mobilenetv2_0.75': 'e2be7b72a79fe4a750d1dd415afedf01c3ea818d',
    'mobilenetv2_0.5': 'aabd26cd335379fcb72ae6c8fac45a70eab11785',
    'mobilenetv2_0.25': 'ae8f9392789b04822cbb1d98c27283fc5f8aa0a7',
    'resnet18_v1': 'a0666292f0a30ff61f857b0b66efc0228eb6a54b',
    'resnet34_v1': '48216ba99a8b1005d75c0f3a0c422301a0473233',
    'resnet50_v1': '0aee57f96768c0a2d5b23a6ec91eb08dfb0a45ce',
    'resnet101_v1': 'd988c13d6159779e907140a638c56f229634cb02',
    'resnet152_v1': '671c637a14387ab9e2654eafd0d493d86b1c8579',
    'resnet18_v2': 'a81db45fd7b7a2d12ab97cd88ef0a5ac48b8f657',
    'resnet34_v2': '9d6b80bbc35169de6b6edecffdd6047c56fdd322',
    'resnet50_v2': 'ecdde35339c1aadbec4f547857078e734a76fb49',
    'resnet101_v2': '18e93e4f48947e002547f50eabbcc9c83e516aa6',
    'resnet152_v2': 'f2695542de38cf7e71ed58f02893d82bb409415e',
    'squeezenet1.0': '264ba4970a0cc87a4f15c96e25246a1307caf523',
    'squeezenet1.1': '33ba0f93753c83d86e1eb397f38a667eaf2e9376',
    'vgg11': 'dd221b160977f36a53f464cb54648d227c707a05',
    'vgg11_bn': 'ee79a8098a91fbe05b7a973fed2017a6117723a8',
    'vgg13': '6bc5de58a05a5e2e7f493e2d75a580d83efde38c',
    'vgg13_bn': '7d97a06c3c7a1aecc88b6e7385c2b373a249e95e',
    'vgg16': '649467530119c0f78c4859999e264e7bf14471a9',
    'vgg16_bn': '6b9dbe6194e5bfed30fd7a7c9a71f7e5a276cb14',
    'vgg19': 'f713436691eee9a20d70a145ce0d53ed24bf7399',
    'vgg19_bn': '9730961c9cea43fd7eeefb00d792e386c45847d6',
}
MODEL_SHA1: Mapping[str, str] = MappingProxyType(_MODEL_SHA1)


def expected_hash(name: str, registry: Mapping[str, str] = MODEL_SHA1) -> str:
    """Full registered hash for *name*. Raises UnknownModelError if not registered."""
    try:
        return registry[name]
    except KeyError:
        raise UnknownModelError(f'Model {name!r} is not available in the model zoo') from None


def short_hash(name: str, registry: Mapping[str, str] = MODEL_SHA1) -> str:
    """First eight characters of the registered hash for *name*."""
    return expected_hash(name, registry)[:SHORT_HASH_LEN]


def model_file_stem(name: str, registry: Mapping[str, str] = MODEL_SHA1) -> str:
    """Cache file name without extension, e.g. ``resnet18_v1-a0666292``."""
    return f'{name}-{short_hash(name, registry)}'


def normalize_repo_url(repo_url: str) -> str:
    """Strip trailing slashes and append exactly one."""
    return repo_url.rstrip('/') + '/'


def download_url(repo_url: str, file_stem: str) -> str:
    return f'{normalize_repo_url(repo_url)}gluon/models/{file_stem}{ARCHIVE_SUFFIX}'
