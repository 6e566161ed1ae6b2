"""Chain clients."""

from .pharos import PharosChainConfig, PharosChains, PharosClient

__all__ = [
    "PharosChainConfig",
    "PharosChains",
    "PharosClient",
]
