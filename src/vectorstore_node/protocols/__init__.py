"""
Protocol definitions and configuration.

Narrow contracts for the host runtime, the advisory channel and store
backends, plus the global node configuration.
"""

from .host_runtime import HostRuntime, AdvisoryReporter
from .store_backend import StoreBackend
from .node_config import NodeConfig, set_node_config, get_node_config

__all__ = [
    "HostRuntime",
    "AdvisoryReporter",
    "StoreBackend",
    "NodeConfig",
    "set_node_config",
    "get_node_config",
]
