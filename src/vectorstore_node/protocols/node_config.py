"""Base configuration for vectorstore nodes.

Provides hooks for host applications to customize channel names and node
presentation without subclassing the controller.
"""

from typing import Optional
from dataclasses import dataclass


@dataclass
class NodeConfig:
    """Configuration for vectorstore node behavior.

    Applications can subclass this to provide custom configuration.

    Attributes:
        input_channel: Upstream channel pulled for create-mode entries
        output_channel: Payload field holding the published descriptors
        default_mode: Mode assigned to newly added entries
        node_title: Title shown when the node has no custom title
        node_icon: Icon shown next to the title
        cleanup_wait_ms: Wait time when the node is torn down
    """

    input_channel: str = "chunks"
    output_channel: str = "vectorstores"
    default_mode: str = "create"
    node_title: str = "Vectorstore Node"
    node_icon: Optional[str] = "\U0001F5C4\uFE0F"
    cleanup_wait_ms: int = 200


# Global config instance (set by application)
_node_config: Optional[NodeConfig] = None


def set_node_config(config: Optional[NodeConfig]) -> None:
    """Set the global vectorstore node configuration.

    Args:
        config: NodeConfig instance, or None to restore defaults
    """
    global _node_config
    _node_config = config


def get_node_config() -> NodeConfig:
    """Get the current vectorstore node configuration.

    Returns:
        Current NodeConfig or default if not set
    """
    if _node_config is None:
        return NodeConfig()
    return _node_config
