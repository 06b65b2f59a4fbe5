"""
Node widgets.

Qt presentation of the node status.
"""

from .status_indicator import (
    NodeStatusIndicator,
    get_status_color,
    get_entry_status_color,
    RUN_BUTTON_TOOLTIP,
)

__all__ = [
    "NodeStatusIndicator",
    "get_status_color",
    "get_entry_status_color",
    "RUN_BUTTON_TOOLTIP",
]
