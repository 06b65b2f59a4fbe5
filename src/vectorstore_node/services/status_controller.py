"""Aggregate run status of a vectorstore node."""

import logging
from enum import Enum
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)


class NodeStatus(Enum):
    """Node-level status shown by the host's indicator."""
    NONE = "none"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"
    WARNING = "warning"  # Was ready, configuration edited since

    @property
    def default_message(self) -> Optional[str]:
        return _STATUS_MESSAGES.get(self)


_STATUS_MESSAGES = {
    NodeStatus.LOADING: "Setting up...",
    NodeStatus.READY: "Ready",
    NodeStatus.ERROR: "Setup failed",
    NodeStatus.WARNING: "Outdated, re-run setup",
}

StatusListener = Callable[[NodeStatus, NodeStatus], None]


class StatusController:
    """
    State machine for the node status.

    Transitions:
        reset()            any     -> NONE
        begin_run()        any     -> LOADING
        fail_run()         any     -> ERROR
        complete_run()     any     -> READY
        on_list_changed()  READY   -> WARNING (other states unchanged)

    Listeners get (new_status, old_status) on every actual change.
    """

    def __init__(self, initial: NodeStatus = NodeStatus.NONE):
        self._status = initial
        self._listeners: List[StatusListener] = []

    @property
    def status(self) -> NodeStatus:
        return self._status

    @property
    def is_running(self) -> bool:
        """True while a setup run is in flight."""
        return self._status is NodeStatus.LOADING

    def add_listener(self, listener: StatusListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: StatusListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def reset(self) -> None:
        self._set(NodeStatus.NONE)

    def begin_run(self) -> None:
        self._set(NodeStatus.LOADING)

    def fail_run(self) -> None:
        self._set(NodeStatus.ERROR)

    def complete_run(self) -> None:
        self._set(NodeStatus.READY)

    def on_list_changed(self, new_entries=None, old_entries=None) -> None:
        """Observer hook for the store list model."""
        if self._status is NodeStatus.READY:
            self._set(NodeStatus.WARNING)

    def _set(self, status: NodeStatus) -> None:
        old = self._status
        if status is old:
            return
        self._status = status
        logger.info(f"Node status: {old.value} -> {status.value}")
        for listener in list(self._listeners):
            listener(status, old)
