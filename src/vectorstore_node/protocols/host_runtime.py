"""Host runtime protocols for pluggable graph integration.

The surrounding graph editor supplies upstream data, persists node payloads
and wakes downstream nodes. The vectorstore node only talks to it through
these protocols, so any runtime can host it.
"""

from typing import Any, Mapping, Protocol, Sequence


class HostRuntime(Protocol):
    """Protocol for the graph runtime hosting a vectorstore node.

    Example:
        controller = VectorstoreNodeController(
            node_id="vs-1",
            host=my_graph_runtime,
            reporter=my_alert_modal,
        )
    """

    def pull_input_data(self, channels: Sequence[str], node_id: str) -> Mapping[str, Sequence[Any]]:
        """Pull data produced by upstream nodes connected to the given channels.

        Args:
            channels: Input channel names of this node
            node_id: Id of the node pulling the data

        Returns:
            Mapping from channel name to the items produced on it

        Raises:
            InputUnavailableError: If no producer is connected
        """
        ...

    def set_node_data(self, node_id: str, partial_payload: Mapping[str, Any]) -> None:
        """Merge the given fields into the node's persisted payload."""
        ...

    def notify_downstream(self, node_id: str) -> None:
        """Tell nodes connected to this node's output that new data is available."""
        ...


class AdvisoryReporter(Protocol):
    """Protocol for the host's user-facing alert channel."""

    def __call__(self, message: str) -> None:
        ...
