"""Composition root for one vectorstore node."""

import logging
from typing import Any, Mapping, Optional

from vectorstore_node.model import StoreListModel
from vectorstore_node.protocols import AdvisoryReporter, HostRuntime, NodeConfig, StoreBackend, get_node_config
from vectorstore_node.registry import StoreRegistry
from vectorstore_node.services.setup_orchestrator import SetupOrchestrator, SetupResult
from vectorstore_node.services.status_controller import NodeStatus, StatusController

logger = logging.getLogger(__name__)


class VectorstoreNodeController:
    """
    Wires the store list, status machine and setup run of one node to its host.

    - List edits are persisted under 'stores' and downgrade READY to WARNING.
    - handle_refresh() resets the status and clears the host's refresh flag.
    - dispose() detaches from the host; in-flight results are dropped.

    Usage:
        controller = VectorstoreNodeController("vs-1", host, show_alert, payload=node.data)
        controller.model.add("faiss")
        controller.run_setup()
    """

    def __init__(
        self,
        node_id: str,
        host: HostRuntime,
        reporter: AdvisoryReporter,
        registry: Optional[StoreRegistry] = None,
        backend: Optional[StoreBackend] = None,
        payload: Optional[Mapping[str, Any]] = None,
        config: Optional[NodeConfig] = None,
    ):
        self.node_id = node_id
        self.host = host
        self.config = config or get_node_config()
        self.registry = registry or StoreRegistry.default()
        self.model = StoreListModel.from_payload(payload, self.registry, config=self.config)
        self.status = StatusController()
        self.orchestrator = SetupOrchestrator(
            node_id=node_id,
            model=self.model,
            status=self.status,
            host=host,
            reporter=reporter,
            backend=backend,
            config=self.config,
        )
        self._title = (payload or {}).get("title")

        self.model.add_observer(self._on_entries_changed)
        logger.debug(f"Mounted vectorstore node {node_id} with {len(self.model)} store(s)")

        if (payload or {}).get("refresh"):
            self.handle_refresh()

    @property
    def title(self) -> str:
        return self._title or self.config.node_title

    @property
    def icon(self) -> Optional[str]:
        return self.config.node_icon

    @property
    def current_status(self) -> NodeStatus:
        return self.status.status

    def _on_entries_changed(self, new_entries, old_entries) -> None:
        self.host.set_node_data(self.node_id, {"stores": [entry.to_dict() for entry in new_entries]})
        self.status.on_list_changed(new_entries, old_entries)

    def handle_refresh(self) -> None:
        """Host asked the node to refresh: clear the flag once and reset status."""
        self.host.set_node_data(self.node_id, {"refresh": False})
        self.status.reset()

    def run_setup(self) -> SetupResult:
        return self.orchestrator.run_setup()

    def dispose(self) -> None:
        """Detach from the host when the node is removed from the graph."""
        self.model.remove_observer(self._on_entries_changed)
        self.orchestrator.dispose()
        logger.debug(f"Disposed vectorstore node {self.node_id}")
