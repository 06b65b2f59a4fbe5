"""
Service layer for vectorstore nodes.

Status machine, setup run, simulated backend and the per-node controller
that wires them to a host runtime.
"""

from .status_controller import StatusController, NodeStatus
from .simulated_backend import SimulatedStoreBackend
from .setup_orchestrator import (
    SetupOrchestrator,
    SetupOutcome,
    SetupPlan,
    SetupResult,
    NO_STORES_MESSAGE,
    EMPTY_CHUNKS_MESSAGE,
    NO_INPUT_MESSAGE,
    CHANGED_DURING_SETUP_MESSAGE,
    PUBLISH_FAILED_MESSAGE,
)
from .node_controller import VectorstoreNodeController

__all__ = [
    "StatusController",
    "NodeStatus",
    "SimulatedStoreBackend",
    "SetupOrchestrator",
    "SetupOutcome",
    "SetupPlan",
    "SetupResult",
    "NO_STORES_MESSAGE",
    "EMPTY_CHUNKS_MESSAGE",
    "NO_INPUT_MESSAGE",
    "CHANGED_DURING_SETUP_MESSAGE",
    "PUBLISH_FAILED_MESSAGE",
    "VectorstoreNodeController",
]
