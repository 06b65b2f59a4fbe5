"""
vectorstore-node: configurable vectorstore setup node for visual pipelines.

One node holds an ordered list of independently configured vectorstores,
each built from upstream chunks or loaded from an existing store, and a
one-shot setup run that publishes normalized store descriptors downstream.

Architecture:
- Tier 1 (Core): PyQt6 background execution of the setup run
- Tier 2 (Protocols): Host runtime, advisory and backend contracts; config
- Tier 3 (Registry/Model): Store type schemas, entries and the list model
- Tier 4 (Services): Status machine, setup orchestration, node controller
- Tier 5 (Widgets): Status indicator with run button

Key Features:
- Immutable entries with observer notification on every list change
- Status machine that flags output as outdated after edits
- Independent per-entry setup with partial-failure reporting
- Schema validation of store settings via jsonschema
"""

__version__ = "0.1.0"

from .exceptions import (
    VectorstoreNodeError,
    InputUnavailableError,
    UnknownStoreTypeError,
    StoreSetupError,
)
from .registry import StoreRegistry, StoreTypeInfo
from .model import StoreEntry, StoreMode, EntryStatus, OutputDescriptor, StoreListModel
from .services import (
    NodeStatus,
    StatusController,
    SetupOrchestrator,
    SetupOutcome,
    SetupResult,
    SimulatedStoreBackend,
    VectorstoreNodeController,
)

__all__ = [
    "__version__",
    "VectorstoreNodeError",
    "InputUnavailableError",
    "UnknownStoreTypeError",
    "StoreSetupError",
    "StoreRegistry",
    "StoreTypeInfo",
    "StoreEntry",
    "StoreMode",
    "EntryStatus",
    "OutputDescriptor",
    "StoreListModel",
    "NodeStatus",
    "StatusController",
    "SetupOrchestrator",
    "SetupOutcome",
    "SetupResult",
    "SimulatedStoreBackend",
    "VectorstoreNodeController",
]
