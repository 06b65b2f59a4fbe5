"""
Setup run for a vectorstore node.

The run is split into three phases so the backend work can move off the UI
thread:

1. prepare()        guard checks, LOADING, upstream pull (caller thread)
2. setup_entries()  per-entry backend create/load, no shared state touched
3. finish()         apply statuses, persist list + output, notify, READY/ERROR

run_setup() executes all three in sequence. Every path that enters
LOADING leaves it again through ERROR or READY.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

from vectorstore_node.exceptions import InputUnavailableError
from vectorstore_node.model import EntryStatus, OutputDescriptor, StoreEntry, StoreListModel, StoreMode
from vectorstore_node.protocols import AdvisoryReporter, HostRuntime, NodeConfig, StoreBackend, get_node_config
from vectorstore_node.services.simulated_backend import SimulatedStoreBackend
from vectorstore_node.services.status_controller import StatusController

logger = logging.getLogger(__name__)

NO_STORES_MESSAGE = "No vectorstores configured!"
EMPTY_CHUNKS_MESSAGE = "No chunks found. Connect a ChunkingNode for 'create' mode."
NO_INPUT_MESSAGE = "No input chunks found. Is ChunkingNode connected?"
CHANGED_DURING_SETUP_MESSAGE = "Vectorstores were edited during setup. Run setup again."
PUBLISH_FAILED_MESSAGE = "Could not publish vectorstores:"


class SetupOutcome(Enum):
    """How a setup run ended."""
    SKIPPED = "skipped"              # Empty list, status untouched
    REJECTED = "rejected"            # Another run already in flight
    MISSING_INPUT = "missing_input"  # Create-mode entries without chunks
    READY = "ready"                  # Every entry set up
    PARTIAL = "partial"              # Some entries failed
    DISCARDED = "discarded"          # Node torn down before results applied
    STALE = "stale"                  # Entries edited while the run was in flight
    PUBLISH_FAILED = "publish_failed"  # Host rejected the result write or notify


@dataclass(frozen=True)
class SetupPlan:
    """Snapshot of what a run works on, taken when the run starts."""
    entries: Tuple[StoreEntry, ...]
    chunks: Tuple[Any, ...] = ()


@dataclass
class SetupResult:
    outcome: SetupOutcome
    descriptors: List[OutputDescriptor] = field(default_factory=list)
    failed_keys: List[str] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.outcome is SetupOutcome.READY


class SetupOrchestrator:
    """
    Validates preconditions, sets up every entry and publishes the output.

    Usage:
        orchestrator = SetupOrchestrator(
            node_id="vs-1",
            model=model,
            status=status,
            host=host,
            reporter=show_alert,
        )
        result = orchestrator.run_setup()
    """

    def __init__(
        self,
        node_id: str,
        model: StoreListModel,
        status: StatusController,
        host: HostRuntime,
        reporter: AdvisoryReporter,
        backend: Optional[StoreBackend] = None,
        config: Optional[NodeConfig] = None,
    ):
        self.node_id = node_id
        self.model = model
        self.status = status
        self.host = host
        self.reporter = reporter
        self.backend = backend if backend is not None else SimulatedStoreBackend()
        self.config = config or get_node_config()
        self.last_result: Optional[SetupResult] = None
        self._disposed = False

    @property
    def disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        """Mark the node as torn down. Pending results are dropped in finish()."""
        self._disposed = True

    def run_setup(self) -> SetupResult:
        """Run all three phases on the calling thread."""
        plan = self.prepare()
        if plan is None:
            return self.last_result
        statuses = self.setup_entries(plan)
        return self.finish(plan, statuses)

    # ========== PHASE 1 ==========

    def prepare(self) -> Optional[SetupPlan]:
        """
        Check preconditions and pull upstream chunks.

        Returns:
            SetupPlan to continue with, or None if the run ended here
            (see last_result for why)
        """
        if self.status.is_running:
            logger.warning(f"Setup for node {self.node_id} already running, rejecting new run")
            self._end(SetupOutcome.REJECTED)
            return None

        entries = self.model.entries
        if not entries:
            self.reporter(NO_STORES_MESSAGE)
            self._end(SetupOutcome.SKIPPED)
            return None

        self.status.begin_run()

        chunks: Tuple[Any, ...] = ()
        if self.model.has_create_mode():
            chunks = self._pull_chunks()
            if chunks is None:
                self.status.fail_run()
                self._end(SetupOutcome.MISSING_INPUT)
                return None

        return SetupPlan(entries=entries, chunks=chunks)

    def _pull_chunks(self) -> Optional[Tuple[Any, ...]]:
        channel = self.config.input_channel
        try:
            input_data = self.host.pull_input_data([channel], self.node_id)
            chunks = tuple((input_data or {}).get(channel) or ())
        except InputUnavailableError as e:
            logger.info(f"No upstream producer for '{channel}' on node {self.node_id}: {e}")
            self._report(NO_INPUT_MESSAGE)
            return None
        except Exception:
            logger.exception(f"Pulling '{channel}' for node {self.node_id} failed")
            self._report(NO_INPUT_MESSAGE)
            return None

        if not chunks:
            self._report(EMPTY_CHUNKS_MESSAGE)
            return None
        logger.debug(f"Pulled {len(chunks)} chunk(s) for node {self.node_id}")
        return chunks

    # ========== PHASE 2 ==========

    def setup_entries(self, plan: SetupPlan) -> Dict[str, EntryStatus]:
        """
        Create or load every entry of the plan independently.

        Only reads the plan, so it may run on a worker thread.

        Returns:
            Status per entry key (READY or ERROR)
        """
        statuses: Dict[str, EntryStatus] = {}
        for entry in plan.entries:
            try:
                if entry.mode is StoreMode.CREATE:
                    self.backend.create(entry, plan.chunks)
                else:
                    self.backend.load(entry)
            except Exception:
                logger.exception(f"Setting up {entry.store_type} store {entry.key} failed")
                statuses[entry.key] = EntryStatus.ERROR
            else:
                statuses[entry.key] = EntryStatus.READY
        return statuses

    # ========== PHASE 3 ==========

    def finish(self, plan: SetupPlan, statuses: Mapping[str, EntryStatus]) -> SetupResult:
        """Apply statuses, persist list and output together, notify downstream."""
        if self._disposed:
            logger.info(f"Node {self.node_id} torn down, discarding setup results")
            return self._end(SetupOutcome.DISCARDED)

        if self._changed_since(plan):
            logger.info(f"Stores of node {self.node_id} edited during setup, not publishing")
            self.status.fail_run()
            self._report(CHANGED_DURING_SETUP_MESSAGE)
            return self._end(SetupOutcome.STALE)

        entries = self.model.apply_statuses(statuses)
        present = {entry.key for entry in entries}
        descriptors = [
            OutputDescriptor.from_entry(entry)
            for entry in plan.entries
            if entry.key in present and statuses.get(entry.key) is EntryStatus.READY
        ]
        failed = [entry for entry in plan.entries if statuses.get(entry.key) is not EntryStatus.READY]

        try:
            self.host.set_node_data(self.node_id, {
                "stores": self.model.to_payload(),
                self.config.output_channel: [descriptor.to_dict() for descriptor in descriptors],
            })
            self.host.notify_downstream(self.node_id)
        except Exception as e:
            logger.exception(f"Publishing setup results for node {self.node_id} failed")
            self.status.fail_run()
            self._report(f"{PUBLISH_FAILED_MESSAGE} {e}")
            return self._end(SetupOutcome.PUBLISH_FAILED, failed_keys=[entry.key for entry in failed])

        if failed:
            self.status.fail_run()
            names = ", ".join(entry.display_name for entry in failed)
            self._report(f"{len(failed)} vectorstore(s) failed to set up: {names}")
            outcome = SetupOutcome.PARTIAL
        else:
            self.status.complete_run()
            outcome = SetupOutcome.READY

        logger.info(f"Setup for node {self.node_id} finished: {len(descriptors)} ready, {len(failed)} failed")
        return self._end(outcome, descriptors, [entry.key for entry in failed])

    def _changed_since(self, plan: SetupPlan) -> bool:
        """True if entries were added or edited after the plan was taken.

        Removed entries do not count; they are simply left out of the output.
        """
        planned = {entry.key: entry for entry in plan.entries}
        for entry in self.model.entries:
            before = planned.get(entry.key)
            if before is None or before.with_status(entry.status) != entry:
                return True
        return False

    def _report(self, message: str) -> None:
        """Send an advisory once status no longer depends on it."""
        try:
            self.reporter(message)
        except Exception:
            logger.exception(f"Advisory reporter failed for node {self.node_id}: {message}")

    def _end(self, outcome: SetupOutcome, descriptors=None, failed_keys=None) -> SetupResult:
        self.last_result = SetupResult(outcome, list(descriptors or []), list(failed_keys or []))
        return self.last_result
