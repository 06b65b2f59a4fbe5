"""Default store backend that simulates setup without touching any database."""

import logging
from typing import Any, Iterable, List, Sequence, Tuple

from vectorstore_node.exceptions import StoreSetupError
from vectorstore_node.model import StoreEntry

logger = logging.getLogger(__name__)


class SimulatedStoreBackend:
    """
    Store backend where every create and load succeeds.

    Entries whose key is in failing_keys raise StoreSetupError instead, which
    lets hosts and tests exercise partial failures. Calls are recorded as
    (action, key) tuples.
    """

    def __init__(self, failing_keys: Iterable[str] = ()):
        self.failing_keys = set(failing_keys)
        self.calls: List[Tuple[str, str]] = []

    def create(self, entry: StoreEntry, chunks: Sequence[Any]) -> None:
        self.calls.append(("create", entry.key))
        self._check(entry)
        logger.debug(f"Simulated create of {entry.store_type} store {entry.key} from {len(chunks)} chunk(s)")

    def load(self, entry: StoreEntry) -> None:
        self.calls.append(("load", entry.key))
        self._check(entry)
        logger.debug(f"Simulated load of {entry.store_type} store {entry.key}")

    def _check(self, entry: StoreEntry) -> None:
        if entry.key in self.failing_keys:
            raise StoreSetupError(f"Simulated failure for {entry.display_name}", key=entry.key)
