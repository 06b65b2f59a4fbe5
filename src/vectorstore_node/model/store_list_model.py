"""
Ordered list of store entries for one node.

Every mutation replaces the whole sequence and then notifies observers
synchronously with (new_entries, old_entries). Unknown keys and unknown
store types are no-ops: the sequence object is left untouched and no
observer is called.
"""

import logging
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from vectorstore_node.model.store_entry import EntryStatus, StoreEntry, StoreMode, new_key
from vectorstore_node.protocols import NodeConfig, get_node_config
from vectorstore_node.registry import StoreRegistry

logger = logging.getLogger(__name__)

Entries = Tuple[StoreEntry, ...]
ChangeObserver = Callable[[Entries, Entries], None]


class StoreListModel:
    """
    Store entries of one vectorstore node.

    Usage:
        model = StoreListModel(StoreRegistry.default())
        model.add_observer(lambda new, old: persist(new))

        entry = model.add("faiss")
        model.update_settings(entry.key, {"store_path": "/data/ix"})
        model.toggle_mode(entry.key)
        model.remove(entry.key)
    """

    def __init__(
        self,
        registry: StoreRegistry,
        entries: Sequence[StoreEntry] = (),
        config: Optional[NodeConfig] = None,
    ):
        self._registry = registry
        self._config = config or get_node_config()
        self._entries: Entries = tuple(entries)
        self._observers: List[ChangeObserver] = []

    @classmethod
    def from_payload(
        cls,
        payload: Optional[Mapping[str, Any]],
        registry: StoreRegistry,
        config: Optional[NodeConfig] = None,
    ) -> 'StoreListModel':
        """Seed a model from a node's persisted payload.

        Rows that cannot be read and rows repeating an earlier key are
        dropped with a warning, so the seeded list keeps keys unique.
        """
        stored = (payload or {}).get("stores") or []
        entries: List[StoreEntry] = []
        seen = set()
        for index, item in enumerate(stored):
            try:
                entry = StoreEntry.from_dict(item)
            except (KeyError, ValueError, TypeError, AttributeError) as e:
                logger.warning(f"Skipping unreadable stored vectorstore #{index}: {e!r}")
                continue
            if entry.key in seen:
                logger.warning(f"Skipping stored vectorstore #{index} with duplicate key '{entry.key}'")
                continue
            seen.add(entry.key)
            entries.append(entry)
        return cls(registry, entries, config=config)

    # ========== READ ACCESS ==========

    @property
    def entries(self) -> Entries:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[StoreEntry]:
        return iter(self._entries)

    def get(self, key: str) -> Optional[StoreEntry]:
        for entry in self._entries:
            if entry.key == key:
                return entry
        return None

    def keys(self) -> List[str]:
        return [entry.key for entry in self._entries]

    def has_create_mode(self) -> bool:
        return any(entry.mode is StoreMode.CREATE for entry in self._entries)

    def to_payload(self) -> List[Dict[str, Any]]:
        return [entry.to_dict() for entry in self._entries]

    # ========== OBSERVERS ==========

    def add_observer(self, observer: ChangeObserver) -> None:
        self._observers.append(observer)

    def remove_observer(self, observer: ChangeObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def _commit(self, new_entries: Entries) -> None:
        old_entries = self._entries
        self._entries = new_entries
        logger.debug(f"Store list changed: {len(old_entries)} -> {len(new_entries)} entries, "
                     f"notifying {len(self._observers)} observer(s)")
        for observer in list(self._observers):
            observer(new_entries, old_entries)

    # ========== MUTATIONS ==========

    def add(self, store_type: str) -> Optional[StoreEntry]:
        """Append a fresh entry of the given type. Returns None if the type is unknown."""
        info = self._registry.schema_for(store_type)
        if info is None:
            logger.debug(f"add: ignoring unknown store type '{store_type}'")
            return None

        entry = StoreEntry(
            key=new_key(),
            store_type=info.store_type,
            display_name=info.display_name,
            emoji=info.emoji,
            settings={},
            mode=StoreMode(self._config.default_mode),
            status=EntryStatus.NONE,
        )
        self._commit(self._entries + (entry,))
        return entry

    def remove(self, key: str) -> None:
        if self.get(key) is None:
            logger.debug(f"remove: no entry with key '{key}'")
            return
        self._commit(tuple(entry for entry in self._entries if entry.key != key))

    def update_settings(self, key: str, new_settings: Mapping[str, Any]) -> None:
        self._replace_entry(key, lambda entry: entry.with_settings(new_settings), "update_settings")

    def toggle_mode(self, key: str) -> None:
        self._replace_entry(key, lambda entry: entry.with_mode(entry.mode.toggled()), "toggle_mode")

    def _replace_entry(self, key: str, transform: Callable[[StoreEntry], StoreEntry], op_name: str) -> None:
        if self.get(key) is None:
            logger.debug(f"{op_name}: no entry with key '{key}'")
            return
        self._commit(tuple(
            transform(entry) if entry.key == key else entry
            for entry in self._entries
        ))

    def apply_statuses(self, statuses: Mapping[str, EntryStatus]) -> Entries:
        """
        Replace per-entry statuses without notifying observers.

        Used by the setup run, which persists the list together with the
        output descriptors in a single write. Keys not in the list are ignored.
        """
        self._entries = tuple(
            entry.with_status(statuses[entry.key]) if entry.key in statuses else entry
            for entry in self._entries
        )
        return self._entries
