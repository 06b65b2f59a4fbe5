"""Store entries and the output descriptors derived from them."""

import uuid
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Mapping, Optional


class StoreMode(Enum):
    """How an entry is set up on run."""
    CREATE = "create"  # Build from upstream chunks
    LOAD = "load"      # Attach to an existing store

    def toggled(self) -> 'StoreMode':
        return StoreMode.LOAD if self is StoreMode.CREATE else StoreMode.CREATE


class EntryStatus(Enum):
    """Per-entry feedback shown next to each store."""
    NONE = "none"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


def new_key() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class StoreEntry:
    """
    One configured vectorstore.

    Entries are immutable. Every edit produces a new entry through one of
    the with_* helpers, keeping the key, store type and display metadata.
    """
    key: str
    store_type: str
    display_name: str
    emoji: Optional[str] = None
    settings: Mapping[str, Any] = field(default_factory=dict)
    mode: StoreMode = StoreMode.CREATE
    status: EntryStatus = EntryStatus.NONE

    def with_settings(self, settings: Mapping[str, Any]) -> 'StoreEntry':
        return replace(self, settings=dict(settings))

    def with_mode(self, mode: StoreMode) -> 'StoreEntry':
        return replace(self, mode=mode)

    def with_status(self, status: EntryStatus) -> 'StoreEntry':
        return replace(self, status=status)

    def to_dict(self) -> Dict[str, Any]:
        """Persisted form, as stored under the node's 'stores' field."""
        return {
            "key": self.key,
            "storeType": self.store_type,
            "name": self.display_name,
            "emoji": self.emoji,
            "settings": dict(self.settings),
            "mode": self.mode.value,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'StoreEntry':
        """Rebuild an entry from its persisted form.

        Missing settings, mode and status fall back to the values a fresh
        entry would have.
        """
        return cls(
            key=data["key"],
            store_type=data["storeType"],
            display_name=data.get("name") or data["storeType"],
            emoji=data.get("emoji"),
            settings=dict(data.get("settings") or {}),
            mode=StoreMode(data.get("mode") or StoreMode.CREATE.value),
            status=EntryStatus(data.get("status") or EntryStatus.NONE.value),
        )


@dataclass(frozen=True)
class OutputDescriptor:
    """Normalized record published to downstream consumers for one entry."""
    id: str
    type: str
    config: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_entry(cls, entry: StoreEntry) -> 'OutputDescriptor':
        return cls(id=entry.key, type=entry.store_type, config=dict(entry.settings))

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "type": self.type, "config": dict(self.config)}
