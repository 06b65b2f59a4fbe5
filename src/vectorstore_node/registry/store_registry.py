"""Static registry of vectorstore types.

Maps a store-type identifier to its settings schema and display metadata.
The list model only uses it to reject unknown types and to copy display
metadata onto new entries; the settings form renderer reads the schemas.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from jsonschema import Draft7Validator

from vectorstore_node.exceptions import UnknownStoreTypeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoreTypeInfo:
    """Schema and display metadata for one store type."""
    store_type: str
    display_name: str
    schema: Mapping[str, Any] = field(default_factory=dict)
    ui_schema: Mapping[str, Any] = field(default_factory=dict)
    full_name: str = ""
    description: str = ""
    emoji: Optional[str] = None

    @property
    def subtitle(self) -> str:
        """Secondary text shown under an entry's name."""
        return self.full_name or self.description or ""

    @property
    def has_settings(self) -> bool:
        return bool(self.schema.get("properties"))


class StoreRegistry:
    """
    Lookup of store types by identifier.

    Usage:
        registry = StoreRegistry.default()
        info = registry.schema_for("faiss")   # None if unknown
        errors = registry.validate_settings("faiss", {"store_path": "/tmp/ix"})

    Registration order is kept and drives the add menu.
    """

    def __init__(self, infos: Iterable[StoreTypeInfo] = ()):
        self._infos: Dict[str, StoreTypeInfo] = {}
        for info in infos:
            self.register(info)

    @classmethod
    def default(cls) -> 'StoreRegistry':
        """Registry holding the built-in store types."""
        from .schemas import BUILTIN_STORE_TYPES
        return cls(BUILTIN_STORE_TYPES)

    def register(self, info: StoreTypeInfo) -> None:
        """Register or replace a store type."""
        if info.store_type in self._infos:
            logger.debug(f"Replacing registered store type '{info.store_type}'")
        self._infos[info.store_type] = info

    def schema_for(self, store_type: str) -> Optional[StoreTypeInfo]:
        """Get metadata for a store type, or None if it is not registered."""
        return self._infos.get(store_type)

    def get(self, store_type: str) -> StoreTypeInfo:
        """Strict lookup. Raises UnknownStoreTypeError for unregistered types."""
        info = self._infos.get(store_type)
        if info is None:
            raise UnknownStoreTypeError(f"Unknown store type: {store_type!r}")
        return info

    def __contains__(self, store_type: object) -> bool:
        return store_type in self._infos

    def __len__(self) -> int:
        return len(self._infos)

    def available_types(self) -> List[StoreTypeInfo]:
        """All registered types in registration order."""
        return list(self._infos.values())

    def default_settings(self, store_type: str) -> Dict[str, Any]:
        """Settings pre-filled from the schema's declared defaults."""
        properties = self.get(store_type).schema.get("properties", {})
        return {
            name: prop["default"]
            for name, prop in properties.items()
            if "default" in prop
        }

    def validate_settings(self, store_type: str, settings: Mapping[str, Any]) -> List[str]:
        """
        Validate settings against the store type's schema.

        Advisory only: the list model stores settings as given. The
        settings editor uses this for live feedback.

        Returns:
            Error messages, each prefixed with the offending path; empty if valid
        """
        schema = self.get(store_type).schema
        if not schema:
            return []

        validator = Draft7Validator(schema)
        errors = []
        for error in sorted(validator.iter_errors(dict(settings)), key=lambda e: list(e.path)):
            path = ".".join(str(p) for p in error.path) or "<root>"
            errors.append(f"{path}: {error.message}")
        return errors
