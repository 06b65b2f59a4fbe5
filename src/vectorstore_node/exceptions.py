"""Exceptions raised across the vectorstore node."""

from typing import Optional


class VectorstoreNodeError(Exception):
    """Base class for vectorstore node errors."""


class InputUnavailableError(VectorstoreNodeError):
    """Raised by a host when no upstream producer is connected to a channel."""


class UnknownStoreTypeError(VectorstoreNodeError, KeyError):
    """Raised by strict registry lookups for an unregistered store type."""


class StoreSetupError(VectorstoreNodeError):
    """Raised when a backend cannot create or load a store."""

    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(message)
        self.key = key
