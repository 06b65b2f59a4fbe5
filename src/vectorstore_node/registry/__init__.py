"""
Store type registry.

Static mapping from store-type identifier to settings schema and display
metadata. Never mutated while a node is running.
"""

from .store_registry import StoreRegistry, StoreTypeInfo
from .schemas import PINECONE, FAISS, DOCS, BUILTIN_STORE_TYPES

__all__ = [
    "StoreRegistry",
    "StoreTypeInfo",
    "PINECONE",
    "FAISS",
    "DOCS",
    "BUILTIN_STORE_TYPES",
]
