"""
Store entry data model.

Immutable store entries, the descriptors published from them and the
observable list that owns them.
"""

from .store_entry import StoreEntry, StoreMode, EntryStatus, OutputDescriptor, new_key
from .store_list_model import StoreListModel

__all__ = [
    "StoreEntry",
    "StoreMode",
    "EntryStatus",
    "OutputDescriptor",
    "new_key",
    "StoreListModel",
]
