"""Store backend protocol for the setup extension point.

A backend performs the actual create-or-load action for one entry. The
orchestrator calls it once per entry and treats every entry independently.
"""

from typing import Any, Protocol, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from vectorstore_node.model.store_entry import StoreEntry


class StoreBackend(Protocol):
    """Protocol for vectorstore backends.

    Implementations raise StoreSetupError when an entry cannot be set up.
    Any other exception is treated the same way by the orchestrator.
    """

    def create(self, entry: 'StoreEntry', chunks: Sequence[Any]) -> None:
        """Build the store described by entry from upstream chunks."""
        ...

    def load(self, entry: 'StoreEntry') -> None:
        """Attach to the pre-existing store described by entry."""
        ...
