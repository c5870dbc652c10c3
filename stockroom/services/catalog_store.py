import logging
import threading
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from stockroom.core.errors import ItemNotFound, NegativeStockViolation
from stockroom.models.inventory import Item

log = logging.getLogger(__name__)


class CatalogStore:
    """
    Authoritative current state of every catalog item.

    apply_delta() is the single mutation path for stock. get() and list()
    return copies so callers cannot write to the records directly.
    """

    def __init__(self, items: Iterable[Item] = ()):
        self._items: Dict[str, Item] = {}
        self._lock = threading.Lock()
        for item in items:
            if item.id in self._items:
                raise ValueError(f"Duplicate item id in catalog seed: {item.id}")
            # Dict preserves insertion order, which is the catalog load order
            self._items[item.id] = item.model_copy()

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def get(self, item_id: str) -> Optional[Item]:
        """Returns a snapshot of the item, or None if the id is unknown."""
        item = self._items.get(item_id)
        return item.model_copy() if item else None

    def list(self) -> List[Item]:
        """Snapshots of all items in catalog load order."""
        return [item.model_copy() for item in self._items.values()]

    def apply_delta(self, item_id: str, signed_amount: int, now: datetime) -> Item:
        """
        Atomically adds signed_amount to the item's stock.
        Raises ItemNotFound or NegativeStockViolation without touching the record.
        """
        with self._lock:
            item = self._items.get(item_id)
            if item is None:
                raise ItemNotFound(item_id)

            new_stock = item.stock + signed_amount
            if new_stock < 0:
                raise NegativeStockViolation(item_id, item.stock, signed_amount)

            item.stock = new_stock
            item.last_updated = now
            log.debug(f"Stock for {item_id} changed by {signed_amount:+d} to {new_stock}")
            return item.model_copy()
