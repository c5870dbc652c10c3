import logging
import threading
import uuid
from datetime import date, datetime
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from stockroom.core.clock import Clock, system_clock
from stockroom.core.errors import InvalidQuantity, InvalidTransactionType, ItemNotFound, LedgerError
from stockroom.models.inventory import FilterStatus, Item
from stockroom.models.transaction import InventoryStatistics, TransactionLog, TransactionType
from stockroom.services.catalog_store import CatalogStore

log = logging.getLogger(__name__)


# ----------- Pure helpers (no engine state) -----------

def parse_quantity(amount) -> int:
    """
    Normalizes an operator-supplied quantity to a positive int.
    Accepts ints and base-10 integer strings; anything else raises InvalidQuantity.
    """
    # bool is an int subclass, but True is not a quantity
    if isinstance(amount, bool):
        raise InvalidQuantity(amount)
    if isinstance(amount, int):
        value = amount
    elif isinstance(amount, str):
        try:
            value = int(amount.strip(), 10)
        except ValueError:
            raise InvalidQuantity(amount) from None
    else:
        raise InvalidQuantity(amount)

    if value <= 0:
        raise InvalidQuantity(amount)
    return value


def parse_transaction_type(transaction_type) -> TransactionType:
    try:
        return TransactionType(transaction_type)
    except ValueError:
        raise InvalidTransactionType(transaction_type) from None


def reorder_status(item: Item) -> bool:
    """True when on-hand stock has fallen to or below the reorder threshold."""
    return item.stock <= item.min_stock


def _local_date(value: Union[date, datetime]) -> date:
    if isinstance(value, datetime):
        # Aware timestamps are compared on the local calendar
        return value.astimezone().date() if value.tzinfo else value.date()
    return value


def compute_statistics(
    items: Iterable[Item],
    transactions: Iterable[TransactionLog],
    as_of: Union[date, datetime],
) -> InventoryStatistics:
    """
    Recomputes dashboard statistics from current state.
    Today's count uses calendar-date equality with as_of, not a rolling 24h window.
    """
    items = list(items)
    today = _local_date(as_of)
    return InventoryStatistics(
        total_sku=len(items),
        reorder_count=sum(1 for item in items if reorder_status(item)),
        today_transaction_count=sum(1 for tx in transactions if _local_date(tx.timestamp) == today),
    )


def filter_items(
    items: Iterable[Item],
    search_query: str = "",
    filter_status: Union[FilterStatus, str] = FilterStatus.ALL,
) -> List[Item]:
    """
    Case-insensitive substring search on name or id, ANDed with the status filter.
    Preserves the order of `items`.
    """
    status = FilterStatus(filter_status)
    query = (search_query or "").lower()

    result = []
    for item in items:
        matches_search = query in item.name.lower() or query in item.id.lower()
        if status == FilterStatus.REORDER_ONLY and not reorder_status(item):
            continue
        if matches_search:
            result.append(item)
    return result


# ----------- Ledger Engine -----------

class LedgerEngine:
    """
    Applies validated stock movements to a CatalogStore and keeps the
    append-only transaction history (most recent first).
    """

    def __init__(self, catalog: CatalogStore, clock: Clock = system_clock):
        self._catalog = catalog
        self._clock = clock
        self._history: List[TransactionLog] = []
        # Serializes read-validate-write-append across concurrent callers
        self._lock = threading.RLock()

    @property
    def catalog(self) -> CatalogStore:
        return self._catalog

    @property
    def clock(self) -> Clock:
        return self._clock

    def record_transaction(
        self,
        item_id: str,
        transaction_type: Union[TransactionType, str],
        amount,
        now: Optional[datetime] = None,
    ) -> TransactionLog:
        """
        Validates and applies one stock movement, then appends it to the history.

        Raises InvalidQuantity, InvalidTransactionType, ItemNotFound or
        NegativeStockViolation. On any failure neither the item nor the
        history changes.
        """
        quantity = parse_quantity(amount)
        tx_type = parse_transaction_type(transaction_type)
        now = now or self._clock()
        signed_amount = quantity if tx_type == TransactionType.IN else -quantity

        with self._lock:
            before = self._catalog.get(item_id)
            if before is None:
                log.warning(f"Rejected {tx_type.value} {quantity} for unknown item {item_id}")
                raise ItemNotFound(item_id)

            try:
                updated = self._catalog.apply_delta(item_id, signed_amount, now)
            except LedgerError as e:
                log.warning(f"Rejected {tx_type.value} {quantity} for {item_id}: {e}")
                raise

            record = TransactionLog(
                id=uuid.uuid4().hex,
                item_id=item_id,
                item_name=before.name,
                type=tx_type,
                amount=quantity,
                timestamp=now,
            )
            self._history.insert(0, record)

        log.info(f"{tx_type.value} {quantity} {updated.unit} of {item_id} recorded. Stock: {before.stock} -> {updated.stock}")
        self._check_for_low_stock(before, updated)
        return record

    def _check_for_low_stock(self, before: Item, after: Item) -> None:
        """Emits a low-stock alert when an item crosses into reorder state."""
        if reorder_status(after) and not reorder_status(before):
            log.warning(
                f"ALERT: Low stock detected for Item {after.id} ({after.name})! "
                f"Qty: {after.stock}, Threshold: {after.min_stock}"
            )

    # ----------- Read side used by the presentation layer -----------

    def get_item(self, item_id: str) -> Optional[Item]:
        return self._catalog.get(item_id)

    def list_items(self) -> List[Item]:
        return self._catalog.list()

    def history(self, limit: Optional[int] = None) -> Tuple[TransactionLog, ...]:
        """Transaction records, most recent first."""
        with self._lock:
            records = self._history if limit is None else self._history[:limit]
            return tuple(records)

    def history_for_item(self, item_id: str) -> Tuple[TransactionLog, ...]:
        # Records outlive their item, so unknown ids are not an error here
        with self._lock:
            return tuple(tx for tx in self._history if tx.item_id == item_id)

    def statistics(self, as_of: Optional[Union[date, datetime]] = None) -> InventoryStatistics:
        with self._lock:
            items: Sequence[Item] = self._catalog.list()
            transactions = tuple(self._history)
        return compute_statistics(items, transactions, as_of or self._clock())

    def search(
        self,
        search_query: str = "",
        filter_status: Union[FilterStatus, str] = FilterStatus.ALL,
    ) -> List[Item]:
        return filter_items(self._catalog.list(), search_query, filter_status)
