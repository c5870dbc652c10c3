# stockroom/models/__init__.py
from .inventory import Category, FilterStatus, Item
from .transaction import InventoryStatistics, TransactionLog, TransactionType

# Export all models
__all__ = [
    "Category",
    "FilterStatus",
    "InventoryStatistics",
    "Item",
    "TransactionLog",
    "TransactionType",
]
