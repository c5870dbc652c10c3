from datetime import datetime
from typing import Optional, Union
from pydantic import BaseModel, Field, StrictInt, StrictStr

from stockroom.models.inventory import Category, Item
from stockroom.models.transaction import TransactionLog, TransactionType


class ItemResponse(BaseModel):
    """Schema for a catalog item as shown on the dashboard."""
    id: str
    name: str
    category: Category
    category_code: str
    stock: int
    min_stock: int
    unit: str
    needs_reorder: bool
    status: str
    last_updated: Optional[str] = None

    @classmethod
    def from_item(cls, item: Item) -> "ItemResponse":
        return cls(
            id=item.id,
            name=item.name,
            category=item.category,
            category_code=item.category_code,
            stock=item.stock,
            min_stock=item.min_stock,
            unit=item.unit,
            needs_reorder=item.needs_reorder,
            status=item.status_label,
            last_updated=item.last_updated.isoformat() if item.last_updated else None,
        )


class TransactionRequest(BaseModel):
    type: TransactionType = Field(..., description="IN for incoming stock, OUT for outgoing stock.")
    # Quantity is validated by the ledger so form strings like "12" are accepted too
    amount: Union[StrictInt, StrictStr] = Field(..., description="Positive whole quantity in the item's unit.")


class TransactionResponse(BaseModel):
    id: str
    item_id: str
    item_name: str
    type: TransactionType
    amount: int
    timestamp: str

    @classmethod
    def from_record(cls, record: TransactionLog) -> "TransactionResponse":
        return cls(
            id=record.id,
            item_id=record.item_id,
            item_name=record.item_name,
            type=record.type,
            amount=record.amount,
            timestamp=record.timestamp.isoformat(),
        )


class StatisticsResponse(BaseModel):
    total_sku: int
    reorder_count: int
    today_transaction_count: int
    as_of: datetime
