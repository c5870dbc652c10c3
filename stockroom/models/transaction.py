from enum import Enum
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class TransactionType(str, Enum):
    IN = "IN"    # Incoming stock (receipt)
    OUT = "OUT"  # Outgoing stock (issue to maintenance)


class TransactionLog(BaseModel):
    """
    Immutable record of one accepted stock movement.
    item_name is a snapshot taken when the movement was recorded and is never re-resolved.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    item_id: str
    item_name: str
    type: TransactionType
    amount: int = Field(..., gt=0)
    timestamp: datetime


class InventoryStatistics(BaseModel):
    total_sku: int
    reorder_count: int
    today_transaction_count: int
