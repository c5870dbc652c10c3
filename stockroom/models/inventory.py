from enum import Enum
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class Category(str, Enum):
    MECHANIC = "Mechanic"
    ELECTRIC = "Electric"
    TOOLS = "Tools"


class FilterStatus(str, Enum):
    ALL = "ALL"
    REORDER_ONLY = "REORDER_ONLY"


class Item(BaseModel):
    """
    A maintenance part tracked in the catalog.
    Records are owned by the CatalogStore; everything handed out is a copy.
    """
    id: str = Field(..., min_length=1)
    name: str
    category: Category
    stock: int = Field(..., ge=0)
    min_stock: int = Field(..., ge=0) # Reorder threshold
    unit: str
    last_updated: Optional[datetime] = None # Set by the first accepted transaction

    @property
    def needs_reorder(self) -> bool:
        return self.stock <= self.min_stock

    @property
    def status_label(self) -> str:
        return "REORDER" if self.needs_reorder else "OK"

    @property
    def category_code(self) -> str:
        """Part number prefix, e.g. 'M' for M-001."""
        return self.id.split("-")[0]
