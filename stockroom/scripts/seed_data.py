# scripts/seed_data.py
import logging
from typing import List

from stockroom.core.config import LOG_FORMAT
from stockroom.models.inventory import Category, FilterStatus, Item
from stockroom.services.catalog_store import CatalogStore
from stockroom.services.ledger_service import filter_items

log = logging.getLogger(__name__)

# Factory maintenance division catalog, in load order
DEFAULT_ITEMS = [
    {"id": "M-001", "name": "Ball Bearing 6205", "category": Category.MECHANIC, "stock": 45, "min_stock": 10, "unit": "pcs"},
    {"id": "M-002", "name": "V-Belt B-52", "category": Category.MECHANIC, "stock": 5, "min_stock": 8, "unit": "pcs"},
    {"id": "E-101", "name": "Proximity Sensor PNP", "category": Category.ELECTRIC, "stock": 12, "min_stock": 5, "unit": "unit"},
    {"id": "E-102", "name": "Contactor 220V 32A", "category": Category.ELECTRIC, "stock": 3, "min_stock": 5, "unit": "unit"},
    {"id": "T-201", "name": "Wrench Set Metric", "category": Category.TOOLS, "stock": 8, "min_stock": 2, "unit": "set"},
    {"id": "M-003", "name": "Hydraulic Oil ISO 68", "category": Category.MECHANIC, "stock": 150, "min_stock": 50, "unit": "liter"},
    {"id": "E-103", "name": "Limit Switch Roller", "category": Category.ELECTRIC, "stock": 20, "min_stock": 10, "unit": "pcs"},
    {"id": "T-202", "name": "Digital Multimeter", "category": Category.TOOLS, "stock": 4, "min_stock": 3, "unit": "unit"},
    {"id": "M-004", "name": "Grease Lithium EP2", "category": Category.MECHANIC, "stock": 12, "min_stock": 15, "unit": "pail"},
    {"id": "E-104", "name": "PLC Module Input", "category": Category.ELECTRIC, "stock": 2, "min_stock": 2, "unit": "unit"},
]


def build_default_catalog() -> List[Item]:
    """Fresh Item records for the default catalog; every call returns new objects."""
    return [Item(**data) for data in DEFAULT_ITEMS]


def seed() -> CatalogStore:
    store = CatalogStore(build_default_catalog())
    log.info(f"Catalog seeded with {len(store)} items.")

    for item in filter_items(store.list(), "", FilterStatus.REORDER_ONLY):
        log.info(f"Needs reorder: {item.id} {item.name} ({item.stock}/{item.min_stock} {item.unit})")
    return store


def main():
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    seed()

if __name__ == "__main__":
    main()
