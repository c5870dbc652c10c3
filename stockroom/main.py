import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, status

from stockroom.api.v1.inventory import router as inventory_router
from stockroom.core.config import LOG_FORMAT, LOG_LEVEL, PROJECT_NAME, SEED_DEFAULT_CATALOG, VERSION
from stockroom.core.exception_handlers import setup_exception_handlers
from stockroom.scripts.seed_data import build_default_catalog
from stockroom.services.catalog_store import CatalogStore
from stockroom.services.ledger_service import LedgerEngine

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
log = logging.getLogger(__name__)


def create_ledger() -> LedgerEngine:
    """Builds a fresh catalog and ledger; each app instance owns its own state."""
    items = build_default_catalog() if SEED_DEFAULT_CATALOG else []
    return LedgerEngine(CatalogStore(items))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handles startup and shutdown events."""
    log.info(f"Starting {PROJECT_NAME} v{VERSION}...")
    app.state.ledger = create_ledger()
    log.info(f"Catalog loaded with {len(app.state.ledger.catalog)} items.")
    yield
    log.info(f"{PROJECT_NAME} stopped.")

app = FastAPI(
    title=PROJECT_NAME,
    version=VERSION,
    lifespan=lifespan,
    # Configure API documentation and paths
    docs_url="/docs",
    redoc_url="/redoc"
)

# Include routers for modular API structure
app.include_router(inventory_router, prefix="/api/v1/inventory", tags=["Inventory Ledger"])


setup_exception_handlers(app)

@app.get("/health", status_code=status.HTTP_200_OK)
async def health_check():
    """Simple health check endpoint."""
    return {"status": "ok", "app_name": PROJECT_NAME}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
