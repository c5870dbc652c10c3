from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from stockroom.core.config import HISTORY_PAGE_SIZE
from stockroom.models.inventory import FilterStatus
from stockroom.schemas.inventory import (
    ItemResponse,
    StatisticsResponse,
    TransactionRequest,
    TransactionResponse,
)
from stockroom.schemas.response import SuccessResponse
from stockroom.services.ledger_service import LedgerEngine

router = APIRouter()


def get_ledger(request: Request) -> LedgerEngine:
    """The engine instance built by the application lifespan."""
    return request.app.state.ledger


@router.get("/items", response_model=SuccessResponse)
def list_items(
    q: str = Query("", description="Case-insensitive match on part name or ID."),
    status_filter: FilterStatus = Query(FilterStatus.ALL, alias="status"),
    ledger: LedgerEngine = Depends(get_ledger),
):
    """Lists catalog items in load order, optionally filtered."""
    items = ledger.search(q, status_filter)
    data = [ItemResponse.from_item(item).model_dump() for item in items]
    return SuccessResponse(data=data)


@router.get("/items/{item_id}", response_model=SuccessResponse)
def get_item(item_id: str, ledger: LedgerEngine = Depends(get_ledger)):
    """Fetches the current stock record of one item."""
    item = ledger.get_item(item_id)
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Item {item_id} not found.")
    return SuccessResponse(data=ItemResponse.from_item(item).model_dump())


@router.get("/items/{item_id}/transactions", response_model=SuccessResponse)
def get_item_transactions(item_id: str, ledger: LedgerEngine = Depends(get_ledger)):
    """History of one item, most recent first. Works for ids no longer in the catalog."""
    records = ledger.history_for_item(item_id)
    return SuccessResponse(data=[TransactionResponse.from_record(r).model_dump() for r in records])


@router.post("/items/{item_id}/transactions", status_code=status.HTTP_201_CREATED, response_model=SuccessResponse)
def create_transaction(item_id: str, payload: TransactionRequest, ledger: LedgerEngine = Depends(get_ledger)):
    """
    Records an incoming or outgoing stock movement.
    Rejections (unknown item, bad quantity, negative stock) are rendered by the ledger exception handlers.
    """
    record = ledger.record_transaction(item_id, payload.type, payload.amount)
    return SuccessResponse(data=TransactionResponse.from_record(record).model_dump())


@router.get("/transactions", response_model=SuccessResponse)
def list_transactions(
    limit: Optional[int] = Query(HISTORY_PAGE_SIZE, ge=1),
    ledger: LedgerEngine = Depends(get_ledger),
):
    """Transaction history, most recent first."""
    records = ledger.history(limit)
    return SuccessResponse(data=[TransactionResponse.from_record(r).model_dump() for r in records])


@router.get("/stats", response_model=SuccessResponse)
def get_statistics(ledger: LedgerEngine = Depends(get_ledger)):
    """Dashboard counters: total SKUs, items needing reorder, today's transactions."""
    as_of = ledger.clock()
    stats = ledger.statistics(as_of)
    data = StatisticsResponse(as_of=as_of, **stats.model_dump())
    return SuccessResponse(data=data.model_dump(mode="json"))
