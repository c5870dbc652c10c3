"""
Error kinds raised by the catalog store and the ledger engine.

Every error is a rejected operation: state is left untouched when one is raised.
"""


class LedgerError(ValueError):
    """Base class for rejected inventory operations."""
    code = "ledger_error"


class ItemNotFound(LedgerError):
    code = "item_not_found"

    def __init__(self, item_id: str):
        self.item_id = item_id
        super().__init__(f"Item {item_id} not found in catalog.")


class InvalidQuantity(LedgerError):
    code = "invalid_quantity"

    def __init__(self, amount):
        self.amount = amount
        super().__init__(f"Quantity must be a positive integer, got {amount!r}.")


class InvalidTransactionType(LedgerError):
    code = "invalid_transaction_type"

    def __init__(self, transaction_type):
        self.transaction_type = transaction_type
        super().__init__(f"Transaction type must be IN or OUT, got {transaction_type!r}.")


class NegativeStockViolation(LedgerError):
    code = "negative_stock"

    def __init__(self, item_id: str, current_stock: int, signed_amount: int):
        self.item_id = item_id
        self.current_stock = current_stock
        self.signed_amount = signed_amount
        super().__init__(
            f"Stock cannot be negative: {item_id}. "
            f"Requested: {abs(signed_amount)}, Available: {current_stock}"
        )
