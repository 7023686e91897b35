"""
Errors raised by the store.

Not-found is not an error here: reads return ``NotFound`` and deletes
return ``False``.
"""


class StoreError(Exception):
    """Base class for store failures."""


class MissingReferenceError(StoreError):
    """A record refers to a parent that does not exist."""

    def __init__(self, entity: str, record_id):
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} {record_id} does not exist")


class InsufficientStockError(StoreError):
    """An outgoing inventory transaction would drive stock below zero."""

    def __init__(self, item_name: str, requested: int, available: int):
        self.item_name = item_name
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient stock for {item_name}: requested {requested}, available {available}"
        )


class ConflictError(StoreError):
    """A write violated a uniqueness rule."""
