"""
Storage and aggregation layer.
"""
from detailpro.store.errors import (
    ConflictError, InsufficientStockError, MissingReferenceError, StoreError,
)
from detailpro.store.result import Found, Lookup, NotFound
from detailpro.store.store import Store

__all__ = [
    "Store",
    "Found", "NotFound", "Lookup",
    "StoreError", "MissingReferenceError", "InsufficientStockError", "ConflictError",
]
