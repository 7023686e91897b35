"""
Shared FastAPI dependencies.
"""
from datetime import datetime
from fastapi import HTTPException, Request, status
from typing import Optional

from detailpro.store import Found, Lookup, Store


def get_store(request: Request) -> Store:
    """The process-wide store created at startup."""
    return request.app.state.store


def found_or_404(result: Lookup):
    """Unwrap a lookup, turning NotFound into a 404."""
    if isinstance(result, Found):
        return result.value
    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=result.message
    )


def local_time(value: Optional[datetime]) -> Optional[datetime]:
    """Convert a timezone-aware query date to naive local time, as stored."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)
