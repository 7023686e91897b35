"""
Reporting routes.
"""
from datetime import datetime
from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import List, Optional

from detailpro.dependencies import get_store, local_time
from detailpro.schemas.report import RevenueStats, TopService
from detailpro.store import Store

router = APIRouter(prefix="/stats", tags=["stats"])


def _check_window(start_date: datetime, end_date: datetime) -> None:
    if end_date < start_date:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="endDate must not be before startDate"
        )


@router.get("/revenue", response_model=RevenueStats)
async def get_revenue_stats(
    start_date: datetime = Query(..., alias="startDate"),
    end_date: datetime = Query(..., alias="endDate"),
    store: Store = Depends(get_store)
):
    """
    Revenue, completed jobs and new customers between two dates.
    """
    start_date, end_date = local_time(start_date), local_time(end_date)
    _check_window(start_date, end_date)
    return store.reports.revenue_stats(start_date, end_date)


@router.get("/top-services", response_model=List[TopService])
async def get_top_services(
    start_date: datetime = Query(..., alias="startDate"),
    end_date: datetime = Query(..., alias="endDate"),
    limit: Optional[int] = Query(None, ge=1),
    store: Store = Depends(get_store)
):
    """
    Services ranked by revenue between two dates.
    """
    start_date, end_date = local_time(start_date), local_time(end_date)
    _check_window(start_date, end_date)
    return store.reports.top_services(start_date, end_date, limit=limit)
