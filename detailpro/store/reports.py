"""
Read-side aggregates computed on request.
"""
from collections import defaultdict
from datetime import datetime
from typing import Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session, sessionmaker

from detailpro.config import Settings
from detailpro.models import (
    Customer, InventoryItem, InventoryTransaction, Invoice, Job, JobService, JobStatus,
    Service, TransactionType,
)
from detailpro.schemas import RevenueStats, TechnicianHolding, TopService


class ReportService:
    """Revenue, service ranking and inventory reports."""

    def __init__(self, session_factory: sessionmaker, settings: Settings):
        self._session_factory = session_factory
        self.settings = settings

    def _completed_job_ids(self, db: Session, start: datetime, end: datetime) -> List[int]:
        return list(db.scalars(
            select(Job.id).where(
                Job.status == JobStatus.COMPLETED.value,
                Job.scheduled_start_time >= start,
                Job.scheduled_start_time <= end,
            )
        ).all())

    def revenue_stats(self, start: datetime, end: datetime) -> RevenueStats:
        """
        Totals for jobs completed in [start, end].

        Revenue counts the paid amount of paid invoices only; the average is
        taken over completed jobs and is 0 when there are none.
        """
        with self._session_factory() as db:
            job_ids = self._completed_job_ids(db, start, end)
            total_revenue = 0.0
            if job_ids:
                invoices = db.scalars(
                    select(Invoice).where(Invoice.job_id.in_(job_ids), Invoice.paid.is_(True))
                ).all()
                total_revenue = sum(invoice.paid_amount or 0.0 for invoice in invoices)
            new_customers = db.scalar(
                select(func.count(Customer.id)).where(
                    Customer.created_at >= start, Customer.created_at <= end
                )
            )

        jobs_completed = len(job_ids)
        return RevenueStats(
            total_revenue=round(total_revenue, 2),
            jobs_completed=jobs_completed,
            new_customers=new_customers or 0,
            avg_job_value=round(total_revenue / jobs_completed, 2) if jobs_completed else 0.0,
        )

    def top_services(self, start: datetime, end: datetime,
                     limit: Optional[int] = None) -> List[TopService]:
        """
        Services ranked by revenue (price * quantity) over the jobs completed
        in [start, end]. Ties go to the higher count, then the lower id.
        """
        if limit is None:
            limit = self.settings.top_services_limit
        revenue: Dict[int, float] = defaultdict(float)
        count: Dict[int, int] = defaultdict(int)

        with self._session_factory() as db:
            job_ids = self._completed_job_ids(db, start, end)
            if not job_ids:
                return []
            for line in db.scalars(select(JobService).where(JobService.job_id.in_(job_ids))):
                revenue[line.service_id] += line.price * line.quantity
                count[line.service_id] += line.quantity

            names = dict(db.execute(
                select(Service.id, Service.name).where(Service.id.in_(list(revenue)))
            ).all())

        ranked = sorted(
            (service_id for service_id in revenue if service_id in names),
            key=lambda service_id: (-revenue[service_id], -count[service_id], service_id),
        )
        return [
            TopService(
                service_id=service_id,
                service_name=names[service_id],
                revenue=round(revenue[service_id], 2),
                count=count[service_id],
            )
            for service_id in ranked[:limit]
        ]

    def technician_holdings(self, technician_id: int) -> List[TechnicianHolding]:
        """Items a technician has checked out and not yet returned."""
        held: Dict[int, int] = defaultdict(int)

        with self._session_factory() as db:
            transactions = db.scalars(
                select(InventoryTransaction).where(
                    InventoryTransaction.user_id == technician_id,
                    InventoryTransaction.type.in_(
                        [TransactionType.OUT.value, TransactionType.RETURN.value]
                    ),
                )
            )
            for transaction in transactions:
                if transaction.type == TransactionType.OUT.value:
                    held[transaction.inventory_item_id] += transaction.quantity
                else:
                    held[transaction.inventory_item_id] -= transaction.quantity

            item_ids = [item_id for item_id, quantity in held.items() if quantity > 0]
            if not item_ids:
                return []
            items = db.scalars(
                select(InventoryItem).where(InventoryItem.id.in_(item_ids)).order_by(InventoryItem.id)
            ).all()

        return [
            TechnicianHolding(
                inventory_item_id=item.id,
                item_name=item.name,
                sku=item.sku,
                quantity=held[item.id],
            )
            for item in items
        ]

    def low_stock_items(self) -> List[InventoryItem]:
        """Active items at or below their minimum stock level."""
        with self._session_factory() as db:
            return list(db.scalars(
                select(InventoryItem).where(
                    InventoryItem.is_active.is_(True),
                    InventoryItem.quantity_in_stock <= InventoryItem.min_stock_level,
                ).order_by(InventoryItem.quantity_in_stock, InventoryItem.id)
            ).all())
