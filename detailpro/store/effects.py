"""
Derived-state effects applied after a primary write.

Each function receives the open session of the write that triggered it,
so the effect commits or rolls back together with that write. None of
them commit on their own.
"""
import logging
from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from detailpro.models import (
    Activity, Customer, CustomerSubscription, InventoryItem, InventoryTransaction,
    Invoice, Job, JobStatus, MembershipPlan, Payment, Review, SubscriptionStatus,
    TransactionType, User,
)
from detailpro.store.errors import InsufficientStockError, MissingReferenceError

logger = logging.getLogger(__name__)


def record_activity(db: Session, type: str, description: str,
                    customer_id: Optional[int] = None,
                    job_id: Optional[int] = None,
                    invoice_id: Optional[int] = None,
                    details: Optional[Dict[str, Any]] = None,
                    timestamp: Optional[datetime] = None) -> Activity:
    """Append an entry to the activity feed."""
    activity = Activity(
        type=type,
        customer_id=customer_id,
        job_id=job_id,
        invoice_id=invoice_id,
        description=description,
        timestamp=timestamp or datetime.now(),
        details=details,
    )
    db.add(activity)
    db.flush()
    return activity


def _customer(db: Session, customer_id: Optional[int]) -> Optional[Customer]:
    if customer_id is None:
        return None
    return db.get(Customer, customer_id)


# -------------------- customers & jobs --------------------

def apply_customer_created(db: Session, customer: Customer) -> None:
    record_activity(
        db, "customer_created",
        f"New customer {customer.full_name} was added",
        customer_id=customer.id,
    )


def apply_job_scheduled(db: Session, job: Job) -> None:
    customer = _customer(db, job.customer_id)
    if customer is None:
        return
    record_activity(
        db, "job_scheduled",
        f"Job scheduled for {customer.full_name}",
        customer_id=customer.id,
        job_id=job.id,
    )


def apply_job_status_change(db: Session, job: Job, previous_status: Optional[str]) -> None:
    """Stamp actual start/end times and log ``job_<status>``."""
    if job.status == previous_status:
        return

    now = datetime.now()
    if job.status == JobStatus.IN_PROGRESS.value and job.actual_start_time is None:
        job.actual_start_time = now
    elif job.status == JobStatus.COMPLETED.value and job.actual_end_time is None:
        job.actual_end_time = now

    logger.info("Job %s: %s -> %s", job.id, previous_status, job.status)

    customer = _customer(db, job.customer_id)
    if customer is None:
        return
    record_activity(
        db, f"job_{job.status}",
        f"Job for {customer.full_name} marked as {job.status}",
        customer_id=customer.id,
        job_id=job.id,
    )


# -------------------- billing --------------------

def apply_invoice_created(db: Session, invoice: Invoice) -> None:
    job = db.get(Job, invoice.job_id)
    customer = _customer(db, job.customer_id) if job else None
    if customer is None:
        return
    record_activity(
        db, "invoice_created",
        f"Invoice #{invoice.invoice_number} created for {customer.full_name}",
        customer_id=customer.id,
        job_id=job.id,
        invoice_id=invoice.id,
    )


def apply_invoice_paid(db: Session, invoice: Invoice) -> None:
    logger.info("Invoice %s paid (%.2f of %.2f)",
                invoice.invoice_number, invoice.paid_amount or 0.0, invoice.total)
    job = db.get(Job, invoice.job_id)
    customer = _customer(db, job.customer_id) if job else None
    if customer is None:
        return
    record_activity(
        db, "invoice_paid",
        f"Invoice #{invoice.invoice_number} paid by {customer.full_name}",
        customer_id=customer.id,
        job_id=job.id,
        invoice_id=invoice.id,
    )


def apply_payment(db: Session, payment: Payment) -> Invoice:
    """
    Recompute the paid state of the payment's invoice.

    The invoice flips to paid once, when the payments recorded so far plus
    this one reach its total. Later payments leave it paid and do not
    touch ``paid_amount``.
    """
    invoice = db.get(Invoice, payment.invoice_id)
    if invoice is None:
        raise MissingReferenceError("Invoice", payment.invoice_id)

    earlier = db.scalar(
        select(func.coalesce(func.sum(Payment.amount), 0.0))
        .where(Payment.invoice_id == invoice.id, Payment.id != payment.id)
    )
    total_paid = round(earlier + payment.amount, 2)

    if total_paid >= round(invoice.total, 2) and not invoice.paid:
        invoice.paid = True
        invoice.paid_date = datetime.now()
        invoice.paid_amount = total_paid
        db.flush()
        apply_invoice_paid(db, invoice)

    job = db.get(Job, invoice.job_id)
    customer = _customer(db, job.customer_id) if job else None
    if customer is not None:
        record_activity(
            db, "payment_received",
            f"Payment of ${payment.amount:.2f} received for invoice #{invoice.invoice_number}",
            customer_id=customer.id,
            job_id=job.id,
            invoice_id=invoice.id,
            details={"amount": payment.amount, "method": payment.method},
        )
    return invoice


# -------------------- inventory --------------------

def next_stock_level(item: InventoryItem, type: str, quantity: int) -> int:
    """
    Stock after a transaction: in/return add, out subtracts, adjustment
    replaces the level with ``quantity``.
    """
    current = item.quantity_in_stock
    if type in (TransactionType.IN.value, TransactionType.RETURN.value):
        return current + quantity
    if type == TransactionType.OUT.value:
        if quantity > current:
            raise InsufficientStockError(item.name, quantity, current)
        return current - quantity
    if type == TransactionType.ADJUSTMENT.value:
        return quantity
    raise ValueError(f"Unknown inventory transaction type: {type}")


def _describe_transaction(transaction: InventoryTransaction, item: InventoryItem,
                          technician: Optional[User]) -> str:
    units = f"{transaction.quantity} x {item.name}"
    who = technician.full_name if technician else None
    if transaction.type == TransactionType.IN.value:
        return f"Restocked {units}"
    if transaction.type == TransactionType.OUT.value:
        return f"{who} checked out {units}" if who else f"Checked out {units}"
    if transaction.type == TransactionType.RETURN.value:
        return f"{who} returned {units}" if who else f"Returned {units}"
    return f"Stock of {item.name} adjusted to {transaction.quantity}"


def apply_inventory_transaction(db: Session, transaction: InventoryTransaction) -> InventoryItem:
    """Move the item's stock level and log the movement."""
    item = db.get(InventoryItem, transaction.inventory_item_id)
    if item is None:
        raise MissingReferenceError("Inventory item", transaction.inventory_item_id)

    previous = item.quantity_in_stock
    item.quantity_in_stock = next_stock_level(item, transaction.type, transaction.quantity)
    if transaction.type == TransactionType.IN.value:
        item.last_restocked = transaction.date
    db.flush()

    logger.info("Stock of %s (%s): %d -> %d via %s",
                item.name, item.sku, previous, item.quantity_in_stock, transaction.type)

    technician = db.get(User, transaction.user_id) if transaction.user_id else None
    record_activity(
        db, "inventory_transaction",
        _describe_transaction(transaction, item, technician),
        job_id=transaction.job_id,
        details={
            "inventory_item_id": item.id,
            "transaction_id": transaction.id,
            "type": transaction.type,
            "quantity": transaction.quantity,
            "stock_before": previous,
            "stock_after": item.quantity_in_stock,
        },
    )
    return item


# -------------------- memberships --------------------

def apply_subscription_canceled(db: Session, subscription: CustomerSubscription) -> None:
    plan = db.get(MembershipPlan, subscription.plan_id)
    customer = _customer(db, subscription.customer_id)
    plan_name = plan.name if plan else f"plan {subscription.plan_id}"
    who = customer.full_name if customer else f"customer {subscription.customer_id}"
    record_activity(
        db, "subscription_canceled",
        f"{who} canceled the {plan_name} membership",
        customer_id=subscription.customer_id,
        details={"subscription_id": subscription.id, "plan_id": subscription.plan_id},
    )


def cancel_subscription(db: Session, subscription: CustomerSubscription) -> bool:
    """Cancel an active subscription. Returns False when it was not active."""
    if subscription.status == SubscriptionStatus.CANCELED.value:
        return False
    subscription.status = SubscriptionStatus.CANCELED.value
    subscription.canceled_at = datetime.now()
    db.flush()
    apply_subscription_canceled(db, subscription)
    return True


def apply_subscription_created(db: Session, subscription: CustomerSubscription) -> None:
    """Log the new subscription. An active one first cancels the customer's other active subscriptions."""
    if subscription.status == SubscriptionStatus.ACTIVE.value:
        others = db.scalars(
            select(CustomerSubscription).where(
                CustomerSubscription.customer_id == subscription.customer_id,
                CustomerSubscription.status == SubscriptionStatus.ACTIVE.value,
                CustomerSubscription.id != subscription.id,
            )
        ).all()
        for other in others:
            logger.info("Customer %s: replacing subscription %s with %s",
                        subscription.customer_id, other.id, subscription.id)
            cancel_subscription(db, other)

    plan = db.get(MembershipPlan, subscription.plan_id)
    customer = _customer(db, subscription.customer_id)
    record_activity(
        db, "subscription_created",
        f"{customer.full_name} subscribed to the {plan.name} membership ({subscription.billing_cycle})",
        customer_id=customer.id,
        details={"subscription_id": subscription.id, "plan_id": plan.id},
    )


# -------------------- reviews --------------------

def apply_review_received(db: Session, review: Review) -> None:
    customer = _customer(db, review.customer_id)
    if customer is None:
        return
    record_activity(
        db, "review_received",
        f"Review ({review.rating}/5) received from {customer.full_name}",
        customer_id=customer.id,
        job_id=review.job_id,
        details={"rating": review.rating, "source": review.source},
    )


def apply_review_response(db: Session, review: Review, was_responded: bool) -> None:
    """Log the first response to a review."""
    if was_responded or not review.responded or not review.response_text:
        return
    if review.response_date is None:
        review.response_date = datetime.now()
        db.flush()
    customer = _customer(db, review.customer_id)
    if customer is None:
        return
    record_activity(
        db, "review_responded",
        f"Responded to review from {customer.full_name}",
        customer_id=customer.id,
    )
