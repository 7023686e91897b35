"""
Service catalog, membership plans and customer subscriptions.
"""
import logging
from typing import List, Optional

from sqlalchemy import select

from detailpro.models import (
    Customer, CustomerSubscription, MembershipPlan, Service, SubscriptionStatus,
)
from detailpro.schemas import (
    MembershipPlanCreate, MembershipPlanUpdate, ServiceCreate, ServiceUpdate,
    SubscriptionCreate,
)
from detailpro.store import effects
from detailpro.store.errors import MissingReferenceError
from detailpro.store.repository import Repository
from detailpro.store.result import Found, Lookup, NotFound

logger = logging.getLogger(__name__)


class ServiceRepository(Repository[Service]):
    model = Service
    create_schema = ServiceCreate
    update_schema = ServiceUpdate
    entity_name = "Service"

    def list(self, active: Optional[bool] = None) -> List[Service]:
        query = select(Service).order_by(Service.id)
        if active is not None:
            query = query.where(Service.active == active)
        with self.session() as db:
            return list(db.scalars(query).all())


class MembershipPlanRepository(Repository[MembershipPlan]):
    model = MembershipPlan
    create_schema = MembershipPlanCreate
    update_schema = MembershipPlanUpdate
    entity_name = "Membership plan"

    def list(self, active: Optional[bool] = None) -> List[MembershipPlan]:
        query = select(MembershipPlan).order_by(MembershipPlan.id)
        if active is not None:
            query = query.where(MembershipPlan.active == active)
        with self.session() as db:
            return list(db.scalars(query).all())

    def _delete(self, db, record):
        """
        Refuse while any active subscription uses the plan; retire it
        (active=False) when only past subscriptions reference it.
        """
        statuses = db.scalars(
            select(CustomerSubscription.status).where(CustomerSubscription.plan_id == record.id)
        ).all()
        if SubscriptionStatus.ACTIVE.value in statuses:
            logger.warning("Refusing to delete plan %s: it has active subscriptions", record.name)
            return False
        if statuses:
            logger.info("Plan %s has subscription history; deactivating instead", record.name)
            record.active = False
            return True
        db.delete(record)
        return True


class SubscriptionRepository(Repository[CustomerSubscription]):
    """Subscriptions are created and canceled, never edited or deleted."""

    model = CustomerSubscription
    create_schema = SubscriptionCreate
    entity_name = "Subscription"

    def create(self, data) -> CustomerSubscription:
        """Subscribe a customer, canceling whatever plan they had active."""
        payload = self.validate(self.create_schema, data)
        with self.transaction() as db:
            if db.get(Customer, payload.customer_id) is None:
                raise MissingReferenceError("Customer", payload.customer_id)
            if db.get(MembershipPlan, payload.plan_id) is None:
                raise MissingReferenceError("Membership plan", payload.plan_id)

            subscription = self._insert(db, payload)
            effects.apply_subscription_created(db, subscription)
        return subscription

    def cancel(self, subscription_id: int) -> Lookup[CustomerSubscription]:
        """Cancel a subscription; canceling twice is a no-op."""
        with self.transaction() as db:
            subscription = db.get(CustomerSubscription, subscription_id)
            if subscription is None:
                return NotFound(self.entity_name, subscription_id)
            effects.cancel_subscription(db, subscription)
        return Found(subscription)

    def get_active(self, customer_id: int) -> Lookup[CustomerSubscription]:
        with self.session() as db:
            subscription = db.scalars(
                select(CustomerSubscription).where(
                    CustomerSubscription.customer_id == customer_id,
                    CustomerSubscription.status == SubscriptionStatus.ACTIVE.value,
                )
            ).first()
        return self._lookup(subscription, customer_id)

    def list(self, customer_id: Optional[int] = None,
             status: Optional[str] = None) -> List[CustomerSubscription]:
        query = select(CustomerSubscription).order_by(CustomerSubscription.id)
        if customer_id is not None:
            query = query.where(CustomerSubscription.customer_id == customer_id)
        if status:
            query = query.where(CustomerSubscription.status == status)
        with self.session() as db:
            return list(db.scalars(query).all())

    def delete(self, record_id: int) -> bool:
        raise TypeError("Subscriptions are canceled, not deleted")
