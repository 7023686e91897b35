"""
Membership plan and subscription routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List, Optional

from detailpro.dependencies import found_or_404, get_store
from detailpro.models.membership import SubscriptionStatus
from detailpro.schemas.membership import (
    MembershipPlan as PlanSchema, MembershipPlanCreate, MembershipPlanUpdate,
    Subscription as SubscriptionSchema, SubscriptionCreate,
)
from detailpro.store import Store

plans_router = APIRouter(prefix="/membership-plans", tags=["memberships"])
subscriptions_router = APIRouter(prefix="/subscriptions", tags=["memberships"])


@plans_router.get("/", response_model=List[PlanSchema])
async def get_plans(
    active: Optional[bool] = None,
    store: Store = Depends(get_store)
):
    """
    Get membership plans with an optional active filter.
    """
    return store.plans.list(active=active)


@plans_router.get("/{plan_id}", response_model=PlanSchema)
async def get_plan(plan_id: int, store: Store = Depends(get_store)):
    """
    Get a specific plan by ID.
    """
    return found_or_404(store.plans.get(plan_id))


@plans_router.post("/", response_model=PlanSchema, status_code=status.HTTP_201_CREATED)
async def create_plan(plan: MembershipPlanCreate, store: Store = Depends(get_store)):
    """
    Create a membership plan.
    """
    return store.plans.create(plan)


@plans_router.put("/{plan_id}", response_model=PlanSchema)
async def update_plan(
    plan_id: int,
    plan_update: MembershipPlanUpdate,
    store: Store = Depends(get_store)
):
    """
    Update a membership plan.
    """
    return found_or_404(store.plans.update(plan_id, plan_update))


@plans_router.delete("/{plan_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_plan(plan_id: int, store: Store = Depends(get_store)):
    """
    Delete a plan. Plans with subscription history are retired instead,
    and plans with active subscribers cannot be removed.
    """
    if not store.plans.delete(plan_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Membership plan not found or still in use"
        )


@subscriptions_router.get("/", response_model=List[SubscriptionSchema])
async def get_subscriptions(
    customer_id: Optional[int] = None,
    subscription_status: Optional[SubscriptionStatus] = None,
    store: Store = Depends(get_store)
):
    """
    Get subscriptions, optionally for one customer or in one state.
    """
    return store.subscriptions.list(
        customer_id=customer_id,
        status=subscription_status.value if subscription_status else None,
    )


@subscriptions_router.get("/{subscription_id}", response_model=SubscriptionSchema)
async def get_subscription(subscription_id: int, store: Store = Depends(get_store)):
    """
    Get a specific subscription by ID.
    """
    return found_or_404(store.subscriptions.get(subscription_id))


@subscriptions_router.post("/", response_model=SubscriptionSchema, status_code=status.HTTP_201_CREATED)
async def create_subscription(
    subscription: SubscriptionCreate,
    store: Store = Depends(get_store)
):
    """
    Subscribe a customer to a plan. Any plan they had active is canceled.
    """
    return store.subscriptions.create(subscription)


@subscriptions_router.post("/{subscription_id}/cancel", response_model=SubscriptionSchema)
async def cancel_subscription(subscription_id: int, store: Store = Depends(get_store)):
    """
    Cancel a subscription.
    """
    return found_or_404(store.subscriptions.cancel(subscription_id))
