"""
Activity feed and review routes.
"""
from fastapi import APIRouter, Depends, Query, status
from typing import List, Optional

from detailpro.dependencies import found_or_404, get_store
from detailpro.schemas.activity import (
    Activity as ActivitySchema, ActivityCreate, Review as ReviewSchema, ReviewCreate,
    ReviewUpdate,
)
from detailpro.store import Store

activities_router = APIRouter(prefix="/activities", tags=["activities"])
reviews_router = APIRouter(prefix="/reviews", tags=["reviews"])


@activities_router.get("/", response_model=List[ActivitySchema])
async def get_activities(
    limit: Optional[int] = Query(None, ge=1),
    store: Store = Depends(get_store)
):
    """
    Get the most recent activities, newest first.
    """
    return store.activities.list_recent(limit=limit)


@activities_router.post("/", response_model=ActivitySchema, status_code=status.HTTP_201_CREATED)
async def create_activity(activity: ActivityCreate, store: Store = Depends(get_store)):
    """
    Append a custom entry to the activity feed.
    """
    return store.activities.create(activity)


@reviews_router.get("/", response_model=List[ReviewSchema])
async def get_reviews(
    limit: Optional[int] = Query(None, ge=1),
    customer_id: Optional[int] = None,
    store: Store = Depends(get_store)
):
    """
    Get the most recent reviews, newest first.
    """
    return store.reviews.list(limit=limit, customer_id=customer_id)


@reviews_router.get("/{review_id}", response_model=ReviewSchema)
async def get_review(review_id: int, store: Store = Depends(get_store)):
    """
    Get a specific review by ID.
    """
    return found_or_404(store.reviews.get(review_id))


@reviews_router.post("/", response_model=ReviewSchema, status_code=status.HTTP_201_CREATED)
async def create_review(review: ReviewCreate, store: Store = Depends(get_store)):
    """
    Record a customer review.
    """
    found_or_404(store.customers.get(review.customer_id))
    return store.reviews.create(review)


@reviews_router.put("/{review_id}", response_model=ReviewSchema)
async def update_review(
    review_id: int,
    review_update: ReviewUpdate,
    store: Store = Depends(get_store)
):
    """
    Update a review, typically to record the business's response.
    """
    return found_or_404(store.reviews.update(review_id, review_update))
