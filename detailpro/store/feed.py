"""
Activity feed and customer reviews.
"""
from typing import List, Optional

from sqlalchemy import select

from detailpro.models import Activity, Review
from detailpro.schemas import ActivityCreate, ReviewCreate, ReviewUpdate
from detailpro.store import effects
from detailpro.store.repository import Payload, Repository


class ActivityRepository(Repository[Activity]):
    """Append-only: activities are never updated or deleted."""

    model = Activity
    create_schema = ActivityCreate
    entity_name = "Activity"

    def create(self, data: Payload) -> Activity:
        payload = self.validate(self.create_schema, data)
        with self.transaction() as db:
            activity = effects.record_activity(db, **payload.model_dump())
        return activity

    def list_recent(self, limit: Optional[int] = None) -> List[Activity]:
        """Newest entries first."""
        query = select(Activity).order_by(Activity.timestamp.desc(), Activity.id.desc())
        if limit is None:
            limit = self.settings.default_feed_limit
        with self.session() as db:
            return list(db.scalars(query.limit(limit)).all())

    def list_by_customer(self, customer_id: int, limit: Optional[int] = None) -> List[Activity]:
        query = (
            select(Activity)
            .where(Activity.customer_id == customer_id)
            .order_by(Activity.timestamp.desc(), Activity.id.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        with self.session() as db:
            return list(db.scalars(query).all())

    def delete(self, record_id: int) -> bool:
        raise TypeError("Activities cannot be deleted")


class ReviewRepository(Repository[Review]):
    model = Review
    create_schema = ReviewCreate
    update_schema = ReviewUpdate
    entity_name = "Review"

    def _after_create(self, db, record, payload):
        effects.apply_review_received(db, record)

    def _after_update(self, db, record, previous, changes):
        if "responded" in changes:
            effects.apply_review_response(db, record, bool(previous["responded"]))

    def list(self, limit: Optional[int] = None,
             customer_id: Optional[int] = None) -> List[Review]:
        """Newest reviews first."""
        query = select(Review).order_by(Review.date.desc(), Review.id.desc())
        if customer_id is not None:
            query = query.where(Review.customer_id == customer_id)
        if limit is None:
            limit = self.settings.default_feed_limit
        with self.session() as db:
            return list(db.scalars(query.limit(limit)).all())
