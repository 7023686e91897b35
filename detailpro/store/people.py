"""
Users, customers and vehicles.
"""
from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy import func, or_, select

from detailpro.models import Customer, User, Vehicle
from detailpro.schemas import (
    CustomerCreate, CustomerUpdate, UserCreate, UserUpdate, VehicleCreate, VehicleUpdate,
)
from detailpro.store import effects
from detailpro.store.repository import Repository
from detailpro.store.result import Lookup


class UserRepository(Repository[User]):
    """Staff accounts. Users are never hard-deleted."""

    model = User
    create_schema = UserCreate
    update_schema = UserUpdate
    entity_name = "User"

    def get_by_username(self, username: str) -> Lookup[User]:
        with self.session() as db:
            user = db.scalars(select(User).where(User.username == username)).first()
        return self._lookup(user, username)

    def list(self, role: Optional[str] = None) -> List[User]:
        query = select(User).order_by(User.id)
        if role:
            query = query.where(User.role == role)
        with self.session() as db:
            return list(db.scalars(query).all())

    def delete(self, record_id: int) -> bool:
        raise TypeError("Users cannot be deleted")


@dataclass
class CustomerPage:
    customers: List[Customer]
    total: int


class CustomerRepository(Repository[Customer]):
    model = Customer
    create_schema = CustomerCreate
    update_schema = CustomerUpdate
    entity_name = "Customer"

    def _after_create(self, db, record, payload):
        effects.apply_customer_created(db, record)

    def list(self, page: int = 1, page_size: Optional[int] = None,
             search: Optional[str] = None) -> CustomerPage:
        """
        One page of customers in id order.

        ``search`` matches name and email case-insensitively and phone
        numbers as a plain substring.
        """
        page_size = page_size or self.settings.default_page_size
        page = max(page, 1)

        query = select(Customer)
        if search:
            pattern = f"%{search.lower()}%"
            query = query.where(or_(
                func.lower(Customer.full_name).like(pattern),
                func.lower(Customer.email).like(pattern),
                Customer.phone_number.contains(search),
            ))

        with self.session() as db:
            total = db.scalar(select(func.count()).select_from(query.subquery()))
            customers = db.scalars(
                query.order_by(Customer.id).offset((page - 1) * page_size).limit(page_size)
            ).all()
        return CustomerPage(customers=list(customers), total=total)


class VehicleRepository(Repository[Vehicle]):
    model = Vehicle
    create_schema = VehicleCreate
    update_schema = VehicleUpdate
    entity_name = "Vehicle"

    def list(self, customer_id: Optional[int] = None) -> List[Vehicle]:
        query = select(Vehicle).order_by(Vehicle.id)
        if customer_id is not None:
            query = query.where(Vehicle.customer_id == customer_id)
        with self.session() as db:
            return list(db.scalars(query).all())
