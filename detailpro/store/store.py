"""
The store: one object holding every repository over a shared session factory.
"""
import logging
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from detailpro.config import Settings, get_settings
from detailpro.database import create_db_engine, create_session_factory, init_db
from detailpro.store.billing import InvoiceRepository, PaymentRepository
from detailpro.store.catalog import (
    MembershipPlanRepository, ServiceRepository, SubscriptionRepository,
)
from detailpro.store.feed import ActivityRepository, ReviewRepository
from detailpro.store.inventory import InventoryRepository
from detailpro.store.jobs import JobRepository, JobServiceRepository
from detailpro.store.people import CustomerRepository, UserRepository, VehicleRepository
from detailpro.store.reports import ReportService

logger = logging.getLogger(__name__)


class Store:
    """
    Entry point to the data layer.

    Build one per process with ``Store.from_settings()`` and pass it to
    whatever needs data; tests build their own over a fresh in-memory
    database.
    """

    def __init__(self, session_factory: sessionmaker, settings: Optional[Settings] = None,
                 engine: Optional[Engine] = None):
        self.settings = settings or get_settings()
        self.session_factory = session_factory
        self.engine = engine

        self.users = UserRepository(session_factory, self.settings)
        self.customers = CustomerRepository(session_factory, self.settings)
        self.vehicles = VehicleRepository(session_factory, self.settings)
        self.services = ServiceRepository(session_factory, self.settings)
        self.jobs = JobRepository(session_factory, self.settings)
        self.job_services = JobServiceRepository(session_factory, self.settings)
        self.invoices = InvoiceRepository(session_factory, self.settings)
        self.payments = PaymentRepository(session_factory, self.settings)
        self.activities = ActivityRepository(session_factory, self.settings)
        self.reviews = ReviewRepository(session_factory, self.settings)
        self.plans = MembershipPlanRepository(session_factory, self.settings)
        self.subscriptions = SubscriptionRepository(session_factory, self.settings)
        self.inventory = InventoryRepository(session_factory, self.settings)
        self.reports = ReportService(session_factory, self.settings)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "Store":
        """Create the engine and tables named by ``settings.database_url``."""
        settings = settings or get_settings()
        engine = create_db_engine(settings.database_url, echo=False)
        init_db(engine)
        logger.info("Store ready")
        return cls(create_session_factory(engine), settings, engine=engine)

    def close(self) -> None:
        if self.engine is not None:
            self.engine.dispose()
