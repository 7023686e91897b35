"""
Jobs and their service line items.
"""
import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from detailpro.models import Job, JobService, Service
from detailpro.schemas import (
    JobCreate, JobServiceCreate, JobServiceLine, JobServiceUpdate, JobUpdate,
)
from detailpro.store import effects
from detailpro.store.repository import Payload, Repository
from detailpro.store.result import Found, Lookup, NotFound

logger = logging.getLogger(__name__)

Lines = Iterable[Any]


def _replace_lines(db: Session, job_id: int, lines: Lines) -> List[JobService]:
    """
    Drop every line item of the job and recreate them from ``lines``,
    pricing each at the current catalog price. Unknown services are skipped.
    """
    for existing in db.scalars(select(JobService).where(JobService.job_id == job_id)).all():
        db.delete(existing)

    created = []
    for line in lines:
        line = Repository.validate(JobServiceLine, line)
        service = db.get(Service, line.service_id)
        if service is None:
            logger.warning("Job %s: skipping unknown service %s", job_id, line.service_id)
            continue
        job_service = JobService(
            job_id=job_id,
            service_id=service.id,
            quantity=line.quantity,
            price=service.price,
        )
        db.add(job_service)
        created.append(job_service)
    db.flush()
    return created


class JobRepository(Repository[Job]):
    model = Job
    create_schema = JobCreate
    update_schema = JobUpdate
    entity_name = "Job"

    def create(self, data: Payload, services: Optional[Lines] = None) -> Job:
        """Schedule a job, optionally with its services."""
        payload = self.validate(self.create_schema, data)
        with self.transaction() as db:
            job = self._insert(db, payload)
            if services:
                _replace_lines(db, job.id, services)
            effects.apply_job_scheduled(db, job)
        logger.info("Scheduled job %s for customer %s", job.id, job.customer_id)
        return job

    def update(self, record_id: int, data: Payload,
               services: Optional[Lines] = None) -> Lookup[Job]:
        """Update a job; ``services``, when given, replaces its line items."""
        result = super().update(record_id, data)
        if result and services is not None:
            self.set_services(record_id, services)
        return result

    def _after_update(self, db, record, previous: Dict[str, Any], changes: Dict[str, Any]):
        if "status" in changes:
            effects.apply_job_status_change(db, record, previous["status"])

    def set_services(self, job_id: int, lines: Lines) -> Lookup[List[JobService]]:
        with self.transaction() as db:
            if db.get(Job, job_id) is None:
                return NotFound(self.entity_name, job_id)
            created = _replace_lines(db, job_id, lines)
        return Found(created)

    def list_services(self, job_id: int) -> List[JobService]:
        with self.session() as db:
            return list(db.scalars(
                select(JobService).where(JobService.job_id == job_id).order_by(JobService.id)
            ).all())

    def list(self, status: Optional[str] = None,
             technician_id: Optional[int] = None,
             customer_id: Optional[int] = None,
             start_date: Optional[datetime] = None,
             end_date: Optional[datetime] = None) -> List[Job]:
        """Jobs matching every given filter, earliest scheduled first."""
        query = select(Job)
        if status:
            query = query.where(Job.status == status)
        if technician_id is not None:
            query = query.where(Job.technician_id == technician_id)
        if customer_id is not None:
            query = query.where(Job.customer_id == customer_id)
        if start_date is not None:
            query = query.where(Job.scheduled_start_time >= start_date)
        if end_date is not None:
            query = query.where(Job.scheduled_start_time <= end_date)

        with self.session() as db:
            return list(db.scalars(query.order_by(Job.scheduled_start_time, Job.id)).all())


class JobServiceRepository(Repository[JobService]):
    model = JobService
    create_schema = JobServiceCreate
    update_schema = JobServiceUpdate
    entity_name = "Job service"

    def list(self, job_id: Optional[int] = None) -> List[JobService]:
        query = select(JobService).order_by(JobService.id)
        if job_id is not None:
            query = query.where(JobService.job_id == job_id)
        with self.session() as db:
            return list(db.scalars(query).all())
