"""
Job routes.
"""
from datetime import datetime
from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import List, Optional

from detailpro.dependencies import found_or_404, get_store, local_time
from detailpro.models.job import Job, JobStatus
from detailpro.schemas.customer import Customer as CustomerSchema, Vehicle as VehicleSchema
from detailpro.schemas.invoice import Invoice as InvoiceSchema, InvoiceGenerate
from detailpro.schemas.job import (
    Job as JobSchema, JobCreateRequest, JobDetail, JobServiceDetail, JobServiceLine,
    JobUpdateRequest,
)
from detailpro.schemas.user import UserSummary
from detailpro.store import Found, Store

router = APIRouter(prefix="/jobs", tags=["jobs"])


def build_job_detail(store: Store, job: Job) -> JobDetail:
    """Attach customer, vehicle, technician and priced services to a job."""
    lines = []
    for line in store.jobs.list_services(job.id):
        service = store.services.get(line.service_id)
        lines.append(JobServiceDetail(
            id=line.id,
            job_id=line.job_id,
            service_id=line.service_id,
            quantity=line.quantity,
            price=line.price,
            service_name=service.value.name if isinstance(service, Found) else "Unknown service",
        ))

    customer = store.customers.get(job.customer_id)
    vehicle = store.vehicles.get(job.vehicle_id)
    technician = store.users.get(job.technician_id) if job.technician_id else None

    return JobDetail(
        **JobSchema.model_validate(job).model_dump(),
        customer=CustomerSchema.model_validate(customer.value) if customer else None,
        vehicle=VehicleSchema.model_validate(vehicle.value) if vehicle else None,
        technician=UserSummary.model_validate(technician.value) if technician else None,
        services=lines,
    )


@router.get("/", response_model=List[JobDetail])
async def get_jobs(
    job_status: Optional[JobStatus] = Query(None, alias="status"),
    technician_id: Optional[int] = Query(None, alias="technicianId"),
    customer_id: Optional[int] = Query(None, alias="customerId"),
    start_date: Optional[datetime] = Query(None, alias="startDate"),
    end_date: Optional[datetime] = Query(None, alias="endDate"),
    store: Store = Depends(get_store)
):
    """
    Get jobs matching the given filters, earliest scheduled first.
    """
    jobs = store.jobs.list(
        status=job_status.value if job_status else None,
        technician_id=technician_id,
        customer_id=customer_id,
        start_date=local_time(start_date),
        end_date=local_time(end_date),
    )
    return [build_job_detail(store, job) for job in jobs]


@router.get("/{job_id}", response_model=JobDetail)
async def get_job(job_id: int, store: Store = Depends(get_store)):
    """
    Get a specific job with its related records.
    """
    return build_job_detail(store, found_or_404(store.jobs.get(job_id)))


@router.post("/", response_model=JobDetail, status_code=status.HTTP_201_CREATED)
async def create_job(job: JobCreateRequest, store: Store = Depends(get_store)):
    """
    Schedule a job for a customer's vehicle, with optional services.
    """
    found_or_404(store.customers.get(job.customer_id))
    found_or_404(store.vehicles.get(job.vehicle_id))

    created = store.jobs.create(job.model_dump(exclude={"services"}), services=job.services)
    return build_job_detail(store, created)


@router.put("/{job_id}", response_model=JobDetail)
async def update_job(
    job_id: int,
    job_update: JobUpdateRequest,
    store: Store = Depends(get_store)
):
    """
    Update a job. When ``services`` is given it replaces the line items.
    """
    updated = found_or_404(store.jobs.update(
        job_id,
        job_update.model_dump(exclude={"services"}, exclude_unset=True),
        services=job_update.services,
    ))
    return build_job_detail(store, updated)


@router.put("/{job_id}/services", response_model=List[JobServiceDetail])
async def replace_job_services(
    job_id: int,
    lines: List[JobServiceLine],
    store: Store = Depends(get_store)
):
    """
    Replace every line item of a job.
    """
    found_or_404(store.jobs.set_services(job_id, lines))
    return build_job_detail(store, found_or_404(store.jobs.get(job_id))).services


@router.delete("/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_job(job_id: int, store: Store = Depends(get_store)):
    """
    Delete a job.
    """
    if not store.jobs.delete(job_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Job not found"
        )


@router.get("/{job_id}/invoice", response_model=InvoiceSchema)
async def get_job_invoice(job_id: int, store: Store = Depends(get_store)):
    """
    Get the invoice issued for a job.
    """
    return found_or_404(store.invoices.get_for_job(job_id))


@router.post("/{job_id}/invoice", response_model=InvoiceSchema, status_code=status.HTTP_201_CREATED)
async def generate_job_invoice(
    job_id: int,
    options: Optional[InvoiceGenerate] = None,
    store: Store = Depends(get_store)
):
    """
    Issue an invoice for a job from its line items.
    """
    found_or_404(store.jobs.get(job_id))
    options = options or InvoiceGenerate()
    return store.invoices.generate_for_job(
        job_id,
        tax_rate=options.tax_rate,
        discount_amount=options.discount_amount,
        invoice_number=options.invoice_number,
        notes=options.notes,
    )
