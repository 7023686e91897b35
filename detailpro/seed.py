"""
Demo data loaded into a fresh store at startup.
"""
import logging
import random
from datetime import datetime, timedelta

from detailpro.store import Store

logger = logging.getLogger(__name__)

DEMO_SEED = 1337


def _at(day: datetime, hour: int, minute: int = 0) -> datetime:
    return day.replace(hour=hour, minute=minute, second=0, microsecond=0)


def seed_demo_data(store: Store) -> None:
    """
    Populate an empty store with staff, catalogue, customers, today's
    schedule and a month of paid history. Does nothing if users exist.
    """
    if store.users.list():
        logger.info("Store already has data; skipping demo seed")
        return

    rng = random.Random(DEMO_SEED)
    now = datetime.now()

    # Staff
    store.users.create({
        "username": "admin",
        "password": "password",
        "email": "admin@detailpro.com",
        "full_name": "Mike Johnson",
        "role": "admin",
        "phone_number": "555-123-4567",
    })
    john = store.users.create({
        "username": "john",
        "password": "password",
        "email": "john@detailpro.com",
        "full_name": "John Smith",
        "role": "technician",
        "phone_number": "555-987-6543",
    })

    # Service catalogue
    full_detail = store.services.create({
        "name": "Full Detail",
        "description": "Complete interior and exterior detailing service",
        "price": 249.99, "duration": 240, "color": "#3b82f6",
    })
    ceramic = store.services.create({
        "name": "Ceramic Coating",
        "description": "Professional ceramic coating application",
        "price": 599.99, "duration": 360, "color": "#f97316",
    })
    interior = store.services.create({
        "name": "Interior Detail",
        "description": "Complete interior cleaning and detailing",
        "price": 149.99, "duration": 120, "color": "#10b981",
    })
    exterior = store.services.create({
        "name": "Exterior Detail",
        "description": "Wash, clay bar, polish, and wax",
        "price": 129.99, "duration": 120, "color": "#f59e0b",
    })
    catalogue = [full_detail, ceramic, interior, exterior]

    # Customers and their vehicles
    james = store.customers.create({
        "full_name": "James Wilson", "email": "james@example.com",
        "phone_number": "555-111-2222", "address": "1234 Main St",
        "city": "Anytown", "state": "CA", "zip_code": "90210",
        "notes": "VIP customer, prefers weekend appointments", "tags": ["VIP"],
    })
    sarah = store.customers.create({
        "full_name": "Sarah Chen", "email": "sarah@example.com",
        "phone_number": "555-222-3333", "address": "4567 Oak Ave",
        "city": "Anytown", "state": "CA", "zip_code": "90211",
        "notes": "Prefers text message communication", "tags": ["Auto"],
    })
    mark = store.customers.create({
        "full_name": "Mark Johnson", "email": "mark@example.com",
        "phone_number": "555-333-4444", "address": "7890 Pine St",
        "city": "Anytown", "state": "CA", "zip_code": "90212",
        "notes": "Has a large dog that sheds a lot", "tags": ["Auto"],
    })

    tesla = store.vehicles.create({
        "customer_id": james.id, "type": "car", "make": "Tesla", "model": "Model 3",
        "year": 2022, "color": "White", "license_plate": "EV123CA",
        "vin": "5YJ3E1EA1LF123456", "notes": "Dual motor version",
    })
    civic = store.vehicles.create({
        "customer_id": sarah.id, "type": "car", "make": "Honda", "model": "Civic",
        "year": 2020, "color": "Silver", "license_plate": "ABC789",
        "vin": "1HGBH41JXMN109876", "notes": "Leather interior",
    })
    f150 = store.vehicles.create({
        "customer_id": mark.id, "type": "truck", "make": "Ford", "model": "F-150",
        "year": 2019, "color": "Black", "license_plate": "TRK456",
        "vin": "1FTEW1E5XJFD12345", "notes": "King Ranch edition",
    })
    vehicle_of = {james.id: tesla.id, sarah.id: civic.id, mark.id: f150.id}

    def on_site(customer):
        return {
            "address": customer.address, "city": customer.city,
            "state": customer.state, "zip_code": customer.zip_code,
        }

    # Today's schedule
    james_job = store.jobs.create({
        "customer_id": james.id, "vehicle_id": tesla.id, "technician_id": john.id,
        "scheduled_start_time": _at(now, 9), "scheduled_end_time": _at(now, 11),
        "status": "in_progress", "notes": "Customer requested special attention to wheels",
        **on_site(james),
    }, services=[{"service_id": full_detail.id}, {"service_id": ceramic.id}])
    sarah_job = store.jobs.create({
        "customer_id": sarah.id, "vehicle_id": civic.id, "technician_id": john.id,
        "scheduled_start_time": _at(now, 13, 30), "scheduled_end_time": _at(now, 15),
        "notes": "Customer requested extra attention to floor mats",
        **on_site(sarah),
    }, services=[{"service_id": interior.id}])
    store.jobs.create({
        "customer_id": mark.id, "vehicle_id": f150.id, "technician_id": john.id,
        "scheduled_start_time": _at(now, 16), "scheduled_end_time": _at(now, 17, 30),
        "notes": "Truck is lifted, may need extra time",
        **on_site(mark),
    }, services=[{"service_id": exterior.id}])

    # A month of completed, invoiced and paid jobs
    last_month_end = now.replace(day=1) - timedelta(days=1)
    last_month_start = last_month_end.replace(day=1)
    span = (last_month_end - last_month_start).total_seconds()

    for _ in range(30):
        job_date = last_month_start + timedelta(seconds=rng.random() * span)
        start = _at(job_date, 9 + rng.randrange(8))
        if rng.random() > 0.3:
            customer = james
        else:
            customer = sarah if rng.random() > 0.5 else mark

        lines = [rng.choice(catalogue)]
        if rng.random() > 0.7:
            lines.append(rng.choice([s for s in catalogue if s.id != lines[0].id]))

        job = store.jobs.create({
            "customer_id": customer.id, "vehicle_id": vehicle_of[customer.id],
            "technician_id": john.id,
            "scheduled_start_time": start, "scheduled_end_time": start + timedelta(hours=2),
            "address": "123 Service St", "city": "Anytown", "state": "CA", "zip_code": "90210",
            "status": "completed", "notes": "Completed job",
        }, services=[{"service_id": service.id} for service in lines])

        invoice = store.invoices.generate_for_job(job.id)
        method = "credit_card" if rng.random() > 0.6 else rng.choice(["cash", "check"])
        store.payments.create({
            "invoice_id": invoice.id,
            "amount": invoice.total,
            "method": method,
            "transaction_id": f"txn_{rng.getrandbits(32):08x}" if method == "credit_card" else None,
            "date": start,
        })

    # Reviews
    store.reviews.create({
        "customer_id": james.id, "job_id": james_job.id, "rating": 5,
        "comment": "Absolutely blown away by the ceramic coating job. "
                   "My car looks better than when I bought it! Will definitely be back.",
        "date": now - timedelta(days=2), "source": "google",
    })
    store.reviews.create({
        "customer_id": sarah.id, "job_id": sarah_job.id, "rating": 5,
        "comment": "Great service! The interior of my car looks and smells brand new. "
                   "The team was professional and on time.",
        "date": now - timedelta(days=7), "source": "google",
    })

    # Memberships
    store.plans.create({
        "name": "Maintenance Club",
        "description": "Monthly exterior detail and quick interior refresh",
        "monthly_price": 79.99, "annual_price": 799.0,
        "features": ["1 exterior detail per month", "Interior vacuum", "10% off add-ons"],
    })
    premium = store.plans.create({
        "name": "Premium Care",
        "description": "Monthly full detail with priority scheduling",
        "monthly_price": 199.99, "annual_price": 1999.0,
        "features": ["1 full detail per month", "Priority scheduling", "20% off ceramic coating"],
    })
    store.subscriptions.create({"customer_id": james.id, "plan_id": premium.id})

    # Inventory
    items = [
        {"name": "Ceramic Coating Kit", "sku": "CC-001", "category": "coatings",
         "unit_price": 89.99, "cost_price": 45.0, "quantity_in_stock": 12, "min_stock_level": 4},
        {"name": "Microfiber Towels (12 pack)", "sku": "MF-012", "category": "supplies",
         "unit_price": 24.99, "cost_price": 9.5, "quantity_in_stock": 40, "min_stock_level": 10},
        {"name": "Clay Bar", "sku": "CB-100", "category": "supplies",
         "unit_price": 14.99, "cost_price": 5.25, "quantity_in_stock": 3, "min_stock_level": 5},
        {"name": "Leather Conditioner", "sku": "LC-250", "category": "chemicals",
         "unit_price": 19.99, "cost_price": 7.8, "quantity_in_stock": 18, "min_stock_level": 6},
    ]
    coating_kit = store.inventory.create_item(items[0])
    for item in items[1:]:
        store.inventory.create_item(item)

    store.inventory.create_transaction({
        "inventory_item_id": coating_kit.id, "quantity": 2, "type": "out", "user_id": john.id,
        "job_id": james_job.id, "reason": "Ceramic coating job",
    })

    logger.info("Seeded demo data: %d customers, %d jobs",
                store.customers.list().total, len(store.jobs.list()))
