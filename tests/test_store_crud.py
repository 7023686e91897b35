import unittest

from pydantic import ValidationError

from detailpro.store import ConflictError, Found, NotFound
from store_fixtures import StoreTestCase


class TestEntityCrud(StoreTestCase):

    def test_create_assigns_sequential_ids(self):
        first = self.add_customer("Ann Driver")
        second = self.add_customer("Bob Rider")
        self.assertEqual(first.id, 1)
        self.assertEqual(second.id, 2)
        self.assertIsNotNone(first.created_at)

    def test_ids_are_not_reused_after_delete(self):
        self.add_customer("Ann Driver")
        second = self.add_customer("Bob Rider")
        self.assertTrue(self.store.customers.delete(second.id))

        third = self.add_customer("Cy Cruiser")
        self.assertEqual(third.id, 3)

    def test_get_returns_found_or_not_found(self):
        customer = self.add_customer()

        result = self.store.customers.get(customer.id)
        self.assertIsInstance(result, Found)
        self.assertEqual(result.value.full_name, "Ann Driver")

        missing = self.store.customers.get(999)
        self.assertIsInstance(missing, NotFound)
        self.assertFalse(missing)
        self.assertEqual(missing.message, "Customer not found")

    def test_update_merges_only_given_fields(self):
        customer = self.add_customer(city="Anytown")

        result = self.store.customers.update(customer.id, {"notes": "Prefers mornings"})
        self.assertTrue(result)
        self.assertEqual(result.value.notes, "Prefers mornings")
        self.assertEqual(result.value.city, "Anytown")

    def test_update_of_missing_record_is_not_found(self):
        result = self.store.services.update(42, {"price": 10.0})
        self.assertIsInstance(result, NotFound)

    def test_update_rejects_fields_outside_whitelist(self):
        customer = self.add_customer()
        vehicle = self.add_vehicle(customer)

        with self.assertRaises(ValidationError):
            self.store.vehicles.update(vehicle.id, {"customer_id": 7})
        with self.assertRaises(ValidationError):
            self.store.customers.update(customer.id, {"id": 9})

        self.assertEqual(self.store.vehicles.get(vehicle.id).value.customer_id, customer.id)

    def test_update_rejects_null_for_required_fields(self):
        customer = self.add_customer()
        job = self.add_job(customer, self.add_vehicle(customer))

        with self.assertRaises(ValidationError):
            self.store.jobs.update(job.id, {"status": None})
        with self.assertRaises(ValidationError):
            self.store.customers.update(customer.id, {"full_name": None})

        self.assertEqual(self.store.jobs.get(job.id).value.status, "scheduled")

    def test_update_clears_optional_fields_with_null(self):
        customer = self.add_customer()
        job = self.add_job(customer, self.add_vehicle(customer), notes="Gate code 1234")

        job = self.store.jobs.update(job.id, {"notes": None}).value
        self.assertIsNone(job.notes)

    def test_stock_is_not_editable_directly(self):
        item = self.add_item(quantity=5)
        with self.assertRaises(ValidationError):
            self.store.inventory.update_item(item.id, {"quantity_in_stock": 50})

    def test_delete_missing_record_returns_false(self):
        self.assertFalse(self.store.vehicles.delete(5))

    def test_delete_does_not_cascade(self):
        customer = self.add_customer()
        vehicle = self.add_vehicle(customer)

        self.assertTrue(self.store.customers.delete(customer.id))
        self.assertTrue(self.store.vehicles.get(vehicle.id))

    def test_unique_username_conflicts(self):
        self.add_technician("john")
        with self.assertRaises(ConflictError):
            self.add_technician("john", email="other@detailpro.com")

    def test_users_cannot_be_deleted(self):
        user = self.add_technician()
        with self.assertRaises(TypeError):
            self.store.users.delete(user.id)

    def test_user_lookup_by_username_and_role(self):
        self.add_technician("john")
        self.add_technician("admin", email="admin@detailpro.com", role="admin")

        self.assertEqual(self.store.users.get_by_username("john").value.role, "technician")
        self.assertFalse(self.store.users.get_by_username("nobody"))
        self.assertEqual([u.username for u in self.store.users.list(role="admin")], ["admin"])


class TestCustomerListing(StoreTestCase):

    def setUp(self):
        super().setUp()
        for n in range(12):
            self.add_customer(f"Customer{n:02d} Person", phone_number=f"555-100-{n:04d}")
        self.add_customer("Sarah Chen", email="sarah@mail.detailpro.com", phone_number="555-222-3333")

    def test_pages_in_id_order(self):
        page = self.store.customers.list(page=2, page_size=5)
        self.assertEqual(page.total, 13)
        self.assertEqual([c.id for c in page.customers], [6, 7, 8, 9, 10])

    def test_last_page_is_partial(self):
        page = self.store.customers.list(page=3, page_size=5)
        self.assertEqual(len(page.customers), 3)

    def test_default_page_size(self):
        page = self.store.customers.list()
        self.assertEqual(len(page.customers), 10)

    def test_search_is_case_insensitive_on_name_and_email(self):
        by_name = self.store.customers.list(search="sarah CHEN")
        self.assertEqual(by_name.total, 1)
        by_email = self.store.customers.list(search="SARAH@MAIL")
        self.assertEqual(by_email.customers[0].full_name, "Sarah Chen")

    def test_search_matches_phone_substring(self):
        page = self.store.customers.list(search="222-33")
        self.assertEqual([c.full_name for c in page.customers], ["Sarah Chen"])


class TestJobs(StoreTestCase):

    def setUp(self):
        super().setUp()
        self.customer = self.add_customer()
        self.vehicle = self.add_vehicle(self.customer)
        self.wash = self.add_service("Exterior Detail", price=129.99)
        self.interior = self.add_service("Interior Detail", price=149.99)

    def test_line_items_take_catalog_price(self):
        job = self.add_job(self.customer, self.vehicle,
                           services=[{"service_id": self.wash.id, "quantity": 2}])

        lines = self.store.jobs.list_services(job.id)
        self.assertEqual(len(lines), 1)
        self.assertEqual(lines[0].price, 129.99)
        self.assertEqual(lines[0].quantity, 2)

    def test_booked_price_survives_catalog_change(self):
        job = self.add_job(self.customer, self.vehicle, services=[{"service_id": self.wash.id}])
        self.store.services.update(self.wash.id, {"price": 199.0})

        self.assertEqual(self.store.jobs.list_services(job.id)[0].price, 129.99)

    def test_update_with_services_replaces_lines(self):
        job = self.add_job(self.customer, self.vehicle, services=[{"service_id": self.wash.id}])

        self.store.jobs.update(job.id, {"notes": "Swap"}, services=[{"service_id": self.interior.id}])

        lines = self.store.jobs.list_services(job.id)
        self.assertEqual([line.service_id for line in lines], [self.interior.id])

    def test_unknown_services_are_skipped(self):
        job = self.add_job(self.customer, self.vehicle,
                           services=[{"service_id": 999}, {"service_id": self.wash.id}])
        self.assertEqual(len(self.store.jobs.list_services(job.id)), 1)

    def test_set_services_on_missing_job(self):
        self.assertIsInstance(self.store.jobs.set_services(77, []), NotFound)

    def test_customer_cannot_be_reassigned(self):
        job = self.add_job(self.customer, self.vehicle)
        with self.assertRaises(ValidationError):
            self.store.jobs.update(job.id, {"customer_id": 2})

    def test_list_filters_and_orders_by_start(self):
        tech = self.add_technician()
        later = self.add_job(self.customer, self.vehicle,
                             start=self.now.replace(hour=15), technician_id=tech.id)
        earlier = self.add_job(self.customer, self.vehicle, start=self.now.replace(hour=8))
        self.store.jobs.update(earlier.id, {"status": "cancelled"})

        self.assertEqual([j.id for j in self.store.jobs.list()], [earlier.id, later.id])
        self.assertEqual([j.id for j in self.store.jobs.list(technician_id=tech.id)], [later.id])
        self.assertEqual([j.id for j in self.store.jobs.list(status="cancelled")], [earlier.id])
        self.assertEqual(
            [j.id for j in self.store.jobs.list(start_date=self.now.replace(hour=12))],
            [later.id],
        )


if __name__ == "__main__":
    unittest.main()
