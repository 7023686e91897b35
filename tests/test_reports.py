import unittest
from datetime import timedelta

from store_fixtures import StoreTestCase


class TestRevenueScenario(StoreTestCase):
    """One completed job: two units of a $100 service, taxed at 8.25% and paid in full."""

    def setUp(self):
        super().setUp()
        self.start = self.now - timedelta(days=1)
        self.end = self.now + timedelta(days=1)

        customer = self.add_customer()
        vehicle = self.add_vehicle(customer)
        self.service = self.add_service("Full Detail", price=100.0)
        job = self.add_job(customer, vehicle, status="completed",
                           services=[{"service_id": self.service.id, "quantity": 2}])

        self.invoice = self.store.invoices.generate_for_job(job.id, tax_rate=0.0825)
        self.store.payments.create({"invoice_id": self.invoice.id, "amount": 216.5, "method": "cash"})

    def test_invoice_is_settled(self):
        invoice = self.store.invoices.get(self.invoice.id).value
        self.assertEqual(invoice.total, 216.5)
        self.assertTrue(invoice.paid)
        self.assertEqual(invoice.paid_amount, 216.5)

    def test_revenue_stats(self):
        stats = self.store.reports.revenue_stats(self.start, self.end)
        self.assertEqual(stats.total_revenue, 216.5)
        self.assertEqual(stats.jobs_completed, 1)
        self.assertEqual(stats.new_customers, 1)
        self.assertEqual(stats.avg_job_value, 216.5)

    def test_top_services(self):
        top = self.store.reports.top_services(self.start, self.end, 5)
        self.assertEqual(len(top), 1)
        self.assertEqual(top[0].service_id, self.service.id)
        self.assertEqual(top[0].service_name, "Full Detail")
        self.assertEqual(top[0].revenue, 200.0)
        self.assertEqual(top[0].count, 2)

    def test_window_outside_the_job(self):
        stats = self.store.reports.revenue_stats(self.now + timedelta(days=5), self.now + timedelta(days=6))
        self.assertEqual(stats.total_revenue, 0.0)
        self.assertEqual(stats.jobs_completed, 0)
        self.assertEqual(stats.avg_job_value, 0.0)
        self.assertEqual(self.store.reports.top_services(self.now + timedelta(days=5),
                                                         self.now + timedelta(days=6)), [])


class TestAggregates(StoreTestCase):

    def setUp(self):
        super().setUp()
        self.start = self.now - timedelta(days=1)
        self.end = self.now + timedelta(days=1)
        self.customer = self.add_customer()
        self.vehicle = self.add_vehicle(self.customer)

    def test_empty_store_averages_to_zero(self):
        stats = self.store.reports.revenue_stats(self.start, self.end)
        self.assertEqual(stats.jobs_completed, 0)
        self.assertEqual(stats.avg_job_value, 0)

    def test_unpaid_invoices_do_not_count_as_revenue(self):
        service = self.add_service(price=50.0)
        job = self.add_job(self.customer, self.vehicle, status="completed",
                           services=[{"service_id": service.id}])
        self.store.invoices.generate_for_job(job.id, tax_rate=0.0)

        stats = self.store.reports.revenue_stats(self.start, self.end)
        self.assertEqual(stats.jobs_completed, 1)
        self.assertEqual(stats.total_revenue, 0.0)
        self.assertEqual(stats.avg_job_value, 0.0)

    def test_only_completed_jobs_count(self):
        service = self.add_service(price=80.0)
        self.add_job(self.customer, self.vehicle, status="scheduled",
                     services=[{"service_id": service.id}])
        self.assertEqual(self.store.reports.top_services(self.start, self.end), [])

    def test_top_services_sorted_by_revenue_and_limited(self):
        cheap = self.add_service("Exterior Detail", price=129.99)
        pricey = self.add_service("Ceramic Coating", price=599.99)
        middle = self.add_service("Interior Detail", price=149.99)

        self.add_job(self.customer, self.vehicle, status="completed",
                     services=[{"service_id": cheap.id, "quantity": 3}, {"service_id": pricey.id}])
        self.add_job(self.customer, self.vehicle, status="completed",
                     services=[{"service_id": middle.id}, {"service_id": cheap.id}])

        top = self.store.reports.top_services(self.start, self.end, limit=2)
        self.assertEqual([s.service_id for s in top], [pricey.id, cheap.id])
        self.assertEqual(top[1].count, 4)
        self.assertEqual(top[1].revenue, round(129.99 * 4, 2))

    def test_ties_prefer_higher_count(self):
        single = self.add_service("Single", price=100.0)
        double = self.add_service("Double", price=50.0)
        self.add_job(self.customer, self.vehicle, status="completed",
                     services=[{"service_id": single.id}, {"service_id": double.id, "quantity": 2}])

        top = self.store.reports.top_services(self.start, self.end)
        self.assertEqual([s.service_id for s in top], [double.id, single.id])

    def test_new_customers_counted_by_creation(self):
        self.add_customer("Bob Rider")
        stats = self.store.reports.revenue_stats(self.start, self.end)
        self.assertEqual(stats.new_customers, 2)

        later = self.store.reports.revenue_stats(self.end, self.end + timedelta(days=1))
        self.assertEqual(later.new_customers, 0)


if __name__ == "__main__":
    unittest.main()
