import unittest

from detailpro.store import ConflictError, MissingReferenceError
from store_fixtures import StoreTestCase


class TestInvoiceGeneration(StoreTestCase):

    def setUp(self):
        super().setUp()
        self.customer = self.add_customer()
        self.vehicle = self.add_vehicle(self.customer)
        self.service = self.add_service(price=100.0)
        self.job = self.add_job(self.customer, self.vehicle, status="completed",
                                services=[{"service_id": self.service.id, "quantity": 2}])

    def test_amounts_come_from_line_items(self):
        invoice = self.store.invoices.generate_for_job(self.job.id)

        self.assertEqual(invoice.subtotal, 200.0)
        self.assertEqual(invoice.tax_rate, 0.0825)
        self.assertEqual(invoice.tax_amount, 16.5)
        self.assertEqual(invoice.total, 216.5)
        self.assertFalse(invoice.paid)
        self.assertEqual((invoice.due_date - invoice.issue_date).days, 15)

    def test_discount_and_custom_tax(self):
        invoice = self.store.invoices.generate_for_job(self.job.id, tax_rate=0.1, discount_amount=20.0)
        self.assertEqual(invoice.tax_amount, 20.0)
        self.assertEqual(invoice.total, 200.0)

    def test_invoice_numbers_are_sequential(self):
        other_job = self.add_job(self.customer, self.vehicle,
                                 services=[{"service_id": self.service.id}])

        first = self.store.invoices.generate_for_job(self.job.id)
        second = self.store.invoices.generate_for_job(other_job.id)

        self.assertEqual(first.invoice_number, "INV-10000")
        self.assertEqual(second.invoice_number, "INV-10001")
        self.assertEqual(self.store.invoices.get_by_number("INV-10001").value.id, second.id)

    def test_one_invoice_per_job(self):
        self.store.invoices.generate_for_job(self.job.id)
        with self.assertRaises(ConflictError):
            self.store.invoices.generate_for_job(self.job.id)
        self.assertEqual(len(self.store.invoices.list()), 1)

    def test_missing_job(self):
        with self.assertRaises(MissingReferenceError):
            self.store.invoices.generate_for_job(404)

    def test_creation_is_logged(self):
        invoice = self.store.invoices.generate_for_job(self.job.id)
        self.assertIn("invoice_created", self.activity_types())
        self.assertEqual(self.store.invoices.get_for_job(self.job.id).value.id, invoice.id)

    def test_list_by_customer(self):
        other = self.add_customer("Bob Rider")
        other_job = self.add_job(other, self.add_vehicle(other),
                                 services=[{"service_id": self.service.id}])
        self.store.invoices.generate_for_job(self.job.id)
        self.store.invoices.generate_for_job(other_job.id)

        invoices = self.store.invoices.list(customer_id=other.id)
        self.assertEqual([i.job_id for i in invoices], [other_job.id])


class TestPayments(StoreTestCase):

    def setUp(self):
        super().setUp()
        customer = self.add_customer()
        vehicle = self.add_vehicle(customer)
        service = self.add_service(price=100.0)
        job = self.add_job(customer, vehicle, services=[{"service_id": service.id, "quantity": 2}])
        self.invoice = self.store.invoices.generate_for_job(job.id)

    def pay(self, amount, method="cash"):
        return self.store.payments.create(
            {"invoice_id": self.invoice.id, "amount": amount, "method": method}
        )

    def current_invoice(self):
        return self.store.invoices.get(self.invoice.id).value

    def test_partial_payment_leaves_invoice_open(self):
        self.pay(100.0)
        invoice = self.current_invoice()
        self.assertFalse(invoice.paid)
        self.assertIsNone(invoice.paid_amount)

    def test_invoice_flips_to_paid_when_covered(self):
        self.pay(100.0)
        self.pay(116.5)

        invoice = self.current_invoice()
        self.assertTrue(invoice.paid)
        self.assertEqual(invoice.paid_amount, 216.5)
        self.assertIsNotNone(invoice.paid_date)

    def test_paid_happens_exactly_once(self):
        self.pay(216.5)
        paid_date = self.current_invoice().paid_date
        self.pay(50.0)

        invoice = self.current_invoice()
        self.assertTrue(invoice.paid)
        self.assertEqual(invoice.paid_amount, 216.5)
        self.assertEqual(invoice.paid_date, paid_date)
        self.assertEqual(self.activity_types().count("invoice_paid"), 1)
        self.assertEqual(self.activity_types().count("payment_received"), 2)

    def test_overpayment_records_full_sum(self):
        self.pay(300.0)
        self.assertEqual(self.current_invoice().paid_amount, 300.0)

    def test_payment_activity_carries_amount(self):
        self.pay(20.0, method="check")
        activity = next(a for a in self.store.activities.list_recent()
                        if a.type == "payment_received")
        self.assertEqual(activity.details, {"amount": 20.0, "method": "check"})
        self.assertEqual(activity.invoice_id, self.invoice.id)

    def test_payment_for_missing_invoice_is_rejected(self):
        with self.assertRaises(MissingReferenceError):
            self.store.payments.create({"invoice_id": 99, "amount": 10.0, "method": "cash"})
        self.assertEqual(self.store.payments.list(), [])

    def test_payments_are_listed_per_invoice(self):
        self.pay(10.0)
        self.pay(20.0)
        self.assertEqual([p.amount for p in self.store.payments.list(invoice_id=self.invoice.id)],
                         [10.0, 20.0])

    def test_manual_paid_flag_is_logged(self):
        self.store.invoices.update(self.invoice.id, {"paid": True, "paid_amount": 216.5})
        self.assertIn("invoice_paid", self.activity_types())


class TestCentAmounts(StoreTestCase):

    def test_split_payments_settle_a_cent_total(self):
        customer = self.add_customer()
        service = self.add_service(price=30.3)
        job = self.add_job(customer, self.add_vehicle(customer), services=[{"service_id": service.id}])
        invoice = self.store.invoices.generate_for_job(job.id, tax_rate=0.0)
        self.assertEqual(invoice.total, 30.3)

        for amount in (10.1, 20.2):
            self.store.payments.create({"invoice_id": invoice.id, "amount": amount, "method": "cash"})

        invoice = self.store.invoices.get(invoice.id).value
        self.assertTrue(invoice.paid)
        self.assertEqual(invoice.paid_amount, 30.3)


if __name__ == "__main__":
    unittest.main()
