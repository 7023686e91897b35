import unittest

from detailpro.store import MissingReferenceError, NotFound
from store_fixtures import StoreTestCase


class TestSubscriptions(StoreTestCase):

    def setUp(self):
        super().setUp()
        self.customer = self.add_customer()
        self.basic = self.store.plans.create({"name": "Maintenance Club", "monthly_price": 79.99})
        self.premium = self.store.plans.create({"name": "Premium Care", "monthly_price": 199.99})

    def subscribe(self, plan, customer=None):
        customer = customer or self.customer
        return self.store.subscriptions.create({"customer_id": customer.id, "plan_id": plan.id})

    def test_new_subscription_is_active(self):
        subscription = self.subscribe(self.basic)
        self.assertEqual(subscription.status, "active")
        self.assertEqual(subscription.billing_cycle, "monthly")
        self.assertIsNone(subscription.canceled_at)
        self.assertIn("subscription_created", self.activity_types())

    def test_second_subscription_cancels_the_first(self):
        first = self.subscribe(self.basic)
        second = self.subscribe(self.premium)

        previous = self.store.subscriptions.get(first.id).value
        self.assertEqual(previous.status, "canceled")
        self.assertIsNotNone(previous.canceled_at)
        self.assertEqual(self.store.subscriptions.get_active(self.customer.id).value.id, second.id)
        self.assertEqual(len(self.store.subscriptions.list(status="active")), 1)
        self.assertIn("subscription_canceled", self.activity_types())

    def test_other_customers_are_untouched(self):
        other = self.add_customer("Bob Rider")
        theirs = self.subscribe(self.basic, customer=other)
        self.subscribe(self.basic)
        self.subscribe(self.premium)

        self.assertEqual(self.store.subscriptions.get(theirs.id).value.status, "active")

    def test_cancel_is_idempotent(self):
        subscription = self.subscribe(self.basic)

        canceled = self.store.subscriptions.cancel(subscription.id).value
        self.assertEqual(canceled.status, "canceled")
        self.store.subscriptions.cancel(subscription.id)

        self.assertEqual(self.activity_types().count("subscription_canceled"), 1)
        self.assertIsInstance(self.store.subscriptions.get_active(self.customer.id), NotFound)

    def test_cancel_missing(self):
        self.assertIsInstance(self.store.subscriptions.cancel(12), NotFound)

    def test_missing_customer_or_plan(self):
        with self.assertRaises(MissingReferenceError):
            self.store.subscriptions.create({"customer_id": 99, "plan_id": self.basic.id})
        with self.assertRaises(MissingReferenceError):
            self.store.subscriptions.create({"customer_id": self.customer.id, "plan_id": 99})
        self.assertEqual(self.store.subscriptions.list(), [])

    def test_inactive_subscription_does_not_replace_the_active_one(self):
        current = self.subscribe(self.basic)
        lapsed = self.store.subscriptions.create({
            "customer_id": self.customer.id, "plan_id": self.premium.id, "status": "canceled",
        })

        self.assertEqual(lapsed.status, "canceled")
        self.assertEqual(self.store.subscriptions.get(current.id).value.status, "active")
        self.assertEqual(self.store.subscriptions.get_active(self.customer.id).value.id, current.id)
        self.assertNotIn("subscription_canceled", self.activity_types())


class TestPlanDeletion(StoreTestCase):

    def setUp(self):
        super().setUp()
        self.customer = self.add_customer()
        self.plan = self.store.plans.create({"name": "Premium Care", "monthly_price": 199.99})

    def test_plan_with_active_subscription_is_kept(self):
        self.store.subscriptions.create({"customer_id": self.customer.id, "plan_id": self.plan.id})

        self.assertFalse(self.store.plans.delete(self.plan.id))
        self.assertTrue(self.store.plans.get(self.plan.id).value.active)

    def test_plan_with_only_history_is_retired(self):
        subscription = self.store.subscriptions.create(
            {"customer_id": self.customer.id, "plan_id": self.plan.id}
        )
        self.store.subscriptions.cancel(subscription.id)

        self.assertTrue(self.store.plans.delete(self.plan.id))
        self.assertFalse(self.store.plans.get(self.plan.id).value.active)
        self.assertEqual(self.store.plans.list(active=True), [])

    def test_unused_plan_is_removed(self):
        self.assertTrue(self.store.plans.delete(self.plan.id))
        self.assertIsInstance(self.store.plans.get(self.plan.id), NotFound)


if __name__ == "__main__":
    unittest.main()
