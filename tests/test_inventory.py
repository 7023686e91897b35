import unittest

from detailpro.store import InsufficientStockError, MissingReferenceError, NotFound
from store_fixtures import StoreTestCase


class TestStockLedger(StoreTestCase):

    def setUp(self):
        super().setUp()
        self.item = self.add_item(quantity=5)

    def move(self, type, quantity, **fields):
        data = {"inventory_item_id": self.item.id, "type": type, "quantity": quantity}
        data.update(fields)
        return self.store.inventory.create_transaction(data)

    def stock(self):
        return self.store.inventory.get_item(self.item.id).value.quantity_in_stock

    def test_in_and_return_add(self):
        self.move("in", 3)
        self.move("return", 2)
        self.assertEqual(self.stock(), 10)

    def test_out_subtracts(self):
        self.move("out", 5)
        self.assertEqual(self.stock(), 0)

    def test_out_beyond_stock_is_rejected_without_changes(self):
        with self.assertRaises(InsufficientStockError) as ctx:
            self.move("out", 6)

        self.assertEqual(ctx.exception.requested, 6)
        self.assertEqual(ctx.exception.available, 5)
        self.assertIn("Ceramic Kit", str(ctx.exception))
        self.assertEqual(self.stock(), 5)
        self.assertEqual(self.store.inventory.list_transactions(), [])
        self.assertNotIn("inventory_transaction", self.activity_types())

    def test_adjustment_overwrites_stock(self):
        self.move("in", 10)
        self.move("adjustment", 42)
        self.assertEqual(self.stock(), 42)

        self.move("adjustment", 0)
        self.assertEqual(self.stock(), 0)

    def test_restock_stamps_last_restocked(self):
        self.assertIsNone(self.store.inventory.get_item(self.item.id).value.last_restocked)
        txn = self.move("in", 1)
        self.assertEqual(self.store.inventory.get_item(self.item.id).value.last_restocked, txn.date)

    def test_unknown_item(self):
        with self.assertRaises(MissingReferenceError):
            self.store.inventory.create_transaction(
                {"inventory_item_id": 99, "type": "in", "quantity": 1}
            )

    def test_activity_describes_movement(self):
        tech = self.add_technician()
        self.move("out", 2, user_id=tech.id)

        activity = self.store.activities.list_recent(limit=1)[0]
        self.assertEqual(activity.type, "inventory_transaction")
        self.assertEqual(activity.description, "Terry Tech checked out 2 x Ceramic Kit")
        self.assertEqual(activity.details["stock_before"], 5)
        self.assertEqual(activity.details["stock_after"], 3)

    def test_list_transactions_filters(self):
        tech = self.add_technician()
        self.move("in", 4)
        self.move("out", 1, user_id=tech.id)

        self.assertEqual(len(self.store.inventory.list_transactions(item_id=self.item.id)), 2)
        self.assertEqual([t.type for t in self.store.inventory.list_transactions(user_id=tech.id)],
                         ["out"])
        self.assertEqual(len(self.store.inventory.list_transactions(type="in")), 1)


class TestItemLifecycle(StoreTestCase):

    def test_item_without_history_is_removed(self):
        item = self.add_item()
        self.assertTrue(self.store.inventory.delete_item(item.id))
        self.assertIsInstance(self.store.inventory.get_item(item.id), NotFound)

    def test_item_with_history_is_deactivated(self):
        item = self.add_item()
        self.store.inventory.create_transaction(
            {"inventory_item_id": item.id, "type": "in", "quantity": 1}
        )

        self.assertTrue(self.store.inventory.delete_item(item.id))
        remaining = self.store.inventory.get_item(item.id).value
        self.assertFalse(remaining.is_active)

    def test_list_items_filters(self):
        self.add_item("A-1", quantity=1, category="supplies")
        self.add_item("B-2", quantity=10, category="supplies")
        self.add_item("C-3", quantity=0, category="coatings", is_active=False)

        self.assertEqual(len(self.store.inventory.list_items(category="supplies")), 2)
        self.assertEqual([i.sku for i in self.store.inventory.list_items(low_stock=True)],
                         ["A-1", "C-3"])
        self.assertEqual([i.sku for i in self.store.reports.low_stock_items()], ["A-1"])


class TestTechnicianHoldings(StoreTestCase):

    def test_net_out_minus_return(self):
        tech = self.add_technician()
        other = self.add_technician("other", email="other@detailpro.com")
        kit = self.add_item("CC-001", quantity=10)
        towels = self.add_item("MF-012", quantity=10, name="Towels")

        for data in [
            {"inventory_item_id": kit.id, "type": "out", "quantity": 3, "user_id": tech.id},
            {"inventory_item_id": kit.id, "type": "return", "quantity": 1, "user_id": tech.id},
            {"inventory_item_id": towels.id, "type": "out", "quantity": 2, "user_id": tech.id},
            {"inventory_item_id": towels.id, "type": "return", "quantity": 2, "user_id": tech.id},
            {"inventory_item_id": towels.id, "type": "out", "quantity": 4, "user_id": other.id},
        ]:
            self.store.inventory.create_transaction(data)

        holdings = self.store.reports.technician_holdings(tech.id)
        self.assertEqual(len(holdings), 1)
        self.assertEqual(holdings[0].inventory_item_id, kit.id)
        self.assertEqual(holdings[0].quantity, 2)
        self.assertEqual(holdings[0].sku, "CC-001")

    def test_no_transactions(self):
        self.assertEqual(self.store.reports.technician_holdings(1), [])


if __name__ == "__main__":
    unittest.main()
