"""
Tests for the Order aggregate and its financial calculations
"""
import unittest

from models.address import Address
from models.customer import Customer
from models.exceptions import InvalidDeliveryAddressError
from models.order import Order, OrderItem, OrderStatus
from models.product import Product


def make_address(distance: float) -> Address:
    return Address(street="Main Street", house_number="10", city="Springfield", latitude=distance)


class TestOrder(unittest.TestCase):
    """Test cases for Order"""

    def setUp(self):
        self.customer = Customer("CUST-1", "Ivan", "Petrov")
        self.order = Order(order_id="ORD-1", customer=self.customer)
        self.pizza = Product("Margherita", 500.0)
        self.drink = Product("Cola", 120.0)

    def test_new_order_defaults(self):
        self.assertEqual(self.order.status, OrderStatus.PENDING)
        self.assertFalse(self.order.is_paid())
        self.assertEqual(self.order.items, [])
        self.assertIsNone(self.order.get_delivery_address())
        self.assertIsNotNone(self.order.order_time)

    def test_empty_order_price_is_zero(self):
        self.assertEqual(self.order.get_price(), 0.0)
        self.assertEqual(self.order.get_final_price(), 0.0)

    def test_final_price_without_delivery_or_discount_is_sum_of_items(self):
        self.order.add_item(self.pizza, 2)
        self.order.add_item(self.drink, 3)

        self.assertAlmostEqual(self.order.get_price(), 500.0 * 2 + 120.0 * 3)
        self.assertAlmostEqual(self.order.get_final_price(), 1360.0)

    def test_total_items_sums_quantities(self):
        self.order.add_item(self.pizza, 2)
        self.order.add_item(self.drink, 3)

        self.assertEqual(self.order.get_total_items(), 5)

    def test_add_item_accepts_non_positive_quantity(self):
        self.order.add_item(self.pizza, 0)
        self.order.add_item(self.pizza, -1)

        self.assertEqual(len(self.order.items), 2)
        self.assertAlmostEqual(self.order.get_price(), -500.0)

    def test_add_item_accepts_missing_product(self):
        item = self.order.add_item(None, 1)

        self.assertIsNone(item.product)
        self.assertEqual(len(self.order.items), 1)

    def test_remove_item(self):
        item = self.order.add_item(self.pizza, 1)
        self.order.add_item(self.drink, 1)

        self.order.remove_item(item)

        self.assertEqual(len(self.order.items), 1)
        self.assertEqual(self.order.items[0].product, self.drink)

    def test_remove_unknown_item_is_noop(self):
        self.order.add_item(self.pizza, 1)

        self.order.remove_item(OrderItem(self.drink, 5))

        self.assertEqual(len(self.order.items), 1)

    def test_apply_discount_is_not_range_checked(self):
        self.order.add_item(self.pizza, 2)

        self.order.apply_discount(10)
        self.assertAlmostEqual(self.order.get_final_price(), 900.0)

        self.order.apply_discount(-10)
        self.assertAlmostEqual(self.order.get_final_price(), 1100.0)

        self.order.apply_discount(150)
        self.assertAlmostEqual(self.order.get_final_price(), -500.0)

    def test_pickup_order_has_no_delivery_cost_or_time(self):
        self.assertEqual(self.order.calculate_delivery_cost(), 0)
        self.assertEqual(self.order.calculate_delivery_time(), 0)

    def test_delivery_cost_tiers(self):
        expectations = [(2.0, 100), (3.0, 150), (4.0, 150), (5.0, 200), (6.0, 200)]
        for distance, cost in expectations:
            with self.subTest(distance=distance):
                self.order.set_delivery_address(make_address(distance))
                self.assertEqual(self.order.calculate_delivery_cost(), cost)

    def test_delivery_time_grows_with_distance(self):
        self.order.set_delivery_address(make_address(2.5))
        self.assertEqual(self.order.calculate_delivery_time(), 42)

        self.order.set_delivery_address(make_address(4.0))
        self.assertEqual(self.order.calculate_delivery_time(), 50)

    def test_final_price_includes_delivery_and_discount(self):
        self.order.add_item(self.pizza, 2)
        self.order.set_delivery_address(make_address(6.0))
        self.order.apply_discount(10)

        self.assertAlmostEqual(self.order.get_final_price(), (1000.0 + 200.0) * 0.9)

    def test_set_delivery_address_rejects_none(self):
        with self.assertRaises(InvalidDeliveryAddressError):
            self.order.set_delivery_address(None)

    def test_clear_delivery_address_switches_to_pickup(self):
        self.order.set_delivery_address(make_address(6.0))
        self.order.clear_delivery_address()

        self.assertEqual(self.order.calculate_delivery_cost(), 0)

    def test_process_payment_with_sufficient_amount(self):
        self.order.add_item(self.pizza, 2)

        self.assertTrue(self.order.process_payment(1000.0))
        self.assertTrue(self.order.is_paid())
        self.assertEqual(self.order.status, OrderStatus.CONFIRMED)

    def test_process_payment_with_insufficient_amount(self):
        self.order.add_item(self.pizza, 2)

        self.assertFalse(self.order.process_payment(999.99))
        self.assertFalse(self.order.process_payment(0))
        self.assertFalse(self.order.process_payment(-5))
        self.assertFalse(self.order.is_paid())
        self.assertEqual(self.order.status, OrderStatus.PENDING)

    def test_update_status_accepts_any_transition(self):
        self.order.update_status(OrderStatus.DELIVERED)
        self.assertEqual(self.order.status, OrderStatus.DELIVERED)

        self.order.update_status(OrderStatus.PENDING)
        self.assertEqual(self.order.status, OrderStatus.PENDING)

        self.order.update_status(OrderStatus.CANCELLED)
        self.order.update_status(OrderStatus.IN_PROGRESS)
        self.assertEqual(self.order.status, OrderStatus.IN_PROGRESS)

    def test_to_dict(self):
        self.order.add_item(self.pizza, 1)
        data = self.order.to_dict()

        self.assertEqual(data["order_id"], "ORD-1")
        self.assertEqual(data["customer_name"], "Ivan Petrov")
        self.assertEqual(data["status"], "pending")
        self.assertEqual(data["total_items"], 1)
        self.assertFalse(data["delivery"])


class TestOrderItem(unittest.TestCase):
    """Test cases for OrderItem"""

    def setUp(self):
        self.product = Product("Pepperoni", 400.0)

    def test_total_price_uses_product_final_price(self):
        self.product.apply_discount(25)
        item = OrderItem(self.product, 2)

        self.assertAlmostEqual(item.total_price, 600.0)

    def test_increase_and_decrease_quantity(self):
        item = OrderItem(self.product, 2)

        item.increase_quantity(3)
        self.assertEqual(item.quantity, 5)

        item.decrease_quantity(4)
        self.assertEqual(item.quantity, 1)

    def test_decrease_below_zero_is_ignored(self):
        item = OrderItem(self.product, 2)

        item.decrease_quantity(3)

        self.assertEqual(item.quantity, 2)


if __name__ == '__main__':
    unittest.main()
