"""
Tests for the catalog, customer, address, discount and receipt models
"""
import unittest
from datetime import date, timedelta
from typing import Optional, get_type_hints

from models.address import Address
from models.customer import Customer
from models.discount import Discount
from models.exceptions import (
    InvalidDeliveryAddressError,
    InvalidDiscountError,
    InvalidPizzaSizeError,
    InvalidPriceError,
    PizzeriaError,
    ValidationError,
)
from models.order import Order
from models.payment import Payment, PaymentDetails, PaymentMethod
from models.product import Pizza, PizzaSize, Product
from models.receipt import Receipt


class TestProduct(unittest.TestCase):
    """Test cases for Product and Pizza"""

    def test_price_must_be_positive(self):
        for price in (0, -10.0, None):
            with self.subTest(price=price):
                with self.assertRaises(InvalidPriceError):
                    Product("Cola", price)

    def test_product_discount(self):
        product = Product("Cola", 200.0)
        product.apply_discount(25)

        self.assertAlmostEqual(product.get_final_price(), 150.0)
        self.assertEqual(product.to_dict()["final_price"], 150.0)

    def test_pizza_price_by_size(self):
        expected = {
            PizzaSize.SMALL: 400.0,
            PizzaSize.MEDIUM: 600.0,
            PizzaSize.LARGE: 800.0,
            PizzaSize.EXTRA_LARGE: 1000.0,
        }
        for size, price in expected.items():
            with self.subTest(size=size):
                self.assertAlmostEqual(Pizza("Pepperoni", 400.0, size=size).get_final_price(), price)

    def test_pizza_default_size_and_dict(self):
        pizza = Pizza("Pepperoni", 400.0)

        self.assertEqual(pizza.size, PizzaSize.MEDIUM)
        self.assertEqual(pizza.to_dict()["size"], "medium")

    def test_pizza_size_required(self):
        with self.assertRaises(InvalidPizzaSizeError):
            Pizza("Pepperoni", 400.0, size=None)

    def test_errors_share_base(self):
        self.assertTrue(issubclass(InvalidPriceError, ValidationError))
        self.assertTrue(issubclass(ValidationError, PizzeriaError))


class TestCustomer(unittest.TestCase):
    """Test cases for Customer"""

    def test_order_history_and_vip(self):
        customer = Customer("CUST-1", "Maria", "Kuznetsova")

        for n in range(10):
            customer.add_to_order_history(f"ORD-{n}")
        self.assertEqual(customer.total_orders, 10)
        self.assertFalse(customer.is_vip())

        customer.add_to_order_history("ORD-10")
        self.assertTrue(customer.is_vip())
        self.assertEqual(customer.get_full_name(), "Maria Kuznetsova")


class TestAddress(unittest.TestCase):
    """Test cases for Address"""

    def test_required_fields(self):
        with self.assertRaises(InvalidDeliveryAddressError):
            Address("", "1", "City")
        with self.assertRaises(InvalidDeliveryAddressError):
            Address("Street", "  ", "City")
        with self.assertRaises(InvalidDeliveryAddressError):
            Address("Street", "1", None)

    def test_distance(self):
        origin = Address("A", "1", "City", latitude=0.0, longitude=0.0)
        target = Address("B", "2", "City", latitude=3.0, longitude=4.0)

        self.assertAlmostEqual(origin.calculate_distance(target), 555.0)

    def test_str(self):
        address = Address("Main St", "12", "Springfield", postal_code="12345", apartment_number="7")

        self.assertEqual(str(address), "Main St 12, apt. 7, Springfield, 12345")


class TestDiscount(unittest.TestCase):
    """Test cases for Discount"""

    def test_percentage_range(self):
        for percentage in (-1, 101):
            with self.subTest(percentage=percentage):
                with self.assertRaises(InvalidDiscountError):
                    Discount("BAD", percentage)

        discount = Discount("OK", 0)
        with self.assertRaises(InvalidDiscountError):
            discount.apply_discount(150)
        discount.apply_discount(100)
        self.assertEqual(discount.percentage, 100)

    def test_validity_window(self):
        discount = Discount("PIZZA10", 10)

        self.assertEqual(discount.end_date, discount.start_date + timedelta(days=30))
        self.assertTrue(discount.is_applicable())
        self.assertFalse(discount.is_applicable(date.today() + timedelta(days=31)))

        discount.active = False
        self.assertFalse(discount.is_applicable())

    def test_optional_fields_are_annotated_optional(self):
        self.assertEqual(get_type_hints(Discount)["end_date"], Optional[date])
        self.assertEqual(get_type_hints(Payment)["details"], Optional[PaymentDetails])


        discount = Discount("ONCE", 10, usage_limit=1)

        self.assertTrue(discount.use())
        self.assertFalse(discount.use())
        self.assertEqual(discount.times_used, 1)

    def test_code_is_case_insensitive(self):
        discount = Discount("PIZZA10", 10)

        self.assertTrue(discount.validate_code("pizza10"))
        self.assertFalse(discount.validate_code("PIZZA20"))
        self.assertFalse(discount.validate_code(None))


class TestReceipt(unittest.TestCase):
    """Test cases for Receipt"""

    def test_render(self):
        order = Order(order_id="ORD-1", customer=Customer("CUST-1", "Maria", "Kuznetsova"))
        order.add_item(Product("Margherita", 500.0), 2)
        order.apply_discount(10)
        order.set_delivery_address(Address("Main St", "12", "Springfield", latitude=1.0))
        receipt = Receipt("RCP-1", order, Payment("CASH-1", 990.0, PaymentMethod.CASH))

        text = receipt.render()

        self.assertIn("RECEIPT RCP-1", text)
        self.assertIn("Customer: Maria Kuznetsova", text)
        self.assertIn("Margherita x2 - 1000.00", text)
        self.assertIn("Discount: 10%", text)
        self.assertIn("Delivery: 100.00", text)
        self.assertIn("TOTAL: 990.00", text)
        self.assertIn("Paid by: cash", text)

    def test_receipt_is_immutable(self):
        order = Order(order_id="ORD-1", customer=None)
        receipt = Receipt("RCP-1", order, Payment("CASH-1", 1.0, PaymentMethod.CASH))

        with self.assertRaises(AttributeError):
            receipt.receipt_number = "RCP-2"


if __name__ == '__main__':
    unittest.main()
