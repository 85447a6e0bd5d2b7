"""
Pricing strategies - quote an order total without touching the order
"""
from abc import ABC, abstractmethod

from models.order import Order


class PricingStrategy(ABC):
    """Computes a total price from an order's base price and delivery cost"""

    @abstractmethod
    def calculate_price(self, order: Order) -> float:
        ...

    @staticmethod
    def _subtotal(order: Order) -> float:
        return order.get_price() + order.calculate_delivery_cost()


class StandardPricingStrategy(PricingStrategy):
    """Base price plus delivery"""

    def calculate_price(self, order: Order) -> float:
        return self._subtotal(order)

    def __repr__(self) -> str:
        return "StandardPricingStrategy()"


class DiscountPricingStrategy(PricingStrategy):
    """Percentage off the base price plus delivery.

    The percentage is not range checked, matching Order.apply_discount.
    """

    def __init__(self, discount_percentage: float):
        self.discount_percentage = discount_percentage

    def calculate_price(self, order: Order) -> float:
        return self._subtotal(order) * (1 - self.discount_percentage / 100.0)

    def __repr__(self) -> str:
        return f"DiscountPricingStrategy(discount_percentage={self.discount_percentage})"


class PremiumPricingStrategy(PricingStrategy):
    """Flat service fee on top of base price plus delivery"""

    def __init__(self, service_fee: float):
        self.service_fee = service_fee

    def calculate_price(self, order: Order) -> float:
        return self._subtotal(order) + self.service_fee

    def __repr__(self) -> str:
        return f"PremiumPricingStrategy(service_fee={self.service_fee})"
