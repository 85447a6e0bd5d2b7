"""
Order validation - caller-side checks the order model itself does not enforce
"""
from models.order import Order
from utils.logging import get_logger

logger = get_logger(__name__)


class OrderValidator:
    """Boolean checks run before checkout; the reason for a rejection is logged"""

    @staticmethod
    def validate_order(order: Order) -> bool:
        if order is None:
            return False

        if order.customer is None:
            logger.warning("Order has no customer", order_id=order.order_id)
            return False

        if not order.items:
            logger.warning("Order has no items", order_id=order.order_id)
            return False

        return OrderValidator._validate_items(order)

    @staticmethod
    def _validate_items(order: Order) -> bool:
        for item in order.items:
            if item.product is None:
                logger.warning("Order item has no product", order_id=order.order_id)
                return False

            if item.quantity <= 0:
                logger.warning("Order item quantity must be positive",
                               order_id=order.order_id, quantity=item.quantity)
                return False

            if not item.product.is_available():
                logger.warning("Product is not available",
                               order_id=order.order_id, product=item.product.name)
                return False

        return True

    @staticmethod
    def validate_minimum_order_amount(order: Order, minimum_amount: float) -> bool:
        return order.get_price() >= minimum_amount

    @staticmethod
    def validate_delivery_address(order: Order) -> bool:
        return order.get_delivery_address() is not None
