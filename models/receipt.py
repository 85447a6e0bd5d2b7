"""
Receipt data model
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .order import Order
    from .payment import Payment

RULE = "=" * 42
THIN_RULE = "-" * 42


@dataclass(frozen=True, eq=False)
class Receipt:
    """Immutable record binding a receipt number to an order and its payment"""
    receipt_number: str
    order: "Order"
    payment: "Payment"
    issue_time: datetime = field(default_factory=datetime.now)

    def render(self) -> str:
        order = self.order
        customer = order.customer.get_full_name() if order.customer else ""
        lines = [
            RULE,
            f"RECEIPT {self.receipt_number}".center(42),
            RULE,
            f"Date: {self.issue_time.strftime('%d.%m.%Y %H:%M')}",
            f"Customer: {customer}",
            THIN_RULE,
            "Items:",
        ]
        for item in order.items:
            lines.append(f"  {item.product.name} x{item.quantity} - {item.total_price:.2f}")
        lines.append(THIN_RULE)
        lines.append(f"Subtotal: {order.get_price():.2f}")
        if order.discount_percentage > 0:
            lines.append(f"Discount: {order.discount_percentage:.0f}%")
        delivery_cost = order.calculate_delivery_cost()
        if delivery_cost > 0:
            lines.append(f"Delivery: {delivery_cost:.2f}")
        lines.append(f"TOTAL: {order.get_final_price():.2f}")
        lines.append(THIN_RULE)
        lines.append(f"Paid by: {self.payment.method.value}")
        lines.append(RULE)
        return "\n".join(lines)
