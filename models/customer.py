"""
Customer related data models
"""
from dataclasses import dataclass, field
from typing import List

VIP_ORDER_THRESHOLD = 10


@dataclass
class Customer:
    """Customer data model"""
    customer_id: str
    first_name: str
    last_name: str
    order_history: List[str] = field(default_factory=list)

    def get_full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def add_to_order_history(self, order_id: str) -> None:
        self.order_history.append(order_id)

    @property
    def total_orders(self) -> int:
        return len(self.order_history)

    def is_vip(self) -> bool:
        return self.total_orders > VIP_ORDER_THRESHOLD
