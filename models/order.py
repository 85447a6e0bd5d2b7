"""
Order related data models
"""
import math
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional, Dict, Any, TYPE_CHECKING

from utils.logging import get_logger
from .exceptions import InvalidDeliveryAddressError

if TYPE_CHECKING:
    from .address import Address
    from .customer import Customer
    from .product import Product

logger = get_logger(__name__)


class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PREPARING = "preparing"
    READY = "ready"
    IN_PROGRESS = "in_progress"
    DELIVERING = "delivering"
    DELIVERED = "delivered"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass
class OrderItem:
    """Order item data model"""
    product: Optional["Product"]
    quantity: int
    special_instructions: Optional[str] = None

    @property
    def total_price(self) -> float:
        return self.product.get_final_price() * self.quantity

    def increase_quantity(self, amount: int) -> None:
        self.quantity += amount

    def decrease_quantity(self, amount: int) -> None:
        # 수량이 음수가 되는 감소는 무시
        if self.quantity >= amount:
            self.quantity -= amount

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "product_name": self.product.name if self.product else None,
            "quantity": self.quantity,
            "special_instructions": self.special_instructions,
            "total_price": self.total_price if self.product else 0.0,
        }


# 배달 요금 구간 (거리 프록시 기준)
NEAR_DISTANCE = 3
MID_DISTANCE = 5
NEAR_DELIVERY_COST = 100.0
MID_DELIVERY_COST = 150.0
FAR_DELIVERY_COST = 200.0

BASE_DELIVERY_MINUTES = 30
MINUTES_PER_DISTANCE_UNIT = 5


@dataclass(eq=False)
class Order:
    """Order aggregate - line items, status, discount, payment flag and optional delivery address.

    The customer is referenced, not owned. An order without a delivery address is a
    pickup order and carries no delivery cost or delivery time.
    """
    order_id: str
    customer: Optional["Customer"]
    items: List[OrderItem] = field(default_factory=list)
    status: OrderStatus = OrderStatus.PENDING
    order_time: datetime = field(default_factory=datetime.now)
    delivery_address: Optional["Address"] = None
    discount_percentage: float = 0.0
    paid: bool = False

    # === 품목 관리 ===
    def add_item(self, product: Optional["Product"], quantity: int) -> OrderItem:
        # 수량/제품 검증 없이 그대로 추가 (검증은 OrderValidator 쪽 책임)
        item = OrderItem(product=product, quantity=quantity)
        self.items.append(item)
        return item

    def remove_item(self, item: OrderItem) -> None:
        if item in self.items:
            self.items.remove(item)

    def get_total_items(self) -> int:
        return sum(item.quantity for item in self.items)

    # === 금액 계산 ===
    def get_price(self) -> float:
        return float(sum(item.total_price for item in self.items))

    def apply_discount(self, discount_percentage: float) -> None:
        self.discount_percentage = discount_percentage

    def get_final_price(self) -> float:
        base_price = self.get_price()
        delivery_cost = self.calculate_delivery_cost()
        return (base_price + delivery_cost) * (1 - self.discount_percentage / 100.0)

    def process_payment(self, amount: float) -> bool:
        if amount >= self.get_final_price():
            self.paid = True
            self.status = OrderStatus.CONFIRMED
            return True
        return False

    def is_paid(self) -> bool:
        return self.paid

    # === 배달 ===
    def set_delivery_address(self, address: "Address") -> None:
        if address is None:
            raise InvalidDeliveryAddressError(None, "address must not be empty")
        self.delivery_address = address

    def clear_delivery_address(self) -> None:
        # 포장(픽업) 주문으로 전환
        self.delivery_address = None

    def get_delivery_address(self) -> Optional["Address"]:
        return self.delivery_address

    def _distance(self) -> float:
        # 위도 값을 거리 프록시로 사용 (실제 지오코딩 아님)
        return self.delivery_address.latitude

    def calculate_delivery_cost(self) -> float:
        if self.delivery_address is None:
            return 0.0
        distance = self._distance()
        if distance < NEAR_DISTANCE:
            return NEAR_DELIVERY_COST
        if distance < MID_DISTANCE:
            return MID_DELIVERY_COST
        return FAR_DELIVERY_COST

    def calculate_delivery_time(self) -> int:
        if self.delivery_address is None:
            return 0
        return BASE_DELIVERY_MINUTES + math.floor(MINUTES_PER_DISTANCE_UNIT * self._distance())

    # === 상태 ===
    def update_status(self, new_status: OrderStatus) -> None:
        # 전이 규칙 없이 그대로 대입
        previous = self.status
        self.status = new_status
        logger.info(
            "Order status changed",
            order_id=self.order_id,
            previous_status=previous.value,
            status=new_status.value,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "order_id": self.order_id,
            "customer_name": self.customer.get_full_name() if self.customer else "",
            "status": self.status.value,
            "order_time": self.order_time.isoformat(),
            "items": [item.to_dict() for item in self.items],
            "total_items": self.get_total_items(),
            "price": self.get_price(),
            "discount_percentage": self.discount_percentage,
            "delivery_cost": self.calculate_delivery_cost(),
            "final_price": self.get_final_price(),
            "is_paid": self.paid,
            "delivery": self.delivery_address is not None,
        }
