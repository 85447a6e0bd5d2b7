"""
Delivery related data models
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Dict, Any, TYPE_CHECKING

from utils.id_allocator import generate_tracking_number
from utils.logging import get_logger
from .order import OrderStatus

if TYPE_CHECKING:
    from .order import Order

logger = get_logger(__name__)

BONUS_PER_DELIVERY = 50.0


@dataclass(eq=False)
class DeliveryDriver:
    """Delivery driver data model"""
    driver_id: str
    first_name: str
    last_name: str
    vehicle_type: Optional[str] = None
    vehicle_number: Optional[str] = None
    available: bool = True
    deliveries_completed: int = 0

    def get_full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def is_available(self) -> bool:
        return self.available

    def start_delivery(self) -> None:
        self.available = False
        logger.debug("Driver started delivery", driver_id=self.driver_id)

    def complete_delivery(self) -> None:
        self.available = True
        self.deliveries_completed += 1
        logger.debug("Driver completed delivery", driver_id=self.driver_id,
                     deliveries_completed=self.deliveries_completed)

    def calculate_delivery_bonus(self) -> float:
        return self.deliveries_completed * BONUS_PER_DELIVERY


@dataclass(eq=False)
class DeliveryAssignment:
    """Binding of one order to one driver for the duration of a delivery"""
    order: "Order"
    driver: DeliveryDriver
    dispatch_time: datetime = field(default_factory=datetime.now)
    delivery_time: Optional[datetime] = None
    estimated_time: int = 0
    tracking_number: str = field(default_factory=generate_tracking_number)

    @classmethod
    def for_order(cls, order: "Order", driver: DeliveryDriver) -> "DeliveryAssignment":
        # 배정 시점의 주문 정보로 예상 소요 시간 계산
        return cls(order=order, driver=driver, estimated_time=order.calculate_delivery_time())

    def complete(self) -> None:
        self.delivery_time = datetime.now()
        self.order.update_status(OrderStatus.DELIVERED)

    def is_completed(self) -> bool:
        return self.delivery_time is not None

    def actual_delivery_time(self) -> int:
        # 완료 전에는 0분
        if self.delivery_time is None:
            return 0
        return int((self.delivery_time - self.dispatch_time).total_seconds() // 60)

    def is_on_time(self) -> bool:
        return self.actual_delivery_time() <= self.estimated_time

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "tracking_number": self.tracking_number,
            "order_id": self.order.order_id,
            "driver_name": self.driver.get_full_name(),
            "dispatch_time": self.dispatch_time.isoformat(),
            "delivery_time": self.delivery_time.isoformat() if self.delivery_time else None,
            "estimated_time": self.estimated_time,
        }
