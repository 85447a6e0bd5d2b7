"""
Order service - handles order creation, lookup and lifecycle
"""
import threading
from typing import Dict, Optional

from models.customer import Customer
from models.exceptions import DuplicateOrderError, OrderNotFoundError
from models.order import Order, OrderStatus
from utils.id_allocator import IdAllocator
from utils.logging import get_logger

logger = get_logger(__name__)

ORDER_ID_PREFIX = "ORD"


class OrderService:
    # 주문 생성/조회/취소/상태변경 및 매출 집계를 담당하는 서비스 클래스

    def __init__(self, id_allocator: Optional[IdAllocator] = None):
        # 주문 번호 발급기 주입 (없으면 ORD- 접두어로 새로 생성)
        self.id_allocator = id_allocator or IdAllocator(ORDER_ID_PREFIX)
        self._orders: Dict[str, Order] = {}
        self._lock = threading.RLock()

    def create_order(self, customer: Customer) -> Order:
        # 새 주문 번호 발급 후 주문 생성 및 고객 주문 이력에 기록
        with self._lock:
            order_id = self.id_allocator.allocate()
            if order_id in self._orders:
                raise DuplicateOrderError(order_id)

            order = Order(order_id=order_id, customer=customer)
            self._orders[order_id] = order
            customer.add_to_order_history(order_id)

        logger.info("Order created", order_id=order_id, customer=customer.get_full_name())
        return order

    def get_order(self, order_id: str) -> Order:
        # 주문 번호로 조회, 없으면 OrderNotFoundError
        with self._lock:
            order = self._orders.get(order_id)
        if order is None:
            logger.warning("Order lookup failed", order_id=order_id)
            raise OrderNotFoundError(order_id)
        return order

    def cancel_order(self, order_id: str) -> None:
        order = self.get_order(order_id)
        order.update_status(OrderStatus.CANCELLED)
        logger.info("Order cancelled", order_id=order_id)

    def update_order_status(self, order_id: str, status: OrderStatus) -> None:
        order = self.get_order(order_id)
        order.update_status(status)

    def calculate_total_revenue(self) -> float:
        # 결제 완료된 주문의 최종 금액 합계
        with self._lock:
            orders = list(self._orders.values())
        return float(sum(order.get_final_price() for order in orders if order.is_paid()))

    def get_order_count(self) -> int:
        with self._lock:
            return len(self._orders)

    def get_all_orders(self) -> Dict[str, Order]:
        # 내부 저장소 보호를 위해 매번 새 dict 반환 (얕은 복사)
        with self._lock:
            return dict(self._orders)
