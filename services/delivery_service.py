"""
Delivery service - driver pool, delivery scheduling and completion
"""
import threading
from typing import List, Optional

from models.address import Address, is_blank
from models.delivery import DeliveryAssignment, DeliveryDriver
from models.exceptions import DeliveryAddressMissingError
from models.order import Order
from utils.logging import get_logger

logger = get_logger(__name__)


class DeliveryService:
    # 배달 기사 관리, 배달 배정 및 완료 처리를 담당하는 서비스 클래스

    def __init__(self):
        self._drivers: List[DeliveryDriver] = []
        self._active_deliveries: List[DeliveryAssignment] = []
        self._lock = threading.RLock()

    def add_driver(self, driver: DeliveryDriver) -> None:
        # 중복 확인 없이 등록 순서대로 추가
        with self._lock:
            self._drivers.append(driver)
        logger.info("Driver added", driver=driver.get_full_name())

    def find_available_driver(self) -> Optional[DeliveryDriver]:
        # 등록 순서대로 검색하여 첫 번째 가용 기사 반환
        with self._lock:
            for driver in self._drivers:
                if driver.is_available():
                    return driver
        return None

    def schedule_delivery(self, order: Order, driver: DeliveryDriver) -> DeliveryAssignment:
        # 배달 주소가 없으면 기사/배정 상태를 건드리지 않고 실패
        if order.get_delivery_address() is None:
            logger.warning("Delivery scheduling rejected, no address", order_id=order.order_id)
            raise DeliveryAddressMissingError(order.order_id)

        with self._lock:
            assignment = DeliveryAssignment.for_order(order, driver)
            driver.start_delivery()
            self._active_deliveries.append(assignment)

        logger.info(
            "Delivery scheduled",
            order_id=order.order_id,
            driver=driver.get_full_name(),
            tracking_number=assignment.tracking_number,
            estimated_minutes=assignment.estimated_time,
        )
        return assignment

    def complete_delivery(self, assignment: DeliveryAssignment) -> None:
        # 배정 완료 처리(주문 상태 변경 포함) -> 기사 복귀 -> 진행 목록에서 제거
        with self._lock:
            assignment.complete()
            assignment.driver.complete_delivery()
            self._active_deliveries = [
                active for active in self._active_deliveries if active is not assignment
            ]

        logger.info(
            "Delivery completed",
            order_id=assignment.order.order_id,
            tracking_number=assignment.tracking_number,
        )

    def get_active_deliveries_count(self) -> int:
        with self._lock:
            return len(self._active_deliveries)

    def get_active_deliveries(self) -> List[DeliveryAssignment]:
        with self._lock:
            return list(self._active_deliveries)

    def get_drivers(self) -> List[DeliveryDriver]:
        with self._lock:
            return list(self._drivers)

    def validate_address(self, address: Optional[Address]) -> bool:
        # 거리, 번지, 도시만 필수 (아파트 호수, 우편번호는 선택)
        return (
            address is not None
            and not is_blank(address.street)
            and not is_blank(address.house_number)
            and not is_blank(address.city)
        )
