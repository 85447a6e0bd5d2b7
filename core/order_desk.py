"""
Main PizzeriaOrderDesk class - orchestrates order, payment and delivery services
"""
from typing import Dict, Any, Optional

from models.address import Address
from models.customer import Customer
from models.delivery import DeliveryDriver
from models.discount import Discount
from models.exceptions import PizzeriaError
from models.order import OrderStatus
from models.payment import Payment
from models.product import Product
from services.delivery_service import DeliveryService
from services.order_service import OrderService
from services.payment_service import PaymentService
from strategies.pricing import PricingStrategy, StandardPricingStrategy
from utils.logging import get_logger
from utils.validators import OrderValidator

logger = get_logger(__name__)


def _failure(error: PizzeriaError) -> Dict[str, Any]:
    return {
        "success": False,
        "error": str(error),
        "error_type": type(error).__name__,
    }


class PizzeriaOrderDesk:
    # 메인 주문 데스크 클래스 - 주문/결제/배달 서비스를 조율하는 중앙 관리자

    def __init__(self, order_service: Optional[OrderService] = None,
                 payment_service: Optional[PaymentService] = None,
                 delivery_service: Optional[DeliveryService] = None,
                 pricing_strategy: Optional[PricingStrategy] = None):
        # 서비스 레이어 초기화 (주입되지 않으면 기본 인스턴스 생성)
        self.order_service = order_service or OrderService()
        self.payment_service = payment_service or PaymentService()
        self.delivery_service = delivery_service or DeliveryService()
        self.pricing_strategy = pricing_strategy or StandardPricingStrategy()
        self.validator = OrderValidator()

    # === 주문 관련 메서드들 ===
    def open_order(self, customer: Customer, delivery_address: Optional[Address] = None) -> Dict[str, Any]:
        # 새 주문 생성 (배달 주소가 없으면 포장 주문)
        try:
            order = self.order_service.create_order(customer)
            if delivery_address is not None:
                order.set_delivery_address(delivery_address)
        except PizzeriaError as e:
            return _failure(e)

        return {
            "success": True,
            "order_id": order.order_id,
            "delivery": delivery_address is not None,
            "message": f"Order {order.order_id} opened for {customer.get_full_name()}",
        }

    def add_to_order(self, order_id: str, product: Product, quantity: int = 1,
                     special_instructions: Optional[str] = None) -> Dict[str, Any]:
        # 주문에 상품 추가
        try:
            order = self.order_service.get_order(order_id)
        except PizzeriaError as e:
            return _failure(e)

        # 주문 모델은 검증 없이 추가하므로 여기서 상품/수량 확인
        if product is None:
            return {"success": False, "error": "Product must not be empty"}
        if quantity is None or quantity <= 0:
            return {"success": False, "error": f"Quantity must be positive, got {quantity}"}

        item = order.add_item(product, quantity)
        item.special_instructions = special_instructions
        return {
            "success": True,
            "order_id": order_id,
            "item": item.to_dict(),
            "total_items": order.get_total_items(),
            "price": order.get_price(),
        }

    def apply_discount_code(self, order_id: str, discount: Discount, code: str) -> Dict[str, Any]:
        # 할인 코드 확인 후 주문에 할인율 적용
        try:
            order = self.order_service.get_order(order_id)
        except PizzeriaError as e:
            return _failure(e)

        if not discount.validate_code(code):
            return {"success": False, "error": f"Unknown discount code: {code}"}
        if not discount.use():
            return {"success": False, "error": f"Discount code {discount.code} is no longer applicable"}

        order.apply_discount(discount.percentage)
        return {
            "success": True,
            "order_id": order_id,
            "discount_percentage": discount.percentage,
            "final_price": order.get_final_price(),
        }

    def quote(self, order_id: str, strategy: Optional[PricingStrategy] = None) -> Dict[str, Any]:
        # 가격 정책으로 견적 계산 (주문은 변경하지 않음)
        try:
            order = self.order_service.get_order(order_id)
        except PizzeriaError as e:
            return _failure(e)

        strategy = strategy or self.pricing_strategy
        quoted = strategy.calculate_price(order)
        return {
            "success": True,
            "order_id": order_id,
            "strategy": type(strategy).__name__,
            "price": order.get_price(),
            "delivery_cost": order.calculate_delivery_cost(),
            "quoted_price": quoted,
            "tax": self.payment_service.calculate_tax(quoted),
            "service_fee": self.payment_service.calculate_service_fee(quoted),
        }

    def cancel_order(self, order_id: str) -> Dict[str, Any]:
        try:
            self.order_service.cancel_order(order_id)
        except PizzeriaError as e:
            return _failure(e)
        return {"success": True, "order_id": order_id, "status": OrderStatus.CANCELLED.value}

    def order_summary(self, order_id: str) -> Dict[str, Any]:
        # 특정 주문의 상세 정보 조회
        try:
            order = self.order_service.get_order(order_id)
        except PizzeriaError as e:
            return _failure(e)
        return {"success": True, "order": order.to_dict()}

    # === 결제 관련 메서드들 ===
    def checkout(self, order_id: str, payment: Payment) -> Dict[str, Any]:
        # 주문 검증 후 결제 처리 및 영수증 발급
        try:
            order = self.order_service.get_order(order_id)
        except PizzeriaError as e:
            return _failure(e)

        if not self.validator.validate_order(order):
            return {"success": False, "error": f"Order {order_id} is not ready for checkout"}

        try:
            receipt = self.payment_service.process_payment(order, payment)
        except PizzeriaError as e:
            return _failure(e)

        return {
            "success": True,
            "order_id": order_id,
            "receipt_number": receipt.receipt_number,
            "final_price": order.get_final_price(),
            "paid_amount": payment.amount,
            "needs_delivery": order.get_delivery_address() is not None,
            "receipt": receipt.render(),
        }

    def refund(self, payment: Payment) -> Dict[str, Any]:
        try:
            self.payment_service.refund_payment(payment)
        except PizzeriaError as e:
            return _failure(e)
        return {"success": True, "transaction_id": payment.transaction_id}

    # === 배달 관련 메서드들 ===
    def register_driver(self, driver: DeliveryDriver) -> Dict[str, Any]:
        self.delivery_service.add_driver(driver)
        return {"success": True, "driver_id": driver.driver_id}

    def dispatch(self, order_id: str, driver: Optional[DeliveryDriver] = None) -> Dict[str, Any]:
        # 결제된 배달 주문을 가용 기사에게 배정
        try:
            order = self.order_service.get_order(order_id)
        except PizzeriaError as e:
            return _failure(e)

        if not order.is_paid():
            return {"success": False, "error": f"Order {order_id} has not been paid"}

        driver = driver or self.delivery_service.find_available_driver()
        if driver is None:
            return {"success": False, "error": "No available driver"}

        try:
            assignment = self.delivery_service.schedule_delivery(order, driver)
        except PizzeriaError as e:
            return _failure(e)

        return {
            "success": True,
            "order_id": order_id,
            "tracking_number": assignment.tracking_number,
            "driver": driver.get_full_name(),
            "estimated_time": assignment.estimated_time,
        }

    def complete_delivery(self, order_id: str) -> Dict[str, Any]:
        # 진행 중인 배달을 주문 번호로 찾아 완료 처리
        assignment = next(
            (a for a in self.delivery_service.get_active_deliveries() if a.order.order_id == order_id),
            None,
        )
        if assignment is None:
            return {"success": False, "error": f"No active delivery for order {order_id}"}

        self.delivery_service.complete_delivery(assignment)
        return {
            "success": True,
            "order_id": order_id,
            "tracking_number": assignment.tracking_number,
            "status": assignment.order.status.value,
            "on_time": assignment.is_on_time(),
        }

    def total_revenue(self) -> float:
        return self.order_service.calculate_total_revenue()
