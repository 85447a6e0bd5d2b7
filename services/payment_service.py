"""
Payment service - validates and settles payments, issues receipts
"""
import threading
from typing import Optional

from models.exceptions import (
    InsufficientPaymentError,
    PaymentProcessingError,
    RefundNotAllowedError,
)
from models.order import Order
from models.payment import Payment
from models.receipt import Receipt
from utils.config import get_settings
from utils.id_allocator import IdAllocator
from utils.logging import get_logger

logger = get_logger(__name__)

RECEIPT_PREFIX = "RCP"


class PaymentService:
    # 결제 검증/처리, 영수증 발급, 세금 및 봉사료 계산을 담당하는 서비스 클래스

    def __init__(self, receipt_allocator: Optional[IdAllocator] = None,
                 tax_rate: Optional[float] = None, service_fee_rate: Optional[float] = None):
        # 영수증 번호 발급기는 주문 번호와 별도의 번호 체계 사용
        settings = get_settings()
        self.receipt_allocator = receipt_allocator or IdAllocator(RECEIPT_PREFIX)
        self.tax_rate = settings.tax_rate if tax_rate is None else tax_rate
        self.service_fee_rate = settings.service_fee_rate if service_fee_rate is None else service_fee_rate
        self._lock = threading.RLock()

    def process_payment(self, order: Order, payment: Payment) -> Receipt:
        # 결제 금액 확인 -> 결제 처리 -> 주문 결제 완료 -> 영수증 발급
        with self._lock:
            required = order.get_final_price()
            if payment.amount < required:
                logger.warning(
                    "Payment amount is insufficient",
                    order_id=order.order_id,
                    amount=payment.amount,
                    required=required,
                )
                raise InsufficientPaymentError(payment.amount, required)

            if not payment.process():
                logger.warning(
                    "Payment was declined",
                    order_id=order.order_id,
                    transaction_id=payment.transaction_id,
                )
                raise PaymentProcessingError(f"transaction {payment.transaction_id} was declined")

            order.process_payment(payment.amount)
            receipt = Receipt(
                receipt_number=self.receipt_allocator.allocate(),
                order=order,
                payment=payment,
            )

        logger.info(
            "Payment settled",
            order_id=order.order_id,
            receipt_number=receipt.receipt_number,
            amount=payment.amount,
        )
        return receipt

    def refund_payment(self, payment: Payment) -> None:
        # 성공한 결제만 환불 가능
        if not payment.is_successful():
            logger.warning("Refund rejected", transaction_id=payment.transaction_id)
            raise RefundNotAllowedError(payment.transaction_id)

        payment.refund()
        logger.info("Refund completed", transaction_id=payment.transaction_id)

    def calculate_tax(self, amount: float) -> float:
        return amount * self.tax_rate

    def calculate_service_fee(self, amount: float) -> float:
        return amount * self.service_fee_rate
