"""
Payment factory - builds payments with method-prefixed transaction ids
"""
from typing import Optional

from models.payment import Payment, PaymentMethod, CashDetails, CardDetails, OnlineDetails
from utils.id_allocator import generate_transaction_id

DEFAULT_CARD_NUMBER = "1234567890123456"
DEFAULT_ONLINE_EMAIL = "customer@example.com"


class PaymentFactory:
    # 결제 수단별 Payment 객체 생성

    def create_payment(self, method: PaymentMethod, transaction_id: str, amount: float) -> Payment:
        # 지정한 거래 번호로 결제 생성 (수단별 기본 정보 사용)
        if method == PaymentMethod.CASH:
            return Payment(transaction_id, amount, method, CashDetails())
        if method == PaymentMethod.CARD:
            return Payment(transaction_id, amount, method, CardDetails.from_card_number(DEFAULT_CARD_NUMBER))
        if method == PaymentMethod.ONLINE:
            return Payment(transaction_id, amount, method, OnlineDetails(email=DEFAULT_ONLINE_EMAIL))
        raise ValueError(f"Unsupported payment method: {method}")

    def create_cash_payment(self, amount: float, amount_received: Optional[float] = None) -> Payment:
        # 받은 금액을 지정하지 않으면 결제 금액과 같은 금액을 받은 것으로 처리
        received = amount if amount_received is None else amount_received
        return Payment(
            generate_transaction_id("CASH"), amount, PaymentMethod.CASH,
            CashDetails(amount_received=received),
        )

    def create_card_payment(self, amount: float, card_number: str) -> Payment:
        return Payment(
            generate_transaction_id("CARD"), amount, PaymentMethod.CARD,
            CardDetails.from_card_number(card_number),
        )

    def create_online_payment(self, amount: float, email: str) -> Payment:
        return Payment(
            generate_transaction_id("ONLINE"), amount, PaymentMethod.ONLINE,
            OnlineDetails(email=email),
        )
