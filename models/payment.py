"""
Payment related data models

A single Payment type carries one of three method-specific detail records
(cash, card, online). Processing and refunds dispatch on the detail record.
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, Union, Dict, Any

from utils.id_allocator import epoch_millis
from utils.logging import get_logger
from .exceptions import InvalidPaymentError, RefundNotAllowedError

logger = get_logger(__name__)


class PaymentMethod(Enum):
    CASH = "cash"
    CARD = "card"
    ONLINE = "online"
    CRYPTO = "crypto"


MIN_CARD_NUMBER_LENGTH = 16
PIN_LENGTH = 4
DEFAULT_ONLINE_GATEWAY = "PayPal"


def mask_card_number(card_number: Optional[str]) -> str:
    if card_number is None or len(card_number) < 4:
        return "****"
    return "**** **** **** " + card_number[-4:]


@dataclass
class CashDetails:
    """Cash payment details"""
    amount_received: float = 0.0
    change: float = 0.0


@dataclass
class CardDetails:
    """Card payment details - only the masked number is kept"""
    masked_number: str = "****"
    card_valid: bool = False
    card_holder_name: Optional[str] = None
    expiry_date: Optional[str] = None

    @classmethod
    def from_card_number(cls, card_number: Optional[str], **kwargs) -> "CardDetails":
        # 원본 카드번호는 저장하지 않고 마스킹 결과와 유효성만 보관
        valid = card_number is not None and len(card_number) >= MIN_CARD_NUMBER_LENGTH
        return cls(masked_number=mask_card_number(card_number), card_valid=valid, **kwargs)


@dataclass
class OnlineDetails:
    """Online payment details"""
    email: Optional[str] = None
    gateway: str = DEFAULT_ONLINE_GATEWAY
    confirmation_code: Optional[str] = None


PaymentDetails = Union[CashDetails, CardDetails, OnlineDetails]

_DETAILS_BY_METHOD = {
    PaymentMethod.CASH: CashDetails,
    PaymentMethod.CARD: CardDetails,
    PaymentMethod.ONLINE: OnlineDetails,
}


@dataclass(eq=False)
class Payment:
    """Payment data model"""
    transaction_id: str
    amount: float
    method: PaymentMethod
    details: Optional[PaymentDetails] = None
    payment_time: datetime = field(default_factory=datetime.now)
    successful: bool = False

    def __post_init__(self):
        if self.amount is None or self.amount <= 0:
            raise InvalidPaymentError("amount must be positive", self.amount)
        expected = _DETAILS_BY_METHOD.get(self.method)
        if expected is None:
            raise InvalidPaymentError(f"unsupported payment method: {self.method}", self.amount)
        if self.details is None:
            self.details = expected()
        elif not isinstance(self.details, expected):
            raise InvalidPaymentError(
                f"{type(self.details).__name__} does not match payment method {self.method.value}",
                self.amount,
            )

    def process(self) -> bool:
        """Settle the payment. Returns False when the method-specific checks fail."""
        details = self.details
        if isinstance(details, CashDetails):
            if details.amount_received < self.amount:
                logger.warning(
                    "Cash payment declined",
                    transaction_id=self.transaction_id,
                    amount=self.amount,
                    amount_received=details.amount_received,
                )
                return False
            details.change = details.amount_received - self.amount
        elif isinstance(details, CardDetails):
            if not details.card_valid:
                logger.warning("Card payment declined", transaction_id=self.transaction_id,
                               card=details.masked_number)
                return False
        elif isinstance(details, OnlineDetails):
            if details.email is None or "@" not in details.email:
                logger.warning("Online payment declined", transaction_id=self.transaction_id,
                               email=details.email)
                return False
            details.confirmation_code = f"CONF-{epoch_millis()}"

        self.successful = True
        logger.info(
            "Payment processed",
            transaction_id=self.transaction_id,
            method=self.method.value,
            amount=self.amount,
        )
        return True

    def refund(self) -> None:
        if not self.successful:
            raise RefundNotAllowedError(self.transaction_id)
        self.successful = False
        logger.info(
            "Payment refunded",
            transaction_id=self.transaction_id,
            method=self.method.value,
            amount=self.amount,
        )

    def is_successful(self) -> bool:
        return self.successful

    # === 결제 수단별 부가 기능 ===
    def calculate_change(self, received: float) -> float:
        return received - self.amount

    def verify_pin(self, pin: Optional[str]) -> bool:
        return isinstance(self.details, CardDetails) and pin is not None and len(pin) == PIN_LENGTH

    def verify_confirmation_code(self, code: str) -> bool:
        if not isinstance(self.details, OnlineDetails):
            return False
        return self.details.confirmation_code is not None and self.details.confirmation_code == code

    def summary(self) -> str:
        return f"Payment #{self.transaction_id}: {self.amount:.2f} ({self.method.value})"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "transaction_id": self.transaction_id,
            "amount": self.amount,
            "method": self.method.value,
            "successful": self.successful,
            "payment_time": self.payment_time.isoformat(),
        }
