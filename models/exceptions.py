"""
Domain error taxonomy for the pizzeria order pipeline
"""
from typing import Any, Optional


class PizzeriaError(Exception):
    """Base class for every error raised by the order pipeline"""


class OrderNotFoundError(PizzeriaError):
    def __init__(self, order_id: str):
        super().__init__(f"Order not found: {order_id}")
        self.order_id = order_id


class DuplicateOrderError(PizzeriaError):
    def __init__(self, order_id: str):
        super().__init__(f"Order already exists: {order_id}")
        self.order_id = order_id


# === 생성/변경 시점 검증 오류 ===
class ValidationError(PizzeriaError):
    """Raised when a value is rejected at a construction or mutation boundary"""


class InvalidPriceError(ValidationError):
    def __init__(self, price: float):
        super().__init__(f"Invalid price: {price}. Price must be a positive number")
        self.price = price


class InvalidDiscountError(ValidationError):
    def __init__(self, percentage: float):
        super().__init__(f"Invalid discount: {percentage}%. Discount must be between 0 and 100")
        self.percentage = percentage


class InvalidDeliveryAddressError(ValidationError):
    def __init__(self, address: Any, reason: str):
        super().__init__(f"Invalid delivery address '{address}': {reason}")
        self.address = address
        self.reason = reason


class DeliveryAddressMissingError(InvalidDeliveryAddressError):
    def __init__(self, order_id: Optional[str] = None):
        super().__init__(None, f"delivery address is not set for order {order_id}")
        self.order_id = order_id


class InvalidPizzaSizeError(ValidationError):
    def __init__(self, size: Any):
        super().__init__(f"Invalid pizza size: {size}")
        self.size = size


# === 결제 오류 ===
class PaymentError(PizzeriaError):
    """Base class for payment settlement failures"""


class InvalidPaymentError(PaymentError):
    def __init__(self, reason: str, amount: Optional[float] = None):
        if amount is None:
            message = f"Payment error: {reason}"
        else:
            message = f"Payment error for amount {amount:.2f}: {reason}"
        super().__init__(message)
        self.reason = reason
        self.amount = amount


class InsufficientPaymentError(PaymentError):
    def __init__(self, amount: float, required: float):
        super().__init__(
            f"Insufficient payment amount {amount:.2f}, order requires {required:.2f}"
        )
        self.amount = amount
        self.required = required


class PaymentProcessingError(PaymentError):
    def __init__(self, reason: str = "payment was declined"):
        super().__init__(f"Payment processing failed: {reason}")
        self.reason = reason


class RefundNotAllowedError(PaymentError):
    def __init__(self, transaction_id: Optional[str] = None):
        super().__init__(f"Refund not allowed for unsuccessful payment {transaction_id}")
        self.transaction_id = transaction_id
