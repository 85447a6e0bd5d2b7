"""
Models package for the pizzeria order pipeline
Contains data models, value objects and the error taxonomy
"""

from .exceptions import (
    PizzeriaError, OrderNotFoundError, DuplicateOrderError,
    ValidationError, InvalidPriceError, InvalidDiscountError,
    InvalidDeliveryAddressError, DeliveryAddressMissingError, InvalidPizzaSizeError,
    PaymentError, InvalidPaymentError, InsufficientPaymentError,
    PaymentProcessingError, RefundNotAllowedError,
)
from .product import Product, Pizza, PizzaSize
from .customer import Customer
from .address import Address
from .discount import Discount
from .order import Order, OrderItem, OrderStatus
from .payment import Payment, PaymentMethod, CashDetails, CardDetails, OnlineDetails
from .delivery import DeliveryDriver, DeliveryAssignment
from .receipt import Receipt

__all__ = [
    'PizzeriaError', 'OrderNotFoundError', 'DuplicateOrderError',
    'ValidationError', 'InvalidPriceError', 'InvalidDiscountError',
    'InvalidDeliveryAddressError', 'DeliveryAddressMissingError', 'InvalidPizzaSizeError',
    'PaymentError', 'InvalidPaymentError', 'InsufficientPaymentError',
    'PaymentProcessingError', 'RefundNotAllowedError',
    'Product', 'Pizza', 'PizzaSize',
    'Customer', 'Address', 'Discount',
    'Order', 'OrderItem', 'OrderStatus',
    'Payment', 'PaymentMethod', 'CashDetails', 'CardDetails', 'OnlineDetails',
    'DeliveryDriver', 'DeliveryAssignment',
    'Receipt'
]
