"""
Services package for the pizzeria order pipeline
Contains order, payment and delivery services
"""

from .order_service import OrderService
from .payment_service import PaymentService
from .payment_factory import PaymentFactory
from .delivery_service import DeliveryService

__all__ = [
    'OrderService', 'PaymentService', 'PaymentFactory', 'DeliveryService'
]
