"""
Pricing strategies package
Interchangeable total-price policies applied to an order
"""

from .pricing import (
    PricingStrategy, StandardPricingStrategy,
    DiscountPricingStrategy, PremiumPricingStrategy,
)

__all__ = [
    'PricingStrategy', 'StandardPricingStrategy',
    'DiscountPricingStrategy', 'PremiumPricingStrategy'
]
