"""
Product related data models
"""
from dataclasses import dataclass
from typing import Optional, Dict, Any
from enum import Enum

from .exceptions import InvalidPriceError, InvalidPizzaSizeError


class PizzaSize(Enum):
    SMALL = ("small", 25, 1.0)
    MEDIUM = ("medium", 30, 1.5)
    LARGE = ("large", 35, 2.0)
    EXTRA_LARGE = ("extra_large", 40, 2.5)

    def __init__(self, label: str, diameter: int, price_multiplier: float):
        self.label = label
        self.diameter = diameter
        self.price_multiplier = price_multiplier


@dataclass
class Product:
    """Product data model"""
    name: str
    base_price: float
    description: Optional[str] = None
    discount_percentage: float = 0.0
    available: bool = True

    def __post_init__(self):
        if self.base_price is None or self.base_price <= 0:
            raise InvalidPriceError(self.base_price)

    def get_price(self) -> float:
        return self.base_price

    def apply_discount(self, discount_percentage: float) -> None:
        self.discount_percentage = discount_percentage

    def get_final_price(self) -> float:
        return self.get_price() * (1 - self.discount_percentage / 100.0)

    def is_available(self) -> bool:
        return self.available

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "name": self.name,
            "base_price": self.base_price,
            "description": self.description,
            "discount_percentage": self.discount_percentage,
            "final_price": self.get_final_price(),
            "available": self.available,
        }


@dataclass
class Pizza(Product):
    """Pizza priced by size"""
    size: Optional[PizzaSize] = PizzaSize.MEDIUM

    def __post_init__(self):
        super().__post_init__()
        if not isinstance(self.size, PizzaSize):
            raise InvalidPizzaSizeError(self.size)

    def get_price(self) -> float:
        return self.base_price * self.size.price_multiplier

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = super().to_dict()
        data["size"] = self.size.label
        return data
