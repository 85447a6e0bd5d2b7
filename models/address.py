"""
Address value object
"""
import math
from dataclasses import dataclass
from typing import Optional

from .exceptions import InvalidDeliveryAddressError

# 위경도 1도 ≈ 111km
KM_PER_DEGREE = 111


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


@dataclass
class Address:
    """Delivery address.

    Street, house number and city are required; apartment and postal code are optional.
    ``latitude`` doubles as the distance proxy used for delivery pricing.
    """
    street: str
    house_number: str
    city: str
    postal_code: Optional[str] = None
    apartment_number: Optional[str] = None
    latitude: float = 0.0
    longitude: float = 0.0

    def __post_init__(self):
        if is_blank(self.street):
            raise InvalidDeliveryAddressError(self.street, "street must not be empty")
        if is_blank(self.house_number):
            raise InvalidDeliveryAddressError(self.house_number, "house number must not be empty")
        if is_blank(self.city):
            raise InvalidDeliveryAddressError(self.city, "city must not be empty")

    def calculate_distance(self, other: "Address") -> float:
        dx = self.latitude - other.latitude
        dy = self.longitude - other.longitude
        return math.sqrt(dx * dx + dy * dy) * KM_PER_DEGREE

    def __str__(self) -> str:
        apartment = f", apt. {self.apartment_number}" if self.apartment_number else ""
        postal = f", {self.postal_code}" if self.postal_code else ""
        return f"{self.street} {self.house_number}{apartment}, {self.city}{postal}"
