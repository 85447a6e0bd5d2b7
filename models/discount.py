"""
Discount code value object
"""
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Optional

from utils.logging import get_logger
from .exceptions import InvalidDiscountError

logger = get_logger(__name__)

DEFAULT_VALIDITY_DAYS = 30
DEFAULT_USAGE_LIMIT = 100


def _check_percentage(percentage: float) -> None:
    if percentage < 0 or percentage > 100:
        raise InvalidDiscountError(percentage)


@dataclass
class Discount:
    """Promotional discount code, percentage validated to [0, 100]"""
    code: str
    percentage: float
    start_date: date = field(default_factory=date.today)
    end_date: Optional[date] = None
    active: bool = True
    usage_limit: int = DEFAULT_USAGE_LIMIT
    times_used: int = 0

    def __post_init__(self):
        _check_percentage(self.percentage)
        if self.end_date is None:
            self.end_date = self.start_date + timedelta(days=DEFAULT_VALIDITY_DAYS)

    def apply_discount(self, percentage: float) -> None:
        _check_percentage(percentage)
        self.percentage = percentage

    def is_applicable(self, today: Optional[date] = None) -> bool:
        today = today or date.today()
        return (
            self.active
            and self.start_date <= today <= self.end_date
            and self.times_used < self.usage_limit
        )

    def use(self) -> bool:
        if not self.is_applicable():
            return False
        self.times_used += 1
        logger.info("Discount used", code=self.code, times_used=self.times_used, usage_limit=self.usage_limit)
        return True

    def validate_code(self, input_code: str) -> bool:
        return input_code is not None and self.code.lower() == input_code.lower()
