"""
Runtime configuration loaded from the environment (.env supported)
"""
import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_TAX_RATE = 0.13
DEFAULT_SERVICE_FEE_RATE = 0.05

_LEVEL_BY_ENVIRONMENT = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}


@dataclass(frozen=True)
class Settings:
    """Settings data model"""
    tax_rate: float = DEFAULT_TAX_RATE
    service_fee_rate: float = DEFAULT_SERVICE_FEE_RATE
    environment: str = "development"
    log_level: str = "DEBUG"


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def get_settings() -> Settings:
    # 환경 변수에서 설정값을 읽어 Settings 생성
    load_dotenv()
    environment = os.getenv("ENVIRONMENT", "development").lower()
    log_level = os.getenv("LOG_LEVEL", _LEVEL_BY_ENVIRONMENT.get(environment, "INFO")).upper()

    return Settings(
        tax_rate=_get_float("PIZZERIA_TAX_RATE", DEFAULT_TAX_RATE),
        service_fee_rate=_get_float("PIZZERIA_SERVICE_FEE_RATE", DEFAULT_SERVICE_FEE_RATE),
        environment=environment,
        log_level=log_level,
    )
