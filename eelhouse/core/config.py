"""Application configuration."""

import logging
from decimal import Decimal
from os import getenv

from pydantic import BaseModel


class Settings(BaseModel):
    """Runtime settings for the application."""

    app_name: str = "Eel House Orders API"
    app_env: str = getenv("APP_ENV", "dev")
    debug: bool = getenv("DEBUG", "0") == "1"
    log_level: str = getenv("LOG_LEVEL", "INFO")
    database_url: str = getenv("DATABASE_URL", "sqlite:///./eelhouse.db")
    tax_rate: Decimal = Decimal(getenv("TAX_RATE", "0.0825"))
    delivery_fee: Decimal = Decimal(getenv("DELIVERY_FEE", "4.99"))
    report_timezone: str = getenv("REPORT_TIMEZONE", "UTC")
    default_report_days: int = int(getenv("DEFAULT_REPORT_DAYS", "30"))
    recent_orders_max: int = int(getenv("RECENT_ORDERS_MAX", "100"))
    strict_status_transitions: bool = getenv("STRICT_STATUS_TRANSITIONS", "0") == "1"
    seed_menu: bool = getenv("SEED_MENU", "1") == "1"


settings: Settings = Settings()


def setup_logging() -> None:
    """Configure root logging once for the whole process."""
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
