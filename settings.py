# -*- coding: utf-8 -*-
import logging
import os
from decimal import Decimal, DecimalException

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

FALLBACK_GROSS_AMOUNT = Decimal("5800")
FALLBACK_MAX_GROSS_AMOUNT = Decimal("1000000")


def parse_amount_setting(raw, fallback: Decimal, maximum: Decimal = None) -> Decimal:
    """Parse an amount from the environment; bad or out-of-range values use ``fallback``."""
    try:
        value = Decimal(str(raw).strip())
    except (DecimalException, ValueError):
        logger.warning("Ignoring unparsable amount setting %r, using %s", raw, fallback)
        return fallback
    if not value.is_finite() or value <= 0 or (maximum is not None and value > maximum):
        logger.warning("Ignoring out-of-range amount setting %r, using %s", raw, fallback)
        return fallback
    return value


# Calculator
MAX_GROSS_AMOUNT = parse_amount_setting(os.getenv("SALARY_MAX_GROSS", "1000000"), FALLBACK_MAX_GROSS_AMOUNT)
DEFAULT_GROSS_AMOUNT = parse_amount_setting(
    os.getenv("SALARY_DEFAULT_GROSS", "5800"),
    min(FALLBACK_GROSS_AMOUNT, MAX_GROSS_AMOUNT),
    MAX_GROSS_AMOUNT,
)
CURRENCY = os.getenv("SALARY_CURRENCY", "RON")

# UI
DEFAULT_LANGUAGE = os.getenv("SALARY_DEFAULT_LANGUAGE", "ro")
COPY_FEEDBACK_SECONDS = float(os.getenv("COPY_FEEDBACK_SECONDS", "2"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging():
    """Configure root logging once per process."""
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
