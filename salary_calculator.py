# -*- coding: utf-8 -*-
"""Gross-to-net salary computation.

Rates are a single fixed illustrative regime:
- health insurance: 10% of gross
- social insurance: 25% of gross
- income tax: 10% of what remains after both contributions

Everything is computed with ``Decimal`` so the four parts always add up to
the gross amount exactly.
"""
import logging
from dataclasses import dataclass
from decimal import Decimal, DecimalException
from enum import Enum
from typing import Optional, Tuple

from settings import DEFAULT_GROSS_AMOUNT, MAX_GROSS_AMOUNT

logger = logging.getLogger(__name__)

HEALTH_INSURANCE_RATE = Decimal("0.10")
SOCIAL_INSURANCE_RATE = Decimal("0.25")
INCOME_TAX_RATE = Decimal("0.10")


class Period(Enum):
    MONTHLY = "monthly"
    YEARLY = "yearly"

    @property
    def multiplier(self) -> int:
        return 12 if self is Period.YEARLY else 1


class OutOfRangeInput(ValueError):
    """Gross amount outside (0, max] after period normalization."""

    def __init__(self, value, maximum=MAX_GROSS_AMOUNT):
        self.value = value
        self.maximum = maximum
        super().__init__(f"gross amount {value} is outside (0, {maximum}]")


@dataclass(frozen=True)
class SalaryInput:
    gross_amount: Decimal
    period: Period = Period.MONTHLY


@dataclass(frozen=True)
class SalaryBreakdown:
    gross: Decimal
    health_insurance: Decimal
    social_insurance: Decimal
    taxable_income: Decimal
    income_tax: Decimal
    net_salary: Decimal

    @property
    def total_deductions(self) -> Decimal:
        return self.health_insurance + self.social_insurance + self.income_tax


# ==============================
# Calculation
# ==============================
def normalize(gross_amount, period: Period = Period.MONTHLY) -> Decimal:
    """Convert the raw amount to Decimal and scale it to the period."""
    try:
        amount = gross_amount if isinstance(gross_amount, Decimal) else Decimal(str(gross_amount).strip())
        return amount * period.multiplier
    except (DecimalException, ValueError) as e:
        raise OutOfRangeInput(gross_amount) from e


def validate(gross_amount, period: Period = Period.MONTHLY,
             maximum: Decimal = MAX_GROSS_AMOUNT) -> Tuple[Optional[Decimal], Optional[OutOfRangeInput]]:
    """Return ``(normalized, None)`` for a valid amount, ``(None, error)`` otherwise."""
    try:
        normalized = normalize(gross_amount, period)
    except OutOfRangeInput as e:
        return None, e

    if not normalized.is_finite() or normalized <= 0 or normalized > maximum:
        return None, OutOfRangeInput(normalized, maximum)
    return normalized, None


def compute(normalized_gross: Decimal) -> SalaryBreakdown:
    """Break a validated gross amount into contributions, tax and net."""
    gross = normalized_gross
    health = gross * HEALTH_INSURANCE_RATE
    social = gross * SOCIAL_INSURANCE_RATE
    taxable = gross - health - social
    tax = taxable * INCOME_TAX_RATE
    net = gross - health - social - tax
    return SalaryBreakdown(
        gross=gross,
        health_insurance=health,
        social_insurance=social,
        taxable_income=taxable,
        income_tax=tax,
        net_salary=net,
    )


def calculate(gross_amount, period: Period = Period.MONTHLY) -> SalaryBreakdown:
    normalized, error = validate(gross_amount, period)
    if error is not None:
        raise error
    return compute(normalized)


# ==============================
# Page state (idle / error)
# ==============================
class CalculatorState:
    """Current input plus the last valid breakdown.

    ``update`` never raises: an invalid amount moves the state to ``error``
    and keeps the previous breakdown on display until a valid one arrives.
    """

    IDLE = "idle"
    ERROR = "error"

    def __init__(self, gross_amount=DEFAULT_GROSS_AMOUNT, period: Period = Period.MONTHLY):
        self.gross_amount = gross_amount
        self.period = period
        self.breakdown: Optional[SalaryBreakdown] = None
        self.error: Optional[OutOfRangeInput] = None
        self.last_input: Optional[SalaryInput] = None
        self.recompute()

    @property
    def status(self) -> str:
        return self.ERROR if self.error is not None else self.IDLE

    def update(self, gross_amount=None, period: Optional[Period] = None) -> str:
        if gross_amount is not None:
            self.gross_amount = gross_amount
        if period is not None:
            self.period = period
        return self.recompute()

    def recompute(self) -> str:
        normalized, error = validate(self.gross_amount, self.period)
        if error is not None:
            logger.warning("Rejected gross amount %s (%s): %s", self.gross_amount, self.period.value, error)
            self.error = error
            return self.status

        self.breakdown = compute(normalized)
        self.last_input = SalaryInput(normalized, self.period)
        self.error = None
        logger.debug("Recomputed %s %s -> net %s", normalized, self.period.value, self.breakdown.net_salary)
        return self.status

    def reset(self) -> str:
        logger.info("Resetting calculator to %s %s", DEFAULT_GROSS_AMOUNT, Period.MONTHLY.value)
        self.gross_amount = DEFAULT_GROSS_AMOUNT
        self.period = Period.MONTHLY
        return self.recompute()
