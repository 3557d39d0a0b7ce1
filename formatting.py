# -*- coding: utf-8 -*-
from decimal import Decimal
from functools import partial
from typing import List, Tuple

import pandas as pd

from salary_calculator import (
    HEALTH_INSURANCE_RATE,
    INCOME_TAX_RATE,
    SOCIAL_INSURANCE_RATE,
    SalaryBreakdown,
)
from settings import CURRENCY
from translations import get_text

# (thousands separator, decimal separator)
SEPARATORS = {
    "en": (",", "."),
    "ro": (".", ","),
}


def format_amount(value, language: str = "en") -> str:
    """5800 -> '5,800.00' (en) / '5.800,00' (ro)."""
    text = f"{Decimal(str(value)):,.2f}"
    thousands, decimal = SEPARATORS.get(language, SEPARATORS["en"])
    return text.replace(",", "\0").replace(".", decimal).replace("\0", thousands)


def format_money(value, language: str = "en") -> str:
    return f"{format_amount(value, language)} {CURRENCY}"


def format_rate(rate: Decimal) -> str:
    return f"{rate * 100:.0f}%"


def formula_lines(breakdown: SalaryBreakdown, language: str = "en") -> List[Tuple[str, str]]:
    """(label, formula) pairs for the calculation details panel."""
    fmt = partial(format_amount, language=language)
    gross, health, social, tax = breakdown.gross, breakdown.health_insurance, breakdown.social_insurance, breakdown.income_tax
    return [
        (get_text(language, "healthInsurance"),
         f"{fmt(gross)} × {format_rate(HEALTH_INSURANCE_RATE)} = {format_money(health, language)}"),
        (get_text(language, "socialInsurance"),
         f"{fmt(gross)} × {format_rate(SOCIAL_INSURANCE_RATE)} = {format_money(social, language)}"),
        (get_text(language, "incomeTax"),
         f"({fmt(gross)} - {fmt(health)} - {fmt(social)}) × {format_rate(INCOME_TAX_RATE)} = {format_money(tax, language)}"),
        (get_text(language, "netSalary"),
         f"{fmt(gross)} - {fmt(health)} - {fmt(social)} - {fmt(tax)} = {format_money(breakdown.net_salary, language)}"),
    ]


def copy_payload(breakdown: SalaryBreakdown, language: str = "en") -> str:
    """Plain-text summary placed on the clipboard."""
    rows = [
        ("grossSalary", breakdown.gross),
        ("healthInsurance", breakdown.health_insurance),
        ("socialInsurance", breakdown.social_insurance),
        ("incomeTax", breakdown.income_tax),
        ("netSalary", breakdown.net_salary),
    ]
    return "\n".join(f"{get_text(language, key)}: {format_money(value, language)}" for key, value in rows)


def breakdown_frame(breakdown: SalaryBreakdown, language: str = "en") -> pd.DataFrame:
    """Net salary and the three deductions, in chart order."""
    rows = [
        ("netSalary", breakdown.net_salary),
        ("healthInsurance", breakdown.health_insurance),
        ("socialInsurance", breakdown.social_insurance),
        ("incomeTax", breakdown.income_tax),
    ]
    return pd.DataFrame({
        get_text(language, "category"): [get_text(language, key) for key, _ in rows],
        get_text(language, "amount"): [float(value) for _, value in rows],
    })


def to_csv_bytes(dataframe: pd.DataFrame) -> bytes:
    return dataframe.to_csv(index=False).encode("utf-8-sig")
