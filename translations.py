# -*- coding: utf-8 -*-
"""Label text for the calculator page, keyed by language."""
import logging

from settings import DEFAULT_LANGUAGE

logger = logging.getLogger(__name__)

TRANSLATIONS = {
    "ro": {
        "title": "Calculator Salariu Net",
        "caption": "Introduceți salariul brut pentru a vedea contribuțiile, impozitul și salariul net.",
        "grossSalary": "Salariu Brut (RON)",
        "period": "Perioadă",
        "monthly": "Lunar",
        "yearly": "Anual",
        "calculationDetails": "Detalii Calcul:",
        "healthInsurance": "Contribuția la sănătate (10%)",
        "socialInsurance": "Contribuția la asigurări sociale (25%)",
        "taxableIncome": "Venit impozabil",
        "incomeTax": "Impozit pe venit (10% după contribuții)",
        "netSalary": "Salariu Net",
        "finalNetSalary": "Salariu Net Final",
        "chartTitle": "Distribuția Salariului",
        "reset": "Resetare",
        "copy": "Copiază rezultatele",
        "copied": "Copiat!",
        "language": "RO",
        "outOfRange": "Introduceți o sumă mai mare decât 0 și cel mult {max}.",
        "download": "Descarcă detaliile (CSV)",
        "category": "Categorie",
        "amount": "Sumă",
        "summary": "Rezumat",
    },
    "en": {
        "title": "Net Salary Calculator",
        "caption": "Enter a gross salary to see contributions, income tax and net pay.",
        "grossSalary": "Gross Salary (RON)",
        "period": "Period",
        "monthly": "Monthly",
        "yearly": "Yearly",
        "calculationDetails": "Calculation Details:",
        "healthInsurance": "Health Insurance (10%)",
        "socialInsurance": "Social Insurance (25%)",
        "taxableIncome": "Taxable income",
        "incomeTax": "Income Tax (10% after contributions)",
        "netSalary": "Net Salary",
        "finalNetSalary": "Final Net Salary",
        "chartTitle": "Salary Distribution",
        "reset": "Reset",
        "copy": "Copy results",
        "copied": "Copied!",
        "language": "EN",
        "outOfRange": "Enter an amount greater than 0 and at most {max}.",
        "download": "Download breakdown (CSV)",
        "category": "Category",
        "amount": "Amount",
        "summary": "Summary",
    },
}

LANGUAGES = tuple(TRANSLATIONS)


def get_text(language: str, key: str) -> str:
    """Look up a label; unknown languages use the default, unknown keys echo back."""
    table = TRANSLATIONS.get(language) or TRANSLATIONS.get(DEFAULT_LANGUAGE) or TRANSLATIONS["ro"]
    return table.get(key, key)


def toggle_language(language: str) -> str:
    new_language = "en" if language == "ro" else "ro"
    logger.info("Language switched %s -> %s", language, new_language)
    return new_language
