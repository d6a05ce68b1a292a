"""
Banking and payment rules.

Entity Types:
- IBAN: International Bank Account Number, mod-97 checked
- CREDIT_CARD: Visa, Mastercard, Amex, Luhn checked
- FINANCIAL: Currency amounts (EUR, USD, GBP, CHF) and BIC/SWIFT codes

Bare amounts without a currency symbol or thousands separator ("65,00") are
only reported near money vocabulary (``financial_context``).
"""

import re

from ..types import EntityType
from .pattern_registry import DetectionRule, _r

_FIN = EntityType.FINANCIAL


# =============================================================================
# IBAN
# =============================================================================

# 2 letters + 2 digits + 8-30 alphanumerics in optional groups of four
_IBAN_BODY = (
    r'[A-Z]{2}\d{2}[ \t\-]?[\dA-Z]{4}[ \t\-]?[\dA-Z]{4}'
    r'(?:[ \t\-]?[\dA-Z]{4}){1,7}(?:[ \t\-]?[\dA-Z]{1,4})?'
)

IBAN_RULES: tuple[DetectionRule, ...] = (
    _r(r'\b' + _IBAN_BODY + r'\b', EntityType.IBAN, 0.99, validator="iban", name="iban"),
    # "IBAN: AT61 1904 ..." may put a line break after the label
    _r(r'IBAN[:\s]+(' + _IBAN_BODY + r')', EntityType.IBAN, 0.99, 1,
       validator="iban", flags=re.I, name="iban_labelled"),
)


# =============================================================================
# CREDIT CARDS
# =============================================================================

CREDIT_CARD_RULES: tuple[DetectionRule, ...] = (
    _r(r'\b4\d{3}[\s\-]?\d{4}[\s\-]?\d{4}[\s\-]?\d{4}\b',
       EntityType.CREDIT_CARD, 0.95, validator="luhn", name="card_visa"),
    _r(r'\b(?:5[1-5]\d{2}|2[2-7]\d{2})[\s\-]?\d{4}[\s\-]?\d{4}[\s\-]?\d{4}\b',
       EntityType.CREDIT_CARD, 0.95, validator="luhn", name="card_mastercard"),
    _r(r'\b3[47]\d{2}[\s\-]?\d{6}[\s\-]?\d{5}\b',
       EntityType.CREDIT_CARD, 0.95, validator="luhn", name="card_amex"),
)


# =============================================================================
# AMOUNTS & BANK CODES
# =============================================================================

_BIC_COUNTRIES = (
    r'(?:AT|DE|CH|FR|IT|ES|NL|BE|IE|GB|LU|PT|PL|CZ|HU|SK|SI|HR|BG|RO|LT|LV|EE|FI|SE|DK|NO|LI|MT|CY|GR)'
)

FINANCIAL_RULES: tuple[DetectionRule, ...] = (
    # --- EUR, comma decimal: €1.500,00 / 1.500,00 € ---
    _r(r'€\s?\d{1,3}(?:\.\d{3})*,\d{2}', _FIN, 0.90, name="eur_prefix"),
    _r(r'\d{1,3}(?:\.\d{3})*,\d{2}\s?€', _FIN, 0.90, name="eur_suffix"),

    # --- EUR, dot decimal (Ireland, English texts): €1,000.00 ---
    _r(r'€\s?\d{1,3}(?:,\d{3})*\.\d{2}', _FIN, 0.90, name="eur_dot_prefix"),
    _r(r'\d{1,3}(?:,\d{3})*\.\d{2}\s?€', _FIN, 0.90, name="eur_dot_suffix"),

    # --- USD / GBP / CHF ---
    _r(r'[$£]\s?\d{1,3}(?:,\d{3})*\.\d{2}', _FIN, 0.90, name="usd_gbp"),
    _r(r"CHF\s?\d{1,3}(?:['’]\d{3})*\.\d{2}", _FIN, 0.90, name="chf"),

    # --- BARE AMOUNTS ---
    # Dot thousands + comma decimals is distinctive on its own: 2.544,70
    _r(r'\b\d{1,3}(?:\.\d{3})+,\d{2}\b', _FIN, 0.85, name="amount_thousands"),
    _r(r'\b\d{2,6},\d{2}\b', _FIN, 0.75, context="financial_context", name="amount_bare"),

    # --- BIC / SWIFT ---
    _r(r'(?:BIC|SWIFT|BIC/SWIFT)[:\s/]+([A-Z]{6}[A-Z0-9]{2}(?:[A-Z0-9]{3})?)', _FIN, 0.95, 1,
       flags=re.I, name="bic_labelled"),
    _r(r'\b[A-Z]{4}' + _BIC_COUNTRIES + r'[A-Z0-9]{2}(?:[A-Z0-9]{3})?\b', _FIN, 0.85,
       name="bic"),
)
