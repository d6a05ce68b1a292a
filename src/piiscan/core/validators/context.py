"""
Context validators.

These look at a bounded window of the document around a match instead of the
matched text alone. They let low-specificity patterns (bare amounts, bare
postcodes, digit runs that look like phone numbers) take part without
over-matching ordinary numbers and city names.

Two policies are used:
- exclusion: reject when the preceding window has a disqualifying shape
- confirmation: accept only when the surrounding window contains a keyword

Windows are clamped to the document, and keyword matching is case-insensitive
substring membership.
"""

from __future__ import annotations

import re

from ..constants import (
    ADDRESS_CONTEXT_CHARS,
    FINANCIAL_CONTEXT_CHARS,
    IBAN_LOOKBACK_CHARS,
)
from .registry import register_context_validator


# =============================================================================
# KEYWORD SETS
# =============================================================================

# Leading part of an IBAN (country, check digits, groups) ending where the
# candidate starts
IBAN_PREFIX_PATTERN = re.compile(
    r'[A-Z]{2}\d{2}(?:[\s\-][\dA-Z]{4})*[\s\-]?[\dA-Z]{0,4}\Z',
    re.ASCII,
)

COUNTRY_TOKENS: tuple[str, ...] = (
    "austria", "österreich", "germany", "deutschland",
    "switzerland", "schweiz", "suisse", "svizzera",
    "netherlands", "niederlande", "belgium", "belgien",
    "france", "frankreich", "italy", "italien",
    "spain", "spanien", "portugal", "poland", "polen",
    "czech", "tschechien", "hungary", "ungarn",
    "ireland", "éire", "united kingdom",
    "dublin", "london", "edinburgh",
)

# Some tokens keep a trailing space so "weg " does not fire inside "wegen"
STREET_TOKENS: tuple[str, ...] = (
    "straße", "str.", "gasse", "weg ", "platz",
    "allee", "ring ", "damm", "gürtel",
    "ave ", "avenue", "street", "road", "blvd",
    "rue ", "via ", "calle",
)

FINANCIAL_KEYWORDS: tuple[str, ...] = (
    # German
    "preis", "e-preis", "g-preis", "betrag", "summe", "gesamt",
    "netto", "brutto", "mwst", "ust", "rechnung", "zahlung",
    "rabatt", "skonto", "gebühr", "kosten", "honorar", "entgelt",
    "leistung", "rechnungsbetrag", "gesamtbetrag", "endbetrag",
    # English
    "price", "amount", "total", "subtotal", "tax", "payment",
    "invoice", "receipt", "fee", "charge", "cost", "balance",
    # Symbols/codes
    "€", "eur",
)


# =============================================================================
# WINDOW HELPERS
# =============================================================================

def window(text: str, start: int, end: int, before: int, after: int) -> str:
    """Return ``text[start - before:end + after]`` clamped to the document."""
    lo = max(0, start - before)
    hi = min(len(text), max(end, 0) + after)
    if lo >= hi:
        return ""
    return text[lo:hi]


def contains_any(haystack: str, needles: tuple[str, ...]) -> bool:
    """Case-insensitive substring membership."""
    lowered = haystack.lower()
    return any(needle in lowered for needle in needles)


# =============================================================================
# VALIDATORS
# =============================================================================

@register_context_validator("phone_not_in_iban")
def phone_not_in_iban(text: str, start: int, end: int) -> bool:
    """Reject a phone candidate that continues an IBAN-like run.

    Only the characters before the match are inspected.
    """
    prefix = window(text, start, start, IBAN_LOOKBACK_CHARS, 0)
    return IBAN_PREFIX_PATTERN.search(prefix) is None


@register_context_validator("postcode_near_country")
def postcode_near_country(text: str, start: int, end: int) -> bool:
    """Accept only if a country name or street token is nearby."""
    context = window(text, start, end, ADDRESS_CONTEXT_CHARS, ADDRESS_CONTEXT_CHARS)
    return contains_any(context, COUNTRY_TOKENS) or contains_any(context, STREET_TOKENS)


@register_context_validator("financial_context")
def financial_context(text: str, start: int, end: int) -> bool:
    """Accept a bare amount only near money vocabulary."""
    context = window(text, start, end, FINANCIAL_CONTEXT_CHARS, FINANCIAL_CONTEXT_CHARS)
    return contains_any(context, FINANCIAL_KEYWORDS)
