"""
Checksum and format validators.

Pure, stateless checks run on a candidate's extracted text. Each returns
``True`` to keep the candidate and ``False`` to drop it; none of them raise on
malformed input.

Validators:
- luhn: Payment card numbers (13-19 digits)
- iban: ISO 13616 IBAN mod-97
- ipv4: Rejects octets with leading zeros
- age: Integer within MIN_AGE..MAX_AGE
- ssn_area: US SSN area number not 000, 666 or 9xx
- eu_vat: At least one digit after the country prefix
"""

from __future__ import annotations

from ..constants import (
    MAX_AGE,
    MAX_CARD_DIGITS,
    MAX_IBAN_LENGTH,
    MIN_AGE,
    MIN_CARD_DIGITS,
    MIN_IBAN_LENGTH,
)
from .registry import register_value_validator


def _is_ascii_upper(ch: str) -> bool:
    return "A" <= ch <= "Z"


@register_value_validator("luhn")
def validate_luhn(text: str) -> bool:
    """Validate a card number using the Luhn algorithm.

    Non-digit characters (spaces, dashes) are ignored.
    """
    digits = [int(c) for c in text if c in "0123456789"]
    if not MIN_CARD_DIGITS <= len(digits) <= MAX_CARD_DIGITS:
        return False

    total = 0
    double = False

    for digit in reversed(digits):
        if double:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
        double = not double

    return total % 10 == 0


@register_value_validator("iban")
def validate_iban(text: str) -> bool:
    """Validate an IBAN with the ISO 7064 mod-97 check.

    Spaces and dashes are stripped first. Python integers are unbounded, so
    the rearranged numeral is reduced in one step.
    """
    iban = text.replace(" ", "").replace("-", "")
    if not MIN_IBAN_LENGTH <= len(iban) <= MAX_IBAN_LENGTH:
        return False

    if not (_is_ascii_upper(iban[0]) and _is_ascii_upper(iban[1])):
        return False
    if not (iban[2] in "0123456789" and iban[3] in "0123456789"):
        return False
    if not all(_is_ascii_upper(c) or c in "0123456789" for c in iban[4:]):
        return False

    rearranged = iban[4:] + iban[:4]
    numeric = "".join(
        str(ord(c) - ord("A") + 10) if _is_ascii_upper(c) else c
        for c in rearranged
    )
    return int(numeric) % 97 == 1


@register_value_validator("ipv4")
def validate_ipv4(text: str) -> bool:
    """Reject dotted quads with octal-looking octets such as ``01``.

    Octet ranges are enforced by the pattern, not here.
    """
    parts = text.split(".")
    if len(parts) != 4:
        return False
    return not any(len(part) > 1 and part[0] == "0" for part in parts)


def in_range(text: str, low: int, high: int) -> bool:
    """Parse *text* as an ASCII integer and check ``low <= value <= high``."""
    text = text.strip()
    if not text.isascii():
        return False
    try:
        value = int(text)
    except ValueError:
        return False
    return low <= value <= high


@register_value_validator("age")
def validate_age(text: str) -> bool:
    """Plausible human age in years."""
    return in_range(text, MIN_AGE, MAX_AGE)


@register_value_validator("ssn_area")
def validate_ssn_area(text: str) -> bool:
    """US SSN area number: never 000, 666 or 900-999."""
    area = text[:3]
    if len(area) < 3:
        return False
    return area != "000" and area != "666" and area[0] != "9"


@register_value_validator("eu_vat")
def validate_eu_vat(text: str) -> bool:
    """Require a digit after the country code.

    Keeps words like ``ITALIENISCHES`` from passing as a VAT number.
    """
    return any(c in "0123456789" for c in text[2:])
