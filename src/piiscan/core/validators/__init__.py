"""
Value and context validators used by detection rules.

Importing this package registers every built-in validator by name.
"""

from .registry import (
    Validator,
    ValidatorKind,
    ValidatorRef,
    register_value_validator,
    register_context_validator,
    resolve_value_validator,
    resolve_context_validator,
    get_value_validator_names,
    get_context_validator_names,
)
from .checksum import (
    validate_luhn,
    validate_iban,
    validate_ipv4,
    validate_age,
    validate_ssn_area,
    validate_eu_vat,
    in_range,
)
from .context import (
    phone_not_in_iban,
    postcode_near_country,
    financial_context,
    window,
)

__all__ = [
    "Validator",
    "ValidatorKind",
    "ValidatorRef",
    "register_value_validator",
    "register_context_validator",
    "resolve_value_validator",
    "resolve_context_validator",
    "get_value_validator_names",
    "get_context_validator_names",
    "validate_luhn",
    "validate_iban",
    "validate_ipv4",
    "validate_age",
    "validate_ssn_area",
    "validate_eu_vat",
    "in_range",
    "phone_not_in_iban",
    "postcode_near_country",
    "financial_context",
    "window",
]
