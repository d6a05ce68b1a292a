"""
Contact information rules: email addresses, URLs and phone numbers.

Phone patterns use ``[ \\t]`` rather than ``\\s`` so a number never spans a
line break, and every phone rule carries the ``phone_not_in_iban`` exclusion
window so digit groups inside a spaced IBAN are not reported as phones.
"""

from ..types import EntityType
from .pattern_registry import DetectionRule, _r


# =============================================================================
# EMAIL
# =============================================================================

# Local part allows DACH diacritics (müller@example.de)
_EMAIL = (
    r'[a-zA-Z0-9._%+\-àáâãäåæçèéêëìíîïðñòóôõöøùúûüýþß]+'
    r'@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}'
)

EMAIL_RULES: tuple[DetectionRule, ...] = (
    _r(_EMAIL, EntityType.EMAIL, 0.99, name="email"),
)


# =============================================================================
# URL
# =============================================================================

URL_RULES: tuple[DetectionRule, ...] = (
    _r(r'https?://[^\s<>"{}|\\^`\[\]]+', EntityType.URL, 0.95, name="url"),
)


# =============================================================================
# PHONE
# =============================================================================

# +49, +43, +41, +33, ... with optional (0) trunk prefix
_INTL_CODES = r'(?:49|43|41|33|39|34|31|32|351|48|46|358|45|47|353|44)'
_PHONE_INTL = r'\+' + _INTL_CODES + r'[\- \t]?(?:\(0\))?[\- \t]?[\d][\d \t.\-]{6,14}\d'
_PHONE_00 = r'00\d{1,3}[ \t.\-]?\d[\d \t.\-]{6,14}\d'
# German local: 0XXX XXXXXXX
_PHONE_DE_LOCAL = r'0[1-9]\d{1,4}[ \t.\-/]?\d[\d \t.\-]{4,10}\d'

PHONE_RULES: tuple[DetectionRule, ...] = (
    _r(_PHONE_INTL, EntityType.PHONE, 0.95, context="phone_not_in_iban", name="phone_international"),
    _r(_PHONE_00, EntityType.PHONE, 0.90, context="phone_not_in_iban", name="phone_00_prefix"),
    _r(_PHONE_DE_LOCAL, EntityType.PHONE, 0.85, context="phone_not_in_iban", name="phone_de_local"),
)
