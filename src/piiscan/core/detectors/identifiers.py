"""
Government and document identifier rules.

Entity Types:
- SSN: US SSN, German SV-Nummer, Swiss AHV, UK NINO, French INSEE
- ID_NUMBER: Steuer-ID, ID card, passport, EU VAT, insurance and pension
  numbers, invoice/order/reference numbers

Most ID_NUMBER forms are only recognised after a label ("Steuer-ID:",
"Reisepass"); the label is matched case-insensitively and only the number
itself (group 1) is reported.
"""

import re

from ..types import EntityType
from .pattern_registry import DetectionRule, _r

_SSN = EntityType.SSN
_ID = EntityType.ID_NUMBER

# 12 345678 A 123 (SV-Nummer and Rentenversicherungsnummer share a layout)
_DE_SOCIAL_NUMBER = r'\d{2}\s?\d{6}\s?[A-Z]\s?\d{3}'

# Free-form document numbers after an invoice/order label
_DOC_NUMBER = r'([A-Za-z0-9][\w.\-/]{2,})'


# =============================================================================
# SSN
# =============================================================================

SSN_RULES: tuple[DetectionRule, ...] = (
    # US: 123-45-6789
    _r(r'\b\d{3}-\d{2}-\d{4}\b', _SSN, 0.95, validator="ssn_area", name="ssn_us"),
    _r(r'(?:Sozialversicherungsnummer|SVN|SV-Nummer|Versicherungsnummer)[:\s]+(' + _DE_SOCIAL_NUMBER + r')',
       _SSN, 0.90, 1, flags=re.I, name="ssn_de_labelled"),
    # Swiss AHV: 756.1234.5678.97
    _r(r'\b756\.\d{4}\.\d{4}\.\d{2}\b', _SSN, 0.95, name="ssn_ch_ahv"),
    # UK NINO: AB 12 34 56 C
    _r(r'\b[A-CEGHJ-PR-TW-Z][A-CEGHJ-NPR-TW-Z]\s?\d{2}\s?\d{2}\s?\d{2}\s?[A-D]\b',
       _SSN, 0.90, name="ssn_uk_nino"),
    # French INSEE: 1 85 12 75 108 042 36
    _r(r'\b[12]\s?\d{2}\s?\d{2}\s?\d{2}\s?\d{3}\s?\d{3}\s?\d{2}\b', _SSN, 0.85, name="ssn_fr_insee"),
)


# =============================================================================
# ID NUMBERS
# =============================================================================

ID_NUMBER_RULES: tuple[DetectionRule, ...] = (
    # --- PERSONAL DOCUMENTS ---
    _r(r'(?:Steuer-?ID|Steueridentifikationsnummer|Tax\s?ID|TIN)[:\s]+(\d{11})\b',
       _ID, 0.90, 1, flags=re.I, name="de_tax_id"),
    _r(r'(?:Personalausweis|Ausweis(?:nummer)?|ID\s?card)[:\s]+([A-Z0-9]{9,10})\b',
       _ID, 0.85, 1, flags=re.I, name="id_card"),
    _r(r'(?:Reisepass|Passport)[:\s]+([A-Z0-9]{9,10})\b',
       _ID, 0.85, 1, flags=re.I, name="passport"),

    # --- EU VAT ---
    _r(r'\b(AT|BE|BG|CY|CZ|DE|DK|EE|EL|ES|FI|FR|HR|HU|IE|IT|LT|LU|LV|MT|NL|PL|PT|RO|SE|SI|SK)[A-Z0-9]{8,12}\b',
       _ID, 0.85, validator="eu_vat", name="eu_vat"),

    # --- INSURANCE ---
    _r(r'(?:Versichertennummer|Versicherten-?Nr\.?|Versicherungsnr\.?)[:\s]+([A-Z]?\d{6,12})\b',
       _ID, 0.90, 1, flags=re.I, name="de_insurance_number"),
    _r(r'(?:Rentenversicherungsnr\.?|Rentenversicherungsnummer|RVNR)[:\s]+(' + _DE_SOCIAL_NUMBER + r')\b',
       _ID, 0.90, 1, flags=re.I, name="de_pension_number"),

    # --- INVOICE / ORDER / REFERENCE ---
    # "Invoice number X", "Order no. X"
    _r(r'(?:Invoice|Rechnung|Bill|Receipt|Order|Reference|Bestell|Auftrags)\s*'
       r'(?:number|no\.?|num\.?|nr\.?|nummer|#)[:\s]+' + _DOC_NUMBER,
       _ID, 0.90, 1, flags=re.I, name="document_number"),
    # "Rechnungsnummer X", "Beleg-Nr. X"
    _r(r'(?:Rechnungsnummer|Rechnungs-?Nr\.?|Bestellnummer|Bestell-?Nr\.?|Auftragsnummer|'
       r'Auftrags-?Nr\.?|Referenz-?Nr\.?|Beleg-?Nr\.?)[:\s]+' + _DOC_NUMBER,
       _ID, 0.90, 1, flags=re.I, name="document_number_compound"),
    # "Invoice: X", "Reference: X"
    _r(r'(?:Invoice|Rechnung|Bill|Receipt|Order|Reference|Beleg)\s*:\s*' + _DOC_NUMBER,
       _ID, 0.90, 1, flags=re.I, name="document_number_colon"),
)
