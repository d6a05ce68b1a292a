"""
Clinical rules.

Entity Types:
- MEDICAL: ICD-10 codes, blood pressure readings, lab values with units, BMI
- AGE: Ages in English and German phrasing, labelled ages, birth years
"""

import re

from ..types import EntityType
from .pattern_registry import DetectionRule, _r

_MED = EntityType.MEDICAL
_AGE = EntityType.AGE

_ICD10 = r'[A-Z]\d{2}(?:\.\d{1,4})?'
_LAB_UNITS = r'(?:mg/dL|mmol/L|g/dL|mL/min|ng/mL|ng/L|µg/L|U/L|IU/L|pg/mL|µmol/L)'


# =============================================================================
# MEDICAL
# =============================================================================

MEDICAL_RULES: tuple[DetectionRule, ...] = (
    _r(r'(?:Diagnose|ICD|diagnosis|diagnostic)[:\s]+(' + _ICD10 + r')', _MED, 0.90, 1,
       flags=re.I, name="icd10_labelled"),
    # 120/80 mmHg
    _r(r'\b\d{2,3}/\d{2,3}\s?(?:mmHg|mm\s?Hg)\b', _MED, 0.90, name="blood_pressure"),
    _r(r'\b\d{1,4}(?:[.,]\d{1,2})?\s?' + _LAB_UNITS + r'\b', _MED, 0.85, name="lab_value"),
    _r(r'(?:BMI|Body Mass Index)[:\s]+(\d{2}(?:[.,]\d{1,2})?)', _MED, 0.85, 1,
       flags=re.I, name="bmi"),
    # (I21.0), (E11.65)
    _r(r'\((' + _ICD10 + r')\)', _MED, 0.85, 1, name="icd10_parenthesised"),
)


# =============================================================================
# AGE
# =============================================================================

AGE_RULES: tuple[DetectionRule, ...] = (
    # 42 years old, 42-year-old
    _r(r'\b(\d{1,3})\s?(?:-\s?)?(?:years?\s?(?:old)?|year-old)\b', _AGE, 0.85, 1,
       validator="age", name="age_years_old"),
    # 42 Jahre alt
    _r(r'\b(\d{1,3})\s?(?:Jahre?\s?(?:alt)?)\b', _AGE, 0.85, 1,
       validator="age", name="age_jahre_alt"),
    _r(r'(?:age|Alter)[:\s]+(\d{1,3})\b', _AGE, 0.80, 1,
       validator="age", flags=re.I, name="age_labelled"),
    # born in 1990, geboren im Jahr 1985
    _r(r'(?:born\s+(?:in\s+)?|geboren\s+(?:im\s+)?(?:Jahr\s+)?)((?:19|20)\d{2})\b', _AGE, 0.80, 1,
       flags=re.I, name="birth_year"),
)
