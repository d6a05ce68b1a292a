"""
Date rules.

Numeric day-first dates (DD.MM.YYYY and the ``/`` and ``-`` variants), ISO
dates, and written dates in English, German and French. Years are limited to
1900-2099.
"""

from ..types import EntityType
from .pattern_registry import DetectionRule, _r

_DATE = EntityType.DATE
_YEAR = r'(?:19|20)\d{2}'

_EN_MONTHS = (
    r'(?:January|February|March|April|May|June|July|August|September|October|November|December'
    r'|Jan|Feb|Mar|Apr|Jun|Jul|Aug|Sep|Sept|Oct|Nov|Dec)\.?'
)
_DE_MONTHS = (
    r'(?:Januar|Februar|März|April|Mai|Juni|Juli|August|September|Oktober|November|Dezember)'
)
_FR_MONTHS = (
    r'(?:janvier|février|mars|avril|mai|juin|juillet|août|septembre|octobre|novembre|décembre)'
)

DATE_RULES: tuple[DetectionRule, ...] = (
    # 12.03.2026, 12/03/2026, 12-03-2026
    _r(r'\b(?:0[1-9]|[12]\d|3[01])[./\-](?:0[1-9]|1[0-2])[./\-]' + _YEAR + r'\b',
       _DATE, 0.90, name="date_numeric"),
    # February 12, 2026
    _r(_EN_MONTHS + r'[ \t]+\d{1,2},?[ \t]+' + _YEAR, _DATE, 0.90, name="date_written_en"),
    # 12. Februar 2026
    _r(r'\d{1,2}\.[ \t]+' + _DE_MONTHS + r'[ \t]+' + _YEAR, _DATE, 0.90, name="date_written_de"),
    # 12 février 2026
    _r(r'\d{1,2}[ \t]+' + _FR_MONTHS + r'[ \t]+' + _YEAR, _DATE, 0.85, name="date_written_fr"),
    # 2026-03-12
    _r(r'\b' + _YEAR + r'-(?:0[1-9]|1[0-2])-(?:0[1-9]|[12]\d|3[01])\b', _DATE, 0.90, name="date_iso"),
)
