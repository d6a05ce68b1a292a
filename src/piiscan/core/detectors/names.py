"""
Organisation and person name rules.

Names are only reported in a structural context: a corporate suffix or
institution keyword for ORG, and a title, role, verb or billing label for
PERSON. Bare capitalised word pairs are never tagged, since this engine is
lexical and does not do statistical name recognition.

The name building blocks are shared with the address rules.
"""

from ..types import EntityType
from .pattern_registry import DetectionRule, _r

_ORG = EntityType.ORG
_PERSON = EntityType.PERSON


# =============================================================================
# NAME BUILDING BLOCKS
# =============================================================================

UPPER = 'A-ZÀÁÂÃÄÅÆÇÈÉÊËÌÍÎÏÐÑÒÓÔÕÖØÙÚÛÜÝÞ'
LOWER = 'a-zàáâãäåæçèéêëìíîïðñòóôõöøùúûüýþß'

# Müller, Ñoño, Ólafsson
NAME_COMPONENT = f'[{UPPER}][{LOWER}]+'
# Jean-Pierre, Müller-Schmidt
NAME_PATTERN = f'{NAME_COMPONENT}(?:-{NAME_COMPONENT})?'
# de Groot, van der Berg, von Stein
NAME_PARTICLE = r'(?:de|van|der|von|di|del|della|le|la|da|dos|das|du|ten|ter|het)'
# 2-4 components, particles allowed in between
FULL_NAME = NAME_PATTERN + r'(?:[ \t]+(?:' + NAME_PARTICLE + r'[ \t]+)*' + NAME_PATTERN + r'){1,3}'

# Spaces and tabs only, so names never run across lines
_SP = r'[ \t]+'


# =============================================================================
# ORG
# =============================================================================

# Abbreviations (2-6 capitals) are allowed alongside normal words: "SAP SE"
_CORP_NAME_PART = f'(?:[{UPPER}]{{2,6}}|{NAME_COMPONENT})(?:-{NAME_COMPONENT})?'
_CORP_NAME = _CORP_NAME_PART + r'(?:' + _SP + _CORP_NAME_PART + r')*' + _SP
_NAME_RUN = NAME_PATTERN + r'(?:' + _SP + NAME_PATTERN + r')*'

ORG_RULES: tuple[DetectionRule, ...] = (
    # --- CORPORATE SUFFIXES ---
    _r(_CORP_NAME + r'(?:GmbH|AG|SE|KG|OHG|KGaA|UG|e\.G\.|e\.V\.)\b', _ORG, 0.90, name="corp_de"),
    _r(_CORP_NAME + r'(?:Ltd|Inc|Corp|LLC|PLC|Plc|SA|SAS|SARL|SpA|SRL|BV|NV|ULC|DAC|LLP)\.?\b',
       _ORG, 0.90, name="corp_intl"),

    # --- INSTITUTIONS ---
    _r(r'(?:Universitätsklinikum|Uniklinik|Universität|Klinikum)' + _SP + _NAME_RUN,
       _ORG, 0.85, name="institution_de"),
    _r(r'Klinik' + _SP + r'(?:am|für|an' + _SP + r'der|im)' + _SP + _NAME_RUN,
       _ORG, 0.85, name="klinik_de"),
    _r(r'(?:Hôpital|CHU)' + _SP + NAME_PATTERN + r'(?:[ \t\-]+' + NAME_PATTERN + r')*',
       _ORG, 0.85, name="hospital_fr"),
    _r(r'(?:Ospedale|Policlinico)' + _SP + _NAME_RUN, _ORG, 0.85, name="hospital_it"),
    _r(r'Hospital' + _SP + _NAME_RUN, _ORG, 0.85, name="hospital_es"),

    # --- INSURERS & AGENCIES ---
    _r(r'AOK' + _SP + NAME_PATTERN, _ORG, 0.90, name="aok"),
    _r(r'Deutsche' + _SP + r'Rentenversicherung(?:' + _SP + NAME_PATTERN + r')?', _ORG, 0.90,
       name="deutsche_rentenversicherung"),
    _r(NAME_PATTERN + _SP + r'UMC', _ORG, 0.85, name="umc_suffix"),
    _r(r'UMC' + _SP + NAME_PATTERN, _ORG, 0.85, name="umc_prefix"),
)


# =============================================================================
# PERSON
# =============================================================================

# Longer triggers first so "Dr. med." wins over "Dr."
PERSON_TRIGGERS: tuple[str, ...] = (
    # Multi-word
    r'Dr\.\s?med\.', r'de\s+heer',
    r'mein Freund', r'meine Freundin',
    r'meinen Patienten', r'meiner Patientin',
    r'my friend', r'my colleague', r'my patient',
    r'mon ami', r'mon amie',
    # German roles
    r'Antragsteller(?:in)?', r'Sachbearbeiter(?:in)?', r'Bearbeiter(?:in)?',
    r'Konsiliarius',
    r'Leiter(?:in)?', r'Geschäftsführer(?:in)?', r'Inhaber(?:in)?',
    r'Direktor(?:in)?', r'Vorstand', r'Vorsitzende[r]?',
    # Titles
    r'Dott\.?\s?ssa', r'Dott\.?', r'Dra\.?',
    r'Prof\.?', r'Dr\.?',
    # German
    r'Herr', r'Frau', r'Patient(?:in)?', r'Kollege', r'Kollegin',
    # French
    r'Monsieur', r'Madame', r'Mademoiselle',
    # English
    r'Mr\.?', r'Mrs\.?', r'Ms\.?', r'colleague',
    # Dutch
    r'Meneer', r'Mevrouw',
    # Italian
    r'Signor(?:a)?',
    # Spanish
    r'Señor(?:a)?',
)

_TRIGGER = r'(?:' + '|'.join(PERSON_TRIGGERS) + r')'
_VERBS = r'(?:told|asked|called|emailed|contacted|met|visited|informed)'
_BILLING = r'(?:Bill\s+to|Billed\s+to|Invoice\s+to|Sold\s+to|Ship\s+to|Deliver\s+to|Attn\.?|Attention)'

# Only the trigger is case-insensitive; the name itself must be capitalised
PERSON_RULES: tuple[DetectionRule, ...] = (
    # "Herr Max Mustermann", "Antragsteller: Thomas Schmidt"
    _r(r'(?i:' + _TRIGGER + r')[: \t]+(' + FULL_NAME + r')', _PERSON, 0.95, 1, name="person_titled"),
    # "called Anna Weber"
    _r(r'(?i:' + _VERBS + r')[ \t]+(' + FULL_NAME + r')', _PERSON, 0.85, 1, name="person_verb"),
    # "geb. Müller", "geborene. Weber"
    _r(r'(?i:geb(?:oren(?:e)?)?\.)[ \t]+(' + NAME_PATTERN + r')', _PERSON, 0.85, 1, name="person_maiden"),
    # "Bill to: Jane Doe" (label and name may be on separate lines)
    _r(r'(?i:' + _BILLING + r')[\s:]+(' + FULL_NAME + r')', _PERSON, 0.90, 1, name="person_billing"),
)
