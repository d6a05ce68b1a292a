"""
Postal address rules.

Covered:
- German / Austrian / Swiss streets (compound, separate-word and hyphenated
  forms) with optional postcode + city
- French, Italian, Spanish and Dutch street forms
- US street lines and city/state/ZIP
- Irish Eircodes and Dublin postal districts
- Context-gated forms: bare postcode + city, a generic street line, and an
  English street name without house number. These three only fire when a
  country name or street token appears within ADDRESS_CONTEXT_CHARS.

All patterns use ``[ \\t]`` instead of ``\\s`` so a match never crosses a
line break.
"""

import re

from ..types import EntityType
from .names import NAME_PATTERN
from .pattern_registry import DetectionRule, _r

_ADDR = EntityType.ADDRESS


# =============================================================================
# BUILDING BLOCKS
# =============================================================================

# 27, 27a, Austrian/Swiss door notation 5/2/3
_HOUSE_NUM = r'\d{1,4}[a-zA-Z]?(?:/\d{1,4})*'

_DE_CAP_WORD = r'[A-ZÄÖÜ][a-zäöüß]+'

# Compound form: Gartenstraße, Margaretengürtel, Fleischmarkt
_DE_SUFFIXES = (
    r'(?:straße|str\.|weg|platz|allee|gasse|ring|damm|ufer|kai|gürtel|markt|graben|steig|steg'
    r'|berg|promenade|zeile|hof|siedlung|anger)'
)
# Separate-word form: Berliner Straße, Hoher Markt
_DE_SEP_WORDS = (
    r'(?:Straße|Str\.|Weg|Platz|Allee|Gasse|Ring|Damm|Ufer|Kai|Gürtel|Markt|Graben|Steig|Steg'
    r'|Berg|Promenade|Zeile|Hof|Siedlung|Anger)'
)
# Hyphenated form: Theodor-Stern-Kai
_DE_HYPHEN_WORDS = (
    r'(?:Straße|Str|Weg|Platz|Allee|Gasse|Ring|Damm|Ufer|Kai|Gürtel|Markt|Graben|Steig|Berg'
    r'|Promenade|Zeile|Hof)'
)

_DE_STREET_SUFFIX = r'(?:' + _DE_CAP_WORD + _DE_SUFFIXES + r')[ \t]+' + _HOUSE_NUM
_DE_STREET_SEP = (
    NAME_PATTERN + r'(?:[ \t]+' + NAME_PATTERN + r')?[ \t]+' + _DE_SEP_WORDS + r'[ \t]+' + _HOUSE_NUM
)
_DE_STREET_HYPHEN = r'(?:' + _DE_CAP_WORD + r'-)+' + _DE_HYPHEN_WORDS + r'[ \t]+' + _HOUSE_NUM

# Frankfurt, Bad Homburg, Frankfurt am Main
_CITY = _DE_CAP_WORD + r'(?:[ \t]+' + _DE_CAP_WORD + r'|[ \t]+[a-z]+[ \t]+' + _DE_CAP_WORD + r')?'
# AT/CH use 4-digit postcodes, DE 5
_POSTCODE_CITY = r'(?:,[ \t]*\d{4,5}[ \t]+' + _CITY + r')?'

_ROMANCE_WORD = r'[A-ZÀ-Ü][a-zà-ÿ]+'
_ROMANCE_NAME = _ROMANCE_WORD + r'(?:[ \t]+' + _ROMANCE_WORD + r')*'

_US_STREET_TYPE = (
    r'(?:Ave(?:nue)?|Blvd|Boulevard|Cir(?:cle)?|Ct|Court|Dr(?:ive)?|Expy|Expressway|Hwy|Highway'
    r'|Ln|Lane|Pkwy|Parkway|Pl(?:ace)?|Rd|Road|St(?:reet)?|Ter(?:r(?:ace)?)?|Trl|Trail|Way)\.?'
)
_US_DIR = r'(?:[NESW]\.?|NE|NW|SE|SW)'
_US_STATE_ABBR = (
    r'(?:AL|AK|AZ|AR|CA|CO|CT|DE|FL|GA|HI|ID|IL|IN|IA|KS|KY|LA|ME|MD|MA|MI|MN|MS|MO|MT|NE|NV|NH'
    r'|NJ|NM|NY|NC|ND|OH|OK|OR|PA|RI|SC|SD|TN|TX|UT|VT|VA|WA|WV|WI|WY|DC)'
)
_US_STATE_NAMES = (
    r'(?:Alabama|Alaska|Arizona|Arkansas|California|Colorado|Connecticut|Delaware|Florida|Georgia'
    r'|Hawaii|Idaho|Illinois|Indiana|Iowa|Kansas|Kentucky|Louisiana|Maine|Maryland|Massachusetts'
    r'|Michigan|Minnesota|Mississippi|Missouri|Montana|Nebraska|Nevada|New[ \t]+Hampshire'
    r'|New[ \t]+Jersey|New[ \t]+Mexico|New[ \t]+York|North[ \t]+Carolina|North[ \t]+Dakota|Ohio'
    r'|Oklahoma|Oregon|Pennsylvania|Rhode[ \t]+Island|South[ \t]+Carolina|South[ \t]+Dakota'
    r'|Tennessee|Texas|Utah|Vermont|Virginia|Washington|West[ \t]+Virginia|Wisconsin|Wyoming'
    r'|District[ \t]+of[ \t]+Columbia)'
)
# 440 N Barranca Ave #4133
_US_STREET = (
    r'\d{1,5}[ \t]+(?:' + _US_DIR + r'[ \t]+)?[A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+)*[ \t]+'
    + _US_STREET_TYPE + r'(?:[ \t]+' + _US_DIR + r')?'
    r'(?:[ \t]+(?:#|Apt\.?|Suite|Ste\.?|Unit|Fl\.?)[ \t]*[A-Za-z0-9]+)?'
)
# Covina, California 91723 / Covina, CA 91723-1234
_US_CITY_STATE_ZIP = (
    r'[A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+)*,[ \t]+(?:' + _US_STATE_ABBR + r'|' + _US_STATE_NAMES
    + r')[ \t]+\d{5}(?:-\d{4})?'
)


# =============================================================================
# PATTERNS
# =============================================================================

ADDRESS_RULES: tuple[DetectionRule, ...] = (
    # --- DACH ---
    _r(_DE_STREET_SUFFIX + _POSTCODE_CITY, _ADDR, 0.85, name="street_de_compound"),
    _r(_DE_STREET_SEP + _POSTCODE_CITY, _ADDR, 0.85, name="street_de_separate"),
    _r(_DE_STREET_HYPHEN + _POSTCODE_CITY, _ADDR, 0.85, name="street_de_hyphenated"),

    # --- FR / IT / ES / NL ---
    _r(r"\d{1,4},?[ \t]+(?:rue|avenue|boulevard|place|chemin|impasse)[ \t]+"
       r"(?:de[ \t]+(?:la[ \t]+)?|du[ \t]+|des[ \t]+|l')?" + _ROMANCE_NAME,
       _ADDR, 0.85, name="street_fr"),
    _r(r'(?:[Vv]ia|[Pp]iazza|[Cc]orso|[Vv]iale)[ \t]+(?:(?:del|della|dello|dei|degli|delle|di)[ \t]+)?'
       + _ROMANCE_NAME + r'[ \t]+\d{1,4}',
       _ADDR, 0.85, name="street_it"),
    _r(r'(?:[Cc]alle|[Aa]venida|[Pp]laza|[Pp]aseo)[ \t]+(?:de[ \t]+(?:la[ \t]+)?|del[ \t]+)?'
       + _ROMANCE_NAME + r'[ \t]+\d{1,4}',
       _ADDR, 0.85, name="street_es"),
    _r(_DE_CAP_WORD + r'(?:straat|laan|weg|plein|gracht|kade|singel|dreef)[ \t]+\d{1,4}',
       _ADDR, 0.85, name="street_nl"),

    # --- US ---
    _r(_US_STREET, _ADDR, 0.85, name="street_us"),
    _r(_US_CITY_STATE_ZIP, _ADDR, 0.85, name="city_state_zip_us"),

    # --- IRELAND ---
    # D02 AX07, A65 F4E2
    _r(r'\b[ACDEFHKNPRTVWXY]\d[0-9W][ \t]+[A-Z0-9]{4}\b', _ADDR, 0.90, name="eircode"),
    _r(r'Dublin[ \t]+(?:\d{1,2}|6W)\b', _ADDR, 0.85, name="dublin_district"),

    # --- CONTEXT-GATED ---
    # 1100 Wien, 10115 Berlin, 8001 Zürich
    _r(r'\b\d{4,5}[ \t]+' + _CITY, _ADDR, 0.80,
       context="postcode_near_country", name="postcode_city"),
    # Street line without a known suffix: "Am Tabor 5", "Spittelau 3"
    _r(r'^([A-ZÄÖÜ][A-Za-zäöüßÀ-ÿ]+(?:[ \t]+[A-Za-zäöüßÀ-ÿ]+){0,3}[ \t]+' + _HOUSE_NUM + r')[ \t]*$',
       _ADDR, 0.75, 1, context="postcode_near_country", flags=re.M, name="street_line"),
    # "Fenian St", "Baker Street" on their own line
    _r(r'^([A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+){0,2}[ \t]+' + _US_STREET_TYPE + r')[ \t]*$',
       _ADDR, 0.75, 1, context="postcode_near_country", flags=re.M, name="street_line_en"),
)
