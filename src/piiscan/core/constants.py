"""
Core constants for the piiscan detection engine.

All magic numbers, window radii and limits defined here.
Import from this module rather than hardcoding values.
"""

__all__ = [
    # Scoring
    "MIN_RULE_SCORE",
    "MAX_RULE_SCORE",
    # Context windows
    "IBAN_LOOKBACK_CHARS",
    "ADDRESS_CONTEXT_CHARS",
    "FINANCIAL_CONTEXT_CHARS",
    # Value bounds
    "MIN_CARD_DIGITS",
    "MAX_CARD_DIGITS",
    "MIN_IBAN_LENGTH",
    "MAX_IBAN_LENGTH",
    "MIN_AGE",
    "MAX_AGE",
    # Processing
    "MAX_SCAN_WORKERS",
    "DEFAULT_SCAN_WORKERS",
    # Config files
    "CONFIG_FILENAMES",
    "ENV_PREFIX",
]

import os

# --- SCORING ---
# Rule scores live in (MIN_RULE_SCORE, MAX_RULE_SCORE]
MIN_RULE_SCORE = 0.0
MAX_RULE_SCORE = 1.0

# --- CONTEXT WINDOWS (characters) ---
IBAN_LOOKBACK_CHARS = 40  # phone inside an IBAN-like run
ADDRESS_CONTEXT_CHARS = 200  # postcode/street confirmation, both directions
FINANCIAL_CONTEXT_CHARS = 300  # bare amount confirmation, both directions

# --- VALUE BOUNDS ---
MIN_CARD_DIGITS = 13
MAX_CARD_DIGITS = 19
MIN_IBAN_LENGTH = 5
MAX_IBAN_LENGTH = 34
MIN_AGE = 1
MAX_AGE = 149

# --- PROCESSING ---
MAX_SCAN_WORKERS = 8
DEFAULT_SCAN_WORKERS = min(MAX_SCAN_WORKERS, os.cpu_count() or 1)

# --- CONFIG FILES ---
CONFIG_FILENAMES = ("piiscan.yaml", "config/piiscan.yaml")
ENV_PREFIX = "PIISCAN_"
