"""MPN helpers: normalization, category detection and part numbers in free text."""

import logging
import re

from . import categories as cat
from .manufacturers import UNKNOWN, Manufacturer, get_manufacturer
from .resolver import classify

logger = logging.getLogger(__name__)

_NON_ALNUM_RE = re.compile(r'[^A-Z0-9]')
_WORD_SPLIT_RE = re.compile(r'\s+|[;,|]')
_DIGIT_RE = re.compile(r'[0-9]')

# Labels people put in front of part numbers in BOMs and notes
_TEXT_PREFIXES = (
    "IC-", "PART-", "MPN-", "MPN:", "PN:", "P/N:", "REF:", "REF-", "ITEM:", "ITEM-",
)
_TEXT_SUFFIXES = ("-SMD", "-THT", "-ROHS")

# Families whose category does not depend on who made them
_LINEAR_REGULATOR_RE = re.compile(r'^(?:(?:LM|MC)?(?:78|79)[0-9]{2}|LM317)')
_LOGIC_74_RE = re.compile(r'^74[A-Z]{0,4}[0-9]{2,4}')


def normalize_mpn(mpn: str | None) -> str:
    """Comparison key: trimmed, uppercased, non-alphanumerics dropped ("lm-358 dr" -> "LM358DR")."""
    if not mpn or not mpn.strip():
        return ""
    return _NON_ALNUM_RE.sub("", mpn.strip().upper())


def is_from_manufacturer(mpn: str | None, manufacturer: Manufacturer | str) -> bool:
    """True if the MPN classifies to the given manufacturer.

    Raises:
        ValueError: If manufacturer is a name that does not resolve.
    """
    expected = get_manufacturer(manufacturer)
    if not mpn:
        return False
    return classify(mpn) is expected


def detect_category(mpn: str | None) -> str | None:
    """Most specific category the MPN's manufacturer rule set (or the generic rules) claims.

    Fixed-voltage 78xx/79xx and LM317 regulators and 74-series logic are
    recognized regardless of manufacturer. Returns None when nothing matches.
    """
    if not mpn or not mpn.strip():
        return None
    mpn = mpn.strip().upper()

    if _LINEAR_REGULATOR_RE.match(mpn):
        return cat.REGULATOR_LINEAR
    if _LOGIC_74_RE.match(mpn):
        return cat.LOGIC_IC

    manufacturer = classify(mpn)
    candidates = [manufacturer] if manufacturer.is_unknown else [manufacturer, UNKNOWN]
    for candidate in candidates:
        matched = candidate.matching_categories(mpn)
        if not matched:
            continue
        specific = [tag for tag in matched if cat.is_specialization(tag)]
        return specific[0] if specific else matched[0]
    return None


def _clean_word(word: str) -> str:
    word = word.strip().upper()
    if "=" in word:
        word = word.split("=", 1)[1]
    for prefix in _TEXT_PREFIXES:
        if word.startswith(prefix):
            word = word[len(prefix):]
    for suffix in _TEXT_SUFFIXES:
        if word.endswith(suffix):
            word = word[:-len(suffix)]
    return word


def find_mpn_in_text(text: str | None) -> str | None:
    """Return the first word in free text that a rule set recognizes as a part number.

    Words are split on whitespace and ; , | separators, and only words with a
    digit are considered. "key=value" pairs keep the value, and labels such
    as "IC-" or "P/N:" are stripped. A word claimed by its manufacturer's own
    rules wins over an earlier word that only matches the generic
    designator-style patterns ("U3", "R1").
    """
    if not text or not text.strip():
        return None

    words = [_clean_word(raw) for raw in _WORD_SPLIT_RE.split(text.strip())]
    words = [word for word in words if word and _DIGIT_RE.search(word)]

    for word in words:
        manufacturer = classify(word)
        if not manufacturer.is_unknown and manufacturer.matches(word):
            return word

    for word in words:
        if UNKNOWN.matches(word):
            return word

    logger.debug("No part number found in text")
    return None
