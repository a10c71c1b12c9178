import logging
import math
import re
from typing import List, Optional, Sequence, Tuple

from ..core.text import clean_name
from .headings import is_heading
from .parser import ParsedIngredient
from .patterns import UNIT_ALTERNATION, strip_bullet
from .sections import split_bullets
from .vocab import (
    COMMA_NOTES,
    NUMBER_WORDS,
    PARENTHESIZED_NOTES,
    SEASONING_CONNECTORS,
    SEASONING_WORDS,
    TRAILING_NOTES,
    UNICODE_FRACTIONS,
    UNIT_SYNONYMS,
)

logger = logging.getLogger(__name__)

NUMBER = r"\d+(?:[.,]\d+)?"
_FRACTION_GLYPHS = "".join(UNICODE_FRACTIONS)
# "1/2", "1 1/2", "½", "1½"
FRACTION = rf"(?:\d+\s+)?\d+/\d+|(?:\d+\s*)?[{_FRACTION_GLYPHS}]"
MIXED_NUMBER_RE = re.compile(rf"^(\d+)(?:\s+(\d+/\d+)|\s*([{_FRACTION_GLYPHS}]))$")
WORD_NUMBER = "|".join(sorted(NUMBER_WORDS, key=len, reverse=True))
UNIT = rf"(?:{UNIT_ALTERNATION})\.?"
NAME_START = r"[^\W\d_]"

# (pattern, has_unit) in priority order, first match with a non-empty name wins
QUANTITY_PATTERNS: List[Tuple[re.Pattern, bool]] = [
    # "500g bloem"
    (re.compile(rf"^({NUMBER})({UNIT})\s+(.+)$", re.IGNORECASE), True),
    # "500 g bloem", "2 el olijfolie"
    (re.compile(rf"^({NUMBER})\s*({UNIT})\s+(.+)$", re.IGNORECASE), True),
    # "1/2 tl zout", "1 1/2 kopje melk", "½ kopje melk"
    (re.compile(rf"^({FRACTION})\s*({UNIT})\s+(.+)$", re.IGNORECASE), True),
    # "een snufje zout", "halve liter melk"
    (re.compile(rf"^({WORD_NUMBER})\s+({UNIT})\s+(.+)$", re.IGNORECASE), True),
    # "halve ui", "een ei"
    (re.compile(rf"^({WORD_NUMBER})\s+({NAME_START}.*)$", re.IGNORECASE), False),
    # "2 uien", "½ citroen"
    (re.compile(rf"^({NUMBER}|{FRACTION})\s+({NAME_START}.*)$", re.IGNORECASE), False),
]

_NOT_WORD = r"(?![^\W\d_])"
NOTE_PATTERNS = (
    [re.compile(rf",\s*({re.escape(p)}){_NOT_WORD}", re.IGNORECASE) for p in COMMA_NOTES]
    + [re.compile(rf"\s*\(({re.escape(p)})\)", re.IGNORECASE) for p in PARENTHESIZED_NOTES]
    + [re.compile(rf"\s+({re.escape(p)})$", re.IGNORECASE) for p in TRAILING_NOTES]
)

LEADING_DOT_RE = re.compile(r"^\.\s*")
PUNCT_RE = re.compile(r"[^\w&+]")


def normalize_unit(unit: str) -> str:
    """
    Map a unit spelling to its canonical short form.
    "gram", "gr", "gr." and "G" all give "g"; unknown units come back lower-cased.
    """
    lowered = unit.strip().lower()
    return UNIT_SYNONYMS.get(lowered.rstrip("."), lowered)


def parse_amount(value: str) -> Optional[float]:
    """
    "1,5" -> 1.5, "½" -> 0.5, "1/4" -> 0.25, "1 1/2" -> 1.5, "halve" -> 0.5.
    Anything unparseable, including a zero denominator or an overflowing
    digit run, gives None.
    """
    if not value:
        return None
    lowered = value.strip().lower()

    if lowered in NUMBER_WORDS:
        return NUMBER_WORDS[lowered]
    if lowered in UNICODE_FRACTIONS:
        return UNICODE_FRACTIONS[lowered]

    m = MIXED_NUMBER_RE.match(lowered)
    if m:
        whole = parse_amount(m.group(1))
        part = parse_amount(m.group(2) or m.group(3))
        if whole is None or part is None:
            return None
        return whole + part

    try:
        if "/" in lowered:
            numerator, denominator = lowered.split("/", 1)
            amount = float(numerator) / float(denominator)
        else:
            amount = float(lowered.replace(",", "."))
    except (ValueError, ZeroDivisionError, OverflowError):
        return None
    return amount if math.isfinite(amount) else None


def extract_notes(text: str) -> Tuple[str, Optional[str]]:
    """
    Pull one note phrase out of an ingredient line.
    "2 teentjes knoflook, geperst" -> ("2 teentjes knoflook", "geperst")
    """
    for pattern in NOTE_PATTERNS:
        m = pattern.search(text)
        if m:
            return pattern.sub("", text, count=1).strip(), m.group(1)
    return text, None


def _seasoning_words(text: str) -> Optional[List[str]]:
    words = [PUNCT_RE.sub("", w) for w in text.lower().split()]
    words = [w for w in words if w]
    seasonings = [w for w in words if w in SEASONING_WORDS]
    if len(seasonings) < 2:
        return None
    if any(w not in SEASONING_WORDS and w not in SEASONING_CONNECTORS for w in words):
        return None
    return seasonings


def split_ingredient_candidates(line: str) -> List[str]:
    """
    One OCR line can hold several ingredients: bullet-joined items, or
    seasonings without quantities ("peper zout" -> "peper", "zout").
    """
    candidates = []
    for part in split_bullets(strip_bullet(line)):
        seasonings = _seasoning_words(part)
        if seasonings:
            candidates.extend(seasonings)
        else:
            candidates.append(part)
    return candidates


def parse_ingredient_line(line: str) -> Optional[ParsedIngredient]:
    """
    Best effort parser for one ingredient candidate.
    Returns None when nothing usable is left for a name.
    """
    text = strip_bullet(line or "")
    text = LEADING_DOT_RE.sub("", text).strip()
    if not text:
        return None

    text, notes = extract_notes(text)

    for pattern, has_unit in QUANTITY_PATTERNS:
        m = pattern.match(text)
        if not m:
            continue
        amount = parse_amount(m.group(1))
        unit = normalize_unit(m.group(2)) if has_unit else None
        name = clean_name(m.group(3) if has_unit else m.group(2))
        if name:
            return ParsedIngredient(name=name, amount=amount, unit=unit, notes=notes)

    name = clean_name(text)
    if not name:
        return None
    return ParsedIngredient(name=name, notes=notes)


def parse_ingredients(lines: Sequence[str]) -> List[ParsedIngredient]:
    ingredients = []
    for line in lines:
        if not line or is_heading(line, "ingredients"):
            continue
        for candidate in split_ingredient_candidates(line):
            if len(candidate) < 2:
                continue
            parsed = parse_ingredient_line(candidate)
            if parsed is None:
                logger.debug(f"Dropped ingredient candidate without a name: {candidate!r}")
                continue
            ingredients.append(parsed)
    return ingredients
