"""Compiled line-shape patterns shared by the parsing stages."""

import re

from .vocab import BULLET_GLYPHS, INGREDIENT_SHAPE_UNITS, UNIT_SYNONYMS

# Captured numbers are bounded: a longer digit run is scan noise, not a quantity
INT = r"(?<!\d)\d{1,5}(?!\d)"
DECIMAL = r"(?<!\d)\d{1,5}(?:[.,]\d{1,3})?(?!\d)"

# Longest first so "gram" is tried before "g" inside an alternation
UNIT_ALTERNATION = "|".join(sorted((re.escape(u) for u in UNIT_SYNONYMS), key=len, reverse=True))
_SHAPE_UNITS = "|".join(sorted(INGREDIENT_SHAPE_UNITS, key=len, reverse=True))

BULLET_LINE_RE = re.compile(rf"^(?:[-*]\s|[{BULLET_GLYPHS}])")
LEADING_BULLET_RE = re.compile(rf"^\s*(?:[-*](?=\s)|[{BULLET_GLYPHS}])\s*")

STEP_NUMBER_RE = re.compile(r"^\d+[.):]")
NUMBERED_CAPITALIZED_RE = re.compile(r"^\d+[.)]\s*[A-ZÀ-Ý]")
PAGE_NUMBER_RE = re.compile(r"^\d{1,3}$")

INGREDIENT_SHAPE_RE = re.compile(rf"^\d+(?:[.,]\d+)?\s*(?:{_SHAPE_UNITS})\b", re.IGNORECASE)
SERVINGS_PHRASE_RE = re.compile(r"\d+\s*(?:personen|porties|persoon)\b", re.IGNORECASE)

CAPS_LED_RE = re.compile(r"^[A-ZÀ-Ý]{2,}")


def is_bullet_line(line: str) -> bool:
    return bool(BULLET_LINE_RE.match(line))


def strip_bullet(line: str) -> str:
    """Remove a leading bullet ("- ", "* ", "•", "⚫", ...)."""
    return LEADING_BULLET_RE.sub("", line).strip()


def is_step_number_line(line: str) -> bool:
    return bool(STEP_NUMBER_RE.match(line))


def looks_like_ingredient(line: str) -> bool:
    return bool(INGREDIENT_SHAPE_RE.match(line))
