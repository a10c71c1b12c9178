"""
Recipe-level metadata scanned from the whole normalized text:
servings, prep time, cook time and the target internal temperature.
"""

import re
from typing import Optional

from ..core.text import round_half_up
from .patterns import DECIMAL, INT
from .timers import extract_internal_temperature

SERVING_NOUNS = r"(?:personen|porties|persoon|portie)"

# First match wins
SERVINGS_RES = [
    re.compile(rf"voor\s*({INT})\s*-\s*({INT})\s*{SERVING_NOUNS}\b", re.IGNORECASE),
    re.compile(rf"voor\s*({INT})\s*{SERVING_NOUNS}\b", re.IGNORECASE),
    re.compile(rf"({INT})\s*-\s*({INT})\s*{SERVING_NOUNS}\b", re.IGNORECASE),
    re.compile(rf"({INT})\s*{SERVING_NOUNS}\b", re.IGNORECASE),
    re.compile(rf"\bserves?\s*:?\s*({INT})", re.IGNORECASE),
    re.compile(rf"\baantal(?:\s+personen)?[: \t]+({INT})", re.IGNORECASE),
    re.compile(rf"({INT})\s*servings\b", re.IGNORECASE),
    re.compile(rf"\bservings\s*:?\s*({INT})", re.IGNORECASE),
    re.compile(rf"\brecept\s+voor\s+({INT})", re.IGNORECASE),
    re.compile(rf"\b(?:maakt|makes)\s*:?\s*({INT})", re.IGNORECASE),
    re.compile(rf"\byields?\s*:?\s*({INT})", re.IGNORECASE),
]

PREP_LABELS = [
    r"voorbereid(?:ingstijd|ing|en)?",
    r"bereidingstijd",
    r"prep(?:aration)?\s*time",
    r"prep(?:aratie)?",
    r"(?:snij|klaarmaak)tijd",
    r"totale?\s*tijd",
    r"total\s*time",
]

COOK_LABELS = [
    r"(?:kook|grill|rook|bak|braad|stoof|oven)tijd",
    r"cook(?:ing)?\s*time",
    r"in\s*de\s*oven",
    r"op\s*(?:het\s*)?vuur",
    r"(?:marineer|rust)tijd",
    r"garen",
]

DURATION_TAIL = (
    rf"[: \t]+({DECIMAL})(?:\s*-\s*({INT}))?\s*"
    r"(?P<unit>minuten|minuut|minutes|minute|mins|min|uren|uur|hours|hour|hrs|hr|u)\b"
)
HOUR_WORDS = {"uren", "uur", "hours", "hour", "hrs", "hr", "u"}


def _label_res(labels):
    return [re.compile(rf"\b{label}{DURATION_TAIL}", re.IGNORECASE) for label in labels]


PREP_RES = _label_res(PREP_LABELS)
COOK_RES = _label_res(COOK_LABELS)

METADATA_LINE_RES = [
    re.compile(
        rf"^(?:recept\s+)?(?:voor\s+)?(?:ca\.?\s*|circa\s+)?\d+(?:\s*-\s*\d+)?\s*{SERVING_NOUNS}\b",
        re.IGNORECASE,
    ),
    re.compile(r"^(?:serves?|aantal(?:\s+personen)?|servings|makes|maakt|yields?)\b[: \t]*\d", re.IGNORECASE),
    re.compile(r"^\d+\s*servings\b", re.IGNORECASE),
    re.compile(rf"^(?:{'|'.join(PREP_LABELS + COOK_LABELS[:2])})\s*:", re.IGNORECASE),
    re.compile(rf"^(?:{'|'.join(PREP_LABELS + COOK_LABELS[:2])}){DURATION_TAIL}", re.IGNORECASE),
]


def _to_float(value: str) -> Optional[float]:
    try:
        return float(value.replace(",", "."))
    except ValueError:
        return None


def _labelled_minutes(text: str, patterns) -> Optional[int]:
    for pattern in patterns:
        m = pattern.search(text)
        if not m:
            continue

        value = _to_float(m.group(1))
        if value is None:
            continue
        if m.group(2):
            value = (value + int(m.group(2))) / 2

        if m.group("unit").lower() in HOUR_WORDS:
            value *= 60
        return round_half_up(value)
    return None


def extract_servings(text: str) -> Optional[int]:
    """
    "Voor 4 personen" -> 4, "4-6 porties" -> 5, "Serves 8" -> 8
    """
    if not text:
        return None

    for pattern in SERVINGS_RES:
        m = pattern.search(text)
        if not m:
            continue
        if m.lastindex and m.lastindex >= 2 and m.group(2):
            return round_half_up((int(m.group(1)) + int(m.group(2))) / 2)
        return int(m.group(1))
    return None


def extract_prep_time(text: str) -> Optional[int]:
    """Minutes from an explicit prep label ("Bereidingstijd: 20 minuten")."""
    if not text:
        return None
    return _labelled_minutes(text, PREP_RES)


def extract_cook_time(text: str) -> Optional[int]:
    """Minutes from an explicit cook label ("Rooktijd: 10-12 uur" -> 660)."""
    if not text:
        return None
    return _labelled_minutes(text, COOK_RES)


def extract_target_internal_temp(text: str) -> Optional[int]:
    return extract_internal_temperature(text)


def is_metadata_line(line: str) -> bool:
    """True for a line that only states servings or a labelled time."""
    if not line:
        return False
    stripped = line.strip()
    return any(pattern.match(stripped) for pattern in METADATA_LINE_RES)
