import re
from typing import Optional

from ..core.text import round_half_up
from .patterns import DECIMAL, INT
from .vocab import MAX_TEMPERATURE_C, MIN_TEMPERATURE_C

MINUTE_UNITS = r"(?:minuten|minuut|minutes|minute|mins|min)\b\.?"
HOUR_UNITS = r"(?:uren|uur|hours|hour|hrs|hr|u)\b\.?"

# Tried in order, first hit wins: "20-30 minuten" must not read as "30 minuten"
MINUTE_RANGE_RE = re.compile(rf"({INT})\s*-\s*({INT})\s*{MINUTE_UNITS}", re.IGNORECASE)
MINUTE_RE = re.compile(rf"({DECIMAL})\s*{MINUTE_UNITS}", re.IGNORECASE)
HOUR_RANGE_RE = re.compile(rf"({INT})\s*-\s*({INT})\s*{HOUR_UNITS}", re.IGNORECASE)
HOUR_RE = re.compile(rf"({DECIMAL})\s*{HOUR_UNITS}", re.IGNORECASE)

TEMPERATURE_RES = [
    re.compile(rf"({INT})\s*°\s*C", re.IGNORECASE),
    re.compile(rf"({INT})\s*graden(?:\s*celsius)?", re.IGNORECASE),
    re.compile(rf"kerntemperatuur[:\s]+({INT})", re.IGNORECASE),
    re.compile(rf"interne\s*temperatuur[:\s]+({INT})", re.IGNORECASE),
    re.compile(rf"internal\s*temperature[:\s]+({INT})", re.IGNORECASE),
]

# Core temperature phrases, preferred for a recipe's target internal temperature
INTERNAL_TEMPERATURE_RES = TEMPERATURE_RES[2:]


def _to_float(value: str) -> Optional[float]:
    try:
        return float(value.replace(",", "."))
    except ValueError:
        return None


def extract_timer_minutes(text: str) -> Optional[int]:
    """
    Find a duration in free text and return it in minutes.

    "30 minuten" -> 30, "20-30 min" -> 25, "1,5 uur" -> 90, "2-3 uur" -> 150
    """
    if not text:
        return None

    m = MINUTE_RANGE_RE.search(text)
    if m:
        return round_half_up((int(m.group(1)) + int(m.group(2))) / 2)

    m = MINUTE_RE.search(text)
    if m:
        minutes = _to_float(m.group(1))
        if minutes is not None:
            return round_half_up(minutes)

    m = HOUR_RANGE_RE.search(text)
    if m:
        return round_half_up((int(m.group(1)) + int(m.group(2))) / 2 * 60)

    m = HOUR_RE.search(text)
    if m:
        hours = _to_float(m.group(1))
        if hours is not None:
            return round_half_up(hours * 60)

    return None


def is_sane_temperature(value: int) -> bool:
    return MIN_TEMPERATURE_C <= value <= MAX_TEMPERATURE_C


def _first_sane(text: str, patterns) -> Optional[int]:
    for pattern in patterns:
        m = pattern.search(text)
        if not m:
            continue
        value = int(m.group(1))
        if is_sane_temperature(value):
            return value
    return None


def extract_temperature(text: str) -> Optional[int]:
    """
    Find a temperature in °C. Values outside the sane range are OCR noise
    and yield None ("5°C" or "500°C").
    """
    if not text:
        return None
    return _first_sane(text, TEMPERATURE_RES)


def extract_internal_temperature(text: str) -> Optional[int]:
    """Core temperature if the text names one, else any sane temperature."""
    if not text:
        return None
    return _first_sane(text, INTERNAL_TEMPERATURE_RES) or _first_sane(text, TEMPERATURE_RES)
