"""
Text repair for raw OCR output.

preprocess_ocr_text() only deletes characters or swaps a glyph for its
equivalent, it never invents new words. merge_broken_lines() rejoins
sentences that the scanner wrapped over several lines.
"""

import re
from typing import List, Optional

from .metadata import is_metadata_line
from .patterns import CAPS_LED_RE
from .headings import match_heading
from .ingredient_parser import extract_notes
from .vocab import (
    BULLET_GLYPHS,
    CONNECTIVE_WORDS,
    I_AS_ONE_FOLLOWERS,
    NOISE_LINE_PATTERNS,
    NUMBER_WORDS,
    SEASONING_CONNECTORS,
    SEASONING_WORDS,
    SPLIT_LINE_UNITS,
    UNICODE_FRACTIONS,
    UNIT_SYNONYMS,
)

_I_FOLLOWERS = "|".join(sorted(I_AS_ONE_FOLLOWERS, key=len, reverse=True))
I_ALONE_RE = re.compile(r"(^|\n)I[ \t]*\n(?=[a-zà-ÿ])")
I_BEFORE_WORD_RE = re.compile(rf"\bI[ \t]+(?=(?i:{_I_FOLLOWERS})\.?[ \t,])")

PIPE_BULLET_RE = re.compile(r"[ \t]*\|[ \t]*")
HYPHEN_WRAP_RE = re.compile(r"([^\W\d_])-[ \t]*\r?\n[ \t]*([a-zà-ÿ])")
PAGE_NUMBER_LINE_RE = re.compile(r"^\d{1,3}[ \t]*\r?$", re.MULTILINE)
TRAILING_PAGE_NUMBER_RE = re.compile(r"\n\d{1,3}\s*$")
BULLET_ONLY_LINE_RE = re.compile(rf"^[ \t]*[-–—*{BULLET_GLYPHS}]+[ \t]*$", re.MULTILINE)
NOISE_LINE_RES = [re.compile(p, re.IGNORECASE | re.MULTILINE) for p in NOISE_LINE_PATTERNS]
SPACED_HYPHEN_RE = re.compile(r"([^\W\d_])[ \t]+-[ \t]+([^\W\d_])")

_SPLIT_UNITS = "|".join(sorted(SPLIT_LINE_UNITS, key=len, reverse=True))
NUMBER_ONLY_RE = re.compile(r"^\d+(?:[.,]\d+)?$")
UNIT_ONLY_RE = re.compile(rf"^(?:{_SPLIT_UNITS})\.?$", re.IGNORECASE)
AMOUNT_UNIT_ONLY_RE = re.compile(rf"^\d+(?:[.,]\d+)?\s+(?:{_SPLIT_UNITS})(?:\s*\.)?$", re.IGNORECASE)
NAME_START_RE = re.compile(r"^[^\W\d_]")

TERMINAL_RE = re.compile(r"[.!?:;,]$")
CONNECTIVE_RE = re.compile(rf"^(?:{'|'.join(CONNECTIVE_WORDS)})\s", re.IGNORECASE)
NEW_ITEM_RE = re.compile(rf"^(?:\d+[.):\s]|[-*]\s|[{BULLET_GLYPHS}])")

MERGE_MAX_BUFFER = 100
# A line opening with one of these is a new ingredient ("snufje zout", "halve ui")
QUANTITY_WORDS = set(UNIT_SYNONYMS) | set(NUMBER_WORDS)
# "2 teentjes knoflook", "500g bloem", "½ citroen", but not "1. Snijd"
QUANTITY_LED_RE = re.compile(rf"^(?:\d+(?:[.,/]\d+)?|[{''.join(UNICODE_FRACTIONS)}])\s*[^\W\d_]")


def preprocess_ocr_text(text: str) -> str:
    """
    Repair scan artifacts before any line-level parsing.

    - "I kg" / a lone "I" line read for "1"
    - "|" read for a bullet
    - hyphenated word-wrap ("aardap-\\npelen" -> "aardappelen")
    - quantities split over lines ("500\\ng\\nbloem" -> "500 g bloem")
    - page numbers, attribution, nutrition and side-note lines
    - lines holding only bullets or dashes
    - en/em dashes and curly quotes
    """
    if not text:
        return ""

    text = I_ALONE_RE.sub(r"\g<1>1 ", text)
    text = I_BEFORE_WORD_RE.sub("1 ", text)
    text = PIPE_BULLET_RE.sub(" • ", text)

    text = HYPHEN_WRAP_RE.sub(r"\1\2", text)

    # Rejoin split quantities before page numbers are removed, "500" alone
    # on a line followed by "g" is an amount, not a page number
    text = "\n".join(merge_split_quantities(text.split("\n")))

    text = PAGE_NUMBER_LINE_RE.sub("", text)
    text = TRAILING_PAGE_NUMBER_RE.sub("", text)

    for pattern in NOISE_LINE_RES:
        text = pattern.sub("", text)

    text = BULLET_ONLY_LINE_RE.sub("", text)

    text = re.sub(r"[–—]", "-", text)
    text = re.sub(r"[“”„]", '"', text)
    text = re.sub(r"[‘’‚]", "'", text)

    # "lente - uitjes" -> "lente-uitjes"
    text = SPACED_HYPHEN_RE.sub(r"\1-\2", text)

    return text


def _is_name_line(line: Optional[str]) -> bool:
    return bool(line) and bool(NAME_START_RE.match(line)) and match_heading(line) is None


def merge_split_quantities(lines: List[str]) -> List[str]:
    """
    Rejoin ingredient parts that OCR put on separate lines.

    "500" + "g" + "bloem"   -> "500 g bloem"
    "2 el" + "olijfolie"    -> "2 el olijfolie"
    """
    merged: List[str] = []
    i = 0
    while i < len(lines):
        line = lines[i].strip()
        next_line = lines[i + 1].strip() if i + 1 < len(lines) else None
        after_next = lines[i + 2].strip() if i + 2 < len(lines) else None

        if NUMBER_ONLY_RE.match(line) and next_line and UNIT_ONLY_RE.match(next_line):
            if _is_name_line(after_next):
                merged.append(f"{line} {next_line} {after_next}")
                i += 3
            else:
                merged.append(f"{line} {next_line}")
                i += 2
            continue

        if AMOUNT_UNIT_ONLY_RE.match(line) and _is_name_line(next_line) and not UNIT_ONLY_RE.match(next_line):
            merged.append(f"{line} {next_line}")
            i += 2
            continue

        merged.append(lines[i])
        i += 1

    return merged


def _is_seasoning_line(line: str) -> bool:
    # "zout", "peper en zout", "zout naar smaak": a quantity-less ingredient, not a sentence tail
    words = extract_notes(line)[0].lower().rstrip(".,").split()
    return any(w in SEASONING_WORDS for w in words) and all(
        w in SEASONING_WORDS or w in SEASONING_CONNECTORS for w in words
    )


def _has_note(line: str) -> bool:
    return extract_notes(line)[1] is not None


def _is_quantity_line(line: str) -> bool:
    return bool(QUANTITY_LED_RE.match(line)) or _starts_with_quantity_word(line) or _is_seasoning_line(line)


def _starts_with_quantity_word(line: str) -> bool:
    first = line.split(maxsplit=1)[0].lower().rstrip(".,")
    return first in QUANTITY_WORDS


def _is_new_item(line: str) -> bool:
    return bool(
        NEW_ITEM_RE.match(line)
        or _starts_with_quantity_word(line)
        or CAPS_LED_RE.match(line)
        or match_heading(line) is not None
        or is_metadata_line(line)
        or _is_seasoning_line(line)
    )


def _continues(line: str) -> bool:
    return line[0].islower() or bool(CONNECTIVE_RE.match(line))


def _buffer_open(buffer: str) -> bool:
    return (
        bool(buffer)
        and not TERMINAL_RE.search(buffer)
        and not buffer[-1].isdigit()
        and len(buffer) < MERGE_MAX_BUFFER
        and match_heading(buffer) is None
        and not is_metadata_line(buffer)
        and not _is_seasoning_line(buffer)
    )


def _item_complete(buffer: str, line: str) -> bool:
    # "2 teentjes knoflook (geperst)" + "zout naar smaak", "250 g bloem" + "verse peterselie, ter garnering"
    return _is_quantity_line(buffer) and (_has_note(buffer) or _has_note(line))


def merge_broken_lines(lines: List[str]) -> List[str]:
    """
    Merge lines that belong to one sentence.

    A line joins the previous one when the previous line is short and ends
    without punctuation, and the line itself starts lowercase or with a
    connective ("en", "met", ...). Numbered items, bullets, headings,
    servings/time lines, seasoning lines and lines opening with a unit or
    number word always start a new entry. An ingredient line that carries a
    note, or is followed by a line with a note, is complete. A blank line
    flushes.
    """
    merged: List[str] = []
    buffer = ""

    for raw in lines:
        line = raw.strip()
        if not line:
            if buffer:
                merged.append(buffer)
                buffer = ""
            continue

        if (
            _buffer_open(buffer)
            and _continues(line)
            and not _is_new_item(line)
            and not _item_complete(buffer, line)
        ):
            buffer = f"{buffer} {line}"
            continue

        if buffer:
            merged.append(buffer)
        buffer = line

    if buffer:
        merged.append(buffer)

    return merged
