"""
Section segmentation: header / ingredients / steps / footer.

Explicit headings are preferred. When a page has none, infer_sections()
classifies lines by their shape alone.
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from .headings import match_heading
from .metadata import is_metadata_line
from .patterns import (
    INGREDIENT_SHAPE_RE,
    NUMBERED_CAPITALIZED_RE,
    is_bullet_line,
    is_step_number_line,
)
from .title import is_title_candidate
from .vocab import ABBREVIATIONS, BULLET_GLYPHS

BUCKETS = ("header", "ingredients", "steps", "footer")

BULLET_SPLIT_RE = re.compile(rf"[{BULLET_GLYPHS}]")
LONE_DOT_RE = re.compile(r"\s+\.\s+")
WORD_BEFORE_RE = re.compile(r"([^\W\d_]+)$")

HEADER_LINES = 3
DIVERTED_TITLE_MIN = 10
DIVERTED_TITLE_MAX = 80


@dataclass(frozen=True)
class Sections:
    header: Tuple[str, ...] = ()
    ingredients: Tuple[str, ...] = ()
    steps: Tuple[str, ...] = ()
    footer: Tuple[str, ...] = ()
    # Index into the merged lines of the first heading of each kind
    ingredients_heading_at: Optional[int] = None
    steps_heading_at: Optional[int] = None

    @property
    def has_headings(self) -> bool:
        return self.ingredients_heading_at is not None or self.steps_heading_at is not None


def _freeze(buckets: Dict[str, List[str]], **kwargs) -> Sections:
    return Sections(**{name: tuple(buckets[name]) for name in BUCKETS}, **kwargs)


def _split_lone_dots(text: str) -> List[str]:
    parts = []
    start = 0
    for m in LONE_DOT_RE.finditer(text):
        before = WORD_BEFORE_RE.search(text[start:m.start()])
        if before and before.group(1).lower() in ABBREVIATIONS:
            continue
        parts.append(text[start:m.start()])
        start = m.end()
    parts.append(text[start:])
    return parts


def split_bullets(text: str) -> List[str]:
    """
    Split a line that OCR concatenated from several bullet items.

    "peper zout • 2 el olijfolie ⚫ 1 ui" -> ["peper zout", "2 el olijfolie", "1 ui"]
    A dot standing alone between spaces also separates items, unless it
    closes an abbreviation such as "el ." or "tl .".
    """
    if not text:
        return []

    items = []
    for chunk in BULLET_SPLIT_RE.split(text):
        for part in _split_lone_dots(chunk):
            part = part.strip()
            if part:
                items.append(part)
    return items


def _header_has_title(header: Sequence[str]) -> bool:
    return any(is_title_candidate(line) for line in header)


def _is_diverted_title(lines: Sequence[str], i: int, header: Sequence[str]) -> bool:
    """A title printed between two sections, just above the next heading."""
    line = lines[i]
    if not DIVERTED_TITLE_MIN <= len(line) <= DIVERTED_TITLE_MAX:
        return False
    if i + 1 >= len(lines) or match_heading(lines[i + 1]) is None:
        return False
    return is_title_candidate(line) and not _header_has_title(header)


def segment_sections(lines: Sequence[str]) -> Sections:
    """
    Walk merged lines and assign each one to a section.

    Content printed after a heading on the same line is kept: for the
    ingredients heading it is split on bullets into separate candidates.
    A capitalized numbered line ("1. Snijd ...") opens the steps section
    even without a heading. Servings and time lines found outside the
    header go to the footer.
    """
    buckets: Dict[str, List[str]] = {name: [] for name in BUCKETS}
    current = "header"
    ingredients_at = None
    steps_at = None

    for i, line in enumerate(lines):
        heading = match_heading(line)
        if heading is not None and heading.kind == "ingredients":
            current = "ingredients"
            if ingredients_at is None:
                ingredients_at = i
            buckets["ingredients"].extend(split_bullets(heading.remainder))
            continue

        if heading is not None and heading.kind == "steps":
            current = "steps"
            if steps_at is None:
                steps_at = i
            if heading.remainder:
                buckets["steps"].append(heading.remainder)
            continue

        if NUMBERED_CAPITALIZED_RE.match(line):
            current = "steps"

        if current != "header":
            if _is_diverted_title(lines, i, buckets["header"]):
                buckets["header"].append(line)
                continue
            if is_metadata_line(line):
                buckets["footer"].append(line)
                continue

        buckets[current].append(line)

    if ingredients_at is None and steps_at is None:
        return infer_sections(lines)

    return _freeze(buckets, ingredients_heading_at=ingredients_at, steps_heading_at=steps_at)


def infer_sections(lines: Sequence[str]) -> Sections:
    """
    Classify lines by shape when the page carries no headings.

    The first few lines are header unless they already look like an
    ingredient. Quantity lines and short bullets are ingredients, numbered
    lines and long bullets are steps, and once inside the steps every
    further line stays there.
    """
    buckets: Dict[str, List[str]] = {name: [] for name in BUCKETS}
    in_ingredients = False
    in_steps = False
    found_ingredient = False

    for i, line in enumerate(lines):
        bullet = is_bullet_line(line)
        ingredient_like = bool(INGREDIENT_SHAPE_RE.match(line)) or (bullet and len(line) < 100)
        step_like = is_step_number_line(line) or (bullet and len(line) > 50)

        if i < HEADER_LINES and not found_ingredient and not ingredient_like:
            buckets["header"].append(line)
            continue

        if is_metadata_line(line):
            buckets["footer"].append(line)
            continue

        if ingredient_like and not in_steps:
            in_ingredients = True
            found_ingredient = True
            buckets["ingredients"].append(line)
        elif step_like or (in_steps and len(line) > 30):
            in_ingredients = False
            in_steps = True
            buckets["steps"].append(line)
        elif in_ingredients:
            if len(line) < 80:
                buckets["ingredients"].append(line)
            else:
                in_ingredients = False
                in_steps = True
                buckets["steps"].append(line)
        elif in_steps:
            buckets["steps"].append(line)
        else:
            buckets["header"].append(line)

    return _freeze(buckets)
