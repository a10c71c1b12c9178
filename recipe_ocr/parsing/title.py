from typing import NamedTuple, Optional, Sequence

from .headings import is_heading
from .metadata import is_metadata_line
from .patterns import (
    PAGE_NUMBER_RE,
    SERVINGS_PHRASE_RE,
    is_bullet_line,
    is_step_number_line,
    looks_like_ingredient,
)
from .vocab import DESCRIPTION_MAX_CHARS, FALLBACK_TITLE, TITLE_MAX_CHARS

DESCRIPTION_MIN_LINE = 20


class TitleChoice(NamedTuple):
    title: str
    strategy: str


def is_title_candidate(line: str) -> bool:
    """Structural filter: could this line be a recipe title at all?"""
    if not line:
        return False
    line = line.strip()
    if not 3 <= len(line) <= TITLE_MAX_CHARS:
        return False
    if PAGE_NUMBER_RE.match(line):
        return False
    if is_step_number_line(line) or is_bullet_line(line):
        return False
    if looks_like_ingredient(line) or SERVINGS_PHRASE_RE.search(line):
        return False
    if is_metadata_line(line):
        return False
    return not is_heading(line)


def _starts_upper(line: str) -> bool:
    return bool(line) and line[0].isupper()


def _before_heading(lines: Sequence[str], heading_at: Optional[int]) -> Optional[str]:
    if not heading_at:
        return None
    line = lines[heading_at - 1]
    if 5 <= len(line) <= 80 and _starts_upper(line) and is_title_candidate(line):
        return line
    return None


def extract_title(lines: Sequence[str], sections) -> TitleChoice:
    """
    Pick the recipe title. Cookbooks print it in different places, so
    the strategies are tried in order:

    1. first candidate in the header block
    2. the line right above the ingredients heading
    3. the line right above the steps heading
    4. the best candidate anywhere, preferring 10-60 chars starting uppercase
    """
    for line in sections.header:
        if is_title_candidate(line):
            return TitleChoice(line.strip(), "header")

    found = _before_heading(lines, sections.ingredients_heading_at)
    if found:
        return TitleChoice(found, "before_ingredients")

    found = _before_heading(lines, sections.steps_heading_at)
    if found:
        return TitleChoice(found, "before_steps")

    candidates = [line.strip() for line in lines if is_title_candidate(line)]
    for line in candidates:
        if 10 <= len(line) <= 60 and _starts_upper(line):
            return TitleChoice(line, "best_candidate")
    if candidates:
        return TitleChoice(candidates[0], "first_candidate")

    if lines and lines[0].strip():
        return TitleChoice(lines[0].strip()[:TITLE_MAX_CHARS], "first_line")

    return TitleChoice(FALLBACK_TITLE, "fallback")


def extract_description(sections, title: str) -> Optional[str]:
    """Longer header lines other than the title, joined."""
    parts = [
        line
        for line in sections.header
        if line.strip() != title and len(line) > DESCRIPTION_MIN_LINE and not is_metadata_line(line)
    ]
    if not parts:
        return None
    return " ".join(parts)[:DESCRIPTION_MAX_CHARS]
