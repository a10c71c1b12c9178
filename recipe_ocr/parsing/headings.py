import re
from typing import NamedTuple, Optional

from .fuzzy import closest_match
from .metadata import is_metadata_line
from .vocab import FUZZY_HEADING_WORDS, FUZZY_MIN_TOKEN_LEN, HEADING_PATTERNS

SECTION_KINDS = ("ingredients", "steps")


class HeadingMatch(NamedTuple):
    kind: str
    remainder: str


def _compile(alternatives):
    return re.compile(
        rf"^\s*(?P<head>{'|'.join(alternatives)})(?![^\W\d_])\s*(?P<sep>[:.?\-]?)\s*(?P<rest>.*)$",
        re.IGNORECASE,
    )


HEADING_RES = {kind: _compile(HEADING_PATTERNS[kind]) for kind in SECTION_KINDS}
QUALIFIER_RE = re.compile(r"^(?:voor|for)\b[^:]*:?$", re.IGNORECASE)


def _exact_match(line: str, kind: str) -> Optional[HeadingMatch]:
    m = HEADING_RES[kind].match(line)
    if not m:
        return None

    rest = m.group("rest").strip()
    if not rest:
        return HeadingMatch(kind, "")

    # "Ingrediënten (voor 4 personen)", "Bereiding voor de saus:"
    if rest.startswith("(") or QUALIFIER_RE.match(rest):
        return HeadingMatch(kind, "")

    # "INGREDIËNTEN: 500 g ..." or "INGREDIËNTEN 500 g ..." carry content,
    # "Bereiding van de saus duurt ..." is a sentence
    if m.group("sep") in (":", "?") or m.group("head").isupper():
        return HeadingMatch(kind, rest)
    return None


def _fuzzy_match(line: str, kinds) -> Optional[HeadingMatch]:
    token = line.strip().rstrip(":").strip()
    if " " in token or len(token) < FUZZY_MIN_TOKEN_LEN:
        return None
    token = token.strip(".;,")

    best_kind = None
    best_distance = None
    for kind in kinds:
        found = closest_match(token, FUZZY_HEADING_WORDS[kind])
        if found and (best_distance is None or found[1] < best_distance):
            best_kind, best_distance = kind, found[1]

    if best_kind is None:
        return None
    return HeadingMatch(best_kind, "")


def match_heading(line: str, kind: Optional[str] = None) -> Optional[HeadingMatch]:
    """
    Detect an ingredients or steps heading at the start of a line.

    Returns the section kind plus any content printed after the heading on
    the same line ("INGREDIËNTEN: 500 g aardappelen" -> "500 g aardappelen").
    Pass kind to test for one section only.
    """
    if not line or not line.strip():
        return None
    if is_metadata_line(line):
        return None

    kinds = (kind,) if kind else SECTION_KINDS
    for k in kinds:
        found = _exact_match(line, k)
        if found:
            return found
    return _fuzzy_match(line, kinds)


def is_heading(line: str, kind: Optional[str] = None) -> bool:
    return match_heading(line, kind) is not None
