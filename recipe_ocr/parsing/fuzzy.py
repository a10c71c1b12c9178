"""Edit-distance helpers for OCR-garbled headings."""

from typing import Iterable, Optional, Tuple

import Levenshtein

from .vocab import FUZZY_HEADING_TOLERANCE


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance: insertions, deletions and substitutions each cost 1."""
    return Levenshtein.distance(a, b)


def allowed_edits(target: str, tolerance: float = FUZZY_HEADING_TOLERANCE) -> int:
    return int(len(target) * tolerance)


def closest_match(
    token: str,
    targets: Iterable[str],
    tolerance: float = FUZZY_HEADING_TOLERANCE,
) -> Optional[Tuple[str, int]]:
    """
    Return (target, distance) for the nearest target within tolerance.
    Ties go to the target listed first.
    """
    token = token.lower()
    best: Optional[Tuple[str, int]] = None
    for target in targets:
        distance = edit_distance(token, target.lower())
        if distance > allowed_edits(target, tolerance):
            continue
        if best is None or distance < best[1]:
            best = (target, distance)
    return best
