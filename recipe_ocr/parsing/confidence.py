from typing import Sequence

from .parser import ParsedIngredient, ParsedStep, RecipeConfidence
from .vocab import FALLBACK_TITLE

TITLE_WEIGHT = 0.2
INGREDIENTS_WEIGHT = 0.4
STEPS_WEIGHT = 0.4

GOOD_STEP_CHARS = 20


def _title_score(title: str) -> float:
    return 0.9 if title and title != FALLBACK_TITLE else 0.3


def _ingredients_score(ingredients: Sequence[ParsedIngredient]) -> float:
    if not ingredients:
        return 0.0
    if len(ingredients) < 3:
        return 0.5
    with_amount = sum(1 for i in ingredients if i.amount is not None)
    return 0.5 + 0.4 * with_amount / len(ingredients)


def _steps_score(steps: Sequence[ParsedStep]) -> float:
    if not steps:
        return 0.0
    if len(steps) == 1:
        return 0.4
    good = sum(1 for s in steps if len(s.instruction) > GOOD_STEP_CHARS)
    return 0.5 + 0.4 * good / len(steps)


def score_confidence(
    title: str,
    ingredients: Sequence[ParsedIngredient],
    steps: Sequence[ParsedStep],
) -> RecipeConfidence:
    """
    Heuristic [0, 1] quality estimate of a parse.
    overall = 0.2 * title + 0.4 * ingredients + 0.4 * steps
    """
    title_score = _title_score(title)
    ingredients_score = _ingredients_score(ingredients)
    steps_score = _steps_score(steps)
    overall = (
        TITLE_WEIGHT * title_score
        + INGREDIENTS_WEIGHT * ingredients_score
        + STEPS_WEIGHT * steps_score
    )
    return RecipeConfidence(
        overall=round(overall, 2),
        title=round(title_score, 2),
        ingredients=round(ingredients_score, 2),
        steps=round(steps_score, 2),
    )
