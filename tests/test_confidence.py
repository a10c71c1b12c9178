from recipe_ocr.parsing.confidence import score_confidence
from recipe_ocr.parsing.parser import ParsedIngredient, ParsedStep


def _ingredients(*amounts):
    return [ParsedIngredient(name=f"item {i}", amount=a) for i, a in enumerate(amounts)]


def _steps(*instructions):
    return [ParsedStep(instruction=text, order_no=i + 1) for i, text in enumerate(instructions)]


LONG_STEP = "Meng de bloem met de melk tot een glad beslag."


def test_nothing_found():
    confidence = score_confidence("Onbekend recept", [], [])
    assert confidence.title == 0.3
    assert confidence.ingredients == 0.0
    assert confidence.steps == 0.0
    assert confidence.overall == 0.06


def test_full_recipe():
    confidence = score_confidence(
        "Pannenkoeken",
        _ingredients(250, 500, 2, None, 1),
        _steps(LONG_STEP, LONG_STEP, LONG_STEP),
    )
    assert confidence.title == 0.9
    assert confidence.ingredients == 0.82
    assert confidence.steps == 0.9
    assert confidence.overall == 0.87


def test_few_items():
    confidence = score_confidence("Soep", _ingredients(1, 2), _steps(LONG_STEP))
    assert confidence.ingredients == 0.5
    assert confidence.steps == 0.4


def test_short_steps_lower_the_score():
    confidence = score_confidence("Soep", [], _steps("Roer goed", LONG_STEP))
    assert confidence.steps == 0.7


def test_scores_stay_in_range():
    confidence = score_confidence("Soep", _ingredients(1, 2, 3, 4), _steps(LONG_STEP, LONG_STEP))
    for value in (confidence.overall, confidence.title, confidence.ingredients, confidence.steps):
        assert 0.0 <= value <= 1.0
