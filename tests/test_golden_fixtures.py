import json
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "ocr"

RECIPE_FIELDS = ("title", "description", "serves", "prepMinutes", "cookMinutes", "targetInternalTemp")
INGREDIENT_FIELDS = ("name", "amount", "unit", "notes")
STEP_FIELDS = ("instruction", "timerMinutes", "targetTemp")

MIN_AGGREGATE_SCORE = 0.9


def load_golden_fixtures():
    fixtures = []
    for path in sorted(FIXTURES_DIR.glob("*.json")):
        with open(path, encoding="utf-8") as f:
            fixtures.append(json.load(f))
    return fixtures


GOLDEN = load_golden_fixtures()


def field_checks(actual, expected):
    """Yield (label, ok) for every expected field of one fixture."""
    for field in RECIPE_FIELDS:
        yield field, actual[field] == expected[field]

    yield "ingredient count", len(actual["ingredients"]) == len(expected["ingredients"])
    for i, want in enumerate(expected["ingredients"]):
        got = actual["ingredients"][i] if i < len(actual["ingredients"]) else {}
        for field in INGREDIENT_FIELDS:
            yield f"ingredients[{i}].{field}", got.get(field) == want[field]

    yield "step count", len(actual["steps"]) == len(expected["steps"])
    for i, want in enumerate(expected["steps"]):
        got = actual["steps"][i] if i < len(actual["steps"]) else {}
        for field in STEP_FIELDS:
            yield f"steps[{i}].{field}", got.get(field) == want[field]


def test_fixtures_present():
    assert len(GOLDEN) >= 4


@pytest.mark.parametrize("fixture", GOLDEN, ids=[f["name"] for f in GOLDEN])
def test_golden_fixture(parser, fixture):
    actual = parser.parse(fixture["text"]).model_dump(by_alias=True)

    failed = [label for label, ok in field_checks(actual, fixture["expected"]) if not ok]
    assert failed == []

    order = [step["orderNo"] for step in actual["steps"]]
    assert order == list(range(1, len(order) + 1))


def test_golden_aggregate_score(parser):
    passed = 0
    total = 0
    for fixture in GOLDEN:
        actual = parser.parse(fixture["text"]).model_dump(by_alias=True)
        for _, ok in field_checks(actual, fixture["expected"]):
            total += 1
            passed += ok

    assert total > 0
    assert passed / total >= MIN_AGGREGATE_SCORE
