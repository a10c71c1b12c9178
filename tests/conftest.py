import pytest

from recipe_ocr.parsing import OcrRecipeParser
from recipe_ocr.services import RecognitionResult
from recipe_ocr.settings import Settings


@pytest.fixture
def parser():
    return OcrRecipeParser()


@pytest.fixture
def test_settings():
    # Explicit values so a developer's .env cannot change the outcome
    return Settings(
        log_level="DEBUG",
        review_confidence_threshold=0.6,
        min_ocr_confidence=0.5,
        max_raw_text_chars=50_000,
    )


class StubRecognizer:
    """Stands in for the external text-recognition service."""

    def __init__(self, text="", confidence=0.9, error=None):
        self.text = text
        self.confidence = confidence
        self.error = error
        self.calls = []

    def recognize(self, image_bytes: bytes) -> RecognitionResult:
        self.calls.append(image_bytes)
        if self.error:
            raise self.error
        return RecognitionResult(text=self.text, confidence=self.confidence)


@pytest.fixture
def stub_recognizer():
    return StubRecognizer


PULLED_PORK = """Pulled Pork
Een heerlijk Amerikaans BBQ recept.
Voor 8 personen

Ingrediënten
2 kg varkensschouder
50 gram BBQ rub
250 ml appelsap

Bereiding
1. Wrijf het vlees in met de rub
2. Zet de kamado op 110°C
3. Rook het vlees 12 uur tot kerntemperatuur 93°C
4. Laat 30 minuten rusten
"""


@pytest.fixture
def pulled_pork_text():
    return PULLED_PORK
