import logging
from typing import Optional, Protocol, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..parsing import OcrRecipeParser, ParsedIngredient, ParsedStep, RecipeConfidence, RecipeParser
from ..settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)

PREVIEW_SOURCE = "OCR Import"


class IngestionError(Exception):
    """Base exception for OCR import errors."""
    pass


class EmptyInputError(IngestionError):
    """No image bytes or no text to parse."""
    pass


class RecognitionError(IngestionError):
    """The text recognizer failed on the image."""
    pass


class RecognitionResult(BaseModel):
    text: str
    confidence: float = Field(ge=0, le=1)


class TextRecognizer(Protocol):
    def recognize(self, image_bytes: bytes) -> RecognitionResult:
        ...


class RecipeImportPreview(BaseModel):
    """Parsed recipe in the shape the import review screen consumes."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    title: str
    description: Optional[str] = None
    serves: Optional[int] = None
    prep_minutes: Optional[int] = None
    cook_minutes: Optional[int] = None
    target_internal_temp: Optional[int] = None
    ingredients: Tuple[ParsedIngredient, ...] = ()
    steps: Tuple[ParsedStep, ...] = ()
    confidence: float = 0.0
    confidence_details: RecipeConfidence = RecipeConfidence()
    ocr_confidence: Optional[float] = None
    needs_review: bool = True
    source: str = PREVIEW_SOURCE


class OcrIngestionService:
    def __init__(
        self,
        recognizer: Optional[TextRecognizer] = None,
        settings: Optional[Settings] = None,
        parser: Optional[RecipeParser] = None,
    ):
        self.recognizer = recognizer
        self.settings = settings or default_settings
        # Any RecipeParser fits here, the rule-based one is the default
        self.parser = parser or OcrRecipeParser()

    def preview_image(self, image_bytes: bytes) -> RecipeImportPreview:
        """Recognize text on a photographed page and parse it into a preview."""
        if not image_bytes:
            raise EmptyInputError("No image data received")
        if self.recognizer is None:
            raise RecognitionError("No text recognizer configured")

        try:
            result = self.recognizer.recognize(image_bytes)
        except Exception as e:
            logger.error(f"Text recognition failed: {e}")
            raise RecognitionError(f"Text recognition failed: {e}") from e

        return self.preview_text(result.text, ocr_confidence=result.confidence)

    def preview_text(self, raw_text: str, ocr_confidence: Optional[float] = None) -> RecipeImportPreview:
        if not raw_text or not raw_text.strip():
            raise EmptyInputError("No text to parse")

        limit = self.settings.max_raw_text_chars
        if len(raw_text) > limit:
            logger.warning(f"OCR text truncated from {len(raw_text)} to {limit} chars")
            raw_text = raw_text[:limit]

        if ocr_confidence is not None and ocr_confidence < self.settings.min_ocr_confidence:
            logger.warning(f"Low OCR confidence: {ocr_confidence:.2f}")

        parsed = self.parser.parse(raw_text)
        overall = parsed.confidence.overall

        needs_review = overall < self.settings.review_confidence_threshold or (
            ocr_confidence is not None and ocr_confidence < self.settings.min_ocr_confidence
        )
        if overall < self.settings.review_confidence_threshold:
            logger.warning(f"Low parse confidence {overall:.2f} for '{parsed.title}'")

        logger.info(
            f"OCR preview '{parsed.title}': {len(parsed.ingredients)} ingredients, "
            f"{len(parsed.steps)} steps, confidence {overall:.2f}"
        )

        return RecipeImportPreview(
            title=parsed.title,
            description=parsed.description,
            serves=parsed.serves,
            prep_minutes=parsed.prep_minutes,
            cook_minutes=parsed.cook_minutes,
            target_internal_temp=parsed.target_internal_temp,
            ingredients=parsed.ingredients,
            steps=parsed.steps,
            confidence=overall,
            confidence_details=parsed.confidence,
            ocr_confidence=ocr_confidence,
            needs_review=needs_review,
            source=PREVIEW_SOURCE,
        )
