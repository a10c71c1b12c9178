import logging
from typing import List

from ..core.text import normalize_whitespace
from .confidence import score_confidence
from .ingredient_parser import parse_ingredients
from .metadata import (
    extract_cook_time,
    extract_prep_time,
    extract_servings,
    extract_target_internal_temp,
)
from .parser import ParsedRecipe, RecipeConfidence, RecipeParser
from .preprocess import merge_broken_lines, preprocess_ocr_text
from .sections import segment_sections
from .steps import parse_steps
from .title import extract_description, extract_title
from .vocab import FALLBACK_TITLE

logger = logging.getLogger(__name__)


def empty_recipe() -> ParsedRecipe:
    return ParsedRecipe(title=FALLBACK_TITLE, confidence=RecipeConfidence())


class OcrRecipeParser(RecipeParser):
    """
    Rule-based parser for OCR text of a photographed recipe page.

    Every stage is a pure function of the previous one, so a parser
    instance holds no state and can be shared across threads.
    """

    def parse(self, text: str) -> ParsedRecipe:
        text = normalize_whitespace(preprocess_ocr_text(text or ""))
        lines = self._merged_lines(text)
        if not lines:
            logger.debug("OCR parse: no usable lines, returning fallback recipe")
            return empty_recipe()

        sections = segment_sections(lines)
        title = extract_title(lines, sections)
        ingredients = parse_ingredients(sections.ingredients)
        steps = parse_steps(sections.steps)
        confidence = score_confidence(title.title, ingredients, steps)

        logger.debug(
            f"OCR parse: {len(lines)} lines, headings={sections.has_headings}, "
            f"header={len(sections.header)} ingredients={len(sections.ingredients)} "
            f"steps={len(sections.steps)} footer={len(sections.footer)}, "
            f"title via {title.strategy}, overall={confidence.overall}"
        )

        return ParsedRecipe(
            title=title.title,
            description=extract_description(sections, title.title),
            serves=extract_servings(text),
            prep_minutes=extract_prep_time(text),
            cook_minutes=extract_cook_time(text),
            target_internal_temp=extract_target_internal_temp(text),
            ingredients=tuple(ingredients),
            steps=tuple(steps),
            confidence=confidence,
        )

    def _merged_lines(self, text: str) -> List[str]:
        if not text:
            return []
        return merge_broken_lines(text.split("\n"))


_default_parser = OcrRecipeParser()


def parse(raw_text: str) -> ParsedRecipe:
    """Parse raw OCR text. Never raises: empty input gives the fallback recipe."""
    return _default_parser.parse(raw_text)
