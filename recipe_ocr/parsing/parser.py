from abc import ABC, abstractmethod
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Immutable, snake_case in Python, camelCase on the wire:
# recipe.model_dump(by_alias=True) -> {"prepMinutes": ..., "targetInternalTemp": ...}
MODEL_CONFIG = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)


class ParsedIngredient(BaseModel):
    model_config = MODEL_CONFIG

    name: str = Field(min_length=1)
    amount: Optional[float] = None
    unit: Optional[str] = None
    notes: Optional[str] = None


class ParsedStep(BaseModel):
    model_config = MODEL_CONFIG

    instruction: str = Field(min_length=1)
    timer_minutes: Optional[int] = None
    target_temp: Optional[int] = None
    order_no: int = Field(ge=1)


class RecipeConfidence(BaseModel):
    model_config = MODEL_CONFIG

    overall: float = Field(0.0, ge=0, le=1)
    title: float = Field(0.0, ge=0, le=1)
    ingredients: float = Field(0.0, ge=0, le=1)
    steps: float = Field(0.0, ge=0, le=1)


class ParsedRecipe(BaseModel):
    model_config = MODEL_CONFIG

    title: str
    description: Optional[str] = None
    serves: Optional[int] = None
    prep_minutes: Optional[int] = None
    cook_minutes: Optional[int] = None
    target_internal_temp: Optional[int] = None
    ingredients: Tuple[ParsedIngredient, ...] = ()
    steps: Tuple[ParsedStep, ...] = ()
    confidence: RecipeConfidence = RecipeConfidence()


class RecipeParser(ABC):
    @abstractmethod
    def parse(self, text: str) -> ParsedRecipe:
        """Parse raw OCR text into a structured recipe."""
        pass
