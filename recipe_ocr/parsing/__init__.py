from .parser import RecipeParser, ParsedRecipe, ParsedIngredient, ParsedStep, RecipeConfidence
from .rule_based_parser import OcrRecipeParser, parse

__all__ = ["RecipeParser", "ParsedRecipe", "ParsedIngredient", "ParsedStep", "RecipeConfidence", "OcrRecipeParser", "parse"]
