from .parsing import ParsedRecipe, parse

__all__ = ["ParsedRecipe", "parse"]
