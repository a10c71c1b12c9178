from .ingestion import (
    EmptyInputError,
    IngestionError,
    OcrIngestionService,
    RecipeImportPreview,
    RecognitionError,
    RecognitionResult,
    TextRecognizer,
)

__all__ = [
    "EmptyInputError",
    "IngestionError",
    "OcrIngestionService",
    "RecipeImportPreview",
    "RecognitionError",
    "RecognitionResult",
    "TextRecognizer",
]
