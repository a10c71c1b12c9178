import json
import logging
import os
import sys

# Add repo root to sys.path
sys.path.append(os.path.join(os.path.dirname(__file__), "../"))

from recipe_ocr.services import IngestionError, OcrIngestionService
from recipe_ocr.settings import settings

logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)


def parse_file(path: str):
    with open(path, encoding="utf-8") as f:
        raw_text = f.read()

    service = OcrIngestionService()
    try:
        preview = service.preview_text(raw_text)
    except IngestionError as e:
        print(f"Error: {e}")
        return 1

    print(json.dumps(preview.model_dump(by_alias=True), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("Usage: python scripts/parse_ocr_text.py <ocr-text-file>")
        sys.exit(2)
    sys.exit(parse_file(sys.argv[1]))
