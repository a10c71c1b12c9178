import math
import re


def normalize_whitespace(text: str) -> str:
    """
    Normalize whitespace in OCR text.
    - Unify line endings to \\n
    - Collapse runs of spaces/tabs to a single space
    - Cap blank runs at one empty line
    - Trim the ends
    """
    if not text:
        return ""

    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = re.sub(r"[ \t]+", " ", text)
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()


def clean_name(text: str) -> str:
    """Collapse inner whitespace and strip punctuation from both ends."""
    text = re.sub(r"\s+", " ", text)
    text = re.sub(r"^[,.;:\s]+", "", text)
    text = re.sub(r"[,.;:\s]+$", "", text)
    return text.strip()


def round_half_up(value: float) -> int:
    # round() rounds halves to even; "4-5 personen" must give 5
    return int(math.floor(value + 0.5))


def title_case(text: str) -> str:
    return " ".join(word.capitalize() for word in text.split())
