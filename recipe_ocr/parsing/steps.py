import re
from typing import List, Sequence

from ..core.text import title_case
from .headings import is_heading
from .parser import ParsedStep
from .patterns import is_bullet_line, is_step_number_line, strip_bullet
from .timers import extract_temperature, extract_timer_minutes

STEP_NUMBER_PREFIX_RE = re.compile(r"^\d+[.):]\s*")
SUB_HEADING_RE = re.compile(r"^([A-ZÀ-Ý][A-ZÀ-Ý&'\- ]*[A-ZÀ-Ý])\s*:\s*(.*)$")
SENTENCE_END_RE = re.compile(r"[.!?]+")

MIN_STEP_CHARS = 5
MIN_SENTENCE_CHARS = 10


def normalize_step(text: str) -> str:
    """
    Strip the step number or bullet and tidy an all-caps sub-heading.

    "3. AARDAPPELEN VOORBEREIDEN: Schil de aardappelen"
        -> "Aardappelen Voorbereiden: schil de aardappelen"
    """
    text = re.sub(r"\s+", " ", text or "").strip()
    text = STEP_NUMBER_PREFIX_RE.sub("", text)
    text = strip_bullet(text)

    m = SUB_HEADING_RE.match(text)
    if m and len(m.group(1)) >= 3:
        heading = title_case(m.group(1))
        rest = m.group(2)
        if rest:
            rest = rest[0].lower() + rest[1:]
        text = f"{heading}: {rest}".strip()

    return text


def is_step_marker(line: str) -> bool:
    return is_step_number_line(line) or is_bullet_line(line)


def _make_step(instruction: str, order_no: int) -> ParsedStep:
    return ParsedStep(
        instruction=instruction,
        timer_minutes=extract_timer_minutes(instruction),
        target_temp=extract_temperature(instruction),
        order_no=order_no,
    )


def _split_sentences(lines: Sequence[str]) -> List[ParsedStep]:
    text = " ".join(lines)
    steps = []
    for sentence in SENTENCE_END_RE.split(text):
        sentence = sentence.strip()
        if len(sentence) > MIN_SENTENCE_CHARS:
            steps.append(_make_step(sentence, len(steps) + 1))
    return steps


def parse_steps(lines: Sequence[str]) -> List[ParsedStep]:
    """
    Group step lines into numbered instructions.

    A numbered or bulleted line starts a new step, any other line continues
    the current one. Without a single marker the block is split into
    sentences instead.
    """
    lines = [line for line in lines if line and not is_heading(line, "steps")]
    if not lines:
        return []

    if not any(is_step_marker(line) for line in lines):
        return _split_sentences(lines)

    steps: List[ParsedStep] = []
    buffer: List[str] = []

    def flush():
        instruction = normalize_step(" ".join(buffer))
        if len(instruction) >= MIN_STEP_CHARS:
            steps.append(_make_step(instruction, len(steps) + 1))

    for line in lines:
        if is_step_marker(line) and buffer:
            flush()
            buffer = []
        buffer.append(line)

    if buffer:
        flush()

    return steps
