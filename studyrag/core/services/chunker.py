"""Sentence-based passage segmentation with character overlap."""

import re

SENTENCE_BOUNDARY_RE = re.compile(r"[.!?]+")
SENTENCE_TERMINATOR = "."

DEFAULT_MAX_LENGTH = 500
DEFAULT_OVERLAP = 50


def chunk(
    body: str,
    max_length: int = DEFAULT_MAX_LENGTH,
    overlap: int = DEFAULT_OVERLAP,
) -> list[str]:
    """Split a document body into overlapping passages.

    The body is cut at ``.``, ``!`` and ``?`` (no abbreviation or decimal
    handling) and sentences are packed into passages of at most
    ``max_length`` characters. Each new passage starts with the last
    ``overlap`` characters of the previous one so that a concept spanning
    a boundary can be found from either side. A single sentence longer
    than ``max_length`` is kept whole rather than truncated.

    Args:
        body: Document body text.
        max_length: Target passage length in characters (must be positive).
        overlap: Characters carried over from the previous passage
            (must be less than max_length).

    Returns:
        Passages in document order; empty when the body has no sentences.

    Raises:
        ValueError: If max_length or overlap are invalid.
    """
    if max_length <= 0:
        raise ValueError("max_length must be positive")
    if overlap < 0:
        raise ValueError("overlap must be non-negative")
    if overlap >= max_length:
        raise ValueError("overlap must be less than max_length")

    if not body:
        return []

    passages: list[str] = []
    current = ""

    for sentence in SENTENCE_BOUNDARY_RE.split(body):
        if not sentence.strip():
            continue

        if len(current + sentence) > max_length and current:
            passages.append(current.rstrip())
            carried = passages[-1][-overlap:] if overlap else ""
            current = carried + sentence + SENTENCE_TERMINATOR
        elif current:
            current += sentence + SENTENCE_TERMINATOR
        else:
            current = sentence.lstrip() + SENTENCE_TERMINATOR

    if current.strip():
        passages.append(current.rstrip())

    return passages
