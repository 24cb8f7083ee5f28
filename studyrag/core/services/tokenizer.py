"""Index-term extraction shared by passages and queries."""

import re
import unicodedata

# Turkish letters kept explicitly alongside Unicode word characters.
TURKISH_LETTERS = "ğüşıöçĞÜŞİÖÇ"

NON_TERM_RE = re.compile(rf"[^\w\s{TURKISH_LETTERS}]")

MIN_TERM_LENGTH = 3

STOP_WORDS = frozenset(
    {
        # Turkish
        "ve",
        "veya",
        "ama",
        "çünkü",
        "ki",
        "için",
        "olarak",
        "ile",
        "da",
        "de",
        # English
        "the",
        "is",
        "are",
        "and",
        "or",
        "but",
        "because",
        "in",
        "on",
        "at",
        "to",
        "for",
        "of",
        "with",
        "by",
    }
)


def fold_case(text: str) -> str:
    """NFC-normalize and lower-case text for matching.

    Turkish dotted capital I is folded to a plain ``i`` first, since
    ``str.lower`` would otherwise leave a combining dot behind and split
    the word. NFC composes decomposed letters such as ``u`` + combining
    diaeresis into ``ü``.
    """
    return unicodedata.normalize("NFC", text).replace("İ", "i").lower()


def tokenize(text: str) -> list[str]:
    """Split text into lower-cased index terms.

    Text is case-folded with ``fold_case`` and punctuation becomes
    whitespace. Terms shorter than three characters and stop-words are
    dropped.

    Args:
        text: Raw passage or query text.

    Returns:
        Terms in order of appearance (duplicates kept).
    """
    if not text:
        return []

    lowered = fold_case(text)
    spaced = NON_TERM_RE.sub(" ", lowered)
    return [
        token
        for token in spaced.split()
        if len(token) >= MIN_TERM_LENGTH and token not in STOP_WORDS
    ]
