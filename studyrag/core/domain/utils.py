"""Text helpers shared by the domain and the corpus loaders.

Incoming documents should have BOM markers stripped at the boundary so
that tokenization never sees spurious characters. Internal layers assume
text is already clean.
"""

import unicodedata


def clean_text(text: str, *, normalize: bool = True) -> str:
    """Remove BOM markers and optionally apply NFC normalization.

    Args:
        text: Input text that may contain BOM or replacement characters.
        normalize: Whether to compose characters (NFC) so that, for
            example, ``u`` + combining diaeresis becomes ``ü``.

    Returns:
        Cleaned text.
    """
    if not text:
        return ""

    cleaned = text.replace("\ufeff", "").replace("\ufffd", "")
    if normalize:
        cleaned = unicodedata.normalize("NFC", cleaned)
    return cleaned


def display_name(category: str) -> str:
    """Human readable label for a category slug (``tyt-matematik`` -> ``Tyt Matematik``)."""
    return " ".join(word[:1].upper() + word[1:] for word in category.split("-"))
