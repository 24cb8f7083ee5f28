"""Normalized term-frequency vectors and cosine similarity.

Weights are plain term frequency divided by the token count of the same
text. There is no inverse-document-frequency factor, so terms common
across the corpus are not down-weighted.
"""

import math
from collections import Counter
from collections.abc import Iterable, Mapping

TermWeights = dict[str, float]


def vectorize(tokens: Iterable[str]) -> TermWeights:
    """Convert a token sequence into a normalized term-frequency vector.

    Args:
        tokens: Terms produced by ``tokenize``.

    Returns:
        Mapping term -> count / total tokens. Empty for no tokens.
    """
    counts = Counter(tokens)
    total = sum(counts.values())
    if total == 0:
        return {}
    return {term: count / total for term, count in counts.items()}


def cosine_similarity(a: Mapping[str, float], b: Mapping[str, float]) -> float:
    """Cosine of the angle between two sparse weight vectors.

    Terms missing from a vector weigh zero, so the dot product over the
    union of terms reduces to the shared ones. Returns 0.0 when either
    vector has zero norm. For non-negative weights the result is in
    [0, 1]; rounding overshoot above 1.0 is clipped.
    """
    norm_a = math.sqrt(sum(w * w for w in a.values()))
    norm_b = math.sqrt(sum(w * w for w in b.values()))
    if norm_a == 0 or norm_b == 0:
        return 0.0

    dot = sum(weight * b.get(term, 0.0) for term, weight in a.items())
    return min(1.0, dot / (norm_a * norm_b))
