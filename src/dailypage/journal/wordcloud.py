"""Word cloud terms for an entry."""

from __future__ import annotations

from collections import Counter

from dailypage.core.utils.text import alpha_tokens

from .models import CloudTerm

STOP_WORDS = frozenset(
    {
        "a", "an", "and", "are", "as", "at", "be", "but", "by", "for", "has", "have",
        "in", "is", "it", "its", "of", "on", "that", "the", "to", "was", "were", "with",
    }
)  # fmt: skip


def build_word_cloud(
    text: str | None,
    max_terms: int = 50,
    min_weight: float = 16,
    max_weight: float = 36,
) -> list[CloudTerm]:
    """Rank the most frequent words in ``text`` and give each a display weight.

    Words are alphabetic runs of three or more letters, case-folded, minus
    ``STOP_WORDS``. The top ``max_terms`` by count are kept (ties in order of
    first appearance). Weights scale linearly from ``min_weight`` for the
    least frequent kept word to ``max_weight`` for the most frequent; if all
    kept words share a count, every weight is the midpoint.
    """
    counts = Counter(word for word in alpha_tokens(text or "") if word not in STOP_WORDS)
    if not counts:
        return []

    # Counter keeps first-seen order and sorted() is stable, so ties stay in text order.
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)[:max_terms]

    high = ranked[0][1]
    low = ranked[-1][1]
    terms = []
    for word, count in ranked:
        if high > low:
            weight = min_weight + (count - low) / (high - low) * (max_weight - min_weight)
        else:
            weight = (min_weight + max_weight) / 2
        terms.append(CloudTerm(word=word, count=count, weight=weight))
    return terms
