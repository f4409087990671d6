"""Keyword-frequency analysis of entry text.

A bag-of-keywords model: every lexicon keyword is counted as a whole word
(or whole phrase) in the lower-cased text. No negation or sarcasm handling.
"""

from __future__ import annotations

import re
from functools import lru_cache

from dailypage.core.types import AnalysisResult

from .lexicon import LEXICON

NOT_APPLICABLE = "N/A"


@lru_cache(maxsize=512)
def _keyword_pattern(keyword: str) -> re.Pattern[str]:
    return re.compile(rf"\b{re.escape(keyword)}\b")


def analyze_text(text: str | None) -> AnalysisResult:
    """Count lexicon keyword hits per category and subcategory.

    Every category and subcategory is present in the result, zero or not.
    """
    lowered = (text or "").lower()
    results: AnalysisResult = {}
    for category, subs in LEXICON.items():
        results[category] = {}
        for sub, keywords in subs.items():
            results[category][sub] = sum(len(_keyword_pattern(kw).findall(lowered)) for kw in keywords)
    return results


def dominant_subcategory(counts: dict[str, int]) -> str:
    """Subcategory with the highest count; earlier entries win ties.

    Returns ``"N/A"`` when there are no counts or all of them are zero.
    """
    best_name = None
    best_count = 0
    for name, count in counts.items():
        if count > best_count:
            best_name, best_count = name, count
    return best_name if best_name is not None else NOT_APPLICABLE


def summarize(result: AnalysisResult) -> dict[str, str]:
    """Dominant subcategory for each category of an analysis."""
    return {category: dominant_subcategory(counts) for category, counts in result.items()}
