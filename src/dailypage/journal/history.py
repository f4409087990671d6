"""Word-count history for a single entry.

The series only grows while the entry has content and is wiped when the
entry is emptied: history covers the entry's current life, not all of them.
"""

from __future__ import annotations

from .models import WordCountSample

DEFAULT_BACKFILL_MS = 1000


def record_sample(
    samples: list[WordCountSample],
    word_count: int,
    now_ms: int,
    backfill_ms: int = DEFAULT_BACKFILL_MS,
) -> list[WordCountSample]:
    """Return the series after a save that produced ``word_count`` words.

    The input list is not modified.

    - ``word_count == 0`` clears the series.
    - An empty series gets a zero point ``backfill_ms`` before ``now_ms`` so
      the first chart has two points.
    - A sample is appended only when the count changed since the last one.
    """
    if word_count <= 0:
        return []

    series = list(samples)
    if not series:
        series.append(WordCountSample(now_ms - backfill_ms, 0))

    last = series[-1]
    if last.word_count == word_count:
        return series

    series.append(WordCountSample(max(now_ms, last.timestamp), word_count))
    return series


def is_chartable(samples: list[WordCountSample]) -> bool:
    """A line chart needs at least two points."""
    return len(samples) > 1
