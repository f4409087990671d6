"""Text processing utilities: word counting, tokenizing, snippets."""

import re

_ALPHA_TOKEN = re.compile(r"\b[a-z]{3,}\b")


def count_words(text: str | None) -> int:
    """Count whitespace-separated words. Empty or blank text counts as zero."""
    if not text or not isinstance(text, str):
        return 0
    return len(text.split())


def alpha_tokens(text: str) -> list[str]:
    """Lower-cased alphabetic runs of three or more letters, in order."""
    if not text or not isinstance(text, str):
        return []
    return _ALPHA_TOKEN.findall(text.lower())


def highlight(text: str, needle: str, open_tag: str = "<mark>", close_tag: str = "</mark>") -> str:
    """Wrap every case-insensitive occurrence of ``needle`` in tags."""
    if not needle:
        return text
    pattern = re.compile(re.escape(needle), re.IGNORECASE)
    return pattern.sub(lambda m: f"{open_tag}{m.group(0)}{close_tag}", text)


def make_snippet(text: str, needle: str, radius: int = 80, fallback_length: int = 200) -> str:
    """
    Cut a window of ``radius`` characters around the first match of ``needle``.

    Truncated sides are marked with ``...`` and matches are highlighted.
    Without a match, returns the first ``fallback_length`` characters.
    """
    if not text:
        return ""
    match = re.search(re.escape(needle), text, re.IGNORECASE) if needle else None
    if match is None:
        return text[:fallback_length]

    start = max(0, match.start() - radius)
    end = min(len(text), match.end() + radius)
    snippet = text[start:end]
    if start > 0:
        snippet = f"... {snippet}"
    if end < len(text):
        snippet = f"{snippet} ..."
    return highlight(snippet, needle)
