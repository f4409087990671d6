"""Keyword lexicon for entry analysis.

Category -> subcategory -> keywords. Order matters: it is the tie-break
order for dominant-subcategory selection and the display order of results.
Multi-word keywords ("used to", "back then") match as phrases.
"""

from __future__ import annotations

LEXICON: dict[str, dict[str, tuple[str, ...]]] = {
    "feeling": {
        "Anxiety / Fear": (
            "anxious", "anxiety", "fear", "scared", "worry", "worried", "nervous", "stress",
            "stressful", "dread", "afraid", "panic", "panicked", "overwhelmed", "tense",
            "unease", "terror", "horror", "pressure", "threat",
        ),
        "Joy / Happiness": (
            "happy", "joy", "joyful", "cheerful", "delighted", "ecstatic", "glad", "content",
            "pleased", "excited", "amazing", "wonderful", "fantastic", "great", "good", "love",
            "blessed", "grateful", "thankful", "vibrant",
        ),
        "Sadness / Grief": (
            "sad", "sadness", "grief", "cry", "cried", "tears", "unhappy", "miserable",
            "depressed", "dejected", "heartbroken", "despair", "lonely", "alone", "empty",
            "down", "somber", "regret", "hurt", "pain",
        ),
        "Anger / Frustration": (
            "angry", "anger", "mad", "furious", "rage", "frustrated", "annoyed", "irritated",
            "pissed", "livid", "resent", "bitter", "outrage", "fury", "hate", "agitated",
            "exasperated",
        ),
        "Love / Affection": (
            "love", "loving", "care", "caring", "adore", "cherish", "affection", "fond",
            "passion", "passionate", "heartfelt", "tender", "warm", "connected", "appreciate",
            "relationship", "friend", "family",
        ),
    },
    "topic": {
        "Work / Career": (
            "work", "job", "career", "office", "company", "project", "task", "meeting", "email",
            "boss", "colleague", "coworker", "deadline", "presentation", "salary", "promotion",
            "professional", "corporate", "business",
        ),
        "Family / Home": (
            "family", "home", "mom", "dad", "parent", "sister", "brother", "sibling", "kids",
            "children", "son", "daughter", "husband", "wife", "partner", "house", "apartment",
            "relatives",
        ),
        "Health / Wellness": (
            "health", "healthy", "sick", "ill", "doctor", "hospital", "medicine", "pain", "body",
            "mind", "fitness", "exercise", "gym", "food", "diet", "sleep", "tired", "energy",
            "wellness", "mental health",
        ),
        "Self / Personal Growth": (
            "i", "me", "my", "myself", "feel", "think", "believe", "learn", "grow", "improve",
            "self", "goal", "habit", "journal", "read", "understand", "reflect", "introspection",
            "mindset", "future",
        ),
    },
    "mindset": {
        "Positive": (
            "yes", "can", "will", "great", "good", "wonderful", "amazing", "success", "achieve",
            "accomplished", "proud", "confident", "hopeful", "optimistic", "possible", "certain",
            "definite", "solution", "resolve", "clear",
        ),
        "Negative": (
            "no", "not", "can't", "won't", "bad", "terrible", "awful", "failure", "fail",
            "mistake", "wrong", "doubt", "regret", "hopeless", "pessimistic", "impossible",
            "problem", "issue", "difficult", "hard",
        ),
        "Certain": (
            "know", "knew", "certainly", "definitely", "absolutely", "will", "is", "are", "was",
            "always", "fact", "confirm", "proven", "understand", "understood", "realize",
        ),
        "Uncertain": (
            "maybe", "perhaps", "wonder", "if", "could", "might", "should", "possibly", "guess",
            "assume", "suppose", "unsure", "unclear", "question", "seem", "appear",
        ),
    },
    "time": {
        "Past": (
            "yesterday", "before", "ago", "last", "past", "remembered", "recalled", "reflected",
            "was", "were", "had", "did", "used to", "previously", "back then", "history",
        ),
        "Present": (
            "today", "now", "currently", "present", "is", "am", "are", "doing", "feeling",
            "thinking", "at the moment", "this", "here",
        ),
        "Future": (
            "tomorrow", "future", "next", "soon", "will", "plan", "planning", "goal", "hope",
            "wish", "anticipate", "expect", "looking forward", "going to", "someday",
        ),
    },
    "perspective": {
        "I (Self-focused)": ("i", "me", "my", "mine", "myself"),
        "We (Group-focused)": ("we", "us", "our", "ours", "ourselves"),
        "Them (Other-focused)": (
            "he", "she", "they", "him", "her", "them", "his", "hers", "theirs", "that person",
            "people",
        ),
    },
}  # fmt: skip

CATEGORIES: tuple[str, ...] = tuple(LEXICON)


def subcategories(category: str) -> tuple[str, ...]:
    """Subcategory names of ``category`` in lexicon order. KeyError if unknown."""
    return tuple(LEXICON[category])
