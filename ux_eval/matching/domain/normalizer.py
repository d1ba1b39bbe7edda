"""Text normalizer — turns free text into a comparable set of keyword tokens."""

import re

_NON_WORD = re.compile(r"[^\w\s]")

# German core set, as used by the annotation study, plus common English glue words.
DEFAULT_STOP_WORDS: frozenset[str] = frozenset(
    {
        "der",
        "die",
        "das",
        "und",
        "oder",
        "aber",
        "ist",
        "sind",
        "wird",
        "werden",
        "von",
        "zu",
        "mit",
        "auf",
        "für",
        "in",
        "an",
        "bei",
        "nach",
        "vor",
        "über",
        "unter",
        "durch",
        "the",
        "and",
        "are",
        "was",
        "were",
        "for",
        "with",
        "from",
        "that",
        "this",
        "into",
        "not",
        "but",
        "can",
        "has",
        "have",
        "its",
    }
)

MIN_TOKEN_LENGTH = 3


def normalize(text: str, stop_words: frozenset[str] = DEFAULT_STOP_WORDS) -> frozenset[str]:
    """Return the set of keyword tokens in ``text``.

    Lowercases, strips every non-word character, splits on whitespace and
    drops tokens shorter than three characters or present in ``stop_words``.
    Never raises; empty input yields an empty set.
    """
    if not text:
        return frozenset()
    cleaned = _NON_WORD.sub("", text.lower())
    return frozenset(
        token
        for token in cleaned.split()
        if len(token) >= MIN_TOKEN_LENGTH and token not in stop_words
    )
