"""Similarity matcher — decides whether two findings describe the same problem."""

from collections.abc import Sequence

from ux_eval.core.errors import InvalidThresholdError
from ux_eval.finding.domain.finding import Finding
from ux_eval.matching.domain.match import MatchDecision, MatchMethod
from ux_eval.matching.domain.normalizer import DEFAULT_STOP_WORDS, normalize


def validate_threshold(threshold: float) -> None:
    """Raise InvalidThresholdError unless 0 <= threshold <= 1."""
    if not 0.0 <= threshold <= 1.0:
        raise InvalidThresholdError(threshold=threshold)


def jaccard(tokens_a: frozenset[str], tokens_b: frozenset[str]) -> float:
    """Intersection over union; 0.0 when either side is empty."""
    if not tokens_a or not tokens_b:
        return 0.0
    return len(tokens_a & tokens_b) / len(tokens_a | tokens_b)


def _same_text(a: str, b: str) -> bool:
    # Blank fields carry no information and must not count as equal.
    if not a.strip() or not b.strip():
        return False
    return a.lower() == b.lower()


def is_exact_match(finding_a: Finding, finding_b: Finding) -> bool:
    return _same_text(finding_a.title, finding_b.title) or _same_text(
        finding_a.description, finding_b.description
    )


def is_match(
    finding_a: Finding,
    finding_b: Finding,
    threshold: float,
    stop_words: frozenset[str] = DEFAULT_STOP_WORDS,
) -> MatchDecision:
    """Compare two findings and return a MatchDecision.

    Case-insensitive equality of titles or of descriptions is an exact match
    with similarity 1.0. Otherwise the Jaccard similarity of the normalized
    ``title + description`` token sets is computed, and the findings match
    only when it is strictly greater than ``threshold``.

    Raises:
        InvalidThresholdError: if threshold lies outside [0, 1].
    """
    validate_threshold(threshold)

    if is_exact_match(finding_a, finding_b):
        return MatchDecision(
            finding_a=finding_a,
            finding_b=finding_b,
            matched=True,
            similarity=1.0,
            method=MatchMethod.EXACT,
        )

    similarity = jaccard(
        normalize(finding_a.text, stop_words), normalize(finding_b.text, stop_words)
    )
    return MatchDecision(
        finding_a=finding_a,
        finding_b=finding_b,
        matched=similarity > threshold,
        similarity=similarity,
        method=MatchMethod.KEYWORD_JACCARD,
    )


def find_match(
    finding: Finding,
    pool: Sequence[Finding],
    threshold: float,
    stop_words: frozenset[str] = DEFAULT_STOP_WORDS,
) -> int | None:
    """Return the index of the pool member that best matches ``finding``.

    An exact match anywhere in the pool wins outright (first one found).
    Otherwise the member with the highest Jaccard similarity above
    ``threshold`` is chosen; ties keep the earliest member. Returns None when
    nothing in the pool matches.
    """
    validate_threshold(threshold)

    for index, candidate in enumerate(pool):
        if is_exact_match(finding, candidate):
            return index

    tokens = normalize(finding.text, stop_words)
    best_index: int | None = None
    best_similarity = threshold
    for index, candidate in enumerate(pool):
        similarity = jaccard(tokens, normalize(candidate.text, stop_words))
        if similarity > best_similarity:
            best_index = index
            best_similarity = similarity
    return best_index


def has_match(
    finding: Finding,
    pool: Sequence[Finding],
    threshold: float,
    stop_words: frozenset[str] = DEFAULT_STOP_WORDS,
) -> bool:
    return find_match(finding, pool, threshold, stop_words) is not None
