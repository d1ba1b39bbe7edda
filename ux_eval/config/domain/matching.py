"""Matching configuration model."""

from pydantic import BaseModel, Field

from ux_eval.matching.domain.normalizer import DEFAULT_STOP_WORDS


class MatchingConfig(BaseModel, frozen=True):
    """Thresholds for the two purposes findings are compared for.

    Ground-truth matching is stricter than uniqueness detection; both stay
    configurable because neither value has an established rationale.
    """

    ground_truth_threshold: float = Field(default=0.7, ge=0.0, le=1.0)
    uniqueness_threshold: float = Field(default=0.5, ge=0.0, le=1.0)
    stop_words: frozenset[str] = DEFAULT_STOP_WORDS
