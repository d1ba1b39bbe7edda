"""MatchDecision — the outcome of comparing two findings."""

from enum import StrEnum

from pydantic import BaseModel, Field

from ux_eval.finding.domain.finding import Finding


class MatchMethod(StrEnum):
    EXACT = "exact"
    KEYWORD_JACCARD = "keyword_jaccard"


class MatchDecision(BaseModel, frozen=True):
    """Ephemeral result of one pairwise comparison; never persisted."""

    finding_a: Finding
    finding_b: Finding
    matched: bool
    similarity: float = Field(ge=0.0, le=1.0)
    method: MatchMethod
