"""Top-level EngineConfig aggregate — the root configuration object."""

from pydantic import BaseModel, Field

from ux_eval.aggregation.domain.keywords import AggregationConfig
from ux_eval.config.domain.matching import MatchingConfig
from ux_eval.scoring.domain.vocabulary import ScoringVocabulary


class EngineConfig(BaseModel, frozen=True):
    """Root configuration aggregate; every section has a working default."""

    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    scoring: ScoringVocabulary = Field(default_factory=ScoringVocabulary)
    aggregation: AggregationConfig = Field(default_factory=AggregationConfig)
