"""QualitativeScorer — reference-free quality dimensions for one judge's findings.

Every dimension is a keyword heuristic over the finding descriptions. The
scores are comparable between judges scored with the same vocabulary; they
are not calibrated against human ratings.
"""

from collections.abc import Iterable, Sequence

from ux_eval.config.domain.matching import MatchingConfig
from ux_eval.finding.domain.analysis_set import AnalysisSet
from ux_eval.finding.domain.finding import Finding
from ux_eval.matching.domain.matcher import has_match, validate_threshold
from ux_eval.scoring.domain.observer import ScoringObserver
from ux_eval.scoring.domain.profile import (
    DepthLevel,
    JudgeAssessment,
    QualitativeProfile,
    RelevanceLevel,
)
from ux_eval.scoring.domain.vocabulary import UNCATEGORIZED, Category, ScoringVocabulary

# Cut points shared by the depth and relevance buckets.
_LOWER_CUT = 0.4
_UPPER_CUT = 0.7

_CLEAR_WORDS_MIN = 10
_CLEAR_WORDS_MAX = 50


def _contains_any(text: str, needles: Iterable[str]) -> bool:
    return any(needle in text for needle in needles)


def _fraction(count: int, total: int) -> float:
    return count / max(total, 1)


class QualitativeScorer:
    """Computes a QualitativeProfile from a judge's findings and its peers' findings."""

    def __init__(
        self,
        vocabulary: ScoringVocabulary,
        matching: MatchingConfig,
        observer: ScoringObserver,
    ) -> None:
        self._vocabulary = vocabulary
        self._matching = matching
        self._observer = observer

    # -- single-finding heuristics ------------------------------------------

    def categorize(self, description: str) -> Category:
        """Return the first taxonomy category whose keywords occur in the description."""
        text = description.lower()
        for category, keywords in self._vocabulary.taxonomy.items():
            if _contains_any(text, keywords):
                return category
        return UNCATEGORIZED

    def depth_score(self, description: str) -> float:
        text = description.lower()
        indicators = self._vocabulary.depth
        if _contains_any(text, indicators.comprehensive):
            return 0.8
        if _contains_any(text, indicators.deep):
            return 0.6
        if _contains_any(text, indicators.superficial):
            return 0.2
        return 0.5

    def relevance_score(self, description: str) -> float:
        text = description.lower()
        score = 0.5
        if _contains_any(text, self._vocabulary.actionable_verbs):
            score += 0.2
        if _contains_any(text, self._vocabulary.ui_nouns):
            score += 0.2
        if len(text) > 50:
            score += 0.1
        return min(score, 1.0)

    def is_subtle(self, description: str) -> bool:
        text = description.lower()
        return _contains_any(text, self._vocabulary.subtle_indicators) and not (
            _contains_any(text, self._vocabulary.obvious_indicators)
        )

    def is_specific(self, description: str) -> bool:
        text = description.lower()
        return _contains_any(text, self._vocabulary.ui_nouns) and not (
            _contains_any(text, self._vocabulary.vague_phrases)
        )

    def is_actionable(self, description: str) -> bool:
        return _contains_any(description.lower(), self._vocabulary.actionable_verbs)

    # -- profile ----------------------------------------------------------------

    def score(
        self,
        judge_findings: Sequence[Finding],
        other_findings: Sequence[Finding],
        unique_threshold: float | None = None,
        judge_id: str = "",
    ) -> QualitativeProfile:
        """Score one judge's findings; ``other_findings`` must exclude the judge itself.

        Raises:
            InvalidThresholdError: if unique_threshold lies outside [0, 1].
        """
        threshold = (
            self._matching.uniqueness_threshold
            if unique_threshold is None
            else unique_threshold
        )
        validate_threshold(threshold)

        self._observer.scoring_started(
            judge_id=judge_id,
            total_findings=len(judge_findings),
            total_other_findings=len(other_findings),
        )

        descriptions = [finding.description for finding in judge_findings]
        categories = [self.categorize(d) for d in descriptions]
        total = len(judge_findings)

        taxonomy: dict[Category, int] = {c: 0 for c in self._vocabulary.taxonomy}
        taxonomy[UNCATEGORIZED] = 0
        for category in categories:
            taxonomy[category] = taxonomy.get(category, 0) + 1

        depth = {level: 0 for level in DepthLevel}
        relevance = {level: 0 for level in RelevanceLevel}
        for description in descriptions:
            depth[_depth_level(self.depth_score(description))] += 1
            relevance[_relevance_level(self.relevance_score(description))] += 1

        distinct_descriptions = {d.lower().strip() for d in descriptions}
        covered = frozenset(c for c in categories if c != UNCATEGORIZED)

        words = sum(len(d.split()) for d in descriptions)
        mean_words = words / max(total, 1)
        clarity = 0.8 if _CLEAR_WORDS_MIN < mean_words < _CLEAR_WORDS_MAX else 0.5

        unique = tuple(
            finding
            for finding in judge_findings
            if not has_match(
                finding,
                other_findings,
                threshold,
                stop_words=self._matching.stop_words,
            )
        )

        profile = QualitativeProfile(
            taxonomy=taxonomy,
            depth=depth,
            relevance=relevance,
            reproducibility=min(_fraction(len(distinct_descriptions), total), 1.0),
            systematicity=min(
                len(set(categories)) / self._vocabulary.systematicity_category_cap,
                1.0,
            ),
            dimensions_covered=covered,
            context_consideration=_fraction(
                sum(
                    1
                    for d in descriptions
                    if _contains_any(d.lower(), self._vocabulary.context_indicators)
                ),
                total,
            ),
            subtle_problems_found=sum(1 for d in descriptions if self.is_subtle(d)),
            clarity=clarity,
            specificity=_fraction(
                sum(1 for d in descriptions if self.is_specific(d)), total
            ),
            actionability=_fraction(
                sum(1 for d in descriptions if self.is_actionable(d)), total
            ),
            unique_findings=unique,
            distinctive_perspectives=self._distinctive_perspectives(
                categories=categories, other_findings=other_findings
            ),
        )

        self._observer.scoring_completed(
            judge_id=judge_id,
            unique_findings=len(unique),
            dimensions_covered=len(covered),
        )
        return profile

    def _distinctive_perspectives(
        self, categories: Sequence[Category], other_findings: Sequence[Finding]
    ) -> tuple[str, ...]:
        other_categories = {self.categorize(f.description) for f in other_findings}
        perspectives: list[str] = []
        for category in categories:
            if category == UNCATEGORIZED or category in other_categories:
                continue
            perspective = f"Focus on {category}"
            if perspective not in perspectives:
                perspectives.append(perspective)
        return tuple(perspectives)

    # -- comparative assessment -------------------------------------------------

    def assess(
        self,
        analysis: AnalysisSet,
        all_sets: Sequence[AnalysisSet],
        unique_threshold: float | None = None,
    ) -> JudgeAssessment:
        """Score ``analysis`` against the other judges' sets for the same surface."""
        others = [
            finding
            for other in all_sets
            if other.judge_id != analysis.judge_id
            and other.surface_id == analysis.surface_id
            for finding in other.findings
        ]
        if not others:
            self._observer.scoring_no_comparison_judges(judge_id=analysis.judge_id)

        profile = self.score(
            judge_findings=analysis.findings,
            other_findings=others,
            unique_threshold=unique_threshold,
            judge_id=analysis.judge_id,
        )
        strengths, weaknesses = _strengths_and_weaknesses(profile)
        return JudgeAssessment(
            judge_id=analysis.judge_id,
            judge_name=analysis.judge_name,
            total_findings=len(analysis.findings),
            profile=profile,
            strengths=strengths,
            weaknesses=weaknesses,
        )

    def assess_all(
        self,
        analysis_sets: Sequence[AnalysisSet],
        unique_threshold: float | None = None,
    ) -> list[JudgeAssessment]:
        return [
            self.assess(analysis, analysis_sets, unique_threshold=unique_threshold)
            for analysis in analysis_sets
        ]


def _depth_level(score: float) -> DepthLevel:
    if score > _UPPER_CUT:
        return DepthLevel.COMPREHENSIVE
    if score > _LOWER_CUT:
        return DepthLevel.DEEP
    return DepthLevel.SUPERFICIAL


def _relevance_level(score: float) -> RelevanceLevel:
    if score > _UPPER_CUT:
        return RelevanceLevel.HIGH
    if score > _LOWER_CUT:
        return RelevanceLevel.MEDIUM
    return RelevanceLevel.LOW


def _strengths_and_weaknesses(
    profile: QualitativeProfile,
) -> tuple[tuple[str, ...], tuple[str, ...]]:
    strengths: list[str] = []
    weaknesses: list[str] = []

    if profile.clarity > 0.7:
        strengths.append("Clear, understandable problem descriptions")
    if len(profile.dimensions_covered) > 7:
        strengths.append("Broad coverage of usability dimensions")
    if profile.unique_findings:
        strengths.append("Identifies problems no other judge found")
    if (
        profile.depth[DepthLevel.COMPREHENSIVE]
        > profile.depth[DepthLevel.SUPERFICIAL]
    ):
        strengths.append("In-depth analysis with detailed insights")

    if profile.reproducibility < 0.5:
        weaknesses.append("Inconsistent results with many duplicates")
    if profile.actionability < 0.5:
        weaknesses.append("Descriptions are hard for designers to act on")
    if profile.relevance[RelevanceLevel.LOW] > profile.relevance[RelevanceLevel.HIGH]:
        weaknesses.append("Many problems with low practical relevance")

    return tuple(strengths), tuple(weaknesses)
