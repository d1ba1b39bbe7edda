"""Tests for the default scoring vocabulary and assessment model."""

import pytest
from pydantic import ValidationError

from ux_eval.scoring.domain.profile import JudgeAssessment, QualitativeProfile
from ux_eval.scoring.domain.vocabulary import (
    DEFAULT_TAXONOMY,
    UNCATEGORIZED,
    ScoringVocabulary,
)


def _make_profile() -> QualitativeProfile:
    return QualitativeProfile(
        reproducibility=1.0,
        systematicity=0.0,
        context_consideration=0.0,
        clarity=0.5,
        specificity=0.0,
        actionability=0.0,
    )


class TestDefaultTaxonomy:
    """The default taxonomy lists the ten heuristic categories in scan order."""

    def test_has_ten_categories(self) -> None:
        assert len(DEFAULT_TAXONOMY) == 10

    def test_scan_order_starts_with_system_status(self) -> None:
        assert next(iter(DEFAULT_TAXONOMY)) == "Visibility of System Status"

    def test_uncategorized_is_not_a_category(self) -> None:
        assert UNCATEGORIZED not in DEFAULT_TAXONOMY

    def test_keywords_are_lowercase(self) -> None:
        vocabulary = ScoringVocabulary()
        for keywords in vocabulary.taxonomy.values():
            assert all(k == k.lower() for k in keywords)


class TestProfileBounds:
    """Unit scores are validated to lie in [0, 1]."""

    def test_clarity_above_one_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            QualitativeProfile.model_validate(
                {**_make_profile().model_dump(), "clarity": 1.2}
            )

    def test_assessment_display_name_falls_back_to_id(self) -> None:
        assessment = JudgeAssessment(
            judge_id="j1", total_findings=0, profile=_make_profile()
        )
        assert assessment.display_name == "j1"
