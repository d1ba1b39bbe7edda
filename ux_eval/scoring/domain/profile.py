"""QualitativeProfile and JudgeAssessment — reference-free quality signals for one judge."""

from enum import StrEnum
from typing import TypeAlias

from pydantic import BaseModel, Field

from ux_eval.finding.domain.finding import Finding
from ux_eval.scoring.domain.vocabulary import Category

UnitScore: TypeAlias = float


class DepthLevel(StrEnum):
    SUPERFICIAL = "superficial"
    DEEP = "deep"
    COMPREHENSIVE = "comprehensive"


class RelevanceLevel(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class QualitativeProfile(BaseModel, frozen=True):
    """Immutable bundle of every qualitative dimension computed for one judge."""

    taxonomy: dict[Category, int] = Field(default_factory=dict)
    depth: dict[DepthLevel, int] = Field(default_factory=dict)
    relevance: dict[RelevanceLevel, int] = Field(default_factory=dict)

    reproducibility: UnitScore = Field(ge=0.0, le=1.0)
    systematicity: UnitScore = Field(ge=0.0, le=1.0)

    dimensions_covered: frozenset[Category] = frozenset()
    context_consideration: UnitScore = Field(ge=0.0, le=1.0)
    subtle_problems_found: int = Field(default=0, ge=0)

    clarity: UnitScore = Field(ge=0.0, le=1.0)
    specificity: UnitScore = Field(ge=0.0, le=1.0)
    actionability: UnitScore = Field(ge=0.0, le=1.0)

    unique_findings: tuple[Finding, ...] = ()
    distinctive_perspectives: tuple[str, ...] = ()


class JudgeAssessment(BaseModel, frozen=True):
    """A judge's qualitative profile plus the strengths and weaknesses read from it."""

    judge_id: str = Field(min_length=1)
    judge_name: str = ""
    total_findings: int = Field(ge=0)
    profile: QualitativeProfile
    strengths: tuple[str, ...] = ()
    weaknesses: tuple[str, ...] = ()

    @property
    def display_name(self) -> str:
        return self.judge_name or self.judge_id
