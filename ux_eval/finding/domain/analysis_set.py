"""AnalysisSet and ReferenceSet — ordered finding collections for one subject."""

from datetime import datetime, timezone
from typing import TypeAlias

from pydantic import BaseModel, Field, field_validator

from ux_eval.finding.domain.finding import Finding

JudgeId: TypeAlias = str
SurfaceId: TypeAlias = str


class AnalysisSet(BaseModel, frozen=True):
    """Immutable record of every finding one judge produced in one run.

    New runs produce new AnalysisSets; a past set is never mutated, which is
    what makes repeated runs comparable. ``created_at`` is always timezone
    aware: naive timestamps are read as UTC.
    """

    judge_id: JudgeId = Field(min_length=1)
    judge_name: str = ""
    surface_id: SurfaceId | None = None
    surface_type: str | None = None
    created_at: datetime
    processing_time_ms: int | None = Field(default=None, ge=0)
    findings: tuple[Finding, ...] = ()

    @field_validator("created_at")
    @classmethod
    def _naive_as_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @property
    def display_name(self) -> str:
        return self.judge_name or self.judge_id


class ReferenceSet(BaseModel, frozen=True):
    """Curated ground-truth findings for one subject."""

    surface_id: SurfaceId | None = None
    findings: tuple[Finding, ...] = ()
