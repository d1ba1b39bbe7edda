"""AggregationConfig — keyword list and limits used to group related findings."""

from typing import Annotated

from pydantic import BaseModel, Field

from ux_eval.aggregation.domain.severity_scale import SeverityScale

Keyword = Annotated[str, Field(min_length=1)]

# Order matters: a finding joins the group of the first keyword it contains.
DEFAULT_GROUP_KEYWORDS: tuple[str, ...] = (
    "navigation",
    "button",
    "text",
    "color",
    "contrast",
    "layout",
    "mobile",
    "responsive",
    "accessibility",
    "loading",
    "error",
    "form",
    "validation",
    "usability",
    "user",
    "interface",
    "design",
    "functionality",
)


class AggregationConfig(BaseModel, frozen=True):
    keywords: tuple[Keyword, ...] = Field(default=DEFAULT_GROUP_KEYWORDS, min_length=1)
    max_groups: int = Field(default=10, ge=1)
    min_group_size: int = Field(default=2, ge=1)
    severity_scale: SeverityScale = Field(default_factory=SeverityScale)
