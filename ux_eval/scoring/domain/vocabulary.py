"""ScoringVocabulary — the keyword tables behind the qualitative heuristics.

All classification in the scorer is substring matching against these tables;
it approximates the categories a human reviewer would assign and is not a
statistical classifier. Substitute a different vocabulary to score findings
written in another language.
"""

from typing import Annotated, TypeAlias

from pydantic import BaseModel, Field

UNCATEGORIZED = "Uncategorized"

Category: TypeAlias = str
Keyword = Annotated[str, Field(min_length=1)]

DEFAULT_TAXONOMY: dict[Category, tuple[str, ...]] = {
    "Visibility of System Status": ("status", "feedback", "loading", "progress"),
    "Match Between System and Real World": (
        "metaphor",
        "familiar",
        "convention",
        "language",
    ),
    "User Control and Freedom": ("undo", "cancel", "back", "exit", "control"),
    "Consistency and Standards": ("consistent", "standard", "pattern", "convention"),
    "Error Prevention": ("prevent", "error", "mistake", "validation"),
    "Recognition Rather Than Recall": ("recognize", "remember", "memory", "recall"),
    "Flexibility and Efficiency": ("shortcut", "efficient", "flexible", "customize"),
    "Aesthetic and Minimalist Design": ("clutter", "simple", "clean", "minimal"),
    "Help Users Recognize Errors": ("error message", "clear", "explain", "solution"),
    "Help and Documentation": ("help", "documentation", "guide", "instruction"),
}


class DepthIndicators(BaseModel, frozen=True):
    """Indicator tiers, checked from the deepest tier down."""

    comprehensive: tuple[Keyword, ...] = (
        "impact",
        "consequence",
        "user behavior",
        "workflow",
        "business goal",
    )
    deep: tuple[Keyword, ...] = ("because", "therefore", "leads to", "causes", "results in")
    superficial: tuple[Keyword, ...] = ("bad", "good", "nice", "ugly", "confusing")


class ScoringVocabulary(BaseModel, frozen=True):
    taxonomy: dict[Category, tuple[Keyword, ...]] = Field(
        default_factory=lambda: dict(DEFAULT_TAXONOMY), min_length=1
    )
    depth: DepthIndicators = Field(default_factory=DepthIndicators)
    actionable_verbs: tuple[Keyword, ...] = (
        "should",
        "could",
        "improve",
        "change",
        "add",
        "remove",
        "modify",
        "consider",
    )
    ui_nouns: tuple[Keyword, ...] = (
        "button",
        "menu",
        "icon",
        "text",
        "color",
        "size",
        "position",
        "screen",
        "page",
    )
    context_indicators: tuple[Keyword, ...] = (
        "user",
        "task",
        "goal",
        "scenario",
        "context",
        "situation",
    )
    subtle_indicators: tuple[Keyword, ...] = (
        "subtle",
        "nuanced",
        "implicit",
        "underlying",
        "hidden",
        "cognitive load",
    )
    obvious_indicators: tuple[Keyword, ...] = (
        "obvious",
        "clear",
        "visible",
        "broken",
        "missing",
    )
    vague_phrases: tuple[Keyword, ...] = (
        "something",
        "things",
        "stuff",
        "maybe",
        "might",
        "could be",
    )
    systematicity_category_cap: int = Field(default=8, ge=1)
