"""Finding — one usability observation produced by a judge or a curator."""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, field_validator


class Severity(StrEnum):
    CATASTROPHIC = "catastrophic"
    CRITICAL = "critical"
    SERIOUS = "serious"
    MINOR = "minor"
    POSITIVE = "positive"
    UNRATED = "unrated"


class ErrorKind(StrEnum):
    """Curator label explaining why a finding is not in the reference set."""

    NONE = "none"
    NO_ISSUE = "no_issue"
    UNCERTAIN = "uncertain"
    IRRELEVANT = "irrelevant"
    DUPLICATE = "duplicate"
    UNCLASSIFIED = "unclassified"


# Labels emitted by the upstream annotation tooling.
_SEVERITY_ALIASES: dict[str, Severity] = {
    "nicht bewertet": Severity.UNRATED,
    "not rated": Severity.UNRATED,
}

_ERROR_KIND_ALIASES: dict[str, ErrorKind] = {
    "no usability issue": ErrorKind.NO_ISSUE,
    "noissue": ErrorKind.NO_ISSUE,
    "irrelevant/incorrect statement": ErrorKind.IRRELEVANT,
}


def parse_severity(value: Any) -> Severity:
    """Map a raw severity label to Severity; unknown or missing labels are unrated."""
    if isinstance(value, Severity):
        return value
    if not isinstance(value, str):
        return Severity.UNRATED
    label = value.strip().lower()
    if label in _SEVERITY_ALIASES:
        return _SEVERITY_ALIASES[label]
    try:
        return Severity(label)
    except ValueError:
        return Severity.UNRATED


def parse_error_kind(value: Any) -> ErrorKind:
    """Map a raw error-type label to ErrorKind.

    Missing labels mean the finding was never annotated (``none``); labels that
    are present but not recognised are ``unclassified``.
    """
    if isinstance(value, ErrorKind):
        return value
    if value is None:
        return ErrorKind.NONE
    if not isinstance(value, str):
        return ErrorKind.UNCLASSIFIED
    label = value.strip().lower()
    if not label:
        return ErrorKind.NONE
    if label in _ERROR_KIND_ALIASES:
        return _ERROR_KIND_ALIASES[label]
    try:
        return ErrorKind(label)
    except ValueError:
        return ErrorKind.UNCLASSIFIED


class Finding(BaseModel, frozen=True):
    """Immutable value object for a single usability observation.

    ``title`` and ``description`` default to the empty string so that malformed
    upstream records still load; such findings produce no tokens and therefore
    never match anything.
    """

    title: str = ""
    description: str = ""
    severity: Severity = Severity.UNRATED
    error_kind: ErrorKind = ErrorKind.NONE

    @field_validator("title", "description", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        if value is None:
            return ""
        return value

    @field_validator("severity", mode="before")
    @classmethod
    def _parse_severity(cls, value: Any) -> Severity:
        return parse_severity(value)

    @field_validator("error_kind", mode="before")
    @classmethod
    def _parse_error_kind(cls, value: Any) -> ErrorKind:
        return parse_error_kind(value)

    @property
    def text(self) -> str:
        """Title and description joined for token extraction."""
        return f"{self.title} {self.description}"
