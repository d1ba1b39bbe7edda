"""Tests for the Finding value object and its label parsing."""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from ux_eval.finding.domain.analysis_set import AnalysisSet, ReferenceSet
from ux_eval.finding.domain.finding import (
    ErrorKind,
    Finding,
    Severity,
    parse_error_kind,
    parse_severity,
)


class TestSeverityParsing:
    """Severity labels are parsed case-insensitively and never fail."""

    @pytest.mark.parametrize(
        "label, expected",
        [
            ("critical", Severity.CRITICAL),
            ("Catastrophic", Severity.CATASTROPHIC),
            ("  SERIOUS ", Severity.SERIOUS),
            ("minor", Severity.MINOR),
            ("positive", Severity.POSITIVE),
        ],
    )
    def test_known_labels(self, label: str, expected: Severity) -> None:
        assert parse_severity(label) is expected

    def test_upstream_not_rated_label_is_unrated(self) -> None:
        assert parse_severity("Nicht bewertet") is Severity.UNRATED

    def test_unknown_label_degrades_to_unrated(self) -> None:
        assert parse_severity("apocalyptic") is Severity.UNRATED

    def test_non_string_degrades_to_unrated(self) -> None:
        assert parse_severity(None) is Severity.UNRATED
        assert parse_severity(3) is Severity.UNRATED


class TestErrorKindParsing:
    """Error-type labels map to ErrorKind; missing means never annotated."""

    def test_missing_label_is_none(self) -> None:
        assert parse_error_kind(None) is ErrorKind.NONE

    def test_blank_label_is_none(self) -> None:
        assert parse_error_kind("   ") is ErrorKind.NONE

    @pytest.mark.parametrize(
        "label, expected",
        [
            ("No Usability Issue", ErrorKind.NO_ISSUE),
            ("Uncertain", ErrorKind.UNCERTAIN),
            ("Irrelevant/Incorrect Statement", ErrorKind.IRRELEVANT),
            ("Duplicate", ErrorKind.DUPLICATE),
        ],
    )
    def test_upstream_labels(self, label: str, expected: ErrorKind) -> None:
        assert parse_error_kind(label) is expected

    def test_unknown_label_is_unclassified(self) -> None:
        assert parse_error_kind("Out of scope") is ErrorKind.UNCLASSIFIED


class TestFinding:
    """Finding tolerates malformed records and is immutable."""

    def test_defaults(self) -> None:
        finding = Finding()
        assert finding.title == ""
        assert finding.description == ""
        assert finding.severity is Severity.UNRATED
        assert finding.error_kind is ErrorKind.NONE

    def test_none_text_becomes_empty_string(self) -> None:
        finding = Finding.model_validate({"title": "Slow", "description": None})
        assert finding.description == ""

    def test_raw_labels_are_parsed(self) -> None:
        finding = Finding.model_validate(
            {"title": "x", "severity": "Critical", "error_kind": "Duplicate"}
        )
        assert finding.severity is Severity.CRITICAL
        assert finding.error_kind is ErrorKind.DUPLICATE

    def test_text_joins_title_and_description(self) -> None:
        finding = Finding(title="Menu", description="hidden on mobile")
        assert finding.text == "Menu hidden on mobile"

    def test_is_frozen(self) -> None:
        finding = Finding(title="Menu")
        with pytest.raises(ValidationError):
            finding.title = "Other"  # type: ignore[misc]


class TestAnalysisSet:
    """AnalysisSet requires a judge and defaults its optional metadata."""

    def test_display_name_prefers_judge_name(self) -> None:
        analysis = AnalysisSet(
            judge_id="j1",
            judge_name="Heuristic Judge",
            created_at=datetime(2024, 5, 1, tzinfo=timezone.utc),
        )
        assert analysis.display_name == "Heuristic Judge"

    def test_display_name_falls_back_to_judge_id(self) -> None:
        analysis = AnalysisSet(
            judge_id="j1", created_at=datetime(2024, 5, 1, tzinfo=timezone.utc)
        )
        assert analysis.display_name == "j1"

    def test_empty_judge_id_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AnalysisSet(judge_id="", created_at=datetime(2024, 5, 1))

    def test_negative_processing_time_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AnalysisSet(
                judge_id="j1",
                created_at=datetime(2024, 5, 1),
                processing_time_ms=-1,
            )

    def test_findings_list_is_stored_as_tuple(self) -> None:
        analysis = AnalysisSet.model_validate(
            {
                "judge_id": "j1",
                "created_at": "2024-05-01T10:00:00Z",
                "findings": [{"title": "a"}, {"title": "b"}],
            }
        )
        assert isinstance(analysis.findings, tuple)
        assert [f.title for f in analysis.findings] == ["a", "b"]

    def test_naive_created_at_is_read_as_utc(self) -> None:
        analysis = AnalysisSet.model_validate(
            {"judge_id": "j1", "created_at": "2024-05-01T10:00:00"}
        )
        assert analysis.created_at == datetime(2024, 5, 1, 10, tzinfo=timezone.utc)

    def test_aware_created_at_keeps_its_offset(self) -> None:
        analysis = AnalysisSet.model_validate(
            {"judge_id": "j1", "created_at": "2024-05-01T10:00:00+02:00"}
        )
        assert analysis.created_at.utcoffset() == timedelta(hours=2)

    def test_reference_set_defaults_to_empty(self) -> None:
        assert ReferenceSet().findings == ()
