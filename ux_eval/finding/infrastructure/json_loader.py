"""JSON finding loader — reads analysis sets and reference sets from disk."""

import json
from pathlib import Path
from typing import Any, NoReturn

from pydantic import ValidationError

from ux_eval.finding.domain.analysis_set import AnalysisSet, ReferenceSet
from ux_eval.finding.domain.observer import FindingLoadObserver
from ux_eval.finding.infrastructure.errors import FindingLoadError


def _describe(exc: ValidationError) -> str:
    """Flatten a pydantic ValidationError into one line per failing field."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "(root)"
        parts.append(f"{location}: {error['msg']}")
    return ", ".join(parts)


class JsonFindingLoader:
    """Loads AnalysisSets and ReferenceSets from JSON files.

    An analysis-set file holds either a single set object or a list of them.
    A reference file holds either a ``{"surface_id": ..., "findings": [...]}``
    object or a bare list of findings.
    """

    def __init__(self, observer: FindingLoadObserver) -> None:
        self._observer = observer

    def load_analysis_sets(self, path: Path) -> list[AnalysisSet]:
        """
        Load every analysis set in the file, in file order.

        Collects ALL per-set validation errors before raising a single
        FindingLoadError listing every issue found.

        Raises:
            FindingLoadError: if the file is missing, is not valid JSON, or any
                record fails validation.
        """
        path_str = str(path)
        self._observer.finding_loading_started(path=path_str, kind="analysis_sets")

        data = self._read_json(path=path)
        records = data if isinstance(data, list) else [data]

        sets: list[AnalysisSet] = []
        errors: list[str] = []
        for index, record in enumerate(records):
            result = self._parse_set(record=record, index=index)
            if isinstance(result, str):
                errors.append(result)
            else:
                sets.append(result)
                self._observer.finding_set_loaded(
                    judge_id=result.judge_id, total_findings=len(result.findings)
                )

        if errors:
            self._fail(path=path_str, reason="; ".join(errors))

        self._observer.finding_loading_completed(
            path=path_str,
            total_sets=len(sets),
            total_findings=sum(len(s.findings) for s in sets),
        )
        return sets

    def load_reference(self, path: Path) -> ReferenceSet:
        """
        Load the curated reference findings for one subject.

        Raises:
            FindingLoadError: if the file is missing, is not valid JSON, or the
                reference fails validation.
        """
        path_str = str(path)
        self._observer.finding_loading_started(path=path_str, kind="reference")

        data = self._read_json(path=path)
        if isinstance(data, list):
            data = {"findings": data}

        try:
            reference = ReferenceSet.model_validate(data)
        except ValidationError as exc:
            self._fail(path=path_str, reason=f"reference: {_describe(exc)}")

        self._observer.finding_loading_completed(
            path=path_str, total_sets=1, total_findings=len(reference.findings)
        )
        return reference

    def _read_json(self, path: Path) -> Any:
        path_str = str(path)
        try:
            with open(path, encoding="utf-8") as fh:
                return json.load(fh)
        except FileNotFoundError:
            self._fail(path=path_str, reason=f"file not found: {path_str}")
        except json.JSONDecodeError as exc:
            self._fail(path=path_str, reason=f"invalid JSON: {exc}")

    def _parse_set(self, record: Any, index: int) -> AnalysisSet | str:
        """Return an AnalysisSet on success, or an error string describing the problem."""
        if not isinstance(record, dict):
            return f"set {index}: expected an object, got {type(record).__name__}"
        try:
            return AnalysisSet.model_validate(record)
        except ValidationError as exc:
            return f"set {index}: {_describe(exc)}"

    def _fail(self, path: str, reason: str) -> NoReturn:
        self._observer.finding_loading_failed(path=path, reason=reason)
        raise FindingLoadError(reason=reason)
